"""
Protocol Errors

Every rejected move surfaces as one of these. None of them is retryable:
the prior proof stays the latest valid one and nothing is mutated.
"""


class WordleChainError(Exception):
    """Base class for all protocol and backend failures."""

    kind = "WordleChainError"

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind)
        self.message = message or self.kind

    def to_dict(self):
        return {'error_kind': self.kind, 'error': self.message}


class MalformedWord(WordleChainError):
    """Word does not have exactly five non-negative integer slots."""
    kind = "MalformedWord"


class OutOfRangeLetter(WordleChainError):
    """A guess slot lies outside [1, 26]."""
    kind = "OutOfRangeLetter"


class WrongTurn(WordleChainError):
    """The acting role does not match the parity of the turn number."""
    kind = "WrongTurn"


class TurnCounterOverflow(WordleChainError):
    """The unsigned 32-bit turn counter cannot be incremented further."""
    kind = "TurnCounterOverflow"


class CommitmentMismatch(WordleChainError):
    """Supplied solution does not hash to the recorded commitment."""
    kind = "CommitmentMismatch"


class StateMismatch(WordleChainError):
    """A candidate next state differs from the recomputed one."""
    kind = "StateMismatch"


class ProofVerificationFailed(WordleChainError):
    """A predecessor or submitted proof failed backend verification."""
    kind = "ProofVerificationFailed"


class GameNotFound(WordleChainError):
    kind = "GameNotFound"


class SetupError(WordleChainError):
    """One-time backend setup failed; fatal for the session."""
    kind = "SetupError"


class BackendNotReady(SetupError):
    """A proof was requested before the backend finished setup."""
    kind = "BackendNotReady"
