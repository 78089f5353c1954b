"""
Proof Chain

Incrementally verifiable computation over the game state machine. Every
step verifies its predecessor, recomputes the transition from the
predecessor's public output and asks the backend to attest the result, so a
verifier holding only the latest proof can trust the whole history.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..config import Config
from ..exceptions import ProofVerificationFailed, StateMismatch, WordleChainError
from ..models.game import GameState, MoveKind
from ..models.proof import Proof, INIT_METHOD
from ..models.word import EncodedWord
from ..utils.game_logger import game_logger
from . import transitions
from .proof_backend import ProofBackend


class Provable(ABC):
    """A state machine whose every step is attested by a chained proof."""

    @abstractmethod
    def init(self, solution: Optional[EncodedWord] = None) -> Proof:
        ...

    @abstractmethod
    def step(self, prior: Proof, kind: MoveKind, word: EncodedWord,
             expected: Optional[GameState] = None) -> Proof:
        ...

    @abstractmethod
    def verify(self, proof: Proof) -> bool:
        ...


class ProofChain(Provable):
    """
    Proof-chained Wordle program.

    Two construction modes yield the same accepted states: output-only
    (the next state is computed and published) and input-checked (a
    candidate next state is supplied and must equal the computed one).
    """

    def __init__(self, backend: ProofBackend, default_solution: Optional[str] = None):
        self.backend = backend
        self.default_solution = default_solution or Config.DEFAULT_SOLUTION

    def init(self, solution: Optional[EncodedWord] = None) -> Proof:
        """Attest the initial state; the only proof without a predecessor."""
        if solution is None:
            solution = EncodedWord.from_string(self.default_solution)
        state = transitions.initial_state(solution)
        proof = self.backend.prove(INIT_METHOD, state, None)
        game_logger.log_proof_event(
            'proved', INIT_METHOD, state.turn_number,
            solution_commitment=state.solution_commitment
        )
        return proof

    def step(self, prior: Proof, kind: MoveKind, word: EncodedWord,
             expected: Optional[GameState] = None) -> Proof:
        return self.extend(kind, word, prior, expected)

    def extend(self, kind: MoveKind, word: EncodedWord, predecessor: Proof,
               expected: Optional[GameState] = None) -> Proof:
        """
        Build the successor of predecessor for one move.

        Raises:
            ProofVerificationFailed: predecessor does not verify
            WrongTurn, OutOfRangeLetter, CommitmentMismatch, TurnCounterOverflow:
                the move breaks the game rules
            StateMismatch: expected was given and differs from the recomputed state
        """
        if not self.verify(predecessor):
            raise ProofVerificationFailed(
                f"Predecessor proof for turn {predecessor.public_output.turn_number} failed verification"
            )

        try:
            state = transitions.apply_move(predecessor.public_output, kind, word)
        except WordleChainError as e:
            game_logger.log_proof_event(
                'rejected', kind.value, predecessor.public_output.turn_number,
                success=False, error_kind=e.kind
            )
            raise

        if expected is not None and expected != state:
            game_logger.log_proof_event(
                'rejected', kind.value, predecessor.public_output.turn_number,
                success=False, error_kind=StateMismatch.kind
            )
            raise StateMismatch(
                f"Candidate state {expected.to_dict()} differs from computed state {state.to_dict()}"
            )

        proof = self.backend.prove(kind.value, state, predecessor.digest)
        game_logger.log_proof_event('proved', kind.value, state.turn_number)
        return proof

    def publish_guess(self, guess: EncodedWord, predecessor: Proof,
                      expected: Optional[GameState] = None) -> Proof:
        return self.extend(MoveKind.GUESS, guess, predecessor, expected)

    def publish_hint(self, solution: EncodedWord, predecessor: Proof,
                     expected: Optional[GameState] = None) -> Proof:
        return self.extend(MoveKind.HINT, solution, predecessor, expected)

    def verify(self, proof: Proof) -> bool:
        """Check one proof on its own; predecessors are not needed."""
        if proof.method == INIT_METHOD:
            if not proof.is_initial or proof.public_output.turn_number != 0:
                return False
        elif proof.is_initial:
            return False
        return self.backend.verify(proof)

    def verify_history(self, proofs: Sequence[Proof]) -> bool:
        """
        Audit a retained sequence of proofs from init onwards.

        Not needed for trusting the latest proof; useful when a holder keeps
        the whole history and wants to confirm it is one unbroken chain.
        """
        if not proofs or not proofs[0].is_initial:
            return False
        previous = None
        for proof in proofs:
            if not self.verify(proof):
                return False
            if previous is not None:
                if proof.predecessor_digest != previous.digest:
                    return False
                if proof.public_output.turn_number != previous.public_output.turn_number + 1:
                    return False
                if proof.public_output.solution_commitment != previous.public_output.solution_commitment:
                    return False
            previous = proof
        return True
