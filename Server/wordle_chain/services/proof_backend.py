"""
Proof Backend

Boundary to the cryptographic backend that produces and checks proofs.
The chain logic only relies on the ProofBackend interface; the reference
AttestationBackend signs each attested state as an HS256 JWT.

An attestation is only issued by ProofChain after it has verified the
predecessor and recomputed the transition itself, so a valid signature
implies a valid step and, transitively, a valid chain back to the initial
proof. Each token embeds only its predecessor's digest, which keeps proof
size and verification cost constant in the chain length.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Optional

import jwt

from ..exceptions import BackendNotReady, SetupError
from ..models.game import GameState
from ..models.proof import Proof
from ..utils.game_logger import game_logger

MIN_SECRET_BYTES = 32


class ProofBackend(ABC):
    """Produce and verify proofs over GameState public outputs."""

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        ...

    @abstractmethod
    def compile(self) -> None:
        """One-time setup; must succeed before any prove/verify call."""

    @abstractmethod
    def prove(self, method: str, public_output: GameState,
              predecessor_digest: Optional[str]) -> Proof:
        ...

    @abstractmethod
    def verify(self, proof: Proof) -> bool:
        ...

    def _require_ready(self):
        if not self.is_ready:
            raise BackendNotReady("Proof backend used before compile() completed")


class AttestationBackend(ProofBackend):
    """
    Keyed attestation backend built on PyJWT.

    Args:
        secret: Signing secret; generated during compile() when empty
        program_id: Identifies the program the proofs belong to; tokens
            issued for another program id never verify
    """

    ALGORITHM = "HS256"

    def __init__(self, secret: Optional[str] = None, program_id: str = "wordle-chain/v1"):
        self._secret = secret or None
        self.program_id = program_id
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def compile(self) -> None:
        if self._ready:
            return
        if self._secret is None:
            self._secret = secrets.token_hex(MIN_SECRET_BYTES)
        if len(self._secret.encode('utf-8')) < MIN_SECRET_BYTES:
            raise SetupError(f"Proof secret must be at least {MIN_SECRET_BYTES} bytes")
        if not self.program_id:
            raise SetupError("Proof program id must not be empty")
        self._ready = True
        game_logger.log_proof_event('setup', 'compile', program_id=self.program_id)

    def _claims(self, method: str, public_output: GameState,
                predecessor_digest: Optional[str]) -> dict:
        return {
            'program': self.program_id,
            'method': method,
            'state': public_output.to_dict(),
            'prev': predecessor_digest,
        }

    def prove(self, method: str, public_output: GameState,
              predecessor_digest: Optional[str]) -> Proof:
        self._require_ready()
        claims = self._claims(method, public_output, predecessor_digest)
        token = jwt.encode(claims, self._secret, algorithm=self.ALGORITHM)
        return Proof(
            method=method,
            public_output=public_output,
            predecessor_digest=predecessor_digest,
            token=token,
        )

    def verify(self, proof: Proof) -> bool:
        self._require_ready()
        try:
            payload = jwt.decode(proof.token, self._secret, algorithms=[self.ALGORITHM])
        except jwt.InvalidTokenError as e:
            game_logger.log_proof_event(
                'rejected', proof.method, proof.public_output.turn_number,
                success=False, reason=type(e).__name__
            )
            return False

        expected = self._claims(proof.method, proof.public_output, proof.predecessor_digest)
        if payload != expected:
            game_logger.log_proof_event(
                'rejected', proof.method, proof.public_output.turn_number,
                success=False, reason='public output does not match attestation'
            )
            return False
        return True
