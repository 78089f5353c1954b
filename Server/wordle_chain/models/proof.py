"""
Proof Data Model

A proof is an immutable attestation over one GameState (its public output)
that references its predecessor by digest only. Proof size therefore does
not grow with the length of the chain.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import MalformedWord, ProofVerificationFailed
from .game import GameState

INIT_METHOD = "init"


@dataclass(frozen=True)
class Proof:
    """Opaque attestation produced by a proof backend."""
    method: str
    public_output: GameState
    predecessor_digest: Optional[str]
    token: str

    @property
    def digest(self) -> str:
        """Stable identifier used by successors to reference this proof."""
        return hashlib.sha256(self.token.encode('utf-8')).hexdigest()

    @property
    def is_initial(self) -> bool:
        return self.predecessor_digest is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': self.method,
            'publicOutput': self.public_output.to_dict(),
            'predecessorDigest': self.predecessor_digest,
            'token': self.token,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Proof":
        """
        Rebuild a proof received over a transport.

        Structural problems are reported as verification failures; whether
        the proof is actually valid is for the backend to decide.
        """
        if not isinstance(data, dict):
            raise ProofVerificationFailed("Proof must be a JSON object")
        try:
            return cls(
                method=str(data['method']),
                public_output=GameState.from_dict(data['publicOutput']),
                predecessor_digest=data.get('predecessorDigest'),
                token=str(data['token']),
            )
        except KeyError as e:
            raise ProofVerificationFailed(f"Proof is missing field {e}")
        except MalformedWord as e:
            raise ProofVerificationFailed(f"Proof public output is malformed: {e.message}")
