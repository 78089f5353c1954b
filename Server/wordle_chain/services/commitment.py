"""
Solution Commitment

Binds the hint-giver to a solution without revealing it. The digest is
SHA-256 over a domain-separated encoding of the five slots, so it is
deterministic, fixed-width and comparable by equality only.
"""

import hashlib
import hmac

from ..config.game_settings import COMMITMENT_DOMAIN
from ..models.word import EncodedWord


def _encode(word: EncodedWord) -> bytes:
    return COMMITMENT_DOMAIN + b':' + ','.join(str(value) for value in word.values).encode('ascii')


def commit(word: EncodedWord) -> str:
    """Return the 64-hex-char commitment of an encoded word."""
    return hashlib.sha256(_encode(word)).hexdigest()


def verify(word: EncodedWord, commitment: str) -> bool:
    """True when word hashes to commitment."""
    return hmac.compare_digest(commit(word), str(commitment))
