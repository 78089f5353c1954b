"""
Game Configuration Constants Module

Fixed protocol parameters shared by the encoder, the hint engine and the
state machine. These values are part of the public proof surface: changing
any of them changes every commitment and every hint a chain produces.
"""

from typing import Final

WORD_LENGTH: Final[int] = 5
"""Number of slots in an encoded word."""

ALPHABET_SIZE: Final[int] = 26
"""Letters encode to 1..ALPHABET_SIZE (a=1 ... z=26)."""

MIN_LETTER_VALUE: Final[int] = 1
MAX_LETTER_VALUE: Final[int] = ALPHABET_SIZE

FALLBACK_LETTER_VALUE: Final[int] = 1
"""Substituted for non-letters and for positions past the end of short input."""

PARTIAL_MATCH_BONUS: Final[int] = 100
"""Added to a guess slot whose letter occurs elsewhere in the solution."""

EXACT_MATCH_BONUS: Final[int] = 200
"""Added to a guess slot whose letter matches the solution at that position."""

PLACEHOLDER_GUESS: Final[str] = "aaaaa"
"""Initial lastGuess; no hint can be produced until a real guess replaces it."""

MAX_TURN_NUMBER: Final[int] = 2 ** 32 - 1
"""turnNumber is an unsigned 32-bit counter."""

COMMITMENT_DOMAIN: Final[bytes] = b"wordle-chain/solution-commitment/v1"
"""Domain separation prefix hashed ahead of the encoded word."""
