"""
Encoded Word Model

Five-slot integer representation of a guess or a solution. Plain words hold
letter positions 1..26; hint-annotated words carry +100 (partial) and/or
+200 (exact) on top of the letter value.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from ..config.game_settings import (
    WORD_LENGTH, FALLBACK_LETTER_VALUE, MIN_LETTER_VALUE, MAX_LETTER_VALUE,
    PARTIAL_MATCH_BONUS, EXACT_MATCH_BONUS
)
from ..exceptions import MalformedWord


class LetterStatus(Enum):
    """Letter evaluation status decoded from an annotated slot."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"


@dataclass(frozen=True)
class EncodedWord:
    """Immutable five-slot encoded word."""
    values: Tuple[int, ...]

    def __post_init__(self):
        if len(self.values) != WORD_LENGTH:
            raise MalformedWord(
                f"Encoded word must have exactly {WORD_LENGTH} slots, got {len(self.values)}"
            )
        for value in self.values:
            # bool is an int subclass but never a valid slot
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedWord(f"Slot value {value!r} is not an integer")
            if value < 0:
                raise MalformedWord(f"Slot value {value} is negative")

    @classmethod
    def from_string(cls, text: str) -> "EncodedWord":
        """
        Encode the first five characters of any string.

        Letters are case-folded and mapped a=1 ... z=26. Any other character,
        and every position past the end of a short input, becomes 1 ('a').
        """
        values = []
        for i in range(WORD_LENGTH):
            char = text[i].lower() if i < len(text) else ''
            if len(char) == 1 and char in string.ascii_lowercase:
                values.append(ord(char) - ord('a') + 1)
            else:
                values.append(FALLBACK_LETTER_VALUE)
        return cls(tuple(values))

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "EncodedWord":
        """Build a word from a transport-supplied integer sequence."""
        if isinstance(values, (str, bytes)):
            raise MalformedWord("Expected a sequence of integers, got a string")
        try:
            return cls(tuple(values))
        except TypeError:
            raise MalformedWord(f"Expected a sequence of integers, got {type(values).__name__}")

    @classmethod
    def parse(cls, raw) -> "EncodedWord":
        """Accept either a raw string or an integer sequence."""
        if isinstance(raw, str):
            return cls.from_string(raw)
        return cls.from_values(raw)

    def letter_values(self) -> Tuple[int, ...]:
        """Base letter value of every slot with hint bonuses stripped."""
        return tuple(value % PARTIAL_MATCH_BONUS for value in self.values)

    def to_string(self) -> str:
        return ''.join(
            chr(ord('a') + value - 1) if MIN_LETTER_VALUE <= value <= MAX_LETTER_VALUE else '?'
            for value in self.letter_values()
        )

    @property
    def is_annotated(self) -> bool:
        return any(value > MAX_LETTER_VALUE for value in self.values)

    @property
    def in_letter_range(self) -> bool:
        return all(MIN_LETTER_VALUE <= value <= MAX_LETTER_VALUE for value in self.values)

    def hint_statuses(self) -> List[Tuple[str, str]]:
        """
        Decode hint bonuses into (letter, status) pairs.

        A slot carrying the exact bonus reads as HIT even when it also
        received the partial bonus.
        """
        letters = self.to_string()
        result = []
        for letter, value in zip(letters, self.values):
            bonus = value - value % PARTIAL_MATCH_BONUS
            if bonus >= EXACT_MATCH_BONUS:
                status = LetterStatus.HIT
            elif bonus >= PARTIAL_MATCH_BONUS:
                status = LetterStatus.PRESENT
            else:
                status = LetterStatus.MISS
            result.append((letter, status.value))
        return result

    def to_list(self) -> List[int]:
        return list(self.values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)
