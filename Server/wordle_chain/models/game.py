"""
Game Data Models

Contains the authoritative game state record and the role/move enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config.game_settings import MAX_TURN_NUMBER
from ..exceptions import MalformedWord, TurnCounterOverflow
from .word import EncodedWord


class Role(Enum):
    """The two parties of a game."""
    GUESSER = "guesser"
    HINT_GIVER = "hint_giver"


class MoveKind(Enum):
    """State transitions that extend a proof chain."""
    GUESS = "publishGuess"
    HINT = "publishHint"

    @property
    def role(self) -> Role:
        return Role.GUESSER if self is MoveKind.GUESS else Role.HINT_GIVER

    @classmethod
    def parse(cls, raw: str) -> "MoveKind":
        """Accept a method name, a short kind or a role tag."""
        aliases = {
            'publishguess': cls.GUESS, 'guess': cls.GUESS, 'guesser': cls.GUESS,
            'publishhint': cls.HINT, 'hint': cls.HINT, 'hint_giver': cls.HINT,
            'hintgiver': cls.HINT,
        }
        kind = aliases.get(str(raw).strip().lower())
        if kind is None:
            raise ValueError(f"Unknown move kind: {raw!r}")
        return kind


@dataclass(frozen=True)
class GameState:
    """
    Public state attested by every proof.

    solution_commitment is fixed at creation; turn_number grows by exactly one
    per accepted move; last_guess is plain after a guess and annotated after
    a hint.
    """
    solution_commitment: str
    turn_number: int
    last_guess: EncodedWord

    def __post_init__(self):
        if isinstance(self.turn_number, bool) or not isinstance(self.turn_number, int):
            raise MalformedWord(f"turnNumber must be an integer, got {self.turn_number!r}")
        if not 0 <= self.turn_number <= MAX_TURN_NUMBER:
            raise MalformedWord(f"turnNumber {self.turn_number} is outside the unsigned 32-bit range")

    def next_turn(self) -> int:
        if self.turn_number >= MAX_TURN_NUMBER:
            raise TurnCounterOverflow(f"turnNumber {self.turn_number} cannot be incremented")
        return self.turn_number + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'solutionCommitment': self.solution_commitment,
            'turnNumber': self.turn_number,
            'lastGuess': self.last_guess.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        try:
            return cls(
                solution_commitment=str(data['solutionCommitment']),
                turn_number=data['turnNumber'],
                last_guess=EncodedWord.from_values(data['lastGuess']),
            )
        except (KeyError, TypeError) as e:
            raise MalformedWord(f"Malformed game state: {e}")


@dataclass
class GameView:
    """Server-side view of one game, safe to return to either party."""
    game_id: str
    turn_number: int
    role_to_move: str
    solution_commitment: str
    last_guess: List[int]
    last_guess_word: str
    guess_results: List[Tuple[str, str]]
    proof: Optional[Dict[str, Any]] = None
    history_length: int = 1
    created_at: Optional[str] = field(default=None)
