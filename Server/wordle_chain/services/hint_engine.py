"""
Hint Engine

Annotates a guess against the true solution with the two-pass matching rule.

Pass 1 marks exact matches (+200) against the original solution. Pass 2 walks
every (i, j) pair with i outer and j inner, both ascending; a match adds +100
to guess[i] and zeroes solution[j] so that solution letter is not matched
again. The iteration order is part of the rule: reordering changes results
for solutions with repeated letters.

Exact-matched solution letters are not removed before pass 2, so another
guess slot holding the same letter can still claim them as a partial match.
"""

from typing import List

from ..config.game_settings import WORD_LENGTH, PARTIAL_MATCH_BONUS, EXACT_MATCH_BONUS
from ..models.word import EncodedWord


def select(cond: bool, a: int, b: int) -> int:
    """Return a if cond else b."""
    return a if cond else b


def mark_exact_matches(guess: List[int], solution: List[int]) -> List[int]:
    """Pass 1: returns a new list; reads only the pre-pass values."""
    return [
        select(guess[i] == solution[i], guess[i] + EXACT_MATCH_BONUS, guess[i])
        for i in range(WORD_LENGTH)
    ]


def mark_partial_matches(guess: List[int], solution: List[int]) -> List[int]:
    """Pass 2: consumes solution letters as they match."""
    guess = list(guess)
    solution = list(solution)
    for i in range(WORD_LENGTH):
        for j in range(WORD_LENGTH):
            matched = guess[i] == solution[j]
            guess[i] = select(matched, guess[i] + PARTIAL_MATCH_BONUS, guess[i])
            solution[j] = select(matched, 0, solution[j])
    return guess


def annotate(guess: EncodedWord, solution: EncodedWord) -> EncodedWord:
    """Return the hint-annotated copy of guess. Neither input is modified."""
    exact = mark_exact_matches(list(guess.values), list(solution.values))
    return EncodedWord(tuple(mark_partial_matches(exact, list(solution.values))))
