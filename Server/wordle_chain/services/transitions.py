"""
Game State Transitions

Pure state machine over passed-by-value GameState snapshots. Each function
either returns a new state or raises; the input state is never touched.
"""

from ..config.game_settings import PLACEHOLDER_GUESS
from ..exceptions import CommitmentMismatch, OutOfRangeLetter
from ..models.game import GameState, MoveKind, Role
from ..models.word import EncodedWord
from . import commitment
from .hint_engine import annotate
from .turn_validator import check_turn


def initial_state(solution: EncodedWord) -> GameState:
    """Turn 0, committed solution, placeholder guess."""
    if not solution.in_letter_range:
        raise OutOfRangeLetter(f"Solution {solution.to_list()} has a value outside [1, 26]")
    return GameState(
        solution_commitment=commitment.commit(solution),
        turn_number=0,
        last_guess=EncodedWord.from_string(PLACEHOLDER_GUESS),
    )


def publish_guess(state: GameState, guess: EncodedWord) -> GameState:
    check_turn(state.turn_number, Role.GUESSER)
    if not guess.in_letter_range:
        raise OutOfRangeLetter(f"Guess {guess.to_list()} has a value outside [1, 26]")
    return GameState(
        solution_commitment=state.solution_commitment,
        turn_number=state.next_turn(),
        last_guess=guess,
    )


def publish_hint(state: GameState, solution: EncodedWord) -> GameState:
    check_turn(state.turn_number, Role.HINT_GIVER)
    if not commitment.verify(solution, state.solution_commitment):
        raise CommitmentMismatch("Solution does not match the committed solution")
    return GameState(
        solution_commitment=state.solution_commitment,
        turn_number=state.next_turn(),
        last_guess=annotate(state.last_guess, solution),
    )


_TRANSITIONS = {
    MoveKind.GUESS: publish_guess,
    MoveKind.HINT: publish_hint,
}


def apply_move(state: GameState, kind: MoveKind, word: EncodedWord) -> GameState:
    return _TRANSITIONS[kind](state, word)
