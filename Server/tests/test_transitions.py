import pytest

from wordle_chain.exceptions import (
    CommitmentMismatch, MalformedWord, OutOfRangeLetter, TurnCounterOverflow, WrongTurn
)
from wordle_chain.models import EncodedWord, GameState, MoveKind
from wordle_chain.services import commitment, transitions


def test_initial_state(hello):
    state = transitions.initial_state(hello)
    assert state.turn_number == 0
    assert state.last_guess.values == (1, 1, 1, 1, 1)
    assert state.solution_commitment == commitment.commit(hello)


@pytest.mark.parametrize("values", [[0, 0, 0, 0, 300], [1, 2, 3, 4, 27], [0, 1, 1, 1, 1]])
def test_initial_state_rejects_out_of_range_solution(values):
    with pytest.raises(OutOfRangeLetter):
        transitions.initial_state(EncodedWord.from_values(values))


def test_guess_then_hint(hello, exile):
    state = transitions.initial_state(hello)

    guessed = transitions.publish_guess(state, exile)
    assert guessed.turn_number == 1
    assert guessed.last_guess.values == (5, 24, 9, 12, 5)

    hinted = transitions.publish_hint(guessed, hello)
    assert hinted.turn_number == 2
    assert hinted.last_guess.values == (105, 24, 9, 212, 5)
    assert hinted.solution_commitment == state.solution_commitment

    # the earlier snapshots are untouched
    assert state.turn_number == 0
    assert guessed.last_guess.values == (5, 24, 9, 12, 5)


def test_full_round_trip_game(hello, exile):
    state = transitions.initial_state(hello)
    state = transitions.apply_move(state, MoveKind.GUESS, exile)
    state = transitions.apply_move(state, MoveKind.HINT, hello)
    state = transitions.apply_move(state, MoveKind.GUESS, hello)
    assert state.turn_number == 3
    assert state.last_guess.values == (8, 5, 12, 12, 15)
    state = transitions.apply_move(state, MoveKind.HINT, hello)
    assert state.turn_number == 4
    assert state.last_guess.values == (208, 205, 212, 212, 215)


def test_guess_out_of_turn(hello, exile):
    guessed = transitions.publish_guess(transitions.initial_state(hello), exile)
    with pytest.raises(WrongTurn):
        transitions.publish_guess(guessed, exile)


def test_hint_out_of_turn(hello):
    with pytest.raises(WrongTurn):
        transitions.publish_hint(transitions.initial_state(hello), hello)


@pytest.mark.parametrize('values', [
    [0, 1, 1, 1, 1],
    [1, 1, 1, 1, 27],
    [105, 24, 9, 212, 5],
])
def test_guess_letters_must_be_in_range(hello, values):
    with pytest.raises(OutOfRangeLetter):
        transitions.publish_guess(transitions.initial_state(hello), EncodedWord.from_values(values))


def test_hint_requires_committed_solution(hello, exile):
    guessed = transitions.publish_guess(transitions.initial_state(hello), exile)
    with pytest.raises(CommitmentMismatch):
        transitions.publish_hint(guessed, EncodedWord.from_string('world'))


def test_turn_counter_is_unsigned_32_bit(hello, exile):
    state = GameState(commitment.commit(hello), 2 ** 32 - 1, exile)
    with pytest.raises(TurnCounterOverflow):
        transitions.publish_hint(state, hello)

    with pytest.raises(MalformedWord):
        GameState(commitment.commit(hello), 2 ** 32, exile)
    with pytest.raises(MalformedWord):
        GameState(commitment.commit(hello), -1, exile)


def test_state_dict_surface(hello, exile):
    state = transitions.publish_guess(transitions.initial_state(hello), exile)
    data = state.to_dict()
    assert data == {
        'solutionCommitment': commitment.commit(hello),
        'turnNumber': 1,
        'lastGuess': [5, 24, 9, 12, 5],
    }
    assert GameState.from_dict(data) == state
