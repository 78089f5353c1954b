import pytest

from wordle_chain.exceptions import WrongTurn
from wordle_chain.models import Role
from wordle_chain.services.turn_validator import check_turn, may_act, role_to_move


@pytest.mark.parametrize('turn', [0, 2, 4, 1000, 2 ** 32 - 2])
def test_guesser_acts_on_even_turns(turn):
    assert may_act(turn, Role.GUESSER)
    assert not may_act(turn, Role.HINT_GIVER)
    assert role_to_move(turn) is Role.GUESSER
    check_turn(turn, Role.GUESSER)


@pytest.mark.parametrize('turn', [1, 3, 999, 2 ** 32 - 1])
def test_hint_giver_acts_on_odd_turns(turn):
    assert may_act(turn, Role.HINT_GIVER)
    assert not may_act(turn, Role.GUESSER)
    assert role_to_move(turn) is Role.HINT_GIVER
    check_turn(turn, Role.HINT_GIVER)


def test_wrong_turn_is_rejected():
    with pytest.raises(WrongTurn):
        check_turn(0, Role.HINT_GIVER)
    with pytest.raises(WrongTurn):
        check_turn(1, Role.GUESSER)
