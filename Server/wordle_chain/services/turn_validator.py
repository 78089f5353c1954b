"""
Turn Validator

Guesser acts on even turns, hint-giver on odd turns. A violation means a
protocol error or a replayed move and is never retried.
"""

from ..exceptions import WrongTurn
from ..models.game import Role


def role_to_move(turn_number: int) -> Role:
    return Role.GUESSER if turn_number % 2 == 0 else Role.HINT_GIVER


def may_act(turn_number: int, role: Role) -> bool:
    return role_to_move(turn_number) is role


def check_turn(turn_number: int, role: Role) -> None:
    if not may_act(turn_number, role):
        raise WrongTurn(
            f"It is not the {role.value}'s turn (turn {turn_number}, "
            f"{role_to_move(turn_number).value} to move)"
        )
