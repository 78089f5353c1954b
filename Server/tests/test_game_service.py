import threading
from dataclasses import replace

import pytest

from wordle_chain.exceptions import (
    CommitmentMismatch, GameNotFound, OutOfRangeLetter, ProofVerificationFailed, WrongTurn
)
from wordle_chain.models import EncodedWord, MoveKind
from wordle_chain.services import commitment, get_game_service


def test_create_game(service, hello):
    game_id = service.create_new_game()
    view = service.get_game_state(game_id)
    assert view.turn_number == 0
    assert view.role_to_move == 'guesser'
    assert view.last_guess == [1, 1, 1, 1, 1]
    assert view.solution_commitment == commitment.commit(hello)
    assert get_game_service() is service


def test_custom_solution(service):
    crane = EncodedWord.from_string('crane')
    game_id = service.create_new_game(crane)
    assert service.get_latest_proof(game_id).public_output.solution_commitment == commitment.commit(crane)


def test_out_of_range_solution_creates_no_game(service):
    with pytest.raises(OutOfRangeLetter):
        service.create_new_game(EncodedWord.from_values([0, 0, 0, 0, 300]))
    assert service.active_game_count() == 0


def test_moves_advance_the_game(service, hello, exile):
    game_id = service.create_new_game()
    service.submit_move(game_id, MoveKind.GUESS, exile)
    service.submit_move(game_id, MoveKind.HINT, hello)

    view = service.get_game_state(game_id)
    assert view.turn_number == 2
    assert view.role_to_move == 'guesser'
    assert view.last_guess == [105, 24, 9, 212, 5]
    assert view.last_guess_word == 'exile'
    assert view.guess_results[0] == ('e', 'PRESENT')
    assert view.guess_results[3] == ('l', 'HIT')
    assert view.history_length == 3
    assert service.chain.verify_history(service.get_history(game_id))


def test_rejected_move_leaves_game_unchanged(service, exile):
    game_id = service.create_new_game()
    service.submit_move(game_id, MoveKind.GUESS, exile)
    before = service.get_latest_proof(game_id)

    with pytest.raises(WrongTurn):
        service.submit_move(game_id, MoveKind.GUESS, exile)
    with pytest.raises(CommitmentMismatch):
        service.submit_move(game_id, MoveKind.HINT, EncodedWord.from_string('world'))

    assert service.get_latest_proof(game_id) is before
    assert service.get_game_state(game_id).turn_number == 1
    assert len(service.get_history(game_id)) == 2


def test_games_are_isolated(service, hello, exile):
    first = service.create_new_game()
    second = service.create_new_game(EncodedWord.from_string('crane'))
    service.submit_move(first, MoveKind.GUESS, exile)

    assert service.get_game_state(first).turn_number == 1
    assert service.get_game_state(second).turn_number == 0
    service.submit_move(second, MoveKind.GUESS, exile)
    with pytest.raises(CommitmentMismatch):
        service.submit_move(second, MoveKind.HINT, hello)
    assert service.get_game_state(first).turn_number == 1


def test_unknown_game(service, exile):
    assert service.get_game_state('missing') is None
    with pytest.raises(GameNotFound):
        service.submit_move('missing', MoveKind.GUESS, exile)


def test_stateless_submission(service, chain, hello, exile):
    proof = service.apply_move(MoveKind.GUESS, exile, chain.init())
    proof = service.apply_move(MoveKind.HINT, hello, proof)
    assert proof.public_output.last_guess.values == (105, 24, 9, 212, 5)
    assert service.verify_proof(proof)
    assert service.active_game_count() == 0


def test_stateless_submission_rejects_tampered_proof(service, chain, exile):
    proof = chain.init()
    forged = replace(proof, public_output=replace(proof.public_output, turn_number=2))
    with pytest.raises(ProofVerificationFailed):
        service.apply_move(MoveKind.GUESS, exile, forged)


def test_concurrent_moves_on_one_game_are_serialised(service, exile):
    game_id = service.create_new_game()
    outcomes = []

    def guess():
        try:
            service.submit_move(game_id, MoveKind.GUESS, exile)
            outcomes.append('ok')
        except WrongTurn:
            outcomes.append('wrong_turn')

    threads = [threading.Thread(target=guess) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count('ok') == 1
    assert outcomes.count('wrong_turn') == 7
    assert service.get_game_state(game_id).turn_number == 1


def test_delete_game(service):
    game_id = service.create_new_game()
    assert service.active_game_count() == 1
    assert service.delete_game(game_id)
    assert not service.delete_game(game_id)
    assert service.active_game_count() == 0
