"""
Game Controller

Handles all game-related HTTP endpoints, including the stateless move
submission interface.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..exceptions import GameNotFound, WordleChainError
from ..models.game import MoveKind
from ..models.proof import Proof
from ..models.word import EncodedWord
from ..utils.decorators import require_backend
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

ERROR_STATUS = {
    'MalformedWord': 400,
    'OutOfRangeLetter': 400,
    'WrongTurn': 409,
    'TurnCounterOverflow': 409,
    'CommitmentMismatch': 422,
    'StateMismatch': 422,
    'ProofVerificationFailed': 422,
    'GameNotFound': 404,
    'SetupError': 503,
    'BackendNotReady': 503,
}


def _error_response(action, error, game_id=None):
    """Log and translate a typed protocol failure."""
    game_logger.log_error(request, error, action, game_id)
    error_response = {'success': False, **error.to_dict()}
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), ERROR_STATUS.get(error.kind, 400)


def _bad_request(action, message, game_id=None):
    error_response = {
        'success': False,
        'error': message,
        'error_kind': 'BadRequest'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


def _parse_move(data):
    """Return (kind, word) from a request body or raise ValueError/MalformedWord."""
    raw_kind = data.get('kind', data.get('role'))
    if raw_kind is None:
        raise ValueError('Move kind (or role) is required')
    if 'word' not in data:
        raise ValueError('Word is required')
    return MoveKind.parse(raw_kind), EncodedWord.parse(data['word'])


@game_bp.route('/new_game', methods=['POST'])
@require_backend
def new_game(game_service):
    """Create a new game whose initial proof commits to the solution."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request('new_game', 'Request body must be a JSON object')
    solution = data.get('solution')

    # Never log the solution itself
    game_logger.log_user_action(request, 'new_game', custom_solution=solution is not None)

    try:
        word = EncodedWord.parse(solution) if solution is not None else None
        game_id = game_service.create_new_game(word)
        state = game_service.get_game_state(game_id)
    except WordleChainError as e:
        return _error_response('new_game', e)

    if state is None:
        return _error_response('new_game', GameNotFound('Game not found'), game_id)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'new_game', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_backend
def get_state(game_service, game_id):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    try:
        state = game_service.get_game_state(game_id)
    except WordleChainError as e:
        return _error_response('get_state', e, game_id)

    if state is None:
        return _error_response('get_state', GameNotFound('Game not found'), game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        turn_number=state.turn_number
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/move', methods=['POST'])
@require_backend
def submit_move(game_service, game_id):
    """Submit a guess or a hint against the game's latest proof."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return _bad_request('submit_move', 'Move is required', game_id)

    game_logger.log_user_action(
        request, 'submit_move', game_id,
        kind=data.get('kind', data.get('role'))
    )

    try:
        kind, word = _parse_move(data)
        game_service.submit_move(game_id, kind, word)
        state = game_service.get_game_state(game_id)
    except ValueError as e:
        return _bad_request('submit_move', str(e), game_id)
    except WordleChainError as e:
        return _error_response('submit_move', e, game_id)

    if state is None:
        # deleted by a concurrent request after the move was accepted
        return _error_response('submit_move', GameNotFound('Game not found'), game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'submit_move', True, response_data, game_id,
        move=kind.value, turn_number=state.turn_number
    )
    return jsonify(response_data)


@game_bp.route('/moves', methods=['POST'])
@require_backend
def apply_move(game_service):
    """Stateless submission: role-tagged move plus the current proof."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'proof' not in data:
        return _bad_request('apply_move', 'Move and current proof are required')

    game_logger.log_user_action(request, 'apply_move', kind=data.get('kind', data.get('role')))

    try:
        kind, word = _parse_move(data)
        proof = game_service.apply_move(kind, word, Proof.from_dict(data['proof']))
    except ValueError as e:
        return _bad_request('apply_move', str(e))
    except WordleChainError as e:
        return _error_response('apply_move', e)

    response_data = {
        'success': True,
        'proof': proof.to_dict()
    }
    game_logger.log_server_response(
        request, 'apply_move', True, response_data,
        move=kind.value, turn_number=proof.public_output.turn_number
    )
    return jsonify(response_data)


@game_bp.route('/verify', methods=['POST'])
@require_backend
def verify_proof(game_service):
    """Check a single proof; its predecessors are not required."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'proof' not in data:
        return _bad_request('verify_proof', 'Proof is required')

    game_logger.log_user_action(request, 'verify_proof')

    try:
        proof = Proof.from_dict(data['proof'])
        valid = game_service.verify_proof(proof)
    except WordleChainError as e:
        # A proof that cannot even be parsed is simply not valid
        game_logger.log_error(request, e, 'verify_proof')
        valid = False

    response_data = {
        'success': True,
        'valid': valid
    }
    game_logger.log_server_response(request, 'verify_proof', True, response_data)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_backend
def delete_game(game_service, game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    return jsonify(response_data), (200 if success else 404)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.game_service import get_game_service

    game_service = get_game_service()
    backend_ready = bool(game_service and game_service.chain.backend.is_ready)

    response_data = {
        'status': 'healthy' if backend_ready else 'unavailable',
        'backend_ready': backend_ready,
        'active_games': game_service.active_game_count() if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', backend_ready, response_data)
    return jsonify(response_data), (200 if backend_ready else 503)
