"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify


def require_backend(f):
    """
    Decorator that fails closed until the game service and its proof
    backend have completed setup.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable',
                'error_kind': 'BackendNotReady'
            }), 503

        if not game_service.chain.backend.is_ready:
            return jsonify({
                'success': False,
                'error': 'Proof backend has not completed setup',
                'error_kind': 'BackendNotReady'
            }), 503

        return f(game_service, *args, **kwargs)

    return decorated_function
