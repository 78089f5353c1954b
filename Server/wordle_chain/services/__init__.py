"""
Services Package

Contains all business logic and service classes.
"""

from .proof_backend import ProofBackend, AttestationBackend
from .proof_chain import Provable, ProofChain
from .game_service import (
    GameService, get_game_service, initialize_game_service, build_game_service
)

__all__ = [
    'ProofBackend', 'AttestationBackend',
    'Provable', 'ProofChain',
    'GameService', 'get_game_service', 'initialize_game_service', 'build_game_service'
]
