"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .word import EncodedWord, LetterStatus
from .game import GameState, GameView, MoveKind, Role
from .proof import Proof, INIT_METHOD

__all__ = [
    'EncodedWord', 'LetterStatus',
    'GameState', 'GameView', 'MoveKind', 'Role',
    'Proof', 'INIT_METHOD'
]
