"""
Game Service

Keeps many independent games, each owning an isolated proof chain, and
exposes the move submission interface used by the transport layer.
"""

import threading
import uuid
from typing import Dict, List, Optional

from ..config import Config
from ..exceptions import GameNotFound, ProofVerificationFailed, WordleChainError
from ..models.game import GameView, MoveKind
from ..models.proof import Proof
from ..models.word import EncodedWord
from ..utils.game_logger import game_logger
from ..utils.helpers import utc_timestamp
from .proof_backend import AttestationBackend
from .proof_chain import ProofChain
from .turn_validator import role_to_move


class _GameRecord:
    """Latest proof of one game plus the lock that serialises its moves."""

    def __init__(self, proof: Proof, keep_history: bool):
        self.lock = threading.Lock()
        self.latest = proof
        self.history: List[Proof] = [proof] if keep_history else []
        self.keep_history = keep_history
        self.created_at = utc_timestamp()

    def accept(self, proof: Proof):
        self.latest = proof
        if self.keep_history:
            self.history.append(proof)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game creation with a committed solution
    - Move submission against a game's latest proof
    - Stateless move submission against a caller-held proof
    - Read-only game views without revealing the solution
    """

    def __init__(self, chain: ProofChain, keep_history: bool = False):
        self.chain = chain
        self.keep_history = keep_history
        self.games: Dict[str, _GameRecord] = {}
        self._games_lock = threading.Lock()

    def create_new_game(self, solution: Optional[EncodedWord] = None) -> str:
        """
        Creates a new game whose initial proof commits to solution.

        Args:
            solution: Hint-giver's solution; the configured default when None

        Returns:
            str: Unique game ID for this session
        """
        proof = self.chain.init(solution)
        game_id = str(uuid.uuid4())
        with self._games_lock:
            self.games[game_id] = _GameRecord(proof, self.keep_history)

        game_logger.log_game_event(
            game_id, 'game_created',
            solution_commitment=proof.public_output.solution_commitment
        )
        return game_id

    def _get_record(self, game_id: str) -> _GameRecord:
        record = self.games.get(game_id)
        if record is None:
            raise GameNotFound(f"Game {game_id} not found")
        return record

    def submit_move(self, game_id: str, kind: MoveKind, word: EncodedWord) -> Proof:
        """
        Extend a game's chain by one move.

        The game's latest proof is replaced only when the successor has been
        produced; any failure leaves the game exactly as it was.
        """
        record = self._get_record(game_id)
        with record.lock:
            try:
                proof = self.chain.extend(kind, word, record.latest)
            except WordleChainError as e:
                game_logger.log_game_event(
                    game_id, 'move_rejected', move=kind.value, error_kind=e.kind,
                    turn_number=record.latest.public_output.turn_number
                )
                raise
            record.accept(proof)

        game_logger.log_game_event(
            game_id, 'move_accepted', move=kind.value,
            turn_number=proof.public_output.turn_number
        )
        return proof

    def apply_move(self, kind: MoveKind, word: EncodedWord, proof: Proof) -> Proof:
        """Stateless submission: role-tagged move on top of a caller-held proof."""
        try:
            successor = self.chain.extend(kind, word, proof)
        except WordleChainError as e:
            game_logger.log_game_event(None, 'move_rejected', move=kind.value, error_kind=e.kind)
            raise
        game_logger.log_game_event(
            None, 'move_accepted', move=kind.value,
            turn_number=successor.public_output.turn_number
        )
        return successor

    def verify_proof(self, proof: Proof) -> bool:
        return self.chain.verify(proof)

    def get_latest_proof(self, game_id: str) -> Proof:
        return self._get_record(game_id).latest

    def get_history(self, game_id: str) -> List[Proof]:
        return list(self._get_record(game_id).history)

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current view of a game, or None if it does not exist.

        The view is rebuilt from the latest proof, which is re-verified first.
        """
        record = self.games.get(game_id)
        if record is None:
            return None

        proof = record.latest
        if not self.chain.verify(proof):
            raise ProofVerificationFailed(f"Latest proof of game {game_id} failed verification")

        state = proof.public_output
        return GameView(
            game_id=game_id,
            turn_number=state.turn_number,
            role_to_move=role_to_move(state.turn_number).value,
            solution_commitment=state.solution_commitment,
            last_guess=state.last_guess.to_list(),
            last_guess_word=state.last_guess.to_string(),
            guess_results=state.last_guess.hint_statuses(),
            proof=proof.to_dict(),
            history_length=len(record.history) if record.keep_history else 1,
            created_at=record.created_at,
        )

    def active_game_count(self) -> int:
        return len(self.games)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._games_lock:
            if game_id in self.games:
                del self.games[game_id]
                game_logger.log_game_event(game_id, 'game_deleted')
                return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(chain: ProofChain, keep_history: bool = False) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(chain, keep_history)
    return _game_service


def build_game_service(config_class=Config, keep_history: bool = False) -> GameService:
    """
    Compile the proof backend and initialize the global game service.

    Setup failures are fatal: nothing is initialized when compile() fails.
    """
    backend = AttestationBackend(config_class.PROOF_SECRET, config_class.PROOF_PROGRAM_ID)
    backend.compile()
    chain = ProofChain(backend, config_class.DEFAULT_SOLUTION)
    return initialize_game_service(chain, keep_history)
