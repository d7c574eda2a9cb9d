import logging
import random

from app.config import get_settings
from app.schemas.game_engine import Game
from app.services.game.engine import GameAction, ProcessResult, process_action
from app.services.game.start_game import create_initial_game

logger = logging.getLogger(__name__)


class MatchManager:
    """Holds the current Game value of every match in this process.

    Each match has exactly one authoritative state here; dispatch() runs
    the engine against it and stores the result. Calls are synchronous
    and must be serialized by the host.

    Local storage:
        - _matches: game_id -> Game
    """

    def __init__(self, rng: random.Random | None = None):
        if rng is None:
            rng = random.Random(get_settings().SIMULATION_SEED)
        self._rng = rng
        self._matches: dict[str, Game] = {}

        logger.info("MatchManager initialized")

    def create_match(self) -> Game:
        """Create and register an empty match."""
        game = create_initial_game()
        self._matches[game.id] = game
        logger.info("Match %s created", game.id)
        return game

    def get_match(self, game_id: str) -> Game:
        """Get the current state of a match.

        Raises:
            KeyError: If no match with this id is registered.
        """
        try:
            return self._matches[game_id]
        except KeyError:
            logger.warning("Match %s not found", game_id)
            raise

    def dispatch(self, game_id: str, action: GameAction) -> ProcessResult:
        """Process an action against the match's current state.

        The stored state is replaced only when the action succeeds.

        Args:
            game_id: The match to act on.
            action: The action to process.

        Returns:
            The engine's ProcessResult.
        """
        state = self.get_match(game_id)
        result = process_action(state, action, self._rng)

        if result.success and result.state is not None:
            self._matches[game_id] = result.state
            logger.debug(
                "Match %s updated: events=%d, event_seq=%d",
                game_id,
                len(result.events),
                result.state.event_seq,
            )
        else:
            logger.info(
                "Match %s unchanged: error=%s",
                game_id,
                result.error_code,
            )

        return result

    def remove_match(self, game_id: str) -> None:
        """Forget a match. Unknown ids are ignored."""
        if self._matches.pop(game_id, None) is not None:
            logger.info("Match %s removed", game_id)

    def get_match_count(self) -> int:
        return len(self._matches)


# Global manager instance
_match_manager: MatchManager | None = None


def get_match_manager() -> MatchManager:
    """Get the global MatchManager instance."""
    global _match_manager
    if _match_manager is None:
        _match_manager = MatchManager()
    return _match_manager


def set_match_manager(manager: MatchManager) -> None:
    """Set the global MatchManager instance."""
    global _match_manager
    _match_manager = manager
