import uuid

from app.config import get_settings
from app.schemas.game_engine import Game, Player
from app.services.game.engine import StartAction


def create_player(name: str, percentage: float = 0, controlled: bool = False) -> Player:
    """Register a player with a fresh id."""
    return Player(
        id=str(uuid.uuid4()),
        name=name,
        percentage=percentage,
        controlled=controlled,
    )


def create_initial_game() -> Game:
    """Return an empty, not yet started Game using the configured defaults."""
    settings = get_settings()
    return Game(
        id=str(uuid.uuid4()),
        players=[],
        rounds=[],
        winner=None,
        best_of=settings.DEFAULT_BEST_OF,
        attempts=settings.DEFAULT_ATTEMPTS,
        active_round=0,
    )


def build_start_action(
    players: list[Player],
    attempts: int | None = None,
    best_of: int | None = None,
) -> StartAction:
    """
    Build the start action for a registered roster.

    Args:
        players: Registered players in turn order for round 1.
        attempts: Attempts per player per round (settings default when None).
        best_of: Rounds in the match (settings default when None).

    Returns:
        A StartAction ready to be dispatched.

    Raises:
        pydantic.ValidationError: If attempts or best_of are out of range.
    """
    settings = get_settings()
    return StartAction(
        players=players,
        attempts=settings.DEFAULT_ATTEMPTS if attempts is None else attempts,
        best_of=settings.DEFAULT_BEST_OF if best_of is None else best_of,
    )
