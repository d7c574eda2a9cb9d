"""Shared fixtures for game engine tests."""

import pytest

from app.schemas.game_engine import AttemptOutcome, Game, Player, Round
from app.services.game.engine import StartAction, game_reducer, process_action

# Fixed IDs for deterministic testing
GAME_ID = "00000000-0000-0000-0000-00000000000g"
PLAYER_A_ID = "00000000-0000-0000-0000-000000000001"
PLAYER_B_ID = "00000000-0000-0000-0000-000000000002"
PLAYER_C_ID = "00000000-0000-0000-0000-000000000003"
ROUND_ID = "00000000-0000-0000-0000-0000000000r1"


def create_player(
    player_id: str,
    name: str,
    controlled: bool = True,
    percentage: float = 50,
) -> Player:
    """Helper to create a player."""
    return Player(id=player_id, name=name, percentage=percentage, controlled=controlled)


def new_game() -> Game:
    """An empty game, as the match owner creates it before registration."""
    return Game(id=GAME_ID)


def start_game(players: list[Player], attempts: int = 1, best_of: int = 3) -> Game:
    """Run the start action and return round 1 ready to play."""
    result = process_action(
        new_game(),
        StartAction(players=players, attempts=attempts, best_of=best_of),
    )
    assert result.success
    return result.state


def play(state: Game, *actions) -> Game:
    """Apply actions one after another through the reducer."""
    for action in actions:
        state = game_reducer(state, action)
    return state


def build_game_in_round(
    players: list[Player],
    attempts_by_player: dict[str, list[AttemptOutcome]],
    order: list[str] | None = None,
    active_player: int = 0,
    attempts: int = 5,
    best_of: int = 3,
) -> Game:
    """Game in progress with a single round in an arbitrary position."""
    game_round = Round(
        id=ROUND_ID,
        name="Round #1",
        order=order or [player.id for player in players],
        attempts=attempts_by_player,
        active_player=active_player,
        winner=None,
    )
    return Game(
        id=GAME_ID,
        players=players,
        rounds=[game_round],
        best_of=best_of,
        attempts=attempts,
        active_round=0,
    )


@pytest.fixture
def player_a() -> Player:
    """Controlled player A."""
    return create_player(PLAYER_A_ID, "Alice")


@pytest.fixture
def player_b() -> Player:
    """Controlled player B."""
    return create_player(PLAYER_B_ID, "Bob")


@pytest.fixture
def player_c() -> Player:
    """Simulated player C who never misses."""
    return create_player(PLAYER_C_ID, "Cyborg", controlled=False, percentage=100)


@pytest.fixture
def two_player_game(player_a: Player, player_b: Player) -> Game:
    """Two controlled players, one attempt each, best of 3."""
    return start_game([player_a, player_b], attempts=1, best_of=3)


@pytest.fixture
def three_player_game(player_a: Player, player_b: Player, player_c: Player) -> Game:
    """Three players (C simulated), one attempt each, best of 3."""
    return start_game([player_a, player_b, player_c], attempts=1, best_of=3)
