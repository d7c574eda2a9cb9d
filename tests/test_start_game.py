"""Tests for match setup: the start action, factories and action payloads.

Critical scenarios tested:
- Start sets roster, attempts and best-of and opens round 1
- Empty game factory uses configured defaults
- Action models reject out-of-range settings
"""

import pytest
from pydantic import ValidationError

from app.schemas.game_engine import GamePhase, Player
from app.services.game import build_start_action, create_initial_game, create_player
from app.services.game.engine import (
    MakeAction,
    MissAction,
    SimulateAction,
    StartAction,
    build_action_from_payload,
    get_active_player,
    get_game_phase,
    process_action,
)

from .conftest import PLAYER_A_ID, PLAYER_B_ID, new_game


class TestStartAction:
    """Test the transition out of the empty game."""

    def test_start_sets_roster_and_format(self, player_a, player_b):
        result = process_action(
            new_game(),
            StartAction(players=[player_a, player_b], attempts=4, best_of=5),
        )

        assert result.success
        state = result.state
        assert state.players == [player_a, player_b]
        assert state.attempts == 4
        assert state.best_of == 5
        assert state.winner is None
        assert get_game_phase(state) == GamePhase.IN_PROGRESS

    def test_start_creates_first_round(self, player_a, player_b):
        state = process_action(
            new_game(),
            StartAction(players=[player_a, player_b], attempts=3, best_of=3),
        ).state

        assert len(state.rounds) == 1
        first = state.rounds[0]
        assert first.name == "Round #1"
        assert first.order == [PLAYER_A_ID, PLAYER_B_ID]
        assert first.active_player == 0
        assert first.winner is None
        assert first.attempts == {PLAYER_A_ID: [None] * 3, PLAYER_B_ID: [None] * 3}
        assert state.active_round == 0
        assert get_active_player(state).id == PLAYER_A_ID

    def test_start_event_order(self, player_a, player_b):
        result = process_action(new_game(), StartAction(players=[player_a, player_b]))

        assert [e.event_type for e in result.events] == ["game_started", "round_started"]
        assert result.events[0].player_order == [PLAYER_A_ID, PLAYER_B_ID]


class TestActionModels:
    """Test field validation on action models."""

    def test_even_best_of_rejected(self, player_a, player_b):
        with pytest.raises(ValidationError):
            StartAction(players=[player_a, player_b], attempts=5, best_of=4)

    def test_zero_attempts_rejected(self, player_a, player_b):
        with pytest.raises(ValidationError):
            StartAction(players=[player_a, player_b], attempts=0, best_of=3)

    def test_percentage_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Player(id="x", name="Overconfident", percentage=120, controlled=False)

    def test_player_is_immutable(self):
        player = Player(id="x", name="Sam", percentage=40, controlled=True)

        with pytest.raises(ValidationError):
            player.percentage = 90

    def test_build_actions_from_payload(self):
        assert isinstance(build_action_from_payload({"action_type": "make"}), MakeAction)
        assert isinstance(build_action_from_payload({"action_type": "miss"}), MissAction)
        assert isinstance(
            build_action_from_payload({"action_type": "simulate"}), SimulateAction
        )

    def test_build_start_from_payload(self):
        action = build_action_from_payload(
            {
                "action_type": "start",
                "players": [
                    {"id": "a", "name": "Alice", "percentage": 70, "controlled": True},
                    {"id": "b", "name": "Bot", "percentage": 40, "controlled": False},
                ],
                "attempts": 3,
                "best_of": 5,
            }
        )

        assert isinstance(action, StartAction)
        assert action.players[1].controlled is False
        assert action.best_of == 5

    def test_unknown_payload_rejected(self):
        with pytest.raises(ValueError, match="Unknown action type"):
            build_action_from_payload({"action_type": "dunk"})


class TestFactories:
    """Test the empty game and player factories."""

    def test_initial_game_is_empty(self):
        game = create_initial_game()

        assert game.players == []
        assert game.rounds == []
        assert game.winner is None
        assert game.active_round == 0
        assert game.best_of == 3
        assert game.attempts == 5
        assert get_game_phase(game) == GamePhase.NOT_STARTED

    def test_initial_games_have_distinct_ids(self):
        assert create_initial_game().id != create_initial_game().id

    def test_create_player_defaults(self):
        player = create_player("Sam")

        assert player.name == "Sam"
        assert player.percentage == 0
        assert player.controlled is False
        assert player.id

    def test_build_start_action_uses_defaults(self):
        players = [create_player("Sam", controlled=True), create_player("Bot", 60)]

        action = build_start_action(players)

        assert action.attempts == 5
        assert action.best_of == 3

    def test_build_start_action_overrides(self):
        players = [create_player("Sam", controlled=True), create_player("Bot", 60)]

        action = build_start_action(players, attempts=2, best_of=7)

        assert action.attempts == 2
        assert action.best_of == 7
