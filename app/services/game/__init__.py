"""Game service module.

Provides:
- Match initialization (start_game.py)
- Match ownership (manager.py)
- Game engine processing (engine/)
"""

# Re-export from engine for convenience
from .engine import (
    GameAction,
    MakeAction,
    MissAction,
    ProcessResult,
    SimulateAction,
    StartAction,
    build_action_from_payload,
    game_reducer,
    process_action,
)
from .manager import MatchManager, get_match_manager, set_match_manager
from .start_game import build_start_action, create_initial_game, create_player

__all__ = [
    # Initialization
    "create_initial_game",
    "create_player",
    "build_start_action",
    # Ownership
    "MatchManager",
    "get_match_manager",
    "set_match_manager",
    # Engine
    "GameAction",
    "ProcessResult",
    "StartAction",
    "MakeAction",
    "MissAction",
    "SimulateAction",
    "process_action",
    "game_reducer",
    "build_action_from_payload",
]
