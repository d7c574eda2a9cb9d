"""Game engine module - pure functional match logic.

This module provides the core game engine with:
- Action types for explicit user inputs
- Event types describing each transition
- ProcessResult pattern for expected rejections
- Derivation queries for displays

Usage:
    from app.services.game.engine import (
        process_action,
        game_reducer,
        MakeAction,
        StartAction,
    )

    # Process an action
    result = process_action(game, MakeAction())

    if result.success:
        game = result.state
        events = result.events  # What happened, in order
    else:
        # Handle error
        print(f"Error: {result.error_code} - {result.error_message}")
"""

# Actions - explicit user inputs
from .actions import (
    GameAction,
    MakeAction,
    MissAction,
    SimulateAction,
    StartAction,
    build_action_from_payload,
)

# Errors
from .errors import InvariantViolation

# Events
from .events import (
    AnyGameEvent,
    AttemptRecorded,
    AttemptsSimulated,
    GameEvent,
    GameStarted,
    MatchWon,
    OvertimeStarted,
    RoundStarted,
    RoundWon,
    TurnAdvanced,
)

# Main processing
from .process import game_reducer, process_action

# Derivation queries
from .queries import (
    can_act,
    get_active_player,
    get_active_round,
    get_game_phase,
    get_player_by_id,
    get_player_round_stats,
    get_round_by_id,
    get_round_wins,
    get_total_attempts,
    has_attempts_left,
    has_pending_attempts,
    is_overtime_slot,
)

# Result types
from .validation import ProcessResult, ValidationResult, validate_action

__all__ = [
    # Actions
    "GameAction",
    "StartAction",
    "MakeAction",
    "MissAction",
    "SimulateAction",
    "build_action_from_payload",
    # Errors
    "InvariantViolation",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "GameStarted",
    "RoundStarted",
    "AttemptRecorded",
    "AttemptsSimulated",
    "TurnAdvanced",
    "OvertimeStarted",
    "RoundWon",
    "MatchWon",
    # Processing
    "process_action",
    "game_reducer",
    # Queries
    "get_round_by_id",
    "get_active_round",
    "get_active_player",
    "get_player_by_id",
    "get_total_attempts",
    "get_game_phase",
    "get_round_wins",
    "get_player_round_stats",
    "has_attempts_left",
    "has_pending_attempts",
    "can_act",
    "is_overtime_slot",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_action",
]
