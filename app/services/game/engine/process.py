"""Main entry point for game action processing.

This module provides the primary interface for processing game actions:
- process_action(): Validates and processes any game action
- game_reducer(): Plain (state, action) -> state form of process_action
- Dispatches to specialized handlers based on action type
"""

import logging
import random

logger = logging.getLogger(__name__)

from app.schemas.game_engine import Game

from .actions import (
    GameAction,
    MakeAction,
    MissAction,
    SimulateAction,
    StartAction,
)
from .attempts import process_attempt, process_simulate
from .events import AnyGameEvent, GameStarted
from .rounds import create_next_round
from .validation import ProcessResult, validate_action


def process_action(
    state: Game,
    action: GameAction,
    rng: random.Random | None = None,
) -> ProcessResult:
    """Process a game action and return the result.

    This is the main entry point for all game actions. It:
    1. Validates the action is legal given current state
    2. Dispatches to the appropriate handler
    3. Assigns sequence numbers to events
    4. Returns ProcessResult with new state and events

    The input state is never modified. Ignored actions come back as a
    successful result holding the very same state object and no events.

    Args:
        state: Current game state.
        action: The action to process.
        rng: Random source for simulated attempts (defaults to ``random``).

    Returns:
        ProcessResult containing:
        - success: Whether the action was processed successfully
        - state: The new game state (if successful)
        - events: List of events that occurred (with seq numbers)
        - error_code/error_message: Error details (if failed)

    Raises:
        InvariantViolation: If the state is corrupted or a make/miss
            arrives when the active player has no pending slot.

    Example:
        >>> result = process_action(game, MakeAction())
        >>> if result.success:
        ...     game = result.state
        ... else:
        ...     show_error(result.error_code, result.error_message)
    """
    action_type = type(action).__name__
    logger.info("Processing action: type=%s, game=%s", action_type, state.id[:8])
    logger.debug("Action details: %s", action)

    # Validate the action
    validation = validate_action(state, action)
    if not validation.is_valid:
        logger.warning(
            "Action validation failed: code=%s, message=%s, action=%s",
            validation.error_code,
            validation.error_message,
            action_type,
        )
        return ProcessResult.failure(
            validation.error_code or "VALIDATION_ERROR",
            validation.error_message or "Invalid action",
        )

    # Dispatch to appropriate handler
    if isinstance(action, StartAction):
        result = process_start(state, action)

    elif isinstance(action, (MakeAction, MissAction)):
        result = process_attempt(state, isinstance(action, MakeAction))

    elif isinstance(action, SimulateAction):
        result = process_simulate(state, rng)

    else:
        logger.error("Unknown action type received: %s", action_type)
        return ProcessResult.failure(
            "UNKNOWN_ACTION",
            f"Unknown action type: {type(action).__name__}",
        )

    if result.success and result.state is not None:
        result = _assign_event_sequences(result)
        logger.info(
            "Action processed successfully: type=%s, events_generated=%d",
            action_type,
            len(result.events),
        )
        logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])

    return result


def game_reducer(
    state: Game,
    action: GameAction,
    rng: random.Random | None = None,
) -> Game:
    """Return the state after ``action``; rejected actions leave it unchanged."""
    result = process_action(state, action, rng)
    if not result.success or result.state is None:
        return state
    return result.state


def _assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the state's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    # Update state with new sequence counter
    new_state = result.state.model_copy(update={"event_seq": current_seq})

    return ProcessResult.ok(new_state, result.events)


def process_start(state: Game, action: StartAction) -> ProcessResult:
    """Set the roster and match format, then open round 1.

    Args:
        state: Current game state (must have no players yet).
        action: Roster, attempts per round and best-of count.

    Returns:
        ProcessResult with round 1 active and its first player up.
    """
    logger.info(
        "Starting game: players=%d, attempts=%d, best_of=%d",
        len(action.players),
        action.attempts,
        action.best_of,
    )
    events: list[AnyGameEvent] = [
        GameStarted(
            player_order=[player.id for player in action.players],
            attempts=action.attempts,
            best_of=action.best_of,
        )
    ]

    new_state = state.model_copy(
        update={
            "players": list(action.players),
            "attempts": action.attempts,
            "best_of": action.best_of,
        }
    )
    new_state, round_started = create_next_round(new_state)
    events.append(round_started)

    logger.info(
        "Game started: player_order=%s",
        [player.name for player in action.players],
    )
    return ProcessResult.ok(new_state, events)
