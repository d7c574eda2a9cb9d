"""Validation layer for game actions and ProcessResult pattern.

Separates validation from processing logic:
- validate_action() checks if an action is valid given current state
- ProcessResult replaces exceptions for expected rejections
- Corrupted state still raises InvariantViolation (see errors.py)
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

from app.schemas.game_engine import Game, GamePhase

from .actions import GameAction, StartAction
from .events import AnyGameEvent
from .queries import get_game_phase


@dataclass
class ProcessResult:
    """Result of processing a game action.

    A successful result may carry the unchanged input state and no events:
    that is how ignored actions (wrong kind of player) are reported.
    """

    state: Game | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: Game,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating an action before processing."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_action(state: Game, action: GameAction) -> ValidationResult:
    """Validate an action before processing.

    Checks:
    - Game phase allows this action
    - A start action brings a usable roster (2+ players, unique ids)

    Whether the active player may use make/miss or simulate is not a
    validation error; the handlers ignore those actions instead.

    Args:
        state: Current game state.
        action: The action to validate.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    action_type = type(action).__name__
    phase = get_game_phase(state)
    logger.debug("Validating action: type=%s, phase=%s", action_type, phase.value)

    if isinstance(action, StartAction):
        if phase != GamePhase.NOT_STARTED:
            logger.warning(
                "Validation failed: GAME_ALREADY_STARTED, current_phase=%s",
                phase.value,
            )
            return ValidationResult.error(
                "GAME_ALREADY_STARTED",
                "Game has already started",
            )

        if len(action.players) < 2:
            logger.warning(
                "Validation failed: NOT_ENOUGH_PLAYERS, players=%d",
                len(action.players),
            )
            return ValidationResult.error(
                "NOT_ENOUGH_PLAYERS",
                "A minimum of 2 players is required to start the game",
            )

        player_ids: set[str] = set()
        for player in action.players:
            if player.id in player_ids:
                logger.warning("Validation failed: DUPLICATE_PLAYER, id=%s", player.id)
                return ValidationResult.error(
                    "DUPLICATE_PLAYER",
                    f"Duplicate player ID found: {player.id}",
                )
            player_ids.add(player.id)

        logger.debug("StartAction validated successfully")
        return ValidationResult.ok()

    # For all other actions, game must be in progress
    if phase == GamePhase.NOT_STARTED:
        logger.warning("Validation failed: GAME_NOT_STARTED")
        return ValidationResult.error(
            "GAME_NOT_STARTED",
            "Game has not started yet",
        )

    if phase == GamePhase.FINISHED:
        logger.warning("Validation failed: GAME_FINISHED")
        return ValidationResult.error(
            "GAME_FINISHED",
            "Game has already finished",
        )

    logger.debug("Action validated successfully: type=%s", action_type)
    return ValidationResult.ok()
