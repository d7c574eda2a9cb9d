"""Errors raised when game state is internally inconsistent."""

import logging

logger = logging.getLogger(__name__)


class InvariantViolation(RuntimeError):
    """Game state is corrupted or an action ignored the enabled controls.

    Never raised for expected conditions - those come back as a failed
    ProcessResult or as an unchanged state.
    """


def invariant(condition: object, message: str) -> None:
    """Raise InvariantViolation with ``message`` unless ``condition`` holds."""
    if not condition:
        logger.error("Invariant violated: %s", message)
        raise InvariantViolation(message)
