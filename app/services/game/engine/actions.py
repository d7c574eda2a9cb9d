"""Game action types - explicit user inputs separated from game state."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from app.schemas.game_engine import Player


class StartAction(BaseModel):
    """Registration is done - set the roster and open round 1."""

    action_type: Literal["start"] = "start"
    players: list[Player] = Field(..., description="Roster in registration order")
    attempts: int = Field(5, ge=1, description="Attempts per player per round")
    best_of: int = Field(3, ge=1, description="Number of rounds in the match (odd)")

    @field_validator("best_of")
    @classmethod
    def validate_best_of(cls, v: int) -> int:
        if v % 2 == 0:
            raise ValueError("best_of must be an odd number")
        return v


class MakeAction(BaseModel):
    """The active (controlled) player made their shot."""

    action_type: Literal["make"] = "make"


class MissAction(BaseModel):
    """The active (controlled) player missed their shot."""

    action_type: Literal["miss"] = "miss"


class SimulateAction(BaseModel):
    """Resolve all remaining shots of the active (uncontrolled) player."""

    action_type: Literal["simulate"] = "simulate"


# Union type for all game actions
GameAction = Annotated[
    StartAction | MakeAction | MissAction | SimulateAction,
    Field(discriminator="action_type"),
]


def build_action_from_payload(payload: dict) -> GameAction:
    """Build a typed action from a raw payload dict.

    Args:
        payload: Dict with 'action_type' key and action-specific fields.

    Returns:
        The appropriate GameAction subtype.

    Raises:
        ValueError: If action_type is missing or unknown.
    """
    action_type = payload.get("action_type")

    if action_type == "start":
        return StartAction.model_validate(payload)
    elif action_type == "make":
        return MakeAction.model_validate(payload)
    elif action_type == "miss":
        return MissAction.model_validate(payload)
    elif action_type == "simulate":
        return SimulateAction.model_validate(payload)
    else:
        raise ValueError(f"Unknown action type: {action_type}")
