"""Game event types - emitted during state transitions.

Events describe what happened during a game action, enabling:
- Display updates without diffing whole game values
- Action replay / audit logging
- Announcements (round won, overtime, match won)
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class GameStarted(GameEvent):
    """Roster is set and the match is under way."""

    event_type: Literal["game_started"] = "game_started"
    player_order: list[str] = Field(..., description="Player IDs in registration order")
    attempts: int
    best_of: int


class RoundStarted(GameEvent):
    """A new round was created and became the active round."""

    event_type: Literal["round_started"] = "round_started"
    round_id: str
    round_number: int = Field(..., description="1-based round number")
    order: list[str] = Field(..., description="Player IDs in turn order for this round")


class AttemptRecorded(GameEvent):
    """A controlled player reported a make or a miss."""

    event_type: Literal["attempt_recorded"] = "attempt_recorded"
    player_id: str
    round_id: str
    attempt_index: int
    made: bool


class AttemptsSimulated(GameEvent):
    """All remaining attempts of an uncontrolled player were simulated."""

    event_type: Literal["attempts_simulated"] = "attempts_simulated"
    player_id: str
    round_id: str
    results: list[bool] = Field(..., description="Outcomes of the simulated slots, in order")


class TurnAdvanced(GameEvent):
    """The next player in the round's order is up."""

    event_type: Literal["turn_advanced"] = "turn_advanced"
    round_id: str
    player_id: str
    next_player_id: str


class OvertimeStarted(GameEvent):
    """Leaders are tied; every player gets one more attempt."""

    event_type: Literal["overtime_started"] = "overtime_started"
    round_id: str
    tied_player_ids: list[str]


class RoundWon(GameEvent):
    """A round has a single winner."""

    event_type: Literal["round_won"] = "round_won"
    round_id: str
    winner_id: str
    makes: int


class MatchWon(GameEvent):
    """A player has won the majority of rounds."""

    event_type: Literal["match_won"] = "match_won"
    winner_id: str
    round_wins: dict[str, int] = Field(..., description="Rounds won per player ID")


# Union of all event types for type checking
AnyGameEvent = Annotated[
    GameStarted
    | RoundStarted
    | AttemptRecorded
    | AttemptsSimulated
    | TurnAdvanced
    | OvertimeStarted
    | RoundWon
    | MatchWon,
    Field(discriminator="event_type"),
]
