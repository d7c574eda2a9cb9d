from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# A single shot: True = make, False = miss, None = not taken yet
AttemptOutcome = bool | None


# Game phases
class GamePhase(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# Data models for game entities
# Defined at registration, immutable for the rest of the match
class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    percentage: float = Field(0, ge=0, le=100)
    controlled: bool = False


class Round(BaseModel):
    id: str
    name: str
    order: list[str]
    attempts: dict[str, list[AttemptOutcome]]
    active_player: int = 0
    winner: str | None = None


# Game state held by the match owner
class Game(BaseModel):
    """Match aggregate - the value the reducer transforms.

    Rounds only ever grow. ``active_round`` indexes ``rounds`` once the
    match has started.
    """

    id: str
    players: list[Player] = []
    rounds: list[Round] = []
    winner: Player | None = None
    best_of: int = 3
    attempts: int = 5
    active_round: int = 0
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)


class PlayerRoundStats(BaseModel):
    makes: int
    taken: int
    percentage: int
