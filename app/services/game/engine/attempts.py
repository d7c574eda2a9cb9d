"""Attempt processing: reported makes/misses and simulated shooting."""

import logging
import random

logger = logging.getLogger(__name__)

from app.schemas.game_engine import Game

from .errors import invariant
from .events import AnyGameEvent, AttemptRecorded, AttemptsSimulated
from .queries import get_active_player, get_active_round
from .rounds import end_round, with_round
from .validation import ProcessResult


def random_make(percentage: float, rng: random.Random | None = None) -> bool:
    """Draw one simulated shot: uniform in [0, 100], make if draw <= percentage."""
    draw = (rng or random).uniform(0, 100)
    return draw <= percentage


def process_attempt(state: Game, made: bool) -> ProcessResult:
    """Record a make or miss for the active player.

    Ignored (unchanged state, no events) when the active player is not
    controlled. The round is evaluated once the player fills their last
    slot.

    Raises:
        InvariantViolation: If the active player has no pending slot.
    """
    game_round = get_active_round(state)
    player = get_active_player(state)

    if not player.controlled:
        logger.debug("Ignoring make/miss: player=%s is simulated", player.name)
        return ProcessResult.ok(state)

    slots = game_round.attempts.get(player.id)
    invariant(slots is not None, f"Player {player.id} not found in round {game_round.id}.")

    next_index = next((i for i, slot in enumerate(slots) if slot is None), -1)
    invariant(next_index >= 0, "Invalid action, no more makes left")

    new_slots = list(slots)
    new_slots[next_index] = made
    new_round = game_round.model_copy(
        update={"attempts": {**game_round.attempts, player.id: new_slots}}
    )
    new_state = with_round(state, state.active_round, new_round)

    logger.info(
        "Attempt recorded: player=%s, round=%s, slot=%d, made=%s",
        player.name,
        game_round.name,
        next_index,
        made,
    )
    events: list[AnyGameEvent] = [
        AttemptRecorded(
            player_id=player.id,
            round_id=game_round.id,
            attempt_index=next_index,
            made=made,
        )
    ]

    if next_index == len(new_slots) - 1:
        new_state, round_events = end_round(new_state)
        events.extend(round_events)

    return ProcessResult.ok(new_state, events)


def process_simulate(state: Game, rng: random.Random | None = None) -> ProcessResult:
    """Simulate every remaining attempt of the active player.

    Ignored (unchanged state, no events) when the active player is
    controlled. Always evaluates the round afterwards.
    """
    game_round = get_active_round(state)
    player = get_active_player(state)

    if player.controlled:
        logger.debug("Ignoring simulate: player=%s is controlled", player.name)
        return ProcessResult.ok(state)

    slots = game_round.attempts.get(player.id)
    invariant(slots is not None, f"Player {player.id} not found in round {game_round.id}.")

    new_slots = list(slots)
    results: list[bool] = []
    for index, slot in enumerate(new_slots):
        if slot is not None:
            continue
        new_slots[index] = random_make(player.percentage, rng)
        results.append(new_slots[index])

    new_round = game_round.model_copy(
        update={"attempts": {**game_round.attempts, player.id: new_slots}}
    )
    new_state = with_round(state, state.active_round, new_round)

    logger.info(
        "Attempts simulated: player=%s, round=%s, percentage=%s, results=%s",
        player.name,
        game_round.name,
        player.percentage,
        results,
    )
    events: list[AnyGameEvent] = [
        AttemptsSimulated(player_id=player.id, round_id=game_round.id, results=results)
    ]

    new_state, round_events = end_round(new_state)
    events.extend(round_events)

    return ProcessResult.ok(new_state, events)
