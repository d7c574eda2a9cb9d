"""Round lifecycle: creation, overtime, winner detection and turn rotation."""

import logging
import uuid

logger = logging.getLogger(__name__)

from app.schemas.game_engine import Game, Player, Round

from .events import AnyGameEvent, MatchWon, OvertimeStarted, RoundStarted, RoundWon, TurnAdvanced
from .queries import (
    get_active_round,
    get_player_by_id,
    get_round_wins,
    get_wins_to_finish,
    has_attempts_left,
)


def with_round(game: Game, index: int, game_round: Round) -> Game:
    """Return a copy of ``game`` with the round at ``index`` replaced."""
    rounds = list(game.rounds)
    rounds[index] = game_round
    return game.model_copy(update={"rounds": rounds})


def create_next_round(game: Game) -> tuple[Game, RoundStarted]:
    """Append a fresh round and make it the active one.

    Turn order is the previous round's order reversed, so whoever shot
    last now shoots first. Round 1 uses registration order.
    """
    if game.rounds:
        order = list(reversed(game.rounds[-1].order))
    else:
        order = [player.id for player in game.players]

    new_round = Round(
        id=str(uuid.uuid4()),
        name=f"Round #{len(game.rounds) + 1}",
        order=order,
        attempts={player.id: [None] * game.attempts for player in game.players},
        active_player=0,
        winner=None,
    )
    logger.debug(
        "Creating round: name=%s, order=%s",
        new_round.name,
        [player_id[:8] for player_id in order],
    )

    new_game = game.model_copy(
        update={
            "rounds": [*game.rounds, new_round],
            "active_round": len(game.rounds),
        }
    )
    event = RoundStarted(
        round_id=new_round.id,
        round_number=len(new_game.rounds),
        order=order,
    )
    return new_game, event


def count_makes(attempts: list[bool | None]) -> int:
    return sum(1 for attempt in attempts if attempt)


def check_round_winners(game_round: Round) -> list[str]:
    """Return the player ids leading the round once every slot is taken.

    Empty while any attempt is still pending; two or more ids on a tie.
    """
    if has_attempts_left(game_round):
        return []

    best = 0
    winners: list[str] = []
    for player_id, attempts in game_round.attempts.items():
        total = count_makes(attempts)
        if total == best:
            winners.append(player_id)
        elif total > best:
            best = total
            winners = [player_id]
    return winners


def start_overtime(game: Game) -> Game:
    """Give every player one more pending slot in the active round."""
    game_round = get_active_round(game)
    attempts = {player_id: [*slots, None] for player_id, slots in game_round.attempts.items()}
    return with_round(
        game,
        game.active_round,
        game_round.model_copy(update={"attempts": attempts}),
    )


def check_game_over(game: Game) -> Player | None:
    """Return the first player to reach the majority of round wins, if any."""
    wins_to_finish = get_wins_to_finish(game)
    wins: dict[str, int] = {}

    for game_round in game.rounds:
        if game_round.winner is None:
            continue
        wins[game_round.winner] = wins.get(game_round.winner, 0) + 1
        if wins[game_round.winner] == wins_to_finish:
            return get_player_by_id(game, game_round.winner)

    return None


def end_round(game: Game) -> tuple[Game, list[AnyGameEvent]]:
    """Evaluate the active round after an attempt was recorded.

    Handles, in order:
    - Tie among leaders: overtime slot for everyone, turn stays put
    - Single leader: round winner, then match winner or next round
    - Attempts left: pass the turn to the next player in order
    - Round settled by the last player in order: move on to the next round

    Args:
        game: Game with the latest attempt already recorded.

    Returns:
        Tuple of (new game, events describing the transition).
    """
    events: list[AnyGameEvent] = []
    round_index = game.active_round
    next_round_index = round_index + 1
    game_round = get_active_round(game)
    winners = check_round_winners(game_round)

    if len(winners) > 1:
        logger.info(
            "Round tied, starting overtime: round=%s, tied=%s",
            game_round.name,
            [player_id[:8] for player_id in winners],
        )
        events.append(OvertimeStarted(round_id=game_round.id, tied_player_ids=winners))
        return start_overtime(game), events

    if len(winners) == 1:
        winner_id = winners[0]
        game_round = game_round.model_copy(update={"winner": winner_id})
        game = with_round(game, round_index, game_round)
        makes = count_makes(game_round.attempts[winner_id])
        logger.info(
            "Round won: round=%s, winner=%s, makes=%d",
            game_round.name,
            winner_id[:8],
            makes,
        )
        events.append(RoundWon(round_id=game_round.id, winner_id=winner_id, makes=makes))

        match_winner = check_game_over(game)
        if match_winner is not None:
            round_wins = get_round_wins(game)
            logger.info(
                "Match won: winner=%s, round_wins=%s",
                match_winner.name,
                round_wins,
            )
            events.append(MatchWon(winner_id=match_winner.id, round_wins=round_wins))
            return game.model_copy(update={"winner": match_winner}), events

        game, started = create_next_round(game)
        events.append(started)

    if has_attempts_left(game_round):
        next_index = (game_round.active_player + 1) % len(game_round.order)
        events.append(
            TurnAdvanced(
                round_id=game_round.id,
                player_id=game_round.order[game_round.active_player],
                next_player_id=game_round.order[next_index],
            )
        )
        logger.debug(
            "Turn advanced: round=%s, active_player=%d -> %d",
            game_round.name,
            game_round.active_player,
            next_index,
        )
        return (
            with_round(game, round_index, game_round.model_copy(update={"active_player": next_index})),
            events,
        )

    is_last_player = game_round.active_player == len(game_round.order) - 1
    has_more_rounds = next_round_index < len(game.rounds)

    if is_last_player and has_more_rounds:
        game = with_round(game, round_index, game_round.model_copy(update={"active_player": 0}))
        game = game.model_copy(update={"active_round": next_round_index})

    return game, events
