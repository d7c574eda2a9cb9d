"""Read-only derivation queries over a Game value.

Every lookup fails loudly with InvariantViolation when the referenced
round or player is missing: that means the state is corrupted, not empty.
"""

import math

from app.schemas.game_engine import Game, GamePhase, Player, PlayerRoundStats, Round

from .errors import invariant


def get_round_by_id(game: Game, round_id: str) -> Round:
    """Return the round with the given id."""
    game_round = next((r for r in game.rounds if r.id == round_id), None)
    invariant(game_round, f"Round with id {round_id} not found.")
    return game_round


def get_active_round(game: Game) -> Round:
    """Return the round currently being played."""
    invariant(
        0 <= game.active_round < len(game.rounds),
        f"Round {game.active_round} not found.",
    )
    return game.rounds[game.active_round]


def get_player_by_id(game: Game, player_id: str) -> Player:
    player = next((p for p in game.players if p.id == player_id), None)
    invariant(player, f"Player not found with id {player_id}")
    return player


def get_active_player(game: Game) -> Player:
    """Return the player whose turn it is in the active round."""
    game_round = get_active_round(game)
    invariant(
        0 <= game_round.active_player < len(game_round.order),
        f"Player {game_round.active_player} not found.",
    )
    return get_player_by_id(game, game_round.order[game_round.active_player])


def get_total_attempts(game: Game) -> int:
    """Attempts per player in a regular round; later slots are overtime."""
    return game.attempts


def is_overtime_slot(game: Game, index: int) -> bool:
    return index >= game.attempts


def get_game_phase(game: Game) -> GamePhase:
    if not game.players:
        return GamePhase.NOT_STARTED
    if game.winner is not None:
        return GamePhase.FINISHED
    return GamePhase.IN_PROGRESS


def get_wins_to_finish(game: Game) -> int:
    return math.ceil(game.best_of / 2)


def get_round_wins(game: Game) -> dict[str, int]:
    """Count rounds won per player id, in round order."""
    wins: dict[str, int] = {}
    for game_round in game.rounds:
        if game_round.winner is not None:
            wins[game_round.winner] = wins.get(game_round.winner, 0) + 1
    return wins


def get_player_round_stats(game_round: Round, player_id: str) -> PlayerRoundStats:
    """Makes, attempts taken and shooting percentage for one player in a round."""
    attempts = game_round.attempts.get(player_id)
    invariant(attempts is not None, f"Player {player_id} not found in round {game_round.id}.")

    makes = sum(1 for attempt in attempts if attempt is True)
    taken = sum(1 for attempt in attempts if attempt is not None)
    percentage = math.floor(makes / taken * 100 + 0.5) if taken else 0
    return PlayerRoundStats(makes=makes, taken=taken, percentage=percentage)


def has_attempts_left(game_round: Round) -> bool:
    """True while any player in the round still has a pending slot."""
    return any(
        attempt is None for attempts in game_round.attempts.values() for attempt in attempts
    )


def has_pending_attempts(game_round: Round, player_id: str) -> bool:
    attempts = game_round.attempts.get(player_id)
    invariant(attempts is not None, f"Player {player_id} not found in round {game_round.id}.")
    return any(attempt is None for attempt in attempts)


def can_act(game: Game) -> bool:
    """Whether the active player's controls should be enabled.

    False before the start, after the match is decided, and once the
    active player has no pending slot left.
    """
    if get_game_phase(game) != GamePhase.IN_PROGRESS:
        return False
    return has_pending_attempts(get_active_round(game), get_active_player(game).id)
