# Area: Engine
"""
Membership Handlers
===================

Roster bookkeeping for players joining or leaving mid-match. These are
host events rather than player actions: they are accepted after the
match is over and never trigger win evaluation.
"""

import logging

from ..state import MatchPhase, MatchState, PlayerState
from ...errors import RosterError

logger = logging.getLogger("mathroll.membership")


def handle_join(state: MatchState, player_id: str, max_players: int) -> bool:
    """Append `player_id` to the rotation. Returns False if already seated."""
    if player_id in state.players:
        logger.debug("Join ignored, %s already seated", player_id)
        return False
    if len(state.player_ids) >= max_players:
        raise RosterError(f"roster is full ({max_players} players)", state.player_ids)

    state.player_ids.append(player_id)
    state.players[player_id] = PlayerState(player_id=player_id)
    logger.info("%s joined (seat %d)", player_id, len(state.player_ids) - 1)
    return True


def handle_leave(state: MatchState, player_id: str) -> bool:
    """Remove `player_id` from the rotation and the board. Returns False if unknown."""
    if player_id not in state.players:
        logger.debug("Leave ignored, %s not seated", player_id)
        return False

    previous = state.current_player_id()
    state.player_ids.remove(player_id)
    del state.players[player_id]
    for equation in state.equations:
        equation.claim = equation.claim.without(player_id)

    # Plain modulo wrap; the rotation does not skip-adjust for departures
    if state.player_ids:
        state.current_player_index %= len(state.player_ids)
    else:
        state.current_player_index = 0

    # A roll belongs to the player who made it
    if state.current_player_id() != previous and not state.is_terminal():
        state.dice_value = None
        if state.phase is not MatchPhase.ROLLING:
            state.advance_phase(MatchPhase.ROLLING)

    logger.info("%s left (%d players remain)", player_id, len(state.player_ids))
    return True
