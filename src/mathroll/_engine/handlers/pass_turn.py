# Area: Engine
"""
Pass Handler
============

Ends the caller's turn without a claim.
"""

import logging

from ..state import LastAction, MatchPhase
from .guards import require_turn

logger = logging.getLogger("mathroll.router")


def handle_pass(ctx) -> None:
    require_turn(ctx, MatchPhase.CLAIMING)

    state = ctx.state
    state.players[ctx.action.player_id].last_action = LastAction.PASS
    logger.info("%s passed on %d", ctx.action.player_id, state.dice_value)
    state.end_turn()
