# Area: Engine
"""
Roll Handler
============

Draws the turn's dice value and opens the claiming phase.
"""

import logging

from ..state import MatchPhase
from .guards import require_turn

logger = logging.getLogger("mathroll.router")

DICE_MIN = 1
DICE_MAX = 10


def handle_roll(ctx) -> None:
    require_turn(ctx, MatchPhase.ROLLING)

    state = ctx.state
    state.dice_value = ctx.rng.randint(DICE_MIN, DICE_MAX)
    state.clear_last_actions()
    logger.info("%s rolled %d", ctx.action.player_id, state.dice_value)
    state.advance_phase(MatchPhase.CLAIMING)
