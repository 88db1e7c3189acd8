# Area: Engine
"""
Claim Handler
=============

Resolves a claim attempt against the current dice value, records the
hit under the match's claim policy and checks the win condition.
"""

import logging
from typing import Optional

from ..claims import claim_rejection, ends_on_full_board, record_claim
from ..outcome import MatchResult, outcome_by_top_score, outcome_for_sole_winner
from ..state import LastAction, MatchPhase, MatchState
from .guards import require_turn
from ...errors import InvalidActionError

logger = logging.getLogger("mathroll.router")


def handle_claim(ctx) -> Optional[MatchResult]:
    """
    Handle a claim on `ctx.action.equation_id`.

    Returns the MatchResult if this claim ended the match, else None.
    Every rejection is raised before the state is touched.
    """
    require_turn(ctx, MatchPhase.CLAIMING)

    state = ctx.state
    player_id = ctx.action.player_id
    equation_id = ctx.action.equation_id

    equation = state.get_equation(equation_id) if equation_id is not None else None
    if equation is None:
        raise InvalidActionError("claim", player_id, f"unknown equation {equation_id}")
    reason = claim_rejection(state.policy, equation, player_id)
    if reason:
        raise InvalidActionError("claim", player_id, reason)

    player = state.players[player_id]
    if equation.result != state.dice_value:
        player.last_action = LastAction.MISS
        logger.info(
            "%s missed: %s = %d, rolled %d",
            player_id, equation.label(), equation.result, state.dice_value,
        )
        state.end_turn()
        return None

    player.score += 1
    player.last_action = LastAction.HIT
    equation.claim = record_claim(state.policy, equation.claim, player_id)
    logger.info(
        "%s claimed %s = %d (score %d)",
        player_id, equation.label(), equation.result, player.score,
    )

    result = _check_win(state, player_id)
    if result is not None:
        state.result = result
        logger.info("Match over: %s", {pid: o.value for pid, o in result.outcomes.items()})
        return result

    state.end_turn()
    return None


def _check_win(state: MatchState, player_id: str) -> Optional[MatchResult]:
    if ends_on_full_board(state.policy):
        if all(eq.claim.is_claimed() for eq in state.equations):
            return outcome_by_top_score(state.player_ids, state.scores(), state.policy)
        return None
    if state.players[player_id].score >= state.board_size:
        return outcome_for_sole_winner(state.player_ids, state.scores(), player_id, state.policy)
    return None
