# Area: Engine
"""Precondition checks shared by the action handlers."""

from __future__ import annotations

from ..state import MatchPhase
from ...errors import InvalidActionError


def require_turn(ctx, phase: MatchPhase) -> None:
    """Reject unless the match is live, it is the caller's turn and the phase matches."""
    state = ctx.state
    action = ctx.action
    name = action.kind.value

    if state.is_terminal():
        raise InvalidActionError(name, action.player_id, "match is over")
    current = state.current_player_id()
    if current is None:
        raise InvalidActionError(name, action.player_id, "no players in the match")
    if action.player_id != current:
        raise InvalidActionError(
            name, action.player_id, f"not your turn (current player is {current})"
        )
    if state.phase is not phase:
        raise InvalidActionError(
            name, action.player_id,
            f"not allowed while {state.phase.value} (requires {phase.value})",
        )
