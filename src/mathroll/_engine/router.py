# Area: Engine
"""
mathroll._engine.router — Action router
=======================================

Routes one Action to its handler. `apply_action` is pure with respect
to its input: it works on a copy and returns the next state, so a
rejected action leaves the caller's state untouched.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .actions import Action, ActionKind
from .outcome import MatchResult
from .state import MatchState
from .handlers import handle_claim, handle_pass, handle_roll
from ..errors import InvalidActionError

logger = logging.getLogger("mathroll.router")


@dataclass
class HandlerContext:
    """Context passed to handler functions."""

    state: MatchState
    action: Action
    rng: random.Random


@dataclass(frozen=True)
class ActionOutcome:
    """Next state after an accepted action, plus the result if it ended the match."""

    state: MatchState
    result: Optional[MatchResult] = None


def apply_action(state: MatchState, action: Action, rng: random.Random) -> ActionOutcome:
    """
    Apply `action` to a copy of `state`.

    Raises:
        InvalidActionError: If any precondition fails. `state` is unchanged.
    """
    working = state.copy()
    ctx = HandlerContext(state=working, action=action, rng=rng)

    if action.kind is ActionKind.ROLL:
        handle_roll(ctx)
        return ActionOutcome(working)

    elif action.kind is ActionKind.PASS:
        handle_pass(ctx)
        return ActionOutcome(working)

    elif action.kind is ActionKind.CLAIM:
        return ActionOutcome(working, handle_claim(ctx))

    raise InvalidActionError(str(action.kind), action.player_id, "unknown action kind")
