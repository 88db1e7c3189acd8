# Area: Engine
"""
Action Handlers
===============

Handler functions for player actions and roster events.
"""

from .roll import handle_roll
from .pass_turn import handle_pass
from .claim import handle_claim
from .membership import handle_join, handle_leave

__all__ = [
    "handle_roll",
    "handle_pass",
    "handle_claim",
    "handle_join",
    "handle_leave",
]
