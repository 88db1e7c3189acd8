# Area: Engine
"""
Match Engine - Single-match rules engine.

This package handles:
- Board generation
- Match state and claim policies
- Action validation and routing
- Scoring and win detection
- Snapshot building
"""

from .actions import Action, ActionKind
from .board import BoardGenerator, generate_board
from .claims import ClaimPolicy
from .equation import ClaimKind, ClaimState, Equation, Operator
from .match import Match, setup_match
from .outcome import MatchResult, Outcome
from .router import ActionOutcome, apply_action
from .snapshot import build_match_snapshot
from .state import LastAction, MatchPhase, MatchState, PlayerState

__all__ = [
    "Action",
    "ActionKind",
    "BoardGenerator",
    "generate_board",
    "ClaimPolicy",
    "ClaimKind",
    "ClaimState",
    "Equation",
    "Operator",
    "Match",
    "setup_match",
    "MatchResult",
    "Outcome",
    "ActionOutcome",
    "apply_action",
    "build_match_snapshot",
    "LastAction",
    "MatchPhase",
    "MatchState",
    "PlayerState",
]
