"""
mathroll — Rules engine for the dice-and-equations game
=======================================================

Players take turns rolling a ten-sided die and claiming equations on a
shared board whose result equals the roll.

Quick Start:
    from mathroll import Match, MatchConfig, ClaimPolicy

    match = Match(["ana", "ben"], config=MatchConfig(claim_policy=ClaimPolicy.MULTI))
    match.roll_dice("ana")
    match.claim_equation("ana", 4)       # raises InvalidActionError if illegal
    view = match.snapshot()

Automated play:
    from mathroll import DemoPlayer, MatchRunner

    runner = MatchRunner(MatchConfig(seed=1), {"ana": DemoPlayer(), "ben": DemoPlayer()})
    result = runner.run()
"""

from ._engine import (
    Action,
    ActionKind,
    BoardGenerator,
    ClaimKind,
    ClaimPolicy,
    ClaimState,
    Equation,
    LastAction,
    Match,
    MatchPhase,
    MatchResult,
    MatchState,
    Operator,
    Outcome,
    PlayerState,
    apply_action,
    build_match_snapshot,
    generate_board,
    setup_match,
)
from .config import MatchConfig, load_config
from .errors import (
    MathRollError,
    InvalidActionError,
    RosterError,
    ConfigError,
)
from .callbacks import PlayerStrategy
from .demo_player import DemoPlayer
from .runner import MatchRunner
from .types import EquationView, PlayerView, MatchResultView, MatchSnapshot

__all__ = [
    # Engine
    "Action",
    "ActionKind",
    "BoardGenerator",
    "ClaimKind",
    "ClaimPolicy",
    "ClaimState",
    "Equation",
    "LastAction",
    "Match",
    "MatchPhase",
    "MatchResult",
    "MatchState",
    "Operator",
    "Outcome",
    "PlayerState",
    "apply_action",
    "build_match_snapshot",
    "generate_board",
    "setup_match",
    # Config
    "MatchConfig",
    "load_config",
    # Errors
    "MathRollError",
    "InvalidActionError",
    "RosterError",
    "ConfigError",
    # Hosting
    "PlayerStrategy",
    "DemoPlayer",
    "MatchRunner",
    # Snapshot types
    "EquationView",
    "PlayerView",
    "MatchResultView",
    "MatchSnapshot",
]
__version__ = "1.0.0"
