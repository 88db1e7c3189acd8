"""
mathroll.demo_player — Demo player strategy
===========================================

A ready-to-use PlayerStrategy that plays sensibly out of the box:
roll when rolling, claim an eligible matching equation when claiming,
otherwise pass. `miss_rate` makes it occasionally pick a wrong equation
so the miss path gets exercised in demo runs.

Usage:
    from mathroll import DemoPlayer, MatchRunner

    runner = MatchRunner(config, {"p1": DemoPlayer(), "p2": DemoPlayer()})
    result = runner.run()
"""

import random
from typing import List, Optional

from ._engine.actions import Action
from .callbacks import PlayerStrategy
from .types import EquationView, MatchSnapshot


class DemoPlayer(PlayerStrategy):
    """
    Greedy demo strategy.

    Args:
        miss_rate: Probability in [0, 1] of claiming a non-matching equation
        rng: Randomness for tie-breaking and deliberate misses
    """

    def __init__(self, miss_rate: float = 0.0, rng: Optional[random.Random] = None):
        if not 0.0 <= miss_rate <= 1.0:
            raise ValueError("miss_rate must be between 0 and 1")
        self.miss_rate = miss_rate
        self._rng = rng or random.Random()

    def choose_action(self, snapshot: MatchSnapshot, player_id: str) -> Action:
        if snapshot["phase"] == "rolling":
            return Action.roll(player_id)

        open_equations = [eq for eq in snapshot["equations"]
                          if _claimable(eq, snapshot["policy"], player_id)]
        hits = [eq for eq in open_equations if eq["result"] == snapshot["dice_value"]]
        misses = [eq for eq in open_equations if eq["result"] != snapshot["dice_value"]]

        if misses and self._rng.random() < self.miss_rate:
            return Action.claim(player_id, self._rng.choice(misses)["id"])
        if hits:
            return Action.claim(player_id, self._pick(hits)["id"])
        return Action.pass_turn(player_id)

    def _pick(self, equations: List[EquationView]) -> EquationView:
        # Prefer equations nobody holds, then steal
        free = [eq for eq in equations if not eq["holders"]]
        return self._rng.choice(free or equations)


def _claimable(equation: EquationView, policy: str, player_id: str) -> bool:
    if policy == "exclusive":
        return not equation["holders"]
    return player_id not in equation["holders"]
