# Area: Hosting Tests
"""Tests for mathroll.demo_player — DemoPlayer choices."""

import random

import pytest
from mathroll import Action, DemoPlayer


def make_snapshot(phase="claiming", dice=6, policy="multi", holders=None):
    holders = holders or {}
    results = {0: 6, 1: 2, 2: 6}
    return {
        "phase": phase,
        "dice_value": dice if phase == "claiming" else None,
        "policy": policy,
        "equations": [
            {"id": eid, "result": result, "holders": holders.get(eid, [])}
            for eid, result in results.items()
        ],
    }


class TestDemoPlayer:
    """Tests for DemoPlayer.choose_action."""

    def test_rolls_when_rolling(self):
        assert DemoPlayer().choose_action(make_snapshot(phase="rolling"), "p1") == Action.roll("p1")

    def test_claims_matching_equation(self):
        action = DemoPlayer(rng=random.Random(0)).choose_action(make_snapshot(), "p1")
        assert action.equation_id in (0, 2)

    def test_prefers_unheld_equation(self):
        snapshot = make_snapshot(policy="stealable", holders={0: ["p2"]})
        action = DemoPlayer(rng=random.Random(0)).choose_action(snapshot, "p1")
        assert action == Action.claim("p1", 2)

    def test_skips_own_claims(self):
        snapshot = make_snapshot(holders={0: ["p1"], 2: ["p1"]})
        assert DemoPlayer().choose_action(snapshot, "p1") == Action.pass_turn("p1")

    def test_exclusive_skips_owned(self):
        snapshot = make_snapshot(policy="exclusive", holders={0: ["p2"], 2: ["p3"]})
        assert DemoPlayer().choose_action(snapshot, "p1") == Action.pass_turn("p1")

    def test_always_miss(self):
        action = DemoPlayer(miss_rate=1.0, rng=random.Random(0)).choose_action(make_snapshot(), "p1")
        assert action == Action.claim("p1", 1)

    def test_invalid_miss_rate(self):
        with pytest.raises(ValueError):
            DemoPlayer(miss_rate=1.5)
