# Area: Engine Tests
"""Tests for mathroll._engine.snapshot — snapshot builder."""

import json

from mathroll._engine.claims import ClaimPolicy
from mathroll._engine.equation import ClaimState, Equation, Operator
from mathroll._engine.snapshot import build_match_snapshot
from mathroll._engine.state import LastAction, MatchPhase, MatchState, PlayerState


def make_state():
    state = MatchState(
        policy=ClaimPolicy.MULTI,
        equations=[Equation.build(0, 8, Operator.SUBTRACT, 3)],
        player_ids=["p1", "p2"],
        players={"p1": PlayerState("p1", score=2, last_action=LastAction.HIT),
                 "p2": PlayerState("p2")},
    )
    state.equations[0].claim = ClaimState.claimant_set(("p1",))
    return state


def test_snapshot_fields():
    """Snapshot should expose every public field."""
    snapshot = build_match_snapshot(make_state())

    assert snapshot["policy"] == "multi"
    assert snapshot["phase"] == "rolling"
    assert snapshot["dice_value"] is None
    assert snapshot["current_player"] == "p1"
    assert snapshot["players"]["p1"] == {"score": 2, "last_action": "hit"}
    assert snapshot["players"]["p2"] == {"score": 0, "last_action": None}
    assert snapshot["equations"][0] == {
        "id": 0, "left": 8, "right": 3, "operator": "−", "result": 5,
        "claim": "claimant_set", "holders": ["p1"],
    }
    assert snapshot["result"] is None


def test_snapshot_is_json_serializable():
    state = make_state()
    state.phase = MatchPhase.CLAIMING
    state.dice_value = 5
    assert json.loads(json.dumps(build_match_snapshot(state)))["dice_value"] == 5


def test_snapshot_with_empty_roster():
    """Snapshot should handle a roster emptied by departures."""
    state = make_state()
    state.player_ids = []
    state.players = {}

    snapshot = build_match_snapshot(state)

    assert snapshot["current_player"] is None
    assert snapshot["players"] == {}
    assert len(snapshot["equations"]) == 1
