# Area: Engine Tests
"""Tests for mathroll._engine.incoming_validator — payload parsing."""

import pytest
from mathroll._engine.actions import Action, ActionKind
from mathroll._engine.incoming_validator import parse_action
from mathroll.errors import InvalidActionError


class TestParseAction:
    """Tests for parse_action."""

    def test_roll(self):
        assert parse_action({"action": "roll", "player_id": "p1"}) == Action.roll("p1")

    def test_pass(self):
        assert parse_action({"action": "pass", "player_id": "p1"}).kind is ActionKind.PASS

    def test_claim(self):
        action = parse_action({"action": "claim", "player_id": "p1", "equation_id": 4})
        assert action == Action.claim("p1", 4)

    @pytest.mark.parametrize("payload", [
        {"action": "claim", "player_id": "p1"},
        {"action": "roll", "player_id": "p1", "equation_id": 2},
        {"action": "jump", "player_id": "p1"},
        {"action": "roll", "player_id": ""},
        {"action": "roll"},
        {"action": "roll", "player_id": "p1", "extra": True},
    ])
    def test_malformed_payloads_rejected(self, payload):
        with pytest.raises(InvalidActionError) as exc_info:
            parse_action(payload)
        assert exc_info.value.payload == payload

    def test_error_names_offending_field(self):
        with pytest.raises(InvalidActionError) as exc_info:
            parse_action({"action": "roll", "player_id": "p1", "equation_id": 2})
        assert "does not take equation_id" in exc_info.value.reason
