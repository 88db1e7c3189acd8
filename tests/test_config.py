# Area: Shared Tests
"""Tests for mathroll.config — MatchConfig and load_config."""

import json
import os

import pytest
from mathroll._engine.claims import ClaimPolicy
from mathroll.config import ENV_MAPPINGS, MatchConfig, load_config
from mathroll.errors import ConfigError
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from real environment variables and any .env file."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestMatchConfig:
    """Tests for MatchConfig validation."""

    def test_defaults(self):
        config = MatchConfig()
        assert config.claim_policy is ClaimPolicy.EXCLUSIVE
        assert config.board_size == 10
        assert (config.min_players, config.max_players) == (2, 6)

    def test_policy_from_string(self):
        assert MatchConfig(claim_policy="multi").claim_policy is ClaimPolicy.MULTI

    def test_max_below_min_rejected(self):
        with pytest.raises(ValidationError):
            MatchConfig(min_players=4, max_players=3)

    def test_zero_board_rejected(self):
        with pytest.raises(ValidationError):
            MatchConfig(board_size=0)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            MatchConfig(colour="red")


class TestLoadConfig:
    """Tests for load_config sources and precedence."""

    def test_no_sources_gives_defaults(self):
        assert load_config() == MatchConfig()

    def test_file(self, tmp_path):
        path = tmp_path / "match.json"
        path.write_text(json.dumps({"claim_policy": "stealable", "seed": 5}))
        config = load_config(str(path))
        assert config.claim_policy is ClaimPolicy.STEALABLE
        assert config.seed == 5

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "match.json"
        path.write_text(json.dumps({"board_size": 8}))
        monkeypatch.setenv("MATHROLL_BOARD_SIZE", "6")
        assert load_config(str(path)).board_size == 6

    def test_explicit_overrides_win(self, monkeypatch):
        monkeypatch.setenv("MATHROLL_CLAIM_POLICY", "multi")
        config = load_config(overrides={"claim_policy": "stealable", "seed": None})
        assert config.claim_policy is ClaimPolicy.STEALABLE
        assert config.seed is None

    def test_dotenv_file_is_read(self, tmp_path):
        (tmp_path / ".env").write_text("MATHROLL_MAX_PLAYERS=4\n")
        try:
            assert load_config().max_players == 4
        finally:
            os.environ.pop("MATHROLL_MAX_PLAYERS", None)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "missing.json"))

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(str(path))

    def test_invalid_values(self, monkeypatch):
        monkeypatch.setenv("MATHROLL_CLAIM_POLICY", "bogus")
        with pytest.raises(ConfigError):
            load_config()
