"""
mathroll.config — Match configuration
=====================================

MatchConfig validation plus loading from a JSON file and environment
variables. A `.env` file in the working directory is loaded first, so
its values behave like real environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ._engine.board import DEFAULT_BOARD_SIZE, DEFAULT_MAX_ATTEMPTS
from ._engine.claims import ClaimPolicy
from .errors import ConfigError

logger = logging.getLogger("mathroll")

DEFAULT_MIN_PLAYERS = 2
DEFAULT_MAX_PLAYERS = 6

# Environment variable -> config key
ENV_MAPPINGS = {
    "MATHROLL_CLAIM_POLICY": "claim_policy",
    "MATHROLL_BOARD_SIZE": "board_size",
    "MATHROLL_MIN_PLAYERS": "min_players",
    "MATHROLL_MAX_PLAYERS": "max_players",
    "MATHROLL_MAX_GENERATION_ATTEMPTS": "max_generation_attempts",
    "MATHROLL_SEED": "seed",
    "MATHROLL_LOG_FILE": "log_file",
    "MATHROLL_LOG_LEVEL": "log_level",
    "MATHROLL_MAX_TURNS": "max_turns",
}


class MatchConfig(BaseModel):
    """Settings fixed for the lifetime of one match."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    claim_policy: ClaimPolicy = ClaimPolicy.EXCLUSIVE
    board_size: int = Field(default=DEFAULT_BOARD_SIZE, ge=1)
    min_players: int = Field(default=DEFAULT_MIN_PLAYERS, ge=1)
    max_players: int = Field(default=DEFAULT_MAX_PLAYERS, ge=1)
    max_generation_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    seed: Optional[int] = None
    log_file: str = "mathroll.log"
    log_level: str = "INFO"
    max_turns: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _check_roster_bounds(self) -> "MatchConfig":
        if self.max_players < self.min_players:
            raise ValueError(
                f"max_players ({self.max_players}) is below min_players ({self.min_players})"
            )
        return self


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> MatchConfig:
    """
    Load MatchConfig from file, then environment, then explicit overrides.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values that win over both file and environment

    Raises:
        ConfigError: If the file cannot be read or values fail validation
    """
    load_dotenv(find_dotenv(usecwd=True))
    raw: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            raw[config_key] = os.environ[env_key]

    for key, value in (overrides or {}).items():
        if value is not None:
            raw[key] = value

    try:
        config = MatchConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid match configuration: {exc}") from exc

    logger.debug("Loaded config: %s", config.model_dump(mode="json"))
    return config
