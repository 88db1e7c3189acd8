# Area: Engine
"""
mathroll._engine.incoming_validator — Host payload validation
=============================================================

Parses raw action payloads delivered by the host into Action values.
Malformed payloads are rejected as InvalidActionError before they reach
any handler.
"""

from __future__ import annotations
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .actions import Action, ActionKind
from ..errors import InvalidActionError


class ActionPayload(BaseModel):
    """Wire shape of one player intent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Literal["roll", "pass", "claim"]
    player_id: str = Field(min_length=1)
    equation_id: Optional[int] = None

    @model_validator(mode="after")
    def _equation_id_matches_action(self) -> "ActionPayload":
        if self.action == "claim" and self.equation_id is None:
            raise ValueError("claim requires equation_id")
        if self.action != "claim" and self.equation_id is not None:
            raise ValueError(f"{self.action} does not take equation_id")
        return self

    def to_action(self) -> Action:
        return Action(ActionKind(self.action), self.player_id, self.equation_id)


def parse_action(payload: Dict[str, Any]) -> Action:
    """Validate a raw payload and return the Action it describes."""
    try:
        return ActionPayload.model_validate(payload).to_action()
    except ValidationError as exc:
        errors = [f"{'.'.join(str(p) for p in e['loc']) or 'payload'}: {e['msg']}"
                  for e in exc.errors()]
        raise InvalidActionError(
            action=str(payload.get("action", "unknown")) if isinstance(payload, dict) else "unknown",
            player_id=payload.get("player_id") if isinstance(payload, dict) else None,
            reason="; ".join(errors),
            payload=payload if isinstance(payload, dict) else {"raw": repr(payload)},
        ) from exc
