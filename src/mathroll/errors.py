"""
mathroll.errors — Custom exception classes
==========================================

Defines the exception hierarchy for the rules engine.
Each exception stores enough context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class MathRollError(Exception):
    """Base exception for all mathroll package errors."""
    pass


class InvalidActionError(MathRollError):
    """
    Raised when an action breaks a precondition.

    The match state is left exactly as it was; the caller may fetch a
    fresh snapshot and submit a legal action.
    """

    def __init__(
        self,
        action: str,
        player_id: Optional[str],
        reason: str,
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.action = action
        self.player_id = player_id
        self.reason = reason
        self.payload = payload or {}
        super().__init__(f"Invalid action '{action}' from {player_id}: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_ACTION",
            action=self.action,
            player_id=self.player_id,
            reason=self.reason,
            payload=self.payload,
        )


class RosterError(MathRollError):
    """Raised when setup or a join would leave the roster out of bounds."""

    def __init__(self, reason: str, player_ids: Optional[list] = None):
        self.reason = reason
        self.player_ids = list(player_ids or [])
        super().__init__(f"Roster error: {reason}")


class ConfigError(MathRollError):
    """Raised when match configuration cannot be loaded."""
    pass


def _format_error_block(
    error_type: str,
    action: str,
    player_id: Optional[str],
    reason: str,
    payload: Dict[str, Any],
) -> str:
    """Format a structured error block for rejected actions."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " ACTION REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Action:       {action}",
        f" Player:       {player_id}",
        f" Reason:       {reason}",
    ]

    if payload:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(_indent_json(payload))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
