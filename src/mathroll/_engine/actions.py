# Area: Engine
"""
mathroll._engine.actions — Action values
========================================

Every player intent reaches the engine as an Action carrying the
caller's identity explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(Enum):
    ROLL  = "roll"
    PASS  = "pass"
    CLAIM = "claim"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    player_id: str
    equation_id: Optional[int] = None

    @staticmethod
    def roll(player_id: str) -> "Action":
        return Action(ActionKind.ROLL, player_id)

    @staticmethod
    def pass_turn(player_id: str) -> "Action":
        return Action(ActionKind.PASS, player_id)

    @staticmethod
    def claim(player_id: str, equation_id: int) -> "Action":
        return Action(ActionKind.CLAIM, player_id, equation_id)
