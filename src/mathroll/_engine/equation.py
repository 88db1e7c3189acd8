# Area: Engine
"""
mathroll._engine.equation — Board equations and claim markers
=============================================================

An Equation is an immutable arithmetic fact (operands, operator, result)
plus a claim marker. The marker is a tagged ClaimState value which is
replaced, never edited, when a claim resolves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class Operator(Enum):
    """Arithmetic operators that can appear on the board."""
    ADD      = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE   = "/"

    @property
    def symbol(self) -> str:
        """Display glyph used by presentation layers."""
        return _SYMBOLS[self]

    def apply(self, left: int, right: int) -> int:
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        if right == 0 or left % right:
            raise ValueError(f"{left} / {right} is not an exact integer division")
        return left // right


_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}


class ClaimKind(Enum):
    """Shape of an equation's claim marker."""
    UNCLAIMED       = "unclaimed"
    EXCLUSIVE_OWNER = "exclusive_owner"   # first hit owns it for good
    CLAIMANT_SET    = "claimant_set"      # every player may hit it once
    LAST_CLAIMANT   = "last_claimant"     # latest hit holds it until stolen


@dataclass(frozen=True)
class ClaimState:
    """Immutable claim marker; `holders` is empty only when UNCLAIMED."""
    kind: ClaimKind = ClaimKind.UNCLAIMED
    holders: Tuple[str, ...] = ()

    @classmethod
    def unclaimed(cls) -> "ClaimState":
        return cls()

    @classmethod
    def exclusive(cls, player_id: str) -> "ClaimState":
        return cls(ClaimKind.EXCLUSIVE_OWNER, (player_id,))

    @classmethod
    def claimant_set(cls, player_ids: Tuple[str, ...]) -> "ClaimState":
        if not player_ids:
            return cls()
        return cls(ClaimKind.CLAIMANT_SET, tuple(player_ids))

    @classmethod
    def last_claimant(cls, player_id: str) -> "ClaimState":
        return cls(ClaimKind.LAST_CLAIMANT, (player_id,))

    def is_claimed(self) -> bool:
        return self.kind is not ClaimKind.UNCLAIMED

    def held_by(self, player_id: str) -> bool:
        return player_id in self.holders

    def without(self, player_id: str) -> "ClaimState":
        """Return this marker with `player_id` stripped out."""
        if player_id not in self.holders:
            return self
        remaining = tuple(p for p in self.holders if p != player_id)
        if self.kind is ClaimKind.CLAIMANT_SET:
            return ClaimState.claimant_set(remaining)
        return ClaimState.unclaimed()


@dataclass
class Equation:
    """One board slot. Operands and result are fixed at generation; only `claim` is reassigned."""
    id: int
    left: int
    right: int
    operator: Operator
    result: int
    claim: ClaimState = field(default_factory=ClaimState)

    @classmethod
    def build(cls, equation_id: int, left: int, operator: Operator, right: int) -> "Equation":
        return cls(
            id=equation_id,
            left=left,
            right=right,
            operator=operator,
            result=operator.apply(left, right),
        )

    def recompute(self) -> int:
        return self.operator.apply(self.left, self.right)

    def label(self) -> str:
        return f"{self.left} {self.operator.symbol} {self.right}"
