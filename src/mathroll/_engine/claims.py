# Area: Engine
"""
mathroll._engine.claims — Claim policies
========================================

A match picks one ClaimPolicy at setup. The policy decides:
- whether a player may attempt a claim on an equation
- what the equation's ClaimState becomes after a hit
- which win condition is checked after a hit
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from .equation import ClaimKind, ClaimState, Equation


class ClaimPolicy(Enum):
    """Claim ownership rules for a whole match."""
    EXCLUSIVE = "exclusive"   # first hit owns the equation; ends when all owned
    MULTI     = "multi"       # each player may own each equation once
    STEALABLE = "stealable"   # latest hit holds the equation; may be stolen


def claim_rejection(policy: ClaimPolicy, equation: Equation, player_id: str) -> Optional[str]:
    """Return why `player_id` may not claim `equation`, or None if allowed."""
    claim = equation.claim
    if policy is ClaimPolicy.EXCLUSIVE and claim.is_claimed():
        return f"equation {equation.id} is already owned by {claim.holders[0]}"
    if policy is ClaimPolicy.MULTI and claim.held_by(player_id):
        return f"equation {equation.id} was already claimed by {player_id}"
    if policy is ClaimPolicy.STEALABLE and claim.held_by(player_id):
        return f"equation {equation.id} is already held by {player_id}"
    return None


def record_claim(policy: ClaimPolicy, claim: ClaimState, player_id: str) -> ClaimState:
    """Return the ClaimState after `player_id` hits an equation."""
    if policy is ClaimPolicy.EXCLUSIVE:
        return ClaimState.exclusive(player_id)
    if policy is ClaimPolicy.MULTI:
        holders = claim.holders if claim.kind is ClaimKind.CLAIMANT_SET else ()
        return ClaimState.claimant_set(holders + (player_id,))
    return ClaimState.last_claimant(player_id)


def ends_on_full_board(policy: ClaimPolicy) -> bool:
    """EXCLUSIVE matches end when every equation is owned; others on score."""
    return policy is ClaimPolicy.EXCLUSIVE
