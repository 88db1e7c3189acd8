# Area: Engine
"""
mathroll._engine.outcome — Match results
========================================

Defines the MatchResult handed to the host when a win condition fires,
and the two ways outcomes are decided (highest score on a full board,
or a single player reaching the target score).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from .claims import ClaimPolicy


class Outcome(Enum):
    """Per-player end-of-match label."""
    WON  = "WON"
    LOST = "LOST"
    TIE  = "TIE"


@dataclass(frozen=True)
class MatchResult:
    """
    Terminal signal for a match.

    Attributes:
        outcomes: player_id -> Outcome for every player on the roster at the end
        scores: final score per player
        policy: claim policy the match was played under
        reason: "board_complete" or "target_score"
    """
    outcomes: Dict[str, Outcome]
    scores: Dict[str, int]
    policy: ClaimPolicy
    reason: str
    winner_ids: List[str] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        return len(self.winner_ids) > 1

    def to_dict(self) -> dict:
        return {
            "players": {pid: outcome.value for pid, outcome in self.outcomes.items()},
            "scores": dict(self.scores),
            "winner_ids": list(self.winner_ids),
            "is_tie": self.is_tie,
            "policy": self.policy.value,
            "reason": self.reason,
        }


def outcome_by_top_score(
    player_ids: Sequence[str], scores: Mapping[str, int], policy: ClaimPolicy
) -> MatchResult:
    """Sole top scorer WON, shared top score TIE, everyone else LOST."""
    top = max((scores[pid] for pid in player_ids), default=0)
    leaders = [pid for pid in player_ids if scores[pid] == top]
    shared = len(leaders) > 1
    outcomes = {
        pid: (Outcome.TIE if shared else Outcome.WON) if pid in leaders else Outcome.LOST
        for pid in player_ids
    }
    return MatchResult(
        outcomes=outcomes,
        scores={pid: scores[pid] for pid in player_ids},
        policy=policy,
        reason="board_complete",
        winner_ids=leaders,
    )


def outcome_for_sole_winner(
    player_ids: Sequence[str], scores: Mapping[str, int], winner_id: str, policy: ClaimPolicy
) -> MatchResult:
    """`winner_id` WON, everyone else LOST."""
    outcomes = {
        pid: Outcome.WON if pid == winner_id else Outcome.LOST for pid in player_ids
    }
    return MatchResult(
        outcomes=outcomes,
        scores={pid: scores[pid] for pid in player_ids},
        policy=policy,
        reason="target_score",
        winner_ids=[winner_id],
    )
