# Area: Engine
"""
mathroll._engine.state — Match state
====================================

The canonical state of one match: roster, per-player records, the board,
the current roll, whose turn it is and the phase. Only the action
handlers and membership handlers mutate it, and only on a working copy
owned by the Match.
"""

from __future__ import annotations
import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .claims import ClaimPolicy
from .equation import Equation
from .outcome import MatchResult

logger = logging.getLogger("mathroll.state")


class MatchPhase(Enum):
    """Phase of the current turn."""
    ROLLING  = "rolling"     # Waiting for the current player to roll
    CLAIMING = "claiming"    # Dice rolled, waiting for a claim or a pass


class LastAction(Enum):
    """Feedback tag for the presentation layer."""
    HIT  = "hit"
    MISS = "miss"
    PASS = "pass"


@dataclass
class PlayerState:
    """One player's record. `score` never decreases during a match."""
    player_id: str
    score: int = 0
    last_action: Optional[LastAction] = None


@dataclass
class MatchState:
    """
    Full state of one match.

    Invariants:
        dice_value is set iff phase is CLAIMING
        current_player_index < len(player_ids) whenever player_ids is non-empty
        len(equations) never changes after setup
    """
    policy: ClaimPolicy
    equations: List[Equation]
    player_ids: List[str] = field(default_factory=list)
    players: Dict[str, PlayerState] = field(default_factory=dict)
    dice_value: Optional[int] = None
    current_player_index: int = 0
    phase: MatchPhase = MatchPhase.ROLLING
    turn_number: int = 0
    result: Optional[MatchResult] = None

    # ── Queries ──────────────────────────────────────────────

    @property
    def board_size(self) -> int:
        return len(self.equations)

    def is_terminal(self) -> bool:
        return self.result is not None

    def current_player_id(self) -> Optional[str]:
        if not self.player_ids:
            return None
        return self.player_ids[self.current_player_index]

    def get_equation(self, equation_id: int) -> Optional[Equation]:
        for equation in self.equations:
            if equation.id == equation_id:
                return equation
        return None

    def scores(self) -> Dict[str, int]:
        return {pid: self.players[pid].score for pid in self.player_ids}

    # ── Transitions ─────────────────────────────────────────

    def advance_phase(self, new_phase: MatchPhase) -> None:
        logger.info(f"[turn {self.turn_number}] Phase: {self.phase.value} → {new_phase.value}")
        self.phase = new_phase

    def end_turn(self) -> None:
        """Pass play to the next seat, clear the roll and return to ROLLING."""
        if self.player_ids:
            self.current_player_index = (self.current_player_index + 1) % len(self.player_ids)
        self.dice_value = None
        self.turn_number += 1
        self.advance_phase(MatchPhase.ROLLING)

    def clear_last_actions(self) -> None:
        for player in self.players.values():
            player.last_action = None

    def copy(self) -> "MatchState":
        return copy.deepcopy(self)
