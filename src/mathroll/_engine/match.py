# Area: Engine
"""
mathroll._engine.match — Match owner
====================================

A Match is the single writer of one MatchState. Player actions and
roster events go through it one at a time; each action is applied to a
copy and the copy replaces the live state only when every check passed.
"""

from __future__ import annotations
import logging
import random
from typing import Any, Callable, Dict, List, Optional, Sequence

from .actions import Action
from .board import BoardGenerator
from .handlers import handle_join, handle_leave
from .incoming_validator import parse_action
from .outcome import MatchResult
from .router import apply_action
from .snapshot import build_match_snapshot
from .state import MatchState, PlayerState
from ..config import MatchConfig
from ..errors import InvalidActionError, RosterError

logger = logging.getLogger("mathroll.match")

MatchOverListener = Callable[[MatchResult], None]


def setup_match(
    player_ids: Sequence[str],
    config: Optional[MatchConfig] = None,
    rng: Optional[random.Random] = None,
) -> MatchState:
    """
    Build the initial state for a match.

    Raises:
        RosterError: If the roster size is out of bounds or has duplicates
    """
    config = config or MatchConfig()
    rng = rng or random.Random(config.seed)
    roster = list(player_ids)

    if len(set(roster)) != len(roster):
        raise RosterError("duplicate player ids", roster)
    if not config.min_players <= len(roster) <= config.max_players:
        raise RosterError(
            f"{len(roster)} players, expected {config.min_players}..{config.max_players}",
            roster,
        )

    generator = BoardGenerator(rng, max_attempts=config.max_generation_attempts)
    state = MatchState(
        policy=config.claim_policy,
        equations=generator.generate(config.board_size),
        player_ids=roster,
        players={pid: PlayerState(player_id=pid) for pid in roster},
    )
    logger.info(
        "Match set up: %d players, %d equations, %s claims",
        len(roster), state.board_size, state.policy.value,
    )
    return state


class Match:
    """
    Authoritative simulation of one match.

    Usage:
        match = Match(["p1", "p2"], config=MatchConfig(claim_policy=ClaimPolicy.MULTI))
        match.roll_dice("p1")
        match.claim_equation("p1", 3)
        view = match.snapshot()
    """

    def __init__(
        self,
        player_ids: Sequence[str],
        config: Optional[MatchConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        config = config or MatchConfig()
        rng = rng or random.Random(config.seed)
        self._attach(setup_match(player_ids, config, rng), config, rng)

    @classmethod
    def from_state(
        cls,
        state: MatchState,
        config: Optional[MatchConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Match":
        """Wrap an already built state, e.g. a hand-made board."""
        config = config or MatchConfig(claim_policy=state.policy)
        match = cls.__new__(cls)
        match._attach(state.copy(), config, rng or random.Random(config.seed))
        return match

    def _attach(self, state: MatchState, config: MatchConfig, rng: random.Random) -> None:
        self.config = config
        self._rng = rng
        self._state = state
        self._listeners: List[MatchOverListener] = []

    # ── Read-only views ──────────────────────────────────────

    @property
    def state(self) -> MatchState:
        """Deep copy of the live state; edits to it have no effect."""
        return self._state.copy()

    @property
    def result(self) -> Optional[MatchResult]:
        return self._state.result

    def is_complete(self) -> bool:
        return self._state.is_terminal()

    def snapshot(self) -> Dict[str, Any]:
        return build_match_snapshot(self._state)

    def add_listener(self, listener: MatchOverListener) -> None:
        """Register a callback fired once with the MatchResult."""
        self._listeners.append(listener)

    # ── Player actions ──────────────────────────────────────

    def roll_dice(self, player_id: str) -> Dict[str, Any]:
        return self.dispatch(Action.roll(player_id))

    def pass_turn(self, player_id: str) -> Dict[str, Any]:
        return self.dispatch(Action.pass_turn(player_id))

    def claim_equation(self, player_id: str, equation_id: int) -> Dict[str, Any]:
        return self.dispatch(Action.claim(player_id, equation_id))

    def handle_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a raw host payload and dispatch it."""
        try:
            action = parse_action(payload)
        except InvalidActionError as exc:
            logger.warning("Rejected payload: %s", exc.reason)
            raise
        return self.dispatch(action)

    def dispatch(self, action: Action) -> Dict[str, Any]:
        """
        Apply one action and return the resulting snapshot.

        Raises:
            InvalidActionError: If the action is refused; nothing changes.
        """
        try:
            outcome = apply_action(self._state, action, self._rng)
        except InvalidActionError as exc:
            logger.warning("Rejected %s from %s: %s", exc.action, exc.player_id, exc.reason)
            raise

        self._state = outcome.state
        if outcome.result is not None:
            self._emit(outcome.result)
        return self.snapshot()

    # ── Roster events ───────────────────────────────────────

    def on_player_joined(self, player_id: str) -> Dict[str, Any]:
        working = self._state.copy()
        if handle_join(working, player_id, self.config.max_players):
            self._state = working
        return self.snapshot()

    def on_player_left(self, player_id: str) -> Dict[str, Any]:
        working = self._state.copy()
        if handle_leave(working, player_id):
            self._state = working
        return self.snapshot()

    def _emit(self, result: MatchResult) -> None:
        for listener in self._listeners:
            listener(result)
