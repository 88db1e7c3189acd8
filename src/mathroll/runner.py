"""
mathroll.runner — Match driver loop
===================================

The MatchRunner plays one match to completion with automated player
strategies. It stands in for a hosting platform: it delivers one action
at a time from whichever player is current and relays roster changes.
"""

from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional

from ._engine.match import Match
from ._engine.outcome import MatchResult
from ._shared.logging_config import log_rejected_action
from .callbacks import PlayerStrategy
from .config import MatchConfig
from .errors import InvalidActionError

logger = logging.getLogger("mathroll.runner")


class MatchRunner:
    """
    Drives a Match with one PlayerStrategy per seat.

    Usage
    -----
        from mathroll import DemoPlayer, MatchConfig, MatchRunner

        config = MatchConfig(claim_policy="multi", seed=7)
        runner = MatchRunner(config, {"ana": DemoPlayer(), "ben": DemoPlayer()})
        result = runner.run()

    `max_turns` in the config caps the number of actions submitted,
    rejected ones included, so a misbehaving strategy cannot spin forever.
    """

    def __init__(
        self,
        config: MatchConfig,
        strategies: Dict[str, PlayerStrategy],
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.strategies = dict(strategies)
        self.match = Match(list(self.strategies), config=config, rng=rng)
        self.rejections: List[InvalidActionError] = []
        self.steps = 0

    def join(self, player_id: str, strategy: PlayerStrategy) -> None:
        self.match.on_player_joined(player_id)
        self.strategies[player_id] = strategy

    def leave(self, player_id: str) -> None:
        self.match.on_player_left(player_id)
        self.strategies.pop(player_id, None)

    def step(self) -> bool:
        """Submit one action from the current player. Returns False if nothing to do."""
        if self.match.is_complete():
            return False
        snapshot = self.match.snapshot()
        player_id = snapshot["current_player"]
        if player_id is None:
            logger.warning("No players left; match cannot continue")
            return False

        action = self.strategies[player_id].choose_action(snapshot, player_id)
        self.steps += 1
        try:
            self.match.dispatch(action)
        except InvalidActionError as exc:
            self.rejections.append(exc)
            log_rejected_action(exc)
        return True

    def run(self) -> Optional[MatchResult]:
        """
        Play until the match ends or the turn cap is hit.

        Returns:
            The MatchResult, or None if the match did not finish
        """
        logger.info("Runner starting with %d players", len(self.strategies))
        while self.steps < self.config.max_turns and self.step():
            pass

        result = self.match.result
        if result is None:
            logger.warning("Match stopped after %d actions without a result", self.steps)
        else:
            logger.info("Match finished after %d actions", self.steps)
        return result
