"""
mathroll.callbacks — Player strategy interface
==============================================

Hosts that drive a match with automated players subclass
PlayerStrategy. The runner calls `choose_action` whenever it is the
strategy's player's turn, passing a fresh read-only snapshot.

Type Definitions
----------------
The snapshot layout is documented in types.py:

    from mathroll import MatchSnapshot
"""

from abc import ABC, abstractmethod

from ._engine.actions import Action
from .types import MatchSnapshot


class PlayerStrategy(ABC):
    """
    Abstract base class for an automated player.

    The strategy only ever sees snapshots; it cannot touch match state.
    Returning an illegal action is allowed: the runner logs the rejection
    and asks again with the same snapshot.
    """

    @abstractmethod
    def choose_action(self, snapshot: MatchSnapshot, player_id: str) -> Action:
        """
        Called when `player_id` is the current player.

        Parameters
        ----------
        snapshot : MatchSnapshot
            Current state of the match.
        player_id : str
            The seat this strategy is playing.

        Returns
        -------
        Action
            Action.roll(...) while rolling; Action.claim(...) or
            Action.pass_turn(...) while claiming.
        """
        ...
