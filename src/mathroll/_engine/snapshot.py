# Area: Engine
"""
mathroll._engine.snapshot — Match snapshot builder
==================================================

Builds serializable, read-only views of a MatchState. The returned
dicts share nothing mutable with the state they describe.
"""

from .equation import Equation
from .state import MatchState, PlayerState


def build_match_snapshot(state: MatchState) -> dict:
    """Build a JSON-serializable snapshot of the whole match."""
    return {
        "policy": state.policy.value,
        "phase": state.phase.value,
        "dice_value": state.dice_value,
        "turn_number": state.turn_number,
        "player_ids": list(state.player_ids),
        "current_player_index": state.current_player_index,
        "current_player": state.current_player_id(),
        "players": {pid: _player_snapshot(state.players[pid]) for pid in state.player_ids},
        "equations": [_equation_snapshot(eq) for eq in state.equations],
        "result": state.result.to_dict() if state.result else None,
    }


def _player_snapshot(player: PlayerState) -> dict:
    return {
        "score": player.score,
        "last_action": player.last_action.value if player.last_action else None,
    }


def _equation_snapshot(equation: Equation) -> dict:
    return {
        "id": equation.id,
        "left": equation.left,
        "right": equation.right,
        "operator": equation.operator.symbol,
        "result": equation.result,
        "claim": equation.claim.kind.value,
        "holders": list(equation.claim.holders),
    }
