"""
mathroll.types — TypedDict schemas for match snapshots
======================================================

Documents the exact structure of the read-only snapshot dicts handed to
presentation layers and player strategies after every accepted action.

    >>> MatchSnapshot.__annotations__["phase"]
    <class 'str'>
"""

from typing import Dict, List, Literal, Optional, TypedDict


class EquationView(TypedDict):
    """One board slot."""
    id: int
    left: int
    right: int
    operator: str           # display glyph: "+", "−", "×", "÷"
    result: int             # always in [1, 10]
    claim: str              # "unclaimed" | "exclusive_owner" | "claimant_set" | "last_claimant"
    holders: List[str]      # player ids currently holding the equation


class PlayerView(TypedDict):
    """One player's public record."""
    score: int
    last_action: Optional[Literal["hit", "miss", "pass"]]


class MatchResultView(TypedDict):
    """Terminal signal payload."""
    players: Dict[str, Literal["WON", "LOST", "TIE"]]
    scores: Dict[str, int]
    winner_ids: List[str]
    is_tie: bool
    policy: str
    reason: str


class MatchSnapshot(TypedDict):
    """Full read-only view of a match.

    Fields
    ------
    policy : str
        "exclusive", "multi" or "stealable".
    phase : str
        "rolling" or "claiming".
    dice_value : Optional[int]
        Set only while claiming.
    current_player : Optional[str]
        None once the roster is empty.
    result : Optional[MatchResultView]
        Set once the match is over.
    """
    policy: str
    phase: str
    dice_value: Optional[int]
    turn_number: int
    player_ids: List[str]
    current_player_index: int
    current_player: Optional[str]
    players: Dict[str, PlayerView]
    equations: List[EquationView]
    result: Optional[MatchResultView]
