"""
main.py — Host a match by hand
==============================

Shows how a hosting platform drives the rules engine: it owns one
Match per game, forwards each player's intent with the caller's id,
and renders the snapshot it gets back.

    python main.py

Illegal moves raise InvalidActionError and change nothing, so the
host just reports the reason and asks again.
"""

import logging

from mathroll import ClaimPolicy, InvalidActionError, Match, MatchConfig

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

config = MatchConfig(claim_policy=ClaimPolicy.MULTI, seed=2026)
match = Match(["ana", "ben"], config=config)
match.add_listener(lambda result: print("GAME OVER:", result.to_dict()["players"]))


def show(view: dict) -> None:
    print()
    for eq in view["equations"]:
        holders = ", ".join(eq["holders"]) or "-"
        print(f"  [{eq['id']}] {eq['left']} {eq['operator']} {eq['right']} = {eq['result']:<3} {holders}")
    scores = ", ".join(f"{pid}: {p['score']}" for pid, p in view["players"].items())
    print(f"  dice={view['dice_value']}  phase={view['phase']}  turn={view['current_player']}  ({scores})")


view = match.snapshot()
while not match.is_complete() and view["current_player"]:
    show(view)
    player = view["current_player"]
    try:
        if view["phase"] == "rolling":
            input(f"{player}, press Enter to roll ")
            view = match.roll_dice(player)
            continue
        choice = input(f"{player}, equation id to claim (blank to pass): ").strip()
        if choice:
            view = match.claim_equation(player, int(choice))
        else:
            view = match.pass_turn(player)
    except (InvalidActionError, ValueError) as exc:
        print(f"  !! {exc}")
