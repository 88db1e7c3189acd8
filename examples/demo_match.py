"""
demo_match.py — Watch demo players finish a match
=================================================

    python demo_match.py

Runs one stealable-claim match between three DemoPlayer strategies,
with one player leaving partway through.
"""

import json
import random

from mathroll import ClaimPolicy, DemoPlayer, MatchConfig, MatchRunner
from mathroll._shared.logging_config import setup_logging

setup_logging(log_file_path="demo_match.log")

config = MatchConfig(claim_policy=ClaimPolicy.STEALABLE, seed=7)
players = {pid: DemoPlayer(miss_rate=0.15, rng=random.Random(pid)) for pid in ("ana", "ben", "cy")}
runner = MatchRunner(config, players, rng=random.Random(config.seed))

for _ in range(40):
    runner.step()
runner.leave("cy")

result = runner.run()
print(json.dumps(result.to_dict() if result else None, indent=2))
