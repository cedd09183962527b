"""
suggest_pick.py — Print Siggy's pick for a single game as JSON.

Input is a match payload in the same camelCase shape the app sends::

  {"home": {"moneyline": -150, "stats": {"goalsForPerGame": 3.4}},
   "away": {"moneyline": 130},
   "homePointSpread": -1.5, "awayPointSpread": 1.5}

Config overrides come from --config, or from $PICKS_CONFIG_PATH (a .env
file in the project root is honoured).

Usage
-----
  python scripts/suggest_pick.py game.json
  cat game.json | python scripts/suggest_pick.py -
  python scripts/suggest_pick.py game.json --config picks.config.json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure the project root (one level up from scripts/) is on sys.path so that
# `from backend.xxx import ...` resolves when the script is run directly.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

load_dotenv()

from backend.pick_engine import PickEngine  # noqa: E402
from backend.schemas import MatchRequest, PickResponse  # noqa: E402
from backend.services.pick_config import load_config_file  # noqa: E402

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compute the moneyline / puckline pick for one game."
    )
    parser.add_argument(
        "match", type=str,
        help="Path to a match JSON file, or '-' to read stdin",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON file of config overrides (default: $PICKS_CONFIG_PATH)",
    )
    args = parser.parse_args()

    raw = sys.stdin.read() if args.match == "-" else Path(args.match).read_text(encoding="utf-8")
    request = MatchRequest.model_validate_json(raw)

    engine = PickEngine(load_config_file(args.config))
    pick = engine.suggest(request.to_match_input())

    print(json.dumps(PickResponse.from_result(pick).to_wire(), indent=2))


if __name__ == "__main__":
    main()
