"""
suggest_slate.py — Pick every game in a slate CSV.

The input CSV needs a ``game_id`` column; see backend/services/slate.py for
the optional odds/stats columns.  Blank cells mean "unknown".

Usage
-----
  python scripts/suggest_slate.py slate.csv                  # print table
  python scripts/suggest_slate.py slate.csv -o picks.csv     # write CSV
  python scripts/suggest_slate.py slate.csv --config picks.config.json
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import pandas as pd
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

load_dotenv()

from backend.services.pick_config import load_config_file  # noqa: E402
from backend.services.slate import suggest_slate  # noqa: E402

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute picks for a slate of games.")
    parser.add_argument("slate", type=str, help="Slate CSV path")
    parser.add_argument(
        "-o", "--output", type=str, default=None,
        help="Write picks to this CSV instead of printing them",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON file of config overrides (default: $PICKS_CONFIG_PATH)",
    )
    args = parser.parse_args()

    games = pd.read_csv(args.slate)
    picks = suggest_slate(games, load_config_file(args.config))

    if args.output:
        picks.to_csv(args.output, index=False)
        logger.info("Wrote %d picks to %s", len(picks), args.output)
    else:
        print(picks.drop(columns=["rationale"]).to_string(index=False))


if __name__ == "__main__":
    main()
