# scripts/smoke.py
"""
Smoke Test Script for the wikiterms codec.

Decodes every ``*.json`` document in a directory, re-encodes it and reports
whether id, labels, descriptions and aliases came back unchanged.

Usage
-----
1. Check the bundled fixtures:
    $ uv run python scripts/smoke.py

2. Check a directory of exported entity documents:
    $ uv run python scripts/smoke.py --dir exports/
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from wikiterms.core.codec import encode_document, parse_json, round_trip_changes
from wikiterms.core.errors import DocumentDecodeError
from wikiterms.core.settings import load_settings
from wikiterms.fixtures import FixtureLoader

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("smoke")


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run wikiterms Smoke Test")
    parser.add_argument("--dir", "-d", type=str, help="Directory of JSON documents")
    args = parser.parse_args()

    base_dir = Path(args.dir) if args.dir else load_settings().fixtures_dir
    loader = FixtureLoader(base_dir)
    failures = 0

    for path in sorted(base_dir.glob("*.json")):
        try:
            payload = parse_json(loader.load_text(path.name))
        except DocumentDecodeError as e:
            failures += 1
            logger.error("❌ %s: %s", path.name, e)
            continue
        if not isinstance(payload, dict):
            logger.info("Skipping %s (not a single document)", path.name)
            continue

        result = loader.try_load_document(path.name)
        if result.is_err():
            failures += 1
            logger.error("❌ %s: %s", path.name, result.unwrap_err())
            continue

        encoded = encode_document(result.unwrap())
        changed = round_trip_changes(payload, encoded)
        if changed:
            failures += 1
            logger.error("❌ %s: changed %s", path.name, ", ".join(changed))
        else:
            logger.info("✅ %s (%s %s)", path.name, encoded["type"], encoded["id"])

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
