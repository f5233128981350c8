"""Offline validation pass over every bundled tuning table."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from horde.assets.content import ContentManager  # noqa: E402
from horde.engine.logger import init_logger  # noqa: E402


def main() -> int:
    logger = init_logger(ROOT / "settings.json").channel("content")
    problems = ContentManager().validate()
    for problem in problems:
        logger.error("%s", problem)
    if problems:
        logger.error("FAILED: found %d problems", len(problems))
        return 1
    logger.info("All tuning tables are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
