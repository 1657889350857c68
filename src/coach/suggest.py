"""Coach CLI: prints next-session suggestions for a logged workout.

Usage:
    python -m coach.suggest                       # reads COACH_SESSION_LOG
    python -m coach.suggest sessions/monday.json --unit lb
    python -m coach.suggest sessions/monday.json --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from progression_engine.engine import ProgressionEngine
from progression_engine.exceptions import ProgressionEngineError
from progression_engine.models.enums import WeightUnit
from progression_engine.serialization import (
    parse_session_log,
    parse_weight_unit,
    to_suggestion_dict,
)

from coach.config import DISPLAY_UNIT, LOG_LEVEL, SESSION_LOG_PATH

logger = logging.getLogger(__name__)


def _load_session_log(path: Path) -> dict:
    """Load a session log from disk."""
    with open(path) as f:
        return json.load(f)


def run(path: Path, unit: WeightUnit, as_json: bool = False) -> int:
    """Suggest the next session for every exercise in a session log.

    Returns a process exit code: 0 on success, 1 if the log is missing or
    malformed.
    """
    try:
        exercises = parse_session_log(_load_session_log(path))
    except FileNotFoundError:
        logger.error("Session log not found at %s", path)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("Session log %s is not valid JSON: %s", path, exc)
        return 1
    except ProgressionEngineError as exc:
        logger.error("Session log %s rejected: %s", path, exc)
        return 1

    engine = ProgressionEngine()
    results = []
    for config, sets in exercises:
        suggestion = engine.suggest(sets, config, unit)
        label = config.name or config.exercise_id or config.progression_type.name.lower()
        results.append((label, suggestion))
    logger.info("Generated %d suggestions from %s", len(results), path)

    if as_json:
        payload = [
            {"exercise": label, "suggestion": to_suggestion_dict(suggestion)}
            for label, suggestion in results
        ]
        print(json.dumps(payload, indent=2))
    else:
        for label, suggestion in results:
            print(f"{label}: {suggestion.message}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Progressive-overload coach")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=SESSION_LOG_PATH,
        help="Session log JSON (default: $COACH_SESSION_LOG)",
    )
    parser.add_argument(
        "--unit",
        default=DISPLAY_UNIT,
        help="Display unit for messages: kg or lb (default: $COACH_DISPLAY_UNIT)",
    )
    parser.add_argument("--json", action="store_true", help="Emit suggestions as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        unit = parse_weight_unit(args.unit)
    except ProgressionEngineError as exc:
        parser.error(str(exc))

    sys.exit(run(args.path, unit, as_json=args.json))


if __name__ == "__main__":
    main()
