"""Environment-variable-based configuration for the coach CLI."""

from __future__ import annotations

import os
from pathlib import Path

DISPLAY_UNIT: str = os.environ.get("COACH_DISPLAY_UNIT", "kg")
LOG_LEVEL: str = os.environ.get("COACH_LOG_LEVEL", "INFO").upper()
SESSION_LOG_PATH: Path = Path(
    os.environ.get("COACH_SESSION_LOG", "sessions/latest.json")
).expanduser()
