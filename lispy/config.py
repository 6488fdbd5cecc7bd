from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

# Only the interactive shell reads these; the evaluator core takes no settings.

_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_DEFAULT_LOG_LEVEL = "WARNING"

EXIT_COMMANDS = frozenset({"exit", "quit"})


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    """Readline history path; LISPY_HISTORY_FILE set to '' disables history."""
    raw = os.environ.get("LISPY_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_log_level(override: Optional[str] = None) -> int:
    name = (override or os.environ.get("LISPY_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
