# src/splicer/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
LOG_LEVEL_CHOICES: list[str] = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",
]

# --- build defaults ---
DEFAULT_EXTENSION: str = ".js"
DEFAULT_DIRECTIVE: str = '"use strict";'
DEFAULT_STRICT_CYCLES: bool = False
DEFAULT_DRY_RUN: bool = False
DEFAULT_ENCODING: str = "utf-8"
