# src/splicer/config_types.py

from __future__ import annotations

from pathlib import Path
from typing import TypedDict

from typing_extensions import NotRequired


class BuildConfigResolved(TypedDict):
    """Fully resolved settings for one build."""

    input_dir: Path
    out: Path
    extension: str
    directive: str
    strict_cycles: NotRequired[bool]
    dry_run: NotRequired[bool]
