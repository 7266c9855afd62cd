# src/splicer/config.py

import argparse
from pathlib import Path

from .config_types import BuildConfigResolved
from .constants import (
    DEFAULT_DIRECTIVE,
    DEFAULT_DRY_RUN,
    DEFAULT_EXTENSION,
    DEFAULT_STRICT_CYCLES,
)


def _resolve_path(raw: str | Path, cwd: Path) -> Path:
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = cwd / path
    return path.resolve()


def resolve_build_config(
    args: argparse.Namespace,
    cwd: Path | None = None,
) -> BuildConfigResolved:
    """Merge parsed CLI arguments with defaults.

    Relative paths are resolved against ``cwd`` (the current directory
    when omitted).
    """
    cwd = (cwd or Path.cwd()).resolve()
    strict = getattr(args, "strict_cycles", None)
    dry_run = getattr(args, "dry_run", None)
    return BuildConfigResolved(
        input_dir=_resolve_path(args.input_dir, cwd),
        out=_resolve_path(args.out, cwd),
        extension=DEFAULT_EXTENSION,
        directive=DEFAULT_DIRECTIVE,
        strict_cycles=DEFAULT_STRICT_CYCLES if strict is None else bool(strict),
        dry_run=DEFAULT_DRY_RUN if dry_run is None else bool(dry_run),
    )
