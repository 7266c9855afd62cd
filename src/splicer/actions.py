# src/splicer/actions.py
import re
import subprocess
from contextlib import suppress
from importlib import metadata
from pathlib import Path

from .logs import getAppLogger
from .meta import PROGRAM_PACKAGE, Metadata


def get_metadata() -> Metadata:
    """Return (version, commit) for this tool.

    Version comes from pyproject.toml next to the source tree (or the
    installed distribution), the commit from git. Either falls back to
    "unknown".
    """
    logger = getAppLogger()
    version = "unknown"
    commit = "unknown"

    root = Path(__file__).resolve().parents[2]
    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        logger.trace(f"trying to read metadata from {pyproject}")
        text = pyproject.read_text(encoding="utf-8")
        match = re.search(r'(?m)^\s*version\s*=\s*["\']([^"\']+)["\']', text)
        if match:
            version = match.group(1)
    else:
        with suppress(metadata.PackageNotFoundError):
            version = metadata.version(PROGRAM_PACKAGE)

    with suppress(OSError, subprocess.CalledProcessError):
        logger.trace("trying to get commit from git")
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
        )
        commit = result.stdout.strip()

    logger.trace(f"got package version {version} with commit {commit}")
    return Metadata(version, commit)
