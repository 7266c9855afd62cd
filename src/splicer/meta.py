# src/splicer/meta.py
"""Program identity shared by the CLI, logger and metadata helpers."""

from typing import NamedTuple


PROGRAM_PACKAGE = "splicer"
PROGRAM_SCRIPT = "splicer"
PROGRAM_DISPLAY = "Splicer"
PROGRAM_ENV = "SPLICER"


class Metadata(NamedTuple):
    version: str
    commit: str
