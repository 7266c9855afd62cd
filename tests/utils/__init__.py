# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .fragment_files import (
    banner_line,
    make_banner,
    make_fragment_text,
    write_fragment,
)
from .patch_everywhere import patch_everywhere


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # fragment_files
    "banner_line",
    "make_banner",
    "make_fragment_text",
    "write_fragment",
    # patch_everywhere
    "patch_everywhere",
]
