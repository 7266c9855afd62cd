# src/splicer/__init__.py

"""Splicer — Stitch banner-annotated source fragments into a single file.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use or custom integrations.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                → CLI entrypoint
    - run_build()           → Execute a resolved build configuration
    - order_fragments()     → Dependency-order a list of fragments
    - topological_sort()    → The ordering primitive used at both levels
"""

from .actions import get_metadata
from .build import collect_fragment_files, read_fragments, run_build, write_output
from .cli import main
from .config import resolve_build_config
from .config_types import BuildConfigResolved
from .constants import (
    DEFAULT_DIRECTIVE,
    DEFAULT_DRY_RUN,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_EXTENSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_CYCLES,
)
from .fragments import (
    BannerInfo,
    BannerParser,
    ConfigurationError,
    Fragment,
    Module,
    group_into_modules,
    include_unique,
    is_file_dependency,
    make_fragment,
    parse_banner,
    strip_directive,
)
from .logs import getAppLogger
from .meta import (
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
)
from .stitch import order_fragments, render_output, sort_module_fragments, sort_modules
from .toposort import CircularDependencyError, topological_sort


__all__ = [  # noqa: RUF022
    # actions
    "get_metadata",
    # build
    "collect_fragment_files",
    "read_fragments",
    "run_build",
    "write_output",
    # cli
    "main",
    # config
    "BuildConfigResolved",
    "resolve_build_config",
    # constants
    "DEFAULT_DIRECTIVE",
    "DEFAULT_DRY_RUN",
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_EXTENSION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_STRICT_CYCLES",
    # fragments
    "BannerInfo",
    "BannerParser",
    "ConfigurationError",
    "Fragment",
    "Module",
    "group_into_modules",
    "include_unique",
    "is_file_dependency",
    "make_fragment",
    "parse_banner",
    "strip_directive",
    # logs
    "getAppLogger",
    # meta
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # stitch
    "order_fragments",
    "render_output",
    "sort_module_fragments",
    "sort_modules",
    # toposort
    "CircularDependencyError",
    "topological_sort",
]
