# src/splicer/stitch.py
"""Order fragments by their declared dependencies and join them."""

from __future__ import annotations

from .constants import DEFAULT_DIRECTIVE, DEFAULT_EXTENSION, DEFAULT_STRICT_CYCLES
from .fragments import Fragment, Module, group_into_modules
from .logs import getAppLogger
from .toposort import topological_sort


def sort_modules(modules: list[Module], *, strict: bool = False) -> list[Module]:
    return topological_sort(
        modules,
        get_name=lambda m: m.name,
        get_dependencies=lambda m: m.dependencies,
        strict=strict,
        label="module",
    )


def sort_module_fragments(module: Module, *, strict: bool = False) -> list[Fragment]:
    return topological_sort(
        module.fragments,
        get_name=lambda f: f.file_name,
        get_dependencies=lambda f: f.dependencies,
        strict=strict,
        label=f"{module.name} file",
    )


def order_fragments(
    fragments: list[Fragment],
    *,
    extension: str = DEFAULT_EXTENSION,
    strict: bool = DEFAULT_STRICT_CYCLES,
) -> list[Fragment]:
    """Return fragments in final output order.

    Modules are ordered by their cross-module dependencies, then the files
    of each module by their file-level dependencies.

    Raises:
        ConfigurationError: a fragment declares no module.
        CircularDependencyError: ``strict`` is set and a cycle exists.
    """
    logger = getAppLogger()
    modules = sort_modules(group_into_modules(fragments, extension), strict=strict)

    ordered: list[Fragment] = []
    for module in modules:
        module.fragments = sort_module_fragments(module, strict=strict)
        logger.debug(
            "[ORDER] %s: %s",
            module.name,
            ", ".join(f.file_name or f.label for f in module.fragments),
        )
        ordered.extend(module.fragments)
    return ordered


def render_output(
    fragments: list[Fragment],
    directive: str = DEFAULT_DIRECTIVE,
) -> str:
    """Join fragments under a single directive line."""
    body = "\n\n".join(f.content for f in fragments)
    return f"{directive}\n\n{body}"
