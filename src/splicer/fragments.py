# src/splicer/fragments.py
"""Fragment banners and module grouping.

A fragment starts with a banner of comment lines such as::

    // -------------------------------------------------------------- \\
    // File: Message.js                                               \\
    // Module: MailModel                                              \\
    // Requires: API, Mailbox.js                                      \\
    // -------------------------------------------------------------- \\

``Requires`` entries ending in the fragment extension name other files of
the same module; every other entry names a module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from .constants import DEFAULT_EXTENSION
from .logs import getAppLogger


class ConfigurationError(ValueError):
    """Raised when a fragment cannot be placed in any module."""


class BannerInfo(NamedTuple):
    file_name: str
    module_name: str
    dependencies: list[str]


@dataclass
class Fragment:
    content: str
    file_name: str = ""
    module_name: str = ""
    dependencies: list[str] = field(default_factory=list)
    path: Path | None = None

    @property
    def label(self) -> str:
        """Name used in diagnostics."""
        if self.path is not None:
            return str(self.path)
        return self.file_name or "<unnamed fragment>"


@dataclass
class Module:
    name: str
    dependencies: list[str] = field(default_factory=list)
    fragments: list[Fragment] = field(default_factory=list)


# --------------------------------------------------------------------------- #
# Banner parsing
# --------------------------------------------------------------------------- #

_WHITESPACE = re.compile(r"\s")

# "use strict"; or 'use strict'; (or with a trailing comma) on its own line
_DIRECTIVE = re.compile(
    r"""^\s*(?:"use strict"|'use strict')[;,][ \t]*(?:\r?\n)?""",
    re.M,
)


class BannerParser:
    """Extract the File, Module and Requires fields of a banner.

    Each marker has its own pattern, so markers may come in any order and
    any of them may be missing.
    """

    MARKERS = ("File", "Module", "Requires")

    def __init__(self) -> None:
        self._patterns = {
            marker: re.compile(
                rf"^//\s{marker}:(?P<value>[^\\\r\n]+)\\+\r?$",
                re.M,
            )
            for marker in self.MARKERS
        }

    def field(self, text: str, marker: str) -> str:
        """Return the marker's value with all whitespace removed, or ''."""
        match = self._patterns[marker].search(text)
        if match is None:
            return ""
        return _WHITESPACE.sub("", match.group("value"))

    def parse(self, text: str) -> BannerInfo:
        requires = self.field(text, "Requires")
        dependencies = [dep for dep in requires.split(",") if dep] if requires else []
        return BannerInfo(
            file_name=self.field(text, "File"),
            module_name=self.field(text, "Module"),
            dependencies=dependencies,
        )


_PARSER = BannerParser()


def parse_banner(text: str) -> BannerInfo:
    return _PARSER.parse(text)


def strip_directive(text: str) -> str:
    """Remove the first strict-mode directive line from a fragment."""
    return _DIRECTIVE.sub("", text, count=1)


def is_file_dependency(name: str, extension: str = DEFAULT_EXTENSION) -> bool:
    """True when ``name`` refers to a file of the same module."""
    return name.endswith(extension)


def make_fragment(text: str, path: Path | None = None) -> Fragment:
    """Build a Fragment from raw file text.

    The banner is read from the original text; the stored content has its
    directive line stripped.
    """
    info = parse_banner(text)
    return Fragment(
        content=strip_directive(text),
        file_name=info.file_name,
        module_name=info.module_name,
        dependencies=list(info.dependencies),
        path=path,
    )


# --------------------------------------------------------------------------- #
# Grouping
# --------------------------------------------------------------------------- #


def include_unique(items: list[str], item: str) -> list[str]:
    """Append ``item`` unless already present. Returns ``items``."""
    if item not in items:
        items.append(item)
    return items


def group_into_modules(
    fragments: list[Fragment],
    extension: str = DEFAULT_EXTENSION,
) -> list[Module]:
    """Partition fragments by module.

    Module-level dependencies move from each fragment onto its module;
    fragments keep only their file-level dependencies.

    Raises:
        ConfigurationError: a fragment declares no module.
    """
    logger = getAppLogger()
    modules: dict[str, Module] = {}

    for fragment in fragments:
        if not fragment.module_name:
            xmsg = f"File {fragment.label} belongs to no module!"
            raise ConfigurationError(xmsg)

        module = modules.get(fragment.module_name)
        if module is None:
            module = Module(name=fragment.module_name)
            modules[module.name] = module
            logger.trace("[GROUP] New module %s", module.name)
        module.fragments.append(fragment)

        file_deps: list[str] = []
        for dep in fragment.dependencies:
            if is_file_dependency(dep, extension):
                file_deps.append(dep)
            elif dep != module.name:
                include_unique(module.dependencies, dep)
        fragment.dependencies[:] = file_deps

    logger.debug(
        "[GROUP] %d fragment(s) in %d module(s)", len(fragments), len(modules)
    )
    return list(modules.values())
