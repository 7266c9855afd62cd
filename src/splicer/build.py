# src/splicer/build.py

from pathlib import Path

from .config_types import BuildConfigResolved
from .constants import (
    DEFAULT_DRY_RUN,
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    DEFAULT_STRICT_CYCLES,
)
from .fragments import Fragment, make_fragment
from .logs import getAppLogger
from .stitch import order_fragments, render_output


# --------------------------------------------------------------------------- #
# File collection
# --------------------------------------------------------------------------- #


def _walk_files(root_dir: Path) -> list[Path]:
    """List every file below ``root_dir``, depth-first.

    Unlike rglob(), errors from unreadable directories are raised.
    """
    files: list[Path] = []
    for entry in sorted(root_dir.iterdir()):
        if entry.is_dir():
            files.extend(_walk_files(entry))
        else:
            files.append(entry)
    return files


def collect_fragment_files(
    input_dir: Path,
    extension: str = DEFAULT_EXTENSION,
) -> list[Path]:
    """Collect fragment files below ``input_dir``.

    Args:
        input_dir: Root of the fragment tree
        extension: File suffix that marks a fragment

    Returns:
        Absolute paths, sorted by their string form. Empty if ``input_dir``
        does not exist.

    Raises:
        OSError: a directory could not be read
    """
    logger = getAppLogger()
    root = Path(input_dir).resolve()
    if not root.exists():
        logger.debug("[COLLECT] Input directory does not exist: %s", root)
        return []

    matches = [p for p in _walk_files(root) if p.name.endswith(extension)]
    matches.sort(key=str)

    for i, m in enumerate(matches):
        logger.trace(f"[COLLECT]   {i + 1:02d}. {m}")
    logger.debug("[COLLECT] Found %d fragment file(s) in %s", len(matches), root)
    return matches


def read_fragments(paths: list[Path]) -> list[Fragment]:
    return [
        make_fragment(path.read_text(encoding=DEFAULT_ENCODING), path=path)
        for path in paths
    ]


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


def write_output(out_path: Path, text: str) -> None:
    """Write ``text`` to ``out_path``, creating parent directories."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding=DEFAULT_ENCODING)


def run_build(build_cfg: BuildConfigResolved) -> Path | None:
    """Execute one build using a fully resolved config.

    Everything is computed before the output is written, so a failed build
    never leaves a partial file behind.

    Returns:
        The written output path, or None for a dry run.
    """
    logger = getAppLogger()
    dry_run = build_cfg.get("dry_run", DEFAULT_DRY_RUN)
    strict = build_cfg.get("strict_cycles", DEFAULT_STRICT_CYCLES)
    extension = build_cfg["extension"]
    out_path = Path(build_cfg["out"]).resolve()

    paths = collect_fragment_files(build_cfg["input_dir"], extension)
    if not paths:
        logger.warning(
            "No %s files found in %s; output will only hold the directive.",
            extension,
            build_cfg["input_dir"],
        )

    fragments = read_fragments(paths)
    ordered = order_fragments(fragments, extension=extension, strict=strict)

    if dry_run:
        logger.info(
            "🧪 (dry-run) Would stitch %d fragment(s) to: %s", len(ordered), out_path
        )
        for i, fragment in enumerate(ordered, 1):
            logger.info("   %02d. %s", i, fragment.label)
        return None

    logger.info("🧵 Stitching %d fragment(s) → %s", len(ordered), out_path)
    write_output(out_path, render_output(ordered, build_cfg["directive"]))
    logger.info("✅ Stitch completed → %s", out_path)
    return out_path
