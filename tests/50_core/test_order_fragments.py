# tests/50_core/test_order_fragments.py
"""Tests for order_fragments() and render_output()."""

import pytest

import splicer.fragments as mod_fragments
import splicer.logs as mod_logs
import splicer.stitch as mod_stitch
import splicer.toposort as mod_toposort
from tests.utils import make_fragment_text


def _frag(
    file_name: str, module: str, requires: list[str] | None = None
) -> mod_fragments.Fragment:
    text = make_fragment_text(file_name, module, requires, f"/* {file_name} */\n")
    return mod_fragments.make_fragment(text)


def _names(fragments: list[mod_fragments.Fragment]) -> list[str]:
    return [f.file_name for f in fragments]


def test_files_follow_their_file_dependencies() -> None:
    # --- setup ---
    f2 = _frag("F2.js", "Core", ["F1.js"])
    f1 = _frag("F1.js", "Core")

    # --- execute ---
    ordered = mod_stitch.order_fragments([f2, f1])

    # --- verify ---
    assert _names(ordered) == ["F1.js", "F2.js"]


def test_modules_follow_their_module_dependencies() -> None:
    # --- setup ---
    m2 = _frag("Two.js", "M2", ["M1"])
    m1 = _frag("One.js", "M1")

    # --- execute ---
    ordered = mod_stitch.order_fragments([m2, m1])

    # --- verify ---
    assert _names(ordered) == ["One.js", "Two.js"]


def test_module_fragments_stay_together() -> None:
    # --- setup ---
    fragments = [
        _frag("Message.js", "Mail", ["API", "Mailbox.js"]),
        _frag("Connection.js", "API"),
        _frag("Mailbox.js", "Mail"),
        _frag("Auth.js", "API", ["Connection.js"]),
    ]

    # --- execute ---
    ordered = mod_stitch.order_fragments(fragments)

    # --- verify ---
    assert _names(ordered) == ["Connection.js", "Auth.js", "Mailbox.js", "Message.js"]


def test_unknown_module_dependency_keeps_fragment(
    module_logger: mod_logs.AppLogger,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    fragments = [_frag("A.js", "Core", ["Missing", "Gone.js"])]

    # --- execute ---
    ordered = mod_stitch.order_fragments(fragments)

    # --- verify ---
    assert _names(ordered) == ["A.js"]
    out = capsys.readouterr().out
    assert "Core requires Missing but it was not found" in out
    assert "A.js requires Gone.js but it was not found" in out


def test_fragment_without_module_aborts() -> None:
    fragments = [_frag("A.js", "Core"), mod_fragments.make_fragment("var x;\n")]

    with pytest.raises(mod_fragments.ConfigurationError):
        mod_stitch.order_fragments(fragments)


def test_module_cycle_is_best_effort_by_default() -> None:
    fragments = [_frag("A.js", "A", ["B"]), _frag("B.js", "B", ["A"])]

    ordered = mod_stitch.order_fragments(fragments)

    assert _names(ordered) == ["B.js", "A.js"]


def test_file_cycle_fails_in_strict_mode() -> None:
    fragments = [
        _frag("A.js", "Core", ["B.js"]),
        _frag("B.js", "Core", ["A.js"]),
    ]

    with pytest.raises(mod_toposort.CircularDependencyError, match="A.js -> B.js"):
        mod_stitch.order_fragments(fragments, strict=True)


def test_render_output_single_directive_and_blank_lines() -> None:
    # --- setup ---
    f1 = mod_fragments.Fragment(content="var one = 1;", file_name="F1.js")
    f2 = mod_fragments.Fragment(content="var two = one;", file_name="F2.js")

    # --- execute ---
    text = mod_stitch.render_output([f1, f2])

    # --- verify ---
    assert text == '"use strict";\n\nvar one = 1;\n\nvar two = one;'


def test_render_output_without_fragments_is_directive_only() -> None:
    assert mod_stitch.render_output([]) == '"use strict";\n\n'


def test_render_output_round_trip_has_one_directive() -> None:
    # --- setup ---
    f2 = _frag("F2.js", "Core", ["F1.js"])
    f1 = _frag("F1.js", "Core")

    # --- execute ---
    text = mod_stitch.render_output(mod_stitch.order_fragments([f2, f1]))

    # --- verify ---
    assert text.count('"use strict"') == 1
    assert text.startswith('"use strict";\n\n')
    assert text.index("/* F1.js */") < text.index("/* F2.js */")
    assert "/* F1.js */\n\n" in text
