"""
Test Suite for Section output and lifecycle.
"""

import pytest

from sectionlog import DividerType


@pytest.mark.unit
@pytest.mark.parametrize(
    "method, level",
    [
        ("log", "info"),
        ("info", "info"),
        ("debug", "debug"),
        ("warning", "warning"),
        ("warn", "warning"),
        ("error", "error"),
    ],
)
def test_leveled_call_writes_one_prefixed_line(debugger, recorder, method, level):
    section = debugger.create("worker", DividerType.THIN)
    recorder.lines.clear()

    getattr(section, method)("hello")

    assert recorder.lines == [(level, "[worker] hello")]


@pytest.mark.unit
def test_leveled_calls_chain(debugger, recorder):
    section = debugger.create("worker")
    recorder.lines.clear()

    result = section.info("a").warning("b").error("c")

    assert result is section
    assert [msg for _, msg in recorder.lines] == ["[worker] a", "[worker] b", "[worker] c"]


@pytest.mark.unit
def test_section_finish_unregisters(debugger):
    section = debugger.create("worker")
    section.finish()

    assert debugger.section("worker") is None


@pytest.mark.unit
def test_context_manager_finishes_section(debugger, recorder):
    with debugger.create("scoped") as section:
        section.info("inside")
        assert debugger.section("scoped") is section

    assert debugger.section("scoped") is None
    assert recorder.by_level["debug"][-1] == f"[scoped] {DividerType.THICK.divider}"


@pytest.mark.unit
def test_context_manager_finishes_on_error(debugger):
    with pytest.raises(RuntimeError, match="boom"):
        with debugger.create("scoped"):
            raise RuntimeError("boom")

    assert debugger.section("scoped") is None


@pytest.mark.unit
def test_dedent_floors_at_zero(debugger):
    section = debugger.create("solo")
    section.dedent()

    assert section.indentation == 0


@pytest.mark.unit
def test_custom_indent_unit(make_debugger, recorder):
    debugger = make_debugger(indent_unit="    ")
    debugger.create("outer")
    inner = debugger.create("inner")

    assert inner.prefix == "    [inner] "


@pytest.mark.unit
def test_repr_mentions_name_and_style(debugger):
    section = debugger.create("worker", DividerType.STAR)

    assert "worker" in repr(section)
    assert "STAR" in repr(section)
