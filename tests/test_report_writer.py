import io
import os

import pytest

from scass.core.errors import OutputSinkError
from scass.core.models import Match
from scass.core.search.report_writer import ReportWriter, format_match, render_report


def test_scenario_todo_with_one_context_line(tmp_path):
    root = str(tmp_path)
    m = Match(
        path=os.path.join(root, "a.py"),
        line_number=3,
        line="# TODO fix",
        context=("", "# TODO fix", "print('x')"),
        context_start=2,
    )
    assert format_match(m, root) == (
        "### [a.py (Line 3)](a.py)\n"
        "```py\n"
        "        2: \n"
        ">>      3: # TODO fix\n"
        "        4: print('x')\n"
        "```\n"
        "\n"
    )


def test_no_extension_means_bare_fence(tmp_path):
    m = Match(path=str(tmp_path / "Makefile"), line_number=1, line="TODO", context=("TODO",))
    text = format_match(m, str(tmp_path))
    assert text.splitlines()[1] == "```"
    assert ">>      1: TODO" in text


def test_window_clipped_at_file_end_keeps_real_line_numbers(tmp_path):
    m = Match(
        path=str(tmp_path / "z.go"),
        line_number=4,
        line="HIT",
        context=("two", "three", "HIT"),
        context_start=2,
    )
    lines = format_match(m, str(tmp_path)).splitlines()
    assert lines[2:5] == ["        2: two", "        3: three", ">>      4: HIT"]


def test_nested_path_is_relative_to_root(tmp_path):
    m = Match(path=str(tmp_path / "pkg" / "mod.ts"), line_number=12, line="x", context=("x",),
              context_start=12)
    rel = os.path.join("pkg", "mod.ts")
    assert format_match(m, str(tmp_path)).startswith(f"### [{rel} (Line 12)]({rel})\n```ts\n")


def test_writer_streams_matches_in_arrival_order(tmp_path):
    sink = io.StringIO()
    writer = ReportWriter(sink, str(tmp_path))
    matches = [
        Match(path=str(tmp_path / "b.py"), line_number=1, line="b", context=("b",)),
        Match(path=str(tmp_path / "a.py"), line_number=1, line="a", context=("a",)),
    ]
    assert writer.render(iter(matches)) == 2
    out = sink.getvalue()
    assert out.index("b.py") < out.index("a.py")
    assert out.endswith("```\n\n")


def test_render_report_empty_stream_creates_empty_file(tmp_path, logger):
    out = tmp_path / "report.md"
    assert render_report(iter(()), str(out), str(tmp_path), logger=logger) == 0
    assert out.exists()
    assert out.read_text(encoding="utf-8") == ""


def test_unopenable_output_is_fatal(tmp_path, logger):
    with pytest.raises(OutputSinkError):
        render_report(iter(()), str(tmp_path / "no" / "such" / "dir" / "r.md"), str(tmp_path), logger=logger)


def test_mid_write_failure_is_fatal_and_keeps_partial_report(tmp_path, logger):
    out = tmp_path / "r.md"
    first = Match(path=str(tmp_path / "a.py"), line_number=1, line="a", context=("a",))

    def stream():
        yield first
        raise OSError("disk full")

    with pytest.raises(OutputSinkError):
        render_report(stream(), str(out), str(tmp_path), logger=logger)
    assert out.read_text(encoding="utf-8").startswith("### [a.py (Line 1)](a.py)")


def test_dotfile_fence_uses_whole_name(tmp_path):
    m = Match(path=str(tmp_path / ".bashrc"), line_number=1, line="TODO", context=("TODO",))
    assert format_match(m, str(tmp_path)).splitlines()[:2] == [
        "### [.bashrc (Line 1)](.bashrc)",
        "```bashrc",
    ]


def test_fence_uses_last_extension_only(tmp_path):
    m = Match(path=str(tmp_path / "archive.tar.gz"), line_number=1, line="x", context=("x",))
    assert format_match(m, str(tmp_path)).splitlines()[1] == "```gz"


def test_single_file_root_is_reported_by_name(tmp_path):
    f = tmp_path / "a.py"
    f.write_text("TODO\n", encoding="utf-8")
    sink = io.StringIO()
    ReportWriter(sink, str(f)).render([Match(path=str(f), line_number=1, line="TODO", context=("TODO",))])
    assert sink.getvalue().startswith("### [a.py (Line 1)](a.py)\n")
