# topmark:header:start
#
#   project      : mdtitle
#   file         : test_generate.py
#   file_relpath : tests/cli/test_generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI end-to-end tests: options drive the generated document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, read_lines, staging_leftovers, write_lines

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

SOURCE: list[str] = ["# Intro", "hello", "## Details", "world"]


@mark_cli
def test_in_place_with_defaults(tmp_path: Path) -> None:
    """Default options rewrite the file in place with a 4-space indent."""
    doc: Path = write_lines(tmp_path / "README.md", SOURCE)

    result: Result = run_cli(["--file", str(doc)])

    assert_SUCCESS(result)
    assert result.output == ""
    assert read_lines(doc) == [
        "# Auto-Title:",
        "* Intro",
        "    * Details",
        "",
        *SOURCE,
    ]
    assert staging_leftovers(tmp_path) == []


@mark_cli
def test_all_options(tmp_path: Path) -> None:
    """Title, tab size, result file and skip flag are all honored."""
    write_lines(tmp_path / "README.md", SOURCE)

    result: Result = run_cli_in(
        tmp_path,
        [
            "-f",
            "README.md",
            "--title-message",
            "Contents",
            "--tab-space-size",
            "2",
            "--result-file",
            "OUT.md",
            "--skip-first-title",
        ],
    )

    assert_SUCCESS(result)
    assert read_lines(tmp_path / "README.md") == SOURCE
    assert read_lines(tmp_path / "OUT.md") == [
        "# Contents",
        "  * Details",
        "",
        "## Details",
        "world",
    ]
    assert staging_leftovers(tmp_path) == []


@mark_cli
def test_verbose_run_logs_progress(tmp_path: Path) -> None:
    """With `-v` the run reports where the outline was written."""
    doc: Path = write_lines(tmp_path / "README.md", SOURCE)

    result: Result = run_cli(["-v", "--file", str(doc)])

    assert_SUCCESS(result)
    assert "Outline written to" in result.output
