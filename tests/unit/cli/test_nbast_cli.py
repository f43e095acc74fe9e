#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the nbast command-line interface."""
import json

import pytest

from nbast.ast import Code, CodeCell, Element, ErrorOutput, Root, StreamOutput
from nbast.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    describe_node,
    get_exit_code_for_exception,
    main,
)
from nbast.exceptions import DependencyError, FileError, MalformedFileError, ParsingError, ValidationError


@pytest.fixture(autouse=True)
def _clean_logging(restore_logging):
    yield


@pytest.mark.unit
@pytest.mark.cli
class TestTreeCommand:
    """Test ``nbast tree``."""

    def test_text_listing(self, notebook_file, capsys) -> None:
        assert main(["tree", str(notebook_file)]) == EXIT_SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "root (6 children)"
        assert lines[1] == "  cell[markdown] (1 children)"
        assert lines[2].startswith("    markdown '# Analysis")
        assert any(line.strip().startswith("stream (stdout)") for line in lines)
        assert any(line.strip() == "error ZeroDivisionError: division by zero" for line in lines)

    def test_reverse(self, notebook_file, capsys) -> None:
        main(["tree", str(notebook_file), "--reverse"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "  cell[raw] (1 children)"

    def test_remove_outputs(self, notebook_file, capsys) -> None:
        main(["tree", str(notebook_file), "--remove-outputs"])
        out = capsys.readouterr().out
        assert "stream" not in out
        assert "executeResult" not in out

    def test_tag_filters(self, notebook_file, capsys) -> None:
        main(["tree", str(notebook_file), "--keep-tag", "setup", "--keep-tag", "solution", "--remove-tag", "setup"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "root (1 children)"

    def test_remove_empty_cells(self, notebook_file, capsys) -> None:
        main(["tree", str(notebook_file), "--remove-empty-cells"])
        assert capsys.readouterr().out.splitlines()[0] == "root (5 children)"

    def test_parse_markdown(self, notebook_file, capsys) -> None:
        main(["tree", str(notebook_file), "--parse-markdown"])
        out = capsys.readouterr().out
        assert "parsedMarkdown" in out
        assert "heading" in out

    def test_json_format(self, notebook_file, capsys) -> None:
        assert main(["tree", str(notebook_file), "--format", "json"]) == EXIT_SUCCESS

        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "root"
        assert data["children"][1]["cell_type"] == "code"

    def test_rich_output(self, notebook_file, capsys) -> None:
        assert main(["tree", str(notebook_file), "--rich"]) == EXIT_SUCCESS
        assert "cell[code]" in capsys.readouterr().out

    def test_unknown_plugin(self, notebook_file, capsys) -> None:
        code = main(["tree", str(notebook_file), "--parse-markdown", "--plugin", "tabel"])

        assert code == EXIT_VALIDATION_ERROR
        assert "did you mean 'table'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main(["tree", str(tmp_path / "absent.ipynb")]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path) -> None:
        path = tmp_path / "broken.ipynb"
        path.write_text("[1, 2", encoding="utf-8")
        assert main(["tree", str(path)]) == EXIT_FILE_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestOutputsCommand:
    """Test ``nbast outputs``."""

    def test_plain_listing(self, notebook_file, capsys) -> None:
        assert main(["outputs", str(notebook_file)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "text/html" in out
        assert "image/png" in out
        assert "application/vnd.jupyter.error" in out
        assert "Total: 4 outputs" in out

    def test_rich_table(self, notebook_file, capsys) -> None:
        assert main(["outputs", str(notebook_file), "--rich"]) == EXIT_SUCCESS
        assert "Outputs (4)" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestArguments:
    """Test argument handling."""

    def test_help_exits_cleanly(self, capsys) -> None:
        assert main(["--help"]) == EXIT_SUCCESS
        assert "tree" in capsys.readouterr().out

    def test_missing_command(self) -> None:
        assert main([]) == 2

    def test_log_file(self, notebook_file, tmp_path) -> None:
        log_path = tmp_path / "nbast.log"
        assert main(["--log-level", "DEBUG", "--log-file", str(log_path), "tree", str(notebook_file)]) == 0
        assert "Parsed notebook with 6 cells" in log_path.read_text(encoding="utf-8")


@pytest.mark.unit
class TestHelpers:
    """Test exit code mapping and node labels."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (DependencyError("html", [("lxml", "")]), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (ValueError("bad"), EXIT_VALIDATION_ERROR),
            (MalformedFileError("bad"), EXIT_FILE_ERROR),
            (FileError("bad"), EXIT_FILE_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (RuntimeError("bad"), EXIT_ERROR),
        ],
    )
    def test_exit_codes(self, error, expected) -> None:
        assert get_exit_code_for_exception(error) == expected

    def test_describe_node(self) -> None:
        assert describe_node(Root(children=[CodeCell()])) == "root (1 children)"
        assert describe_node(Code(value="x = 1")) == "code 'x = 1'"
        assert describe_node(StreamOutput(name="stderr", text="a\nb")) == "stream (stderr) 'a\\nb'"
        assert describe_node(ErrorOutput(ename="E", evalue="v")) == "error E: v"
        assert describe_node(Element(type="element", children=[], extra={"tag_name": "p"})) == (
            "element<p> (0 children)"
        )
        assert describe_node(Element(type="thematic_break")) == "thematic_break"

    def test_long_values_are_truncated(self) -> None:
        label = describe_node(Code(value="x" * 100))
        assert label.endswith("...'")
        assert len(label) < 60
