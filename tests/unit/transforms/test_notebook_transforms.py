#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the built-in notebook transformers."""
import asyncio

import pytest

from nbast.ast import (
    Code,
    CodeCell,
    ErrorOutput,
    Markdown,
    MarkdownCell,
    ParsedMarkdown,
    Raw,
    RawCell,
    Root,
    StreamOutput,
    transform,
)
from nbast.options import MarkdownProcessorOptions
from nbast.parsers.ipynb import parse
from nbast.transforms import (
    ExtractCellsByTagTransform,
    ParseMarkdownCellsTransform,
    RemoveCellsByTagTransform,
    extract_cells_by_tag,
    remove_cells_by_tag,
    remove_empty_cells,
    remove_outputs,
)


def tagged(*tags: str) -> CodeCell:
    return CodeCell(children=[Code(value="x")], metadata={"tags": list(tags)})


@pytest.mark.unit
class TestRemoveOutputs:
    """Test output removal."""

    def test_keeps_only_code(self) -> None:
        code = Code(value="1/0")
        cell = CodeCell(children=[code, StreamOutput(name="stdout", text="x"), ErrorOutput(ename="E", evalue="v")])
        root = Root(children=[cell])

        asyncio.run(transform(root, remove_outputs))

        assert cell.children == [code]

    def test_other_cells_untouched(self) -> None:
        markdown = MarkdownCell(children=[Markdown(value="text")])
        root = Root(children=[markdown])

        asyncio.run(transform(root, remove_outputs))

        assert root.children == [markdown]
        assert markdown.children == [Markdown(value="text")]

    def test_inert_on_non_root(self) -> None:
        cell = CodeCell(children=[Code(value="x"), StreamOutput(name="stdout", text="x")])
        assert remove_outputs(cell) is None
        assert len(cell.children) == 2

    def test_on_parsed_notebook(self, sample_notebook) -> None:
        root = asyncio.run(transform(parse(sample_notebook), remove_outputs))
        for cell in root.children:
            if cell.cell_type == "code":
                assert len(cell.children) == 1


@pytest.mark.unit
class TestRemoveEmptyCells:
    """Test empty cell removal."""

    def test_blank_cells_removed(self) -> None:
        keep_code = CodeCell(children=[Code(value="x = 1")])
        keep_raw = RawCell(children=[Raw(value="")])
        root = Root(
            children=[
                CodeCell(children=[Code(value="  \n")]),
                keep_code,
                MarkdownCell(children=[Markdown(value="\n\n")]),
                MarkdownCell(children=[ParsedMarkdown(children=[])]),
                keep_raw,
            ]
        )

        asyncio.run(transform(root, remove_empty_cells))

        assert root.children == [keep_code, keep_raw]

    def test_parsed_markdown_with_content_kept(self) -> None:
        root = parse(
            {"cells": [{"cell_type": "markdown", "source": "# Hi"}, {"cell_type": "markdown", "source": ""}]}
        )
        asyncio.run(transform(root, ParseMarkdownCellsTransform()))
        asyncio.run(transform(root, remove_empty_cells))

        assert len(root.children) == 1
        assert root.children[0].children[0].data["source"] == "# Hi"

    def test_on_parsed_notebook(self, sample_notebook) -> None:
        root = asyncio.run(transform(parse(sample_notebook), remove_empty_cells))
        assert len(root.children) == 5


@pytest.mark.unit
class TestTagFilters:
    """Test tag-based cell selection."""

    def test_remove_by_tag(self) -> None:
        keep = tagged("keep")
        untagged = CodeCell(children=[Code(value="y")])
        root = Root(children=[tagged("hide"), keep, tagged("keep", "hide"), untagged])

        asyncio.run(transform(root, remove_cells_by_tag("hide")))

        assert root.children == [keep, untagged]

    def test_remove_by_any_of_several_tags(self) -> None:
        root = Root(children=[tagged("a"), tagged("b"), tagged("c")])
        asyncio.run(transform(root, remove_cells_by_tag("a", "b")))
        assert [cell.metadata["tags"] for cell in root.children] == [["c"]]

    def test_extract_by_tag(self) -> None:
        wanted = tagged("solution")
        root = Root(children=[tagged("setup"), wanted, CodeCell(children=[Code(value="z")])])

        asyncio.run(transform(root, extract_cells_by_tag("solution", "other")))

        assert root.children == [wanted]

    def test_extract_with_no_tags_removes_everything(self) -> None:
        root = Root(children=[tagged("a")])
        asyncio.run(transform(root, extract_cells_by_tag()))
        assert root.children == []

    def test_factories_return_transformer_objects(self) -> None:
        assert isinstance(remove_cells_by_tag("a"), RemoveCellsByTagTransform)
        assert isinstance(extract_cells_by_tag("a"), ExtractCellsByTagTransform)
        assert remove_cells_by_tag("a", "b").tags == frozenset({"a", "b"})

    def test_on_parsed_notebook(self, sample_notebook) -> None:
        root = asyncio.run(transform(parse(sample_notebook), extract_cells_by_tag("solution")))
        assert [cell.execution_count for cell in root.children] == [2]


@pytest.mark.unit
class TestParseMarkdownCells:
    """Test the asynchronous markdown parsing transformer."""

    def test_replaces_markdown_nodes(self, sample_notebook) -> None:
        root = asyncio.run(transform(parse(sample_notebook), ParseMarkdownCellsTransform()))
        content = root.children[0].children[0]

        assert isinstance(content, ParsedMarkdown)
        assert content.data["source"] == "# Analysis\n\nSome *notes*."
        assert content.children[0].type == "heading"

    def test_leaves_other_nodes(self) -> None:
        code = Code(value="# not markdown")
        root = Root(children=[CodeCell(children=[code])])

        asyncio.run(transform(root, ParseMarkdownCellsTransform()))

        assert root.children[0].children[0] is code

    def test_options_are_used(self) -> None:
        root = Root(children=[MarkdownCell(children=[Markdown(value="~~x~~")])])
        transformer = ParseMarkdownCellsTransform(MarkdownProcessorOptions(plugins=("strikethrough",)))

        asyncio.run(transform(root, transformer))

        paragraph = root.children[0].children[0].children[0]
        assert paragraph.children[0].type == "strikethrough"
