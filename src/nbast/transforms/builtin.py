#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/transforms/builtin.py
"""Built-in transformers for common notebook processing tasks.

Every transformer here is a callable with the walker's
``(node, index, parent)`` signature, so it can be passed straight to
``nbast.ast.transform``. The cell-level transformers only act when called
on the ``Root`` node; they rewrite ``root.children`` in place and return
None, which leaves every other node untouched.

Available Transforms
--------------------
- RemoveOutputsTransform: Drop all outputs from code cells
- RemoveEmptyCellsTransform: Drop code and markdown cells with blank content
- RemoveCellsByTagTransform: Drop cells carrying any of the given tags
- ExtractCellsByTagTransform: Keep only cells carrying one of the given tags
- ParseMarkdownCellsTransform: Parse ``Markdown`` nodes into ``ParsedMarkdown``

Examples
--------
Strip outputs and empty cells:

    >>> await transform(root, remove_outputs)
    >>> await transform(root, remove_empty_cells)

Keep only cells tagged "solution":

    >>> await transform(root, extract_cells_by_tag("solution"))

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from nbast.ast.nodes import ParsedMarkdown, is_code_cell, is_markdown, is_markdown_cell, is_root
from nbast.options.processor import MarkdownProcessorOptions
from nbast.processor import parse_markdown

logger = logging.getLogger(__name__)


def _cell_tags(cell: Any) -> list[str]:
    metadata = getattr(cell, "metadata", None) or {}
    return list(metadata.get("tags") or [])


class RemoveOutputsTransform:
    """Remove all outputs from code cells, keeping only their ``Code`` child."""

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> None:
        if not is_root(node):
            return None
        for cell in node.children:
            if is_code_cell(cell) and len(cell.children) > 1:
                cell.children = cell.children[:1]
        return None


class RemoveEmptyCellsTransform:
    """Remove cells without content.

    A code cell is empty when its source is blank. A markdown cell is empty
    when its text is blank or, once parsed, when it has no block other than
    blank lines. Raw cells are always kept.
    """

    @staticmethod
    def _has_content(cell: Any) -> bool:
        if is_code_cell(cell):
            return bool(cell.children and cell.children[0].value.strip())
        if is_markdown_cell(cell):
            if not cell.children:
                return False
            content = cell.children[0]
            if is_markdown(content):
                return bool(content.value.strip())
            return any(getattr(child, "type", None) != "blank_line" for child in content.children or [])
        return True

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> None:
        if not is_root(node):
            return None
        before = len(node.children)
        node.children = [cell for cell in node.children if self._has_content(cell)]
        logger.debug("Removed %d empty cells", before - len(node.children))
        return None


class RemoveCellsByTagTransform:
    """Remove cells whose ``metadata["tags"]`` contains any of ``tags``.

    Parameters
    ----------
    tags : iterable of str
        Tags marking cells to remove

    """

    def __init__(self, tags: Any):
        """Initialize with the tags to match."""
        self.tags = frozenset(tags)

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> None:
        if not is_root(node):
            return None
        node.children = [cell for cell in node.children if not self.tags.intersection(_cell_tags(cell))]
        return None


class ExtractCellsByTagTransform:
    """Keep only cells whose ``metadata["tags"]`` contains one of ``tags``.

    With no tags every cell is removed.
    """

    def __init__(self, tags: Any):
        """Initialize with the tags to match."""
        self.tags = frozenset(tags)

    def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> None:
        if not is_root(node):
            return None
        node.children = [cell for cell in node.children if self.tags.intersection(_cell_tags(cell))]
        return None


class ParseMarkdownCellsTransform:
    """Replace ``Markdown`` nodes with ``ParsedMarkdown`` trees.

    This is a coroutine transformer: it is awaited by the walker like any
    other callback. The original text is kept in ``data["source"]``.

    Parameters
    ----------
    options : MarkdownProcessorOptions or None
        Plugin configuration for the markdown processor

    Examples
    --------
        >>> root = await transform(root, ParseMarkdownCellsTransform())

    """

    def __init__(self, options: Optional[MarkdownProcessorOptions] = None):
        """Initialize with markdown processor options."""
        self.options = options

    async def __call__(self, node: Any, index: Optional[int] = None, parent: Any = None) -> Optional[ParsedMarkdown]:
        if not is_markdown(node):
            return None
        tree = parse_markdown(node.value, self.options)
        data = dict(node.data or {})
        data["source"] = node.value
        return ParsedMarkdown(children=tree.children, data=data, position=node.position)


remove_outputs = RemoveOutputsTransform()
remove_empty_cells = RemoveEmptyCellsTransform()


def remove_cells_by_tag(*tags: str) -> RemoveCellsByTagTransform:
    """Build a transformer removing cells tagged with any of ``tags``."""
    return RemoveCellsByTagTransform(tags)


def extract_cells_by_tag(*tags: str) -> ExtractCellsByTagTransform:
    """Build a transformer keeping only cells tagged with one of ``tags``."""
    return ExtractCellsByTagTransform(tags)
