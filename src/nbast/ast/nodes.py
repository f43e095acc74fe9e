#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/ast/nodes.py
"""AST node classes for notebook representation.

This module defines the node hierarchy used to represent a Jupyter notebook
as a tree. Every node carries a string discriminant ``type``, an optional
free-form ``data`` dict and an optional source ``position``.

Capabilities are structural rather than nominal:

- a node is a *parent* when it has a ``children`` list
- a node is a *literal* when it has a string ``value``

The tree walker only relies on these two tests, so it works on any node
class, including the generic ``Element`` nodes produced by the markdown and
HTML processors.

Node Hierarchy
--------------
Root
    CodeCell -> Code, Output...
    MarkdownCell -> Markdown | ParsedMarkdown
    RawCell -> Raw

Outputs:
    StreamOutput, DisplayDataOutput, ExecuteResultOutput, ErrorOutput

Content:
    Code, Markdown, ParsedMarkdown, Html, ParsedHtml, Raw, Element

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from nbast.constants import OUTPUT_NODE_TYPES, CellType, StreamName

MimeBundle = dict[str, Any]


@dataclass
class Point:
    """A single place in a source file.

    Parameters
    ----------
    line : int
        1-indexed line number
    column : int
        1-indexed column number
    offset : int
        0-indexed character offset

    """

    line: int
    column: int
    offset: int


@dataclass
class Position:
    """Source span of a node."""

    start: Point
    end: Point


class Node:
    """Base class for all AST nodes.

    Subclasses define ``type`` either as a class-level discriminant or, for
    ``Element``, as an instance field.
    """

    type: str
    data: Optional[dict[str, Any]]
    position: Optional[Position]


def is_parent(node: Any) -> bool:
    """Return True when ``node`` carries a list of children."""
    return isinstance(getattr(node, "children", None), list)


def is_literal(node: Any) -> bool:
    """Return True when ``node`` carries a string ``value``."""
    return isinstance(getattr(node, "value", None), str)


# ============================================================================
# Content nodes
# ============================================================================


@dataclass
class Code(Node):
    """Source code of a code cell.

    Parameters
    ----------
    value : str
        Cell source, always a single string
    lang : str or None
        Kernel language (e.g. "python")
    meta : str or None
        Free-form info string

    """

    type: ClassVar[str] = "code"

    value: str
    lang: Optional[str] = None
    meta: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class Markdown(Node):
    """Unparsed markdown text of a markdown cell."""

    type: ClassVar[str] = "markdown"

    value: str
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class ParsedMarkdown(Node):
    """Markdown cell content parsed into a tree.

    ``children`` are opaque nodes produced by the markdown processor.
    ``data["source"]`` holds the original markdown text.
    """

    type: ClassVar[str] = "parsedMarkdown"

    children: list[Any] = field(default_factory=list)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class Html(Node):
    """Unparsed HTML text."""

    type: ClassVar[str] = "html"

    value: str
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class ParsedHtml(Node):
    """HTML parsed into a tree; ``data["source"]`` holds the original HTML."""

    type: ClassVar[str] = "parsedHtml"

    children: list[Any] = field(default_factory=list)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class Raw(Node):
    """Content of a raw cell."""

    type: ClassVar[str] = "raw"

    value: str
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class Element(Node):
    """Generic node produced by the markdown and HTML processors.

    Parameters
    ----------
    type : str
        Token or node kind (e.g. "paragraph", "text", "element")
    children : list of Element or None
        Child nodes; None for leaves
    value : str or None
        Literal text of the node, if any
    attributes : dict
        Token attributes (mistune ``attrs``) or HTML attributes
    extra : dict
        Remaining token fields needed to serialize the node again
        (e.g. mistune ``style``/``marker``, HTML ``tag_name``)

    """

    type: str
    children: Optional[list[Any]] = None
    value: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


# ============================================================================
# Output nodes
# ============================================================================


@dataclass
class StreamOutput(Node):
    """Text written to stdout or stderr; ``text`` is already joined."""

    type: ClassVar[str] = "stream"

    name: StreamName
    text: str
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class DisplayDataOutput(Node):
    """Rich display output.

    ``data`` is the MIME bundle exactly as stored in the notebook; payloads
    are not normalized here (see ``nbast.mime_types.normalize_mime_data``).
    """

    type: ClassVar[str] = "displayData"

    data: MimeBundle = field(default_factory=dict)
    metadata: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class ExecuteResultOutput(Node):
    """Result of the last expression of a code cell."""

    type: ClassVar[str] = "executeResult"

    data: MimeBundle = field(default_factory=dict)
    execution_count: Optional[int] = None
    metadata: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class ErrorOutput(Node):
    """Exception raised while executing a cell."""

    type: ClassVar[str] = "error"

    ename: str
    evalue: str
    traceback: list[str] = field(default_factory=list)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


Output = Union[StreamOutput, DisplayDataOutput, ExecuteResultOutput, ErrorOutput]


# ============================================================================
# Cells
# ============================================================================


@dataclass
class CodeCell(Node):
    """Code cell: the first child is a ``Code`` node, the rest are outputs.

    Parameters
    ----------
    children : list of Node
        ``[Code, *outputs]`` in execution order
    execution_count : int or None
        Execution counter of the cell
    metadata : dict
        Cell metadata (``tags``, ``collapsed``, ...)

    """

    type: ClassVar[str] = "cell"
    cell_type: ClassVar[CellType] = "code"

    children: list[Node] = field(default_factory=list)
    execution_count: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None

    @property
    def code(self) -> Code:
        """The ``Code`` child of this cell."""
        return self.children[0]  # type: ignore[return-value]

    @property
    def outputs(self) -> list[Node]:
        """Output children, in execution order."""
        return self.children[1:]


@dataclass
class MarkdownCell(Node):
    """Markdown cell with exactly one ``Markdown`` or ``ParsedMarkdown`` child."""

    type: ClassVar[str] = "cell"
    cell_type: ClassVar[CellType] = "markdown"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


@dataclass
class RawCell(Node):
    """Raw cell with exactly one ``Raw`` child."""

    type: ClassVar[str] = "cell"
    cell_type: ClassVar[CellType] = "raw"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


Cell = Union[CodeCell, MarkdownCell, RawCell]


@dataclass
class Root(Node):
    """Root node representing an entire notebook.

    Parameters
    ----------
    children : list of Cell
        Cells in document order
    metadata : dict
        Notebook-level metadata (``kernelspec``, ``language_info``, ...)
    nbformat : int
        Major notebook format version
    nbformat_minor : int
        Minor notebook format version

    """

    type: ClassVar[str] = "root"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    nbformat: int = 4
    nbformat_minor: int = 5
    data: Optional[dict[str, Any]] = None
    position: Optional[Position] = None


# ============================================================================
# Type guards
# ============================================================================


def is_root(node: Any) -> bool:
    """Check if a node is a Root node."""
    return getattr(node, "type", None) == "root"


def is_cell(node: Any) -> bool:
    """Check if a node is a cell of any kind."""
    return getattr(node, "type", None) == "cell"


def is_code_cell(node: Any) -> bool:
    """Check if a node is a code cell."""
    return is_cell(node) and getattr(node, "cell_type", None) == "code"


def is_markdown_cell(node: Any) -> bool:
    """Check if a node is a markdown cell."""
    return is_cell(node) and getattr(node, "cell_type", None) == "markdown"


def is_raw_cell(node: Any) -> bool:
    """Check if a node is a raw cell."""
    return is_cell(node) and getattr(node, "cell_type", None) == "raw"


def is_output(node: Any) -> bool:
    """Check if a node is one of the four output variants."""
    return getattr(node, "type", None) in OUTPUT_NODE_TYPES


def is_stream_output(node: Any) -> bool:
    return getattr(node, "type", None) == "stream"


def is_display_data_output(node: Any) -> bool:
    return getattr(node, "type", None) == "displayData"


def is_execute_result_output(node: Any) -> bool:
    return getattr(node, "type", None) == "executeResult"


def is_error_output(node: Any) -> bool:
    return getattr(node, "type", None) == "error"


def is_markdown(node: Any) -> bool:
    return getattr(node, "type", None) == "markdown"


def is_parsed_markdown(node: Any) -> bool:
    return getattr(node, "type", None) == "parsedMarkdown"


def is_html(node: Any) -> bool:
    return getattr(node, "type", None) == "html"


def is_parsed_html(node: Any) -> bool:
    return getattr(node, "type", None) == "parsedHtml"
