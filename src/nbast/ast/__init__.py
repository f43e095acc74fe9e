#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/ast/__init__.py
"""Notebook node tree: node classes, walker and serialization."""

from nbast.ast.nodes import (
    Cell,
    Code,
    CodeCell,
    DisplayDataOutput,
    Element,
    ErrorOutput,
    ExecuteResultOutput,
    Html,
    Markdown,
    MarkdownCell,
    MimeBundle,
    Node,
    Output,
    ParsedHtml,
    ParsedMarkdown,
    Point,
    Position,
    Raw,
    RawCell,
    Root,
    StreamOutput,
    is_cell,
    is_code_cell,
    is_display_data_output,
    is_error_output,
    is_execute_result_output,
    is_html,
    is_literal,
    is_markdown,
    is_markdown_cell,
    is_output,
    is_parent,
    is_parsed_html,
    is_parsed_markdown,
    is_raw_cell,
    is_root,
    is_stream_output,
)
from nbast.ast.serialization import ast_to_dict, ast_to_json
from nbast.ast.walker import (
    STOP,
    WalkSignal,
    filter_nodes,
    find,
    find_all,
    map_nodes,
    transform,
    transform_type,
    visit,
    visit_type,
)

__all__ = [
    # Nodes
    "Cell",
    "Code",
    "CodeCell",
    "DisplayDataOutput",
    "Element",
    "ErrorOutput",
    "ExecuteResultOutput",
    "Html",
    "Markdown",
    "MarkdownCell",
    "MimeBundle",
    "Node",
    "Output",
    "ParsedHtml",
    "ParsedMarkdown",
    "Point",
    "Position",
    "Raw",
    "RawCell",
    "Root",
    "StreamOutput",
    # Guards
    "is_cell",
    "is_code_cell",
    "is_display_data_output",
    "is_error_output",
    "is_execute_result_output",
    "is_html",
    "is_literal",
    "is_markdown",
    "is_markdown_cell",
    "is_output",
    "is_parent",
    "is_parsed_html",
    "is_parsed_markdown",
    "is_raw_cell",
    "is_root",
    "is_stream_output",
    # Walker
    "STOP",
    "WalkSignal",
    "filter_nodes",
    "find",
    "find_all",
    "map_nodes",
    "transform",
    "transform_type",
    "visit",
    "visit_type",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
]
