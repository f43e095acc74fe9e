"""nbast - Jupyter notebooks as walkable node trees.

nbast maps a ``.ipynb`` document onto a tree of typed nodes (root, cells,
cell content, outputs) and provides a generic asynchronous walker to visit,
rewrite, filter and search it. Markdown and HTML content can be parsed into
the same tree through mistune and BeautifulSoup, and output MIME bundles
can be classified and ranked to pick the representation to render.

Key Features
------------
- Typed node classes with structural parent/literal detection
- Async walker accepting sync or async callbacks, with early stop
- Built-in transformers (strip outputs, drop empty or tagged cells)
- MIME type classification and priority-based selection
- Output rendering helpers producing HTML fragments

Examples
--------
Parse a notebook and collect its code:

    >>> import asyncio
    >>> from nbast import parse_from_file, find_all, is_code_cell
    >>> root = parse_from_file("analysis.ipynb")
    >>> cells = asyncio.run(find_all(root, is_code_cell))

Strip outputs in place:

    >>> from nbast import transform, remove_outputs
    >>> root = asyncio.run(transform(root, remove_outputs))

Pick the best representation of an output:

    >>> from nbast import get_best_output_mime_type
    >>> get_best_output_mime_type(cells[0].outputs[0])
    'text/html'

See Also
--------
nbast.ast : Node definitions and the tree walker
nbast.transforms : Ready-made transformers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "nbast requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from nbast.ast import (  # noqa: E402
    STOP,
    Code,
    CodeCell,
    DisplayDataOutput,
    Element,
    ErrorOutput,
    ExecuteResultOutput,
    Html,
    Markdown,
    MarkdownCell,
    ParsedHtml,
    ParsedMarkdown,
    Point,
    Position,
    Raw,
    RawCell,
    Root,
    StreamOutput,
    WalkSignal,
    ast_to_dict,
    ast_to_json,
    filter_nodes,
    find,
    find_all,
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
    map_nodes,
    transform,
    transform_type,
    visit,
    visit_type,
)
from nbast.exceptions import (  # noqa: E402
    DependencyError,
    FileError,
    MalformedFileError,
    NbAstError,
    ParsingError,
    ValidationError,
)
from nbast.mime_types import (  # noqa: E402
    MIME_TYPE_PRIORITY,
    MimeCategory,
    get_mime_type_category,
    get_mime_type_priority,
    normalize_mime_data,
    select_best_mime_type,
)
from nbast.options import (  # noqa: E402
    HtmlProcessorOptions,
    MarkdownProcessorOptions,
    MarkdownToHtmlOptions,
    ParseOptions,
    RenderOutputOptions,
)
from nbast.output_utils import (  # noqa: E402
    extract_html,
    extract_markdown,
    extract_mime_data,
    extract_text,
    get_best_output_mime_type,
    get_best_text_representation,
    get_output_mime_types,
    has_html,
    has_image,
    has_markdown,
    has_mime_type,
    has_text,
    has_visualization,
    has_widget,
    output_markdown_to_html,
    parse_output_html,
    render_output_to_html,
)
from nbast.parsers.ipynb import IpynbParser, parse, parse_from_file, parse_from_string  # noqa: E402
from nbast.processor import (  # noqa: E402
    markdown_to_html,
    parse_html,
    parse_markdown,
    stringify_html,
    stringify_markdown,
)
from nbast.transforms import (  # noqa: E402
    ExtractCellsByTagTransform,
    ParseMarkdownCellsTransform,
    RemoveCellsByTagTransform,
    RemoveEmptyCellsTransform,
    RemoveOutputsTransform,
    extract_cells_by_tag,
    remove_cells_by_tag,
    remove_empty_cells,
    remove_outputs,
)

__all__ = [
    "__version__",
    # Nodes
    "Code",
    "CodeCell",
    "DisplayDataOutput",
    "Element",
    "ErrorOutput",
    "ExecuteResultOutput",
    "Html",
    "Markdown",
    "MarkdownCell",
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
    "ast_to_dict",
    "ast_to_json",
    # Parsing
    "IpynbParser",
    "parse",
    "parse_from_file",
    "parse_from_string",
    # Text processing
    "markdown_to_html",
    "parse_html",
    "parse_markdown",
    "stringify_html",
    "stringify_markdown",
    # MIME types
    "MIME_TYPE_PRIORITY",
    "MimeCategory",
    "get_mime_type_category",
    "get_mime_type_priority",
    "normalize_mime_data",
    "select_best_mime_type",
    # Outputs
    "extract_html",
    "extract_markdown",
    "extract_mime_data",
    "extract_text",
    "get_best_output_mime_type",
    "get_best_text_representation",
    "get_output_mime_types",
    "has_html",
    "has_image",
    "has_markdown",
    "has_mime_type",
    "has_text",
    "has_visualization",
    "has_widget",
    "output_markdown_to_html",
    "parse_output_html",
    "render_output_to_html",
    # Transforms
    "ExtractCellsByTagTransform",
    "ParseMarkdownCellsTransform",
    "RemoveCellsByTagTransform",
    "RemoveEmptyCellsTransform",
    "RemoveOutputsTransform",
    "extract_cells_by_tag",
    "remove_cells_by_tag",
    "remove_empty_cells",
    "remove_outputs",
    # Options
    "HtmlProcessorOptions",
    "MarkdownProcessorOptions",
    "MarkdownToHtmlOptions",
    "ParseOptions",
    "RenderOutputOptions",
    # Exceptions
    "DependencyError",
    "FileError",
    "MalformedFileError",
    "NbAstError",
    "ParsingError",
    "ValidationError",
]
