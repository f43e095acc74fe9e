#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/cli.py
"""Command-line interface for nbast.

Two subcommands are provided:

- ``nbast tree NOTEBOOK`` prints the node tree of a notebook, optionally
  after applying the built-in transformers
- ``nbast outputs NOTEBOOK`` lists every code cell output with its best MIME
  type and category

Both support plain text and rich terminal output (``--rich``).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

from nbast.ast.nodes import is_literal, is_output, is_parent
from nbast.ast.serialization import ast_to_json
from nbast.ast.walker import transform, visit
from nbast.exceptions import DependencyError, FileError, NbAstError, ParsingError, ValidationError
from nbast.logging_utils import configure_logging
from nbast.mime_types import get_mime_type_category
from nbast.options.ipynb import ParseOptions
from nbast.options.processor import MarkdownProcessorOptions
from nbast.output_utils import get_best_output_mime_type
from nbast.parsers.ipynb import parse_from_file
from nbast.transforms.builtin import (
    extract_cells_by_tag,
    remove_cells_by_tag,
    remove_empty_cells,
    remove_outputs,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

_PREVIEW_LENGTH = 40


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the ``nbast`` command.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``tree`` and ``outputs`` subcommands

    """
    parser = argparse.ArgumentParser(prog="nbast", description="Inspect Jupyter notebooks as node trees.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose DEBUG logging with timestamps")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_help = {f.name: f.metadata.get("help", "") for f in ParseOptions.__dataclass_fields__.values()}

    tree_parser = subparsers.add_parser("tree", help="Print the node tree of a notebook")
    tree_parser.add_argument("notebook", help="Path to an .ipynb file")
    tree_parser.add_argument("--parse-markdown", action="store_true", help=parse_help["parse_markdown"])
    tree_parser.add_argument(
        "--plugin",
        action="append",
        default=[],
        metavar="NAME",
        help="mistune plugin to enable when parsing markdown (repeatable)",
    )
    tree_parser.add_argument("--remove-outputs", action="store_true", help="Drop all code cell outputs")
    tree_parser.add_argument("--remove-empty-cells", action="store_true", help="Drop blank code and markdown cells")
    tree_parser.add_argument(
        "--remove-tag", action="append", default=[], metavar="TAG", help="Drop cells carrying TAG (repeatable)"
    )
    tree_parser.add_argument(
        "--keep-tag", action="append", default=[], metavar="TAG", help="Keep only cells carrying TAG (repeatable)"
    )
    tree_parser.add_argument("--reverse", action="store_true", help="List children in reverse order")
    tree_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    tree_parser.add_argument("--rich", action="store_true", help="Use rich terminal output")

    outputs_parser = subparsers.add_parser("outputs", help="List code cell outputs and their MIME types")
    outputs_parser.add_argument("notebook", help="Path to an .ipynb file")
    outputs_parser.add_argument("--rich", action="store_true", help="Use rich terminal output")

    return parser


def _preview(text: str) -> str:
    if len(text) > _PREVIEW_LENGTH:
        return text[: _PREVIEW_LENGTH - 3] + "..."
    return text


def describe_node(node: Any) -> str:
    """Return a one-line label for a node, used by the tree listing."""
    node_type = getattr(node, "type", "?")
    label = node_type
    cell_type = getattr(node, "cell_type", None)
    if cell_type:
        label = f"{node_type}[{cell_type}]"
    elif node_type == "element" and getattr(node, "extra", None):
        label = f"element<{node.extra.get('tag_name', '?')}>"

    if node_type == "stream":
        return f"{label} ({node.name}) {_preview(node.text)!r}"
    if node_type == "error":
        return f"{label} {node.ename}: {_preview(node.evalue)}"
    if is_output(node):
        return f"{label} [{', '.join(node.data.keys())}]"
    if is_literal(node):
        return f"{label} {_preview(node.value)!r}"
    if is_parent(node):
        return f"{label} ({len(node.children)} children)"
    return label


async def _prepare_tree(parsed: argparse.Namespace) -> Any:
    markdown_options = MarkdownProcessorOptions(plugins=tuple(parsed.plugin)) if parsed.plugin else None
    options = ParseOptions(parse_markdown=parsed.parse_markdown, markdown_options=markdown_options)
    root = parse_from_file(parsed.notebook, options)

    transformers: list[Any] = []
    if parsed.remove_outputs:
        transformers.append(remove_outputs)
    if parsed.keep_tag:
        transformers.append(extract_cells_by_tag(*parsed.keep_tag))
    if parsed.remove_tag:
        transformers.append(remove_cells_by_tag(*parsed.remove_tag))
    if parsed.remove_empty_cells:
        transformers.append(remove_empty_cells)

    for transformer in transformers:
        root = await transform(root, transformer)
    return root


async def _collect_lines(root: Any, reverse: bool) -> list[tuple[int, str]]:
    depths: dict[int, int] = {}
    lines: list[tuple[int, str]] = []

    def _record(node: Any, index: Optional[int], parent: Any) -> None:
        depth = 0 if parent is None else depths[id(parent)] + 1
        depths[id(node)] = depth
        lines.append((depth, describe_node(node)))

    await visit(root, _record, reverse=reverse)
    return lines


def _print_tree(lines: list[tuple[int, str]], use_rich: bool) -> None:
    if use_rich:
        try:
            from rich.console import Console
            from rich.text import Text
            from rich.tree import Tree
        except ImportError:
            use_rich = False
        else:
            stack: list[Tree] = []
            for depth, label in lines:
                if not stack:
                    stack.append(Tree(Text(label, style="bold")))
                    continue
                del stack[depth:]
                stack.append(stack[-1].add(Text(label)))
            if stack:
                Console().print(stack[0])
            return

    for depth, label in lines:
        print(f"{'  ' * depth}{label}")


def _handle_tree(parsed: argparse.Namespace) -> int:
    root = asyncio.run(_prepare_tree(parsed))
    if parsed.format == "json":
        print(ast_to_json(root, indent=2))
        return EXIT_SUCCESS

    lines = asyncio.run(_collect_lines(root, parsed.reverse))
    _print_tree(lines, parsed.rich)
    return EXIT_SUCCESS


def _handle_outputs(parsed: argparse.Namespace) -> int:
    root = parse_from_file(parsed.notebook)

    rows: list[tuple[str, str, str, str]] = []
    for cell_index, cell in enumerate(root.children):
        for node in cell.children:
            if not is_output(node):
                continue
            best = get_best_output_mime_type(node)
            category = get_mime_type_category(best).value if best else ""
            rows.append((str(cell_index), node.type, best or "", category))

    use_rich = parsed.rich
    if use_rich:
        try:
            from rich.console import Console
            from rich.table import Table
        except ImportError:
            use_rich = False
        else:
            table = Table(title=f"Outputs ({len(rows)})")
            table.add_column("Cell", style="cyan", justify="right")
            table.add_column("Type", style="yellow")
            table.add_column("Best MIME type", style="green")
            table.add_column("Category", style="magenta")
            for row in rows:
                table.add_row(*row)
            Console().print(table)

    if not use_rich:
        for cell_index, output_type, mime_type, category in rows:
            print(f"{cell_index:>4}  {output_type:14} {mime_type:40} {category}")
        print(f"\nTotal: {len(rows)} outputs")

    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits on --help and on usage errors
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    log_level = "DEBUG" if parsed.trace else parsed.log_level
    configure_logging(log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    handlers = {"tree": _handle_tree, "outputs": _handle_outputs}
    try:
        return handlers[parsed.command](parsed)
    except (NbAstError, ValueError, ImportError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
