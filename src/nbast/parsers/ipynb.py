#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/parsers/ipynb.py
"""Jupyter Notebook to node tree converter.

This module maps a decoded ``.ipynb`` document onto the ``Root``/cell/output
node hierarchy. It does not validate the notebook against the nbformat
schema: only the presence of the ``cells`` list is checked, and unknown cell
or output types are tolerated.

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from nbast.ast.nodes import (
    Cell,
    Code,
    CodeCell,
    DisplayDataOutput,
    ErrorOutput,
    ExecuteResultOutput,
    Markdown,
    MarkdownCell,
    Output,
    ParsedMarkdown,
    Raw,
    RawCell,
    Root,
    StreamOutput,
)
from nbast.constants import DEFAULT_NBFORMAT, DEFAULT_NBFORMAT_MINOR
from nbast.exceptions import FileError, MalformedFileError, ValidationError
from nbast.options.ipynb import ParseOptions
from nbast.processor import parse_markdown

logger = logging.getLogger(__name__)

NotebookInput = Union[dict, str, Path, bytes, IO[bytes], IO[str]]


def _join_text(value: Any) -> str:
    """Join a notebook multiline string (string or list of fragments)."""
    if value is None:
        return ""
    if isinstance(value, list):
        return "".join(str(part) for part in value)
    return str(value)


def _detect_language(metadata: dict[str, Any]) -> Optional[str]:
    language_info = metadata.get("language_info") or {}
    if language_info.get("name"):
        return language_info["name"]
    kernelspec = metadata.get("kernelspec") or {}
    return kernelspec.get("language") or None


class IpynbParser:
    """Convert Jupyter Notebooks to a node tree.

    Parameters
    ----------
    options : ParseOptions or None
        Conversion options

    """

    def __init__(self, options: Optional[ParseOptions] = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, ParseOptions):
            raise ValidationError(
                f"Expected ParseOptions, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )
        self.options: ParseOptions = options or ParseOptions()

    def parse(self, input_data: NotebookInput) -> Root:
        """Parse notebook input into a ``Root`` node.

        Parameters
        ----------
        input_data : dict, str, Path, bytes or file-like
            A decoded notebook, a path to an ``.ipynb`` file, its raw bytes or
            an open binary/text stream

        Returns
        -------
        Root
            Root node of the notebook tree

        Raises
        ------
        ValidationError
            If the input type is not supported
        FileError
            If the notebook file cannot be read
        MalformedFileError
            If the input is not valid notebook JSON

        """
        file_path = str(input_data) if isinstance(input_data, (str, Path)) else None

        if isinstance(input_data, dict):
            notebook = input_data
        else:
            try:
                if isinstance(input_data, (str, Path)):
                    with open(input_data, "r", encoding="utf-8") as f:
                        notebook = json.load(f)
                elif isinstance(input_data, bytes):
                    notebook = json.loads(input_data.decode("utf-8"))
                elif hasattr(input_data, "read"):
                    content = input_data.read()
                    if isinstance(content, bytes):
                        content = content.decode("utf-8")
                    notebook = json.loads(content)
                else:
                    raise ValidationError(
                        f"Unsupported input type: {type(input_data).__name__}",
                        parameter_name="input_data",
                        parameter_value=type(input_data).__name__,
                    )
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedFileError(
                    "Input is not a valid JSON file. Ensure it is a proper .ipynb notebook.",
                    file_path=file_path,
                    original_error=e,
                ) from e
            except OSError as e:
                raise FileError(f"Could not read notebook: {e}", file_path=file_path, original_error=e) from e

        if not isinstance(notebook, dict) or not isinstance(notebook.get("cells"), list):
            raise MalformedFileError(
                "Invalid notebook format: 'cells' key is missing or not a list.",
                file_path=file_path,
            )

        return self.convert_to_ast(notebook)

    def convert_to_ast(self, notebook: dict[str, Any]) -> Root:
        """Convert a decoded notebook to a ``Root`` node.

        Returns
        -------
        Root
            Cells in document order; notebook metadata is kept as-is

        """
        metadata = notebook.get("metadata") or {}
        language = _detect_language(metadata)

        children: list[Any] = []
        for i, cell in enumerate(notebook.get("cells", [])):
            children.append(self._process_cell(cell, i, language))

        logger.debug("Parsed notebook with %d cells (language=%s)", len(children), language)
        return Root(
            children=children,
            metadata=metadata,
            nbformat=notebook.get("nbformat", DEFAULT_NBFORMAT),
            nbformat_minor=notebook.get("nbformat_minor", DEFAULT_NBFORMAT_MINOR),
        )

    def _process_cell(self, cell: dict[str, Any], cell_index: int, language: Optional[str]) -> Cell:
        cell_type = cell.get("cell_type")
        metadata = cell.get("metadata") or {}
        source = _join_text(cell.get("source"))

        if cell_type == "code":
            children: list[Any] = [Code(value=source, lang=language)]
            for j, output in enumerate(cell.get("outputs") or []):
                output_node = self._process_output(output, cell_index, j)
                if output_node is not None:
                    children.append(output_node)
            return CodeCell(children=children, execution_count=cell.get("execution_count"), metadata=metadata)

        if cell_type == "markdown":
            return MarkdownCell(children=[self._markdown_content(source)], metadata=metadata)

        if cell_type != "raw":
            logger.debug(
                "Encountered unsupported cell type '%s' at index %s; preserving as raw cell",
                cell_type,
                cell_index,
            )
        return RawCell(children=[Raw(value=source)], metadata=metadata)

    def _markdown_content(self, source: str) -> Union[Markdown, ParsedMarkdown]:
        if not self.options.parse_markdown:
            return Markdown(value=source)
        tree = parse_markdown(source, self.options.markdown_options)
        return ParsedMarkdown(children=tree.children, data={"source": source})

    def _process_output(self, output: dict[str, Any], cell_index: int, output_index: int) -> Optional[Output]:
        """Convert one output dict, or return None for an unknown output type."""
        output_type = output.get("output_type")

        if output_type == "stream":
            return StreamOutput(name=output.get("name", "stdout"), text=_join_text(output.get("text")))

        if output_type == "display_data":
            return DisplayDataOutput(data=output.get("data") or {}, metadata=output.get("metadata"))

        if output_type == "execute_result":
            return ExecuteResultOutput(
                data=output.get("data") or {},
                execution_count=output.get("execution_count"),
                metadata=output.get("metadata"),
            )

        if output_type == "error":
            return ErrorOutput(
                ename=output.get("ename", ""),
                evalue=output.get("evalue", ""),
                traceback=list(output.get("traceback") or []),
            )

        logger.warning(
            "Skipping unsupported output type '%s' in cell %s (output %s)",
            output_type,
            cell_index,
            output_index,
        )
        return None


def parse(notebook: NotebookInput, options: Optional[ParseOptions] = None) -> Root:
    """Parse a notebook (decoded dict, path, bytes or stream) into a ``Root`` node."""
    return IpynbParser(options).parse(notebook)


def parse_from_string(json_str: str, options: Optional[ParseOptions] = None) -> Root:
    """Parse a notebook from its JSON text.

    Raises
    ------
    MalformedFileError
        If ``json_str`` is not valid JSON or has no ``cells`` list

    """
    try:
        notebook = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedFileError("Input is not valid notebook JSON.", original_error=e) from e
    return IpynbParser(options).parse(notebook)


def parse_from_file(path: Union[str, Path], options: Optional[ParseOptions] = None) -> Root:
    """Parse a notebook from an ``.ipynb`` file path."""
    return IpynbParser(options).parse(Path(path))
