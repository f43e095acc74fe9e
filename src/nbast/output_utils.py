#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/output_utils.py
"""Helpers for inspecting and rendering code cell outputs.

Predicates and extractors here accept any of the four output nodes. MIME
bundle helpers only look inside display and execute-result outputs; stream
and error outputs are described by a synthetic MIME type list (see
``get_output_mime_types``).
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Optional

from nbast.ast.nodes import MimeBundle, ParsedHtml
from nbast.constants import JUPYTER_MIME_TYPES, TEXT_MIME_TYPES
from nbast.mime_types import (
    is_image_mime_type,
    is_visualization_mime_type,
    is_widget_mime_type,
    normalize_mime_data,
    select_best_mime_type,
)
from nbast.options.output import RenderOutputOptions
from nbast.options.processor import HtmlProcessorOptions, MarkdownToHtmlOptions
from nbast.processor import markdown_to_html, parse_html

logger = logging.getLogger(__name__)

_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

_RICH_OUTPUT_TYPES = ("displayData", "executeResult")


def _is_rich(output: Any) -> bool:
    return getattr(output, "type", None) in _RICH_OUTPUT_TYPES


def _extract(data: MimeBundle, mime_type: str) -> Optional[str]:
    value = normalize_mime_data(mime_type, data.get(mime_type))
    return value if value else None


# ============================================================================
# Predicates
# ============================================================================


def has_html(output: Any) -> bool:
    """Check if an output offers an HTML representation."""
    return _is_rich(output) and TEXT_MIME_TYPES["HTML"] in output.data


def has_markdown(output: Any) -> bool:
    """Check if an output offers a markdown representation."""
    return _is_rich(output) and TEXT_MIME_TYPES["MARKDOWN"] in output.data


def has_text(output: Any) -> bool:
    """Check if an output has plain text. Stream outputs always do."""
    if getattr(output, "type", None) == "stream":
        return True
    return _is_rich(output) and TEXT_MIME_TYPES["PLAIN"] in output.data


def has_image(output: Any) -> bool:
    return _is_rich(output) and any(is_image_mime_type(mime_type) for mime_type in output.data)


def has_widget(output: Any) -> bool:
    return _is_rich(output) and any(is_widget_mime_type(mime_type) for mime_type in output.data)


def has_visualization(output: Any) -> bool:
    """Check if an output carries a vendor visualization (Plotly, Vega, ...)."""
    return _is_rich(output) and any(is_visualization_mime_type(mime_type) for mime_type in output.data)


# ============================================================================
# Extraction
# ============================================================================


def extract_html(data: MimeBundle) -> Optional[str]:
    """Return the ``text/html`` payload of a bundle as one string, or None if absent or empty."""
    return _extract(data, TEXT_MIME_TYPES["HTML"])


def extract_markdown(data: MimeBundle) -> Optional[str]:
    """Return the ``text/markdown`` payload of a bundle as one string, or None if absent or empty."""
    return _extract(data, TEXT_MIME_TYPES["MARKDOWN"])


def extract_text(data: MimeBundle) -> Optional[str]:
    """Return the ``text/plain`` payload of a bundle as one string, or None if absent or empty."""
    return _extract(data, TEXT_MIME_TYPES["PLAIN"])


def get_best_text_representation(output: Any) -> Optional[str]:
    """Return the richest textual form of an output.

    Streams give their text, errors their traceback joined with newlines,
    and display/execute outputs the first of HTML, markdown and plain text
    that is present and non-empty.

    Returns
    -------
    str or None
        None when the output has no textual representation

    """
    output_type = getattr(output, "type", None)
    if output_type == "stream":
        return output.text
    if output_type == "error":
        return "\n".join(output.traceback)
    if _is_rich(output):
        return extract_html(output.data) or extract_markdown(output.data) or extract_text(output.data)
    return None


def get_output_mime_types(output: Any) -> list[str]:
    """List the MIME types an output offers.

    Stream outputs report ``["text/plain"]`` and error outputs
    ``["application/vnd.jupyter.error"]``; display and execute outputs
    report the keys of their bundle in stored order.
    """
    output_type = getattr(output, "type", None)
    if output_type == "stream":
        return [TEXT_MIME_TYPES["PLAIN"]]
    if output_type == "error":
        return [JUPYTER_MIME_TYPES["ERROR"]]
    if _is_rich(output):
        return list(output.data.keys())
    return []


def get_best_output_mime_type(output: Any) -> Optional[str]:
    return select_best_mime_type(get_output_mime_types(output))


def has_mime_type(output: Any, mime_type: str) -> bool:
    return mime_type in get_output_mime_types(output)


def extract_mime_data(output: Any, mime_type: str) -> Any:
    """Return the normalized payload stored under ``mime_type``, or None."""
    return normalize_mime_data(mime_type, output.data.get(mime_type))


# ============================================================================
# Processing
# ============================================================================


def parse_output_html(output: Any, options: Optional[HtmlProcessorOptions] = None) -> Optional[ParsedHtml]:
    """Parse the HTML representation of an output.

    Returns
    -------
    ParsedHtml or None
        Tree with ``data["source"]`` set to the HTML text, or None when the
        output has no HTML

    """
    source = extract_html(output.data) if _is_rich(output) else None
    if source is None:
        return None
    tree = parse_html(source, options)
    return ParsedHtml(children=tree.children, data={"source": source})


def output_markdown_to_html(output: Any, options: Optional[MarkdownToHtmlOptions] = None) -> Optional[str]:
    """Render the markdown representation of an output to HTML, or None if it has none."""
    source = extract_markdown(output.data) if _is_rich(output) else None
    if source is None:
        return None
    return markdown_to_html(source, options)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for inclusion in HTML text or attributes."""
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR color sequences (``ESC[...m``) from text."""
    return _ANSI_ESCAPE_RE.sub("", text)


def render_output_to_html(output: Any, options: Optional[RenderOutputOptions] = None) -> str:
    """Render an output to an HTML string.

    Parameters
    ----------
    output : Output
        Any output node
    options : RenderOutputOptions or None
        Wrapping and ANSI handling

    Returns
    -------
    str
        HTML fragment; empty for a display/execute output with no HTML,
        markdown or plain text representation

    Notes
    -----
    With the default wrapper class the markup is:

    - stream: ``<pre class="jupyter-output jupyter-output-stream jupyter-output-stdout">``
    - display data: ``<div class="jupyter-output jupyter-output-display-data">``
    - execute result: ``<div class="jupyter-output jupyter-output-execute-result">``
    - error: ``<pre class="jupyter-output jupyter-output-error">`` starting
      with ``<span class="error-name">ename</span>: evalue``

    HTML payloads are inserted verbatim.

    """
    options = options or RenderOutputOptions()
    wrapper = options.wrapper_class
    output_type = getattr(output, "type", None)
    content = ""

    if output_type == "stream":
        content = escape_html(output.text)
        if options.wrap:
            content = f'<pre class="{wrapper} {wrapper}-stream {wrapper}-{output.name}">{content}</pre>'

    elif _is_rich(output):
        source = extract_html(output.data)
        if source:
            content = source
        else:
            markdown = extract_markdown(output.data)
            if markdown:
                content = markdown_to_html(markdown, options.markdown_options)
            else:
                text = extract_text(output.data)
                if text:
                    content = f"<pre>{escape_html(text)}</pre>"

        if options.wrap and content:
            suffix = "execute-result" if output_type == "executeResult" else "display-data"
            content = f'<div class="{wrapper} {wrapper}-{suffix}">{content}</div>'

    elif output_type == "error":
        traceback = "\n".join(output.traceback)
        if not options.preserve_ansi:
            traceback = strip_ansi(traceback)
        content = escape_html(traceback)
        if options.wrap:
            content = (
                f'<pre class="{wrapper} {wrapper}-error">'
                f'<span class="error-name">{escape_html(output.ename)}</span>: {escape_html(output.evalue)}\n'
                f"{content}</pre>"
            )

    else:
        logger.debug("Cannot render node of type %s as an output", output_type)

    return content
