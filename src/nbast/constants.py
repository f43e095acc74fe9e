#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/constants.py
"""Constants and default values used throughout nbast.

This module centralizes the MIME type identifiers known to Jupyter, the
rendering priority table used when choosing between alternative output
representations, and default values for the option dataclasses.

"""

from __future__ import annotations

from typing import Final, Literal

# =============================================================================
# MIME type identifiers
# =============================================================================

TEXT_MIME_TYPES: Final[dict[str, str]] = {
    "PLAIN": "text/plain",
    "HTML": "text/html",
    "MARKDOWN": "text/markdown",
    "LATEX": "text/latex",
    "CSV": "text/csv",
    "XML": "text/xml",
}

IMAGE_MIME_TYPES: Final[dict[str, str]] = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "GIF": "image/gif",
    "SVG": "image/svg+xml",
    "BMP": "image/bmp",
    "WEBP": "image/webp",
}

APPLICATION_MIME_TYPES: Final[dict[str, str]] = {
    "JSON": "application/json",
    "JAVASCRIPT": "application/javascript",
    "PDF": "application/pdf",
    "GEOJSON": "application/geo+json",
    "XML": "application/xml",
}

JUPYTER_MIME_TYPES: Final[dict[str, str]] = {
    "WIDGET_VIEW": "application/vnd.jupyter.widget-view+json",
    "WIDGET_STATE": "application/vnd.jupyter.widget-state+json",
    # Internal identifier for error outputs
    "ERROR": "application/vnd.jupyter.error",
    "STDIN": "application/vnd.jupyter.stdin",
}

VISUALIZATION_MIME_TYPES: Final[dict[str, str]] = {
    "PLOTLY_V1": "application/vnd.plotly.v1+json",
    "VEGA_V2": "application/vnd.vega.v2+json",
    "VEGA_V3": "application/vnd.vega.v3+json",
    "VEGA_V4": "application/vnd.vega.v4+json",
    "VEGA_V5": "application/vnd.vega.v5+json",
    "VEGALITE_V1": "application/vnd.vegalite.v1+json",
    "VEGALITE_V2": "application/vnd.vegalite.v2+json",
    "VEGALITE_V3": "application/vnd.vegalite.v3+json",
    "VEGALITE_V4": "application/vnd.vegalite.v4+json",
    "VEGALITE_V5": "application/vnd.vegalite.v5+json",
    "BOKEH": "application/vnd.bokehjs_exec.v0+json",
    "HOLOVIEWS_EXEC": "application/vnd.holoviews_exec.v0+json",
    "HOLOVIEWS_LOAD": "application/vnd.holoviews_load.v0+json",
}

STANDARD_MIME_TYPES: Final[frozenset[str]] = frozenset(
    {
        *TEXT_MIME_TYPES.values(),
        *IMAGE_MIME_TYPES.values(),
        *APPLICATION_MIME_TYPES.values(),
        *JUPYTER_MIME_TYPES.values(),
        *VISUALIZATION_MIME_TYPES.values(),
    }
)

# Category membership lists
TEXT_CONTENT_TYPES: Final[tuple[str, ...]] = (
    "text/plain",
    "text/html",
    "text/markdown",
    "text/latex",
    "text/csv",
    "text/xml",
    "application/javascript",
    "image/svg+xml",
)

BINARY_CONTENT_TYPES: Final[tuple[str, ...]] = (
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/bmp",
    "image/webp",
    "application/pdf",
)

JSON_CONTENT_TYPES: Final[tuple[str, ...]] = (
    "application/json",
    "application/geo+json",
    "application/vnd.jupyter.widget-view+json",
    "application/vnd.jupyter.widget-state+json",
    *VISUALIZATION_MIME_TYPES.values(),
)

IMAGE_CONTENT_TYPES: Final[tuple[str, ...]] = (
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/svg+xml",
    "image/bmp",
    "image/webp",
)

WIDGET_MIME_TYPES: Final[tuple[str, ...]] = (
    "application/vnd.jupyter.widget-view+json",
    "application/vnd.jupyter.widget-state+json",
)

VISUALIZATION_MIME_PREFIXES: Final[tuple[str, ...]] = (
    "application/vnd.plotly.",
    "application/vnd.vega.",
    "application/vnd.vegalite.",
    "application/vnd.bokehjs",
    "application/vnd.holoviews",
)

# Higher is preferred. Identifiers not listed score 0.
MIME_TYPE_PRIORITY: Final[dict[str, int]] = {
    "text/html": 100,
    "application/vnd.jupyter.widget-view+json": 95,
    "application/vnd.plotly.v1+json": 90,
    "application/vnd.vegalite.v5+json": 88,
    "application/vnd.vegalite.v4+json": 87,
    "application/vnd.vegalite.v3+json": 86,
    "application/vnd.vegalite.v2+json": 85,
    "application/vnd.vegalite.v1+json": 84,
    "application/vnd.vega.v5+json": 83,
    "application/vnd.vega.v4+json": 82,
    "application/vnd.vega.v3+json": 81,
    "application/vnd.vega.v2+json": 80,
    # vector > raster
    "image/svg+xml": 75,
    "image/png": 70,
    "image/jpeg": 65,
    "image/webp": 64,
    "image/gif": 63,
    "image/bmp": 60,
    "text/markdown": 55,
    "text/latex": 50,
    "application/json": 45,
    "application/geo+json": 44,
    "application/javascript": 40,
    "text/plain": 10,
}

DEFAULT_MIME_PRIORITY: Final = 0

# =============================================================================
# Node model
# =============================================================================

CellType = Literal["code", "markdown", "raw"]
StreamName = Literal["stdout", "stderr"]

OUTPUT_NODE_TYPES: Final[frozenset[str]] = frozenset({"stream", "displayData", "executeResult", "error"})

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_NBFORMAT: Final = 4
DEFAULT_NBFORMAT_MINOR: Final = 5
DEFAULT_PARSE_MARKDOWN: Final = False

# =============================================================================
# Processor defaults
# =============================================================================

# Plugin names accepted by mistune.create_markdown(plugins=...)
SUPPORTED_MARKDOWN_PLUGINS: Final[frozenset[str]] = frozenset(
    {
        "strikethrough",
        "footnotes",
        "table",
        "url",
        "task_lists",
        "def_list",
        "abbr",
        "mark",
        "insert",
        "superscript",
        "subscript",
        "math",
        "ruby",
        "spoiler",
        "speedup",
    }
)

DEFAULT_HTML_PARSER: Final = "html.parser"
HtmlParserType = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Output rendering defaults
# =============================================================================

DEFAULT_WRAPPER_CLASS: Final = "jupyter-output"
DEFAULT_WRAP_OUTPUTS: Final = True
DEFAULT_PRESERVE_ANSI: Final = False
