#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/mime_types.py
"""MIME type classification and best-representation selection.

Jupyter outputs carry a MIME bundle: several alternative encodings of the
same result keyed by MIME type. This module classifies MIME types into a
closed set of categories, scores them with a fixed priority table and
selects the one to render.

None of these functions raise. Unknown identifiers classify as
``MimeCategory.UNKNOWN`` and score 0, an empty selection returns None, and
payloads that cannot be normalized are passed through unchanged.

Based on Jupyter's standard MIME types:
https://jupyter-client.readthedocs.io/en/stable/messaging.html#display-data

"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from nbast.constants import (
    APPLICATION_MIME_TYPES,
    BINARY_CONTENT_TYPES,
    DEFAULT_MIME_PRIORITY,
    IMAGE_CONTENT_TYPES,
    IMAGE_MIME_TYPES,
    JSON_CONTENT_TYPES,
    JUPYTER_MIME_TYPES,
    MIME_TYPE_PRIORITY,
    STANDARD_MIME_TYPES,
    TEXT_CONTENT_TYPES,
    TEXT_MIME_TYPES,
    VISUALIZATION_MIME_PREFIXES,
    VISUALIZATION_MIME_TYPES,
    WIDGET_MIME_TYPES,
)

__all__ = [
    "APPLICATION_MIME_TYPES",
    "IMAGE_MIME_TYPES",
    "JUPYTER_MIME_TYPES",
    "MIME_TYPE_PRIORITY",
    "STANDARD_MIME_TYPES",
    "TEXT_MIME_TYPES",
    "VISUALIZATION_MIME_TYPES",
    "MimeCategory",
    "get_mime_type_category",
    "get_mime_type_priority",
    "is_binary_mime_type",
    "is_html_mime_type",
    "is_image_mime_type",
    "is_json_mime_type",
    "is_markdown_mime_type",
    "is_standard_mime_type",
    "is_text_mime_type",
    "is_visualization_mime_type",
    "is_widget_mime_type",
    "normalize_mime_data",
    "select_best_mime_type",
]


class MimeCategory(str, Enum):
    """Rendering category of a MIME type."""

    TEXT = "text"
    BINARY = "binary"
    JSON = "json"
    IMAGE = "image"
    WIDGET = "widget"
    VISUALIZATION = "visualization"
    UNKNOWN = "unknown"


def is_text_mime_type(mime_type: str) -> bool:
    """Check if a MIME type holds text that may be split into fragments."""
    return mime_type in TEXT_CONTENT_TYPES


def is_binary_mime_type(mime_type: str) -> bool:
    """Check if a MIME type holds base64-encoded binary content."""
    return mime_type in BINARY_CONTENT_TYPES


def is_json_mime_type(mime_type: str) -> bool:
    """Check if a MIME type holds JSON content (including any ``+json`` suffix)."""
    return mime_type in JSON_CONTENT_TYPES or mime_type.endswith("+json")


def is_image_mime_type(mime_type: str) -> bool:
    """Check if a MIME type is an image."""
    return mime_type in IMAGE_CONTENT_TYPES or mime_type.startswith("image/")


def is_html_mime_type(mime_type: str) -> bool:
    return mime_type == "text/html"


def is_markdown_mime_type(mime_type: str) -> bool:
    return mime_type == "text/markdown"


def is_widget_mime_type(mime_type: str) -> bool:
    """Check if a MIME type is a Jupyter widget view or widget state."""
    return mime_type in WIDGET_MIME_TYPES


def is_visualization_mime_type(mime_type: str) -> bool:
    """Check if a MIME type belongs to a known visualization vendor (Plotly, Vega, ...)."""
    return mime_type.startswith(VISUALIZATION_MIME_PREFIXES)


def is_standard_mime_type(mime_type: str) -> bool:
    """Check if a MIME type is one of the identifiers known to Jupyter."""
    return mime_type in STANDARD_MIME_TYPES


def get_mime_type_category(mime_type: str) -> MimeCategory:
    """Classify a MIME type.

    Tests are applied in a fixed order and the first match wins:
    widget, visualization, image, json, binary, text. The order matters
    because identifiers overlap; for instance
    ``application/vnd.vegalite.v5+json`` is both a vendor visualization and
    a ``+json`` type, and is classified as a visualization.

    Parameters
    ----------
    mime_type : str
        MIME type to classify

    Returns
    -------
    MimeCategory
        The category, ``MimeCategory.UNKNOWN`` when no test matches

    """
    if is_widget_mime_type(mime_type):
        return MimeCategory.WIDGET
    if is_visualization_mime_type(mime_type):
        return MimeCategory.VISUALIZATION
    if is_image_mime_type(mime_type):
        return MimeCategory.IMAGE
    if is_json_mime_type(mime_type):
        return MimeCategory.JSON
    if is_binary_mime_type(mime_type):
        return MimeCategory.BINARY
    if is_text_mime_type(mime_type):
        return MimeCategory.TEXT
    return MimeCategory.UNKNOWN


def get_mime_type_priority(mime_type: str) -> int:
    """Return the rendering priority of a MIME type (0 when not in the table)."""
    return MIME_TYPE_PRIORITY.get(mime_type, DEFAULT_MIME_PRIORITY)


def select_best_mime_type(mime_types: Iterable[str]) -> Optional[str]:
    """Select the MIME type with the highest priority.

    Ties, including the case where every candidate scores 0, go to the
    candidate that appears first.

    Parameters
    ----------
    mime_types : iterable of str
        Candidate MIME types in producer order

    Returns
    -------
    str or None
        The best MIME type, or None when there are no candidates

    Examples
    --------
    >>> select_best_mime_type(["text/plain", "text/html", "image/png"])
    'text/html'
    >>> select_best_mime_type(["application/x-foo", "application/x-bar"])
    'application/x-foo'
    >>> select_best_mime_type([]) is None
    True

    """
    best: Optional[str] = None
    best_priority = DEFAULT_MIME_PRIORITY
    for mime_type in mime_types:
        priority = get_mime_type_priority(mime_type)
        if best is None or priority > best_priority:
            best = mime_type
            best_priority = priority
    return best


def normalize_mime_data(mime_type: str, data: Any) -> Any:
    """Collapse a fragmented text payload into a single string.

    Notebooks may store text payloads as a list of fragments. For text MIME
    types such a list is joined with no separator; any other payload,
    including a list under a non-text MIME type, is returned unchanged.

    Examples
    --------
    >>> normalize_mime_data("text/plain", ["a", "b", "c"])
    'abc'
    >>> normalize_mime_data("image/png", ["a", "b"])
    ['a', 'b']

    """
    if is_text_mime_type(mime_type) and isinstance(data, (list, tuple)):
        return "".join(str(part) for part in data)
    return data
