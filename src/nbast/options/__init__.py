#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for nbast.

Each component has its own frozen Options dataclass. Use
``create_updated(**kwargs)`` to derive a modified copy.
"""

from __future__ import annotations

from nbast.options.base import CloneFrozenMixin
from nbast.options.ipynb import ParseOptions
from nbast.options.output import RenderOutputOptions
from nbast.options.processor import HtmlProcessorOptions, MarkdownProcessorOptions, MarkdownToHtmlOptions

__all__ = [
    "CloneFrozenMixin",
    "HtmlProcessorOptions",
    "MarkdownProcessorOptions",
    "MarkdownToHtmlOptions",
    "ParseOptions",
    "RenderOutputOptions",
]
