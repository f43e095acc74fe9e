#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/options/ipynb.py
"""Configuration options for Jupyter Notebook parsing.

This module defines options controlling how a decoded notebook document is
mapped onto the node tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nbast.constants import DEFAULT_PARSE_MARKDOWN
from nbast.options.base import CloneFrozenMixin
from nbast.options.processor import MarkdownProcessorOptions


@dataclass(frozen=True)
class ParseOptions(CloneFrozenMixin):
    """Configuration options for notebook-to-tree parsing.

    Parameters
    ----------
    parse_markdown : bool, default False
        Parse markdown cells into ``ParsedMarkdown`` nodes. When False the
        cell text is kept verbatim in a ``Markdown`` node.
    markdown_options : MarkdownProcessorOptions or None, default None
        Options for the markdown processor (plugin list). Only used when
        ``parse_markdown`` is enabled.

    """

    parse_markdown: bool = field(
        default=DEFAULT_PARSE_MARKDOWN,
        metadata={"help": "Parse markdown cells into node trees", "importance": "core"},
    )
    markdown_options: MarkdownProcessorOptions | None = field(
        default=None,
        metadata={"help": "Markdown processor configuration", "exclude_from_cli": True, "importance": "advanced"},
    )
