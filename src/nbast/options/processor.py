#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/options/processor.py
"""Configuration options for the markdown and HTML text-processing engine.

The engine is a thin layer over mistune (markdown) and BeautifulSoup (HTML).
These options select mistune plugins and the BeautifulSoup parser backend.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field

from nbast.constants import DEFAULT_HTML_PARSER, SUPPORTED_MARKDOWN_PLUGINS, HtmlParserType
from nbast.options.base import CloneFrozenMixin


def _validate_plugins(plugins: tuple[str, ...]) -> None:
    unknown = []
    for name in plugins:
        if name not in SUPPORTED_MARKDOWN_PLUGINS:
            suggestions = difflib.get_close_matches(name, SUPPORTED_MARKDOWN_PLUGINS, n=1, cutoff=0.6)
            if suggestions:
                unknown.append(f"'{name}' (did you mean '{suggestions[0]}'?)")
            else:
                unknown.append(f"'{name}'")
    if unknown:
        raise ValueError(
            f"Unknown markdown plugin(s): {', '.join(unknown)}. "
            f"Valid plugins are: {', '.join(sorted(SUPPORTED_MARKDOWN_PLUGINS))}"
        )


@dataclass(frozen=True)
class MarkdownProcessorOptions(CloneFrozenMixin):
    """Options for parsing markdown into a node tree.

    Parameters
    ----------
    plugins : tuple[str, ...], default ()
        Ordered mistune plugin names applied when parsing (e.g. "table",
        "strikethrough", "math").

    """

    plugins: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Ordered mistune plugin names to enable", "action": "append", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate plugin names.

        Raises
        ------
        ValueError
            If a plugin name is not known to mistune.

        """
        object.__setattr__(self, "plugins", tuple(self.plugins))
        _validate_plugins(self.plugins)


@dataclass(frozen=True)
class HtmlProcessorOptions(CloneFrozenMixin):
    """Options for parsing HTML into a node tree.

    Parameters
    ----------
    fragment : bool, default True
        Parse the input as a fragment. When the parser backend wraps the
        fragment in ``<html><body>``, the wrapper is discarded.
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser backend.

    """

    fragment: bool = field(
        default=True,
        metadata={"help": "Parse HTML as a fragment rather than a full document", "importance": "advanced"},
    )
    html_parser: HtmlParserType = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": ["html.parser", "html5lib", "lxml"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate the parser backend name.

        Raises
        ------
        ValueError
            If ``html_parser`` is not a known backend.

        """
        if self.html_parser not in ("html.parser", "html5lib", "lxml"):
            raise ValueError(f"Unsupported html_parser: {self.html_parser!r}")


@dataclass(frozen=True)
class MarkdownToHtmlOptions(CloneFrozenMixin):
    """Options for converting markdown to an HTML string.

    Parameters
    ----------
    allow_dangerous_html : bool, default False
        Pass raw HTML embedded in markdown through unescaped.
    plugins : tuple[str, ...], default ()
        Ordered mistune plugin names used when parsing markdown source.

    """

    allow_dangerous_html: bool = field(
        default=False,
        metadata={"help": "Keep raw HTML found in markdown instead of escaping it", "importance": "security"},
    )
    plugins: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Ordered mistune plugin names to enable", "action": "append", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate plugin names."""
        object.__setattr__(self, "plugins", tuple(self.plugins))
        _validate_plugins(self.plugins)
