#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/options/output.py
"""Configuration options for rendering notebook outputs to HTML."""

from __future__ import annotations

from dataclasses import dataclass, field

from nbast.constants import DEFAULT_PRESERVE_ANSI, DEFAULT_WRAP_OUTPUTS, DEFAULT_WRAPPER_CLASS
from nbast.options.base import CloneFrozenMixin
from nbast.options.processor import MarkdownToHtmlOptions


@dataclass(frozen=True)
class RenderOutputOptions(CloneFrozenMixin):
    """Options for ``render_output_to_html``.

    Parameters
    ----------
    wrap : bool, default True
        Wrap the rendered content in an element carrying CSS classes.
    wrapper_class : str, default "jupyter-output"
        Base CSS class for the wrapper element.
    preserve_ansi : bool, default False
        Keep ANSI escape codes in error tracebacks.
    markdown_options : MarkdownToHtmlOptions or None, default None
        Options used when an output only offers a markdown representation.

    """

    wrap: bool = field(
        default=DEFAULT_WRAP_OUTPUTS,
        metadata={"help": "Wrap rendered outputs in an element with CSS classes", "importance": "core"},
    )
    wrapper_class: str = field(
        default=DEFAULT_WRAPPER_CLASS,
        metadata={"help": "Base CSS class for output wrappers", "importance": "advanced"},
    )
    preserve_ansi: bool = field(
        default=DEFAULT_PRESERVE_ANSI,
        metadata={"help": "Keep ANSI color codes in error tracebacks", "importance": "advanced"},
    )
    markdown_options: MarkdownToHtmlOptions | None = field(
        default=None,
        metadata={"help": "Markdown-to-HTML configuration", "exclude_from_cli": True, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the wrapper class.

        Raises
        ------
        ValueError
            If ``wrapper_class`` is empty or contains whitespace.

        """
        if not self.wrapper_class or any(ch.isspace() for ch in self.wrapper_class):
            raise ValueError(f"wrapper_class must be a single non-empty CSS class, got {self.wrapper_class!r}")
