#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/processor.py
"""Markdown and HTML processing for notebook content.

Markdown is handled by mistune and HTML by BeautifulSoup. Both engines'
native structures (mistune token dicts, BeautifulSoup elements) are
converted to generic ``Element`` nodes so that the tree walker can traverse
and rewrite them like any other part of the notebook tree. The conversion
keeps every token field, so a parsed tree can be serialized again.

Examples
--------
    >>> tree = parse_markdown("# Title\\n\\nSome *text*")
    >>> [child.type for child in tree.children]
    ['heading', 'blank_line', 'paragraph']
    >>> markdown_to_html("Some *text*")
    '<p>Some <em>text</em></p>\\n'

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from nbast.ast.nodes import Element
from nbast.exceptions import DependencyError, ParsingError
from nbast.options.processor import HtmlProcessorOptions, MarkdownProcessorOptions, MarkdownToHtmlOptions

if TYPE_CHECKING:
    import mistune

logger = logging.getLogger(__name__)

_TOKEN_KEYS = ("type", "children", "raw", "attrs")


def _import_mistune() -> Any:
    try:
        import mistune
    except ImportError as e:
        raise DependencyError("markdown", [("mistune", ">=3.0.0")], original_error=e) from e
    return mistune


# ============================================================================
# Markdown
# ============================================================================


def _token_to_element(token: dict[str, Any]) -> Element:
    children = token.get("children")
    raw = token.get("raw")
    return Element(
        type=token.get("type", ""),
        children=[_token_to_element(child) for child in children] if isinstance(children, list) else None,
        value=raw if isinstance(raw, str) else None,
        attributes=dict(token.get("attrs") or {}),
        extra={key: value for key, value in token.items() if key not in _TOKEN_KEYS},
    )


def _element_to_token(node: Any) -> dict[str, Any]:
    token: dict[str, Any] = {"type": node.type}
    token.update(getattr(node, "extra", None) or {})
    attributes = getattr(node, "attributes", None)
    if attributes:
        token["attrs"] = dict(attributes)
    value = getattr(node, "value", None)
    if value is not None:
        token["raw"] = value
    children = getattr(node, "children", None)
    if isinstance(children, list):
        token["children"] = [_element_to_token(child) for child in children]
    return token


def _tokens_from_tree(tree: Any) -> list[dict[str, Any]]:
    # Accepts an Element root, a ParsedMarkdown node or a bare list of nodes
    children = tree if isinstance(tree, list) else getattr(tree, "children", None) or []
    return [_element_to_token(child) for child in children]


def create_markdown_processor(options: Optional[MarkdownProcessorOptions] = None) -> "mistune.Markdown":
    """Create a mistune parser producing tokens, configured with plugins.

    Parameters
    ----------
    options : MarkdownProcessorOptions or None
        Plugin configuration

    Returns
    -------
    mistune.Markdown
        Parser whose ``parse`` method returns ``(tokens, state)``

    """
    options = options or MarkdownProcessorOptions()
    mistune = _import_mistune()
    return mistune.create_markdown(renderer=None, plugins=list(options.plugins))


def parse_markdown(markdown: str, options: Optional[MarkdownProcessorOptions] = None) -> Element:
    """Parse markdown text into an ``Element`` tree.

    Parameters
    ----------
    markdown : str
        Markdown source
    options : MarkdownProcessorOptions or None
        Plugin configuration

    Returns
    -------
    Element
        Node of type ``root`` whose children mirror mistune's block tokens

    Raises
    ------
    ParsingError
        If mistune fails on the input

    """
    processor = create_markdown_processor(options)
    try:
        tokens, _state = processor.parse(markdown)
    except Exception as e:
        raise ParsingError(f"Failed to parse markdown: {e}", parsing_stage="markdown", original_error=e) from e

    if not isinstance(tokens, list):
        tokens = []

    logger.debug("Parsed markdown into %d block tokens", len(tokens))
    return Element(type="root", children=[_token_to_element(token) for token in tokens])


def markdown_to_html(markdown: Any, options: Optional[MarkdownToHtmlOptions] = None) -> str:
    """Convert markdown to an HTML string.

    Parameters
    ----------
    markdown : str or node
        Markdown source, or a parsed tree (``Element`` root or
        ``ParsedMarkdown``) produced by ``parse_markdown``
    options : MarkdownToHtmlOptions or None
        Escaping and plugin configuration

    Returns
    -------
    str
        Rendered HTML

    """
    options = options or MarkdownToHtmlOptions()
    mistune = _import_mistune()
    md = mistune.create_markdown(escape=not options.allow_dangerous_html, plugins=list(options.plugins))

    if isinstance(markdown, str):
        return md(markdown)

    from mistune.core import BlockState

    return md.renderer(_tokens_from_tree(markdown), BlockState())


def stringify_markdown(tree: Any) -> str:
    """Serialize a parsed markdown tree back to markdown text.

    Parameters
    ----------
    tree : node or list
        ``Element`` root, ``ParsedMarkdown`` node or list of nodes

    Returns
    -------
    str
        Markdown text

    """
    _import_mistune()
    from mistune.core import BlockState
    from mistune.renderers.markdown import MarkdownRenderer

    return MarkdownRenderer()(_tokens_from_tree(tree), BlockState())


# ============================================================================
# HTML
# ============================================================================


def _soup_to_element(item: Any) -> Element:
    from bs4.element import Comment, Doctype, Tag

    if isinstance(item, Tag):
        return Element(
            type="element",
            children=[_soup_to_element(child) for child in item.contents],
            attributes=dict(item.attrs),
            extra={"tag_name": item.name},
        )
    if isinstance(item, Comment):
        return Element(type="comment", value=str(item))
    if isinstance(item, Doctype):
        return Element(type="doctype", value=str(item))
    return Element(type="text", value=str(item))


def parse_html(html: str, options: Optional[HtmlProcessorOptions] = None) -> Element:
    """Parse HTML text into an ``Element`` tree.

    Tags become ``element`` nodes (``extra["tag_name"]``, ``attributes``),
    strings become ``text`` nodes, comments ``comment`` nodes and doctypes
    ``doctype`` nodes.

    Parameters
    ----------
    html : str
        HTML source
    options : HtmlProcessorOptions or None
        Fragment mode and parser backend

    Returns
    -------
    Element
        Node of type ``root``

    Raises
    ------
    DependencyError
        If beautifulsoup4 or the selected parser backend is not installed

    """
    options = options or HtmlProcessorOptions()
    try:
        from bs4 import BeautifulSoup, FeatureNotFound
    except ImportError as e:
        raise DependencyError("html", [("beautifulsoup4", "")], original_error=e) from e

    try:
        soup = BeautifulSoup(html, options.html_parser)
    except FeatureNotFound as e:
        raise DependencyError(
            "html",
            [(options.html_parser, "")],
            message=f"Selected HTML parser backend not found: {options.html_parser}",
            original_error=e,
        ) from e

    contents = soup.contents
    # html5lib and lxml wrap fragments in <html><body>
    if options.fragment and soup.body is not None and "<body" not in html.lower():
        contents = soup.body.contents

    return Element(type="root", children=[_soup_to_element(item) for item in contents])


def _append_element(soup: Any, parent: Any, node: Any) -> None:
    from bs4.element import Comment, Doctype

    node_type = getattr(node, "type", None)
    value = getattr(node, "value", None)
    children = getattr(node, "children", None)

    if node_type == "text":
        parent.append(soup.new_string(value or ""))
    elif node_type == "comment":
        parent.append(soup.new_string(value or "", Comment))
    elif node_type == "doctype":
        parent.append(soup.new_string(value or "", Doctype))
    elif node_type == "element":
        extra = getattr(node, "extra", None) or {}
        tag = soup.new_tag(extra.get("tag_name", "div"), attrs=dict(getattr(node, "attributes", None) or {}))
        parent.append(tag)
        for child in children or []:
            _append_element(soup, tag, child)
    elif isinstance(children, list):
        for child in children:
            _append_element(soup, parent, child)
    elif isinstance(value, str):
        parent.append(soup.new_string(value))


def stringify_html(tree: Any) -> str:
    """Serialize an HTML ``Element`` tree back to an HTML string.

    Parameters
    ----------
    tree : node
        ``Element`` root or ``ParsedHtml`` node produced by ``parse_html``

    Returns
    -------
    str
        HTML text

    """
    try:
        from bs4 import BeautifulSoup
    except ImportError as e:
        raise DependencyError("html", [("beautifulsoup4", "")], original_error=e) from e

    soup = BeautifulSoup("", "html.parser")
    for child in getattr(tree, "children", None) or []:
        _append_element(soup, soup, child)
    return soup.decode()
