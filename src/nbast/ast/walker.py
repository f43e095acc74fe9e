#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/ast/walker.py
"""Generic traversal and rewriting of node trees.

The walker knows nothing about notebook node classes. It recurses into any
node whose ``children`` attribute is a list and treats everything else as a
leaf, so it works equally on ``Root``/cell trees and on the ``Element``
trees produced by the markdown and HTML processors.

All operations are coroutines. Callbacks may be plain functions or
coroutine functions; whatever a callback returns is awaited when it is
awaitable, before the next callback is invoked. Sibling order is array
order (or its reverse), never concurrent.

Two rewriting styles are provided:

- ``transform`` / ``transform_type`` / ``map_nodes`` rewrite children lists
  **in place** and return the (possibly replaced) root
- ``filter_nodes`` never touches its input and returns new parent nodes

Examples
--------
Count code cells:

    >>> cells = []
    >>> await visit_type(root, "cell", lambda node, index, parent: cells.append(node))

Stop at the first error output:

    >>> def first_error(node, index, parent):
    ...     if node.type == "error":
    ...         return STOP

Uppercase all code:

    >>> def upper(node, index, parent):
    ...     node.value = node.value.upper()
    >>> await transform_type(root, "code", upper)

"""

from __future__ import annotations

import copy
import enum
import inspect
import logging
from typing import Any, Awaitable, Callable, Iterator, Optional, TypeVar, Union

from nbast.ast.nodes import is_parent

logger = logging.getLogger(__name__)

T = TypeVar("T")
MaybeAwaitable = Union[T, Awaitable[T]]


class WalkSignal(enum.Enum):
    """Control values a visitor may return."""

    STOP = "stop"


STOP = WalkSignal.STOP

Visitor = Callable[[Any, Optional[int], Optional[Any]], MaybeAwaitable[Any]]
Transformer = Callable[[Any, Optional[int], Optional[Any]], MaybeAwaitable[Any]]
Predicate = Callable[[Any, Optional[int], Optional[Any]], MaybeAwaitable[bool]]
NodePredicate = Callable[[Any], MaybeAwaitable[bool]]


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


def _child_indices(count: int, reverse: bool) -> Iterator[int]:
    return reversed(range(count)) if reverse else iter(range(count))


async def visit(tree: Any, visitor: Visitor, reverse: bool = False) -> None:
    """Visit every node of ``tree`` depth-first, in pre-order.

    Parameters
    ----------
    tree : Node
        Root of the traversal
    visitor : callable
        ``visitor(node, index, parent)``; ``index`` and ``parent`` are None
        for ``tree`` itself. Returning ``STOP`` halts the whole traversal.
    reverse : bool, default False
        Visit children in reverse order

    """

    async def _visit(node: Any, index: Optional[int], parent: Any) -> bool:
        if await _resolve(visitor(node, index, parent)) is STOP:
            return False

        if is_parent(node):
            children = node.children
            for i in _child_indices(len(children), reverse):
                if not await _visit(children[i], i, node):
                    return False

        return True

    if not await _visit(tree, None, None):
        logger.debug("Traversal stopped early by visitor")


async def visit_type(tree: Any, node_type: str, visitor: Visitor, reverse: bool = False) -> None:
    """Visit only nodes whose ``type`` equals ``node_type``.

    Other nodes are still traversed so that their descendants are reached.
    """

    async def _filtered(node: Any, index: Optional[int], parent: Any) -> Any:
        if getattr(node, "type", None) == node_type:
            return await _resolve(visitor(node, index, parent))
        return None

    await visit(tree, _filtered, reverse=reverse)


async def transform(tree: Any, transformer: Transformer, reverse: bool = False) -> Any:
    """Rewrite ``tree`` depth-first, children before their parent.

    Each parent's children are transformed first and the resulting list is
    assigned back to ``node.children`` (in place, original positions kept
    even when ``reverse`` is set). The transformer then runs on the node
    itself and may return a replacement. A falsy result (None, False, 0)
    keeps the node, so ``return cond and new_node`` is safe.

    Parameters
    ----------
    tree : Node
        Root of the rewrite
    transformer : callable
        ``transformer(node, index, parent)`` returning a node, or a falsy
        value to keep the current one
    reverse : bool, default False
        Process children from last to first

    Returns
    -------
    Node
        ``tree`` or the node the transformer returned for it

    """

    async def _transform(node: Any, index: Optional[int], parent: Any) -> Any:
        if is_parent(node):
            children = node.children
            new_children: list[Any] = [None] * len(children)
            for i in _child_indices(len(children), reverse):
                new_children[i] = await _transform(children[i], i, node)
            node.children = new_children

        result = await _resolve(transformer(node, index, parent))
        return result or node

    return await _transform(tree, None, None)


async def transform_type(tree: Any, node_type: str, transformer: Transformer, reverse: bool = False) -> Any:
    """Apply ``transformer`` only to nodes whose ``type`` equals ``node_type``."""

    async def _filtered(node: Any, index: Optional[int], parent: Any) -> Any:
        if getattr(node, "type", None) == node_type:
            return await _resolve(transformer(node, index, parent))
        return None

    return await transform(tree, _filtered, reverse=reverse)


async def filter_nodes(tree: Any, predicate: Predicate) -> Any:
    """Return a copy of ``tree`` without the nodes rejected by ``predicate``.

    The predicate is evaluated in pre-order; a rejected node is dropped with
    its whole subtree. Accepted parents are shallow-copied with a new
    children list, so the input tree is never mutated. Leaves are shared
    between the input and the result.

    If ``tree`` itself is rejected, ``tree`` is returned unchanged.
    """

    async def _filter(node: Any, index: Optional[int], parent: Any) -> Any:
        if not await _resolve(predicate(node, index, parent)):
            return None

        if not is_parent(node):
            return node

        kept = []
        for i, child in enumerate(node.children):
            result = await _filter(child, i, node)
            if result is not None:
                kept.append(result)

        clone = copy.copy(node)
        clone.children = kept
        return clone

    result = await _filter(tree, None, None)
    if result is None:
        logger.debug("Predicate rejected the root node; returning it unchanged")
        return tree
    return result


async def map_nodes(tree: Any, mapper: Transformer) -> Any:
    """Replace every node with ``mapper(node, index, parent)``.

    Same traversal as ``transform``; the mapper is expected to return a node
    for every input.
    """
    return await transform(tree, mapper)


async def find(tree: Any, predicate: NodePredicate) -> Any:
    """Return the first node in pre-order matching ``predicate``, or None."""
    found: list[Any] = []

    async def _match(node: Any, index: Optional[int], parent: Any) -> Any:
        if await _resolve(predicate(node)):
            found.append(node)
            return STOP
        return None

    await visit(tree, _match)
    return found[0] if found else None


async def find_all(tree: Any, predicate: NodePredicate) -> list[Any]:
    """Return every node matching ``predicate``, in pre-order."""
    results: list[Any] = []

    async def _collect(node: Any, index: Optional[int], parent: Any) -> None:
        if await _resolve(predicate(node)):
            results.append(node)

    await visit(tree, _collect)
    return results
