#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/ast/serialization.py
"""JSON view of node trees.

The output is meant for inspection and debugging (``nbast tree --format
json``). It is not a notebook file and cannot be loaded back.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ast_to_dict(value)
    if isinstance(value, dict):
        return {str(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value


def ast_to_dict(node: Any) -> dict[str, Any]:
    """Convert a node and its descendants to plain dicts.

    The ``type`` discriminant comes first; for cells ``cell_type`` follows.
    Fields left at None are omitted.

    Parameters
    ----------
    node : Node
        Any dataclass node, including ``Element`` and ``Position``

    Returns
    -------
    dict
        JSON-compatible representation

    """
    result: dict[str, Any] = {}
    node_type = getattr(node, "type", None)
    if node_type is not None:
        result["type"] = node_type
    cell_type = getattr(node, "cell_type", None)
    if cell_type is not None:
        result["cell_type"] = cell_type

    for f in dataclasses.fields(node):
        if f.name == "type":
            continue
        value = getattr(node, f.name)
        if value is None:
            continue
        result[f.name] = _to_plain(value)
    return result


def ast_to_json(node: Any, indent: int | None = None) -> str:
    """Serialize a node tree to a JSON string (see ``ast_to_dict``)."""
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False, default=str)
