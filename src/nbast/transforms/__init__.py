#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/nbast/transforms/__init__.py
"""Ready-made transformers for ``nbast.ast.transform``."""

from nbast.transforms.builtin import (
    ExtractCellsByTagTransform,
    ParseMarkdownCellsTransform,
    RemoveCellsByTagTransform,
    RemoveEmptyCellsTransform,
    RemoveOutputsTransform,
    extract_cells_by_tag,
    remove_cells_by_tag,
    remove_empty_cells,
    remove_outputs,
)

__all__ = [
    "ExtractCellsByTagTransform",
    "ParseMarkdownCellsTransform",
    "RemoveCellsByTagTransform",
    "RemoveEmptyCellsTransform",
    "RemoveOutputsTransform",
    "extract_cells_by_tag",
    "remove_cells_by_tag",
    "remove_empty_cells",
    "remove_outputs",
]
