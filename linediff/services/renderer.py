"""
Delta Renderer - Canonical text reports for edit operations
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.delta import DeltaType, EditOperation

# Continuation lines line up under the opening quote of the first element
LINE_SEPARATOR = ",\n   "


def format_lines(lines: Sequence[str]) -> str:
    """Render lines as a bracketed, double-quoted list"""
    return "[" + LINE_SEPARATOR.join(f'"{line}"' for line in lines) + "]"


def render(operation: EditOperation) -> str:
    """Render the report for a single edit operation"""
    if operation.type is DeltaType.REPLACE:
        return (
            f"Changed content at line {operation.anchor}:\n"
            "expecting:\n"
            f"  {format_lines(operation.reference_lines)}\n"
            "but was:\n"
            f"  {format_lines(operation.candidate_lines)}\n"
        )
    if operation.type is DeltaType.INSERT:
        return (
            f"Missing content at line {operation.anchor}:\n"
            f"  {format_lines(operation.reference_lines)}\n"
        )
    return (
        f"Extra content at line {operation.anchor}:\n"
        f"  {format_lines(operation.candidate_lines)}\n"
    )
