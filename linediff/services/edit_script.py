"""
Edit Script Builder - Turn an alignment into anchored edit operations
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models.delta import DeltaType, EditOperation


def build(
    candidate: Sequence[str],
    reference: Sequence[str],
    alignment: Iterable[tuple[int, int]],
) -> list[EditOperation]:
    """Emit one operation per gap between consecutive matches.

    A gap with unmatched lines on both sides becomes a single replace, even
    when the two sides have different lengths; no re-alignment happens inside
    a gap.
    """
    operations = []
    i = j = 0

    # Sentinel match past both ends closes the trailing gap
    for next_i, next_j in [*alignment, (len(candidate), len(reference))]:
        operation = _gap_operation(candidate[i:next_i], reference[j:next_j], anchor=j + 1)
        if operation is not None:
            operations.append(operation)
        i, j = next_i + 1, next_j + 1

    return operations


def _gap_operation(
    candidate_lines: Sequence[str],
    reference_lines: Sequence[str],
    anchor: int,
) -> EditOperation | None:
    if candidate_lines and reference_lines:
        change_type = DeltaType.REPLACE
    elif reference_lines:
        change_type = DeltaType.INSERT
    elif candidate_lines:
        change_type = DeltaType.DELETE
    else:
        return None

    return EditOperation(
        type=change_type,
        anchor=anchor,
        candidate_lines=tuple(candidate_lines),
        reference_lines=tuple(reference_lines),
    )
