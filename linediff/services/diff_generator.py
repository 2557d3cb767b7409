"""
Diff Generator Service - Line-level deltas between a candidate and a reference
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from ..models.delta import Delta
from ..models.diff import DiffResult
from .aligner import align
from .edit_script import build
from .line_reader import read_lines, split_lines
from .renderer import render

logger = logging.getLogger(__name__)


class DiffGenerator:
    """Generate classified, rendered deltas between two line sequences"""

    def generate_diff(
        self,
        candidate_lines: Sequence[str],
        reference_lines: Sequence[str],
    ) -> list[Delta]:
        """Align, build the edit script and render every operation"""
        if candidate_lines is None or reference_lines is None:
            raise ValueError("Both candidate and reference lines are required")

        logger.debug(f"Line counts: candidate={len(candidate_lines)}, reference={len(reference_lines)}")

        alignment = align(candidate_lines, reference_lines)
        operations = build(candidate_lines, reference_lines, alignment)
        deltas = [Delta(**operation.model_dump(), text=render(operation)) for operation in operations]

        logger.info(f"Diff complete: {len(alignment)} matched lines, {len(deltas)} deltas")
        return deltas

    def diff_files(
        self,
        candidate_path: str | os.PathLike,
        candidate_encoding: str,
        reference_path: str | os.PathLike,
        reference_encoding: str,
    ) -> list[Delta]:
        """Compare two files; read errors abort before any diffing"""
        candidate_lines = read_lines(candidate_path, candidate_encoding)
        reference_lines = read_lines(reference_path, reference_encoding)
        return self.generate_diff(candidate_lines, reference_lines)

    def diff_file_content(
        self,
        candidate_path: str | os.PathLike,
        candidate_encoding: str,
        reference_content: str,
    ) -> list[Delta]:
        """Compare a file against expected text"""
        candidate_lines = read_lines(candidate_path, candidate_encoding)
        return self.generate_diff(candidate_lines, split_lines(reference_content))

    def diff_content(self, candidate_content: str, reference_content: str) -> list[Delta]:
        """Compare two texts"""
        return self.generate_diff(split_lines(candidate_content), split_lines(reference_content))

    def generate_result(
        self,
        deltas: list[Delta],
        candidate: str = "candidate",
        reference: str = "reference",
    ) -> DiffResult:
        """Wrap deltas into a DiffResult with the full report"""
        return DiffResult(
            candidate=candidate,
            reference=reference,
            deltas=deltas,
            report="".join(delta.text for delta in deltas),
        )


def diff(
    candidate_path: str | os.PathLike,
    candidate_encoding: str,
    reference_path: str | os.PathLike,
    reference_encoding: str,
) -> list[Delta]:
    """Ordered deltas between a candidate file and a reference file"""
    return DiffGenerator().diff_files(candidate_path, candidate_encoding, reference_path, reference_encoding)
