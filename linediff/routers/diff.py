"""Diff API endpoints"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, HTTPException

from linediff.models.diff import ContentDiffRequest, DiffResult, FileDiffRequest
from linediff.services.config_manager import ConfigManager
from linediff.services.diff_generator import DiffGenerator
from linediff.services.line_reader import read_lines, split_lines

router = APIRouter()
diff_generator = DiffGenerator()


def check_size(candidate_lines: Sequence[str], reference_lines: Sequence[str], limits: dict) -> None:
    """Reject inputs whose LCS table would be too large"""
    max_lines = limits.get("maxLines", 0)
    for label, lines in (("candidate", candidate_lines), ("reference", reference_lines)):
        if max_lines and len(lines) > max_lines:
            raise HTTPException(
                status_code=413,
                detail=f"{label} has {len(lines)} lines, limit is {max_lines}",
            )

    max_cells = limits.get("maxCells", 0)
    cells = len(candidate_lines) * len(reference_lines)
    if max_cells and cells > max_cells:
        raise HTTPException(
            status_code=413,
            detail=f"{len(candidate_lines)} x {len(reference_lines)} lines exceeds the table limit of {max_cells}",
        )


def load(path: str, encoding: str) -> list[str]:
    """Read a source, mapping I/O failures onto HTTP errors"""
    try:
        return read_lines(path, encoding)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"File not found: {e.filename}")
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise HTTPException(status_code=400, detail=f"Cannot read {path}: {e}")


# Sync handlers: FastAPI runs them in its threadpool
@router.post("/files", response_model=DiffResult)
def diff_files(request: FileDiffRequest) -> DiffResult:
    """Compare two files on the server's filesystem"""
    config = ConfigManager.get_instance().get_config()
    encodings = config.get("encoding", {})

    candidate_lines = load(request.candidate_path, request.candidate_encoding or encodings.get("candidate", "utf-8"))
    reference_lines = load(request.reference_path, request.reference_encoding or encodings.get("reference", "utf-8"))
    check_size(candidate_lines, reference_lines, config.get("limits", {}))

    deltas = diff_generator.generate_diff(candidate_lines, reference_lines)
    return diff_generator.generate_result(deltas, request.candidate_path, request.reference_path)


@router.post("/content", response_model=DiffResult)
def diff_content(request: ContentDiffRequest) -> DiffResult:
    """Compare two texts"""
    limits = ConfigManager.get_instance().get_config().get("limits", {})

    candidate_lines = split_lines(request.candidate)
    reference_lines = split_lines(request.reference)
    check_size(candidate_lines, reference_lines, limits)

    deltas = diff_generator.generate_diff(candidate_lines, reference_lines)
    return diff_generator.generate_result(deltas)
