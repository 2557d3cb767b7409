"""Diff request/response models"""

from __future__ import annotations

from pydantic import BaseModel, computed_field

from .delta import Delta


class FileDiffRequest(BaseModel):
    """Request to compare two files on the server's filesystem"""

    candidate_path: str
    reference_path: str
    candidate_encoding: str | None = None  # falls back to configured encoding
    reference_encoding: str | None = None


class ContentDiffRequest(BaseModel):
    """Request to compare two texts"""

    candidate: str
    reference: str


class DiffResult(BaseModel):
    """Complete diff result for a pair of sources"""

    candidate: str  # label of the candidate side, usually a path
    reference: str
    deltas: list[Delta]
    report: str  # all delta texts joined in order

    @computed_field
    @property
    def identical(self) -> bool:
        return not self.deltas
