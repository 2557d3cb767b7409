"""Models module - Pydantic data models"""

from .delta import Delta, DeltaType, EditOperation
from .diff import ContentDiffRequest, DiffResult, FileDiffRequest

__all__ = [
    # Delta models
    "Delta",
    "DeltaType",
    "EditOperation",
    # Diff API models
    "ContentDiffRequest",
    "DiffResult",
    "FileDiffRequest",
]
