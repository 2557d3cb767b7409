"""linediff - line-based structural diff between a candidate and a reference"""

from .models import Delta, DeltaType, DiffResult, EditOperation
from .services import DiffGenerator, diff

__version__ = "1.0.0"
__all__ = [
    "diff",
    "DiffGenerator",
    "Delta",
    "DeltaType",
    "DiffResult",
    "EditOperation",
]
