"""Services module - Diff engine and settings"""

from .aligner import align
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, diff
from .edit_script import build
from .line_reader import read_lines, split_lines
from .renderer import format_lines, render

__all__ = [
    "align",
    "build",
    "render",
    "format_lines",
    "read_lines",
    "split_lines",
    "DiffGenerator",
    "diff",
    "ConfigManager",
]
