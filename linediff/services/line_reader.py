"""
Line Reader - Load text sources as ordered line sequences
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _strip_terminators(lines: Iterable[str]) -> list[str]:
    # Universal newlines already turned \r\n and \r into \n
    return [line[:-1] if line.endswith("\n") else line for line in lines]


def read_lines(path: str | os.PathLike, encoding: str) -> list[str]:
    """
    Read a text file into a list of lines without terminators.

    Decoding is strict; I/O, decoding and unknown-encoding errors are raised
    to the caller unchanged.
    """
    with open(path, encoding=encoding, newline=None) as f:
        lines = _strip_terminators(f)
    logger.debug(f"Read {len(lines)} lines from {path} ({encoding})")
    return lines


def split_lines(text: str) -> list[str]:
    """Split in-memory text with the same rules as read_lines"""
    return _strip_terminators(io.StringIO(text, newline=None))
