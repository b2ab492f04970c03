"""Reading files line by line or in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Callable


def read_lines(file_path: str | os.PathLike[str], handler: Callable[[str], None]) -> None:
    """Call the handler with each line of a text file, line endings removed.

    An exception raised by the handler stops the reading and propagates.
    """
    with open(file_path, encoding="utf-8", newline="") as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            handler(line)


def read_chunks(
    file_path: str | os.PathLike[str], chunk_size: int, handler: Callable[[bytes], None]
) -> None:
    """Call the handler with successive pieces of a file of up to chunk_size bytes."""
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")
    with open(file_path, "rb") as f:
        while chunk := f.read(chunk_size):
            handler(chunk)