"""Reading and writing the commit message file."""
from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


def read_message(path: str | Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_message(path: str | Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


@contextmanager
def scratch_message_file(content: str) -> Iterator[Path]:
    """Write ``content`` to a throwaway COMMIT_EDITMSG file, removed on exit."""
    fd, name = tempfile.mkstemp(prefix="COMMIT_EDITMSG")
    os.close(fd)
    path = Path(name)
    try:
        write_message(path, content)
        yield path
    finally:
        path.unlink(missing_ok=True)
