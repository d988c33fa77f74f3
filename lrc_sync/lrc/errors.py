from __future__ import annotations

import os


class LrcReadError(OSError):
    """The lyric file could not be opened, read or decoded."""

    def __init__(self, path: str | os.PathLike[str], reason: str):
        super().__init__(f"Cannot read {os.fspath(path)}: {reason}")
        self.path = os.fspath(path)
        self.reason = reason
