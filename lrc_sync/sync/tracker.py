from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from lrc_sync.lrc.model import LrcDocument, LyricLine
from lrc_sync.sync.locator import NO_LINE, find_line


@dataclass(slots=True)
class LineTracker:
    """
    Follows the active line of one track across playback ticks.
    Lookup is delegated to find_line; only changes are reported.
    """

    lines: tuple[LyricLine, ...]
    last_idx: int = NO_LINE

    @classmethod
    def from_document(cls, doc: LrcDocument) -> "LineTracker":
        return cls(lines=doc.lines)

    @classmethod
    def from_lines(cls, lines: Iterable[LyricLine]) -> "LineTracker":
        return cls(lines=tuple(lines))

    def current_index(self, now_ms: int) -> int:
        return find_line(self.lines, now_ms)

    def current_line(self, now_ms: int) -> LyricLine | None:
        i = self.current_index(now_ms)
        return self.lines[i] if i != NO_LINE else None

    def changed_index(self, now_ms: int) -> int | None:
        i = self.current_index(now_ms)
        if i != self.last_idx:
            self.last_idx = i
            return i
        return None

    def reset(self) -> None:
        self.last_idx = NO_LINE
