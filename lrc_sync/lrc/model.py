from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LyricLine:
    time_ms: int
    text: str


@dataclass(frozen=True, slots=True)
class LrcDocument:
    title: str | None = None
    artist: str | None = None
    album: str | None = None
    # sorted by time_ms, ties keep source order
    lines: tuple[LyricLine, ...] = ()
