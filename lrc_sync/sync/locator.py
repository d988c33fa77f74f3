from __future__ import annotations

from bisect import bisect_right
from operator import attrgetter
from typing import Sequence

from lrc_sync.lrc.model import LyricLine

NO_LINE = -1

_time_ms = attrgetter("time_ms")


def find_line(lines: Sequence[LyricLine], position_ms: int) -> int:
    """
    Index of the last line with time_ms <= position_ms, or NO_LINE.

    `lines` must be sorted by time_ms (as parse_lrc returns them). Lines
    sharing a timestamp resolve to the last of them. O(log n) via bisect.
    """
    i = bisect_right(lines, position_ms, key=_time_ms) - 1
    return i if i >= 0 else NO_LINE
