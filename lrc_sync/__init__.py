"""Timed lyrics (LRC) parsing and playback line lookup."""

from lrc_sync.lrc.errors import LrcReadError
from lrc_sync.lrc.model import LrcDocument, LyricLine
from lrc_sync.lrc.parse import parse_lrc, parse_lrc_file, parse_lrc_with_stats
from lrc_sync.sync.locator import NO_LINE, find_line
from lrc_sync.sync.tracker import LineTracker

__all__ = [
    "LineTracker",
    "LrcDocument",
    "LrcReadError",
    "LyricLine",
    "NO_LINE",
    "find_line",
    "parse_lrc",
    "parse_lrc_file",
    "parse_lrc_with_stats",
]
