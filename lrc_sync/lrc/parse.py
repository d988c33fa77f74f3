from __future__ import annotations

from dataclasses import dataclass
import logging
from operator import attrgetter
import os

import regex

from .errors import LrcReadError
from .model import LrcDocument, LyricLine

logger = logging.getLogger(__name__)

_NEWLINE_RE = regex.compile(r"\r\n|\r|\n")
_META_RE = regex.compile(r"\[(ti|ar|al):([^\]]+)\]")  # [ti:...] / [ar:...] / [al:...]
_TS_RE = regex.compile(r"\[([0-9]{2}):([0-9]{2})\.([0-9]{2,3})\]")  # [mm:ss.xx] / [mm:ss.xxx]

_META_FIELDS = {"ti": "title", "ar": "artist", "al": "album"}


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lines_metadata: int
    lines_with_timestamps: int
    lines_ignored: int
    lines_emitted: int


def _to_int(digits: str) -> int:
    # a bad numeric group counts as 0 instead of dropping the line
    try:
        return int(digits)
    except ValueError:
        return 0


def _tag_to_ms(m: regex.Match[str]) -> int:
    frac = m.group(3)
    # "50" -> 500ms, "500" -> 500ms
    frac_ms = _to_int(frac) * 10 if len(frac) == 2 else _to_int(frac)
    return _to_int(m.group(1)) * 60_000 + _to_int(m.group(2)) * 1_000 + frac_ms


def parse_lrc_with_stats(text: str) -> tuple[LrcDocument, LrcParseStats]:
    """
    Supported:
    - [ti:], [ar:], [al:] metadata (a metadata line is never a lyric line)
    - [mm:ss.xx] and [mm:ss.xxx] timestamps
    - several timestamps on one line sharing the remaining text

    Never raises: lines that do not fit are skipped. Lines whose text is
    blank after stripping produce no entry.
    """
    meta: dict[str, str] = {}
    lines: list[LyricLine] = []

    total = 0
    meta_count = 0
    with_ts = 0
    ignored = 0

    for line in _NEWLINE_RE.split(text):
        total += 1

        tag = _META_RE.search(line)
        if tag:
            meta_count += 1
            meta[_META_FIELDS[tag.group(1)]] = tag.group(2).strip()
            continue

        ts = list(_TS_RE.finditer(line))
        if not ts:
            ignored += 1
            continue

        with_ts += 1
        if len(ts) == 1:
            payload = line[ts[0].end() :].strip()
        else:
            payload = _TS_RE.sub("", line).strip()
        if not payload:
            continue

        for m in ts:
            lines.append(LyricLine(time_ms=_tag_to_ms(m), text=payload))

    # list.sort is stable: shared timestamps keep source order
    lines.sort(key=attrgetter("time_ms"))

    doc = LrcDocument(lines=tuple(lines), **meta)
    stats = LrcParseStats(
        lines_total=total,
        lines_metadata=meta_count,
        lines_with_timestamps=with_ts,
        lines_ignored=ignored,
        lines_emitted=len(doc.lines),
    )
    logger.debug(
        "Parsed LRC: %d lines, %d timed, %d ignored, %d emitted",
        total,
        with_ts,
        ignored,
        stats.lines_emitted,
    )
    return doc, stats


def parse_lrc(text: str) -> LrcDocument:
    doc, _stats = parse_lrc_with_stats(text)
    return doc


def read_lrc_text(path: str | os.PathLike[str], encoding: str = "utf-8") -> str:
    try:
        with open(path, encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise LrcReadError(path, f"not valid {encoding} text") from e
    except OSError as e:
        raise LrcReadError(path, e.strerror or str(e)) from e


def parse_lrc_file(path: str | os.PathLike[str], encoding: str = "utf-8") -> LrcDocument:
    """
    Read an .lrc file and parse it.

    Raises LrcReadError if the file is missing, unreadable or not valid text
    in `encoding`. Content problems never raise.
    """
    return parse_lrc(read_lrc_text(path, encoding))
