from __future__ import annotations

import json

from .model import LrcDocument


def export_json(doc: LrcDocument) -> str:
    return json.dumps(
        {
            "title": doc.title,
            "artist": doc.artist,
            "album": doc.album,
            "lines": [{"time_ms": ln.time_ms, "text": ln.text} for ln in doc.lines],
        },
        ensure_ascii=False,
        indent=2,
    )


def _fmt_lrc_time(ms: int, millis: bool) -> str:
    m, rem = divmod(ms, 60_000)
    s, ms2 = divmod(rem, 1_000)
    if millis:
        return f"{m:02d}:{s:02d}.{ms2:03d}"
    # centiseconds, sub-10ms precision is truncated
    return f"{m:02d}:{s:02d}.{ms2 // 10:02d}"


def export_lrc(doc: LrcDocument, include_metadata: bool = True, millis: bool = False) -> str:
    out: list[str] = []
    if include_metadata:
        for key, value in (("ti", doc.title), ("ar", doc.artist), ("al", doc.album)):
            if value:
                out.append(f"[{key}:{value}]")

    for ln in doc.lines:
        out.append(f"[{_fmt_lrc_time(ln.time_ms, millis)}]{ln.text}")
    return "\n".join(out) + ("\n" if out else "")
