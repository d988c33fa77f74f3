from __future__ import annotations

import codecs
import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING = "utf-8"
_EXPORT_FORMATS = ("lrc", "json")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lrc-sync"
    return Path.home() / ".config" / "lrc-sync"


@dataclass(frozen=True)
class AppConfig:
    config_dir: Path

    # Reading
    encoding: str

    # Export
    export_format: str
    export_millis: bool


def load_config() -> AppConfig:
    config_dir = _config_dir()

    export_format = os.getenv("LRC_SYNC_EXPORT_FORMAT", "lrc").strip().lower()
    if export_format not in _EXPORT_FORMATS:
        logger.warning("Unknown export format %r, using lrc", export_format)
        export_format = "lrc"
    export_millis = os.getenv("LRC_SYNC_EXPORT_MILLIS", "0") not in ("0", "false", "False", "")

    return AppConfig(
        config_dir=config_dir,
        encoding=_load_encoding(config_dir),
        export_format=export_format,
        export_millis=export_millis,
    )


def _load_encoding(config_dir: Path) -> str:
    # Priority: config.json → LRC_SYNC_ENCODING → utf-8
    name: str | None = None
    cfg_path = config_dir / "config.json"
    if cfg_path.exists():
        try:
            data = json.loads(cfg_path.read_text(encoding="utf-8"))
            name = data.get("encoding") or None
        except (OSError, ValueError, AttributeError):
            logger.warning("Ignoring unreadable config file %s", cfg_path)
    if not name:
        name = os.getenv("LRC_SYNC_ENCODING") or _DEFAULT_ENCODING

    try:
        return codecs.lookup(name).name
    except (LookupError, TypeError):
        logger.warning("Unknown encoding %r, falling back to %s", name, _DEFAULT_ENCODING)
        return _DEFAULT_ENCODING
