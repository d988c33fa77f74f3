from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    # Env override, e.g. LRC_SYNC_LOG_LEVEL=WARNING
    level_name = os.getenv("LRC_SYNC_LOG_LEVEL")
    if level_name:
        named = logging.getLevelName(level_name.upper())
        if isinstance(named, int):
            level = named

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
