from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

LOG_LEVEL = os.getenv("CALGRID_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("CALGRID_LOG_DIR")

_INITIALIZED = False


def configure_logging(*, level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """Configure application-wide logging; file output only when a log directory is set."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    resolved_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    target_dir = log_dir or (Path(LOG_DIR) if LOG_DIR else None)
    if target_dir is not None:
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d")
        handlers.append(logging.FileHandler(target_dir / f"calgrid-{timestamp}.log", encoding="utf-8"))

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(resolved_level))
