# src/doseengine/export.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

from .types import DoseEntry

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "Pediatric Dosage Summary"


class EmptyHistoryError(ValueError):
    """Raised when an export is requested with nothing to write."""


def export_filename(now: datetime | None = None) -> str:
    """e.g. 'Pediatric Dosage Summary 20261019_142501.txt'"""
    now = now or datetime.now()
    return f"{EXPORT_PREFIX} {now:%Y%m%d_%H%M%S}.txt"


def export_history(entries: Sequence[DoseEntry], directory: str | Path = ".",
                   now: datetime | None = None) -> Path:
    """
    Write one summary line per entry, in order, to a new timestamped UTF-8
    text file inside `directory`. Returns the path written.
    """
    if not entries:
        raise EmptyHistoryError("No history to export.")

    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / export_filename(now)
    path.write_text("".join(f"{e.summary}\n" for e in entries), encoding="utf-8")
    logger.info("exported %d entries to %s", len(entries), path)
    return path
