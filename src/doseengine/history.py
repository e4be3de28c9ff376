# src/doseengine/history.py
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .types import DoseEntry

logger = logging.getLogger(__name__)

# Two entries for the same medication closer than this (kg) are the same entry.
WEIGHT_TOLERANCE_KG = 0.01
# Keeps weights exactly 0.01 apart (e.g. 5.00 and 5.01) distinct despite float error
_EPS = 1e-9


def is_duplicate(candidate: DoseEntry, history: Iterable[DoseEntry]) -> bool:
    """
    True iff `history` already holds an entry with the same medication name
    (exact match) and a weight within WEIGHT_TOLERANCE_KG of the candidate.
    """
    return any(
        e.medication == candidate.medication
        and abs(e.weight_kg - candidate.weight_kg) < WEIGHT_TOLERANCE_KG - _EPS
        for e in history
    )


class HistoryStore:
    """
    Session history of computed doses, in insertion order.

    Append-only apart from clear(); no two stored entries are duplicates of
    each other (see is_duplicate).
    """

    def __init__(self, entries: Iterable[DoseEntry] = ()):
        self._entries: list[DoseEntry] = []
        for e in entries:
            self.add(e)

    def add(self, entry: DoseEntry) -> bool:
        """Append `entry`. Returns False (and stores nothing) for a duplicate."""
        if is_duplicate(entry, self._entries):
            logger.debug("duplicate skipped: %s", entry.summary)
            return False
        self._entries.append(entry)
        return True

    def clear(self) -> None:
        logger.info("history cleared (%d entries)", len(self._entries))
        self._entries.clear()

    def all(self) -> tuple[DoseEntry, ...]:
        return tuple(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def summaries(self) -> list[str]:
        return [e.summary for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DoseEntry]:
        return iter(tuple(self._entries))
