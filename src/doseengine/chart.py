# src/doseengine/chart.py
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .dosing import dose_for_profile
from .history import is_duplicate
from .types import ChartResult, DoseEntry, MedicationProfile, Severity, Status

logger = logging.getLogger(__name__)

# Absorbs float error in (end - start) / increment, e.g. 0.3 / 0.1 = 2.9999999999999996
_STEP_EPS = 1e-9
# Upper bound on rows in one chart
MAX_CHART_ROWS = 10_000


def chart_weights(start_kg: float, end_kg: float, increment_kg: float) -> np.ndarray:
    """
    Weights from start_kg to end_kg inclusive, stepping by increment_kg.

    Built from the step index (start + i * increment) rather than by repeated
    addition, so the number of points does not depend on float drift.
    Each weight is rounded to 2 dp.
      e.g. (5, 6, 0.5) -> [5.0, 5.5, 6.0]
    """
    n_steps = int(np.floor((end_kg - start_kg) / increment_kg + _STEP_EPS)) + 1
    idx = np.arange(n_steps, dtype=float)
    return np.round(start_kg + idx * increment_kg, 2)


def generate_chart(profile: MedicationProfile, start_kg: float, end_kg: float,
                   increment_kg: float, history: Iterable[DoseEntry] = ()) -> ChartResult:
    """
    Dosing chart for one medication over a weight range.

    Range problems (start > end, increment <= 0, start <= 0, more than
    MAX_CHART_ROWS rows) are reported in the returned status with no entries;
    nothing is raised.

    Entries that duplicate `history`, or an earlier row of this chart, are
    dropped silently. `history` is only read; the caller appends the result.
    """
    error = _check_range(start_kg, end_kg, increment_kg)
    if error is not None:
        logger.debug("chart rejected for %s: %s", profile.name, error)
        return ChartResult(entries=(), status=Status(error, Severity.ERROR))

    seen: list[DoseEntry] = list(history)
    rows: list[DoseEntry] = []
    for w in chart_weights(start_kg, end_kg, increment_kg):
        entry = dose_for_profile(profile, float(w))
        if is_duplicate(entry, seen):
            continue
        rows.append(entry)
        seen.append(entry)

    msg = (f"{profile.name} chart: {len(rows)} entries "
           f"({start_kg:g}-{end_kg:g} kg every {increment_kg:g} kg)")
    return ChartResult(entries=tuple(rows), status=Status(msg, Severity.SUCCESS))


def _check_range(start_kg: float, end_kg: float, increment_kg: float) -> str | None:
    if not (increment_kg > 0):
        return f"Increment must be greater than 0 (got {increment_kg:g})."
    if not (start_kg > 0):
        return f"Start weight must be greater than 0 (got {start_kg:g})."
    if start_kg > end_kg:
        return f"Start weight ({start_kg:g} kg) must not exceed end weight ({end_kg:g} kg)."
    # also catches inf/nan from extreme ranges
    if not ((end_kg - start_kg) / increment_kg + _STEP_EPS < MAX_CHART_ROWS):
        return (f"Chart would exceed {MAX_CHART_ROWS} rows; "
                f"use a narrower range or a larger increment.")
    return None
