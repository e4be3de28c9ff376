# src/doseengine/session.py
from __future__ import annotations

import logging
from pathlib import Path

from .chart import generate_chart
from .config import DoseConfig
from .dosing import dose_for_profile, lb_to_kg, weight_caution
from .export import EmptyHistoryError, export_history
from .history import HistoryStore
from .presets import make_profile
from .types import MedicationProfile, Severity, Status

logger = logging.getLogger(__name__)

NO_HISTORY = Status("No history yet.", Severity.INFO)


class DoseSession:
    """
    State for one interactive session: patient weight, dose history and the
    last status message.

    Every public method returns a Status (also kept in `self.status`). User
    mistakes become ERROR statuses; nothing here raises for bad input.
    """

    def __init__(self, config: DoseConfig | None = None):
        self.config = config or DoseConfig()
        self.history = HistoryStore()
        self.weight_kg: float | None = None
        self.status: Status = NO_HISTORY

    @property
    def presets(self) -> tuple[MedicationProfile, ...]:
        return self.config.presets

    def _report(self, status: Status) -> Status:
        self.status = status
        if status.severity is Severity.ERROR:
            logger.info("error status: %s", status.message)
        return status

    # --- weight -----------------------------------------------------------
    def set_weight_kg(self, weight_kg: float) -> Status:
        if not (weight_kg > 0):
            return self._report(Status(f"Weight must be greater than 0 (got {weight_kg:g}).", Severity.ERROR))
        self.weight_kg = float(weight_kg)
        logger.info("weight set to %.2f kg", self.weight_kg)
        caution = weight_caution(self.weight_kg, self.config.caution_low_kg, self.config.caution_high_kg)
        if caution is not None:
            return self._report(caution)
        return self._report(Status(f"Weight set to {self.weight_kg:.2f} kg.", Severity.SUCCESS))

    def set_weight_lb(self, weight_lb: float) -> Status:
        if not (weight_lb > 0):
            return self._report(Status(f"Weight must be greater than 0 (got {weight_lb:g}).", Severity.ERROR))
        return self.set_weight_kg(lb_to_kg(weight_lb, self.config.lb_per_kg))

    # --- single doses -----------------------------------------------------
    def calculate(self, profile: MedicationProfile) -> Status:
        if self.weight_kg is None:
            return self._report(Status("Enter the patient weight first.", Severity.ERROR))
        entry = dose_for_profile(profile, self.weight_kg)
        if not self.history.add(entry):
            return self._report(Status(f"Duplicate skipped: {entry.summary}", Severity.INFO))
        return self._report(Status(entry.summary, Severity.SUCCESS))

    def calculate_all(self) -> Status:
        if self.weight_kg is None:
            return self._report(Status("Enter the patient weight first.", Severity.ERROR))
        added = skipped = 0
        for profile in self.presets:
            if self.history.add(dose_for_profile(profile, self.weight_kg)):
                added += 1
            else:
                skipped += 1
        msg = f"Calculated {added} preset dose(s) at {self.weight_kg:.2f} kg."
        if skipped:
            msg += f" {skipped} duplicate(s) skipped."
        return self._report(Status(msg, Severity.SUCCESS if added else Severity.INFO))

    def calculate_manual(self, name: str, strength_mg: float, volume_ml: float,
                         dose_rate_mg_per_kg: float) -> Status:
        try:
            profile = make_profile(name, strength_mg, volume_ml, dose_rate_mg_per_kg)
        except ValueError as e:
            return self._report(Status(str(e), Severity.ERROR))
        return self.calculate(profile)

    # --- charts -----------------------------------------------------------
    def chart(self, profile: MedicationProfile, start_kg: float, end_kg: float,
              increment_kg: float) -> Status:
        result = generate_chart(profile, start_kg, end_kg, increment_kg, self.history.all())
        for entry in result.entries:
            self.history.add(entry)
        return self._report(result.status)

    # --- history ----------------------------------------------------------
    def clear_history(self) -> Status:
        self.history.clear()
        return self._report(NO_HISTORY)

    def export(self, directory: str | Path | None = None) -> Status:
        folder = directory if directory is not None else self.config.export_dir
        try:
            path = export_history(self.history.all(), folder)
        except EmptyHistoryError as e:
            return self._report(Status(str(e), Severity.ERROR))
        except OSError as e:
            return self._report(Status(f"Export failed: {e}", Severity.ERROR))
        return self._report(Status(f"Exported {self.history.count()} entries to {path}", Severity.SUCCESS))
