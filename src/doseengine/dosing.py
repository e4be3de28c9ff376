# src/doseengine/dosing.py
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP

from .types import DoseEntry, MedicationProfile, Severity, Status

logger = logging.getLogger(__name__)

LB_PER_KG = 2.2


def compute_dose(weight_kg: float, strength_mg: float, volume_ml: float,
                 dose_rate_mg_per_kg: float, *, name: str = "Manual Entry") -> DoseEntry:
    """
    Weight-based liquid dose.

      total_dose_mg = dose_rate_mg_per_kg * weight_kg
      volume_ml     = total_dose_mg * volume_ml / strength_mg   (rounded to 2 dp)

    Example: 10 kg at 15 mg/kg of a 160 mg/5 mL suspension
      -> 150 mg -> 4.69 mL

    Inputs are expected to be > 0; callers validate before calling.
    """
    total_dose_mg = dose_rate_mg_per_kg * weight_kg
    volume = round_half_up((total_dose_mg * volume_ml) / strength_mg)
    summary = f"{name} >> Weight: {weight_kg:.2f}kg >> Dose = {volume:.2f} mL"
    logger.debug("compute_dose %s: %.2f kg x %g mg/kg -> %g mg, %.2f mL",
                 name, weight_kg, dose_rate_mg_per_kg, total_dose_mg, volume)
    return DoseEntry(
        medication=name,
        concentration=f"{strength_mg:g}mg/{volume_ml:g}mL",
        dose_rate_mg_per_kg=float(dose_rate_mg_per_kg),
        weight_kg=float(weight_kg),
        total_dose_mg=float(total_dose_mg),
        volume_ml=volume,
        summary=summary,
    )


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round halves away from zero, on the shortest decimal form of the float.
      4.6875 -> 4.69   (built-in round() gives 4.68)
      1.005  -> 1.01
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def dose_for_profile(profile: MedicationProfile, weight_kg: float) -> DoseEntry:
    """compute_dose() with the strength, volume and rate taken from a profile."""
    return compute_dose(weight_kg, profile.strength_mg, profile.volume_ml,
                        profile.dose_rate_mg_per_kg, name=profile.name)


def lb_to_kg(weight_lb: float, lb_per_kg: float = LB_PER_KG) -> float:
    """Pounds to kilograms, rounded to 2 dp (kg = lb / 2.2)."""
    return round_half_up(weight_lb / lb_per_kg)


def weight_caution(weight_kg: float, low_kg: float = 5.0, high_kg: float = 99.0) -> Status | None:
    """
    Advisory check only: returns a CAUTION status when the weight is outside
    [low_kg, high_kg], otherwise None. The weight is never rejected here.
    """
    if weight_kg < low_kg or weight_kg > high_kg:
        return Status(
            f"Caution: {weight_kg:.2f} kg is outside the usual range "
            f"({low_kg:g}-{high_kg:g} kg). Double-check the weight.",
            Severity.CAUTION,
        )
    return None


# --------------------------
# Small input validators
# --------------------------
def _validate_positive(name: str, x: float) -> None:
    if not (x > 0):
        raise ValueError(f"{name} must be > 0 (got {x}).")

def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValueError("name must not be blank.")
