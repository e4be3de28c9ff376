# src/doseengine/presets.py
from __future__ import annotations

from .dosing import _validate_name, _validate_positive
from .types import MedicationProfile

ACETAMINOPHEN = MedicationProfile("Acetaminophen", strength_mg=160.0, volume_ml=5.0, dose_rate_mg_per_kg=15.0)
IBUPROFEN = MedicationProfile("Ibuprofen", strength_mg=100.0, volume_ml=5.0, dose_rate_mg_per_kg=10.0)
DIPHENHYDRAMINE = MedicationProfile("Diphenhydramine", strength_mg=12.5, volume_ml=5.0, dose_rate_mg_per_kg=1.0)

BUILTIN_PRESETS: tuple[MedicationProfile, ...] = (ACETAMINOPHEN, IBUPROFEN, DIPHENHYDRAMINE)


def make_profile(name: str, strength_mg: float, volume_ml: float,
                 dose_rate_mg_per_kg: float) -> MedicationProfile:
    """
    Build a user-supplied profile (manual entry or config file).
    Example: make_profile("Cetirizine", 5, 5, 0.25)
    """
    _validate_name(name)
    _validate_positive("strength_mg", strength_mg)
    _validate_positive("volume_ml", volume_ml)
    _validate_positive("dose_rate_mg_per_kg", dose_rate_mg_per_kg)
    return MedicationProfile(name=name.strip(), strength_mg=float(strength_mg),
                             volume_ml=float(volume_ml),
                             dose_rate_mg_per_kg=float(dose_rate_mg_per_kg))

