# src/doseengine/types.py
from dataclasses import dataclass
from enum import Enum

# Weights are always KILOGRAMS internally; pounds are converted at the edge.


class Severity(Enum):
    INFO = "info"
    SUCCESS = "success"
    CAUTION = "caution"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    """One-line message shown to the user, with its severity."""
    message: str
    severity: Severity = Severity.INFO

    @property
    def ok(self) -> bool:
        return self.severity is not Severity.ERROR


@dataclass(frozen=True)
class MedicationProfile:
    """
    A liquid medication and its usual dose rate.

    name                 : display name (also the identity used for duplicate checks)
    strength_mg          : milligrams of drug in `volume_ml`
    volume_ml            : reference volume, e.g. 160 mg per 5 mL -> volume_ml=5
    dose_rate_mg_per_kg  : default dose rate
    """
    name: str
    strength_mg: float
    volume_ml: float
    dose_rate_mg_per_kg: float

    @property
    def concentration_mg_per_ml(self) -> float:
        return self.strength_mg / self.volume_ml

    @property
    def concentration_label(self) -> str:
        return f"{self.strength_mg:g}mg/{self.volume_ml:g}mL"


@dataclass(frozen=True)
class DoseEntry:
    """
    Result of one calculation.

    total_dose_mg : dose_rate_mg_per_kg * weight_kg
    volume_ml     : volume to deliver, rounded to 2 dp
    summary       : "<Name> >> Weight: <W>kg >> Dose = <V> mL"
    """
    medication: str
    concentration: str
    dose_rate_mg_per_kg: float
    weight_kg: float
    total_dose_mg: float
    volume_ml: float
    summary: str


@dataclass(frozen=True)
class ChartResult:
    entries: tuple[DoseEntry, ...]
    status: Status
