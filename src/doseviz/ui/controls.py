# src/doseviz/ui/controls.py
from dataclasses import dataclass
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QPushButton, QDoubleSpinBox, QComboBox, QFrame, QLabel, QVBoxLayout

from doseengine.types import MedicationProfile


@dataclass
class ChartRequest:
    profile: MedicationProfile
    start_kg: float
    end_kg: float
    increment_kg: float


class ControlsPanel(QFrame):
    weightChanged = Signal(float)
    doseRequested = Signal(object)        # MedicationProfile
    allPresetsRequested = Signal()
    chartRequested = Signal(object)       # ChartRequest
    clearRequested = Signal()
    exportRequested = Signal()

    def __init__(self, presets: tuple[MedicationProfile, ...]):
        super().__init__()
        self.presets = presets
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Controls"))

        # --- Patient ---
        layout.addWidget(QLabel("Patient"))
        self.weight = QDoubleSpinBox(); self.weight.setDecimals(2)
        self.weight.setRange(0.01, 500); self.weight.setValue(10.0)
        self.weight.setSuffix(" kg")
        layout.addWidget(QLabel("Weight (kg)"))
        layout.addWidget(self.weight)
        set_weight = QPushButton("Set weight"); layout.addWidget(set_weight)
        set_weight.clicked.connect(lambda: self.weightChanged.emit(float(self.weight.value())))

        # --- Medication ---
        layout.addWidget(QLabel("Medication"))
        self.medication = QComboBox()
        self.medication.addItems([f"{p.name} ({p.concentration_label})" for p in presets])
        layout.addWidget(self.medication)

        self.rate = QDoubleSpinBox(); self.rate.setDecimals(2); self.rate.setRange(0.01, 1000)
        self.rate.setSuffix(" mg/kg")
        layout.addWidget(QLabel("Dose rate (mg/kg)"))
        layout.addWidget(self.rate)
        self.medication.currentIndexChanged.connect(self._update_rate)
        self._update_rate()

        dose = QPushButton("Calculate dose"); layout.addWidget(dose)
        dose.clicked.connect(lambda: self.doseRequested.emit(self.current_profile()))
        all_presets = QPushButton("Calculate all presets"); layout.addWidget(all_presets)
        all_presets.clicked.connect(self.allPresetsRequested.emit)

        # --- Chart range ---
        layout.addWidget(QLabel("Dosing chart"))
        self.start = QDoubleSpinBox(); self.start.setDecimals(2); self.start.setRange(0.01, 500); self.start.setValue(5.0)
        self.start.setSuffix(" kg")
        layout.addWidget(QLabel("Start weight"))
        layout.addWidget(self.start)

        self.end = QDoubleSpinBox(); self.end.setDecimals(2); self.end.setRange(0.01, 500); self.end.setValue(30.0)
        self.end.setSuffix(" kg")
        layout.addWidget(QLabel("End weight"))
        layout.addWidget(self.end)

        self.increment = QDoubleSpinBox(); self.increment.setDecimals(2); self.increment.setRange(0.0, 100); self.increment.setValue(1.0)
        self.increment.setSuffix(" kg")
        layout.addWidget(QLabel("Increment"))
        layout.addWidget(self.increment)

        chart = QPushButton("Generate chart"); layout.addWidget(chart)
        chart.clicked.connect(self._emit_chart)

        # --- History ---
        clear = QPushButton("Clear history"); layout.addWidget(clear)
        clear.clicked.connect(self.clearRequested.emit)
        export = QPushButton("Export history"); layout.addWidget(export)
        export.clicked.connect(self.exportRequested.emit)
        layout.addStretch(1)

    def _update_rate(self):
        idx = self.medication.currentIndex()
        if 0 <= idx < len(self.presets):
            self.rate.setValue(self.presets[idx].dose_rate_mg_per_kg)

    def current_profile(self) -> MedicationProfile:
        """Selected preset, with the dose rate from the spin box."""
        p = self.presets[self.medication.currentIndex()]
        rate = float(self.rate.value())
        if rate == p.dose_rate_mg_per_kg:
            return p
        return MedicationProfile(p.name, p.strength_mg, p.volume_ml, rate)

    def _emit_chart(self):
        req = ChartRequest(
            profile=self.current_profile(),
            start_kg=float(self.start.value()),
            end_kg=float(self.end.value()),
            increment_kg=float(self.increment.value()),
        )
        self.chartRequested.emit(req)
