# src/doseviz/ui/main_window.py
from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStatusBar, QListWidget, QLabel

from doseengine.session import DoseSession
from doseengine.types import MedicationProfile, Severity, Status
from .controls import ControlsPanel, ChartRequest
from .plots import ChartPlotWidget

_STATUS_COLORS = {
    Severity.INFO: "#1f6feb",
    Severity.SUCCESS: "#1a7f37",
    Severity.CAUTION: "#9a6700",
    Severity.ERROR: "#cf222e",
}


class MainWindow(QMainWindow):
    def __init__(self, session: DoseSession):
        super().__init__()
        self.session = session
        self.setWindowTitle("Pediatric Dose Calculator")
        self.resize(1100, 680)

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel(session.presets)
        self.plot = ChartPlotWidget()
        self.history = QListWidget()

        right = QVBoxLayout()
        right.addWidget(self.plot, 2)
        right.addWidget(QLabel("History"))
        right.addWidget(self.history, 1)
        root.addWidget(self.controls, 0)
        root.addLayout(right, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.weightChanged.connect(lambda w: self._show(self.session.set_weight_kg(w)))
        self.controls.doseRequested.connect(self.on_dose)
        self.controls.allPresetsRequested.connect(lambda: self._show(self.session.calculate_all()))
        self.controls.chartRequested.connect(self.on_chart)
        self.controls.clearRequested.connect(self.on_clear)
        self.controls.exportRequested.connect(lambda: self._show(self.session.export()))

        # start with the weight currently in the spin box
        self._show(self.session.set_weight_kg(float(self.controls.weight.value())))

    def on_dose(self, profile: MedicationProfile):
        self._show(self.session.calculate(profile))

    def on_chart(self, req: ChartRequest):
        status = self.session.chart(req.profile, req.start_kg, req.end_kg, req.increment_kg)
        if status.ok:
            # rows already in history for this range are plotted too
            rows = [e for e in self.session.history.all()
                    if e.medication == req.profile.name and req.start_kg <= e.weight_kg <= req.end_kg]
            self.plot.plot_chart(req.profile.name, rows)
        self._show(status)

    def on_clear(self):
        self.plot.clear()
        self._show(self.session.clear_history())

    def _show(self, status: Status):
        self.history.clear()
        self.history.addItems(self.session.history.summaries())
        self.status.setStyleSheet(f"color: {_STATUS_COLORS[status.severity]}")
        self.status.showMessage(status.message, 8000)
