# src/doseviz/ui/plots.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg

from doseengine.types import DoseEntry


class ChartPlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Volume to deliver vs weight, one curve per medication
        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("left", "Volume", units="mL")
        self.plot_widget.setLabel("bottom", "Weight", units="kg")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

        self.curves = {}  # store references for updates

    def plot_chart(self, name: str, entries: list[DoseEntry]):
        """Replace the curve for `name` with the given chart rows."""
        if name in self.curves:
            self.plot_widget.removeItem(self.curves.pop(name))
        if not entries:
            return
        rows = sorted(entries, key=lambda e: e.weight_kg)
        curve = self.plot_widget.plot(
            [e.weight_kg for e in rows], [e.volume_ml for e in rows],
            pen=pg.mkPen(width=2),
            symbol="o", symbolSize=5,
            name=name,
        )
        self.curves[name] = curve

    def clear(self):
        self.plot_widget.clear()
        self.curves = {}
