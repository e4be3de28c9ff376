# src/doseviz/ui/app.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from doseengine.config import load_config
from doseengine.session import DoseSession
from .main_window import MainWindow


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = MainWindow(DoseSession(load_config()))
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
