"""
Application Initialization
==========================
This module constructs the Model-View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (CalculatorState).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from velocidadsim.config import VISIBLE_APP_NAME
from velocidadsim.logging_config import setup_logging
from velocidadsim.model.state import CalculatorState
from velocidadsim.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def main() -> None:
    # 1. Setup Logging (Console only; pass log_file="app_debug.log" when debugging)
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    state = CalculatorState()

    # 4. Initialize the Main Window, passing the model (it runs the first calculation)
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
