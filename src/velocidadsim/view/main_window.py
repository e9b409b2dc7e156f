"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the input panel and the
results area (result card + two charts).

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the calculate trigger and the menu actions to the
   CalculatorState and pushes the new outputs into every widget.
"""
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QLabel, QScrollArea
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from velocidadsim.config import (
    VISIBLE_APP_NAME, TIME_CHART_COLOR, DISTANCE_CHART_COLOR
)
from velocidadsim.model.state import CalculatorState
from velocidadsim.utils import format_quantity
from velocidadsim.view.panels.input_panel import InputControlPanel
from velocidadsim.view.panels.result_panel import ResultCard
from velocidadsim.view.widgets.sweep_plot import SweepPlotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: CalculatorState) -> None:
        super().__init__()
        self.state: CalculatorState = state

        self.setWindowTitle(f"{VISIBLE_APP_NAME} - Physics Simulator")
        self.resize(1300, 850)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(16, 12, 16, 12)

        # --- 1. HEADER ---
        lbl_heading = QLabel("<h2>Speed Calculation</h2>")
        main_layout.addWidget(lbl_heading)
        lbl_intro = QLabel(
            "Interactive tool to compute speed (<code>v = d / t</code>) and visualize "
            "how the fundamental kinematic variables behave."
        )
        lbl_intro.setWordWrap(True)
        lbl_intro.setStyleSheet("color: #4b5563;")
        main_layout.addWidget(lbl_intro)

        # --- 2. SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter, 1)

        # --- LEFT SIDE: Inputs ---
        self.input_panel = InputControlPanel(self.state)
        splitter.addWidget(self.input_panel)

        # --- RIGHT SIDE: Result + Charts ---
        results_widget = QWidget()
        results_layout = QVBoxLayout(results_widget)

        self.result_card = ResultCard()
        results_layout.addWidget(self.result_card)

        charts_layout = QHBoxLayout()
        self.time_chart = SweepPlotWidget(
            "Impact of Time on Speed",
            "The longer the time, the lower the speed (inverse relationship).",
            TIME_CHART_COLOR,
            filled=True,
        )
        self.distance_chart = SweepPlotWidget(
            "Impact of Distance on Speed",
            "The longer the distance, the higher the speed (direct relationship).",
            DISTANCE_CHART_COLOR,
        )
        charts_layout.addWidget(self.time_chart)
        charts_layout.addWidget(self.distance_chart)
        results_layout.addLayout(charts_layout)
        results_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(results_widget)
        splitter.addWidget(scroll)

        # Initial proportions (1 part inputs : 2 parts results)
        splitter.setSizes([400, 900])

        # --- SIGNAL CONNECTIONS ---
        self.input_panel.calculate_requested.connect(self.on_calculate_requested)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial calculation with the default inputs
        self.state.calculate()
        self.refresh()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset to Defaults", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_export_time = QAction("Export Time Chart...", self)
        self.act_export_time.triggered.connect(
            lambda: self.time_chart.export_image("speed_vs_time.png")
        )

        self.act_export_distance = QAction("Export Distance Chart...", self)
        self.act_export_distance.triggered.connect(
            lambda: self.distance_chart.export_image("speed_vs_distance.png")
        )

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_export_time)
        file_menu.addAction(self.act_export_distance)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---
    def refresh(self) -> None:
        """Push the current state into every widget."""
        result = self.state.result
        self.input_panel.show_error(self.state.error_message)
        self.result_card.set_result(result)

        distance = format_quantity(result.distance) if result else "0"
        time = format_quantity(result.time) if result else "0"
        self.time_chart.set_series(
            self.state.time_series, f"Holding distance constant at {distance} m"
        )
        self.distance_chart.set_series(
            self.state.distance_series, f"Holding time constant at {time} s"
        )

        has_charts = self.state.is_valid
        self.act_export_time.setEnabled(has_charts)
        self.act_export_distance.setEnabled(has_charts)

    # --- SLOTS ---
    def on_calculate_requested(self, distance_text: str, time_text: str) -> None:
        logger.debug(f"Calculate requested: d={distance_text!r}, t={time_text!r}")
        self.state.set_inputs(distance_text, time_text)
        self.state.calculate()
        self.refresh()

    def on_reset(self) -> None:
        self.state.reset()
        self.input_panel.load_from_state()
        self.refresh()
