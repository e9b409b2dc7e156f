"""
Input Variables Control Panel
"""
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QLineEdit, QSlider, QGroupBox, QFrame
)
from PySide6.QtCore import Signal, Qt

from velocidadsim.config import DISTANCE_SLIDER_RANGE, TIME_SLIDER_RANGE
from velocidadsim.model.kinematics import parse_number
from velocidadsim.model.state import CalculatorState


class QuantityInput(QWidget):
    """Text field with a unit badge and a slider that writes into the field."""

    def __init__(self, title: str, unit: str, slider_range: tuple[int, int], placeholder: str) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header = QHBoxLayout()
        header.addWidget(QLabel(f"<b>{title}</b>"))
        header.addStretch()
        badge = QLabel(unit)
        badge.setStyleSheet("color: #6b7280; background: #f3f4f6; border-radius: 8px; padding: 1px 8px;")
        header.addWidget(badge)
        layout.addLayout(header)

        self.edit = QLineEdit()
        self.edit.setPlaceholderText(placeholder)
        self.edit.setMinimumHeight(32)
        layout.addWidget(self.edit)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(*slider_range)
        layout.addWidget(self.slider)

        self.slider.valueChanged.connect(self._on_slider_moved)
        self.edit.textChanged.connect(self._sync_slider)

    # --- PROPERTIES ---

    @property
    def text(self) -> str:
        return self.edit.text()

    @text.setter
    def text(self, value: str) -> None:
        self.edit.setText(value)

    # --- SLOTS ---

    def _on_slider_moved(self, value: int) -> None:
        self.edit.setText(str(value))

    def _sync_slider(self, text: str) -> None:
        # Out-of-range values are clamped by the slider itself; non-numeric text leaves it at the minimum
        value = parse_number(text)
        position = self.slider.minimum() if value is None else int(round(min(max(value, -1e9), 1e9)))
        self.slider.blockSignals(True)
        self.slider.setValue(position)
        self.slider.blockSignals(False)


class InputControlPanel(QWidget):
    # Signal: (distance_text, time_text)
    calculate_requested = Signal(str, str)

    def __init__(self, state: CalculatorState) -> None:
        super().__init__()
        self.state = state

        layout = QVBoxLayout(self)

        # --- Inputs Group ---
        grp = QGroupBox("Input Variables")
        grp_layout = QVBoxLayout(grp)

        self.distance_input = QuantityInput("Distance (d)", "meters (m)", DISTANCE_SLIDER_RANGE, "e.g. 100")
        grp_layout.addWidget(self.distance_input)

        self.time_input = QuantityInput("Time (t)", "seconds (s)", TIME_SLIDER_RANGE, "e.g. 10")
        grp_layout.addWidget(self.time_input)

        # --- Error Box (hidden until validation fails) ---
        self.error_box = QFrame()
        self.error_box.setStyleSheet(
            "QFrame { background: #fef2f2; border-radius: 6px; }"
            "QLabel { color: #b91c1c; background: transparent; }"
        )
        error_layout = QVBoxLayout(self.error_box)
        error_layout.addWidget(QLabel("<b>Validation Error</b>"))
        self.lbl_error = QLabel("")
        self.lbl_error.setWordWrap(True)
        error_layout.addWidget(self.lbl_error)
        self.error_box.setVisible(False)
        grp_layout.addWidget(self.error_box)

        # --- Actions ---
        self.btn_calculate = QPushButton("Calculate Speed")
        self.btn_calculate.setMinimumHeight(40)
        self.btn_calculate.clicked.connect(self.on_calculate_clicked)
        self.distance_input.edit.returnPressed.connect(self.on_calculate_clicked)
        self.time_input.edit.returnPressed.connect(self.on_calculate_clicked)
        grp_layout.addWidget(self.btn_calculate)

        layout.addWidget(grp)

        # --- Formula Card ---
        grp_formula = QGroupBox("Formula Used")
        formula_layout = QVBoxLayout(grp_formula)
        lbl_formula = QLabel("v = d / t")
        lbl_formula.setAlignment(Qt.AlignCenter)
        lbl_formula.setStyleSheet(
            "font-family: monospace; font-size: 20pt; background: white;"
            "border: 1px solid #bfdbfe; border-radius: 6px; padding: 10px;"
        )
        formula_layout.addWidget(lbl_formula)
        lbl_caption = QLabel(
            "Speed is directly proportional to distance and inversely proportional to time."
        )
        lbl_caption.setWordWrap(True)
        lbl_caption.setAlignment(Qt.AlignCenter)
        lbl_caption.setStyleSheet("color: #1d4ed8; font-size: 9pt;")
        formula_layout.addWidget(lbl_caption)
        layout.addWidget(grp_formula)

        layout.addStretch()

        self.load_from_state()

    def load_from_state(self) -> None:
        """Push the state's texts and error into the widgets."""
        self.distance_input.text = self.state.distance_text
        self.time_input.text = self.state.time_text
        self.show_error(self.state.error_message)

    def show_error(self, message: Optional[str]) -> None:
        self.lbl_error.setText(message or "")
        self.error_box.setVisible(message is not None)

    def on_calculate_clicked(self) -> None:
        self.calculate_requested.emit(self.distance_input.text, self.time_input.text)
