"""
Result Card
Shows the computed speed, its km/h equivalent and the inputs it came from.
"""
from typing import Optional

from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QWidget
from PySide6.QtCore import Qt

from velocidadsim.config import SPEED_DECIMALS
from velocidadsim.model.kinematics import CalculationResult
from velocidadsim.utils import format_quantity, to_fixed

PLACEHOLDER = "--"


class ResultCard(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        self.setStyleSheet("ResultCard { background: white; border: 1px solid #e5e7eb; border-radius: 10px; }")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)

        # --- LEFT: Speed ---
        left = QVBoxLayout()
        lbl_title = QLabel("CALCULATED RESULT")
        lbl_title.setStyleSheet("color: #6b7280; font-weight: bold; letter-spacing: 1px;")
        left.addWidget(lbl_title)

        self.lbl_speed = QLabel()
        self.lbl_speed.setTextFormat(Qt.RichText)
        left.addWidget(self.lbl_speed)

        self.lbl_kmh = QLabel()
        self.lbl_kmh.setStyleSheet("color: #6b7280;")
        left.addWidget(self.lbl_kmh)
        layout.addLayout(left)

        layout.addStretch()

        # --- RIGHT: Inputs indicator ---
        self.indicator = QWidget()
        ind_layout = QHBoxLayout(self.indicator)
        self.lbl_distance = QLabel()
        self.lbl_time = QLabel()
        ind_layout.addWidget(self.lbl_distance)
        arrow = QLabel("→")
        arrow.setStyleSheet("color: #d1d5db; font-size: 16pt;")
        ind_layout.addWidget(arrow)
        ind_layout.addWidget(self.lbl_time)
        layout.addWidget(self.indicator)

        self.set_result(None)

    def set_result(self, result: Optional[CalculationResult]) -> None:
        speed_text = PLACEHOLDER if result is None else to_fixed(result.speed, SPEED_DECIMALS)
        self.lbl_speed.setText(
            f"<span style='font-size: 32pt; font-weight: bold;'>{speed_text}</span>"
            f"<span style='font-size: 16pt; color: #9ca3af;'> m/s</span>"
        )

        if result is None:
            self.lbl_kmh.setVisible(False)
            self.indicator.setVisible(False)
            return

        self.lbl_kmh.setText(f"Equivalent to <b>{to_fixed(result.speed_kmh, SPEED_DECIMALS)} km/h</b>")
        self.lbl_kmh.setVisible(True)
        self.lbl_distance.setText(
            f"<span style='color: #9ca3af;'>Distance</span><br><b>{format_quantity(result.distance)} m</b>"
        )
        self.lbl_time.setText(
            f"<span style='color: #9ca3af;'>Time</span><br><b>{format_quantity(result.time)} s</b>"
        )
        self.indicator.setVisible(True)
