"""Chart widget for a speed sweep (speed vs. time or speed vs. distance)."""
from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QFileDialog, QMessageBox
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

from velocidadsim.config import REFERENCE_LINE_COLOR
from velocidadsim.model.kinematics import SampledSeries

logger = logging.getLogger(__name__)


class SweepPlotWidget(QWidget):
    """Titled pyqtgraph chart of one SampledSeries with a marker at the current input."""

    def __init__(
        self,
        title: str,
        caption: str,
        color: str,
        filled: bool = False,
        parent: QWidget | None = None
    ) -> None:
        """Initialize the chart.

        Args:
            title: Heading above the chart
            caption: Italic note below the chart
            color: Line colour
            filled: Draw the area under the curve
            parent: Parent widget
        """
        super().__init__(parent)
        self.title = title
        self.color = color
        self.filled = filled
        self.series: Optional[SampledSeries] = None

        layout = QVBoxLayout(self)

        lbl_title = QLabel(f"<b>{title}</b>")
        layout.addWidget(lbl_title)

        self.lbl_subtitle = QLabel("")
        self.lbl_subtitle.setStyleSheet("color: #6b7280; font-size: 9pt;")
        layout.addWidget(self.lbl_subtitle)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=False, y=True, alpha=0.3)
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setMinimumHeight(250)
        layout.addWidget(self.plot_widget)

        lbl_caption = QLabel(caption)
        lbl_caption.setAlignment(Qt.AlignCenter)
        lbl_caption.setStyleSheet("color: #9ca3af; font-size: 9pt; font-style: italic;")
        layout.addWidget(lbl_caption)

    def set_series(self, series: Optional[SampledSeries], subtitle: str = "") -> None:
        """Replace the plotted data. None clears the chart."""
        self.series = series
        self.lbl_subtitle.setText(subtitle)
        self.plot_widget.clear()

        if series is None:
            return

        self.plot_widget.setLabel('bottom', series.x_label, color='black')
        self.plot_widget.setLabel('left', series.y_label, color='black')

        pen = pg.mkPen(color=self.color, width=2)
        if self.filled:
            fill = QColor(self.color)
            fill.setAlpha(80)
            self.plot_widget.plot(series.xs, series.values, pen=pen, fillLevel=0, brush=fill)
        else:
            self.plot_widget.plot(series.xs, series.values, pen=pen)

        ref_line = pg.InfiniteLine(
            pos=series.reference,
            angle=90,
            pen=pg.mkPen(color=REFERENCE_LINE_COLOR, width=1, style=Qt.DashLine),
            label='Current',
            labelOpts={'position': 0.95, 'color': REFERENCE_LINE_COLOR, 'fill': (255, 255, 255, 150)}
        )
        self.plot_widget.addItem(ref_line)

        self.plot_widget.autoRange()

    def export_image(self, default_name: str = "speed_chart.png") -> None:
        """Export the current chart as an image file."""
        if self.series is None:
            QMessageBox.information(self, "Nothing to export", "There is no chart to export.")
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save chart as image",
            default_name,
            "PNG image (*.png);;JPEG image (*.jpg)"
        )

        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plot_widget.plotItem)
            exporter.parameters()['width'] = 1920
            exporter.export(file_path)
            logger.info(f"Chart exported to {file_path}")

        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, "Export error", f"Could not export the chart:\n{str(e)}")
