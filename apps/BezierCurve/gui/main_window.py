from __future__ import annotations

from pathlib import Path

from PyQt5.uic import loadUi
from PyQt5.QtWidgets import QDialog, QLabel, QVBoxLayout, QWidget

from apps.BezierCurve.gui.curve_controller import CurveController
from apps.BezierCurve.gui.curve_plot import CurvePlotWidget
from apps.BezierCurve.models.curve_models import CurveParams


class BezierCurveMainWindow:
    def __init__(self, params: CurveParams | None = None) -> None:
        self._dialog: QDialog = loadUi(self._ui_path())
        self._controller: CurveController | None = None
        self._init_curve_view(params)

    @staticmethod
    def _ui_path() -> str:
        return str(Path(__file__).resolve().parent.parent / "ui" / "BezierCurve.ui")

    def _init_curve_view(self, params: CurveParams | None) -> None:
        plot_container = self._dialog.findChild(QWidget, "curvePlotContainer")
        status_label = self._dialog.findChild(QLabel, "curveStatusLabel")
        if plot_container is None or status_label is None:
            raise ValueError("BezierCurve.ui is missing the plot container or status label.")

        plot_layout = plot_container.layout()
        if plot_layout is None:
            plot_layout = QVBoxLayout(plot_container)
            plot_layout.setContentsMargins(0, 0, 0, 0)

        plot_widget = CurvePlotWidget(plot_container)
        plot_layout.addWidget(plot_widget)

        controller = CurveController(self._dialog, plot_widget, status_label)
        controller.apply_defaults(params)
        controller.connect_signals()
        controller.on_any_parameter_changed()
        self._controller = controller

    @property
    def controller(self) -> CurveController | None:
        return self._controller

    @property
    def dialog(self) -> QDialog:
        return self._dialog

    def show(self) -> None:
        self._dialog.show()

    def close(self) -> None:
        self._dialog.close()
