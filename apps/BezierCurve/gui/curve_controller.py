from __future__ import annotations

import logging
from dataclasses import replace

from PyQt5.QtCore import QObject
from PyQt5.QtWidgets import QComboBox, QLabel, QSlider, QWidget

from apps.BezierCurve.curve.bezier import BezierDegree
from apps.BezierCurve.curve.defaults import (
    MAX_SEGMENT_COUNT,
    MIN_SEGMENT_COUNT,
)
from apps.BezierCurve.curve.handles import drag_handle
from apps.BezierCurve.gui.curve_plot import CurvePlotWidget
from apps.BezierCurve.models.curve_models import CurveParams, CurveState, evaluate_curve

logger = logging.getLogger(__name__)

# Combo box rows, top to bottom.
DEGREE_ORDER = (BezierDegree.LINEAR, BezierDegree.QUADRATIC, BezierDegree.CUBIC)


class CurveController(QObject):
    def __init__(
        self,
        dialog: QWidget,
        plot_widget: CurvePlotWidget,
        status_label: QLabel,
    ) -> None:
        super().__init__(dialog)
        self._dialog = dialog
        self._plot_widget = plot_widget
        self._status_label = status_label
        self._params = CurveParams()
        self._state: CurveState | None = None

        self._slider: QSlider = self._get_widget(QSlider, "slider_segments")
        self._segments_label: QLabel = self._get_widget(QLabel, "label_segments")
        self._degree_combo: QComboBox = self._get_widget(QComboBox, "combo_degree")

    def _get_widget(self, klass: type, name: str):
        widget = self._dialog.findChild(klass, name)
        if widget is None:
            raise ValueError(f"Missing widget '{name}' in UI.")
        return widget

    def apply_defaults(self, params: CurveParams | None = None) -> None:
        self._params = params or CurveParams()
        self._slider.setRange(MIN_SEGMENT_COUNT, MAX_SEGMENT_COUNT)
        self._slider.setValue(self._params.segment_count)
        self._segments_label.setText(str(self._params.segment_count))
        self._degree_combo.setCurrentIndex(DEGREE_ORDER.index(self._params.degree))

    def connect_signals(self) -> None:
        self._slider.valueChanged.connect(self.on_any_parameter_changed)
        self._degree_combo.currentIndexChanged.connect(self.on_any_parameter_changed)
        self._plot_widget.handleDragged.connect(self.on_handle_dragged)

    def _selected_degree(self) -> BezierDegree:
        row = self._degree_combo.currentIndex()
        if 0 <= row < len(DEGREE_ORDER):
            return DEGREE_ORDER[row]
        return BezierDegree.CUBIC

    def _read_params(self) -> CurveParams:
        return replace(
            self._params,
            degree=self._selected_degree(),
            segment_count=self._slider.value(),
        )

    def on_any_parameter_changed(self, *_args) -> None:
        self._segments_label.setText(str(self._slider.value()))
        self._refresh(self._read_params())

    def on_handle_dragged(self, role: str, dx: float, dy: float) -> None:
        params = self._read_params()
        try:
            layout = drag_handle(
                params.layout,
                role,
                (dx, dy),
                params.canvas_width,
                params.canvas_height,
            )
        except ValueError as exc:
            self._status_label.setText(f"Curve status: {exc}")
            return
        self._refresh(replace(params, layout=layout))

    def _refresh(self, params: CurveParams) -> None:
        try:
            state = evaluate_curve(params)
        except ValueError as exc:
            logger.warning("Curve evaluation rejected: %s", exc)
            if self._state is not None:
                self._plot_widget.plot_curve(self._state)
            self._status_label.setText(f"Curve status: {exc}")
            return

        self._params = params
        self._state = state
        self._plot_widget.plot_curve(state)
        self._status_label.setText(
            f"Curve status: {params.degree.name.lower()}, {params.segment_count} segments"
        )

    @property
    def params(self) -> CurveParams:
        return self._params

    @property
    def state(self) -> CurveState | None:
        return self._state
