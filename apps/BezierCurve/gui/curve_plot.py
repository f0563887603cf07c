from __future__ import annotations

from matplotlib.backends.backend_qt5agg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)
from matplotlib.figure import Figure
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QVBoxLayout, QWidget

from apps.BezierCurve.curve.handles import (
    HandleRole,
    find_handle,
    to_absolute,
    visible_roles,
)
from apps.BezierCurve.models.curve_models import CurveState

ANCHOR_COLOR = "black"
CONTROL_COLOR = "lightgray"


class CurvePlotWidget(QWidget):
    # role, dx, dy in view units
    handleDragged = pyqtSignal(str, float, float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.figure = Figure()
        self.canvas = FigureCanvas(self.figure)
        self.toolbar = NavigationToolbar(self.canvas, self)
        self.axes = self.figure.add_subplot(111)
        self._state: CurveState | None = None
        self._drag_role: HandleRole | None = None
        self._grab_offset: tuple[float, float] | None = None

        layout = QVBoxLayout(self)
        layout.addWidget(self.toolbar)
        layout.addWidget(self.canvas)
        layout.setContentsMargins(0, 0, 0, 0)

        self.canvas.mpl_connect("button_press_event", self._on_press)
        self.canvas.mpl_connect("motion_notify_event", self._on_motion)
        self.canvas.mpl_connect("button_release_event", self._on_release)

    def plot_curve(self, state: CurveState) -> None:
        self._state = state
        params = state.params
        width, height = params.canvas_width, params.canvas_height

        self.axes.clear()
        for line in state.construction_lines:
            self.axes.plot(line[:, 0], line[:, 1], color=CONTROL_COLOR, linewidth=1.0)

        polyline = state.polyline
        self.axes.plot(polyline[:, 0], polyline[:, 1], color="black", linewidth=3.0)

        for role in sorted(visible_roles(params.degree), key=lambda r: r.value):
            center = to_absolute(params.layout.position(role), width, height)
            color = ANCHOR_COLOR if role.value.startswith("anchor") else CONTROL_COLOR
            self.axes.scatter([center[0]], [center[1]], s=120, color=color, zorder=3)

        self.axes.set_xlim(0.0, width)
        self.axes.set_ylim(height, 0.0)
        self.axes.set_aspect(1.0, adjustable="box")
        self.axes.grid(True, linestyle=":", alpha=0.3)
        self.canvas.draw_idle()

    def _interactive(self, event) -> bool:
        if self._state is None or event.inaxes is not self.axes:
            return False
        if event.xdata is None or event.ydata is None:
            return False
        return self.toolbar.mode == ""

    def _handle_center(self, role: HandleRole):
        params = self._state.params
        return to_absolute(
            params.layout.position(role),
            params.canvas_width,
            params.canvas_height,
        )

    def _on_press(self, event) -> None:
        if not self._interactive(event):
            return
        params = self._state.params
        role = find_handle(
            params.layout,
            params.degree,
            (event.xdata, event.ydata),
            params.canvas_width,
            params.canvas_height,
        )
        if role is None:
            return
        center = self._handle_center(role)
        self._drag_role = role
        self._grab_offset = (event.xdata - center[0], event.ydata - center[1])

    def _on_motion(self, event) -> None:
        if self._drag_role is None or not self._interactive(event):
            return
        # Measured from the handle centre, which may be clamped at an edge.
        center = self._handle_center(self._drag_role)
        offset_x, offset_y = self._grab_offset
        dx = float(event.xdata - offset_x - center[0])
        dy = float(event.ydata - offset_y - center[1])
        if dx == 0.0 and dy == 0.0:
            return
        self.handleDragged.emit(self._drag_role.value, dx, dy)

    def _on_release(self, event) -> None:
        self._drag_role = None
        self._grab_offset = None
