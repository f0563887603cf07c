import os
from pathlib import Path
from types import SimpleNamespace

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from matplotlib.backend_bases import MouseEvent
from PyQt5.QtWidgets import QApplication, QComboBox, QLabel, QSlider

from apps.BezierCurve.curve.bezier import BezierDegree
from apps.BezierCurve.gui.main_window import BezierCurveMainWindow


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(app):
    window = BezierCurveMainWindow()
    yield window
    window.close()


def test_main_window_builds_default_curve(window):
    assert Path(window._ui_path()).exists()

    state = window.controller.state
    assert state is not None
    assert state.params.degree is BezierDegree.CUBIC
    assert state.polyline.shape == (81, 2)


def test_slider_changes_segment_count(window):
    slider = window.dialog.findChild(QSlider, "slider_segments")
    label = window.dialog.findChild(QLabel, "label_segments")

    slider.setValue(12)

    assert label.text() == "12"
    assert window.controller.state.polyline.shape == (13, 2)


def test_degree_selector_changes_curve(window):
    combo = window.dialog.findChild(QComboBox, "combo_degree")

    combo.setCurrentIndex(0)

    state = window.controller.state
    assert state.params.degree is BezierDegree.LINEAR
    assert state.control_points.shape == (2, 2)
    assert state.construction_lines == []


def test_handle_drag_moves_anchor(window):
    before = window.controller.state.polyline[0].copy()

    window.controller.on_handle_dragged("anchor1", 20.0, -15.0)

    after = window.controller.state.polyline[0]
    assert after[0] == pytest.approx(before[0] + 20.0)
    assert after[1] == pytest.approx(before[1] - 15.0)
    assert window.controller.params.layout.anchor1 == pytest.approx((0.25, 0.65))


def _mouse(plot, name, x, y):
    plot.canvas.draw()
    px, py = plot.axes.transData.transform((x, y))
    event = MouseEvent(name, plot.canvas, px, py, button=1)
    plot.canvas.callbacks.process(name, event)


def _record_drags(plot):
    received = []
    plot.handleDragged.connect(lambda role, dx, dy: received.append((role, dx, dy)))
    return received


def test_mouse_drag_moves_anchor(window):
    plot = window.controller._plot_widget
    received = _record_drags(plot)

    _mouse(plot, "button_press_event", 80.0, 210.0)
    _mouse(plot, "motion_notify_event", 100.0, 200.0)
    _mouse(plot, "button_release_event", 100.0, 200.0)

    assert [role for role, _, _ in received] == ["anchor1"]
    anchor1 = window.controller.params.layout.anchor1
    assert anchor1 == pytest.approx((0.25, 200.0 / 300.0), abs=1e-6)

    _mouse(plot, "motion_notify_event", 150.0, 150.0)
    assert len(received) == 1


def test_mouse_drag_keeps_grab_offset(window):
    plot = window.controller._plot_widget

    _mouse(plot, "button_press_event", 85.0, 212.0)
    _mouse(plot, "motion_notify_event", 150.0, 100.0)
    _mouse(plot, "motion_notify_event", 160.0, 120.0)
    _mouse(plot, "button_release_event", 160.0, 120.0)

    anchor1 = window.controller.params.layout.anchor1
    assert anchor1 == pytest.approx((0.3875, 118.0 / 300.0), abs=1e-6)


def test_press_on_empty_canvas_emits_nothing(window):
    plot = window.controller._plot_widget
    received = _record_drags(plot)
    layout = window.controller.params.layout

    _mouse(plot, "button_press_event", 200.0, 250.0)
    _mouse(plot, "motion_notify_event", 220.0, 260.0)
    _mouse(plot, "button_release_event", 220.0, 260.0)

    assert received == []
    assert window.controller.params.layout == layout


def test_pan_mode_disables_handle_drag(window):
    plot = window.controller._plot_widget
    received = _record_drags(plot)

    plot.toolbar.pan()
    try:
        _mouse(plot, "button_press_event", 80.0, 210.0)
        _mouse(plot, "motion_notify_event", 100.0, 200.0)
        _mouse(plot, "button_release_event", 100.0, 200.0)
    finally:
        plot.toolbar.pan()

    assert received == []


def test_clamped_handle_follows_cursor_back(window):
    plot = window.controller._plot_widget

    _mouse(plot, "button_press_event", 80.0, 210.0)
    plot._on_motion(SimpleNamespace(inaxes=plot.axes, xdata=-50.0, ydata=210.0))
    assert window.controller.params.layout.anchor1[0] == 0.0

    plot._on_motion(SimpleNamespace(inaxes=plot.axes, xdata=30.0, ydata=210.0))
    plot._on_release(None)

    assert window.controller.params.layout.anchor1 == pytest.approx((0.075, 0.7), abs=1e-6)
