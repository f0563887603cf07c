import sys

from PyQt5.QtWidgets import QApplication

from apps.BezierCurve.gui.main_window import BezierCurveMainWindow


def main() -> int:
    app = QApplication(sys.argv)
    window = BezierCurveMainWindow()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
