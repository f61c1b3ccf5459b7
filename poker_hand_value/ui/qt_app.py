"""PyQt6 application bootstrap."""
from __future__ import annotations

from typing import Sequence

from PyQt6 import QtWidgets

from .rater_window import RaterWindow


def launch_qt(argv: Sequence[str]) -> int:
    app = QtWidgets.QApplication(list(argv))
    # Hands may be passed on the command line: ``poker-hand-value "As Ad Ac Js Jd" "2c 3d 4h 5s 6c"``.
    hands = list(argv[1:3]) + ["", ""]
    window = RaterWindow(hands[0], hands[1])
    window.show()
    return app.exec()


__all__ = ["launch_qt"]
