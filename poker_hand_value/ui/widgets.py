"""Reusable Qt widgets for the rating window."""
from __future__ import annotations

from PyQt6 import QtCore, QtWidgets


class HandInput(QtWidgets.QLineEdit):
    """Line edit for a hand in shorthand notation."""

    def __init__(self, placeholder: str = "As Ad Ac Js Jd", parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setPlaceholderText(placeholder)
        self.setMinimumWidth(240)
        self.setStyleSheet("padding: 6px; font-family: monospace; font-weight: bold;")


class ResultLabel(QtWidgets.QLabel):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("", parent)
        self.setAlignment(QtCore.Qt.AlignmentFlag.AlignLeft | QtCore.Qt.AlignmentFlag.AlignTop)
        self.setWordWrap(True)
        self.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)


__all__ = ["HandInput", "ResultLabel"]
