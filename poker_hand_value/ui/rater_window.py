"""Qt window for rating and comparing two hands."""
from __future__ import annotations

from PyQt6 import QtWidgets

from .summary import summarize
from .widgets import HandInput, ResultLabel


class RaterWindow(QtWidgets.QMainWindow):
    def __init__(self, first: str = "", second: str = "") -> None:
        super().__init__()
        self.setWindowTitle("Poker Hand Value")
        self.resize(520, 260)
        self.view = RaterView(first, second)
        self.setCentralWidget(self.view)
        self.status = self.statusBar()
        self.status.showMessage("Enter one or two hands of five or more cards")


class RaterView(QtWidgets.QWidget):
    def __init__(self, first: str = "", second: str = "") -> None:
        super().__init__()
        self._build_ui()
        self.first_input.setText(first)
        self.second_input.setText(second)
        if first:
            self.on_rate()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        form = QtWidgets.QFormLayout()
        self.first_input = HandInput()
        self.second_input = HandInput("2c 3d 4h 5s 6c")
        form.addRow("First hand", self.first_input)
        form.addRow("Second hand", self.second_input)
        layout.addLayout(form)

        controls = QtWidgets.QHBoxLayout()
        self.rate_btn = QtWidgets.QPushButton("Rate")
        self.rate_btn.clicked.connect(self.on_rate)
        controls.addWidget(self.rate_btn)
        self.clear_btn = QtWidgets.QPushButton("Clear")
        self.clear_btn.clicked.connect(self.on_clear)
        controls.addWidget(self.clear_btn)
        controls.addStretch()
        layout.addLayout(controls)

        self.first_input.returnPressed.connect(self.on_rate)
        self.second_input.returnPressed.connect(self.on_rate)

        self.result_label = ResultLabel()
        layout.addWidget(self.result_label, stretch=1)

    def on_rate(self) -> None:
        try:
            lines = summarize(self.first_input.text(), self.second_input.text())
        except ValueError as exc:
            QtWidgets.QMessageBox.warning(self, "Unable to Rate", str(exc))
            return
        self.result_label.setText("\n".join(lines))

    def on_clear(self) -> None:
        self.first_input.clear()
        self.second_input.clear()
        self.result_label.setText("")


__all__ = ["RaterWindow", "RaterView"]
