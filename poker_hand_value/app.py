"""Application bootstrap for the hand rating window."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .core.settings import default_settings

LOGGER = logging.getLogger(__name__)


def run(argv: Optional[list[str]] = None) -> int:
    """Run the hand rating window."""

    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=default_settings().log_level)
    try:
        from .ui.qt_app import launch_qt
    except Exception as exc:  # pragma: no cover - Qt not available during tests
        LOGGER.warning("Falling back to Tkinter UI due to PyQt6 load failure")
        LOGGER.debug("PyQt6 import error: %s", exc)
        from .ui.tk_app import launch_tk

        hands = argv[1:3] + ["", ""]
        try:
            return launch_tk(hands[0], hands[1])
        except Exception as tk_exc:  # pragma: no cover - headless CI
            LOGGER.warning("Tkinter fallback unavailable: %s", tk_exc)
            print("Unable to launch a graphical interface in this environment.")
            return 1

    return launch_qt(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
