"""Allow running TalkTimer as a module: python -m talktimer."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import TalkTimerApp
from .settings import load_settings


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("TALKTIMER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    print("TalkTimer ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("TalkTimer")
    app.setOrganizationName("TalkTimer")

    window = TalkTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
