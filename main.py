"""Entry point for the Photo Gallery desktop app."""

import logging
import sys
from PySide6.QtWidgets import QApplication

import storage
from window import MainWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main():
    app = QApplication(sys.argv)
    app.setApplicationName("Photo Gallery")
    app.setStyle("Fusion")

    settings = storage.load()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    # Anything Qt did not consume is a photo name to start the gallery with
    names = [arg.strip() for arg in app.arguments()[1:] if arg.strip()]
    window = MainWindow(settings, names)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
