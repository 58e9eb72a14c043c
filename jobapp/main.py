import sys

from PySide6.QtWidgets import QApplication

from jobapp.core.settings import configure_logging, load_settings
from jobapp.ui.main_windows import MainWindow


def main() -> int:
    configure_logging(load_settings())

    app = QApplication(sys.argv)
    win = MainWindow()
    win.resize(640, 720)
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
