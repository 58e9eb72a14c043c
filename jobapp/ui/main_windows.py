# jobapp/ui/main_windows.py
from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow,
    QMenuBar,
    QScrollArea,
    QWidget,
)

from jobapp.core.form_store import FormStore
from jobapp.core.rules.application_rules import initial_application_values, validate_application
from jobapp.ui.job_application_form import JobApplicationForm


class MainWindow(QMainWindow):
    """
    Main window:
      - Central: job application form (scrollable)
      - Menu: File -> New Application / Exit

    Owns the FormStore for this session and hands it to the form.
    """

    def __init__(self, store: Optional[FormStore] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Job Application")

        self.store = store or FormStore(initial_application_values(), validate_application)

        self.form = JobApplicationForm(self.store)
        self.form.submitted.connect(
            lambda: self.statusBar().showMessage("Application submitted.", 5000)
        )

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.form)
        self.setCentralWidget(scroll)

        self._build_menu()

    # ----------------------------------------------------------------------------------
    # Menu
    # ----------------------------------------------------------------------------------
    def _build_menu(self) -> None:
        menubar = QMenuBar(self)
        self.setMenuBar(menubar)

        menu_file = menubar.addMenu("File")

        self.act_new = QAction("New Application", self)
        self.act_new.triggered.connect(lambda _checked=False: self.store.reset())
        menu_file.addAction(self.act_new)

        menu_file.addSeparator()

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)
        menu_file.addAction(self.act_exit)
