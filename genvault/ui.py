"""
User interface for the GenVault client.

The window binds its widgets to a VaultViewModel. Remote operations run on
QThread workers and report back through signals, so the event loop never
blocks on the network.
"""

import logging
from typing import List
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QLineEdit, QPushButton, QSpinBox, QTableWidget, QTableWidgetItem,
    QHeaderView, QAction, QApplication
)
from PyQt5.QtCore import Qt, QTimer, pyqtSignal, QThread

from .models import VaultEntry
from .view_model import VaultViewModel, Result
from . import config

logger = logging.getLogger(__name__)


class RefreshWorker(QThread):
    """Worker thread for fetching the entry list."""

    finished = pyqtSignal(object)

    def __init__(self, view_model: VaultViewModel, user_id: str):
        super().__init__()
        self.view_model = view_model
        self.user_id = user_id

    def run(self):
        self.finished.emit(self.view_model.refresh(self.user_id))


class SaveWorker(QThread):
    """Worker thread for saving the draft."""

    finished = pyqtSignal(object)

    def __init__(self, view_model: VaultViewModel, user_id: str):
        super().__init__()
        self.view_model = view_model
        self.user_id = user_id

    def run(self):
        self.finished.emit(self.view_model.save(self.user_id))


class GenerateWorker(QThread):
    """Worker thread for the remote password generator."""

    finished = pyqtSignal(object)

    def __init__(self, view_model: VaultViewModel):
        super().__init__()
        self.view_model = view_model

    def run(self):
        self.finished.emit(self.view_model.generate_password())


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, view_model: VaultViewModel, user_id: str):
        super().__init__()
        self.view_model = view_model
        self.user_id = user_id
        # Workers must outlive their run(); finished ones are pruned
        self._workers: List[QThread] = []
        self.clipboard_timer = QTimer()
        self.clipboard_timer.setSingleShot(True)
        self.clipboard_timer.timeout.connect(self.clear_clipboard)
        self.init_ui()
        self.refresh_entries()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(f"{config.APP_TITLE_PREFIX} - {self.user_id}")
        self.setGeometry(100, 100, 900, 600)

        self.create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        central_widget.setLayout(layout)

        # Status message (save outcome)
        self.message_label = QLabel("")
        self.message_label.setVisible(False)
        layout.addWidget(self.message_label)

        # Entry form
        form_group = QGroupBox("New Entry")
        form_layout = QFormLayout()

        self.site_input = QLineEdit()
        self.site_input.setPlaceholderText("Site Name")
        self.site_input.textEdited.connect(lambda text: self.view_model.update_draft_field('siteName', text))
        form_layout.addRow("Site Name:", self.site_input)

        self.link_input = QLineEdit()
        self.link_input.setPlaceholderText("URL")
        self.link_input.textEdited.connect(lambda text: self.view_model.update_draft_field('link', text))
        form_layout.addRow("URL:", self.link_input)

        password_layout = QHBoxLayout()
        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.textEdited.connect(lambda text: self.view_model.update_draft_field('password', text))
        password_layout.addWidget(self.password_input)

        self.show_password_button = QPushButton("Show")
        self.show_password_button.setCheckable(True)
        self.show_password_button.toggled.connect(self.toggle_draft_password_visibility)
        password_layout.addWidget(self.show_password_button)
        form_layout.addRow("Password:", password_layout)

        form_group.setLayout(form_layout)
        layout.addWidget(form_group)

        # Generator options and actions
        options_layout = QHBoxLayout()
        self.option_spins = {}
        for name in ("letters", "numbers", "symbols"):
            options_layout.addWidget(QLabel(f"{name.capitalize()}:"))
            spin = QSpinBox()
            spin.setRange(config.GENERATOR_SPIN_MIN, config.GENERATOR_SPIN_MAX)
            spin.setValue(getattr(self.view_model.options, name))
            spin.valueChanged.connect(lambda value, n=name: self.view_model.set_option(n, value))
            options_layout.addWidget(spin)
            self.option_spins[name] = spin

        self.generate_button = QPushButton("Generate Password")
        self.generate_button.clicked.connect(self.generate_password)
        options_layout.addWidget(self.generate_button)

        # No in-flight guard: repeated clicks send repeated saves
        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save_entry)
        options_layout.addWidget(self.save_button)
        options_layout.addStretch()
        layout.addLayout(options_layout)

        # Search
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search Site")
        self.search_input.textChanged.connect(self.filter_entries)
        layout.addWidget(self.search_input)

        # Entries table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Site", "URL", "Password", "Actions"])
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        self.table.setColumnWidth(0, 200)
        self.table.setColumnWidth(2, 180)
        layout.addWidget(self.table)

        self.count_label = QLabel("Total Passwords: 0")
        self.count_label.setStyleSheet("padding-right: 10px;")
        self.statusBar().addPermanentWidget(self.count_label)

    def create_menu_bar(self):
        """Create the menu bar."""
        menubar = self.menuBar()

        view_menu = menubar.addMenu("View")

        refresh_action = QAction("Refresh", self)
        refresh_action.setShortcut("F5")
        refresh_action.triggered.connect(self.refresh_entries)
        view_menu.addAction(refresh_action)

        self.show_passwords_action = QAction("Show Passwords", self)
        self.show_passwords_action.setCheckable(True)
        self.show_passwords_action.toggled.connect(self.render_entries)
        view_menu.addAction(self.show_passwords_action)

        view_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        view_menu.addAction(exit_action)

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    def _start_worker(self, worker: QThread, on_finished):
        self._workers = [w for w in self._workers if w.isRunning()]
        worker.finished.connect(on_finished)
        self._workers.append(worker)
        worker.start()

    def refresh_entries(self):
        """Fetch the entry list in the background."""
        self.statusBar().showMessage("Loading entries...")
        self._start_worker(RefreshWorker(self.view_model, self.user_id), self._handle_refresh_finished)

    def _handle_refresh_finished(self, result: Result):
        if result.stale:
            return
        if result.ok:
            self.statusBar().clearMessage()
            self.render_entries()
        else:
            self.statusBar().showMessage(config.STATUS_REFRESH_FAILURE, config.STATUS_BAR_TIMEOUT_MS)

    def save_entry(self):
        """Save the draft in the background."""
        self._start_worker(SaveWorker(self.view_model, self.user_id), self._handle_save_finished)

    def _handle_save_finished(self, result: Result):
        self.show_status_message()
        if not result.ok:
            return
        self.sync_form_from_draft()
        refresh_result = result.value
        if refresh_result.ok and not refresh_result.stale:
            self.render_entries()
        elif not refresh_result.ok:
            self.statusBar().showMessage(config.STATUS_REFRESH_FAILURE, config.STATUS_BAR_TIMEOUT_MS)

    def generate_password(self):
        """Request a generated password in the background."""
        self._start_worker(GenerateWorker(self.view_model), self._handle_generate_finished)

    def _handle_generate_finished(self, result: Result):
        if not result.ok:
            self.statusBar().showMessage(config.STATUS_GENERATE_FAILURE, config.STATUS_BAR_TIMEOUT_MS)
            return
        if not result.stale:
            self.password_input.setText(self.view_model.draft.password)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def show_status_message(self):
        message = self.view_model.status_message
        if message == config.STATUS_SAVE_SUCCESS:
            self.message_label.setStyleSheet("color: green;")
        else:
            self.message_label.setStyleSheet("color: red;")
        self.message_label.setText(message)
        self.message_label.setVisible(bool(message))

    def sync_form_from_draft(self):
        """Copy the draft back into the form fields."""
        draft = self.view_model.draft
        self.site_input.setText(draft.site_name)
        self.link_input.setText(draft.link)
        self.password_input.setText(draft.password)

    def toggle_draft_password_visibility(self, checked: bool):
        if checked:
            self.password_input.setEchoMode(QLineEdit.Normal)
            self.show_password_button.setText("Hide")
        else:
            self.password_input.setEchoMode(QLineEdit.Password)
            self.show_password_button.setText("Show")

    def filter_entries(self, text: str):
        self.view_model.set_search_term(text)
        self.render_entries()

    def render_entries(self):
        """Rebuild the table from the view model's filtered entries."""
        self.table.setRowCount(0)
        show_passwords = self.show_passwords_action.isChecked()
        for entry in self.view_model.filtered_entries():
            self.add_entry_to_table(entry, show_passwords)
        self.count_label.setText(f"Total Passwords: {len(self.view_model.entries)}")

    def add_entry_to_table(self, entry: VaultEntry, show_password: bool):
        row = self.table.rowCount()
        self.table.insertRow(row)

        site_item = QTableWidgetItem(entry.site_name)
        site_item.setData(Qt.UserRole, entry.id)
        self.table.setItem(row, 0, site_item)
        self.table.setItem(row, 1, QTableWidgetItem(entry.link))
        password_text = entry.password if show_password else config.TABLE_PASSWORD_HIDDEN_TEXT
        self.table.setItem(row, 2, QTableWidgetItem(password_text))

        copy_pass_btn = QPushButton("🔑")
        copy_pass_btn.setToolTip("Copy password")
        copy_pass_btn.setMaximumWidth(30)
        copy_pass_btn.clicked.connect(lambda: self.copy_password(entry))
        self.table.setCellWidget(row, 3, copy_pass_btn)

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy_password(self, entry: VaultEntry):
        """Copy password to clipboard with auto-clear."""
        QApplication.clipboard().setText(entry.password)
        self.clipboard_timer.start(config.CLIPBOARD_CLEAR_TIMEOUT)
        self.statusBar().showMessage(
            f"Password copied to clipboard (auto-clear in {config.CLIPBOARD_CLEAR_TIMEOUT_SECONDS}s)", 2000
        )

    def clear_clipboard(self):
        QApplication.clipboard().clear()
        self.statusBar().showMessage("Clipboard cleared", 2000)

    def closeEvent(self, event):
        """Handle window close event."""
        self.clipboard_timer.stop()
        clipboard = QApplication.clipboard()
        if clipboard.text():
            clipboard.clear()
        # In-flight requests are not cancelled; wait for them to return
        for worker in self._workers:
            worker.wait()
        event.accept()
