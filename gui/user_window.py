"""
gui/user_window.py
------------------
PyQt5 desktop form for managing user records.
Every button is wired to a UserFormHandler call; the window only copies
fields in and shows the FormResult that comes back.
"""

import sys
from typing import Optional

from PyQt5.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from handlers.user_handler import FormResult, UserFormHandler
from models.user import User

TABLE_HEADERS = ["ID", "Name", "Email", "Age"]


class UserWindow(QWidget):
    """Main window: user form on top, user table in the middle, search bar below."""

    def __init__(self, handler: Optional[UserFormHandler] = None):
        super().__init__()
        self.handler = handler or UserFormHandler()
        self.setWindowTitle("User Management")
        self.resize(800, 600)
        self._build()
        self.load_all_users()

    def _build(self) -> None:
        self.txt_id = QLineEdit()
        self.txt_id.setReadOnly(True)
        self.txt_name = QLineEdit()
        self.txt_email = QLineEdit()
        self.txt_age = QLineEdit()

        form = QFormLayout()
        form.addRow("ID:", self.txt_id)
        form.addRow("Name:", self.txt_name)
        form.addRow("Email:", self.txt_email)
        form.addRow("Age:", self.txt_age)

        buttons = QHBoxLayout()
        for label, slot in (
            ("Create", self.create_user),
            ("Update", self.update_user),
            ("Delete", self.delete_user),
            ("Clear", self.clear_form),
        ):
            button = QPushButton(label)
            button.clicked.connect(slot)
            buttons.addWidget(button)
        form.addRow(buttons)

        form_box = QGroupBox("User Details")
        form_box.setLayout(form)

        self.table = QTableWidget(0, len(TABLE_HEADERS))
        self.table.setHorizontalHeaderLabels(TABLE_HEADERS)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.itemSelectionChanged.connect(self.load_selected_user)

        self.txt_search = QLineEdit()
        btn_search = QPushButton("Search")
        btn_search.clicked.connect(self.search_users)
        btn_refresh = QPushButton("Show All")
        btn_refresh.clicked.connect(self.load_all_users)

        search = QHBoxLayout()
        search.addWidget(self.txt_search)
        search.addWidget(btn_search)
        search.addWidget(btn_refresh)
        search_box = QGroupBox("Search by Name")
        search_box.setLayout(search)

        layout = QVBoxLayout(self)
        layout.addWidget(form_box)
        layout.addWidget(self.table)
        layout.addWidget(search_box)

    # ── Slots ─────────────────────────────────────────────

    def create_user(self) -> None:
        result = self.handler.create(
            self.txt_name.text(), self.txt_email.text(), self.txt_age.text()
        )
        self._after_change(result)

    def update_user(self) -> None:
        result = self.handler.update(
            self.txt_id.text(), self.txt_name.text(), self.txt_email.text(), self.txt_age.text()
        )
        self._after_change(result)

    def delete_user(self) -> None:
        user_id = self.txt_id.text().strip()
        if user_id:
            answer = QMessageBox.question(
                self,
                "Confirm Delete",
                f"Are you sure you want to delete the user with ID: {user_id}?",
                QMessageBox.Yes | QMessageBox.No,
            )
            if answer != QMessageBox.Yes:
                return
        self._after_change(self.handler.delete(user_id))

    def load_all_users(self) -> None:
        result = self.handler.load_all()
        if result.ok:
            self._fill_table(result.users)
        else:
            self._show(result)

    def search_users(self) -> None:
        result = self.handler.search(self.txt_search.text())
        if result.ok:
            self._fill_table(result.users)
        if result.message:
            self._show(result)

    def load_selected_user(self) -> None:
        row = self.table.currentRow()
        if row < 0:
            return
        fields = (self.txt_id, self.txt_name, self.txt_email, self.txt_age)
        for column, line_edit in enumerate(fields):
            item = self.table.item(row, column)
            line_edit.setText(item.text() if item else "")

    def clear_form(self) -> None:
        for line_edit in (self.txt_id, self.txt_name, self.txt_email, self.txt_age, self.txt_search):
            line_edit.clear()
        self.table.clearSelection()

    # ── Helpers ───────────────────────────────────────────

    def _after_change(self, result: FormResult) -> None:
        self._show(result)
        if result.ok:
            self.clear_form()
            self.load_all_users()

    def _fill_table(self, users: list[User]) -> None:
        self.table.setRowCount(0)
        for user in users:
            row = self.table.rowCount()
            self.table.insertRow(row)
            for column, value in enumerate((user.id, user.name, user.email, user.age)):
                self.table.setItem(row, column, QTableWidgetItem(str(value)))

    def _show(self, result: FormResult) -> None:
        if result.ok:
            QMessageBox.information(self, result.title, result.message)
        else:
            QMessageBox.critical(self, result.title, result.message)


def run(handler: Optional[UserFormHandler] = None) -> int:
    """Start the Qt event loop with a UserWindow and return its exit code."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = UserWindow(handler)
    window.show()
    return app.exec_()
