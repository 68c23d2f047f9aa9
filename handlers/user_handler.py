"""
handlers/user_handler.py
-------------------------
Turns raw form input (plain strings typed into the GUI) into repository
calls and packages the outcome as a FormResult the GUI can display.
No business logic lives here beyond field parsing.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.user import User
from repositories.user_repo import UserRepository
from utils.errors import UserStoreError
from utils.logger import get_logger

logger = get_logger(__name__)

TITLE_SUCCESS = "Success"
TITLE_INFO = "Information"
TITLE_ERROR = "Error"
TITLE_VALIDATION = "Validation Error"
TITLE_DATABASE = "Database Error"


@dataclass
class FormResult:
    """Outcome of a form action: whether it worked, what to tell the user, rows to show."""
    ok: bool
    title: str = ""
    message: str = ""
    users: list[User] = field(default_factory=list)


def _invalid(message: str) -> FormResult:
    return FormResult(False, TITLE_VALIDATION, message)


def _db_error(action: str, error: UserStoreError) -> FormResult:
    logger.error(f"Form action '{action}' failed: {error}")
    return FormResult(False, TITLE_DATABASE, f"Error while trying to {action}: {error}")


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


class UserFormHandler:
    """Adapter between the user form and UserRepository."""

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    def create(self, name: str, email: str, age_text: str) -> FormResult:
        name, email, age_text = name.strip(), email.strip(), age_text.strip()
        if not name or not email or not age_text:
            return _invalid("Please fill in all fields.")
        age = _parse_int(age_text)
        if age is None:
            return _invalid("Age must be a valid number.")

        try:
            user = self.repo.create(User(name=name, email=email, age=age))
        except UserStoreError as e:
            return _db_error("create user", e)
        return FormResult(True, TITLE_SUCCESS, f"User created with ID: {user.id}")

    def update(self, id_text: str, name: str, email: str, age_text: str) -> FormResult:
        id_text = id_text.strip()
        if not id_text:
            return _invalid("Select a user from the table to update.")
        name, email, age_text = name.strip(), email.strip(), age_text.strip()
        if not name or not email or not age_text:
            return _invalid("Please fill in all fields.")
        user_id, age = _parse_int(id_text), _parse_int(age_text)
        if user_id is None or age is None:
            return _invalid("ID and age must be valid numbers.")

        try:
            updated = self.repo.update(User(id=user_id, name=name, email=email, age=age))
        except UserStoreError as e:
            return _db_error("update user", e)
        if not updated:
            return FormResult(False, TITLE_ERROR, f"No user found with ID: {user_id}")
        return FormResult(True, TITLE_SUCCESS, "User updated successfully.")

    def delete(self, id_text: str) -> FormResult:
        """Delete by id. Asking the user for confirmation is up to the caller."""
        id_text = id_text.strip()
        if not id_text:
            return _invalid("Select a user from the table to delete.")
        user_id = _parse_int(id_text)
        if user_id is None:
            return _invalid("ID must be a valid number.")

        try:
            deleted = self.repo.delete(user_id)
        except UserStoreError as e:
            return _db_error("delete user", e)
        if not deleted:
            return FormResult(False, TITLE_ERROR, f"No user found with ID: {user_id}")
        return FormResult(True, TITLE_SUCCESS, "User deleted successfully.")

    def load_all(self) -> FormResult:
        try:
            users = self.repo.get_all()
        except UserStoreError as e:
            return _db_error("load users", e)
        return FormResult(True, users=users)

    def search(self, term: str) -> FormResult:
        term = term.strip()
        if not term:
            return _invalid("Enter a search term.")

        try:
            users = self.repo.find_by_name(term)
        except UserStoreError as e:
            return _db_error("search users", e)
        if not users:
            return FormResult(True, TITLE_INFO, "No users found with that name.")
        return FormResult(True, users=users)
