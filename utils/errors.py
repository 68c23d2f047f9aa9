"""
utils/errors.py
---------------
Exception hierarchy shared by the database and repository layers.

"Not found" and "no rows affected" are never raised: they are
ordinary return values (None / False) of the repository.
"""


class UserStoreError(Exception):
    """Base class for every error raised by the user-record layers."""


class ValidationError(UserStoreError):
    """A required field is missing on a record that is about to be created."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"User {field} cannot be empty")


class StoreConnectionError(UserStoreError, ConnectionError):
    """The database is unreachable, the connection broke, or the pool is exhausted."""


class StoreError(UserStoreError):
    """Any other database failure: constraint violation, bad SQL, ..."""
