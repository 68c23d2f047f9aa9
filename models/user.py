"""
models/user.py
--------------
Domain model for a user record.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single row of the `users` table.

    Attributes:
        name: Display name (required on create).
        email: Contact address (required on create, format not checked).
        age: Age in years. No range is enforced, negative values included.
        id: Database primary key (None for new records, set once persisted).
    """
    name: Optional[str]
    email: Optional[str]
    age: int = 0
    id: Optional[int] = None

    def is_persisted(self) -> bool:
        """Returns True once the database has assigned an id."""
        return self.id is not None

    def __str__(self) -> str:
        return f"User(id={self.id}, name={self.name!r}, email={self.email!r}, age={self.age})"
