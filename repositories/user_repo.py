"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.

Every method runs exactly one parameterized statement on a connection
borrowed from the ConnectionProvider and released before returning.
"""

from typing import Optional

from db.connection import ConnectionProvider, get_provider
from models.user import User
from utils.errors import UserStoreError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, email, age"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, provider: Optional[ConnectionProvider] = None):
        self._provider = provider

    @property
    def provider(self) -> ConnectionProvider:
        # Resolved lazily so repositories can be built before init_pool().
        return self._provider or get_provider()

    # ── CREATE ────────────────────────────────────────────

    def create(self, user: User) -> User:
        """
        Insert a new user record.

        Args:
            user: The User to persist. `name` and `email` are required,
                `age` is stored as given.

        Returns:
            The same User with its `id` populated.

        Raises:
            ValidationError: If name or email is missing or blank.
            StoreConnectionError: If the database cannot be reached.
            StoreError: If the insert fails.
        """
        for field_name in ("name", "email"):
            value = getattr(user, field_name)
            if value is None or not str(value).strip():
                raise ValidationError(field_name)

        sql = "INSERT INTO users (name, email, age) VALUES (%s, %s, %s) RETURNING id;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql, (user.name, user.email, user.age))
                user.id = cur.fetchone()[0]
        except UserStoreError as e:
            logger.error(f"Failed to create user {user.name!r}: {e}")
            raise
        logger.info(f"Created user #{user.id}")
        return user

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by primary key.

        Returns:
            A User object or None if no row has that id.
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE id = %s;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
        except UserStoreError as e:
            logger.error(f"Failed to fetch user #{user_id}: {e}")
            raise
        return self._row_to_user(row) if row else None

    def get_all(self) -> list[User]:
        """Fetch every user, in whatever order the database returns them."""
        sql = f"SELECT {_COLUMNS} FROM users;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql)
                rows = cur.fetchall()
        except UserStoreError as e:
            logger.error(f"Failed to fetch users: {e}")
            raise
        return [self._row_to_user(r) for r in rows]

    def find_by_name(self, fragment: str) -> list[User]:
        """
        Fetch users whose name contains `fragment`.

        Matching uses SQL LIKE on ``%fragment%``, so case sensitivity follows
        the database collation and any wildcard in `fragment` is honoured.
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE name LIKE %s;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql, (f"%{fragment}%",))
                rows = cur.fetchall()
        except UserStoreError as e:
            logger.error(f"Failed to search users by name {fragment!r}: {e}")
            raise
        return [self._row_to_user(r) for r in rows]

    def count(self) -> int:
        """Number of rows in the users table."""
        try:
            with self.provider.cursor() as cur:
                cur.execute("SELECT COUNT(*) FROM users;")
                return cur.fetchone()[0]
        except UserStoreError as e:
            logger.error(f"Failed to count users: {e}")
            raise

    # ── UPDATE ────────────────────────────────────────────

    def update(self, user: User) -> bool:
        """
        Overwrite name, email and age of the row matching `user.id`.

        Returns:
            True if a row was updated, False if no row has that id.
        """
        if user.id is None:
            return False

        sql = "UPDATE users SET name = %s, email = %s, age = %s WHERE id = %s;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql, (user.name, user.email, user.age, user.id))
                updated = cur.rowcount > 0
        except UserStoreError as e:
            logger.error(f"Failed to update user #{user.id}: {e}")
            raise
        if updated:
            logger.info(f"Updated user #{user.id}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> bool:
        """
        Delete the row matching `user_id`.

        Returns:
            True if a row was deleted, False if none matched.
        """
        sql = "DELETE FROM users WHERE id = %s;"
        try:
            with self.provider.cursor() as cur:
                cur.execute(sql, (user_id,))
                deleted = cur.rowcount > 0
        except UserStoreError as e:
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise
        if deleted:
            logger.info(f"Deleted user #{user_id}")
        return deleted

    # ── Helpers ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a (id, name, email, age) row to a User object."""
        return User(id=row[0], name=row[1], email=row[2], age=row[3])
