"""
handlers/console_demo.py
-------------------------
Walks through every repository operation once and prints the results.
"""

from typing import Callable

from models.user import User
from repositories.user_repo import UserRepository
from utils.errors import UserStoreError
from utils.logger import get_logger

logger = get_logger(__name__)


def run_demo(repo: UserRepository, out: Callable[[str], None] = print) -> bool:
    """
    Create, read, update, search and delete a sample user.

    Returns:
        True if every step ran, False if the database raised an error
        or the new user could not be read back.
    """
    try:
        # Create
        user = repo.create(User(name="Alice", email="alice@example.com", age=28))
        out(f"Created: {user}")

        # Read
        fetched = repo.get_by_id(user.id)
        if fetched is None:
            out(f"User #{user.id} not found")
            return False
        out(f"Fetched by ID: {fetched}")
        out(f"All users: {[str(u) for u in repo.get_all()]}")

        # Update
        fetched.age = 29
        out(f"Updated: {repo.update(fetched)}")
        out(f"After update: {repo.get_by_id(fetched.id)}")

        # Search
        out(f"Found by name 'Ali': {[str(u) for u in repo.find_by_name('Ali')]}")

        # Delete
        out(f"Deleted: {repo.delete(fetched.id)}")
        out(f"Users left: {repo.count()}")
    except UserStoreError as e:
        logger.error(f"Demo aborted: {e}")
        out(f"Database error: {e}")
        return False
    return True
