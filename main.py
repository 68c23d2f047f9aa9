"""
main.py
-------
Entry point for the user records tool.

Responsibilities:
    - Initialize the database connection pool.
    - Dispatch to the console demo, the desktop GUI, schema setup or export.
    - Close the pool on the way out.

Usage:
    python main.py [demo]
    python main.py gui
    python main.py init-db
    python main.py export users.xlsx
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.console_demo import run_demo
from repositories.user_repo import UserRepository
from services.export_service import UserExportService
from utils.errors import UserStoreError
from utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_FORMATS = {".csv": "export_csv", ".xlsx": "export_excel"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage records in the users table.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("demo", help="run every CRUD operation once and print the results")
    sub.add_parser("gui", help="open the desktop form")
    sub.add_parser("init-db", help="create the users table if it does not exist")
    export = sub.add_parser("export", help="write all users to a .csv or .xlsx file")
    export.add_argument("path", type=Path)
    return parser


def export_users(path: Path, repo: Optional[UserRepository] = None) -> int:
    """Write every user to `path`, picking CSV or Excel from the file suffix."""
    method = EXPORT_FORMATS.get(path.suffix.lower())
    if method is None:
        print(f"Unsupported export format '{path.suffix}'. Use .csv or .xlsx.", file=sys.stderr)
        return 2
    buffer = getattr(UserExportService(repo), method)()
    try:
        path.write_bytes(buffer.getvalue())
    except OSError as e:
        logger.error(f"Cannot write export file {path}: {e}")
        print(f"Cannot write {path}: {e}", file=sys.stderr)
        return 1
    print(f"Exported users to {path}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, run the chosen command and return the exit code."""
    args = build_parser().parse_args(argv)
    command = args.command or "demo"

    try:
        init_pool()
    except UserStoreError as e:
        logger.error(f"Cannot start: {e}")
        print(f"Database error: {e}", file=sys.stderr)
        return 1

    try:
        if command == "init-db":
            create_tables()
            print("Database schema created successfully.")
            return 0
        if command == "gui":
            # PyQt5 is only needed by this command.
            from gui.user_window import run
            return run()
        if command == "export":
            return export_users(args.path)
        return 0 if run_demo(UserRepository()) else 1
    except UserStoreError as e:
        logger.error(f"Command '{command}' failed: {e}")
        print(f"Database error: {e}", file=sys.stderr)
        return 1
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
