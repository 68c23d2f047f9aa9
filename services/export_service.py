"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of the users table.
"""

import io
from typing import Optional

import pandas as pd

from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = ["ID", "Name", "Email", "Age"]


class UserExportService:
    """Generates downloadable user listings in CSV and Excel formats."""

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    def _frame(self) -> pd.DataFrame:
        users = self.repo.get_all()
        data = [[u.id, u.name, u.email, u.age] for u in users]
        return pd.DataFrame(data, columns=COLUMNS)

    def export_csv(self) -> io.BytesIO:
        """
        Export all users as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self._frame()
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} users as CSV")
        return buffer

    def export_excel(self) -> io.BytesIO:
        """
        Export all users as an Excel (.xlsx) file with a single "Users" sheet.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        df = self._frame()
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Users", index=False)
        buffer.seek(0)
        logger.info(f"Exported {len(df)} users as Excel")
        return buffer
