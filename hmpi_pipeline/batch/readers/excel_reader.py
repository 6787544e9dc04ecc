"""
Workbook reader producing raw rows for the normalizer.
"""

from pathlib import Path
from typing import Any

import pandas as pd


class ExcelReader:
    """
    Reads one worksheet of an .xlsx/.xls workbook into raw rows.

    Cell values keep the type the workbook stores (numbers stay numbers);
    blank cells become None.
    """

    def read(self, file_path: str | Path, sheet: int | str = 0) -> list[dict[str, Any]]:
        """
        Read a worksheet into a list of raw rows.

        Args:
            file_path: Path to workbook
            sheet: Sheet index or name (default: first sheet)

        Returns:
            One mapping of header to cell value per data row
        """
        df = pd.read_excel(file_path, sheet_name=sheet, dtype=object)
        df.columns = [str(column).strip() for column in df.columns]
        df = df.astype(object).where(pd.notna(df), None)

        return df.to_dict(orient="records")
