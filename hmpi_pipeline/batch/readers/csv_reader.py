"""
CSV reader producing raw rows for the normalizer.
"""

from pathlib import Path
from typing import Any

import pandas as pd


class CSVReader:
    """
    Reads delimited text into raw rows with every cell kept as text.

    Empty cells become None so that header alias resolution falls through
    to the next alias, as it does for blank spreadsheet cells.
    """

    def read(self, file_path: str | Path, delimiter: str = ",") -> list[dict[str, Any]]:
        """
        Read a CSV file into a list of raw rows.

        Args:
            file_path: Path to CSV file
            delimiter: Field delimiter

        Returns:
            One mapping of header to cell text per data row
        """
        df = pd.read_csv(
            file_path,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
        df.columns = [str(column).strip() for column in df.columns]

        return [
            {header: (value if value != "" else None) for header, value in row.items()}
            for row in df.to_dict(orient="records")
        ]
