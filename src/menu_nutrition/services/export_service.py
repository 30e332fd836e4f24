"""
Export Service

Writes parsed menu rows to a delimited text file.

Design:
- One output line per table cell (row header + column position)
- Foods of a cell joined with newlines, "name (allergens)" when listed
- Energy as a whole number, other nutrients with one decimal
- Cells without nutrient data leave the nutrient columns empty
"""

from pathlib import Path
from typing import List, Optional, Union
import csv
import logging

import pandas as pd

from menu_nutrition.models import MealRow, Nutrients, NUTRIENT_FIELDS

logger = logging.getLogger(__name__)

COLUMNS = ['header', 'column', 'food', *NUTRIENT_FIELDS]


def format_nutrient(field_name: str, value: Optional[float]) -> str:
    """
    Format a single nutrient value for export.

    Example:
        >>> format_nutrient('energy', 251.6)
        '252'
        >>> format_nutrient('salt', 1.25)
        '1.2'
    """
    if value is None:
        return ''
    if field_name == 'energy':
        return f"{value:.0f}"
    return f"{value:.1f}"


def _nutrient_values(nutrients: Optional[Nutrients]) -> List[str]:
    return [
        format_nutrient(name, getattr(nutrients, name) if nutrients else None)
        for name in NUTRIENT_FIELDS
    ]


class ExportService:
    """
    Service for exporting MealRow objects as delimited text.

    Usage:
        service = ExportService(delimiter=';')
        df = service.to_dataframe(rows)
        service.write(rows, Path('output/menu.csv'))
    """

    def __init__(self, delimiter: str = ';'):
        """
        Args:
            delimiter: Single-character field separator

        Raises:
            ValueError: If delimiter is not exactly one character
        """
        if len(delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got: '{delimiter}'"
            )
        self.delimiter = delimiter

    def to_dataframe(self, rows: List[MealRow]) -> pd.DataFrame:
        """
        Flatten rows into a DataFrame with one line per cell.

        All values are strings, already formatted for output.
        """
        records = []
        for row in rows:
            for position, cell in enumerate(row.cells, start=1):
                food = '\n'.join(f.label() for f in cell.food)
                records.append(
                    [row.header, str(position), food, *_nutrient_values(cell.nutrients)]
                )

        return pd.DataFrame(records, columns=COLUMNS)

    def write(self, rows: List[MealRow], output_path: Union[str, Path]) -> Path:
        """
        Write rows to a delimited file (UTF-8, header line included).

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = self.to_dataframe(rows)

        logger.info(f"Writing {len(df)} cells to {output_path}...")
        df.to_csv(
            output_path,
            sep=self.delimiter,
            index=False,
            encoding='utf-8',
            quoting=csv.QUOTE_MINIMAL
        )
        logger.info(f"✓ Saved {len(df)} cells from {len(rows)} rows")

        return output_path
