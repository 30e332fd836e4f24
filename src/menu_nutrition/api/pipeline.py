"""
High-level pipeline for converting a menu document.

MenuPipeline coordinates the complete workflow:
- Read table rows from the .docx document
- Filter rows by header (config.row_filter)
- Parse food and nutrient cells
- Export to a delimited file (via ExportService)

Rows are independent of each other, so they can be parsed in worker
processes (config.max_workers > 1). Output order is always document
order.
"""

from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Union
import logging

from menu_nutrition.config import MenuConfig, get_config
from menu_nutrition.models import MealRow
from menu_nutrition.parsers.docx_parser import TableRow, read_table_rows
from menu_nutrition.parsers.meal_parser import parse_meal_row
from menu_nutrition.services.export_service import ExportService

logger = logging.getLogger(__name__)


def parse_rows(rows: List[TableRow], max_workers: int = 1) -> List[MealRow]:
    """
    Parse table rows into MealRow objects.

    Args:
        rows: Raw rows from read_table_rows()
        max_workers: Number of worker processes (1 parses in-process)

    Returns:
        MealRow objects in the same order as rows
    """
    if max_workers <= 1 or len(rows) <= 1:
        return [parse_meal_row(row) for row in rows]

    logger.debug(f"Parsing {len(rows)} rows with {max_workers} workers")
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(parse_meal_row, rows))


class MenuPipeline:
    """
    Orchestrates reading, parsing and exporting a menu document.

    Usage:
        pipeline = MenuPipeline(config=get_config())
        stats = pipeline.run()
        print(f"Exported {stats['cells']} cells")

    Failures of the document or config layer propagate as exceptions
    (FileNotFoundError, MenuDocumentError); cell text never fails, it
    only yields fewer records.
    """

    def __init__(
        self,
        config: Optional[MenuConfig] = None,
        export_service: Optional[ExportService] = None
    ):
        """
        Args:
            config: Run settings (global config when None)
            export_service: Exporter (built from config.delimiter when None)
        """
        self.config = config or get_config()
        self.export_service = export_service or ExportService(
            delimiter=self.config.delimiter
        )

    def parse_document(self, docx_path: Union[str, Path, None] = None) -> List[MealRow]:
        """
        Read and parse a menu document.

        Args:
            docx_path: Document to read (config.input_path when None)

        Returns:
            Parsed rows accepted by config.row_filter, in document order
        """
        docx_path = Path(docx_path or self.config.input_path)
        table_rows = read_table_rows(docx_path)

        selected = [r for r in table_rows if self.config.accepts_row(r.header)]
        skipped = len(table_rows) - len(selected)
        if skipped:
            logger.info(
                f"Row filter '{self.config.row_filter}': "
                f"kept {len(selected)}, skipped {skipped} rows"
            )

        return parse_rows(selected, max_workers=self.config.max_workers)

    def run(self) -> Dict[str, int]:
        """
        Convert config.input_path and write config.output_path.

        Returns:
            Statistics dictionary:
            {
                'rows': int,               # exported rows
                'cells': int,              # exported cells
                'foods': int,              # foods across all cells
                'missing_nutrients': int   # cells without nutrient data
            }
        """
        logger.info(f"Converting {self.config.input_path} -> {self.config.output_path}")

        rows = self.parse_document()
        self.export_service.write(rows, self.config.output_path)

        stats = {
            'rows': len(rows),
            'cells': sum(r.cell_count for r in rows),
            'foods': sum(r.food_count for r in rows),
            'missing_nutrients': sum(
                1 for r in rows for c in r.cells if c.nutrients is None
            ),
        }

        if stats['missing_nutrients']:
            logger.warning(
                f"{stats['missing_nutrients']} of {stats['cells']} cells "
                f"have no complete nutrient data"
            )

        logger.info(
            f"Conversion complete: {stats['rows']} rows, "
            f"{stats['cells']} cells, {stats['foods']} foods"
        )
        return stats
