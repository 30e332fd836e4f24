"""
Table extraction from .docx menu documents.

Document layout assumptions:
1. Menus are WordprocessingML tables (<w:tbl>) in word/document.xml
2. The first row of every table is a header and is skipped
3. The remaining rows alternate: food row, then its nutrient row
4. The first cell of each row holds the row label (e.g. "Ebéd")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union
import logging
import zipfile

from lxml import etree

logger = logging.getLogger(__name__)

DOCUMENT_XML = 'word/document.xml'
W_NS = 'http://schemas.openxmlformats.org/wordprocessingml/2006/main'
NS = {'w': W_NS}

# Label for rows without any cells
UNKNOWN_HEADER = '?'


class MenuDocumentError(ValueError):
    """The input file is not a readable .docx menu document."""


@dataclass(frozen=True)
class TableRow:
    """
    Raw text of one food row / nutrient row pair.

    Attributes:
        header: Label from the first cell of the food row
        cells: (food_text, nutrient_text) pairs in column order
    """
    header: str
    cells: List[Tuple[str, str]] = field(default_factory=list)


def load_document_xml(docx_path: Union[str, Path]) -> etree._Element:
    """
    Read and parse word/document.xml from a .docx archive.

    Args:
        docx_path: Path to the .docx file

    Returns:
        Root element of the document XML

    Raises:
        FileNotFoundError: If the file does not exist
        MenuDocumentError: If the archive or its XML is malformed
    """
    docx_path = Path(docx_path)
    if not docx_path.exists():
        raise FileNotFoundError(f"Input document not found: {docx_path}")

    try:
        with zipfile.ZipFile(docx_path, 'r') as archive:
            xml_bytes = archive.read(DOCUMENT_XML)
    except zipfile.BadZipFile as e:
        raise MenuDocumentError(f"Not a .docx (zip) archive: {docx_path}") from e
    except KeyError as e:
        raise MenuDocumentError(
            f"{DOCUMENT_XML} not found in {docx_path}"
        ) from e

    try:
        return etree.fromstring(xml_bytes)
    except etree.XMLSyntaxError as e:
        raise MenuDocumentError(
            f"Malformed {DOCUMENT_XML} in {docx_path}: {e}"
        ) from e


def cell_text(cell: etree._Element) -> str:
    """
    Text of a <w:tc> cell.

    Text runs (<w:t>) are joined with newlines, so separate paragraphs
    and runs of the cell stay apart.
    """
    texts = [t.text for t in cell.iter(f'{{{W_NS}}}t') if t.text]
    return '\n'.join(texts)


def read_row_cells(row: etree._Element) -> Tuple[str, List[str]]:
    """
    Split a <w:tr> row into its header label and content cell texts.

    Returns:
        (header, contents) where header has newlines removed
    """
    cells = row.findall('w:tc', NS)
    if not cells:
        return UNKNOWN_HEADER, []

    header = cell_text(cells[0]).replace('\n', '')
    contents = [cell_text(c) for c in cells[1:]]
    return header, contents


def read_table(table: etree._Element) -> List[TableRow]:
    """
    Pair food rows with nutrient rows in one <w:tbl>.

    An unpaired trailing food row is dropped; food and nutrient cells
    are paired by column, up to the shorter of the two rows.
    """
    rows = table.findall('w:tr', NS)[1:]  # skip header row

    food_rows = [read_row_cells(r) for r in rows[0::2]]
    nutrient_rows = [read_row_cells(r) for r in rows[1::2]]

    if len(food_rows) > len(nutrient_rows):
        logger.warning(
            f"Table has a food row without nutrient row: '{food_rows[-1][0]}' (skipped)"
        )

    result = []
    for (header, food_cells), (_, nutrient_cells) in zip(food_rows, nutrient_rows):
        result.append(TableRow(
            header=header,
            cells=list(zip(food_cells, nutrient_cells))
        ))
    return result


def read_table_rows(docx_path: Union[str, Path]) -> List[TableRow]:
    """
    Extract all menu rows from every table of a .docx document.

    Args:
        docx_path: Path to the .docx file

    Returns:
        TableRow objects in document order

    Raises:
        FileNotFoundError: If the file does not exist
        MenuDocumentError: If the document cannot be read

    Example:
        >>> rows = read_table_rows("menu.docx")
        >>> rows[0].header
        'Tízórai'
    """
    root = load_document_xml(docx_path)

    tables = list(root.iter(f'{{{W_NS}}}tbl'))
    rows: List[TableRow] = []
    for i, table in enumerate(tables):
        table_rows = read_table(table)
        logger.debug(f"Table {i}: {len(table_rows)} menu rows")
        rows.extend(table_rows)

    logger.info(
        f"Read {Path(docx_path).name}: {len(tables)} tables, {len(rows)} menu rows"
    )
    return rows
