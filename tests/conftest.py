"""
Pytest configuration shared by unit and pipeline tests.

Provides fixtures that build small .docx menu documents on disk.
"""

import zipfile
from xml.sax.saxutils import escape

import pytest


W_NS = 'http://schemas.openxmlformats.org/wordprocessingml/2006/main'


def _cell_xml(cell) -> str:
    """A cell is a string (one run) or a list of strings (one paragraph each)."""
    runs = [cell] if isinstance(cell, str) else cell
    paragraphs = ''.join(
        f'<w:p><w:r><w:t xml:space="preserve">{escape(text)}</w:t></w:r></w:p>'
        for text in runs
    )
    return f'<w:tc><w:tcPr/>{paragraphs or "<w:p/>"}</w:tc>'


def build_document_xml(tables) -> str:
    """
    Build word/document.xml for a list of tables.

    Each table is a list of rows, each row a list of cells.
    """
    body = []
    for table in tables:
        rows = ''.join(
            '<w:tr>' + ''.join(_cell_xml(c) for c in row) + '</w:tr>'
            for row in table
        )
        body.append(f'<w:tbl><w:tblPr/>{rows}</w:tbl>')
        body.append('<w:p/>')

    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{"".join(body)}</w:body></w:document>'
    )


@pytest.fixture
def make_docx(tmp_path):
    """
    Factory fixture writing a .docx file with the given tables.

    Example:
        >>> path = make_docx([[["Nap", "Hétfő"], ["Ebéd", "Leves(1)"], ["", "250"]]])
    """
    def _make(tables, name='menu.docx'):
        path = tmp_path / name
        with zipfile.ZipFile(path, 'w') as archive:
            archive.writestr('[Content_Types].xml', '<Types/>')
            archive.writestr('word/document.xml', build_document_xml(tables))
        return path

    return _make


@pytest.fixture
def menu_table():
    """A one-table weekly menu: header row, then food/nutrient row pairs."""
    return [
        ['Nap', 'Hétfő', 'Kedd'],
        [
            'Tízórai',
            ['Kakaó(7)', '20 dkg'],
            'Májkrém Hamé',
        ],
        [
            'Tápérték',
            '120 kcal; 18,5 g; 4 g; 12 g; 3,5 g; 0,2 g; 2,1 g',
            'energia: 95 kcal',
        ],
        [
            'Ebéd',
            ['Gulyásleves(1,9)', 'Lecsó (házi)'],
            'Rántott hal (1, 3, 4) 15 dkg',
        ],
        [
            'Tápérték',
            '640 kcal, 70 g, 32.4 g, 9 g, 21 g, 2.1 g, 7 g',
            '580 kcal, 60 g, 30 g, 5 g, 20 g, 1,9 g, 6,5 g',
        ],
    ]
