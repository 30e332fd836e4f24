"""
Unit tests for .docx table extraction.

Documents are built on the fly by the make_docx fixture (tests/conftest.py).
"""

import zipfile

import pytest
from lxml import etree

from menu_nutrition.parsers.docx_parser import (
    MenuDocumentError,
    TableRow,
    cell_text,
    read_table_rows
)


class TestReadTableRows:
    """Row pairing and cell text extraction."""

    def test_header_row_is_skipped(self, make_docx, menu_table):
        rows = read_table_rows(make_docx([menu_table]))

        assert [r.header for r in rows] == ['Tízórai', 'Ebéd']

    def test_food_and_nutrient_cells_are_paired(self, make_docx, menu_table):
        rows = read_table_rows(make_docx([menu_table]))

        assert rows[0] == TableRow(
            header='Tízórai',
            cells=[
                ('Kakaó(7)\n20 dkg', '120 kcal; 18,5 g; 4 g; 12 g; 3,5 g; 0,2 g; 2,1 g'),
                ('Májkrém Hamé', 'energia: 95 kcal'),
            ]
        )

    def test_rows_from_all_tables_in_order(self, make_docx, menu_table):
        second = [
            ['Nap', 'Szerda'],
            ['Uzsonna', 'Joghurt(7)'],
            ['Tápérték', ''],
        ]

        rows = read_table_rows(make_docx([menu_table, second]))

        assert [r.header for r in rows] == ['Tízórai', 'Ebéd', 'Uzsonna']
        assert rows[2].cells == [('Joghurt(7)', '')]

    def test_unpaired_trailing_row_is_dropped(self, make_docx):
        table = [
            ['Nap', 'Hétfő'],
            ['Ebéd', 'Leves'],
            ['Tápérték', '1 2 3 4 5 6 7'],
            ['Vacsora', 'Tészta'],
        ]

        rows = read_table_rows(make_docx([table]))

        assert [r.header for r in rows] == ['Ebéd']

    def test_cells_paired_up_to_shorter_row(self, make_docx):
        table = [
            ['Nap', 'Hétfő', 'Kedd'],
            ['Ebéd', 'Leves', 'Főzelék'],
            ['Tápérték', '1 2 3 4 5 6 7'],
        ]

        rows = read_table_rows(make_docx([table]))

        assert rows[0].cells == [('Leves', '1 2 3 4 5 6 7')]

    def test_header_newlines_removed(self, make_docx):
        table = [
            ['Nap', 'Hétfő'],
            [['Ebéd', 'menü'], 'Leves'],
            ['Tápérték', ''],
        ]

        rows = read_table_rows(make_docx([table]))

        assert rows[0].header == 'Ebédmenü'

    def test_row_without_cells_gets_unknown_header(self, make_docx):
        table = [
            ['Nap', 'Hétfő'],
            [],
            ['Tápérték', ''],
        ]

        rows = read_table_rows(make_docx([table]))

        assert rows == [TableRow(header='?', cells=[])]

    def test_document_without_tables(self, make_docx):
        assert read_table_rows(make_docx([])) == []


class TestCellText:

    def test_runs_joined_with_newlines(self):
        cell = etree.fromstring(
            '<w:tc xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
            '<w:p><w:r><w:t>Rántott</w:t></w:r><w:r><w:t>hal</w:t></w:r></w:p>'
            '<w:p><w:r><w:t/></w:r></w:p>'
            '</w:tc>'
        )

        assert cell_text(cell) == 'Rántott\nhal'


class TestDocumentErrors:
    """Collaborator failures are reported as exceptions."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_table_rows(tmp_path / 'missing.docx')

    def test_not_a_zip_archive(self, tmp_path):
        path = tmp_path / 'menu.docx'
        path.write_text('plain text')

        with pytest.raises(MenuDocumentError, match='zip'):
            read_table_rows(path)

    def test_missing_document_xml(self, tmp_path):
        path = tmp_path / 'menu.docx'
        with zipfile.ZipFile(path, 'w') as archive:
            archive.writestr('word/styles.xml', '<styles/>')

        with pytest.raises(MenuDocumentError, match='word/document.xml'):
            read_table_rows(path)

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / 'menu.docx'
        with zipfile.ZipFile(path, 'w') as archive:
            archive.writestr('word/document.xml', '<w:document><unclosed>')

        with pytest.raises(MenuDocumentError, match='Malformed'):
            read_table_rows(path)

    def test_document_error_is_value_error(self):
        assert issubclass(MenuDocumentError, ValueError)
