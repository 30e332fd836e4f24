"""
Parsing modules for menu documents.

- docx_parser: table rows from word/document.xml
- food_lexer / food_parser: food cells -> Food records
- nutrient_parser: nutrient cells -> Nutrients records
- meal_parser: cell and row level composition
"""

from .docx_parser import MenuDocumentError, TableRow, read_table_rows
from .food_lexer import FoodLexer, Token, TokenKind, tokenize
from .food_parser import Span, assemble_foods, parse_foods, to_spans
from .nutrient_parser import (
    MIN_NUTRIENT_VALUES,
    map_nutrients,
    parse_numbers,
    parse_nutrients
)
from .meal_parser import parse_meal_cell, parse_meal_row

__all__ = [
    # Document reading
    'MenuDocumentError',
    'TableRow',
    'read_table_rows',
    # Food cells
    'FoodLexer',
    'Token',
    'TokenKind',
    'tokenize',
    'Span',
    'to_spans',
    'assemble_foods',
    'parse_foods',
    # Nutrient cells
    'MIN_NUTRIENT_VALUES',
    'parse_numbers',
    'map_nutrients',
    'parse_nutrients',
    # Rows
    'parse_meal_cell',
    'parse_meal_row',
]
