"""
Lexer for food cells of a menu table.

Menu cells loosely follow the shape::

    Name in mixed case (extra info) 15 dkg (1, 7, 9)

The lexer does not validate that shape. It greedily classifies runs of
characters into NAME, ALLERGENS and NOISE tokens and leaves it to the
span assembler (food_parser) to decide what is usable. Token lengths
always add up to the length of the input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

from .cursor import Cursor


class TokenKind(str, Enum):
    """Classification of a scanned run of characters."""
    NAME = 'name'
    ALLERGENS = 'allergens'
    NOISE = 'noise'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    length: int


def _is_name_char(c: str) -> bool:
    return c != '*' and (c.islower() or c.isspace())


def _is_quantity_char(c: str) -> bool:
    return not c.isupper() and (c != '(' or c.isspace())


class FoodLexer:
    """
    Splits food cell text into tokens.

    Example:
        >>> [t.kind.value for t in FoodLexer("Gulyásleves(1,9)").tokenize()]
        ['name', 'allergens']
    """

    def __init__(self, text: str):
        self._cursor = Cursor(text)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the input is exhausted."""
        while not self._cursor.is_eof():
            self._cursor.reset_consumed()
            yield self.next_token()

    def next_token(self) -> Token:
        """
        Scan exactly one token starting at the cursor.

        The first character is consumed, then the rules below are tried
        in order:

        1. whitespace run -> NOISE
        2. quantity (starts with a digit) -> NOISE
        3. standalone ALL CAPS run, e.g. "DIÉTÁS" -> NOISE
        4. capitalized name -> NAME
        5. parenthesized allergen list -> ALLERGENS
        6. any other single character -> NOISE
        """
        cursor = self._cursor
        first = cursor.advance()

        if first.isspace():
            kind = self._whitespace()
        elif first.isnumeric():
            kind = self._quantity()
        elif first.isupper() and cursor.peek_first().isupper():
            cursor.advance_while(str.isupper)
            kind = TokenKind.NOISE
        elif first.isupper():
            kind = self._name()
        elif first == '(':
            kind = self._allergens()
        else:
            kind = TokenKind.NOISE

        return Token(kind=kind, length=cursor.consumed())

    def _whitespace(self) -> TokenKind:
        self._cursor.advance_while(str.isspace)
        return TokenKind.NOISE

    def _name(self) -> TokenKind:
        """
        Read a capitalized name and optional parenthesized extra info.

        Parenthesized text that does not start with a digit (e.g. the
        manufacturer) is part of the name; "(<digit>" starts the allergen
        list and is left for the next token.

        Warning:
            Not every food name is covered. "Májkrém Hamé" becomes two
            names, and in "Gríz(30 g)" the quantity is read as allergen
            list "30 g".
        """
        cursor = self._cursor
        cursor.advance_while(_is_name_char)

        if cursor.peek_first() == '(' and not cursor.peek_second().isnumeric():
            cursor.advance_while(lambda c: c != ')')
            cursor.advance()

        return TokenKind.NAME

    def _quantity(self) -> TokenKind:
        """Read a quantity such as "15 dkg", including ALL CAPS units."""
        cursor = self._cursor
        cursor.advance_while(_is_quantity_char)

        if cursor.peek_first().isupper() and cursor.peek_second().isupper():
            cursor.advance_while(str.isupper)

        return TokenKind.NOISE

    def _allergens(self) -> TokenKind:
        cursor = self._cursor
        cursor.advance_while(lambda c: c != ')')
        cursor.advance()
        return TokenKind.ALLERGENS


def tokenize(text: str) -> List[Token]:
    """Tokenize food cell text into a list of tokens."""
    return list(FoodLexer(text).tokenize())
