"""
Character cursor used by the food-cell lexer.

Lookahead past the end of input returns EOF_CHAR, which none of the
lexer's character classes match.
"""

from typing import Callable, Optional

EOF_CHAR = '\0'


class Cursor:
    """
    Forward-only cursor over a string.

    Positions are ``str`` indices, so consumed lengths can be used
    directly to slice the source text.

    Example:
        >>> cursor = Cursor("Leves")
        >>> cursor.advance()
        'L'
        >>> cursor.advance_while(str.islower)
        >>> cursor.consumed()
        5
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0
        self._mark = 0

    def peek_first(self) -> str:
        """Peek the next character without consuming it."""
        return self._peek(0)

    def peek_second(self) -> str:
        """Peek the character after the next one."""
        return self._peek(1)

    def _peek(self, offset: int) -> str:
        idx = self._pos + offset
        if idx < len(self._text):
            return self._text[idx]
        return EOF_CHAR

    def is_eof(self) -> bool:
        """Check if the input has run out."""
        return self._pos >= len(self._text)

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        if self.is_eof():
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def advance_while(self, predicate: Callable[[str], bool]) -> None:
        """Consume characters while the predicate holds and input remains."""
        while predicate(self.peek_first()) and not self.is_eof():
            self._pos += 1

    def consumed(self) -> int:
        """Number of characters consumed since the last reset_consumed()."""
        return self._pos - self._mark

    def reset_consumed(self) -> None:
        self._mark = self._pos
