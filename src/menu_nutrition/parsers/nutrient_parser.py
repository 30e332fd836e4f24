"""
Nutrient cell parsing.

Nutrient cells are free text such as::

    energia: 250 kcal, szénhidrát: 12,5 g, fehérje: 8 g, ...

Numbers are extracted in order of appearance and mapped by position
onto a Nutrients record.
"""

from typing import List, Optional

from menu_nutrition.models.food import NUTRIENT_FIELDS, Nutrients

# A cell needs one value per nutrient field to produce a record
MIN_NUTRIENT_VALUES = len(NUTRIENT_FIELDS)


class _NumberBuffer:
    """Digits of the number currently being read."""

    def __init__(self):
        self.chars: List[str] = []
        self.has_separator = False

    def accepts_separator(self) -> bool:
        return bool(self.chars) and not self.has_separator

    def push_separator(self) -> None:
        self.chars.append('.')
        self.has_separator = True

    def flush(self) -> Optional[float]:
        """Return the buffered number (None if empty or unparseable) and reset."""
        value = None
        if self.chars:
            try:
                value = float(''.join(self.chars))
            except ValueError:
                value = None
        self.chars = []
        self.has_separator = False
        return value


def parse_numbers(text: str) -> List[float]:
    """
    Extract decimal numbers from free text.

    Both "." and "," are accepted as decimal separator, once per number
    and only after at least one digit. Any other character ends the
    current number.

    Example:
        >>> parse_numbers("energia: 250 kcal, szénhidrát: 12,5g")
        [250.0, 12.5]
    """
    numbers: List[float] = []
    buffer = _NumberBuffer()

    for c in text:
        if '0' <= c <= '9':
            buffer.chars.append(c)
        elif c in '.,' and buffer.accepts_separator():
            buffer.push_separator()
        else:
            value = buffer.flush()
            if value is not None:
                numbers.append(value)

    value = buffer.flush()
    if value is not None:
        numbers.append(value)

    return numbers


def map_nutrients(values: List[float]) -> Optional[Nutrients]:
    """
    Map extracted values onto a Nutrients record.

    Returns:
        Nutrients built from the first seven values, or None if there are
        fewer than MIN_NUTRIENT_VALUES values
    """
    if len(values) < MIN_NUTRIENT_VALUES:
        return None
    return Nutrients.from_values(values)


def parse_nutrients(text: str) -> Optional[Nutrients]:
    """Parse a nutrient cell; None when it holds no complete nutrient data."""
    return map_nutrients(parse_numbers(text))
