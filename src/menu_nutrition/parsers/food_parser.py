"""
Food cell parsing: turns lexer tokens into Food records.

Tokens are located in the source text by folding their lengths into
start offsets (to_spans). A NAME span is paired with an ALLERGENS span
only when the allergen list directly follows it.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from menu_nutrition.models.food import Food
from .food_lexer import FoodLexer, Token, TokenKind


@dataclass(frozen=True)
class Span:
    """A token located in the source text."""
    kind: TokenKind
    start: int
    length: int

    def text(self, source: str) -> str:
        """
        Slice the span out of the source, trimmed.

        Newlines are removed, since they only separate the text runs a
        table cell was assembled from.
        """
        return source[self.start:self.start + self.length].strip().replace('\n', '')


def to_spans(tokens: Iterable[Token]) -> Iterator[Span]:
    """Attach start offsets to tokens by accumulating token lengths."""
    start = 0
    for token in tokens:
        yield Span(kind=token.kind, start=start, length=token.length)
        start += token.length


def _allergen_codes(span: Span, source: str) -> Optional[str]:
    """Allergen list text without its enclosing parentheses."""
    text = span.text(source)
    if text.startswith('('):
        text = text[1:]
    if text.endswith(')'):
        text = text[:-1]
    return text.strip() or None


def assemble_foods(spans: Iterable[Span], source: str) -> List[Food]:
    """
    Build Food records from spans.

    NOISE spans are skipped. An ALLERGENS span is only used as the
    lookahead of the NAME span right before it; reached on its own it is
    skipped, so it never produces output twice.

    Args:
        spans: Spans in source order
        source: Text the spans were scanned from

    Returns:
        Foods in source order (empty if there are no NAME spans)
    """
    foods: List[Food] = []
    remaining = iter(spans)
    lookahead: Optional[Span] = None

    while True:
        if lookahead is not None:
            span, lookahead = lookahead, None
        else:
            span = next(remaining, None)
            if span is None:
                break

        if span.kind is not TokenKind.NAME:
            continue

        name = span.text(source)
        lookahead = next(remaining, None)

        allergens = None
        if lookahead is not None and lookahead.kind is TokenKind.ALLERGENS:
            allergens = _allergen_codes(lookahead, source)

        foods.append(Food(name=name, allergens=allergens))

    return foods


def parse_foods(text: str) -> List[Food]:
    """
    Parse a food cell into Food records.

    Example:
        >>> parse_foods("Gulyásleves(1,9)")
        [Food(name='Gulyásleves', allergens='1,9')]
        >>> parse_foods("Lecsó (házi)")
        [Food(name='Lecsó (házi)', allergens=None)]
    """
    spans = to_spans(FoodLexer(text).tokenize())
    return assemble_foods(spans, text)
