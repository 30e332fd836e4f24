"""
User-facing API for menu-nutrition.
"""

from menu_nutrition.api.pipeline import MenuPipeline, parse_rows

__all__ = [
    'MenuPipeline',
    'parse_rows',
]
