"""
menu-nutrition: menu table text to typed food and nutrient records.

Main package exports for user-facing API.
"""

from typing import Optional

from menu_nutrition.api import MenuPipeline
from menu_nutrition.models import Food, Nutrients, MealCell, MealRow
from menu_nutrition.parsers import parse_foods, parse_nutrients

__all__ = [
    'MenuPipeline',
    'Food',
    'Nutrients',
    'MealCell',
    'MealRow',
    'parse_foods',
    'parse_nutrients',
    'convert_menu',
]


def convert_menu(config_path: Optional[str] = None) -> dict:
    """
    Convert the menu document named in a config file.

    Args:
        config_path: YAML config file (config/menu.yaml when None)

    Returns:
        Statistics dictionary from MenuPipeline.run()

    Example:
        >>> from menu_nutrition import convert_menu
        >>> stats = convert_menu('config/menu.yaml')
        >>> print(f"Exported {stats['cells']} cells")
        Exported 25 cells
    """
    from menu_nutrition.config import load_config

    pipeline = MenuPipeline(config=load_config(config_path))
    return pipeline.run()
