"""
Pydantic models for parsed menu data.

All models are frozen: records are created once while parsing and never
mutated afterwards.
"""

from menu_nutrition.models.food import Food, Nutrients, NUTRIENT_FIELDS
from menu_nutrition.models.meal import MealCell, MealRow

__all__ = [
    'Food',
    'Nutrients',
    'NUTRIENT_FIELDS',
    'MealCell',
    'MealRow',
]
