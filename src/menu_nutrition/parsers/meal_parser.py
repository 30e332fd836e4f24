"""
Combines food and nutrient parsing into MealCell / MealRow records.
"""

from menu_nutrition.models.meal import MealCell, MealRow
from .docx_parser import TableRow
from .food_parser import parse_foods
from .nutrient_parser import parse_nutrients


def parse_meal_cell(food_text: str, nutrient_text: str) -> MealCell:
    """
    Interpret the text of a food cell and its nutrient cell.

    Args:
        food_text: Text of the cell in the food row
        nutrient_text: Text of the cell in the same column of the nutrient row

    Returns:
        MealCell with the parsed foods and optional nutrients
    """
    return MealCell(
        food=parse_foods(food_text),
        nutrients=parse_nutrients(nutrient_text)
    )


def parse_meal_row(row: TableRow) -> MealRow:
    """Parse every cell pair of a table row."""
    cells = [
        parse_meal_cell(food_text, nutrient_text)
        for food_text, nutrient_text in row.cells
    ]
    return MealRow(header=row.header, cells=cells)
