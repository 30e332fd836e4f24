"""
Pydantic models for parsed menu table rows.

A MealRow corresponds to a pair of table rows in the source document:
a food row immediately followed by its nutrient row. Each MealCell holds
one column of that pair.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .food import Food, Nutrients


class MealCell(BaseModel):
    """Foods and nutrient data of one table column."""

    food: List[Food] = Field(
        default_factory=list,
        description="Foods in the order they appear in the cell"
    )

    nutrients: Optional[Nutrients] = Field(
        default=None,
        description="Nutrient summary, None if the cell has too few values"
    )

    model_config = ConfigDict(frozen=True)


class MealRow(BaseModel):
    """
    One parsed menu row.

    Attributes:
        header: Row label from the first table cell (e.g. "Ebéd")
        cells: Parsed cells, in column order

    Example:
        >>> row = MealRow(header="Ebéd", cells=[MealCell()])
        >>> row.cell_count
        1
    """

    header: str = Field(
        ...,
        description="Row label taken from the first cell of the food row",
        examples=["Ebéd", "Tízórai"]
    )

    cells: List[MealCell] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    @property
    def food_count(self) -> int:
        """Total number of foods across all cells."""
        return sum(len(cell.food) for cell in self.cells)
