"""
Pydantic models for parsed menu items and their nutrient data.

Both models are immutable value records created once per table cell.
"""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Order in which nutrient values appear in a nutrient cell
NUTRIENT_FIELDS: Tuple[str, ...] = (
    'energy',
    'carbohydrate',
    'protein',
    'sugar',
    'fat',
    'salt',
    'saturated_fat',
)


class Food(BaseModel):
    """
    A single menu item.

    Attributes:
        name: Food name, trimmed and without line breaks
        allergens: Allergen codes as written in the menu (e.g. "1,7,9")

    Example:
        >>> Food(name="Gulyásleves", allergens="1,9")
        Food(name='Gulyásleves', allergens='1,9')
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Food name",
        examples=["Gulyásleves", "Lecsó (házi)"]
    )

    allergens: Optional[str] = Field(
        default=None,
        description="Comma separated allergen codes, if listed",
        examples=["1,9"]
    )

    model_config = ConfigDict(frozen=True)

    def label(self) -> str:
        """Display form used in exports: "name (allergens)" or just the name."""
        if self.allergens:
            return f"{self.name} ({self.allergens})"
        return self.name


class Nutrients(BaseModel):
    """
    Nutrient summary of one menu cell.

    All seven values are required; a cell with fewer values has no
    nutrient record at all.
    """

    energy: float = Field(..., description="Energy (kcal)")
    carbohydrate: float = Field(..., description="Carbohydrate (g)")
    protein: float = Field(..., description="Protein (g)")
    sugar: float = Field(..., description="Sugar (g)")
    fat: float = Field(..., description="Fat (g)")
    salt: float = Field(..., description="Salt (g)")
    saturated_fat: float = Field(..., description="Saturated fat (g)")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_values(cls, values: Sequence[float]) -> 'Nutrients':
        """
        Build a record by position, in NUTRIENT_FIELDS order.

        Values past the seventh are ignored.

        Raises:
            ValueError: If fewer than seven values are given
        """
        if len(values) < len(NUTRIENT_FIELDS):
            raise ValueError(
                f"Expected at least {len(NUTRIENT_FIELDS)} nutrient values, "
                f"got {len(values)}: {list(values)}"
            )
        return cls(**dict(zip(NUTRIENT_FIELDS, values)))
