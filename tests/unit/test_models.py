"""
Unit tests for the Pydantic models.
"""

import pytest
from pydantic import ValidationError

from menu_nutrition.models import Food, MealCell, MealRow, Nutrients, NUTRIENT_FIELDS


@pytest.fixture
def sample_nutrients():
    return Nutrients(
        energy=250,
        carbohydrate=30.5,
        protein=8,
        sugar=4.2,
        fat=9,
        salt=1.1,
        saturated_fat=3
    )


class TestFood:

    def test_allergens_default_to_none(self):
        assert Food(name="Alma").allergens is None

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Food(name="")

    def test_food_is_immutable(self):
        food = Food(name="Alma")

        with pytest.raises(ValidationError):
            food.name = "Körte"

    def test_label_with_allergens(self):
        assert Food(name="Gulyásleves", allergens="1,9").label() == "Gulyásleves (1,9)"

    def test_label_without_allergens(self):
        assert Food(name="Alma").label() == "Alma"


class TestNutrients:

    def test_field_order(self):
        assert NUTRIENT_FIELDS == (
            'energy', 'carbohydrate', 'protein', 'sugar', 'fat', 'salt', 'saturated_fat'
        )
        assert tuple(Nutrients.model_fields) == NUTRIENT_FIELDS

    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            Nutrients(energy=250, carbohydrate=30)

    def test_from_values(self, sample_nutrients):
        assert Nutrients.from_values([250, 30.5, 8, 4.2, 9, 1.1, 3]) == sample_nutrients

    def test_from_values_rejects_short_list(self):
        with pytest.raises(ValueError, match="at least 7"):
            Nutrients.from_values([1, 2, 3, 4, 5, 6])

    def test_nutrients_are_immutable(self, sample_nutrients):
        with pytest.raises(ValidationError):
            sample_nutrients.energy = 0


class TestMealRow:

    def test_counts(self, sample_nutrients):
        row = MealRow(
            header="Ebéd",
            cells=[
                MealCell(food=[Food(name="Leves"), Food(name="Főzelék")], nutrients=sample_nutrients),
                MealCell(food=[Food(name="Alma")]),
                MealCell(),
            ]
        )

        assert row.cell_count == 3
        assert row.food_count == 3

    def test_empty_cell_defaults(self):
        cell = MealCell()

        assert cell.food == []
        assert cell.nutrients is None

    def test_serializes_to_dict(self, sample_nutrients):
        row = MealRow(
            header="Ebéd",
            cells=[MealCell(food=[Food(name="Leves", allergens="1")], nutrients=sample_nutrients)]
        )

        data = row.model_dump()

        assert data['header'] == "Ebéd"
        assert data['cells'][0]['food'] == [{'name': "Leves", 'allergens': "1"}]
        assert data['cells'][0]['nutrients']['energy'] == 250.0
