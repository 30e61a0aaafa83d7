"""Tests for pantry matching and stock rules."""

from datetime import date
from uuid import uuid4

import pytest

from meal_planner.domain.models import Pantry, PantryItem
from meal_planner.domain.pantry import add_ingredient, has_ingredient, match_pantry


def test_two_of_three_ingredients_stocked() -> None:
    a, b, c = uuid4(), uuid4(), uuid4()

    match = match_pantry([a, b, c], {a, b})

    assert match.match_percentage == pytest.approx(66.667, abs=0.001)
    assert match.missing_count == 1


def test_empty_recipe_matches_nothing() -> None:
    match = match_pantry([], {uuid4()})

    assert match.match_percentage == 0
    assert match.missing_count == 0


def test_duplicate_recipe_ingredients_count_once() -> None:
    a, b = uuid4(), uuid4()

    match = match_pantry([a, a, b], {a})

    assert match.match_percentage == 50
    assert match.missing_count == 1


def test_full_and_empty_pantry_bounds() -> None:
    ids = [uuid4(), uuid4()]

    assert match_pantry(ids, set(ids)).match_percentage == 100
    assert match_pantry(ids, set()).missing_count == len(ids)


def test_has_ingredient_checks_presence_and_quantity() -> None:
    ingredient_id = uuid4()
    pantry = Pantry(
        user_id=uuid4(),
        items=[PantryItem(id=uuid4(), ingredient_id=ingredient_id, quantity_grams=200)],
    )

    assert has_ingredient(pantry, ingredient_id)
    assert has_ingredient(pantry, ingredient_id, 200)
    assert not has_ingredient(pantry, ingredient_id, 250)
    assert not has_ingredient(pantry, uuid4())


def test_add_ingredient_merges_existing_item() -> None:
    ingredient_id = uuid4()
    existing = PantryItem(
        id=uuid4(),
        ingredient_id=ingredient_id,
        quantity_grams=100,
        expiry_date=date(2024, 6, 1),
    )
    pantry = Pantry(user_id=uuid4(), items=[existing])

    item, existed = add_ingredient(pantry, ingredient_id, 50)

    assert existed
    assert item.id == existing.id
    assert item.quantity_grams == 150
    assert item.expiry_date == date(2024, 6, 1)


def test_add_ingredient_overwrites_expiry_when_given() -> None:
    ingredient_id = uuid4()
    pantry = Pantry(
        user_id=uuid4(),
        items=[
            PantryItem(
                id=uuid4(),
                ingredient_id=ingredient_id,
                quantity_grams=100,
                expiry_date=date(2024, 6, 1),
            )
        ],
    )

    item, _ = add_ingredient(pantry, ingredient_id, 10, date(2024, 7, 1))

    assert item.expiry_date == date(2024, 7, 1)


def test_add_ingredient_creates_new_item() -> None:
    ingredient_id = uuid4()

    item, existed = add_ingredient(Pantry(user_id=uuid4()), ingredient_id, 75)

    assert not existed
    assert item.ingredient_id == ingredient_id
    assert item.quantity_grams == 75
