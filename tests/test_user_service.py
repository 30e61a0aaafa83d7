"""Tests for user preferences."""

from uuid import uuid4

from meal_planner.domain.models import DietaryTag, MacroTargets, UserPreferences
from meal_planner.services.users import UserService
from tests.conftest import InMemoryUserRepository


def test_defaults_when_nothing_stored() -> None:
    service = UserService(InMemoryUserRepository())

    preferences = service.get_preferences(uuid4())

    assert preferences == UserPreferences()
    assert preferences.targets == MacroTargets(
        calories=2000, protein=50, carbs=250, fat=70
    )


def test_update_merges_only_given_fields() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    user_id = uuid4()
    repository.save_preferences(
        user_id,
        UserPreferences(
            dietary_restrictions=[DietaryTag.VEGETARIAN],
            allergies=["shellfish"],
            disliked_ingredients=["olives"],
        ),
    )

    updated = service.update_preferences(
        user_id, {"allergies": ["peanuts"], "daily_protein_target": 120}
    )

    assert updated.dietary_restrictions == [DietaryTag.VEGETARIAN]
    assert updated.allergies == ["peanuts"]
    assert updated.disliked_ingredients == ["olives"]
    assert updated.targets.protein == 120
    assert updated.targets.calories == 2000
    assert repository.preferences[user_id] == updated


def test_update_can_clear_lists() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    user_id = uuid4()
    repository.save_preferences(user_id, UserPreferences(allergies=["milk"]))

    updated = service.update_preferences(
        user_id, {"allergies": [], "dietary_restrictions": ["vegan"]}
    )

    assert updated.allergies == []
    assert updated.dietary_restrictions == [DietaryTag.VEGAN]
