"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from meal_planner.config import Settings
from meal_planner.containers import AppContainer, wire_services
from meal_planner.domain.models import (
    DietaryTag,
    Ingredient,
    IngredientCategory,
    MealPlanEntry,
    MealSlot,
    Pantry,
    PantryItem,
    Recipe,
    RecipeIngredient,
    UserPreferences,
)
from meal_planner.services.ingredients import IngredientRepository
from meal_planner.services.meal_plan import MealPlanRepository
from meal_planner.services.pantry import PantryRepository
from meal_planner.services.recipes import RecipeRepository
from meal_planner.services.users import UserRepository


def make_ingredient(  # noqa: PLR0913
    name: str,
    calories: float = 1.0,
    protein: float = 0.1,
    fat: float = 0.1,
    carbs: float = 0.1,
    category: IngredientCategory = IngredientCategory.OTHER,
) -> Ingredient:
    return Ingredient(
        id=uuid4(),
        name=name,
        calories_per_gram=calories,
        protein_per_gram=protein,
        fat_per_gram=fat,
        carbs_per_gram=carbs,
        category=category,
    )


def make_recipe(  # noqa: PLR0913
    name: str,
    ingredients: list[tuple[Ingredient, float]],
    servings: int = 1,
    cooking_time_minutes: int = 20,
    dietary_category: list[DietaryTag] | None = None,
    created_by: UUID | None = None,
) -> Recipe:
    return Recipe(
        id=uuid4(),
        name=name,
        instructions="Cook it.",
        cooking_time_minutes=cooking_time_minutes,
        servings=servings,
        ingredients=[
            RecipeIngredient(ingredient_id=ingredient.id, quantity_grams=grams)
            for ingredient, grams in ingredients
        ],
        dietary_category=dietary_category or [],
        created_by=created_by,
    )


def make_entry(  # noqa: PLR0913
    user_id: UUID,
    recipe: Recipe,
    plan_date: date,
    meal_type: MealSlot = MealSlot.DINNER,
    servings: int = 1,
) -> MealPlanEntry:
    return MealPlanEntry(
        id=uuid4(),
        user_id=user_id,
        recipe_id=recipe.id,
        plan_date=plan_date,
        meal_type=meal_type,
        servings=servings,
    )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory preferences repository for tests."""

    preferences: dict[UUID, UserPreferences] = field(default_factory=dict)

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        return self.preferences.get(user_id)

    def save_preferences(self, user_id: UUID, preferences: UserPreferences) -> None:
        self.preferences[user_id] = preferences


@dataclass
class InMemoryIngredientRepository(IngredientRepository):
    """In-memory ingredient catalogue for tests."""

    ingredients: dict[UUID, Ingredient] = field(default_factory=dict)

    def add(self, *ingredients: Ingredient) -> None:
        for ingredient in ingredients:
            self.ingredients[ingredient.id] = ingredient

    def list_ingredients(
        self, search: str | None, category: IngredientCategory | None
    ) -> list[Ingredient]:
        results = [
            ingredient
            for ingredient in self.ingredients.values()
            if (not search or search.lower() in ingredient.name.lower())
            and (category is None or ingredient.category == category)
        ]
        return sorted(results, key=lambda ingredient: ingredient.name)

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        return self.ingredients.get(ingredient_id)

    def get_ingredients(self, ingredient_ids: list[UUID]) -> dict[UUID, Ingredient]:
        return {
            ingredient_id: self.ingredients[ingredient_id]
            for ingredient_id in ingredient_ids
            if ingredient_id in self.ingredients
        }

    def create_ingredient(self, payload: dict[str, object]) -> Ingredient:
        ingredient = Ingredient(
            id=uuid4(),
            name=str(payload["name"]),
            calories_per_gram=float(payload["calories_per_gram"]),
            protein_per_gram=float(payload["protein_per_gram"]),
            fat_per_gram=float(payload["fat_per_gram"]),
            carbs_per_gram=float(payload["carbs_per_gram"]),
            category=IngredientCategory.parse(payload.get("category")),
        )
        self.ingredients[ingredient.id] = ingredient
        return ingredient


@dataclass
class InMemoryPantryRepository(PantryRepository):
    """In-memory pantry repository for tests."""

    items: dict[UUID, list[PantryItem]] = field(default_factory=dict)

    def stock(
        self, user_id: UUID, ingredient: Ingredient, quantity_grams: float
    ) -> PantryItem:
        item = PantryItem(
            id=uuid4(), ingredient_id=ingredient.id, quantity_grams=quantity_grams
        )
        return self.create_item(user_id, item)

    def get_pantry(self, user_id: UUID) -> Pantry:
        return Pantry(user_id=user_id, items=list(self.items.get(user_id, [])))

    def create_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        stored = replace(item, added_at=datetime.now(UTC))
        self.items.setdefault(user_id, []).append(stored)
        return stored

    def update_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        self.items[user_id] = [
            item if existing.id == item.id else existing
            for existing in self.items.get(user_id, [])
        ]
        return item

    def remove_item(self, user_id: UUID, item_id: UUID) -> None:
        self.items[user_id] = [
            existing
            for existing in self.items.get(user_id, [])
            if existing.id != item_id
        ]


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)

    def add(self, *recipes: Recipe) -> None:
        for recipe in recipes:
            self.recipes[recipe.id] = recipe

    def list_recipes(self, max_cooking_time: int | None = None) -> list[Recipe]:
        return [
            recipe
            for recipe in self.recipes.values()
            if max_cooking_time is None
            or recipe.cooking_time_minutes <= max_cooking_time
        ]

    def list_recent_recipes(self, limit: int) -> list[Recipe]:
        oldest = datetime.min.replace(tzinfo=UTC)
        ordered = sorted(
            self.recipes.values(),
            key=lambda recipe: recipe.created_at or oldest,
            reverse=True,
        )
        return ordered[:limit]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def get_recipes(self, recipe_ids: list[UUID]) -> dict[UUID, Recipe]:
        return {
            recipe_id: self.recipes[recipe_id]
            for recipe_id in recipe_ids
            if recipe_id in self.recipes
        }

    def create_recipe(self, user_id: UUID, payload: dict[str, object]) -> Recipe:
        recipe = _apply_recipe_payload(
            Recipe(
                id=uuid4(),
                name="",
                instructions="",
                cooking_time_minutes=0,
                created_by=user_id,
                created_at=datetime.now(UTC),
            ),
            payload,
        )
        self.recipes[recipe.id] = recipe
        return recipe

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        recipe = _apply_recipe_payload(self.recipes[recipe_id], payload)
        self.recipes[recipe_id] = recipe
        return recipe

    def delete_recipe(self, recipe_id: UUID) -> None:
        self.recipes.pop(recipe_id, None)


def _apply_recipe_payload(recipe: Recipe, payload: dict[str, object]) -> Recipe:
    changes: dict[str, object] = {
        key: value
        for key, value in payload.items()
        if key
        in {
            "name",
            "instructions",
            "cooking_time_minutes",
            "servings",
            "dietary_category",
            "image_url",
        }
    }
    if "ingredients" in payload:
        changes["ingredients"] = [
            RecipeIngredient(
                ingredient_id=item["ingredient_id"],
                quantity_grams=item["quantity_grams"],
            )
            for item in payload["ingredients"]
        ]
    return replace(recipe, **changes)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    entries: dict[UUID, MealPlanEntry] = field(default_factory=dict)

    def add(self, *entries: MealPlanEntry) -> None:
        for entry in entries:
            self.entries[entry.id] = entry

    def list_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealPlanEntry]:
        matching = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.plan_date <= end
        ]
        return sorted(matching, key=lambda entry: entry.plan_date)

    def get_entry(self, entry_id: UUID) -> MealPlanEntry | None:
        return self.entries.get(entry_id)

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> MealPlanEntry:
        entry = MealPlanEntry(
            id=uuid4(),
            user_id=user_id,
            recipe_id=payload["recipe_id"],
            plan_date=payload["plan_date"],
            meal_type=MealSlot(payload["meal_type"]),
            servings=int(payload.get("servings", 1)),
            notes=str(payload.get("notes", "")),
        )
        self.entries[entry.id] = entry
        return entry

    def update_entry(
        self, entry_id: UUID, payload: dict[str, object]
    ) -> MealPlanEntry:
        entry = replace(self.entries[entry_id], **payload)
        self.entries[entry_id] = entry
        return entry

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiJ9.eyJyb2xlIjoic2VydmljZV9yb2xlIn0.signature"
        ),
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def ingredient_repository() -> InMemoryIngredientRepository:
    return InMemoryIngredientRepository()


@pytest.fixture
def pantry_repository() -> InMemoryPantryRepository:
    return InMemoryPantryRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    ingredient_repository: InMemoryIngredientRepository,
    pantry_repository: InMemoryPantryRepository,
    recipe_repository: InMemoryRecipeRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
) -> AppContainer:
    return wire_services(
        settings=settings,
        user_repository=user_repository,
        ingredient_repository=ingredient_repository,
        pantry_repository=pantry_repository,
        recipe_repository=recipe_repository,
        meal_plan_repository=meal_plan_repository,
    )
