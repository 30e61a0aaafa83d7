"""Core domain models for the meal planner."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class IngredientCategory(StrEnum):
    """Shopping aisle an ingredient belongs to."""

    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    PROTEIN = "protein"
    GRAIN = "grain"
    DAIRY = "dairy"
    SPICE = "spice"
    OIL = "oil"
    NUT = "nut"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> "IngredientCategory":
        """Return the category for a raw value, falling back to OTHER."""
        try:
            return cls(str(value))
        except ValueError:
            return cls.OTHER


class DietaryTag(StrEnum):
    """Dietary category a recipe satisfies or a user requires."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    NUT_FREE = "nut-free"
    LOW_CARB = "low-carb"
    KETO = "keto"
    PALEO = "paleo"
    NO_COOK = "no-cook"
    NONE = "none"


class MealSlot(StrEnum):
    """Sub-division of a planned day, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Ingredient:
    """Ingredient with per-gram macronutrient coefficients."""

    id: UUID
    name: str
    calories_per_gram: float
    protein_per_gram: float
    fat_per_gram: float
    carbs_per_gram: float
    category: IngredientCategory = IngredientCategory.OTHER


@dataclass(frozen=True)
class RecipeIngredient:
    """Quantity of an ingredient used by a recipe."""

    ingredient_id: UUID
    quantity_grams: float


@dataclass(frozen=True)
class Recipe:
    """Recipe with ingredient references."""

    id: UUID
    name: str
    instructions: str
    cooking_time_minutes: int
    servings: int = 1
    ingredients: list[RecipeIngredient] = field(default_factory=list)
    dietary_category: list[DietaryTag] = field(default_factory=list)
    image_url: str | None = None
    created_by: UUID | None = None
    created_at: datetime | None = None

    def ingredient_ids(self) -> list[UUID]:
        """Return distinct ingredient ids in recipe order."""
        return list(dict.fromkeys(item.ingredient_id for item in self.ingredients))


@dataclass(frozen=True)
class PantryItem:
    """Stocked quantity of an ingredient."""

    id: UUID
    ingredient_id: UUID
    quantity_grams: float
    expiry_date: date | None = None
    added_at: datetime | None = None


@dataclass(frozen=True)
class Pantry:
    """A user's pantry contents."""

    user_id: UUID
    items: list[PantryItem] = field(default_factory=list)

    def ingredient_ids(self) -> set[UUID]:
        """Return the set of stocked ingredient ids."""
        return {item.ingredient_id for item in self.items}


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets."""

    calories: float = 2000
    protein: float = 50
    carbs: float = 250
    fat: float = 70


@dataclass(frozen=True)
class UserPreferences:
    """Dietary preferences and daily targets for a user."""

    dietary_restrictions: list[DietaryTag] = field(default_factory=list)
    allergies: list[str] = field(default_factory=list)
    disliked_ingredients: list[str] = field(default_factory=list)
    targets: MacroTargets = field(default_factory=MacroTargets)


@dataclass(frozen=True)
class MealPlanEntry:
    """A recipe scheduled into a meal slot on a calendar day."""

    id: UUID
    user_id: UUID
    recipe_id: UUID
    plan_date: date
    meal_type: MealSlot
    servings: int = 1
    notes: str = ""
