"""Request bodies accepted by the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from meal_planner.domain.models import DietaryTag, IngredientCategory, MealSlot


class RecipeIngredientIn(BaseModel):
    ingredient_id: UUID
    quantity_grams: float = Field(gt=0)


class RecipeCreate(BaseModel):
    """Body for creating a recipe."""

    name: str = Field(min_length=1)
    instructions: str = Field(min_length=1)
    cooking_time_minutes: int = Field(gt=0)
    servings: int = Field(default=1, ge=1)
    ingredients: list[RecipeIngredientIn] = Field(min_length=1)
    dietary_category: list[DietaryTag] = Field(
        default_factory=lambda: [DietaryTag.NONE]
    )
    image_url: str | None = None

    @field_validator("name", "instructions")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class RecipeUpdate(BaseModel):
    """Partial recipe update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1)
    instructions: str | None = Field(default=None, min_length=1)
    cooking_time_minutes: int | None = Field(default=None, gt=0)
    servings: int | None = Field(default=None, ge=1)
    ingredients: list[RecipeIngredientIn] | None = Field(default=None, min_length=1)
    dietary_category: list[DietaryTag] | None = None
    image_url: str | None = None


class IngredientCreate(BaseModel):
    """Body for adding an ingredient to the catalogue."""

    name: str = Field(min_length=1)
    calories_per_gram: float = Field(ge=0)
    protein_per_gram: float = Field(ge=0)
    fat_per_gram: float = Field(ge=0)
    carbs_per_gram: float = Field(ge=0)
    category: IngredientCategory = IngredientCategory.OTHER


class PantryAdd(BaseModel):
    ingredient_id: UUID
    quantity_grams: float = Field(gt=0)
    expiry_date: date | None = None


class PantryUpdate(BaseModel):
    quantity_grams: float = Field(ge=0)


class MealPlanCreate(BaseModel):
    """Body for scheduling a recipe."""

    recipe_id: UUID
    plan_date: date
    meal_type: MealSlot
    servings: int = Field(default=1, ge=1)
    notes: str = ""


class MealPlanUpdate(BaseModel):
    plan_date: date | None = None
    meal_type: MealSlot | None = None
    servings: int | None = Field(default=None, ge=1)
    notes: str | None = None


class ShoppingListRequest(BaseModel):
    start_date: date
    end_date: date


class PreferencesUpdate(BaseModel):
    """Partial preferences update.

    Lists replace the stored lists when given. Targets are bounded to
    sensible daily ranges.
    """

    dietary_restrictions: list[DietaryTag] | None = None
    allergies: list[str] | None = None
    disliked_ingredients: list[str] | None = None
    daily_calorie_target: float | None = Field(default=None, ge=500, le=10000)
    daily_protein_target: float | None = Field(default=None, ge=0, le=500)
    daily_carbs_target: float | None = Field(default=None, ge=0, le=1000)
    daily_fat_target: float | None = Field(default=None, ge=0, le=500)

    @field_validator("dietary_restrictions")
    @classmethod
    def _drop_none_tag(cls, value: list[DietaryTag] | None) -> list[DietaryTag] | None:
        if value is None:
            return None
        return [tag for tag in value if tag != DietaryTag.NONE]
