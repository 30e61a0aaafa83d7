"""Supabase repository for recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_planner.adapters.supabase_rows import parse_datetime, parse_uuid, to_row
from meal_planner.domain.models import DietaryTag, Recipe, RecipeIngredient
from meal_planner.services.recipes import RecipeRepository

_KNOWN_TAGS = {tag.value for tag in DietaryTag}


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes.

    Recipe ingredients are stored inline as a JSON array of
    ``{"ingredient_id", "quantity_grams"}`` objects.
    """

    client: Client

    def list_recipes(self, max_cooking_time: int | None = None) -> list[Recipe]:
        """Return recipes, optionally bounded by cooking time."""
        query = self.client.table("recipes").select("*")
        if max_cooking_time is not None:
            query = query.lte("cooking_time_minutes", max_cooking_time)
        response = query.order("created_at", desc=False).execute()
        return [parse_recipe(row) for row in response.data or []]

    def list_recent_recipes(self, limit: int) -> list[Recipe]:
        """Return the most recently created recipes."""
        response = (
            self.client.table("recipes")
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def get_recipes(self, recipe_ids: list[UUID]) -> dict[UUID, Recipe]:
        """Return recipes for the given ids keyed by id."""
        response = (
            self.client.table("recipes")
            .select("*")
            .in_("id", [str(recipe_id) for recipe_id in recipe_ids])
            .execute()
        )
        recipes = [parse_recipe(row) for row in response.data or []]
        return {recipe.id: recipe for recipe in recipes}

    def create_recipe(self, user_id: UUID, payload: dict[str, object]) -> Recipe:
        """Create a recipe owned by a user and return it."""
        response = (
            self.client.table("recipes")
            .insert({**to_row(payload), "created_by": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return parse_recipe(response.data[0])

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Update a recipe and return it."""
        response = (
            self.client.table("recipes")
            .update(to_row(payload))
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update recipe")
        return parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()


def parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    raw_ingredients = row.get("ingredients") or []
    raw_tags = row.get("dietary_category") or []
    return Recipe(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        instructions=str(row.get("instructions", "")),
        cooking_time_minutes=int(row.get("cooking_time_minutes") or 0),
        servings=max(int(row.get("servings") or 1), 1),
        ingredients=[
            RecipeIngredient(
                ingredient_id=UUID(str(item["ingredient_id"])),
                quantity_grams=float(item.get("quantity_grams") or 0.0),
            )
            for item in raw_ingredients
            if isinstance(item, dict) and item.get("ingredient_id")
        ],
        dietary_category=[
            DietaryTag(tag) for tag in raw_tags if tag in _KNOWN_TAGS
        ],
        image_url=row.get("image_url"),
        created_by=parse_uuid(row.get("created_by")),
        created_at=parse_datetime(row.get("created_at")),
    )
