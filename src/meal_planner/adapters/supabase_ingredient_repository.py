"""Supabase repository for the ingredient catalogue."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_planner.adapters.supabase_rows import to_row
from meal_planner.domain.models import Ingredient, IngredientCategory
from meal_planner.services.ingredients import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase implementation for ingredients."""

    client: Client

    def list_ingredients(
        self, search: str | None, category: IngredientCategory | None
    ) -> list[Ingredient]:
        """Return ingredients filtered by partial name and category."""
        query = self.client.table("ingredients").select("*")
        if search:
            query = query.ilike("name", f"%{search}%")
        if category:
            query = query.eq("category", category.value)
        response = query.order("name", desc=False).execute()
        return [parse_ingredient(row) for row in response.data or []]

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .eq("id", str(ingredient_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_ingredient(response.data[0])

    def get_ingredients(self, ingredient_ids: list[UUID]) -> dict[UUID, Ingredient]:
        """Return ingredients for the given ids keyed by id."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .in_("id", [str(ingredient_id) for ingredient_id in ingredient_ids])
            .execute()
        )
        ingredients = [parse_ingredient(row) for row in response.data or []]
        return {ingredient.id: ingredient for ingredient in ingredients}

    def create_ingredient(self, payload: dict[str, object]) -> Ingredient:
        """Create an ingredient and return it."""
        response = self.client.table("ingredients").insert(to_row(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create ingredient")
        return parse_ingredient(response.data[0])


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    """Parse an ingredient row into a domain model."""
    return Ingredient(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_gram=float(row.get("calories_per_gram") or 0.0),
        protein_per_gram=float(row.get("protein_per_gram") or 0.0),
        fat_per_gram=float(row.get("fat_per_gram") or 0.0),
        carbs_per_gram=float(row.get("carbs_per_gram") or 0.0),
        category=IngredientCategory.parse(row.get("category")),
    )
