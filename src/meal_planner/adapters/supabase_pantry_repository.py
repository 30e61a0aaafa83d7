"""Supabase repository for pantry items."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_planner.adapters.supabase_rows import parse_date, parse_datetime, to_row
from meal_planner.domain.models import Pantry, PantryItem
from meal_planner.services.pantry import PantryRepository


@dataclass
class SupabasePantryRepository(PantryRepository):
    """Supabase implementation for pantries, one row per stocked ingredient."""

    client: Client

    def get_pantry(self, user_id: UUID) -> Pantry:
        """Return the user's pantry items in the order they were added."""
        response = (
            self.client.table("pantry_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("added_at", desc=False)
            .execute()
        )
        return Pantry(
            user_id=user_id,
            items=[_parse_item(row) for row in response.data or []],
        )

    def create_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        """Insert a pantry item and return it."""
        response = (
            self.client.table("pantry_items")
            .insert(
                to_row(
                    {
                        "id": item.id,
                        "user_id": user_id,
                        "ingredient_id": item.ingredient_id,
                        "quantity_grams": item.quantity_grams,
                        "expiry_date": item.expiry_date,
                    }
                )
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add pantry item")
        return _parse_item(response.data[0])

    def update_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        """Replace a pantry item's quantity and expiry."""
        response = (
            self.client.table("pantry_items")
            .update(
                to_row(
                    {
                        "quantity_grams": item.quantity_grams,
                        "expiry_date": item.expiry_date,
                    }
                )
            )
            .eq("id", str(item.id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update pantry item")
        return _parse_item(response.data[0])

    def remove_item(self, user_id: UUID, item_id: UUID) -> None:
        """Remove a pantry item if present."""
        self.client.table("pantry_items").delete().eq("id", str(item_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_item(row: dict[str, object]) -> PantryItem:
    return PantryItem(
        id=UUID(str(row["id"])),
        ingredient_id=UUID(str(row["ingredient_id"])),
        quantity_grams=float(row.get("quantity_grams") or 0.0),
        expiry_date=parse_date(row.get("expiry_date")),
        added_at=parse_datetime(row.get("added_at")),
    )
