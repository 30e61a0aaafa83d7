"""Supabase repository for meal plan entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from meal_planner.adapters.supabase_rows import parse_date, to_row
from meal_planner.domain.models import MealPlanEntry, MealSlot
from meal_planner.services.meal_plan import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plan entries.

    ``plan_date`` is a ``date`` column, so range filters compare whole days.
    """

    client: Client

    def list_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealPlanEntry]:
        """Return entries between two days, inclusive."""
        response = (
            self.client.table("meal_plan_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("plan_date", start.isoformat())
            .lte("plan_date", end.isoformat())
            .order("plan_date", desc=False)
            .order("meal_type", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, entry_id: UUID) -> MealPlanEntry | None:
        """Return an entry by id, if present."""
        response = (
            self.client.table("meal_plan_entries")
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> MealPlanEntry:
        """Create an entry for a user and return it."""
        response = (
            self.client.table("meal_plan_entries")
            .insert({**to_row(payload), "user_id": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan entry")
        return _parse_entry(response.data[0])

    def update_entry(
        self, entry_id: UUID, payload: dict[str, object]
    ) -> MealPlanEntry:
        """Update an entry and return it."""
        response = (
            self.client.table("meal_plan_entries")
            .update(to_row(payload))
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal plan entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""
        self.client.table("meal_plan_entries").delete().eq(
            "id", str(entry_id)
        ).execute()


def _parse_entry(row: dict[str, object]) -> MealPlanEntry:
    plan_date = parse_date(row.get("plan_date"))
    if plan_date is None:
        raise ValueError(f"Meal plan entry {row.get('id')} has no plan_date")
    return MealPlanEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        recipe_id=UUID(str(row["recipe_id"])),
        plan_date=plan_date,
        meal_type=MealSlot(str(row.get("meal_type"))),
        servings=max(int(row.get("servings") or 1), 1),
        notes=str(row.get("notes") or ""),
    )
