"""Supabase repository for user preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from meal_planner.domain.models import DietaryTag, MacroTargets, UserPreferences
from meal_planner.services.users import UserRepository

_KNOWN_TAGS = {tag.value for tag in DietaryTag}


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user preferences."""

    client: Client

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return the stored preferences for a user."""
        response = (
            self.client.table("user_preferences")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preferences(response.data[0])

    def save_preferences(self, user_id: UUID, preferences: UserPreferences) -> None:
        """Upsert a user's preferences."""
        self.client.table("user_preferences").upsert(
            {
                "user_id": str(user_id),
                "dietary_restrictions": [
                    tag.value for tag in preferences.dietary_restrictions
                ],
                "allergies": preferences.allergies,
                "disliked_ingredients": preferences.disliked_ingredients,
                "daily_calorie_target": preferences.targets.calories,
                "daily_protein_target": preferences.targets.protein,
                "daily_carbs_target": preferences.targets.carbs,
                "daily_fat_target": preferences.targets.fat,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_preferences(row: dict[str, object]) -> UserPreferences:
    defaults = MacroTargets()
    return UserPreferences(
        dietary_restrictions=[
            DietaryTag(tag)
            for tag in row.get("dietary_restrictions") or []
            if tag in _KNOWN_TAGS and tag != DietaryTag.NONE
        ],
        allergies=[str(item) for item in row.get("allergies") or []],
        disliked_ingredients=[
            str(item) for item in row.get("disliked_ingredients") or []
        ],
        targets=MacroTargets(
            calories=_target(row, "daily_calorie_target", defaults.calories),
            protein=_target(row, "daily_protein_target", defaults.protein),
            carbs=_target(row, "daily_carbs_target", defaults.carbs),
            fat=_target(row, "daily_fat_target", defaults.fat),
        ),
    )


def _target(row: dict[str, object], key: str, default: float) -> float:
    value = row.get(key)
    if isinstance(value, int | float):
        return float(value)
    return default
