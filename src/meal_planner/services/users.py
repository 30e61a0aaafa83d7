"""User preference services."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from meal_planner.domain.models import DietaryTag, UserPreferences

_TARGET_FIELDS = {
    "daily_calorie_target": "calories",
    "daily_protein_target": "protein",
    "daily_carbs_target": "carbs",
    "daily_fat_target": "fat",
}


class UserRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_preferences(self, user_id: UUID) -> UserPreferences | None:
        """Return stored preferences for a user, if any."""

    def save_preferences(self, user_id: UUID, preferences: UserPreferences) -> None:
        """Create or replace a user's preferences."""


@dataclass
class UserService:
    """Application service for user preferences."""

    repository: UserRepository

    def get_preferences(self, user_id: UUID) -> UserPreferences:
        """Return the user's preferences or the defaults."""
        return self.repository.get_preferences(user_id) or UserPreferences()

    def update_preferences(
        self, user_id: UUID, updates: dict[str, object]
    ) -> UserPreferences:
        """Merge updates into stored preferences.

        List fields are replaced only when present in ``updates``; targets
        use the ``daily_*_target`` keys.
        """
        current = self.get_preferences(user_id)
        targets = current.targets
        for key, attribute in _TARGET_FIELDS.items():
            value = updates.get(key)
            if value is not None:
                targets = replace(targets, **{attribute: float(value)})

        restrictions = updates.get("dietary_restrictions")
        allergies = updates.get("allergies")
        dislikes = updates.get("disliked_ingredients")
        updated = UserPreferences(
            dietary_restrictions=(
                [DietaryTag(tag) for tag in restrictions]
                if isinstance(restrictions, list)
                else current.dietary_restrictions
            ),
            allergies=(
                [str(item) for item in allergies]
                if isinstance(allergies, list)
                else current.allergies
            ),
            disliked_ingredients=(
                [str(item) for item in dislikes]
                if isinstance(dislikes, list)
                else current.disliked_ingredients
            ),
            targets=targets,
        )
        self.repository.save_preferences(user_id, updated)
        return updated
