"""Service-level errors surfaced to the API layer."""


class MealPlannerError(Exception):
    """Base error for meal planner services."""


class NotFoundError(MealPlannerError):
    """Raised when a requested entity does not exist."""


class PermissionDeniedError(MealPlannerError):
    """Raised when a user acts on an entity they do not own."""
