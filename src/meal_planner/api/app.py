"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meal_planner.api.ingredients import router as ingredients_router
from meal_planner.api.meal_plan import router as meal_plan_router
from meal_planner.api.nutrition import router as nutrition_router
from meal_planner.api.pantry import router as pantry_router
from meal_planner.api.recipes import router as recipes_router
from meal_planner.api.shopping_list import router as shopping_list_router
from meal_planner.api.users import router as users_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.services.errors import NotFoundError, PermissionDeniedError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Planner")
    app.state.container = container

    app.include_router(recipes_router)
    app.include_router(ingredients_router)
    app.include_router(pantry_router)
    app.include_router(meal_plan_router)
    app.include_router(nutrition_router)
    app.include_router(shopping_list_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return _failure(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied(
        request: Request, exc: PermissionDeniedError
    ) -> JSONResponse:
        return _failure(status.HTTP_403_FORBIDDEN, str(exc))

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "errors": [_describe_error(error) for error in exc.errors()],
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    return app


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


def _describe_error(error: dict) -> str:
    """Format a pydantic error as ``field: message``."""
    location = ".".join(
        str(part) for part in error.get("loc", ()) if part not in {"body", "query"}
    )
    message = str(error.get("msg", "Invalid value"))
    return f"{location}: {message}" if location else message
