"""API routers for the recipetokens application."""

from recipetokens.routers.ingredients import router as ingredients_router

__all__ = [
    "ingredients_router",
]
