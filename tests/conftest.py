"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipetokens.tokenize.models import IngredientAmount, IngredientSlice, TextSpan

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: marks tests that go through the HTTP surface")


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def sample_ingredient_lines():
    """Ingredient lines as they come from scraped recipe pages."""
    return [
        "1 ½ cup flour",
        "3-4 dl water",
        "2 g salt",
        "½ cup sugar",
        "4 garlics",
        "2 teaspoons baking powder",
        "1 1/2 cups milk, 2-3 tbsp butter",
        "1 lb. ground beef",
        "salt and pepper to taste",
        "200g dark chocolate (70%)",
        "2 rkl öljyä",
        "",
    ]


@pytest.fixture
def make_slice():
    """Factory for IngredientSlice values."""

    def _make(start: int, end: int, amount: float = 1.0, unit: str = "g") -> IngredientSlice:
        return IngredientSlice(
            text_slice=TextSpan(start, end),
            ingredient=IngredientAmount(amount=amount, unit=unit),
        )

    return _make


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def app():
    """FastAPI application with dependency overrides reset after each test."""
    from recipetokens.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Test client for the FastAPI application."""
    return TestClient(app)
