"""
Test configuration and fixtures for the FastAPI application.

This module provides:
- Environment defaults applied before the application is imported
- FastAPI test client setup
- Raw argument fixtures for both input shapes
"""

# Standard library
import os
import uuid
from typing import Any, AsyncGenerator, Generator
from unittest.mock import patch

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "warning")

# Third-party packages
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

# Local application imports
from main import create_app  # noqa: E402
from tests.test_config import AppTestSettings, get_test_settings  # noqa: E402


@pytest.fixture
def test_settings() -> AppTestSettings:
    """Provide test settings."""
    return get_test_settings()


@pytest.fixture
def test_app(
    test_settings: AppTestSettings,
) -> Generator[FastAPI, None, None]:
    """Create a test FastAPI application with test settings patched in."""
    with (
        patch("shared.core.config.settings", test_settings),
        patch("shared.utils.exception_handlers.settings", test_settings),
    ):
        app = create_app()
        yield app
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client with proper async support."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://testserver", timeout=30.0
    ) as client:
        yield client


@pytest.fixture
def category_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def main_category_update(category_id: str) -> dict[str, Any]:
    """Every field of the main-category update, all valid."""
    return {
        "id": category_id,
        "name": "Electronics",
        "slug": "electronics",
        "description": "Phones, laptops and accessories",
        "image": "categories/electronics/cover.png",
        "isActive": True,
        "order": 2,
        "seoTitle": "Electronics Store",
        "seoDescription": "Top tech and electronics",
        "seoKeywords": "phones,laptops",
    }


@pytest.fixture
def coupon_data() -> dict[str, Any]:
    """Valid coupon creation arguments."""
    return {
        "name": "Summer Sale",
        "code": "SUMMER25",
        "discount": 25,
        "discountUnit": "PERCENT",
        "minimumPurchase": 50.5,
        "expiresAt": "2030-08-31T23:59:59Z",
    }
