"""Unit tests for the FastAPI menu and profile endpoints."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from little_lemon_menu.handlers.api_handler import create_app, to_menu_item_response
from little_lemon_menu.models.menu_models import DESCRIPTION_PLACEHOLDER, MenuItem, MenuLoadResult, MenuSource
from little_lemon_menu.models.profile_models import UserProfile
from little_lemon_menu.repositories.database import LocalDatabase
from little_lemon_menu.services.menu_service import MenuService
from little_lemon_menu.services.profile_service import ProfileService


@pytest.fixture
def mock_menu_service(sample_items: list[MenuItem]) -> MenuService:
    """Create a mock MenuService serving the sample items."""
    service = MagicMock(spec=MenuService)
    service.load_menu = AsyncMock(
        return_value=MenuLoadResult(items=sample_items, source=MenuSource.CACHE, storage_available=True)
    )
    service.get_image_url = MagicMock(side_effect=lambda item: f"https://images.test.com/{item.image}")
    return service


@pytest.fixture
def mock_profile_service() -> ProfileService:
    """Create a mock ProfileService."""
    return MagicMock(spec=ProfileService)


@pytest.fixture
def client(mock_menu_service: MenuService, mock_profile_service: ProfileService) -> TestClient:
    """Create a test client with mocked dependencies."""
    app = create_app(menu_service=mock_menu_service, profile_service=mock_profile_service)
    return TestClient(app)


@pytest.mark.unit
class TestHealthEndpoint:
    """Test suite for health check endpoint."""

    def test_health_check(self, client: TestClient) -> None:
        """Test health check endpoint returns 200."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


@pytest.mark.unit
class TestMenuEndpoint:
    """Test suite for the menu endpoint."""

    def test_get_menu_unfiltered(self, client: TestClient) -> None:
        """Test that the full menu is returned without filters."""
        response = client.get("/menu")

        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data["items"]] == ["Greek Salad", "Bruschetta", "Lemon Dessert"]
        assert data["total"] == 3
        assert data["source"] == "cache"
        assert data["categories"] == ["desserts", "starters"]
        assert data["error_message"] is None

    def test_get_menu_item_fields(self, client: TestClient) -> None:
        """Test display fields of a returned item."""
        response = client.get("/menu")

        item = response.json()["items"][0]
        assert item["price"] == "12.00"
        assert item["price_display"] == "$12.00"
        assert item["category"] == "starters"
        assert item["image_url"] == "https://images.test.com/greekSalad.jpg"

    def test_get_menu_by_category(self, client: TestClient) -> None:
        """Test filtering by category."""
        response = client.get("/menu", params={"category": "Starters"})

        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data["items"]] == ["Greek Salad", "Bruschetta"]
        assert data["total"] == 3

    def test_get_menu_by_query(self, client: TestClient) -> None:
        """Test filtering by search phrase."""
        response = client.get("/menu", params={"query": "lemon"})

        assert [item["name"] for item in response.json()["items"]] == ["Lemon Dessert"]

    def test_get_menu_query_and_category(self, client: TestClient) -> None:
        """Test that both filters must match."""
        response = client.get("/menu", params={"query": "lemon", "category": "starters"})

        assert response.json()["items"] == []

    def test_get_menu_load_failure_still_renders(
        self, client: TestClient, mock_menu_service: MenuService
    ) -> None:
        """Test that a failed load returns an empty list with an error message."""
        mock_menu_service.load_menu = AsyncMock(return_value=MenuLoadResult(error_message="Could not load menu"))

        response = client.get("/menu")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0
        assert data["source"] == "none"
        assert data["error_message"] == "Could not load menu"

    def test_description_placeholder(self) -> None:
        """Test that items without a description get the placeholder."""
        item = MenuItem(name="Pasta", price=Decimal("18.5"), image="pasta.jpg", category="mains")

        response = to_menu_item_response(item, "https://images.test.com/pasta.jpg")

        assert response.description == DESCRIPTION_PLACEHOLDER
        assert response.price_display == "$18.50"


@pytest.mark.unit
class TestProfileEndpoints:
    """Test suite for profile endpoints."""

    def test_get_profile(self, client: TestClient, mock_profile_service: ProfileService) -> None:
        """Test reading the stored profile."""
        mock_profile_service.load_profile = AsyncMock(
            return_value=UserProfile(first_name="Tilly", email="tilly@example.com", newsletter=False)
        )

        response = client.get("/profile")

        assert response.status_code == 200
        data = response.json()
        assert data["first_name"] == "Tilly"
        assert data["email"] == "tilly@example.com"
        assert data["newsletter"] is False

    def test_save_profile(self, client: TestClient, mock_profile_service: ProfileService) -> None:
        """Test saving the profile."""
        mock_profile_service.save_profile = AsyncMock(return_value=True)

        response = client.put("/profile", json={"first_name": "Tilly", "last_name": "Lemon"})

        assert response.status_code == 200
        assert response.json()["success"] is True
        saved = mock_profile_service.save_profile.call_args[0][0]
        assert saved.first_name == "Tilly"
        assert saved.last_name == "Lemon"
        assert saved.order_statuses is True

    def test_save_profile_failure(self, client: TestClient, mock_profile_service: ProfileService) -> None:
        """Test that a storage failure returns 500."""
        mock_profile_service.save_profile = AsyncMock(return_value=False)

        response = client.put("/profile", json={"first_name": "Tilly"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to save changes. Please try again."

    def test_reset_profile(self, client: TestClient, mock_profile_service: ProfileService) -> None:
        """Test removing the stored profile."""
        mock_profile_service.reset_profile = AsyncMock(return_value=True)

        response = client.delete("/profile")

        assert response.status_code == 200
        mock_profile_service.reset_profile.assert_called_once()

    def test_reset_profile_failure(self, client: TestClient, mock_profile_service: ProfileService) -> None:
        """Test that a storage failure on reset returns 500."""
        mock_profile_service.reset_profile = AsyncMock(return_value=False)

        response = client.delete("/profile")

        assert response.status_code == 500


@pytest.mark.unit
class TestLifespan:
    """Test suite for application shutdown."""

    def test_database_closed_on_shutdown(
        self, mock_menu_service: MenuService, mock_profile_service: ProfileService
    ) -> None:
        """Test that the database handle is closed when the app stops."""
        database = MagicMock(spec=LocalDatabase)
        database.close = AsyncMock()
        app = create_app(
            menu_service=mock_menu_service,
            profile_service=mock_profile_service,
            database=database,
        )

        with TestClient(app) as client:
            client.get("/health")
            database.close.assert_not_called()

        database.close.assert_called_once()
