"""Client for the remote menu JSON endpoint."""

import logging

import httpx

from little_lemon_menu.models.menu_models import MenuItem, normalize_menu_entry

logger = logging.getLogger(__name__)

DEFAULT_MENU_URL = (
    "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/Working-With-Data-API/main/capstone.json"
)
DEFAULT_IMAGE_BASE_URL = (
    "https://github.com/Meta-Mobile-Developer-PC/Working-With-Data-API/blob/main/images"
)


class MenuApiClient:
    """HTTP client for fetching the full menu list.

    The endpoint is a single unauthenticated GET returning
    ``{"menu": [{"name", "price", "description", "image", "category"?}, ...]}``.
    """

    def __init__(
        self,
        menu_url: str = DEFAULT_MENU_URL,
        image_base_url: str = DEFAULT_IMAGE_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the menu API client.

        Args:
            menu_url: URL of the menu JSON document
            image_base_url: Base URL that image filenames are appended to
            timeout_seconds: Request timeout for the menu fetch
        """
        self.menu_url = menu_url
        self.image_base_url = image_base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    async def get_menu_items(self) -> list[MenuItem] | None:
        """Fetch and normalize the full menu list.

        Entries without a category are assigned the default category.

        Returns:
            List of MenuItem objects, empty list if the menu is empty, or None on failure
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(self.menu_url)
                response.raise_for_status()
                data = response.json()

        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            logger.error(f"Failed to fetch menu from {self.menu_url}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Menu response from {self.menu_url} is not valid JSON: {e}")
            return None

        entries = data.get("menu") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            logger.error(f"Menu response from {self.menu_url} has no menu list")
            return None

        try:
            return [MenuItem(**normalize_menu_entry(entry)) for entry in entries]
        except (TypeError, ValueError) as e:
            logger.error(f"Menu response from {self.menu_url} contains an invalid entry: {e}")
            return None

    def get_image_url(self, image: str) -> str:
        """Resolve an image filename to its display URL.

        The URL is built by concatenation only; it is not checked for reachability.

        Args:
            image: Bare image filename (e.g., "greekSalad.jpg")

        Returns:
            Fully-qualified image URL
        """
        return f"{self.image_base_url}/{image}?raw=true"
