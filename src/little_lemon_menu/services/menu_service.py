"""Menu service implementing the cache-first menu load."""

import asyncio
import logging
import time

from little_lemon_menu.models.menu_models import MenuItem, MenuLoadResult, MenuSource
from little_lemon_menu.observability import traced
from little_lemon_menu.observability.metrics import (
    record_cache_write_failure,
    record_menu_fetch_duration,
    record_menu_fetch_failure,
    record_menu_load,
)
from little_lemon_menu.repositories.menu_repository import MenuRepository
from little_lemon_menu.services.menu_api_client import MenuApiClient

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Could not load menu"


class MenuService:
    """Service deciding between the local menu cache and the remote menu API.

    Local storage is preferred whenever it holds any items. The remote API is
    consulted only when the cache is empty or local storage is unavailable,
    and its result is written back to the cache on a best-effort basis.
    """

    def __init__(self, api_client: MenuApiClient, menu_repository: MenuRepository) -> None:
        """Initialize the MenuService.

        Args:
            api_client: Client for the remote menu endpoint
            menu_repository: Local menu cache
        """
        self.api_client = api_client
        self.menu_repository = menu_repository
        self._load_lock = asyncio.Lock()

    @traced("load_menu", service_name="little-lemon-menu")
    async def load_menu(self) -> MenuLoadResult:
        """Load the full menu list for a session.

        This method orchestrates the complete load flow:
        1. Initialize local storage (remote-only mode if that fails)
        2. Return cached items if there are any
        3. Otherwise fetch the menu from the remote API
        4. Write the fetched items back to local storage (best-effort)

        Loads run one at a time, so a load started while another is fetching
        reads the items that load cached instead of fetching again.

        Returns:
            MenuLoadResult with the items and where they came from
        """
        async with self._load_lock:
            return await self._load_menu()

    async def _load_menu(self) -> MenuLoadResult:
        # Step 1: Initialize local storage
        storage_available = await self.menu_repository.initialize()
        if not storage_available:
            logger.warning("Loading menu in remote-only mode")

        # Step 2: Cache-first read
        if storage_available:
            cached_items = await self.menu_repository.read_all()
            if cached_items:
                logger.info(f"Loaded {len(cached_items)} menu items from local cache")
                record_menu_load(MenuSource.CACHE.value, len(cached_items))
                return MenuLoadResult(
                    items=cached_items,
                    source=MenuSource.CACHE,
                    storage_available=True,
                )

        # Step 3: Remote fetch
        items = await self._fetch_remote_items()
        if items is None:
            record_menu_load(MenuSource.NONE.value, 0)
            return MenuLoadResult(
                items=[],
                source=MenuSource.NONE,
                storage_available=storage_available,
                error_message=LOAD_FAILED_MESSAGE,
            )

        # Step 4: Persist for the next session
        if storage_available:
            saved = await self.menu_repository.replace_all(items)
            if not saved:
                logger.warning("Fetched menu could not be cached, it will be fetched again next session")
                record_cache_write_failure()

        logger.info(f"Loaded {len(items)} menu items from remote API")
        record_menu_load(MenuSource.REMOTE.value, len(items))
        return MenuLoadResult(
            items=items,
            source=MenuSource.REMOTE,
            storage_available=storage_available,
        )

    def get_image_url(self, item: MenuItem) -> str:
        """Resolve the display URL for a menu item's image."""
        return self.api_client.get_image_url(item.image)

    async def _fetch_remote_items(self) -> list[MenuItem] | None:
        """Fetch the menu from the remote API, recording duration and failures."""
        started = time.perf_counter()
        items = await self.api_client.get_menu_items()
        record_menu_fetch_duration(time.perf_counter() - started)

        if items is None:
            logger.error("Remote menu fetch failed")
            record_menu_fetch_failure()

        return items
