"""Per-activation menu browsing state."""

import logging

from little_lemon_menu.models.menu_models import FilterState, MenuItem, MenuSource
from little_lemon_menu.services.menu_filter import filter_menu
from little_lemon_menu.services.menu_service import MenuService

logger = logging.getLogger(__name__)


class MenuSession:
    """State of one menu browsing session.

    Holds the full menu list and the current filter state. The visible list is
    recomputed from both on every access, so any change to the list, query or
    category is reflected immediately.
    """

    def __init__(self, menu_service: MenuService) -> None:
        self.menu_service = menu_service
        self.items: list[MenuItem] = []
        self.filter_state = FilterState()
        self.source = MenuSource.NONE
        self.error_message: str | None = None

    async def activate(self) -> None:
        """Load the menu, replacing any previously loaded list."""
        result = await self.menu_service.load_menu()
        self.items = list(result.items)
        self.source = result.source
        self.error_message = result.error_message

        if self.error_message:
            logger.warning(f"Menu session activated without a menu: {self.error_message}")

    def set_query(self, query: str) -> None:
        self.filter_state = self.filter_state.with_query(query)

    def select_category(self, category: str) -> None:
        """Toggle the category filter; selecting the active category clears it."""
        self.filter_state = self.filter_state.select_category(category)

    def clear_filters(self) -> None:
        self.filter_state = FilterState()

    @property
    def visible_items(self) -> list[MenuItem]:
        return filter_menu(self.items, self.filter_state)

    @property
    def categories(self) -> list[str]:
        """Distinct categories of the loaded menu, lower-cased and sorted."""
        return sorted({item.category.lower() for item in self.items})
