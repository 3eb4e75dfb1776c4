"""Local menu cache repository.

Following the pattern used across the service, expected storage failures are
reported with simple return values (False / empty list) and logged, rather
than raised to the caller.
"""

import logging

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from little_lemon_menu.models.menu_models import MenuItem
from little_lemon_menu.repositories.database import LocalDatabase, MenuRow

logger = logging.getLogger(__name__)


class MenuRepository:
    """Repository holding the durable local copy of the menu.

    The cache is never patched incrementally: every save discards all stored
    items and writes the new list in one transaction.
    """

    def __init__(self, database: LocalDatabase) -> None:
        """Initialize repository.

        Args:
            database: Local database handle shared with other repositories
        """
        self.database = database
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Whether initialize() has succeeded."""
        return self._initialized and self.database.is_open

    async def initialize(self) -> bool:
        """Open local storage if needed and ensure the menu table exists.

        Returns:
            bool: True if the menu cache can be used, False to run without local persistence
        """
        if self.is_initialized:
            return True

        if not await self.database.open():
            logger.warning("Local storage unavailable, menu cache disabled")
            return False

        if await self.database.create_tables(MenuRow.__table__):
            self._initialized = True
        return self._initialized

    async def read_all(self) -> list[MenuItem]:
        """Read every cached menu item in storage order.

        Returns:
            list: Cached MenuItem objects (empty list if none stored, on failure,
                or if any stored row is not a valid menu item)
        """
        if not self.is_initialized:
            logger.warning("Menu cache read before initialization")
            return []

        try:
            async with self.database.session() as session:
                rows = await session.scalars(select(MenuRow).order_by(MenuRow.id))
                return [row.to_menu_item() for row in rows]

        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to read cached menu items: {e}")
            return []

    async def replace_all(self, items: list[MenuItem]) -> bool:
        """Atomically replace the cached menu with the given items.

        Either every item is written or the previous cache is left untouched.

        Args:
            items: Full menu list to store

        Returns:
            bool: True if the write committed, False otherwise
        """
        if not self.is_initialized:
            logger.warning("Menu cache write before initialization")
            return False

        try:
            async with self.database.session() as session:
                async with session.begin():
                    await session.execute(delete(MenuRow))
                    session.add_all([MenuRow.from_menu_item(item) for item in items])

            logger.info(f"Cached {len(items)} menu items")
            return True

        except SQLAlchemyError as e:
            logger.error(f"Failed to save menu items: {e}")
            return False
