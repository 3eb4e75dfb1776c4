"""Key-value preference repository backed by the local database."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from little_lemon_menu.repositories.database import LocalDatabase, PreferenceRow

logger = logging.getLogger(__name__)


class PreferencesRepository:
    """Repository for string key-value user preferences.

    Values are stored as-is: no validation, no encryption and no expiry.
    """

    def __init__(self, database: LocalDatabase) -> None:
        """Initialize repository.

        Args:
            database: Local database handle shared with other repositories
        """
        self.database = database
        self._initialized = False

    async def initialize(self) -> bool:
        """Open local storage if needed and ensure the preferences table exists.

        Returns:
            bool: True if preferences can be read and written, False otherwise
        """
        if self._initialized and self.database.is_open:
            return True

        if not await self.database.open():
            return False

        if await self.database.create_tables(PreferenceRow.__table__):
            self._initialized = True
        return self._initialized

    async def get_values(self, keys: list[str]) -> dict[str, str]:
        """Read the stored values for the given keys.

        Args:
            keys: Preference keys to read

        Returns:
            dict: Stored key to value (keys without a stored value are omitted)
        """
        if not await self.initialize():
            return {}

        try:
            async with self.database.session() as session:
                rows = await session.scalars(select(PreferenceRow).where(PreferenceRow.key.in_(keys)))
                return {row.key: row.value for row in rows}

        except SQLAlchemyError as e:
            logger.error(f"Failed to read preferences: {e}")
            return {}

    async def set_values(self, values: dict[str, str]) -> bool:
        """Store the given key-value pairs in a single transaction.

        Args:
            values: Preference key to value

        Returns:
            bool: True if all values were saved, False otherwise
        """
        if not await self.initialize():
            return False

        try:
            async with self.database.session() as session:
                async with session.begin():
                    for key, value in values.items():
                        await session.merge(PreferenceRow(key=key, value=value))
            return True

        except SQLAlchemyError as e:
            logger.error(f"Failed to save preferences: {e}")
            return False

    async def remove_values(self, keys: list[str]) -> bool:
        """Delete the given keys.

        Args:
            keys: Preference keys to remove

        Returns:
            bool: True if delete succeeded, False otherwise
        """
        if not await self.initialize():
            return False

        try:
            async with self.database.session() as session:
                async with session.begin():
                    await session.execute(delete(PreferenceRow).where(PreferenceRow.key.in_(keys)))
            return True

        except SQLAlchemyError as e:
            logger.error(f"Failed to remove preferences: {e}")
            return False
