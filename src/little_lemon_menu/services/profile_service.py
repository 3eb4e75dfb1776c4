"""Profile service for persisting user preferences."""

import logging

from little_lemon_menu.models.profile_models import PROFILE_FLAG_KEYS, PROFILE_TEXT_KEYS, UserProfile
from little_lemon_menu.repositories.preferences_repository import PreferencesRepository

logger = logging.getLogger(__name__)

PROFILE_KEYS = list(PROFILE_TEXT_KEYS.values()) + list(PROFILE_FLAG_KEYS.values())


class ProfileService:
    """Service for loading and saving the user's profile preferences."""

    def __init__(self, preferences_repository: PreferencesRepository) -> None:
        """Initialize the ProfileService.

        Args:
            preferences_repository: Repository for key-value preferences
        """
        self.preferences_repository = preferences_repository

    async def load_profile(self) -> UserProfile:
        """Load the stored profile.

        Returns:
            UserProfile built from stored values, with defaults for anything missing
        """
        values = await self.preferences_repository.get_values(PROFILE_KEYS)
        return UserProfile.from_preferences(values)

    async def save_profile(self, profile: UserProfile) -> bool:
        """Persist the profile.

        Args:
            profile: Profile to save

        Returns:
            True if saved successfully, False otherwise
        """
        saved = await self.preferences_repository.set_values(profile.to_preferences())
        if not saved:
            logger.error("Failed to save profile")
        return saved

    async def reset_profile(self) -> bool:
        """Remove every stored profile value.

        Returns:
            True if removed successfully, False otherwise
        """
        return await self.preferences_repository.remove_values(PROFILE_KEYS)
