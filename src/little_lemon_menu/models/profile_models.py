"""User profile models.

The profile is persisted as plain string key-value pairs. The storage keys
match the ones the mobile client has always used.
"""

from typing import Any

from pydantic import BaseModel, Field

# Model field name -> preference storage key
PROFILE_TEXT_KEYS: dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
}

PROFILE_FLAG_KEYS: dict[str, str] = {
    "order_statuses": "orderStatuses",
    "password_changes": "passwordChanges",
    "special_offers": "specialOffers",
    "newsletter": "newsletter",
}


class UserProfile(BaseModel):
    """Personal information and e-mail notification preferences."""

    first_name: str = Field("", description="First name")
    last_name: str = Field("", description="Last name")
    email: str = Field("", description="E-mail address (not validated)")
    order_statuses: bool = Field(True, description="Notify about order statuses")
    password_changes: bool = Field(True, description="Notify about password changes")
    special_offers: bool = Field(True, description="Notify about special offers")
    newsletter: bool = Field(True, description="Receive the newsletter")

    def to_preferences(self) -> dict[str, str]:
        """Convert to preference storage format.

        Returns:
            dict: Storage key to string value
        """
        values = {key: getattr(self, name) for name, key in PROFILE_TEXT_KEYS.items()}
        for name, key in PROFILE_FLAG_KEYS.items():
            values[key] = "true" if getattr(self, name) else "false"
        return values

    @classmethod
    def from_preferences(cls, values: dict[str, str]) -> "UserProfile":
        """Create a UserProfile from stored preferences.

        Missing keys keep their defaults.

        Args:
            values: Storage key to string value

        Returns:
            UserProfile: Parsed model instance
        """
        data: dict[str, Any] = {}

        for name, key in PROFILE_TEXT_KEYS.items():
            if values.get(key):
                data[name] = values[key]

        for name, key in PROFILE_FLAG_KEYS.items():
            if key in values:
                data[name] = values[key] == "true"

        return cls(**data)
