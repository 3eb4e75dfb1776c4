"""Menu data models.

These models represent menu entries as served by the remote menu API and as
cached in local storage, plus the ephemeral filter state of a menu session.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CATEGORY = "mains"

DESCRIPTION_PLACEHOLDER = "No description available"


class MenuItem(BaseModel):
    """Menu item model.

    Items are immutable once loaded; a menu list is always replaced wholesale.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Dish name, unique within one loaded menu list")
    price: Decimal = Field(..., description="Item price", ge=0)
    description: str | None = Field(None, description="Item description")
    image: str = Field("", description="Image filename, resolved to a URL by the API client")
    category: str = Field(DEFAULT_CATEGORY, description="Menu category", min_length=1)

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> Any:
        """Convert float prices through str so 12.99 stays Decimal("12.99")."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class FilterState(BaseModel):
    """Search query and category selection for one menu session.

    An empty string means "no filter" for both fields.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    selected_category: str = ""

    def with_query(self, query: str) -> "FilterState":
        """Return a copy with the search query replaced."""
        return self.model_copy(update={"query": query})

    def select_category(self, category: str) -> "FilterState":
        """Return a copy with the category toggled.

        Selecting the category that is already selected clears the selection.
        """
        if self.selected_category and self.selected_category.lower() == category.lower():
            return self.model_copy(update={"selected_category": ""})
        return self.model_copy(update={"selected_category": category})


class MenuSource(str, Enum):
    """Where the items of a menu load came from."""

    CACHE = "cache"
    REMOTE = "remote"
    NONE = "none"


@dataclass
class MenuLoadResult:
    """Result of loading the menu for one session.

    Attributes:
        items: The full menu list (empty when nothing could be loaded)
        source: Whether the items came from local storage or the remote API
        storage_available: Whether local storage could be initialized
        error_message: User-facing message if the menu could not be loaded, None otherwise
    """

    items: list[MenuItem] = field(default_factory=list)
    source: MenuSource = MenuSource.NONE
    storage_available: bool = False
    error_message: str | None = None


def normalize_menu_entry(entry: dict[str, Any]) -> dict[str, Any]:
    """Assign the default category to a raw menu entry lacking one.

    Args:
        entry: Raw menu entry as decoded from the remote payload

    Returns:
        A new dict with a non-empty category
    """
    normalized = dict(entry)
    category = normalized.get("category")
    if not isinstance(category, str) or not category.strip():
        normalized["category"] = DEFAULT_CATEGORY
    return normalized
