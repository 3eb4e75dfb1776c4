"""FastAPI application exposing the menu and profile endpoints."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from little_lemon_menu.models.menu_models import DESCRIPTION_PLACEHOLDER, MenuItem
from little_lemon_menu.models.profile_models import UserProfile
from little_lemon_menu.repositories.database import LocalDatabase
from little_lemon_menu.services.menu_service import MenuService
from little_lemon_menu.services.menu_session import MenuSession
from little_lemon_menu.services.profile_service import ProfileService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class MenuItemResponse(BaseModel):
    """A menu item prepared for display."""

    name: str
    price: str
    price_display: str
    description: str
    category: str
    image_url: str


class MenuResponse(BaseModel):
    """Response model for the filtered menu."""

    items: list[MenuItemResponse]
    total: int
    source: str
    categories: list[str]
    error_message: str | None = None


class ProfileSaveResponse(BaseModel):
    """Response model for profile updates."""

    success: bool
    message: str


def to_menu_item_response(item: MenuItem, image_url: str) -> MenuItemResponse:
    """Convert a MenuItem into its display representation.

    Args:
        item: The menu item
        image_url: Resolved URL of the item's image

    Returns:
        MenuItemResponse with formatted price and description placeholder
    """
    return MenuItemResponse(
        name=item.name,
        price=str(item.price),
        price_display=f"${item.price:.2f}",
        description=item.description or DESCRIPTION_PLACEHOLDER,
        category=item.category,
        image_url=image_url,
    )


def create_app(
    menu_service: MenuService,
    profile_service: ProfileService,
    database: LocalDatabase | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        menu_service: Service for loading the menu
        profile_service: Service for the user's profile preferences
        database: Local database handle to close on shutdown, if any

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if database is not None:
            await database.close()

    app = FastAPI(
        title="Little Lemon Menu API",
        description="Menu browsing with a local cache and profile preferences",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.menu_service = menu_service
    app.state.profile_service = profile_service

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/menu", response_model=MenuResponse, tags=["Menu"])
    async def get_menu(query: str = "", category: str = "") -> MenuResponse:
        """Get the menu filtered by search phrase and category.

        A menu that could not be loaded is reported through error_message with
        an empty item list, so clients can always render the response.

        Args:
            query: Case-insensitive search phrase matched against name and description
            category: Category to restrict to (empty for all)

        Returns:
            The visible menu items
        """
        session = MenuSession(app.state.menu_service)
        await session.activate()

        session.set_query(query)
        if category:
            session.select_category(category)

        visible = session.visible_items
        logger.info(f"Menu requested: {len(visible)} of {len(session.items)} items visible")

        return MenuResponse(
            items=[
                to_menu_item_response(item, app.state.menu_service.get_image_url(item))
                for item in visible
            ],
            total=len(session.items),
            source=session.source.value,
            categories=session.categories,
            error_message=session.error_message,
        )

    @app.get("/profile", response_model=UserProfile, tags=["Profile"])
    async def get_profile() -> UserProfile:
        """Get the stored profile, with defaults for anything not yet saved."""
        profile: UserProfile = await app.state.profile_service.load_profile()
        return profile

    @app.put("/profile", response_model=ProfileSaveResponse, tags=["Profile"])
    async def save_profile(profile: UserProfile) -> ProfileSaveResponse:
        """Save the profile.

        Raises:
            HTTPException: 500 if the profile could not be persisted
        """
        saved = await app.state.profile_service.save_profile(profile)
        if not saved:
            raise HTTPException(status_code=500, detail="Failed to save changes. Please try again.")

        return ProfileSaveResponse(success=True, message="Your changes have been saved successfully!")

    @app.delete("/profile", response_model=ProfileSaveResponse, tags=["Profile"])
    async def reset_profile() -> ProfileSaveResponse:
        """Remove all stored profile values.

        Raises:
            HTTPException: 500 if the values could not be removed
        """
        removed = await app.state.profile_service.reset_profile()
        if not removed:
            raise HTTPException(status_code=500, detail="Failed to reset profile")

        return ProfileSaveResponse(success=True, message="Profile reset")

    return app
