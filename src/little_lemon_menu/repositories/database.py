"""Local SQLite storage handle and table mappings.

The database handle is an explicitly constructed object with an open/close
lifecycle. Repositories receive it by reference; nothing here is global.
"""

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import Float, Integer, String, Table, Text, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext import asyncio as sqlalchemy_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from little_lemon_menu.models.menu_models import DEFAULT_CATEGORY, MenuItem

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for local storage tables."""


class MenuRow(Base):
    """Row of the local menu cache."""

    __tablename__ = "menu"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text)
    price: Mapped[float] = mapped_column(Float)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)

    @classmethod
    def from_menu_item(cls, item: MenuItem) -> "MenuRow":
        return cls(
            name=item.name,
            price=float(item.price),
            description=item.description,
            image=item.image,
            category=item.category,
        )

    def to_menu_item(self) -> MenuItem:
        return MenuItem(
            name=self.name,
            price=Decimal(str(self.price)),
            description=self.description,
            image=self.image or "",
            category=self.category or DEFAULT_CATEGORY,
        )


class PreferenceRow(Base):
    """Row of the key-value preference store."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str] = mapped_column(Text)


class LocalDatabase:
    """Async handle on the local SQLite database.

    The handle is opened lazily by the repositories that use it and closed
    explicitly by whoever constructed it.
    """

    def __init__(self, url: str) -> None:
        """Initialize the database handle.

        Args:
            url: SQLAlchemy async database URL (e.g., "sqlite+aiosqlite:///little_lemon.db")
        """
        self.url = url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        """Whether the database has been opened successfully."""
        return self._engine is not None

    async def open(self) -> bool:
        """Open the database, verifying that a connection can be made.

        Concurrent callers share a single engine.

        Returns:
            bool: True if the database is open, False if the backend could not be opened
        """
        async with self._lock:
            if self._engine is not None:
                return True

            try:
                # Looked up on the module so SQLAlchemy instrumentation applies
                engine = sqlalchemy_asyncio.create_async_engine(self.url)
            except SQLAlchemyError as e:
                logger.error(f"Invalid database URL {self.url}: {e}")
                return False

            try:
                async with engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
            except (SQLAlchemyError, OSError) as e:
                logger.error(f"Failed to open local database {self.url}: {e}")
                await engine.dispose()
                return False

            self._engine = engine
            self._session_factory = async_sessionmaker(engine, expire_on_commit=False)
            logger.info(f"Local database opened at {self.url}")
            return True

    async def create_tables(self, *tables: Table) -> bool:
        """Create the given tables if they do not exist yet.

        Args:
            tables: Table objects to create (e.g., MenuRow.__table__)

        Returns:
            bool: True if the tables exist afterwards, False otherwise
        """
        async with self._lock:
            if self._engine is None:
                return False

            try:
                async with self._engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all, tables=list(tables))
                return True

            except SQLAlchemyError as e:
                logger.error(f"Failed to create tables: {e}")
                return False

    def session(self) -> AsyncSession:
        """Create a new session bound to the open database.

        Raises:
            RuntimeError: If the database has not been opened
        """
        if self._session_factory is None:
            raise RuntimeError("Local database is not open")
        return self._session_factory()

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Local database closed")
