"""PostgreSQL implementation of Theme repository."""

from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from muse.domain.model import Theme, UserTheme
from muse.domain.repository import ThemeRepository
from muse.domain.value import ThemeId, UserId, UserThemeId
from muse.persistence.mappers import row_to_theme, user_theme_to_dict
from muse.persistence.tables import themes_table, users_theme_table


class PostgresThemeRepository(ThemeRepository):
    """PostgreSQL implementation of ThemeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> list[Theme]:
        """Return the whole theme catalog, ordered by name."""
        stmt = select(themes_table).order_by(themes_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_theme(dict(row)) for row in result.mappings().all()]

    async def find_theme_ids_by_user(self, user_id: UserId) -> list[ThemeId]:
        """Return a user's selected theme ids in insertion order."""
        stmt = (
            select(users_theme_table.c.theme_id)
            .where(users_theme_table.c.user_id == user_id)
            .order_by(users_theme_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [ThemeId(theme_id) for theme_id in result.scalars().all()]

    async def find_by_ids(self, theme_ids: list[ThemeId]) -> list[Theme]:
        """Return catalog entries for the given ids."""
        if not theme_ids:
            return []

        stmt = select(themes_table).where(themes_table.c.id.in_(theme_ids))
        result = await self.session.execute(stmt)
        return [row_to_theme(dict(row)) for row in result.mappings().all()]

    async def insert_user_themes(
        self, user_id: UserId, theme_ids: list[ThemeId]
    ) -> list[UserTheme]:
        """Bulk insert user theme associations."""
        user_themes = [
            UserTheme(id=UserThemeId(uuid4()), user_id=user_id, theme_id=theme_id)
            for theme_id in theme_ids
        ]

        if user_themes:
            # Single multi-row VALUES: seq follows the order of the rows
            stmt = users_theme_table.insert().values(
                [user_theme_to_dict(user_theme) for user_theme in user_themes]
            )
            await self.session.execute(stmt)

        return user_themes
