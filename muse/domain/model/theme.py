"""Theme catalog entry and user theme association."""

from pydantic import Field

from muse.domain.model.common import DomainModel
from muse.domain.value import ThemeId, UserId, UserThemeId


class Theme(DomainModel):
    """Named content-preference category.

    Catalog entries are reference data seeded with the schema.
    """

    id: ThemeId
    name: str = Field(min_length=1, max_length=100)


class UserTheme(DomainModel):
    """Association between a user and a selected theme.

    The same pair may be stored more than once.
    """

    id: UserThemeId
    user_id: UserId
    theme_id: ThemeId
