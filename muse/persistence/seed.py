"""Theme catalog seed data.

Ids are derived from the names so every environment shares the same catalog.
"""

from uuid import NAMESPACE_URL, uuid5

from muse.domain.model.theme import Theme
from muse.domain.value import ThemeId

THEME_NAMESPACE = uuid5(NAMESPACE_URL, "https://muse.app/themes")

THEME_NAMES = [
    "Adventure",
    "Comedy",
    "Fantasy",
    "History",
    "Horror",
    "Mystery",
    "Romance",
    "Science Fiction",
    "Sports",
    "Technology",
]

THEME_CATALOG: list[Theme] = [
    Theme(id=ThemeId(uuid5(THEME_NAMESPACE, name)), name=name) for name in THEME_NAMES
]
