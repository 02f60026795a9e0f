"""Strongly typed identifiers for Muse domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ThemeId = NewType("ThemeId", UUID)
UserThemeId = NewType("UserThemeId", UUID)
