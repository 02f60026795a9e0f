"""Unit tests for the theme preference use cases."""

from uuid import UUID, uuid4

import pytest

from muse.application.usecase.theme import (
    GetThemeCatalogUseCase,
    GetUserThemeSelectionsRequest,
    GetUserThemeSelectionsUseCase,
    SaveThemeSelectionsRequest,
    SaveThemeSelectionsUseCase,
)
from muse.domain.error import InvalidThemeSelectionError
from muse.domain.service import UserService
from muse.domain.value import Email
from muse.persistence.seed import THEME_CATALOG
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestThemeUseCases:
    """Tests for the theme use cases."""

    @pytest.mark.asyncio
    async def test_catalog_lists_ids_and_names(self, unit_env):
        """The catalog response should expose ids as strings."""
        use_case = await unit_env.get(GetThemeCatalogUseCase)

        response = await use_case.execute()

        assert len(response.themes) == 10
        assert response.themes[0].name == "Adventure"
        assert UUID(response.themes[0].id) == THEME_CATALOG[0].id

    @pytest.mark.asyncio
    async def test_save_then_read_back(self, unit_env):
        """Saved selections should read back as names in order."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), federated_id="g-1")
        catalog = (await (await unit_env.get(GetThemeCatalogUseCase)).execute()).themes
        save = await unit_env.get(SaveThemeSelectionsUseCase)
        read = await unit_env.get(GetUserThemeSelectionsUseCase)

        saved = await save.execute(
            SaveThemeSelectionsRequest(
                user_id=user.id, theme_ids=[catalog[3].id, catalog[1].id]
            )
        )
        names = await read.execute(GetUserThemeSelectionsRequest(user_id=user.id))

        assert [item.theme_id for item in saved.selections] == [catalog[3].id, catalog[1].id]
        assert all(item.user_id == str(user.id) for item in saved.selections)
        assert names.names == [catalog[3].name, catalog[1].name]

    @pytest.mark.asyncio
    async def test_invalid_id_rejected(self, unit_env):
        """An id outside the catalog should reject the whole request."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), federated_id="g-1")
        save = await unit_env.get(SaveThemeSelectionsUseCase)

        with pytest.raises(InvalidThemeSelectionError):
            await save.execute(
                SaveThemeSelectionsRequest(user_id=user.id, theme_ids=[uuid4()])
            )

    @pytest.mark.asyncio
    async def test_no_selections_yet(self, unit_env):
        """A user without selections should read back an empty list."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create(Email("ada@example.com"), federated_id="g-1")
        read = await unit_env.get(GetUserThemeSelectionsUseCase)

        names = await read.execute(GetUserThemeSelectionsRequest(user_id=user.id))

        assert names.names == []
