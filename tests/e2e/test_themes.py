"""End-to-end tests for theme preferences."""

from uuid import uuid4

from tests.harness import bearer


def signup(client) -> str:
    return client.post(
        "/users", json={"email": "ada@example.com", "password": "s3cret-pass"}
    ).json()["data"]["token"]


class TestThemes:
    """End-to-end tests for theme selection."""

    def test_catalog_is_public(self, client):
        response = client.get("/themes")

        assert response.status_code == 200
        names = [theme["name"] for theme in response.json()["data"]]
        assert names[0] == "Adventure"
        assert len(names) == 10

    def test_save_and_list_selections(self, client):
        """Saved themes should list back by name and flag the next token."""
        token = signup(client)
        catalog = client.get("/themes").json()["data"]
        chosen = [catalog[2]["id"], catalog[0]["id"], catalog[2]["id"]]

        saved = client.post(
            "/users/me/themes", headers=bearer(token), json={"theme_ids": chosen}
        )

        assert saved.status_code == 201
        assert [row["theme_id"] for row in saved.json()["data"]] == chosen

        listed = client.get("/users/me/themes", headers=bearer(token))
        assert listed.json()["data"] == [
            catalog[2]["name"],
            catalog[0]["name"],
            catalog[2]["name"],
        ]

        login = client.post(
            "/auth/login",
            json={"method": "local", "email": "ada@example.com", "password": "s3cret-pass"},
        )
        assert login.json()["data"]["theme_defined"] is True

    def test_unknown_theme_rejected(self, client):
        token = signup(client)
        catalog = client.get("/themes").json()["data"]

        response = client.post(
            "/users/me/themes",
            headers=bearer(token),
            json={"theme_ids": [catalog[0]["id"], str(uuid4())]},
        )

        assert response.status_code == 409
        assert response.json() == {"data": None, "error": "Invalid theme Id(s)."}
        assert client.get("/users/me/themes", headers=bearer(token)).json()["data"] == []

    def test_empty_selection_rejected(self, client):
        token = signup(client)

        response = client.post(
            "/users/me/themes", headers=bearer(token), json={"theme_ids": []}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Select at least one theme."
