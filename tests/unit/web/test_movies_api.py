"""
Tests des routes /api/movies.

Ces tests verifient:
- Creation en multipart avec affiche, en-tete Location et code 201
- Detail, contexte d'edition et page d'accueil
- Edition (affiche conservee) et suppression
- Format des erreurs 400 et 404
"""

import json

from fastapi.testclient import TestClient


def _form(seeded: dict, **overrides) -> dict:
    alice, bruno, _ = seeded["actors"]
    values = {
        "title": "Dune",
        "release_date": "2999-01-01",
        "trailer": "https://example.com/dune",
        "genre_ids": json.dumps(seeded["genres"][:1]),
        "theater_ids": json.dumps(seeded["theaters"][:1]),
        "actors": json.dumps([
            {"id": bruno, "character": "Paul"},
            {"id": alice, "character": "Chani"},
        ]),
    }
    values.update(overrides)
    return values


def _create(client: TestClient, seeded: dict, **overrides) -> int:
    response = client.post("/api/movies", data=_form(seeded, **overrides))
    assert response.status_code == 201
    return response.json()["id"]


class TestCreateMovie:
    """Tests pour POST /api/movies."""

    def test_create_with_poster(self, client, seeded):
        response = client.post(
            "/api/movies",
            data=_form(seeded),
            files={"poster": ("dune.jpg", b"jpeg-bytes", "image/jpeg")},
        )

        assert response.status_code == 201
        body = response.json()
        assert response.headers["location"].endswith(f"/api/movies/{body['id']}")
        assert body["poster"].startswith("/media/movies/")
        assert client.get(body["poster"]).content == b"jpeg-bytes"

    def test_missing_title_returns_errors_by_field(self, client, seeded):
        form = _form(seeded)
        del form["title"]

        response = client.post("/api/movies", data=form)

        assert response.status_code == 400
        assert "title" in response.json()["errors"]

    def test_unknown_genre_returns_400(self, client, seeded):
        response = client.post("/api/movies", data=_form(seeded, genre_ids="[9999]"))

        assert response.status_code == 400
        assert response.json() == {"errors": {"genre_ids": ["unknown ids: 9999"]}}

    def test_malformed_json_list_returns_400(self, client, seeded):
        response = client.post("/api/movies", data=_form(seeded, actors="not json"))

        assert response.status_code == 400
        assert "actors" in response.json()["errors"]


class TestReadMovie:
    """Tests des lectures."""

    def test_detail_has_ordered_cast(self, client, seeded):
        movie_id = _create(client, seeded)

        body = client.get(f"/api/movies/{movie_id}").json()

        assert [c["character"] for c in body["cast"]] == ["Paul", "Chani"]
        assert [c["position"] for c in body["cast"]] == [0, 1]
        assert [g["name"] for g in body["genres"]] == ["Action"]

    def test_unknown_movie_returns_404(self, client):
        response = client.get("/api/movies/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "movie 999 not found"}

    def test_edit_context(self, client, seeded):
        movie_id = _create(client, seeded)

        body = client.get(f"/api/movies/{movie_id}/edit-context").json()

        assert [g["id"] for g in body["selected_genres"]] == seeded["genres"][:1]
        assert len(body["unselected_genres"]) == 2
        assert len(body["unselected_theaters"]) == 1

    def test_landing(self, client, seeded):
        _create(client, seeded)
        _create(client, seeded, title="Old", release_date="2000-01-01", theater_ids="[]")

        body = client.get("/api/movies/landing").json()

        assert [m["title"] for m in body["upcoming"]] == ["Dune"]
        assert [m["title"] for m in body["now_showing"]] == ["Dune"]

    def test_form_options(self, client, seeded):
        body = client.get("/api/movies/form-options").json()

        assert [g["name"] for g in body["genres"]] == ["Action", "Comedie", "Drame"]
        assert len(body["theaters"]) == 2


class TestWriteMovie:
    """Tests de l'edition et de la suppression."""

    def test_update_refreshes_cached_detail(self, client, seeded):
        movie_id = _create(client, seeded)
        alice = seeded["actors"][0]
        client.get(f"/api/movies/{movie_id}")

        response = client.put(
            f"/api/movies/{movie_id}",
            data=_form(seeded, title="Dune: Part One", actors=json.dumps([{"id": alice}])),
        )

        assert response.status_code == 204
        body = client.get(f"/api/movies/{movie_id}").json()
        assert body["title"] == "Dune: Part One"
        assert [c["actor_id"] for c in body["cast"]] == [alice]

    def test_update_without_poster_keeps_it(self, client, seeded):
        created = client.post(
            "/api/movies",
            data=_form(seeded),
            files={"poster": ("dune.jpg", b"jpeg-bytes", "image/jpeg")},
        ).json()

        client.put(f"/api/movies/{created['id']}", data=_form(seeded, title="Renamed"))

        assert client.get(f"/api/movies/{created['id']}").json()["poster"] == created["poster"]

    def test_update_unknown_movie(self, client, seeded):
        assert client.put("/api/movies/999", data=_form(seeded)).status_code == 404

    def test_delete(self, client, seeded):
        movie_id = _create(client, seeded)
        client.get("/api/movies/landing")

        assert client.delete(f"/api/movies/{movie_id}").status_code == 204

        assert client.get(f"/api/movies/{movie_id}").status_code == 404
        assert client.get("/api/movies/landing").json()["upcoming"] == []
        assert client.delete(f"/api/movies/{movie_id}").status_code == 404
