"""Movies routes — 상태 코드/응답 형태/저장소 변화 확인."""

import uuid

import pytest


# ─── GET /movies ────────────────────────────────────────────────

def test_list_returns_movies_in_insertion_order(client, seeded):
    res = client.get("/movies")
    assert res.status_code == 200
    assert [m["id"] for m in res.json()] == seeded


def test_list_empty_store_returns_empty_array(client):
    res = client.get("/movies")
    assert res.status_code == 200
    assert res.json() == []


def test_genre_filter_is_case_insensitive(client, seeded):
    lower = client.get("/movies", params={"genre": "drama"}).json()
    upper = client.get("/movies", params={"genre": "DRAMA"}).json()
    assert [m["id"] for m in lower] == ["a1", "b2"]
    assert lower == upper


def test_genre_filter_matches_whole_entries_only(client, seeded):
    # "Sci"는 "Sci-Fi"의 부분 문자열일 뿐
    assert client.get("/movies", params={"genre": "Sci"}).json() == []
    assert [m["id"] for m in client.get("/movies", params={"genre": "sci-fi"}).json()] == ["c3"]


def test_empty_genre_param_returns_full_list(client, seeded):
    res = client.get("/movies", params={"genre": ""})
    assert len(res.json()) == 3


# ─── GET /movies/{id} ───────────────────────────────────────────

def test_get_by_id(client, seeded):
    res = client.get("/movies/b2")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == "b2"
    assert body["title"] == "Heat"
    assert body["genre"] == ["Action", "Crime", "Drama"]


def test_get_unknown_id_returns_404_message(client, seeded):
    res = client.get(f"/movies/{uuid.uuid4()}")
    assert res.status_code == 404
    assert res.json() == {"message": "Movie not found"}


# ─── POST /movies ───────────────────────────────────────────────

def test_create_returns_201_with_generated_id(client, seeded, movie_payload):
    res = client.post("/movies", json=movie_payload)
    assert res.status_code == 201
    body = res.json()
    assert body["id"] not in seeded
    uuid.UUID(body["id"])
    assert body["title"] == movie_payload["title"]
    assert body["genre"] == ["Crime", "Drama"]

    listed = client.get("/movies").json()
    assert listed[-1] == body


def test_create_ignores_client_supplied_id(client, movie_payload):
    res = client.post("/movies", json={**movie_payload, "id": "mine"})
    assert res.status_code == 201
    assert res.json()["id"] != "mine"


def test_create_twice_gives_distinct_ids(client, movie_payload):
    first = client.post("/movies", json=movie_payload).json()
    second = client.post("/movies", json=movie_payload).json()
    assert first["id"] != second["id"]


def test_create_defaults_rate(client, movie_payload):
    del movie_payload["rate"]
    res = client.post("/movies", json=movie_payload)
    assert res.status_code == 201
    assert res.json()["rate"] == 5


@pytest.mark.parametrize("rate", ["9", True])
def test_create_rejects_non_numeric_rate(client, movie_payload, rate):
    res = client.post("/movies", json={**movie_payload, "rate": rate})
    assert res.status_code == 400
    assert res.json()["error"][0]["path"] == ["rate"]
    assert client.get("/movies").json() == []


def test_create_accepts_integral_float_year(client, movie_payload):
    res = client.post("/movies", json={**movie_payload, "year": 1999.0})
    assert res.status_code == 201
    assert res.json()["year"] == 1999


def test_create_missing_title_returns_400_and_store_unchanged(client, seeded, movie_payload):
    del movie_payload["title"]
    res = client.post("/movies", json=movie_payload)
    assert res.status_code == 400
    errors = res.json()["error"]
    assert {"path": ["title"], "message": "Field required", "type": "missing"} in errors
    assert len(client.get("/movies").json()) == 3


def test_create_reports_every_violation(client, movie_payload):
    movie_payload.update({"year": 1500, "genre": ["Western"], "poster": "not a url"})
    res = client.post("/movies", json=movie_payload)
    assert res.status_code == 400
    paths = [e["path"] for e in res.json()["error"]]
    assert ["year"] in paths
    assert ["genre", 0] in paths
    assert ["poster"] in paths


def test_create_malformed_json_returns_400(client):
    res = client.post(
        "/movies", content="{not json", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert "error" in res.json()


# ─── PATCH /movies/{id} ─────────────────────────────────────────

def test_patch_changes_only_given_field(client, seeded):
    before = client.get("/movies/a1").json()
    res = client.patch("/movies/a1", json={"year": 1999})
    assert res.status_code == 200
    after = res.json()
    assert after["year"] == 1999
    assert {k: v for k, v in after.items() if k != "year"} == \
        {k: v for k, v in before.items() if k != "year"}
    assert client.get("/movies/a1").json() == after


def test_patch_never_overwrites_id(client, seeded):
    res = client.patch("/movies/a1", json={"id": "zzz", "title": "Y"})
    assert res.status_code == 200
    assert res.json()["id"] == "a1"
    assert client.get("/movies/zzz").status_code == 404


def test_patch_invalid_body_returns_400(client, seeded):
    res = client.patch("/movies/a1", json={"duration": -5})
    assert res.status_code == 400
    assert res.json()["error"][0]["path"] == ["duration"]
    assert client.get("/movies/a1").json()["duration"] == 100


def test_patch_without_body_leaves_record_unchanged(client, seeded):
    before = client.get("/movies/a1").json()
    res = client.patch("/movies/a1")
    assert res.status_code == 200
    assert res.json() == before


def test_patch_null_field_returns_400(client, seeded):
    res = client.patch("/movies/a1", json={"title": None})
    assert res.status_code == 400


def test_patch_unknown_id_returns_404(client, seeded):
    res = client.patch("/movies/nope", json={"title": "Y"})
    assert res.status_code == 404
    assert res.json() == {"message": "Movie not found"}


def test_patch_validation_checked_before_existence(client, seeded):
    res = client.patch("/movies/nope", json={"year": "soon"})
    assert res.status_code == 400


# ─── DELETE /movies/{id} ────────────────────────────────────────

def test_delete_twice_returns_200_then_404(client, seeded):
    first = client.delete("/movies/b2")
    assert first.status_code == 200
    assert first.json() == {"message": "Movie deleted"}
    assert len(client.get("/movies").json()) == 2

    second = client.delete("/movies/b2")
    assert second.status_code == 404
    assert second.json() == {"message": "Movie not found"}
    assert len(client.get("/movies").json()) == 2


# ─── OPTIONS /movies/{id} ───────────────────────────────────────

def test_preflight_returns_200(client):
    res = client.options("/movies/a1")
    assert res.status_code == 200


# ─── scenario ──────────────────────────────────────────────────

def test_full_lifecycle_scenario(client, seeded):
    got = client.get("/movies/a1")
    assert got.status_code == 200
    assert got.json()["id"] == "a1"

    patched = client.patch("/movies/a1", json={"title": "Y"})
    assert patched.status_code == 200
    assert patched.json()["title"] == "Y"
    assert patched.json()["id"] == "a1"

    deleted = client.delete("/movies/a1")
    assert deleted.json() == {"message": "Movie deleted"}

    assert client.get("/movies/a1").status_code == 404


def test_no_framework_identifying_headers(client, seeded):
    res = client.get("/movies")
    assert "x-powered-by" not in res.headers
