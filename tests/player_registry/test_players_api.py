"""HTTP-level tests for the ``/rest/players`` endpoints."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

BASE = "/rest/players"


def _create(client: TestClient, payload: dict[str, Any]) -> dict[str, Any]:
    response = client.post(BASE, json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]


def test_create_returns_camel_case_record(
    client: TestClient, thrall_payload: dict[str, Any]
) -> None:
    body = _create(client, thrall_payload)

    assert body["id"] > 0
    assert body["level"] == 5
    assert body["untilNextLevel"] == 100
    assert body["banned"] is False
    assert body["birthday"] == thrall_payload["birthday"]
    assert "until_next_level" not in body


def test_get_returns_created_record(client: TestClient, thrall_payload) -> None:
    created = _create(client, thrall_payload)

    response = client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.parametrize(
    ("override", "field"),
    [
        ({"experience": 10_000_001}, "experience"),
        ({"name": "ThirteenChars"}, "name"),
        ({"birthday": 946_684_799_999}, "birthday"),
        ({"title": None}, "title"),
    ],
)
def test_create_rejects_invalid_bodies_with_400(
    client: TestClient, thrall_payload, override: dict[str, Any], field: str
) -> None:
    response = client.post(BASE, json={**thrall_payload, **override})

    assert response.status_code == 400
    body = response.json()
    assert body["error_type"] == "validation_error"
    assert body["errors"][0]["field"] == field


def test_create_rejects_wrong_types_with_400(client: TestClient, thrall_payload) -> None:
    response = client.post(BASE, json={**thrall_payload, "race": "GOBLIN"})

    assert response.status_code == 400
    assert response.json()["error_type"] == "validation_error"


def test_list_defaults_to_first_three_by_id(client: TestClient, thrall_payload) -> None:
    for index in range(5):
        _create(client, {**thrall_payload, "name": f"Grunt{index}"})

    response = client.get(BASE)

    assert response.status_code == 200
    assert [player["name"] for player in response.json()] == [
        "Grunt0",
        "Grunt1",
        "Grunt2",
    ]


def test_list_pages_and_orders(client: TestClient, thrall_payload) -> None:
    for name, experience in [("Cairne", 9000), ("Baine", 300), ("Thrall", 2000)]:
        _create(client, {**thrall_payload, "name": name, "experience": experience})

    response = client.get(
        BASE, params={"order": "EXPERIENCE", "pageNumber": 1, "pageSize": 2}
    )

    assert response.status_code == 200
    assert [player["name"] for player in response.json()] == ["Cairne"]


def test_list_and_count_share_filters(client: TestClient, thrall_payload) -> None:
    _create(client, thrall_payload)
    _create(client, {**thrall_payload, "name": "Sylvanas", "race": "ELF"})
    _create(client, {**thrall_payload, "name": "Varok", "banned": True})

    params = {"race": "ORC", "banned": "false", "minExperience": "1999"}

    listed = client.get(BASE, params=params)
    counted = client.get(f"{BASE}/count", params=params)

    assert [player["name"] for player in listed.json()] == ["Thrall"]
    assert counted.status_code == 200
    assert counted.json() == 1


def test_exclusive_level_window_yields_nothing(client: TestClient, thrall_payload) -> None:
    _create(client, thrall_payload)
    params = {"minLevel": "5", "maxLevel": "10"}

    assert client.get(BASE, params=params).json() == []
    assert client.get(f"{BASE}/count", params=params).json() == 0


@pytest.mark.parametrize(
    "params",
    [
        {"race": "orc"},
        {"banned": "yes"},
        {"minLevel": "five"},
        {"after": "yesterday"},
        {"order": "TITLE"},
        {"pageSize": "0"},
        {"pageNumber": "-1"},
    ],
)
def test_bad_query_parameters_yield_400(client: TestClient, params) -> None:
    response = client.get(BASE, params=params)

    assert response.status_code == 400
    assert response.json()["error_type"] == "validation_error"


def test_count_rejects_bad_filters(client: TestClient) -> None:
    assert client.get(f"{BASE}/count", params={"profession": "BARD"}).status_code == 400


@pytest.mark.parametrize("method", ["post", "patch"])
def test_update_merges_supplied_fields(
    client: TestClient, thrall_payload, method: str
) -> None:
    created = _create(client, thrall_payload)

    response = getattr(client, method)(
        f"{BASE}/{created['id']}", json={"experience": 500, "title": None}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Warchief"
    assert body["experience"] == 500
    assert (body["level"], body["untilNextLevel"]) == (2, 100)


def test_update_missing_player_is_404(client: TestClient) -> None:
    response = client.post(f"{BASE}/999", json={"title": "Nobody"})

    assert response.status_code == 404
    assert response.json()["error_type"] == "not_found"


def test_update_out_of_range_is_400(client: TestClient, thrall_payload) -> None:
    created = _create(client, thrall_payload)

    response = client.post(f"{BASE}/{created['id']}", json={"experience": -5})

    assert response.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json()["experience"] == 2000


@pytest.mark.parametrize("player_id", ["0", "-1", "abc", "1.5"])
def test_invalid_identifiers_are_400(client: TestClient, player_id: str) -> None:
    assert client.get(f"{BASE}/{player_id}").status_code == 400
    assert client.delete(f"{BASE}/{player_id}").status_code == 400


def test_delete_then_delete_again(client: TestClient, thrall_payload) -> None:
    created = _create(client, thrall_payload)
    url = f"{BASE}/{created['id']}"

    first = client.delete(url)
    second = client.delete(url)

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404
    assert client.get(url).status_code == 404
    assert client.get(f"{BASE}/count").json() == 0


@pytest.mark.parametrize(
    "params",
    [
        {"minLevel": "99999999999999999999"},
        {"maxLevel": "2147483648"},
        {"minExperience": "-99999999999999999999"},
        {"after": "99999999999999999999"},
        {"pageNumber": "2147483648"},
        {"pageSize": "99999999999999999999"},
    ],
)
def test_unstorable_numbers_in_query_yield_400(
    client: TestClient, thrall_payload, params
) -> None:
    _create(client, thrall_payload)

    listed = client.get(BASE, params=params)

    assert listed.status_code == 400
    assert listed.json()["error_type"] == "validation_error"


def test_unstorable_numbers_in_count_yield_400(client: TestClient) -> None:
    response = client.get(
        f"{BASE}/count", params={"maxExperience": "99999999999999999999"}
    )

    assert response.status_code == 400


def test_page_at_column_limit_is_empty(client: TestClient, thrall_payload) -> None:
    _create(client, thrall_payload)

    response = client.get(BASE, params={"pageNumber": "2147483647"})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("player_id", ["2147483648", "99999999999999999999"])
def test_ids_beyond_column_range_are_not_found(
    client: TestClient, player_id: str
) -> None:
    url = f"{BASE}/{player_id}"

    assert client.get(url).status_code == 404
    assert client.post(url, json={"title": "Ghost"}).status_code == 404
    assert client.patch(url, json={"title": "Ghost"}).status_code == 404
    assert client.delete(url).status_code == 404


@pytest.mark.parametrize(
    "override",
    [
        {"experience": True},
        {"experience": "2000"},
        {"birthday": "988059600000"},
        {"banned": "false"},
        {"banned": 0},
        {"experience": 2000.5},
    ],
)
def test_create_rejects_loosely_typed_json(
    client: TestClient, thrall_payload, override: dict[str, Any]
) -> None:
    response = client.post(BASE, json={**thrall_payload, **override})

    assert response.status_code == 400
    assert response.json()["error_type"] == "validation_error"
    assert client.get(f"{BASE}/count").json() == 0


def test_update_rejects_boolean_experience(client: TestClient, thrall_payload) -> None:
    created = _create(client, thrall_payload)

    response = client.patch(f"{BASE}/{created['id']}", json={"experience": True})

    assert response.status_code == 400
    assert client.get(f"{BASE}/{created['id']}").json()["experience"] == 2000
