from uuid import uuid4

from fastapi.testclient import TestClient

API = "/api/v1"
TEAM_ID = "123e4567-e89b-12d3-a456-426614174000"


def _create(client: TestClient, **overrides) -> dict:
    payload = {"teamId": TEAM_ID, "title": "Q3 Report", "content": "Draft text", "tags": ["finance", "q3"]}
    payload.update(overrides)
    resp = client.post(f"{API}/documents", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def _errors(resp) -> dict[str, str]:
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    return {item["location"]: item["kind"] for item in body["error"]["details"]["errors"]}


def test_live(client: TestClient):
    resp = client.get(f"{API}/health/live")

    assert resp.status_code == 200
    assert resp.json()["data"] == {"status": "ok"}
    assert resp.headers["X-Request-Id"]


def test_create_document_returns_created_document(client: TestClient):
    resp = client.post(
        f"{API}/documents",
        json={"teamId": TEAM_ID, "title": "Q3 Report", "content": "Draft text", "tags": ["finance", "q3"]},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["request_id"] == resp.headers["X-Request-Id"]
    data = body["data"]
    assert data["teamId"] == TEAM_ID
    assert data["title"] == "Q3 Report"
    assert data["content"] == "Draft text"
    assert data["tags"] == ["finance", "q3"]
    assert data["id"]
    assert data["createdAt"]


def test_create_document_without_tags(client: TestClient):
    resp = client.post(f"{API}/documents", json={"teamId": TEAM_ID, "title": "t", "content": "c"})

    assert resp.status_code == 201
    assert resp.json()["data"]["tags"] == []


def test_create_document_reports_all_violations(client: TestClient):
    resp = client.post(f"{API}/documents", json={"teamId": "", "title": "", "content": "body"})

    assert resp.status_code == 400
    assert _errors(resp) == {"teamId": "missing_field", "title": "missing_field"}
    details = resp.json()["error"]["details"]
    assert details["status_code"] == 400
    assert details["path"] == f"{API}/documents"


def test_create_document_bad_uuid_and_tag_element(client: TestClient):
    resp = client.post(
        f"{API}/documents",
        json={"teamId": "not-a-uuid", "title": "t", "content": "c", "tags": ["a", 2, "c"]},
    )

    assert resp.status_code == 400
    errors = resp.json()["error"]["details"]["errors"]
    assert {item["location"]: item["kind"] for item in errors} == {
        "teamId": "invalid_format",
        "tags[1]": "invalid_type",
    }
    tag_error = next(item for item in errors if item["field"] == "tags")
    assert tag_error["index"] == 1
    assert tag_error["received"] == "int"


def test_create_document_without_body(client: TestClient):
    resp = client.post(f"{API}/documents")

    assert resp.status_code == 400
    assert _errors(resp) == {"teamId": "missing_field", "title": "missing_field", "content": "missing_field"}


def test_create_document_with_array_body(client: TestClient):
    resp = client.post(f"{API}/documents", json=[{"teamId": TEAM_ID}])

    assert resp.status_code == 400
    assert _errors(resp) == {"body": "invalid_type"}


def test_malformed_json_is_rejected_before_validation(client: TestClient):
    resp = client.post(
        f"{API}/documents",
        content=b'{"teamId": ',
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_update_delete_document(client: TestClient):
    created = _create(client)
    url = f"{API}/documents/{created['id']}"

    assert client.get(url).json()["data"]["title"] == "Q3 Report"

    resp = client.put(url, json={"title": "Q3 Final", "teamId": str(uuid4())})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "Q3 Final"
    assert data["teamId"] == TEAM_ID
    assert data["tags"] == ["finance", "q3"]

    resp = client.put(url, json={"content": ""})
    assert resp.status_code == 400
    assert _errors(resp) == {"content": "missing_field"}

    resp = client.delete(url)
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": created["id"], "deleted": True}

    resp = client.get(url)
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_update_unknown_document_is_404(client: TestClient):
    resp = client.put(f"{API}/documents/{uuid4()}", json={"title": "x"})

    assert resp.status_code == 404


def test_list_documents_with_filters_and_pagination(client: TestClient):
    other_team = str(uuid4())
    _create(client, title="Alpha", tags=["a"])
    _create(client, title="Beta", tags=["b"])
    _create(client, teamId=other_team, title="Gamma", tags=["g"])

    resp = client.get(f"{API}/documents", params={"teamId": TEAM_ID, "limit": "1"})
    assert resp.status_code == 200
    body = resp.json()
    assert [item["title"] for item in body["data"]] == ["Beta"]
    assert body["meta"]["pagination"] == {"page": 1, "limit": 1, "total": 2, "totalPages": 2}
    assert body["meta"]["allTags"] == ["a", "b"]

    resp = client.get(f"{API}/documents", params={"search": "gam"})
    assert [item["title"] for item in resp.json()["data"]] == ["Gamma"]


def test_list_documents_rejects_bad_query(client: TestClient):
    resp = client.get(f"{API}/documents", params={"teamId": "bad", "page": "0"})

    assert resp.status_code == 400
    assert _errors(resp) == {"teamId": "invalid_format", "page": "invalid_format"}


def test_popular_tags(client: TestClient):
    _create(client, tags=["finance", "q3"])
    _create(client, tags=["finance"])

    resp = client.get(f"{API}/documents/tags/popular", params={"limit": 1})

    assert resp.status_code == 200
    assert resp.json()["data"] == [{"tag": "finance", "count": 2}]


def test_unknown_route_uses_error_envelope(client: TestClient):
    resp = client.get(f"{API}/nowhere")

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_list_documents_oversized_limit_is_400(client: TestClient):
    resp = client.get(f"{API}/documents", params={"limit": "1" * 5000})

    assert resp.status_code == 400
    assert _errors(resp) == {"limit": "invalid_type"}


def test_popular_tags_rejects_bad_query_with_400(client: TestClient):
    resp = client.get(f"{API}/documents/tags/popular", params={"teamId": "nope", "limit": "0"})

    assert resp.status_code == 400
    assert _errors(resp) == {"teamId": "invalid_format", "limit": "invalid_format"}


def test_popular_tags_filters_by_team(client: TestClient):
    _create(client, tags=["finance"])
    _create(client, teamId=str(uuid4()), tags=["other"])

    resp = client.get(f"{API}/documents/tags/popular", params={"teamId": TEAM_ID.upper()})

    assert resp.status_code == 200
    assert resp.json()["data"] == [{"tag": "finance", "count": 1}]
