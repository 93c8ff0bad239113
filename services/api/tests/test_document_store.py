from uuid import uuid4

import pytest

from tdoc_api.schemas.document import CreateDocumentCommand, DocumentQuery, UpdateDocumentCommand
from tdoc_api.services.documents import DocumentNotFoundError, InMemoryDocumentStore

TEAM_A = "00000000-0000-0000-0000-0000000000a1"
TEAM_B = "00000000-0000-0000-0000-0000000000b2"


def _create(store: InMemoryDocumentStore, *, team_id: str = TEAM_A, title: str = "t", content: str = "c", tags=None):
    payload = {"teamId": team_id, "title": title, "content": content}
    if tags is not None:
        payload["tags"] = tags
    return store.create(CreateDocumentCommand.model_validate(payload))


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


def test_create_without_tags_stores_empty_list(store):
    record = _create(store)

    assert record.tags == []
    assert record.created_at == record.updated_at
    assert store.get(record.id) == record


def test_get_unknown_document_raises(store):
    missing = uuid4()
    with pytest.raises(DocumentNotFoundError) as exc:
        store.get(missing)
    assert exc.value.document_id == missing


def test_list_filters_by_team_search_and_tag(store):
    _create(store, title="Quarterly Report", tags=["finance"])
    _create(store, content="the report body", tags=["ops"])
    _create(store, title="Other", tags=["finance"])
    _create(store, team_id=TEAM_B, title="Report B", tags=["hr"])

    page = store.list_documents(DocumentQuery(teamId=TEAM_A, search="REPORT"))
    assert page.total == 2
    assert page.all_tags == ["finance", "ops"]

    page = store.list_documents(DocumentQuery(teamId=TEAM_A, tag="finance"))
    assert {item.title for item in page.items} == {"Quarterly Report", "Other"}

    page = store.list_documents(DocumentQuery())
    assert page.total == 4
    assert page.all_tags == ["finance", "hr", "ops"]


def test_list_orders_by_most_recent_update_and_paginates(store):
    first = _create(store, title="first")
    second = _create(store, title="second")
    third = _create(store, title="third")
    store.update(first.id, UpdateDocumentCommand(title="first again"))

    page = store.list_documents(DocumentQuery(page=1, limit=2))
    assert [item.id for item in page.items] == [first.id, third.id]
    assert page.total == 3
    assert page.total_pages == 2

    page = store.list_documents(DocumentQuery(page=2, limit=2))
    assert [item.id for item in page.items] == [second.id]


def test_update_only_touches_provided_fields(store):
    record = _create(store, title="old", content="body", tags=["a"])

    updated = store.update(record.id, UpdateDocumentCommand(tags=["b", "c"]))

    assert updated.title == "old"
    assert updated.content == "body"
    assert updated.tags == ["b", "c"]
    assert updated.team_id == TEAM_A


def test_delete(store):
    record = _create(store)

    store.delete(record.id)

    with pytest.raises(DocumentNotFoundError):
        store.get(record.id)
    with pytest.raises(DocumentNotFoundError):
        store.delete(record.id)


def test_popular_tags_ranks_by_count_then_name(store):
    _create(store, tags=["q3", "finance"])
    _create(store, tags=["finance", "draft"])
    _create(store, tags=["finance", "q3"])
    _create(store, team_id=TEAM_B, tags=["draft", "draft-b"])

    assert store.popular_tags(limit=2) == [("finance", 3), ("draft", 2)]
    assert store.popular_tags(team_id=TEAM_A) == [("finance", 3), ("q3", 2), ("draft", 1)]


def test_returned_records_are_copies(store):
    record = _create(store, title="kept", tags=["a"])

    fetched = store.get(record.id)
    fetched.title = "changed outside"
    fetched.tags.append("leak")
    record.tags.append("leak-too")

    stored = store.get(record.id)
    assert stored.title == "kept"
    assert stored.tags == ["a"]
    assert store.list_documents(DocumentQuery()).items[0].tags == ["a"]


def test_update_result_is_not_changed_by_later_updates(store):
    record = _create(store, title="v1")

    first = store.update(record.id, UpdateDocumentCommand(title="v2"))
    store.update(record.id, UpdateDocumentCommand(title="v3"))

    assert first.title == "v2"
    assert store.get(record.id).title == "v3"
