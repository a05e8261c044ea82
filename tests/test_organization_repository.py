from __future__ import annotations

import logging
from typing import Iterator

import pytest

from roster_engine.data_models import Organization
from roster_engine.errors import StoreQueryError, StoreSaveError
from roster_engine.repositories.organizations import OrganizationRepository
from roster_engine.store.sqlite_store import SqliteStore, open_store


@pytest.fixture
def store() -> Iterator[SqliteStore]:
    with open_store(in_memory=True) as s:
        yield s


def test_construction_fetches_existing_organizations(store: SqliteStore) -> None:
    existing = Organization(id="o1", title="Acme", owner="Jane")
    store.add(existing)
    store.save()

    repo = OrganizationRepository(store)

    assert repo.organizations.items == (existing,)


def test_create_then_fetch_contains_single_entry(store: SqliteStore) -> None:
    repo = OrganizationRepository(store)

    created = repo.create("Acme", "Jane")

    assert created is not None
    fetched = repo.fetch_all()
    assert [(o.title, o.owner) for o in fetched] == [("Acme", "Jane")]
    assert fetched[0].id == created.id


def test_each_created_organization_appears_once_with_fresh_id(store: SqliteStore) -> None:
    repo = OrganizationRepository(store)

    created = [repo.create(f"Org {i}", f"Owner {i}") for i in range(5)]
    ids = [o.id for o in created if o is not None]

    assert len(set(ids)) == 5
    fetched = repo.fetch_all()
    for org in created:
        assert org is not None
        matches = [o for o in fetched if o.id == org.id]
        assert matches == [org]


def test_empty_title_and_owner_are_accepted(store: SqliteStore) -> None:
    repo = OrganizationRepository(store)

    created = repo.create("", "")

    assert created is not None
    (fetched,) = repo.fetch_all()
    assert fetched.title == ""
    assert fetched.owner == ""


def test_fetch_all_is_idempotent(store: SqliteStore) -> None:
    repo = OrganizationRepository(store)
    repo.create("Acme", "Jane")
    repo.create("Globex", "Hank")

    first = repo.fetch_all()
    second = repo.fetch_all()

    assert sorted(first, key=lambda o: o.id) == sorted(second, key=lambda o: o.id)


def test_create_publishes_new_snapshot(store: SqliteStore) -> None:
    repo = OrganizationRepository(store)
    seen: list[tuple[Organization, ...]] = []
    repo.organizations.subscribe(seen.append)

    created = repo.create("Acme", "Jane")

    assert seen == [(created,)]
    assert store.pending == ()


def test_save_failure_skips_refresh_and_keeps_record_pending(
    store: SqliteStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo = OrganizationRepository(store)
    repo.create("Acme", "Jane")
    before = repo.organizations.items

    def _boom() -> None:
        raise StoreSaveError("disk full")

    monkeypatch.setattr(store, "save", _boom)

    assert repo.create("Globex", "Hank") is None
    assert repo.organizations.items == before
    assert [o.title for o in store.pending] == ["Globex"]


def test_fetch_failure_keeps_stale_list(
    store: SqliteStore, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    repo = OrganizationRepository(store)
    repo.create("Acme", "Jane")
    before = repo.organizations.items

    def _boom(*_args: object, **_kwargs: object) -> None:
        raise StoreQueryError("locked")

    monkeypatch.setattr(store, "query", _boom)

    with caplog.at_level(logging.ERROR):
        result = repo.fetch_all()

    assert result == before
    assert repo.organizations.items == before
    assert "Fetching organizations failed" in caplog.text


def test_create_on_closed_store_logs_and_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    store = open_store(in_memory=True)
    repo = OrganizationRepository(store)
    store.close()

    with caplog.at_level(logging.ERROR):
        assert repo.create("Acme", "Jane") is None

    assert repo.organizations.items == ()
    assert "Saving organization failed" in caplog.text
