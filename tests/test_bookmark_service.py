from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from lotto_report.db import create_app_engine
from lotto_report.models.base import Base
from lotto_report.models.kv_entry import KeyValueEntry
from lotto_report.records import GeneratedCombination
from lotto_report.repositories.bookmark_repository import BookmarkRepository
from lotto_report.services.bookmark_service import BookmarkService


@pytest.fixture
def session_factory(tmp_path):
    engine = create_app_engine(f"sqlite:///{tmp_path / 'bookmarks.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def repository(session_factory):
    return BookmarkRepository(session_factory)


def combo(id_: str, numbers=(1, 2, 3, 4, 5, 6), match_round=None) -> GeneratedCombination:
    return GeneratedCombination.create(id=id_, numbers=numbers, reason="random", match_round=match_round)


class BrokenRepository:
    def __init__(self, items=None) -> None:
        self._items = items or []
        self.save_calls = 0

    def load(self):
        return list(self._items)

    def save_all(self, items):
        self.save_calls += 1
        raise SQLAlchemyError("database is locked")


class UnreadableRepository:
    def load(self):
        raise OperationalError("SELECT", {}, Exception("no such table"))

    def save_all(self, items):
        pass


def test_saving_same_id_twice_keeps_one_entry(repository):
    service = BookmarkService(repository)

    first = service.save(combo("x"))
    second = service.save(combo("x", numbers=(7, 8, 9, 10, 11, 12)))

    assert first.changed is True
    assert second.changed is False
    assert second.bookmark.numbers == (1, 2, 3, 4, 5, 6)
    assert [b.id for b in service.list_bookmarks()] == ["x"]


def test_newest_bookmark_first(repository):
    service = BookmarkService(repository)

    service.save(combo("a"))
    service.save(combo("b"))

    assert [b.id for b in service.list_bookmarks()] == ["b", "a"]


def test_removing_unknown_id_is_a_no_op(repository):
    service = BookmarkService(repository)
    service.save(combo("a"))

    change = service.remove("missing")

    assert change.changed is False
    assert change.bookmark is None
    assert [b.id for b in service.list_bookmarks()] == ["a"]


def test_bookmarks_survive_a_restart(repository):
    service = BookmarkService(repository)
    service.save(combo("a", numbers=(45, 1, 20, 3, 33, 12), match_round=1000))
    service.save(combo("b"))
    service.remove("b")

    reloaded = BookmarkService(repository)
    items = reloaded.load()

    assert [b.id for b in items] == ["a"]
    assert items[0].numbers == (1, 3, 12, 20, 33, 45)
    assert items[0].sum == 114
    assert items[0].match_round == 1000


def test_stored_document_is_the_whole_list(repository, session_factory):
    service = BookmarkService(repository)
    service.save(combo("a"))
    service.save(combo("b"))

    stored = repository.load()

    assert [item["id"] for item in stored] == ["b", "a"]
    assert stored[0] == {
        "id": "b",
        "numbers": [1, 2, 3, 4, 5, 6],
        "sum": 21,
        "reason": "random",
        "matchRound": None,
    }
    with session_factory() as session:
        assert session.query(KeyValueEntry).count() == 1


def test_persistence_failure_is_reported_but_not_fatal():
    repo = BrokenRepository()
    service = BookmarkService(repo)

    change = service.save(combo("a"))

    assert change.changed is True
    assert change.persisted is False
    assert [b.id for b in service.list_bookmarks()] == ["a"]

    removed = service.remove("a")
    assert removed.changed is True
    assert removed.persisted is False
    assert service.list_bookmarks() == []
    assert repo.save_calls == 2


def test_unreadable_storage_starts_empty():
    service = BookmarkService(UnreadableRepository())

    assert service.load() == []


def test_invalid_stored_entries_are_skipped():
    stored = [
        {"id": "ok", "numbers": [1, 2, 3, 4, 5, 6], "reason": "ai"},
        {"id": "short", "numbers": [1, 2, 3]},
        {"id": "dupe", "numbers": [1, 1, 2, 3, 4, 5]},
        {"numbers": [1, 2, 3, 4, 5, 6]},
        {"id": "ok", "numbers": [7, 8, 9, 10, 11, 12]},
    ]
    service = BookmarkService(BrokenRepository(stored))

    items = service.load()

    assert [b.id for b in items] == ["ok"]
    assert items[0].reason == "ai"


def test_non_json_document_loads_as_empty(repository, session_factory):
    with session_factory.begin() as session:
        session.add(KeyValueEntry(key=repository.key, value="not json"))

    assert repository.load() == []
