"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from deckcore.sm2 import SqlItemRepository, new_item


NOW = datetime(2026, 3, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_item():
    """Factory for items with overridable scheduling fields."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        n = counter["n"]
        created_at = overrides.pop("created_at", NOW - timedelta(days=30, minutes=n))
        item = new_item(
            word=overrides.pop("word", f"woord{n}"),
            translation=overrides.pop("translation", f"word{n}"),
            deck_id=overrides.pop("deck_id", None),
            created_at=created_at,
            item_id=overrides.pop("item_id", f"item-{n:04d}"),
        )
        for key, value in overrides.items():
            setattr(item, key, value)
        return item

    return _make


@pytest.fixture
def graduated(make_item):
    """Factory for items already out of the learning phase."""
    def _make(**overrides):
        overrides.setdefault("is_learning", False)
        overrides.setdefault("interval_days", 10)
        return make_item(**overrides)

    return _make


@pytest.fixture
def repo() -> SqlItemRepository:
    """In-memory SQLite repository with a fresh schema."""
    repository = SqlItemRepository("sqlite://")
    repository.init_db()
    yield repository
    repository.engine.dispose()


@pytest.fixture
def deck_id(repo) -> int:
    return repo.add_deck("Dutch verbs")
