"""Tests for the study session lifecycle."""

from datetime import timedelta

import pytest

from deckcore.sm2 import PersistenceError, Quality, SqlItemRepository, StudyMode
from deckcore.study_session import StudySession


@pytest.fixture
def seeded_deck(repo, deck_id, make_item, now):
    """Three due items, one item due tomorrow."""
    for n in range(3):
        repo.add_item(make_item(deck_id=deck_id, next_due_at=now - timedelta(hours=n + 1)))
    repo.add_item(make_item(deck_id=deck_id, next_due_at=now + timedelta(days=1)))
    return deck_id


def test_review_session_queues_due_items(repo, seeded_deck, now):
    session = StudySession(repo, seeded_deck, StudyMode.REVIEW, now_fn=lambda: now)

    assert session.start() == 3
    assert session.remaining == 3
    assert session.current is not None


def test_review_session_persists_answers(repo, seeded_deck, now):
    session = StudySession(repo, seeded_deck, StudyMode.REVIEW, now_fn=lambda: now)
    session.start()

    while not session.is_finished:
        entry = session.answer(Quality.GOOD)
        assert entry.is_correct is True

    assert len(repo.fetch_logs(deck_id=seeded_deck)) == 3
    graduated = [i for i in repo.fetch_items_for_deck(seeded_deck) if not i.is_learning]
    assert len(graduated) == 3
    assert session.summary().answered == 3
    assert session.summary().correct == 3


def test_again_is_requeued_in_same_session(repo, seeded_deck, now):
    session = StudySession(repo, seeded_deck, StudyMode.REVIEW, now_fn=lambda: now)
    session.start()
    failed = session.current

    session.answer(Quality.AGAIN)
    session.answer(Quality.GOOD)
    session.answer(Quality.GOOD)

    assert session.current is failed
    session.answer(Quality.EASY)

    assert session.is_finished
    summary = session.summary()
    assert summary.requeued == 1
    assert summary.answered == 4
    assert summary.correct == 3
    assert repo.get_item(failed.item_id).interval_days == 4


def test_practice_session_leaves_schedule_alone(repo, deck_id, make_item, now):
    for n in range(4):
        repo.add_item(make_item(deck_id=deck_id, next_due_at=now + timedelta(days=n + 1)))
    before = {i.item_id: i.next_due_at for i in repo.fetch_items_for_deck(deck_id)}

    session = StudySession(repo, deck_id, StudyMode.PRACTICE, now_fn=lambda: now)
    assert session.start() == 4

    failed = session.current
    assert session.answer(Quality.AGAIN) is None
    while not session.is_finished:
        session.answer(Quality.GOOD)

    items = repo.fetch_items_for_deck(deck_id)
    assert {i.item_id: i.next_due_at for i in items} == before
    assert repo.fetch_logs() == []
    assert repo.get_item(failed.item_id).practice_fail_count == 1
    assert session.summary().requeued == 1


def test_answer_after_finish_raises(repo, deck_id, now):
    session = StudySession(repo, deck_id, StudyMode.REVIEW, now_fn=lambda: now)
    session.start()

    assert session.is_finished
    with pytest.raises(RuntimeError):
        session.answer(Quality.GOOD)


@pytest.mark.parametrize("mode", [StudyMode.REVIEW, StudyMode.PRACTICE])
def test_invalid_quality_does_not_advance(repo, seeded_deck, now, mode):
    session = StudySession(repo, seeded_deck, mode, now_fn=lambda: now)
    session.start()
    current = session.current

    with pytest.raises(ValueError):
        session.answer(9)

    assert session.current is current
    assert current.review_count == 0
    assert current.practice_fail_count == 0
    assert session.summary().answered == 0


class FailingRepository:
    def __init__(self, items):
        self.items = items

    def fetch_items_for_deck(self, deck_id):
        return list(self.items)

    def save(self, item):
        raise PersistenceError("disk full")

    def append_log(self, entry):
        raise PersistenceError("disk full")

    def save_review(self, item, entry):
        raise PersistenceError("disk full")


@pytest.mark.parametrize("mode", [StudyMode.REVIEW, StudyMode.PRACTICE])
def test_failed_write_discards_answer(make_item, now, mode):
    item = make_item(next_due_at=now - timedelta(hours=1), is_struggling=True)
    session = StudySession(FailingRepository([item]), 1, mode, now_fn=lambda: now)
    session.start()

    with pytest.raises(PersistenceError):
        session.answer(Quality.AGAIN)

    assert session.current is item
    assert item.review_count == 0
    assert item.practice_fail_count == 0
    assert item.is_learning is True
    assert session.summary().answered == 0


class BrokenLogRepository(SqlItemRepository):
    """Writes items normally but produces log rows the database rejects."""

    def _to_log_model(self, entry):
        log = super()._to_log_model(entry)
        log.reviewed_at = None
        return log


def test_rejected_log_leaves_item_row_and_memory_untouched(make_item, now):
    repository = BrokenLogRepository("sqlite://")
    repository.init_db()
    deck_id = repository.add_deck("Dutch verbs")
    repository.add_item(make_item(deck_id=deck_id, next_due_at=now - timedelta(hours=1)))

    session = StudySession(repository, deck_id, StudyMode.REVIEW, now_fn=lambda: now)
    session.start()
    item = session.current

    with pytest.raises(PersistenceError):
        session.answer(Quality.GOOD)

    stored = repository.get_item(item.item_id)
    assert stored == item
    assert stored.review_count == 0
    assert stored.is_learning is True
    assert repository.fetch_logs() == []
    assert session.current is item
    repository.engine.dispose()
