"""Tests for item state helpers."""

from datetime import timezone

import pytest

from deckcore.sm2 import EASE_INITIAL, Quality, accuracy, ease_penalty, new_item, validate_quality


@pytest.mark.parametrize("fails, penalty", [
    (0, 0.0),
    (1, 0.05),
    (3, 0.15),
    (10, 0.15),
])
def test_ease_penalty_values(fails, penalty):
    assert ease_penalty(fails) == pytest.approx(penalty)


def test_ease_penalty_monotonic_and_capped():
    penalties = [ease_penalty(n) for n in range(0, 25)]

    assert penalties == sorted(penalties)
    assert max(penalties) == pytest.approx(0.15)


def test_new_item_defaults(now):
    item = new_item("lopen", "to walk", sentence_context="Ik loop naar huis.", created_at=now)

    assert item.ease_factor == EASE_INITIAL
    assert item.interval_days == 0
    assert item.is_learning is True
    assert item.next_due_at == now
    assert item.review_count == 0
    assert item.last_reviewed_at is None
    assert item.is_struggling is False
    assert item.practice_fail_count == 0
    assert item.item_id


def test_new_item_defaults_to_utc_now():
    item = new_item("huis", "house")

    assert item.created_at.tzinfo == timezone.utc
    assert item.next_due_at == item.created_at


def test_new_items_get_distinct_ids():
    assert new_item("a", "b").item_id != new_item("a", "b").item_id


@pytest.mark.parametrize("value", [0, 1, 2, 3])
def test_validate_quality_accepts_grades(value):
    assert validate_quality(value) == Quality(value)


@pytest.mark.parametrize("value", [-1, 4, 1.0, False, "0", None])
def test_validate_quality_rejects(value):
    with pytest.raises(ValueError):
        validate_quality(value)


def test_accuracy(make_item):
    assert accuracy(make_item()) is None
    assert accuracy(make_item(review_count=4, correct_count=3)) == pytest.approx(0.75)
