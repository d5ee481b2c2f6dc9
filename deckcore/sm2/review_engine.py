"""
Review Engine - SM-2 Scheduling Logic

Pure durable scheduling and state updates (no database calls).

Main workflow:
1. Fetch the deck's items (caller's responsibility)
2. Pull the due candidates
3. Apply the graded outcome to one item
4. Return updated item + review log entry

This module handles ONLY the algorithm logic.
Database I/O is handled by the database module.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Iterable, Optional, Tuple
import math
import random

from deckcore.session_builders.pool_utils import shuffled, take
from deckcore.sm2.constants import (
    AGAIN_REQUEUE_MINUTES,
    EASE_AGAIN_DELTA,
    EASE_EASY_DELTA,
    EASE_HARD_DELTA,
    EASE_MIN,
    EASY_BONUS_MULTIPLIER,
    GRADUATION_INTERVAL_DAYS,
    HARD_INTERVAL_MULTIPLIER,
    HARD_LEARNING_REQUEUE_MINUTES,
    MIN_GRADUATED_INTERVAL_DAYS,
    REVIEW_PULL_LIMIT,
    STRUGGLING_ACCURACY,
    Quality,
)
from deckcore.sm2.item_state import (
    LearnableItem,
    ReviewLogEntry,
    ease_penalty,
    validate_quality,
)


def pull_due(
    items: Iterable[LearnableItem],
    now: datetime,
    limit: int = REVIEW_PULL_LIMIT,
    rng: Optional[random.Random] = None
) -> list[LearnableItem]:
    """
    Select the items due for a real review.

    The earliest-due items win the cap; the survivors are shuffled so the
    presentation order is not predictable.

    Args:
        items: All items of a deck
        now: Current time
        limit: Maximum number of items returned (guards huge backlogs)
        rng: Optional random source for the final shuffle

    Returns:
        Up to `limit` due items in random order
    """
    due = [item for item in items if item.next_due_at <= now]
    due.sort(key=lambda item: item.next_due_at)
    return shuffled(take(due, limit), rng)


def process_outcome(
    item: LearnableItem,
    quality: int,
    now: datetime
) -> Tuple[LearnableItem, ReviewLogEntry]:
    """
    Process a real review and return the updated item + log entry.

    No database calls. Caller is responsible for:
    1. Saving the item after review
    2. Appending the log entry

    Args:
        item: Item to update (modified in place)
        quality: Recall grade (AGAIN=0, HARD=1, GOOD=2, EASY=3)
        now: Review timestamp

    Returns:
        Tuple of (updated_item, review_log_entry)

    Raises:
        ValueError: If quality is outside 0-3 (item left untouched)
    """
    quality = validate_quality(quality)
    is_correct = quality > Quality.AGAIN

    item.review_count += 1
    if is_correct:
        item.correct_count += 1
    else:
        item.incorrect_count += 1

    item.last_reviewed_at = now
    item.is_struggling = (item.correct_count / item.review_count) < STRUGGLING_ACCURACY

    if quality == Quality.AGAIN:
        _apply_failure(item, now)
    else:
        if item.is_learning:
            _apply_learning_success(item, quality, now)
        else:
            _apply_graduated_success(item, quality)

        item.practice_fail_count = 0
        if not item.is_learning:
            item.next_due_at = now + timedelta(days=item.interval_days)

    entry = ReviewLogEntry(reviewed_at=now, is_correct=is_correct, item_id=item.item_id)
    return item, entry


def _apply_failure(item: LearnableItem, now: datetime):
    """
    AGAIN: demote to the learning phase and re-queue almost immediately.
    """
    item.is_struggling = True
    item.ease_factor = max(EASE_MIN, item.ease_factor - EASE_AGAIN_DELTA)
    item.interval_days = 0
    item.is_learning = True
    item.next_due_at = now + timedelta(minutes=AGAIN_REQUEUE_MINUTES)


def _apply_learning_success(item: LearnableItem, quality: Quality, now: datetime):
    """
    Learning phase: GOOD/EASY graduate, HARD stays for a 10 minute re-queue.
    """
    if quality >= Quality.GOOD:
        item.is_learning = False
        item.interval_days = GRADUATION_INTERVAL_DAYS[quality]
    else:
        item.next_due_at = now + timedelta(minutes=HARD_LEARNING_REQUEUE_MINUTES)


def _apply_graduated_success(item: LearnableItem, quality: Quality):
    """
    Graduated phase: ease-driven interval growth.

    Shadow practice failures shrink the ease gain (or deepen the loss).
    """
    penalty = ease_penalty(item.practice_fail_count)

    if quality == Quality.HARD:
        item.ease_factor = max(EASE_MIN, item.ease_factor - EASE_HARD_DELTA - penalty)
        growth = item.interval_days * HARD_INTERVAL_MULTIPLIER
    elif quality == Quality.GOOD:
        item.ease_factor = max(EASE_MIN, item.ease_factor - penalty)
        growth = item.interval_days * item.ease_factor
    else:
        # Only ever increases, so no floor
        item.ease_factor += EASE_EASY_DELTA - penalty
        growth = item.interval_days * item.ease_factor * EASY_BONUS_MULTIPLIER

    item.interval_days = max(MIN_GRADUATED_INTERVAL_DAYS, math.floor(growth))
