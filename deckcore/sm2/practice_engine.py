"""
Practice Engine - Shadow Rehearsal

Selects rehearsal candidates and records practice failures.

Practice exists to:
- Revisit struggling and recently reviewed items
- Give a consequence-free session when nothing is due

Key principle:
Practice NEVER moves a due date or touches ease, interval, learning phase,
struggle flag or the real review counters. It only accumulates
practice_fail_count, which the review engine consults at the next real
review.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Iterable, Optional
import random

from deckcore.session_builders.pool_utils import shuffled, take, union_by_key
from deckcore.sm2.constants import PRACTICE_TIER_LIMIT, RECENT_REVIEW_DAYS, Quality
from deckcore.sm2.item_state import LearnableItem, validate_quality


def pull_practice(
    items: Iterable[LearnableItem],
    now: datetime,
    tier_limit: int = PRACTICE_TIER_LIMIT,
    rng: Optional[random.Random] = None
) -> list[LearnableItem]:
    """
    Select practice candidates with a three-tier fallback.

    Tiers:
    1. Struggling items (up to tier_limit)
    2. Items reviewed within the last 3 days (up to tier_limit)
    3. Union of 1 and 2, deduplicated by item_id; not re-capped
    4. If the union is empty: the most recently created items (up to tier_limit)

    Args:
        items: All items of a deck
        now: Current time
        tier_limit: Cap applied to each tier individually
        rng: Optional random source for the final shuffle

    Returns:
        Selected items in random order
    """
    items = list(items)
    recent_cutoff = now - timedelta(days=RECENT_REVIEW_DAYS)

    struggling = take((item for item in items if item.is_struggling), tier_limit)
    recent = take(
        (
            item for item in items
            if item.last_reviewed_at is not None and item.last_reviewed_at >= recent_cutoff
        ),
        tier_limit
    )

    combined = union_by_key([struggling, recent], key=lambda item: item.item_id)

    if not combined:
        newest_first = sorted(items, key=lambda item: item.created_at, reverse=True)
        combined = take(newest_first, tier_limit)

    return shuffled(combined, rng)


def process_practice_outcome(item: LearnableItem, quality: int) -> LearnableItem:
    """
    Record a practice attempt (modifies in place).

    Only AGAIN has an effect: practice_fail_count is incremented. Any other
    grade is a no-op.

    Raises:
        ValueError: If quality is outside 0-3
    """
    quality = validate_quality(quality)
    if quality == Quality.AGAIN:
        item.practice_fail_count += 1
    return item
