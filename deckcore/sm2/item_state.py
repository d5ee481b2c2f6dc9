"""
Item State - Learnable Item and Review Log Entry

Defines the scheduling state carried by every flashcard and the derived
quantities the engines read from it.

Key concepts:
- Ease factor: how fast the interval grows after successful recall
- Learning phase: short fixed re-queues before the ease-driven formula applies
- Practice fail count: shadow signal from consequence-free rehearsal
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from deckcore.sm2.constants import (
    EASE_INITIAL,
    PRACTICE_PENALTY_CAP,
    PRACTICE_PENALTY_PER_FAIL,
    Quality,
)


@dataclass
class LearnableItem:
    """
    Scheduling state for a single flashcard.

    Content fields (word, translation, ...) are carried for callers but are
    never read by the engines.
    """
    item_id: str
    created_at: datetime
    next_due_at: datetime

    deck_id: Optional[int] = None

    # Content
    word: str = ""
    translation: str = ""
    sentence_context: str = ""
    notes: str = ""
    source_title: Optional[str] = None

    # SM-2 parameters
    ease_factor: float = EASE_INITIAL
    interval_days: int = 0
    is_learning: bool = True

    # Real review tracking
    review_count: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    last_reviewed_at: Optional[datetime] = None
    is_struggling: bool = False

    # Shadow practice tracking (reset by a successful real review)
    practice_fail_count: int = 0


@dataclass(frozen=True)
class ReviewLogEntry:
    """
    Append-only record of one real review.
    """
    reviewed_at: datetime
    is_correct: bool
    item_id: str
    log_id: Optional[int] = field(default=None, compare=False)


def new_item(
    word: str,
    translation: str,
    sentence_context: str = "",
    notes: str = "",
    source_title: Optional[str] = None,
    deck_id: Optional[int] = None,
    created_at: Optional[datetime] = None,
    item_id: Optional[str] = None
) -> LearnableItem:
    """
    Initialize state for a new item (never reviewed).

    The item is due immediately: next_due_at starts at creation time.
    """
    if created_at is None:
        created_at = datetime.now(timezone.utc)

    return LearnableItem(
        item_id=item_id or str(uuid.uuid4()),
        created_at=created_at,
        next_due_at=created_at,
        deck_id=deck_id,
        word=word,
        translation=translation,
        sentence_context=sentence_context,
        notes=notes,
        source_title=source_title,
    )


def validate_quality(quality) -> Quality:
    """
    Reject anything outside {0, 1, 2, 3} before an engine touches an item.

    Raises:
        ValueError: If quality is not one of the four recall grades
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise ValueError(f"Quality must be an integer 0-3, got {quality!r}")
    try:
        return Quality(quality)
    except ValueError:
        raise ValueError(f"Quality must be an integer 0-3, got {quality!r}") from None


def ease_penalty(practice_fail_count: int) -> float:
    """
    Ease erosion caused by shadow practice failures.

    0.05 per failure, capped at 0.15:
        0 -> 0.0, 1 -> 0.05, 3 -> 0.15, 10 -> 0.15
    """
    if practice_fail_count <= 0:
        return 0.0
    return min(PRACTICE_PENALTY_CAP, practice_fail_count * PRACTICE_PENALTY_PER_FAIL)


def accuracy(item: LearnableItem) -> Optional[float]:
    """Cumulative real-review accuracy, or None before the first review."""
    if item.review_count <= 0:
        return None
    return item.correct_count / item.review_count
