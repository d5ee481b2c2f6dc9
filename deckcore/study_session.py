"""
Study session lifecycle for one deck in one mode.

Review sessions run the real scheduler; practice sessions only record
shadow failures. In both modes an item answered AGAIN is queued again
at the end of the session.
"""

from __future__ import annotations

from copy import copy
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Callable, Optional

from deckcore import sm2
from deckcore.sm2 import ItemRepository, LearnableItem, Quality, ReviewLogEntry, StudyMode


@dataclass(frozen=True)
class SessionSummary:
    """
    Counters for a finished (or running) session.
    """
    mode: StudyMode
    answered: int
    correct: int
    requeued: int


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _restore(item: LearnableItem, snapshot: LearnableItem) -> None:
    for f in fields(item):
        setattr(item, f.name, getattr(snapshot, f.name))


class StudySession:
    """
    A pre-computed batch of items plus a cursor.
    """

    def __init__(
        self,
        repository: ItemRepository,
        deck_id: int,
        mode: StudyMode = StudyMode.REVIEW,
        now_fn: Optional[Callable[[], datetime]] = None
    ):
        self.repository = repository
        self.deck_id = deck_id
        self.mode = StudyMode(mode)
        self.now_fn = now_fn or _utc_now

        self.queue: list[LearnableItem] = []
        self.position = 0
        self.answered = 0
        self.correct = 0
        self.requeued = 0

    def start(self) -> int:
        """
        Load the deck and pull candidates for this session's mode.

        Returns:
            Number of queued items
        """
        items = self.repository.fetch_items_for_deck(self.deck_id)
        now = self.now_fn()

        if self.mode == StudyMode.REVIEW:
            self.queue = sm2.pull_due(items, now)
        else:
            self.queue = sm2.pull_practice(items, now)

        self.position = 0
        self.answered = 0
        self.correct = 0
        self.requeued = 0

        print(f"[STUDY SESSION] {self.mode.value} session for deck {self.deck_id}: "
              f"{len(self.queue)} of {len(items)} items queued")
        return len(self.queue)

    @property
    def current(self) -> Optional[LearnableItem]:
        if self.position >= len(self.queue):
            return None
        return self.queue[self.position]

    @property
    def is_finished(self) -> bool:
        return self.current is None

    @property
    def remaining(self) -> int:
        return max(0, len(self.queue) - self.position)

    def answer(self, quality: int) -> Optional[ReviewLogEntry]:
        """
        Apply a grade to the current item and move to the next one.

        If persistence fails the item is rolled back to its pre-answer
        state and the cursor does not move.

        Returns:
            The review log entry in review mode, None in practice mode

        Raises:
            RuntimeError: If the session has no current item
            ValueError: If quality is outside 0-3
            PersistenceError: If the repository rejected the write
        """
        item = self.current
        if item is None:
            raise RuntimeError("Study session is finished; call start() for a new batch")

        snapshot = copy(item)
        entry = None

        try:
            if self.mode == StudyMode.REVIEW:
                _, entry = sm2.review_item(self.repository, item, quality, self.now_fn())
            else:
                sm2.practice_item(self.repository, item, quality)
        except sm2.PersistenceError:
            _restore(item, snapshot)
            print(f"[STUDY SESSION] Write failed for item {item.item_id}; answer discarded")
            raise

        self.answered += 1
        if quality != Quality.AGAIN:
            self.correct += 1
        else:
            self.queue.append(item)
            self.requeued += 1

        self.position += 1
        return entry

    def summary(self) -> SessionSummary:
        return SessionSummary(
            mode=self.mode,
            answered=self.answered,
            correct=self.correct,
            requeued=self.requeued
        )
