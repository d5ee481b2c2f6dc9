"""
SM-2 - Review and Practice Scheduling

Main API for the flashcard scheduling core.

This package implements an SM-2 variant with:
- Durable review scheduling (ease factor, interval, learning phase, due date)
- Schedule-neutral practice that only records a shadow failure count
- Tiered candidate selection for both modes

Quick start:
    from deckcore import sm2

    # Set up persistence
    repo = sm2.SqlItemRepository("sqlite:///decks.db")
    repo.init_db()

    # Pick due items for a deck (algorithm only, no DB calls)
    due = sm2.pull_due(repo.fetch_items_for_deck(deck_id), now)

    # Apply a grade and persist it
    item, entry = sm2.review_item(repo, due[0], sm2.Quality.GOOD)
"""

# Core engine API (algorithm logic)
from deckcore.sm2.review_engine import pull_due, process_outcome
from deckcore.sm2.practice_engine import pull_practice, process_practice_outcome

# Orchestration
from deckcore.sm2.scheduling import review_item, practice_item

# Database API
from deckcore.sm2.database import (
    ItemRepository,
    PersistenceError,
    SqlItemRepository,
    get_database_url,
    get_engine,
    init_db,
    is_test_mode,
    reset_db,
)

# Constants and parameters
from deckcore.sm2.constants import (
    Quality,
    StudyMode,
    EASE_INITIAL,
    EASE_MIN,
    REVIEW_PULL_LIMIT,
    PRACTICE_TIER_LIMIT,
    RECENT_REVIEW_DAYS,
    STRUGGLING_ACCURACY,
)

# Item state
from deckcore.sm2.item_state import (
    LearnableItem,
    ReviewLogEntry,
    accuracy,
    ease_penalty,
    new_item,
    validate_quality,
)


__all__ = [
    # Core algorithm
    "pull_due",
    "process_outcome",
    "pull_practice",
    "process_practice_outcome",

    # Orchestration
    "review_item",
    "practice_item",

    # Database operations
    "ItemRepository",
    "PersistenceError",
    "SqlItemRepository",
    "get_database_url",
    "get_engine",
    "init_db",
    "is_test_mode",
    "reset_db",

    # Enums
    "Quality",
    "StudyMode",

    # Item state
    "LearnableItem",
    "ReviewLogEntry",
    "accuracy",
    "ease_penalty",
    "new_item",
    "validate_quality",

    # Parameters
    "EASE_INITIAL",
    "EASE_MIN",
    "REVIEW_PULL_LIMIT",
    "PRACTICE_TIER_LIMIT",
    "RECENT_REVIEW_DAYS",
    "STRUGGLING_ACCURACY",
]
