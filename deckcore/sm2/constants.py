"""
SM-2 Constants and Parameters

All configurable parameters for the review and practice engines in one place.
"""

from enum import Enum, IntEnum


# ---- Recall Quality ----

class Quality(IntEnum):
    """User self-assessment after a recall attempt."""
    AGAIN = 0  # Recall failed
    HARD = 1   # Recalled with high effort
    GOOD = 2   # Recalled normally
    EASY = 3   # Recalled fluently


class StudyMode(str, Enum):
    """Which engine a study session runs against."""
    REVIEW = "review"      # Real SRS, updates scheduling
    PRACTICE = "practice"  # Consequence-free, tracks shadow performance


# ---- Ease Factor ----

EASE_INITIAL = 2.5
EASE_MIN = 1.3

EASE_AGAIN_DELTA = 0.2   # Subtracted on failure
EASE_HARD_DELTA = 0.15   # Subtracted on HARD for graduated items
EASE_EASY_DELTA = 0.15   # Added on EASY for graduated items


# ---- Interval Growth ----

HARD_INTERVAL_MULTIPLIER = 1.2
EASY_BONUS_MULTIPLIER = 1.3
MIN_GRADUATED_INTERVAL_DAYS = 1

# Interval seeded when an item leaves the learning phase
GRADUATION_INTERVAL_DAYS = {
    Quality.GOOD: 1,
    Quality.EASY: 4,
}


# ---- Learning Phase Re-queue ----

AGAIN_REQUEUE_MINUTES = 1
HARD_LEARNING_REQUEUE_MINUTES = 10


# ---- Struggle Detection ----

STRUGGLING_ACCURACY = 0.8  # Accuracy below this marks an item as struggling


# ---- Shadow Practice Penalty ----

PRACTICE_PENALTY_PER_FAIL = 0.05
PRACTICE_PENALTY_CAP = 0.15


# ---- Candidate Selection ----

REVIEW_PULL_LIMIT = 100    # Cap on due items per review session
PRACTICE_TIER_LIMIT = 20   # Cap per practice tier
RECENT_REVIEW_DAYS = 3     # Window for the recently-reviewed practice tier
