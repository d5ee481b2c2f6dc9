"""Session pool helpers shared by the review and practice engines."""

from deckcore.session_builders.pool_utils import (
    shuffled,
    take,
    union_by_key,
)

__all__ = [
    "shuffled",
    "take",
    "union_by_key",
]
