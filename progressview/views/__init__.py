# progressview/views/__init__.py

"""Views that turn user progress into display trees."""

from .progress_view import (
    DEFAULT_POINTS,
    POINTS_PER_LEVEL,
    CompletedChallenge,
    ProgressSummary,
    ProgressView,
    build_progress_tree,
    points_for_level,
)
from .rich_tree import build_rich_tree, print_progress_tree

__all__ = [
    "DEFAULT_POINTS",
    "POINTS_PER_LEVEL",
    "CompletedChallenge",
    "ProgressSummary",
    "ProgressView",
    "build_progress_tree",
    "points_for_level",
    "build_rich_tree",
    "print_progress_tree",
]
