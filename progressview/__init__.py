# progressview/__init__.py
"""ProgressView Package Initialization.

Turns a user's challenge completion records into a progress menu tree for
terminal display.
"""

__version__ = "0.1.0"

from progressview.models import (
    ChallengeCatalog,
    ChallengeDefinition,
    CompletionRecord,
    GasEntry,
    TreeNode,
    UserState,
)
from progressview.views import ProgressView, build_progress_tree

__all__ = [
    "ChallengeCatalog",
    "ChallengeDefinition",
    "CompletionRecord",
    "GasEntry",
    "ProgressView",
    "TreeNode",
    "UserState",
    "build_progress_tree",
]
