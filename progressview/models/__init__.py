# progressview/models/__init__.py

"""Data models: challenge catalog, user state, and the display tree."""

from .challenge import ChallengeCatalog, ChallengeDefinition
from .tree import TreeNode
from .user import CompletionRecord, CompletionStatus, GasEntry, UserState

__all__ = [
    "ChallengeCatalog",
    "ChallengeDefinition",
    "CompletionRecord",
    "CompletionStatus",
    "GasEntry",
    "TreeNode",
    "UserState",
]
