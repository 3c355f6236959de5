# progressview/views/progress_view.py

# ─── View ─────────────────────────────────────────────────────────────────────
#            Progress Tree Builder
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Builds the progress menu tree for a user.

Successful completion records are joined to the challenge catalog by exact
name; records without a matching challenge are dropped. From the matched
completions the view derives points and completion rate and assembles:

    Progress Menu
    ├── Progress Stats
    └── Completed Challenges
        └── <challenge label>
            └── View Gas Report        (only when a gas report exists)
                └── <function>: <gas> gas   (disabled)

The build is pure: inputs are never modified and every call returns a fresh
tree. Text decoration is delegated to an injected `Styler`.
"""

# SECTION: IMPORTS
from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

from pydantic import BaseModel, ConfigDict

from progressview.helpers._date import format_local_datetime
from progressview.helpers._format import format_number, format_percentage
from progressview.helpers._logger import log
from progressview.helpers._styles import PLAIN, Styler
from progressview.models.challenge import ChallengeCatalog, ChallengeDefinition
from progressview.models.tree import TreeNode
from progressview.models.user import CompletionRecord, GasEntry, UserState

# SECTION: CONSTANTS
POINTS_PER_LEVEL: tuple[int, ...] = (100, 150, 225, 300, 400, 500)
DEFAULT_POINTS = 100


# FUNC: points_for_level
def points_for_level(level: int) -> int:
    """Points awarded for a challenge of the given level (fallback 100)."""
    if 1 <= level <= len(POINTS_PER_LEVEL):
        return POINTS_PER_LEVEL[level - 1] or DEFAULT_POINTS
    return DEFAULT_POINTS


# KLASS: CompletedChallenge
class CompletedChallenge(NamedTuple):
    challenge: ChallengeDefinition
    completion: CompletionRecord


# KLASS: ProgressSummary
class ProgressSummary(BaseModel):
    """Derived statistics shown in the stats node."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    points: int
    completed: int
    successful: int
    enabled: int
    completion_rate: str


# KLASS: ProgressView
class ProgressView:
    """Assembles the progress menu tree from user state and the challenge catalog."""

    def __init__(
        self,
        user_state: UserState,
        challenges: ChallengeCatalog | Sequence[ChallengeDefinition],
        styler: Styler | None = None,
    ) -> None:
        self.user_state = user_state
        if isinstance(challenges, ChallengeCatalog):
            self.catalog = challenges
        else:
            self.catalog = ChallengeCatalog(challenges=list(challenges))
        self.styler: Styler = styler or PLAIN

    # --- Derived data ---

    def completed(self) -> list[CompletedChallenge]:
        """Successful completions joined to their challenge, in record order."""
        matched: list[CompletedChallenge] = []
        for completion in self.user_state.successful():
            challenge = self.catalog.find(completion.challenge_name)
            if challenge is None:
                log.debug(f"Dropping completion for unknown challenge '{completion.challenge_name}'.")
                continue
            matched.append(CompletedChallenge(challenge, completion))
        return matched

    @staticmethod
    def calculate_points(completed: Iterable[CompletedChallenge]) -> int:
        return sum(points_for_level(item.challenge.level) for item in completed)

    def enabled_count(self) -> int:
        return len(self.catalog.enabled())

    def completion_rate(self, completed: Sequence[CompletedChallenge] | None = None) -> str:
        """Matched completions over enabled challenges, as a percentage with one decimal."""
        if completed is None:
            completed = self.completed()
        return format_percentage(len(completed), self.enabled_count())

    def summary(self) -> ProgressSummary:
        completed = self.completed()
        return ProgressSummary(
            display_name=self.user_state.display_name,
            points=self.calculate_points(completed),
            completed=len(completed),
            successful=len(self.user_state.successful()),
            enabled=self.enabled_count(),
            completion_rate=self.completion_rate(completed),
        )

    # --- Tree assembly ---

    def build_progress_tree(self) -> TreeNode:
        """Root node with the stats node and the completed-challenges node."""
        completed = self.completed()
        points = self.calculate_points(completed)
        completion_rate = self.completion_rate(completed)

        stats_node = TreeNode(
            label="Progress Stats",
            name="stats",
            children=[],
            message=self.build_stats_message(points, completion_rate),
        )

        challenge_nodes = [self.build_challenge_node(item) for item in completed]

        completed_node = TreeNode(
            label="Completed Challenges",
            name="completed",
            children=challenge_nodes,
            message=f"You have completed {len(completed)} challenges",
        )

        return TreeNode(
            label="Progress Menu",
            name="progress-menu",
            children=[stats_node, completed_node],
            message="View your progress",
        )

    def build_challenge_node(self, item: CompletedChallenge) -> TreeNode:
        challenge, completion = item
        children: list[TreeNode] = []
        if completion.gas_report:
            children.append(self.build_gas_report_node(completion.gas_report))

        return TreeNode(
            label=self.styler.text(challenge.label),
            name=challenge.name,
            children=children,
            message=self.build_challenge_message(challenge, completion),
        )

    def build_gas_report_node(self, gas_report: Sequence[GasEntry]) -> TreeNode:
        """Gas report node: one disabled leaf per entry, highest gas first."""
        s = self.styler
        # sorted() is stable, so equal-gas entries keep their reported order
        entries = sorted(gas_report, key=lambda entry: entry.gas_used, reverse=True)
        total_gas = sum(entry.gas_used for entry in entries)

        nodes = [
            TreeNode(
                label=f"{s.text(entry.function_name)}: {s.yellow(f'{format_number(entry.gas_used)} gas')}",
                name=f"gas-entry-{entry.function_name}",
                children=[],
                disabled=True,
                message=(
                    f"Function: {s.text(entry.function_name)}\n"
                    f"Gas Used: {format_number(entry.gas_used)} "
                    f"({format_percentage(entry.gas_used, total_gas)}% of total)"
                ),
            )
            for entry in entries
        ]

        return TreeNode(
            label="View Gas Report",
            name="gas-report",
            children=nodes,
            message=f"Total Gas Used: {s.bold(format_number(total_gas))}\nDetailed breakdown:",
        )

    # --- Messages ---

    def build_stats_message(self, points: int, completion_rate: str) -> str:
        s = self.styler
        successful = len(self.user_state.successful())
        return (
            f"{s.bold('Your Stats')}\n"
            "\n"
            f"Address: {s.blue(self.user_state.display_name)}\n"
            f"{s.yellow(f'Points Earned: {format_number(points)}')}\n"
            "\n"
            "Challenge Progress\n"
            f"Total Challenges: {s.blue(self.enabled_count())}\n"
            f"Completed: {s.blue(f'{successful} ({completion_rate}%)')}\n"
        )

    def build_challenge_message(self, challenge: ChallengeDefinition, completion: CompletionRecord) -> str:
        s = self.styler
        message = f"{s.bold(challenge.label)}\n\n"
        message += f"Description: {s.text(challenge.description)}\n\n"
        message += f"Completion Date: {s.blue(format_local_datetime(completion.timestamp))}\n"

        if completion.contract_address:
            message += f"Contract Address: {s.blue(completion.contract_address)}\n"
            message += f"Network: {s.blue(completion.network or 'unknown')}\n"

        return message


# FUNC: build_progress_tree
def build_progress_tree(
    user_state: UserState,
    challenges: ChallengeCatalog | Sequence[ChallengeDefinition],
    styler: Styler | None = None,
) -> TreeNode:
    """Convenience wrapper around `ProgressView(...).build_progress_tree()`."""
    return ProgressView(user_state, challenges, styler).build_progress_tree()
