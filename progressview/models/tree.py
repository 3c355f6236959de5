# progressview/models/tree.py

# SECTION: MODULE DOCSTRING
"""The display tree handed to the menu layer."""

# SECTION: IMPORTS
from __future__ import annotations

from typing import Any, Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field

NodeType = Literal["header"]


# KLASS: TreeNode
class TreeNode(BaseModel):
    """A labeled, nameable menu entry with ordered children."""

    model_config = ConfigDict(extra="forbid")

    label: str
    name: str
    type: NodeType = "header"
    children: list[TreeNode] = Field(default_factory=list)
    message: str | None = None
    disabled: bool | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def selectable(self) -> bool:
        return not self.disabled

    def child(self, name: str) -> TreeNode | None:
        """First direct child with the given name."""
        return next((c for c in self.children if c.name == name), None)

    def walk(self) -> Iterator[TreeNode]:
        """Depth-first, pre-order traversal including this node."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Menu-layer JSON shape; unset optional keys are omitted."""
        return self.model_dump(exclude_none=True)


TreeNode.model_rebuild()
