# progressview/models/challenge.py

# ─── Title ────────────────────────────────────────────────────────────────────
#            Challenge Catalog Models
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Defines Pydantic models for challenge definitions and the catalog that
holds them. The catalog is static input: it is looked up by exact challenge
name and filtered by the `enabled` flag.
"""

# SECTION: IMPORTS
from __future__ import annotations

from typing import Any, Iterator

import emoji_data_python
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator



# KLASS: ChallengeDefinition
class ChallengeDefinition(BaseModel):
    """A single challenge a user can complete."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = Field(..., description="Unique challenge key.")
    label: str = Field("", description="Display name (parsed emoji).")
    description: str = Field("", description="Challenge description (parsed emoji).")
    level: int = Field(1, description="Difficulty level, 1-6 observed.")
    enabled: bool = Field(True, description="Whether the challenge counts towards completion rate.")

    @field_validator("label", "description", mode="before")
    @classmethod
    def parse_text_emoji(cls, value: Any) -> str:
        if isinstance(value, str):
            return emoji_data_python.replace_colons(value).strip()
        return ""

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label") and data.get("name"):
            data = {**data, "label": data["name"]}
        return data


# KLASS: ChallengeCatalog
class ChallengeCatalog(BaseModel):
    """Ordered collection of challenge definitions."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    challenges: list[ChallengeDefinition] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_list(cls, data: Any) -> Any:
        """Accepts a bare JSON array as well as `{"challenges": [...]}`."""
        if isinstance(data, list):
            return {"challenges": data}
        return data

    def __iter__(self) -> Iterator[ChallengeDefinition]:  # type: ignore[override]
        return iter(self.challenges)

    def __len__(self) -> int:
        return len(self.challenges)

    def find(self, name: str) -> ChallengeDefinition | None:
        """First definition whose name equals `name` exactly."""
        for challenge in self.challenges:
            if challenge.name == name:
                return challenge
        return None

    def enabled(self) -> list[ChallengeDefinition]:
        return [c for c in self.challenges if c.enabled]
