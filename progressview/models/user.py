# progressview/models/user.py

# ─── Model ────────────────────────────────────────────────────────────────────
#            User State and Completion Records
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Defines Pydantic models for a user's state: identity plus the ordered list
of completion records, each optionally carrying a per-function gas report.
Field aliases match the camelCase JSON written by the challenge runner.
"""

# SECTION: IMPORTS
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from progressview.helpers._date import convert_timestamp_to_utc


# ENUM: CompletionStatus
class CompletionStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"


# KLASS: GasEntry
class GasEntry(BaseModel):
    """Gas used by one contract function."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    function_name: str = Field(..., alias="functionName")
    gas_used: int = Field(0, alias="gasUsed", ge=0)


# KLASS: CompletionRecord
class CompletionRecord(BaseModel):
    """One logged attempt at a challenge."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    challenge_name: str = Field(..., alias="challengeName")
    status: str = Field(CompletionStatus.PENDING.value, description="success / error / pending; other values kept verbatim.")
    timestamp: int | float | str | None = Field(None, description="Epoch milliseconds or ISO 8601 string.")
    contract_address: str | None = Field(None, alias="contractAddress")
    network: str | None = None
    gas_report: list[GasEntry] | None = Field(None, alias="gasReport")

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: Any) -> str:
        if isinstance(value, CompletionStatus):
            return value.value
        if isinstance(value, str):
            return value
        return CompletionStatus.PENDING.value

    @property
    def is_success(self) -> bool:
        return self.status == CompletionStatus.SUCCESS.value

    @property
    def completed_at(self) -> datetime | None:
        """Timestamp as an aware UTC datetime (None if missing or unparseable)."""
        return convert_timestamp_to_utc(self.timestamp)


# KLASS: UserState
class UserState(BaseModel):
    """A user's identity and completion history."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    address: str = Field(..., description="Wallet address.")
    ens: str | None = Field(None, description="Optional human-readable alias.")
    challenges: list[CompletionRecord] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.ens or self.address

    def successful(self) -> list[CompletionRecord]:
        """Success-status records in record order."""
        return [c for c in self.challenges if c.is_success]
