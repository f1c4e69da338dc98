from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class RawCommit(NamedTuple):
    full_hash: str
    subject: str
    body: str = ""


class SectionName(StrEnum):
    """Declaration order is the order sections are rendered in."""

    BREAKING_CHANGES = "Breaking Changes"
    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"
    FIXED = "Fixed"
    SECURITY = "Security"
    DOCUMENTATION = "Documentation"


class Commit(BaseModel):
    model_config = ConfigDict(frozen=True)

    HASH_LEN: ClassVar[int] = 7

    hash: str = Field(..., description="First 7 characters of the commit hash")
    type: str = Field(..., min_length=1, description="Conventional commit type, e.g. feat")
    scope: str | None = None
    subject: str = Field(..., description="Description with the type/scope prefix removed")
    body: str = ""
    breaking: bool = False
    pr: str | None = Field(
        default=None, description="Pull request number found in the subject line"
    )
    issues: tuple[str, ...] = Field(
        default=(),
        description="Issue numbers referenced by closing keywords, duplicates kept",
    )


@dataclass
class ChangelogSection:
    name: SectionName
    commits: list[Commit] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.commits)


class ChangelogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    date: str
    markdown: str = ""
    commit_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.commit_count == 0
