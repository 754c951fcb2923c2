"""
Data models for commit-comments.

This module contains the shared data structures passed between the stages
of the fetch pipeline.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RepoReference:
    """A GitHub repository identified by its owner and name."""
    author: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.author}/{self.name}"


@dataclass
class HttpOutcome:
    """Raw status code and body of a single API response."""
    status_code: int
    body: str


@dataclass
class StatusCheck:
    """Result of checking a response status code."""
    ok: bool
    error: Optional[str] = None


@dataclass
class CommitListing:
    """Commit messages extracted from a response, or the reason there are none."""
    messages: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
