"""Commit Composition Package"""

from semcommit.commit.record import CommitRecord, normalize_issue
from semcommit.commit.composer import CommitComposer

__all__ = [
    "CommitRecord",
    "CommitComposer",
    "normalize_issue",
]
