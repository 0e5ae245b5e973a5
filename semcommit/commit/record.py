"""CommitRecord - structured commit metadata and its rendering."""

from dataclasses import dataclass, field
from typing import Optional

from semcommit import COMMIT_TYPE_NAMES


def normalize_issue(raw: str) -> str:
    """Trim whitespace and any leading '#' markers. May return ''."""
    return raw.strip().lstrip('#')


@dataclass
class CommitRecord:
    """One commit's metadata before rendering."""
    type: str
    description: str
    scope: Optional[str] = None
    body: Optional[str] = None
    breaking: bool = False
    issues: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.type not in COMMIT_TYPE_NAMES:
            raise ValueError(f"Unknown commit type '{self.type}'. Use one of: {', '.join(COMMIT_TYPE_NAMES)}")
        if not self.description or not self.description.strip():
            raise ValueError("Description must not be empty")
        if self.scope is not None and not self.scope.strip():
            self.scope = None
        if any(not issue for issue in self.issues):
            raise ValueError("Issue identifiers must not be empty")

    @property
    def header(self) -> str:
        """First line: type(scope)!: description"""
        scope = f"({self.scope})" if self.scope else ""
        bang = "!" if self.breaking else ""
        return f"{self.type}{scope}{bang}: {self.description}"

    def to_message(self) -> str:
        message = self.header

        if self.body and self.body.strip():
            message += "\n\n" + self.body.strip()

        # The notice repeats the description; there is no separate rationale field
        if self.breaking:
            message += "\n\nBREAKING CHANGE: " + self.description

        if self.issues:
            message += "\n\n" + "".join(f"Closes #{issue}\n" for issue in self.issues)

        return message
