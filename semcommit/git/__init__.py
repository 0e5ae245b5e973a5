"""Git Operations Package"""

from semcommit.git.client import GitClient

__all__ = [
    "GitClient",
]
