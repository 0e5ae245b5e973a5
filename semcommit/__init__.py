"""
Semantic Commit

Interactive conventional-commit message builder with pre-flight checks.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth, in prompt order
# Used by: commit/record.py (validation), commit/composer.py (type prompt)
COMMIT_TYPES = (
    ('feat', '✨'),
    ('fix', '🐛'),
    ('docs', '📚'),
    ('style', '💄'),
    ('refactor', '♻️'),
    ('perf', '⚡'),
    ('test', '✅'),
    ('build', '🔧'),
    ('ci', '👷'),
    ('chore', '🔨'),
    ('revert', '⏪'),
)

# List of type names for validation
COMMIT_TYPE_NAMES = [name for name, _ in COMMIT_TYPES]
