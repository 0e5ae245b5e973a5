"""Interactive Prompts Package"""

from semcommit.prompts.prompter import Prompter, PromptError

__all__ = [
    "Prompter",
    "PromptError",
]
