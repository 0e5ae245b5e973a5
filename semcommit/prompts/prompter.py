"""Terminal prompts: selection, text, yes/no and an editor session."""

import os
import shlex
import subprocess
import sys
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

from semcommit.i18n import Messages
from semcommit.output import bold, dim, info, warning

YES_ANSWERS = {'y', 'yes', 'j', 'ja'}
NO_ANSWERS = {'n', 'no', 'nein'}


class PromptError(Exception):
    """Raised when user input cannot be read."""
    pass


def _default_editor() -> str:
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if not editor:
        editor = 'notepad' if sys.platform == 'win32' else 'vi'
    return editor


@contextmanager
def _scratch_file(initial: str) -> Iterator[str]:
    """Temporary file seeded with `initial`, removed on exit whatever happens."""
    tmp = tempfile.NamedTemporaryFile(mode='w', suffix='.gitcommit', delete=False, encoding='utf-8')
    try:
        tmp.write(initial)
        tmp.close()
        yield tmp.name
    finally:
        tmp.close()
        try:
            os.unlink(tmp.name)
        except OSError as e:
            # Log to stderr so temp files don't silently accumulate
            print(f"Warning: Could not delete temp file {tmp.name}: {e}", file=sys.stderr)


class Prompter:
    """Blocking terminal prompts on top of input() and the user's editor."""

    def __init__(self, editor: Optional[str] = None, input_func=input, messages: Optional[Messages] = None):
        self.editor = editor
        self._input = input_func
        self.messages = messages or Messages()

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            raise PromptError("input aborted")
        except OSError as e:
            raise PromptError(str(e))

    def select(self, prompt: str, items: list[str], default: int = 0) -> int:
        """Show a numbered list and return the chosen index."""
        print(bold(prompt))
        for i, item in enumerate(items, 1):
            marker = info('>') if i - 1 == default else ' '
            print(f"{marker} {dim(f'{i:>2}.')} {item}")

        while True:
            choice = self._ask(self.messages.get('prompt.select', count=len(items), default=default + 1) + " ").strip()
            if not choice:
                return default
            if choice.isdigit() and 1 <= int(choice) <= len(items):
                return int(choice) - 1
            print(warning(self.messages.get('prompt.select_retry', count=len(items))))

    def text(self, prompt: str, allow_empty: bool = False) -> str:
        """Read one line of text, stripped. Re-asks on empty input unless allowed."""
        while True:
            answer = self._ask(f"{bold(prompt)}: ").strip()
            if answer or allow_empty:
                return answer

    def confirm(self, prompt: str, default: bool = False) -> bool:
        hint = '[Y/n]' if default else '[y/N]'
        while True:
            answer = self._ask(f"{bold(prompt)} {dim(hint)} ").strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            print(warning(self.messages.get('prompt.yes_no_retry')))

    def edit(self, initial: str = "") -> Optional[str]:
        """Open `initial` in an editor session.

        Returns the saved text, or None when the file was not saved,
        the editor failed, or the result is blank. Any failure to run the
        session raises PromptError; the scratch file is removed either way.
        """
        editor = self.editor or _default_editor()
        try:
            argv = shlex.split(editor)
        except ValueError as e:
            raise PromptError(f"Invalid editor command '{editor}': {e}")

        try:
            with _scratch_file(initial) as path:
                edited = self._run_editor(argv, editor, path)
        except KeyboardInterrupt:
            raise PromptError("input aborted")
        except OSError as e:
            raise PromptError(f"Editor session failed: {e}")

        return edited if edited and edited.strip() else None

    def _run_editor(self, argv: list[str], editor: str, path: str) -> Optional[str]:
        before = os.stat(path).st_mtime_ns
        try:
            result = subprocess.run([*argv, path])
        except OSError as e:
            raise PromptError(f"Could not launch editor '{editor}': {e}")
        if result.returncode != 0:
            return None
        if os.stat(path).st_mtime_ns == before:
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise PromptError(f"Could not read editor output as UTF-8: {e}")
