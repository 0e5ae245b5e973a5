"""Interactive commit flow: collect, preview, confirm, commit, push."""

import sys

from semcommit import COMMIT_TYPES
from semcommit.commit.record import CommitRecord, normalize_issue
from semcommit.output import UNICODE_ENABLED, bold, print_error, print_framed, print_success, print_warning


class CommitComposer:
    """Walks the user through building one commit.

    Args:
        prompter: object with select/text/confirm/edit (see semcommit.prompts.Prompter)
        git: object with commit(message) and push(), both returning CommandResult
        messages: semcommit.i18n.Messages
    """

    def __init__(self, prompter, git, messages):
        self.prompter = prompter
        self.git = git
        self.messages = messages

    def _type_labels(self) -> list[str]:
        labels = []
        for name, emoji in COMMIT_TYPES:
            label = self.messages.get(f'type.{name}')
            labels.append(f"{emoji} {label}" if UNICODE_ENABLED else label)
        return labels

    def _ask_type(self) -> str:
        idx = self.prompter.select(self.messages.get('prompt.type'), self._type_labels(), default=0)
        return COMMIT_TYPES[idx][0]

    def _ask_scope(self):
        scope = self.prompter.text(self.messages.get('prompt.scope'), allow_empty=True)
        return scope.strip() or None

    def _ask_body(self):
        if not self.prompter.confirm(self.messages.get('prompt.add_body'), default=False):
            return None
        return self.prompter.edit("")

    def _ask_issues(self) -> list[str]:
        issues = []
        if not self.prompter.confirm(self.messages.get('prompt.add_issues'), default=False):
            return issues

        while True:
            issue = normalize_issue(self.prompter.text(self.messages.get('prompt.issue'), allow_empty=True))
            if not issue:
                break
            issues.append(issue)
            if not self.prompter.confirm(self.messages.get('prompt.another_issue'), default=False):
                break

        return issues

    def collect(self) -> tuple[CommitRecord, bool]:
        """Run the prompts in order. Returns (record, push requested)."""
        commit_type = self._ask_type()
        scope = self._ask_scope()
        description = self.prompter.text(self.messages.get('prompt.description'))
        body = self._ask_body()
        breaking = self.prompter.confirm(self.messages.get('prompt.breaking'), default=False)
        push = self.prompter.confirm(self.messages.get('prompt.push'), default=False)
        issues = self._ask_issues()

        record = CommitRecord(
            type=commit_type,
            scope=scope,
            description=description,
            body=body,
            breaking=breaking,
            issues=issues,
        )
        return record, push

    def run(self) -> int:
        """Full flow. Returns the process exit code."""
        record, push = self.collect()
        message = record.to_message()

        print(f"\n{bold(self.messages.get('preview.title'))}\n")
        print_framed(message)
        print()

        if not self.prompter.confirm(self.messages.get('prompt.confirm'), default=True):
            print_warning(self.messages.get('status.cancelled'))
            return 0

        result = self.git.commit(message)
        if not result.ok:
            print_error(self.messages.get('error.commit'))
            if result.stderr:
                print(result.stderr.rstrip(), file=sys.stderr)
            return 1
        print_success(self.messages.get('status.committed'))

        if push:
            result = self.git.push()
            if result.ok:
                print_success(self.messages.get('status.pushed'))
            else:
                # Reported only; the commit already exists locally
                print_warning(self.messages.get('error.push'))
                if result.stderr:
                    print(result.stderr.rstrip(), file=sys.stderr)

        return 0
