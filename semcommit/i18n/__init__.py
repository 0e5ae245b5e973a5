"""Message catalogs for user-facing text."""

import os
from types import MappingProxyType

DEFAULT_LANGUAGE = "en"

_EN = {
    'greeting': "Semantic Commit Generator",
    'preflight.start': "Running pre-flight checks...",
    'preflight.failed': "Pre-flight check failed: {step}",
    'preflight.step.verify': "tests",
    'preflight.step.lint': "lint",
    'prompt.type': "Commit type",
    'prompt.scope': "Scope (optional, e.g. api, auth, ui)",
    'prompt.description': "Short description (imperative mood)",
    'prompt.add_body': "Add a longer description?",
    'prompt.breaking': "Is this a breaking change?",
    'prompt.push': "Push after committing?",
    'prompt.add_issues': "Add issue numbers?",
    'prompt.issue': "Issue number (empty when done)",
    'prompt.another_issue': "Add another issue?",
    'prompt.confirm': "Create commit?",
    'prompt.select': "Select [1-{count}] (Enter for {default}):",
    'prompt.select_retry': "Enter 1-{count}",
    'prompt.yes_no_retry': "Please answer y or n",
    'preview.title': "Commit message preview:",
    'status.cancelled': "Cancelled",
    'status.committed': "Commit created!",
    'status.pushed': "Pushed!",
    'error.commit': "Git error:",
    'error.push': "Push failed:",
    'error.prompt': "Input failed: {reason}",
    'type.feat': "New feature",
    'type.fix': "Bug fix",
    'type.docs': "Documentation",
    'type.style': "Code style (formatting)",
    'type.refactor': "Code refactoring",
    'type.perf': "Performance improvement",
    'type.test': "Add or update tests",
    'type.build': "Build system or dependencies",
    'type.ci': "CI/CD changes",
    'type.chore': "Maintenance tasks",
    'type.revert': "Revert a commit",
}

_DE = {
    'greeting': "Semantischer Commit-Generator",
    'preflight.start': "Führe Vorab-Prüfungen aus...",
    'preflight.failed': "Vorab-Prüfung fehlgeschlagen: {step}",
    'preflight.step.verify': "Tests",
    'preflight.step.lint': "Lint",
    'prompt.type': "Commit Type",
    'prompt.scope': "Scope (optional, z.B. api, auth, ui)",
    'prompt.description': "Kurze Beschreibung (imperative Form)",
    'prompt.add_body': "Möchtest du eine längere Beschreibung hinzufügen?",
    'prompt.breaking': "Ist das ein Breaking Change?",
    'prompt.push': "Soll gepusht werden?",
    'prompt.add_issues': "Issue-Nummern hinzufügen?",
    'prompt.issue': "Issue Nummer (leer für fertig)",
    'prompt.another_issue': "Weitere Issue hinzufügen?",
    'prompt.confirm': "Commit erstellen?",
    'prompt.select': "Auswahl [1-{count}] (Enter für {default}):",
    'prompt.select_retry': "Bitte 1-{count} eingeben",
    'prompt.yes_no_retry': "Bitte mit j oder n antworten",
    'preview.title': "Commit Message Vorschau:",
    'status.cancelled': "Abgebrochen",
    'status.committed': "Commit erfolgreich erstellt!",
    'status.pushed': "Erfolgreich gepusht!",
    'error.commit': "Git Fehler:",
    'error.push': "Push fehlgeschlagen:",
    'error.prompt': "Eingabe fehlgeschlagen: {reason}",
    'type.feat': "Neue Features",
    'type.fix': "Bug Fix",
    'type.docs': "Dokumentation",
    'type.style': "Code Style (Formatting)",
    'type.refactor': "Code Refactoring",
    'type.perf': "Performance Verbesserung",
    'type.test': "Tests hinzufügen/ändern",
    'type.build': "Build System oder Dependencies",
    'type.ci': "CI/CD Änderungen",
    'type.chore': "Maintenance Tasks",
    'type.revert': "Revert eines Commits",
}

CATALOGS = MappingProxyType({
    'en': MappingProxyType(_EN),
    'de': MappingProxyType(_DE),
})


class Messages:
    """Read-only lookup of user-facing text by message id."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in CATALOGS:
            language = DEFAULT_LANGUAGE
        self.language = language
        self._catalog = CATALOGS[language]
        self._fallback = CATALOGS[DEFAULT_LANGUAGE]

    def get(self, key: str, **kwargs) -> str:
        text = self._catalog.get(key)
        if text is None:
            text = self._fallback[key]
        return text.format(**kwargs) if kwargs else text


def detect_language() -> str:
    """Pick a catalog from the POSIX locale variables, defaulting to English."""
    for var in ('LC_ALL', 'LC_MESSAGES', 'LANG'):
        value = os.environ.get(var)
        if value:
            code = value.split('.')[0].split('_')[0].lower()
            return code if code in CATALOGS else DEFAULT_LANGUAGE
    return DEFAULT_LANGUAGE


def load_messages(language: str = "auto") -> Messages:
    if language == "auto":
        language = detect_language()
    return Messages(language)


__all__ = [
    "Messages",
    "CATALOGS",
    "DEFAULT_LANGUAGE",
    "detect_language",
    "load_messages",
]
