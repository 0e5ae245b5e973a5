"""Git Client - create commits and push them."""

from semcommit.process import CommandResult, run_command


class GitClient:
    """Thin wrapper over the git commands the composer needs."""

    def __init__(self, runner=run_command):
        self._runner = runner

    def _run_git(self, *args: str) -> CommandResult:
        """Run a git command, capturing stderr for diagnostics."""
        result = self._runner(['git', *args], capture=True)
        if result.returncode is None:
            return CommandResult(returncode=None, stderr="Git is not installed or not in PATH")
        return result

    def commit(self, message: str) -> CommandResult:
        return self._run_git('commit', '-m', message)

    def push(self) -> CommandResult:
        return self._run_git('push')
