"""External process invocation."""

import subprocess
from dataclasses import dataclass
from typing import Optional


@dataclass
class CommandResult:
    """Exit status plus whatever diagnostic text was captured."""
    returncode: Optional[int]
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(args: list[str], capture: bool = False) -> CommandResult:
    """Run a command to completion. Launch failures are reported, not raised.

    Without capture the child inherits our stdout/stderr.
    """
    try:
        if capture:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
            return CommandResult(returncode=result.returncode, stderr=result.stderr)
        result = subprocess.run(args)
        return CommandResult(returncode=result.returncode)
    except (OSError, subprocess.SubprocessError) as e:
        return CommandResult(returncode=None, stderr=f"Could not run {args[0]}: {e}")
