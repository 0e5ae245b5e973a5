"""CLI Commands"""

import shlex

from semcommit.checks import LINT_COMMAND
from semcommit.config import load_config, get_config_path
from semcommit.i18n import detect_language
from semcommit.output import bold, dim, info


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .semcommitrc found)")

    language = config.language
    if language == 'auto':
        language = f"auto ({detect_language()})"

    print()
    print(f"  {bold('Settings:')}")
    print(f"    language:       {info(language)}")
    print(f"    verify_command: {info(shlex.join(config.verify_command))}")
    print(f"    editor:         {info(config.editor or '$VISUAL / $EDITOR')}")
    print(f"    lint (fixed):   {dim(shlex.join(LINT_COMMAND))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .semcommitrc (in current directory)")
    print(f"    Global: ~/.semcommitrc\n")

    return 0
