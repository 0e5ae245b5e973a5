"""CLI Main Entry Point"""

from semcommit.checks import PreflightGate, PreflightError
from semcommit.commit import CommitComposer
from semcommit.config import load_config
from semcommit.git import GitClient
from semcommit.i18n import load_messages
from semcommit.output import bold, print_error, print_info
from semcommit.prompts import Prompter, PromptError

from semcommit.cli.args import parse_args
from semcommit.cli.commands import display_config


def _run_preflight(gate, messages) -> None:
    """Run the gate, raising PreflightError naming the failed step."""
    print_info(messages.get('preflight.start'))
    if not gate.run():
        step = messages.get(f'preflight.step.{gate.failed_step}')
        raise PreflightError(messages.get('preflight.failed', step=step))


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.display_config:
        return display_config()

    config = load_config()
    messages = load_messages(config.language)

    try:
        _run_preflight(PreflightGate(verify_command=config.verify_command), messages)
    except PreflightError as e:
        print_error(str(e))
        return 1

    print(f"\n{bold(messages.get('greeting'))}\n")

    composer = CommitComposer(
        prompter=Prompter(editor=config.editor, messages=messages),
        git=GitClient(),
        messages=messages,
    )
    try:
        return composer.run()
    except PromptError as e:
        print()
        print_error(messages.get('error.prompt', reason=e))
        return 1
