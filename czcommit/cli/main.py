"""CLI Main Entry Point"""

import sys
from pathlib import Path

from czcommit.config import load_settings, read_cz_config, resolve
from czcommit.git import Committer, GitRunner
from czcommit.logging_utils import configure_logging
from czcommit.output import OutputChannel, bold, dim, print_error, print_success, colorize_commit_type, RULE
from czcommit.prompts import TerminalPrompt
from czcommit.wizard import ConventionalCommitMessage

from czcommit.cli.args import parse_args
from czcommit.cli.commands import display_config, run_install_completion


def _display_message(message):
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    width = max((len(line) for line in message.split('\n')), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def _apply_overrides(args, settings):
    """CLI flags win over the settings file for this run."""
    if args.smart_commit is not None:
        settings.smart_commit = args.smart_commit
    if args.auto_sync is not None:
        settings.auto_sync = args.auto_sync
    if args.show_output:
        settings.show_output_channel = args.show_output
    return settings


def run_wizard(prompt, config, settings):
    """Run every wizard step; returns the trimmed message or None if cancelled."""
    ccm = ConventionalCommitMessage(prompt, config, subject_length=settings.subject_length)
    ccm.run()
    if not ccm.complete:
        return None
    return ccm.message.strip()


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    configure_logging(args.verbose)
    workspace = Path(args.cwd).resolve()
    settings = _apply_overrides(args, load_settings(workspace))

    # Read fresh every run: the workspace config may change between commits
    config = resolve(read_cz_config(workspace))

    if args.display_config:
        return display_config(settings, config, workspace)

    runner = GitRunner()
    if not runner.is_work_tree(str(workspace)):
        print_error(f"Not inside a git repository: {workspace}")
        return 1

    message = run_wizard(TerminalPrompt(), config, settings)
    if message is None:
        print(dim("Cancelled."))
        return 0

    if args.dry_run:
        _display_message(message)
        return 0

    committer = Committer(runner, settings, OutputChannel())
    if not committer.commit(str(workspace), message):
        return 1

    print_success("Committed.")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
