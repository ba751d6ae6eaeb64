"""Committer - stage, commit and report one assembled message."""

import logging
import traceback
from typing import Optional

from czcommit.config import Settings
from czcommit.git.runner import VcsPort, ProcessResult, GitError, CommitError
from czcommit.output import OutputChannel, print_error

LOG = logging.getLogger(__name__)


class Committer:
    """Runs the commit for a finished wizard session.

    Failures are reported (one error line plus channel detail) and never
    raised; commit() returns whether the commit went through. A refresh or
    sync failure after a successful commit is reported but still returns True.
    """

    def __init__(self, vcs: VcsPort, settings: Settings, channel: OutputChannel):
        self.vcs = vcs
        self.settings = settings
        self.channel = channel

    def commit(self, cwd: str, message: str) -> bool:
        self.channel.append_line(f"About to commit '{message}'")
        try:
            self._conditionally_stage_files(cwd)
            result = self.vcs.commit(cwd, message)
        except (GitError, OSError) as e:
            self._report_failure(e)
            return False
        self._publish(result)

        # The commit exists from here on; later failures are reported only
        try:
            self.vcs.refresh(cwd)
            if self.settings.auto_sync:
                self.vcs.sync(cwd)
        except (GitError, OSError) as e:
            self._report_failure(e)
        return True

    def _conditionally_stage_files(self, cwd: str) -> None:
        if self.settings.smart_commit and not self.vcs.has_staged_files(cwd):
            self.channel.append_line('Staging all files (smart commit enabled with nothing staged)')
            self.vcs.stage_all(cwd)

    def _publish(self, result: Optional[ProcessResult]) -> None:
        """Forward command output to the channel and show it per settings."""
        if result is None or not result.has_output:
            return
        for line in result.stdout.rstrip('\n').split('\n'):
            self.channel.append_line(line)
        if self._should_show(result):
            self.channel.show()

    def _should_show(self, result: ProcessResult) -> bool:
        mode = self.settings.show_output_channel
        return mode == 'always' or (mode == 'onError' and result.exit_code != 0)

    def _report_failure(self, e: Exception) -> None:
        text = str(e)
        print_error(text)
        self.channel.append_line(text)
        self.channel.append_line(traceback.format_exc().rstrip())
        LOG.debug("commit failed", exc_info=True)
        if isinstance(e, CommitError):
            self._publish(e.result)
