"""Git Runner - run git in a working directory and capture what it prints."""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

LOG = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Exit status and captured standard output of one command."""
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def has_output(self) -> bool:
        return bool(self.stdout)


class GitError(Exception):
    """Raised when git can't be run or a query fails."""
    pass


class CommitError(GitError):
    """Raised when a command on the commit path exits non-zero."""

    def __init__(self, message: str, result: ProcessResult):
        super().__init__(message)
        self.result = result


class VcsPort(ABC):
    """Version-control operations the commit step needs.

    Implementations provide run(); the named operations are built on it.
    """

    @abstractmethod
    def run(self, args: list[str], cwd: str) -> ProcessResult:
        """Run the VCS with args in cwd. Raises GitError if it can't start."""

    def has_staged_files(self, cwd: str) -> bool:
        return self._checked(['diff', '--name-only', '--cached'], cwd).has_output

    def stage_all(self, cwd: str) -> None:
        self._checked(['add', '--all'], cwd)

    def commit(self, cwd: str, message: str) -> ProcessResult:
        return self._checked(['commit', '-m', message], cwd)

    def refresh(self, cwd: str) -> None:
        self._checked(['update-index', '-q', '--refresh'], cwd)

    def sync(self, cwd: str) -> None:
        self._checked(['pull'], cwd)
        self._checked(['push'], cwd)

    def is_work_tree(self, cwd: str) -> bool:
        try:
            result = self.run(['rev-parse', '--is-inside-work-tree'], cwd)
        except GitError:
            return False
        return result.ok and result.stdout.strip() == 'true'

    def _checked(self, args: list[str], cwd: str) -> ProcessResult:
        result = self.run(args, cwd)
        if not result.ok:
            raise CommitError(_describe(args, result), result)
        return result


def _describe(args: list[str], result: ProcessResult) -> str:
    # Keep the message short: "-m <message>" would repeat the whole commit text
    shown = args[:1] if args[0] == 'commit' else args
    detail = (result.stderr or result.stdout).strip()
    message = f"Git command failed (exit {result.exit_code}): git {' '.join(shown)}"
    return f"{message}\n{detail}" if detail else message


class GitRunner(VcsPort):
    """Runs the git executable."""

    def run(self, args: list[str], cwd: str) -> ProcessResult:
        cmd = ['git', *args]
        LOG.debug("Running git command in %s: %s", cwd, ' '.join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
                encoding='utf-8',
                errors='replace',
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Failed to execute git: {e}") from e

        if completed.returncode != 0:
            LOG.debug("git exited %d: %s", completed.returncode, completed.stderr.strip())
        return ProcessResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
