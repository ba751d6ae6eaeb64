"""Shared fakes: a scripted prompt and a scripted git."""

import re

import pytest

from czcommit.git.runner import GitError, ProcessResult, VcsPort
from czcommit.prompts.base import PromptPort

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


class ScriptedPrompt(PromptPort):
    """Answers from a fixed script.

    A list answer is a label to pick; a text answer is returned as typed;
    None cancels. Answers a validator rejects are recorded and the next
    answer is used, the way a real prompt re-asks.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []
        self.rejected = []

    def _next(self):
        if not self.answers:
            raise AssertionError("prompt asked more questions than scripted")
        return self.answers.pop(0)

    def pick(self, question, options):
        self.calls.append(('pick', question, [o.label for o in options]))
        answer = self._next()
        if answer is None:
            return None
        for option in options:
            if option.label == answer:
                return option
        raise AssertionError(f"{answer!r} is not one of {[o.label for o in options]}")

    def ask_text(self, question, validate=None):
        self.calls.append(('text', question))
        while True:
            answer = self._next()
            if answer is None or validate is None:
                return answer
            problem = validate(answer)
            if not problem:
                return answer
            self.rejected.append((answer, problem))

    def questions(self):
        return [call[1] for call in self.calls]


class FakeVcs(VcsPort):
    """Git stand-in with scripted results per subcommand."""

    def __init__(self, staged='', results=None, fail_on=None):
        self.staged = staged
        self.results = results or {}
        self.fail_on = fail_on
        self.calls = []

    def run(self, args, cwd):
        self.calls.append((args[0], cwd))
        if args[0] == self.fail_on:
            raise GitError(f"Failed to execute git: {args[0]}")
        if args[:2] == ['diff', '--name-only']:
            return ProcessResult(exit_code=0, stdout=self.staged)
        return self.results.get(args[0], ProcessResult(exit_code=0))

    def commands(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip
