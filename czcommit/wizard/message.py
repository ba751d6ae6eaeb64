"""
Conventional Commit Wizard

Walks the user through type, scope, subject, body, breaking change and
footer. The controller is a linear state machine:

    TYPE -> SCOPE -> SUBJECT -> BODY -> BREAKING -> FOOTER -> DONE

Any cancelled prompt moves it to CANCELLED, which absorbs everything.
Every ask_* method only acts in its own state, so callers can invoke
all six in order without checking what happened before.
"""

from enum import Enum
from typing import Optional

from czcommit.config.wizard import WizardConfig
from czcommit.prompts.base import Pick, PromptPort
from czcommit.wizard.formatter import AnswerSet, format_body, render

DEFAULT_SUBJECT_LENGTH = 50


class Step(Enum):
    TYPE = 'type'
    SCOPE = 'scope'
    SUBJECT = 'subject'
    BODY = 'body'
    BREAKING = 'breaking'
    FOOTER = 'footer'
    DONE = 'done'
    CANCELLED = 'cancelled'


_NEXT = {
    Step.TYPE: Step.SCOPE,
    Step.SCOPE: Step.SUBJECT,
    Step.SUBJECT: Step.BODY,
    Step.BODY: Step.BREAKING,
    Step.BREAKING: Step.FOOTER,
    Step.FOOTER: Step.DONE,
}


def subject_validator(max_length: int):
    def validate(text: str) -> str:
        if len(text) == 0 or len(text) > max_length:
            return f"Subject is required and must be less than {max_length} characters"
        return ''
    return validate


class ConventionalCommitMessage:
    """One wizard session and the answers it collected."""

    def __init__(self, prompt: PromptPort, config: WizardConfig,
                 subject_length: int = DEFAULT_SUBJECT_LENGTH):
        self.prompt = prompt
        self.config = config
        self.subject_length = subject_length
        self.state = Step.TYPE
        self.answers = AnswerSet()

    def run(self) -> 'ConventionalCommitMessage':
        self.ask_type()
        self.ask_scope()
        self.ask_subject()
        self.ask_body()
        self.ask_breaking()
        self.ask_footer()
        return self

    @property
    def cancelled(self) -> bool:
        return self.state is Step.CANCELLED

    @property
    def complete(self) -> bool:
        return not self.cancelled and bool(self.answers.type) and bool(self.answers.subject)

    @property
    def message(self) -> str:
        return render(self.answers, self.config)

    # -- transitions -----------------------------------------------------

    def _advance(self, answered: bool) -> None:
        self.state = _NEXT[self.state] if answered else Step.CANCELLED

    def ask_type(self) -> None:
        if self.state is not Step.TYPE:
            return
        picks = [Pick(label=t.value, description=t.name) for t in self.config.types]
        chosen = self.prompt.choose_one(self.config.message('type'), picks)
        if chosen is not None:
            self.answers.type = chosen.label
        self._advance(chosen is not None)

    def ask_scope(self) -> None:
        if self.state is not Step.SCOPE:
            return
        if self.config.has_scopes:
            self._choose_scope()
        elif self.config.should_skip('scope'):
            self._advance(True)
        else:
            text = self.prompt.ask_text(self.config.message('scope'))
            if text is not None:
                self.answers.scope = text
            self._advance(text is not None)

    def _choose_scope(self) -> None:
        picks = [Pick(label=s.name) for s in self.config.scopes]
        custom_label = None
        if self.config.allow_custom_scopes:
            custom_label = self.config.message('customScopeEntry')
            picks.append(Pick(label=custom_label))
        chosen = self.prompt.choose_one(
            self.config.message('customScope'),
            picks,
            custom_label=custom_label,
            custom_question=self.config.message('customScope'),
        )
        if chosen is not None:
            self.answers.scope = chosen.label or None
        self._advance(chosen is not None)

    def ask_subject(self) -> None:
        if self.state is not Step.SUBJECT:
            return
        text = self.prompt.ask_text(self.config.message('subject'),
                                    subject_validator(self.subject_length))
        if text is not None:
            self.answers.subject = text
        self._advance(text is not None)

    def ask_body(self) -> None:
        if self.state is not Step.BODY:
            return
        text = self._ask_optional('body')
        if text is not None:
            self.answers.body = format_body(text)

    def ask_breaking(self) -> None:
        if self.state is not Step.BREAKING:
            return
        text = self._ask_optional('breaking')
        if text is not None:
            self.answers.breaking = text

    def ask_footer(self) -> None:
        if self.state is not Step.FOOTER:
            return
        text = self._ask_optional('footer')
        if text is not None:
            self.answers.footer = text

    def _ask_optional(self, step: str) -> Optional[str]:
        """Ask a skippable free-text step and advance. None if skipped or cancelled."""
        if self.config.should_skip(step):
            self._advance(True)
            return None
        text = self.prompt.ask_text(self.config.message(step))
        self._advance(text is not None)
        return text
