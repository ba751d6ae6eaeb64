"""Message Formatter - turn wizard answers into the commit message text."""

import textwrap
from dataclasses import dataclass
from typing import Optional

from czcommit.config.wizard import WizardConfig

BODY_WIDTH = 72
LINE_SEPARATOR = '|'


@dataclass
class AnswerSet:
    """What the user answered so far. None means the step set nothing."""
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    breaking: Optional[str] = None
    footer: Optional[str] = None


def hard_wrap(text: str, width: int = BODY_WIDTH) -> str:
    """Wrap every line to width, splitting words longer than a line.

    Existing line breaks are kept; wrapping wrapped text changes nothing.
    """
    wrapped = []
    for line in text.split('\n'):
        wrapped.extend(textwrap.wrap(
            line,
            width=width,
            break_long_words=True,
            break_on_hyphens=False,
        ) or [''])
    return '\n'.join(wrapped)


def format_body(text: str) -> str:
    """Turn '|' separators into line breaks, then hard-wrap."""
    return hard_wrap(text.replace(LINE_SEPARATOR, '\n'))


def emoji_code_for(commit_type: str, config: WizardConfig) -> str:
    for t in config.types:
        if t.value == commit_type:
            return t.emoji_code
    return ''


def render(answers: AnswerSet, config: WizardConfig) -> str:
    """Assemble the message.

    The body paragraph is always written, so a message without a body
    has an empty paragraph between header and footer. Callers strip the
    result before committing.
    """
    if not answers.type or answers.subject is None:
        raise ValueError("a commit message needs a type and a subject")

    scope = f"({answers.scope})" if answers.scope else ''
    message = (
        f"{answers.type}{scope}: {emoji_code_for(answers.type, config)} {answers.subject}"
        f"\n\n{answers.body or ''}\n\n"
    )
    if answers.breaking:
        message += f"BREAKING CHANGE: {answers.breaking}\n"
    if answers.footer:
        message += f"{config.footer_prefix}{answers.footer}"
    return message
