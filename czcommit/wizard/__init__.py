"""Commit Message Wizard Package"""

from czcommit.wizard.formatter import AnswerSet, render, format_body, hard_wrap, BODY_WIDTH
from czcommit.wizard.message import ConventionalCommitMessage, Step, subject_validator

__all__ = [
    "AnswerSet",
    "ConventionalCommitMessage",
    "Step",
    "render",
    "format_body",
    "hard_wrap",
    "subject_validator",
    "BODY_WIDTH",
]
