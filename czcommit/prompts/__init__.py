"""Prompt Package - the two questions the wizard can ask."""

from czcommit.prompts.base import Pick, PromptPort, Validator
from czcommit.prompts.terminal import TerminalPrompt

__all__ = [
    "Pick",
    "PromptPort",
    "TerminalPrompt",
    "Validator",
]
