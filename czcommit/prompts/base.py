"""Prompt Base Classes"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

# Returns "" for valid input, otherwise the error to show
Validator = Callable[[str], str]


@dataclass(frozen=True)
class Pick:
    """One option of a single-choice prompt."""
    label: str
    description: str = ""


class PromptPort(ABC):
    """Asks the user things. A return value of None means cancelled."""

    @abstractmethod
    def pick(self, question: str, options: list[Pick]) -> Optional[Pick]:
        """Let the user choose one of options."""

    @abstractmethod
    def ask_text(self, question: str, validate: Optional[Validator] = None) -> Optional[str]:
        """Ask for free text, re-asking until validate accepts it."""

    def choose_one(self, question: str, options: list[Pick],
                   custom_label: Optional[str] = None,
                   custom_question: Optional[str] = None) -> Optional[Pick]:
        """Single choice where the custom_label option asks for free text instead."""
        chosen = self.pick(question, options)
        if chosen is None:
            return None
        if custom_label and custom_question and chosen.label == custom_label:
            text = self.ask_text(custom_question)
            if text is None:
                return None
            return Pick(label=text)
        return chosen
