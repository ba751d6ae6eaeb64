"""Terminal Prompts - numbered lists and line input on a TTY."""

from typing import Optional

from czcommit.output import bold, dim, info, warning
from czcommit.prompts.base import Pick, PromptPort, Validator


class TerminalPrompt(PromptPort):
    """Asks on stdin/stdout. Ctrl+C, Ctrl+D or 'q' at a list cancel."""

    def pick(self, question: str, options: list[Pick]) -> Optional[Pick]:
        print(f"\n{bold(question)}")
        label_width = max((len(opt.label) for opt in options), default=0)
        for i, opt in enumerate(options, 1):
            line = f"  {info(f'[{i}]')} {opt.label.ljust(label_width)}"
            if opt.description:
                line += f"  {dim(opt.description)}"
            print(line.rstrip())

        while True:
            try:
                choice = input(f"Select [1-{len(options)}] or (q)uit: ").strip().lower()
            except (KeyboardInterrupt, EOFError):
                print()
                return None
            if choice == 'q':
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return options[int(choice) - 1]
            print(f"Enter 1-{len(options)} or q")

    def ask_text(self, question: str, validate: Optional[Validator] = None) -> Optional[str]:
        print(f"\n{bold(question)}")
        while True:
            try:
                text = input(dim('> '))
            except (KeyboardInterrupt, EOFError):
                print()
                return None
            problem = validate(text) if validate else ''
            if not problem:
                return text
            print(f"  {warning(problem)}")
