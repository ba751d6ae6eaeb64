"""Terminal Output Formatting Package"""

import logging
import os
import re
import sys

LOG = logging.getLogger("czcommit.channel")


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    try:
        '✓'.encode(sys.stdout.encoding or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
RULE = '─' if UNICODE_ENABLED else '-'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


_TYPE_PREFIX = re.compile(r'^(\w+)(\([^)]*\))?(!?:)')


def colorize_commit_type(message: str) -> str:
    """Color the type(scope): prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = _TYPE_PREFIX.match(lines[0])
    if match:
        prefix = match.group(0)
        color = Colors.RED if match.group(1) == 'fix' else Colors.GREEN
        lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


class OutputChannel:
    """Buffered log sink for git output.

    Lines are kept in memory and mirrored to the ``czcommit.channel``
    logger; show() brings the buffer to the terminal.
    """

    def __init__(self, name: str = "czcommit", stream=None):
        self.name = name
        self.lines: list[str] = []
        self.shown = False
        self._stream = stream

    def append_line(self, line: str) -> None:
        self.lines.append(line)
        LOG.info("%s", line)

    def show(self) -> None:
        stream = self._stream or sys.stderr
        width = max((len(line) for line in self.lines), default=40)
        width = min(max(width, len(self.name) + 4), 100)
        print(dim(f"{RULE * 2} {self.name} ".ljust(width, RULE)), file=stream)
        for line in self.lines:
            print(line, file=stream)
        print(dim(RULE * width), file=stream)
        self.shown = True


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "RULE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error",
    "colorize_commit_type", "OutputChannel",
]
