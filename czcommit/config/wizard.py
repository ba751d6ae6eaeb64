"""
Wizard Configuration

The cz-customizable configuration a workspace may carry (commit types,
scopes, prompt texts, skip list) and its merge with built-in defaults.

Discovery order inside the workspace:

1. .cz-config.json (.cz-config.js is found but reported as unsupported)
2. the file named by package.json's config["cz-customizable"]["config"]
3. nothing - built-in defaults are used
"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from czcommit import COMMIT_TYPES


@dataclass(frozen=True)
class CommitType:
    """One selectable commit type."""
    value: str
    name: str = ""
    emoji: str = ""
    emoji_code: str = ""


@dataclass(frozen=True)
class Scope:
    name: str


# Default table carries the glyph as its code so headers read "feat: ✨ ..."
DEFAULT_TYPES = tuple(
    CommitType(value=value, name=f"{emoji} {description}", emoji=emoji, emoji_code=emoji)
    for value, (description, emoji) in COMMIT_TYPES.items()
)

DEFAULT_MESSAGES = {
    'type': "Select the type of change that you're committing",
    'customScope': 'Denote the SCOPE of this change',
    'customScopeEntry': 'Custom scope...',
    'scope': 'Denote the SCOPE of this change (optional)',
    'subject': 'Write a SHORT, IMPERATIVE tense description of the change',
    'body': 'Provide a LONGER description of the change (optional). Use "|" to break new line',
    'breaking': 'List any BREAKING CHANGES (optional)',
    'footer': 'List any ISSUES CLOSED by this change (optional). E.g.: #31, #34',
}

DEFAULT_FOOTER_PREFIX = "Closes "

CZ_CONFIG_FILENAME = ".cz-config.json"
# cz-customizable's own default; found so it can be reported, never evaluated
CZ_CONFIG_JS_FILENAME = ".cz-config.js"


@dataclass(frozen=True)
class CzConfig:
    """Sparse configuration as read from a workspace file.

    None means "not given" and falls back to the default in resolve().
    """
    types: Optional[tuple] = None
    scopes: Optional[tuple] = None
    messages: Optional[dict] = None
    allow_custom_scopes: Optional[bool] = None
    allow_breaking_changes: Optional[tuple] = None
    footer_prefix: Optional[str] = None
    skip_questions: Optional[frozenset] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'CzConfig':
        """Build from cz-customizable's camelCase JSON shape; unknown keys are ignored."""
        types = data.get('types')
        if isinstance(types, list):
            types = tuple(
                CommitType(
                    value=str(t['value']),
                    name=str(t.get('name', '')),
                    emoji=str(t.get('emoji', '')),
                    emoji_code=str(t.get('emojiCode', '')),
                )
                for t in types if isinstance(t, dict) and t.get('value')
            )
        else:
            types = None

        scopes = data.get('scopes')
        if isinstance(scopes, list):
            scopes = tuple(_parse_scope(s) for s in scopes)
        else:
            scopes = None

        messages = data.get('messages')
        if isinstance(messages, dict):
            messages = {k: v for k, v in messages.items() if isinstance(v, str)}
        else:
            messages = None

        breaking = data.get('allowBreakingChanges')
        skip = data.get('skipQuestions')
        allow_custom = data.get('allowCustomScopes')
        footer_prefix = data.get('footerPrefix')

        return cls(
            types=types,
            scopes=scopes,
            messages=messages,
            allow_custom_scopes=bool(allow_custom) if allow_custom is not None else None,
            allow_breaking_changes=_strings(breaking, tuple),
            footer_prefix=str(footer_prefix) if footer_prefix is not None else None,
            skip_questions=_strings(skip, frozenset),
        )


def _strings(value, kind):
    """Keep the string entries of a JSON list; None when not a list."""
    if not isinstance(value, list):
        return None
    return kind(v for v in value if isinstance(v, str))


def _parse_scope(entry) -> Scope:
    # cz-customizable allows {"name": "api"} as well as a bare "api"
    if isinstance(entry, dict):
        return Scope(name=str(entry.get('name') or ''))
    return Scope(name=str(entry))


@dataclass(frozen=True)
class WizardConfig:
    """Fully populated configuration for one wizard session."""
    types: tuple = DEFAULT_TYPES
    scopes: tuple = ()
    messages: dict = field(default_factory=lambda: dict(DEFAULT_MESSAGES))
    allow_custom_scopes: bool = False
    allow_breaking_changes: tuple = ()
    footer_prefix: str = DEFAULT_FOOTER_PREFIX
    skip_questions: frozenset = frozenset()

    def message(self, key: str) -> str:
        """Prompt text for a step."""
        return self.messages.get(key, DEFAULT_MESSAGES.get(key, ''))

    def should_skip(self, step: str) -> bool:
        return step in self.skip_questions

    @property
    def has_scopes(self) -> bool:
        return len(self.scopes) > 0


def resolve(external: Optional[CzConfig]) -> WizardConfig:
    """Merge a possibly-absent workspace config with the defaults.

    Each field comes from the workspace config when given; prompt texts
    are merged key by key so one override never hides another default.
    """
    if external is None:
        return WizardConfig()

    defaults = WizardConfig()
    messages = dict(DEFAULT_MESSAGES)
    messages.update(external.messages or {})

    return WizardConfig(
        types=external.types or defaults.types,
        scopes=external.scopes if external.scopes is not None else defaults.scopes,
        messages=messages,
        allow_custom_scopes=(
            external.allow_custom_scopes if external.allow_custom_scopes is not None
            else defaults.allow_custom_scopes
        ),
        allow_breaking_changes=(
            external.allow_breaking_changes if external.allow_breaking_changes is not None
            else defaults.allow_breaking_changes
        ),
        footer_prefix=external.footer_prefix if external.footer_prefix is not None else defaults.footer_prefix,
        skip_questions=(
            external.skip_questions if external.skip_questions is not None
            else defaults.skip_questions
        ),
    )


def find_cz_config(workspace: Path) -> Optional[Path]:
    """Locate the workspace's cz-customizable config file, if any."""
    for name in (CZ_CONFIG_FILENAME, CZ_CONFIG_JS_FILENAME):
        path = workspace / name
        if path.exists():
            return path

    pkg_path = workspace / "package.json"
    if not pkg_path.exists():
        return None
    pkg = _load_json(pkg_path)
    if not isinstance(pkg, dict):
        return None

    section = pkg.get('config')
    pointer = section.get('cz-customizable') if isinstance(section, dict) else None
    if not isinstance(pointer, dict) or not pointer.get('config'):
        return None
    path = workspace / str(pointer['config'])
    return path if path.exists() else None


def read_cz_config(workspace: Path) -> Optional[CzConfig]:
    """Read the workspace's config fresh; None when absent or unreadable."""
    path = find_cz_config(Path(workspace))
    if path is None:
        return None
    data = _load_json(path)
    if not isinstance(data, dict):
        return None
    return CzConfig.from_dict(data)


def _load_json(path: Path):
    if path.suffix in ('.js', '.cjs', '.mjs'):
        print(f"Warning: Could not load {path}: JavaScript config files are not supported, "
              f"convert it to {CZ_CONFIG_FILENAME}", file=sys.stderr)
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (ValueError, OSError) as e:
        print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
        return None
