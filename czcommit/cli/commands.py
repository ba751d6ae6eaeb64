"""CLI Commands"""

import os
import sys
from pathlib import Path

from czcommit.config import Settings, WizardConfig, get_settings_path
from czcommit.config.wizard import find_cz_config
from czcommit.output import bold, dim, info


def display_config(settings: Settings, config: WizardConfig, workspace: Path) -> int:
    """Display effective settings and wizard configuration."""
    settings_path = get_settings_path()
    cz_path = find_cz_config(workspace)

    print(f"\n{bold('Current Configuration')}\n")

    print(f"  {dim('Settings from:')} {settings_path or 'defaults (no .czcommitrc found)'}")
    print(f"  {dim('Wizard config from:')} {cz_path or 'defaults (no .cz-config.json found)'}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    auto_sync:           {info(str(settings.auto_sync).lower())}")
    print(f"    subject_length:      {info(str(settings.subject_length))}")
    print(f"    show_output_channel: {info(settings.show_output_channel)}")
    print(f"    smart_commit:        {info(str(settings.smart_commit).lower())}")

    print()
    print(f"  {bold('Wizard:')}")
    print(f"    types:               {info(', '.join(t.value for t in config.types))}")
    scopes = ', '.join(s.name for s in config.scopes)
    print(f"    scopes:              {info(scopes or 'none (free text)')}")
    print(f"    allow_custom_scopes: {info(str(config.allow_custom_scopes).lower())}")
    print(f"    footer_prefix:       {info(repr(config.footer_prefix))}")
    skipped = ', '.join(sorted(config.skip_questions))
    print(f"    skip_questions:      {info(skipped or 'none')}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Settings: .czcommitrc (workspace, see -C), then ~/.czcommitrc")
    print(f"    Wizard:   .cz-config.json, or package.json config.cz-customizable.config\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete cz)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, add to your $PROFILE:\n")
        print("  register-python-argcomplete --shell powershell cz | Out-String | Invoke-Expression")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish cz | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
