"""
Tests for settings loading, wizard config discovery and default merging.

Run with:
    pytest tests/test_config.py -v
"""

import json

import pytest

from czcommit.config import Settings, SettingsManager
from czcommit.config.wizard import (
    CommitType, CzConfig, Scope, DEFAULT_MESSAGES, DEFAULT_TYPES,
    find_cz_config, read_cz_config, resolve,
)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.auto_sync is False
        assert settings.subject_length == 50
        assert settings.show_output_channel == "onError"
        assert settings.smart_commit is False

    def test_from_dict_ignores_unknown_keys(self):
        settings = Settings.from_dict({"auto_sync": True, "unknown_key": "value"})
        assert settings.auto_sync is True
        assert not hasattr(settings, "unknown_key")

    def test_validate_invalid_output_mode(self):
        settings = Settings(show_output_channel="sometimes")
        warnings = settings.validate()
        assert len(warnings) == 1
        assert settings.show_output_channel == "onError"

    @pytest.mark.parametrize("length", [0, -5, "72", True])
    def test_validate_invalid_subject_length(self, length):
        settings = Settings(subject_length=length)
        warnings = settings.validate()
        assert any("subject_length" in w for w in warnings)
        assert settings.subject_length == 50

    def test_validate_non_bool_flags(self):
        settings = Settings(auto_sync="yes", smart_commit=1)
        warnings = settings.validate()
        assert len(warnings) == 2
        assert settings.auto_sync is False
        assert settings.smart_commit is False

    def test_valid_settings_no_warnings(self):
        assert Settings(show_output_channel="always", subject_length=72).validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Settings.from_dict({"show_output_channel": "loud"})
        err = capsys.readouterr().err
        assert "Settings warning" in err

    def test_from_dict_accepts_camel_case_keys(self):
        settings = Settings.from_dict({
            "autoSync": True, "subjectLength": 72, "showOutputChannel": "always", "smartCommit": True,
        })
        assert settings == Settings(auto_sync=True, subject_length=72, show_output_channel="always", smart_commit=True)

    @pytest.mark.parametrize("value", [["always"], {"mode": "always"}, 1])
    def test_non_string_output_mode_falls_back(self, value, capsys):
        settings = Settings.from_dict({"show_output_channel": value})
        assert settings.show_output_channel == "onError"
        assert "show_output_channel" in capsys.readouterr().err


class TestSettingsManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        manager = SettingsManager()
        assert manager.load() == Settings()
        assert manager.get_settings_path() is None

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".czcommitrc").write_text(json.dumps({"smart_commit": True, "subject_length": 72}))

        manager = SettingsManager()
        settings = manager.load()
        assert settings.smart_commit is True
        assert settings.subject_length == 72
        assert manager.get_settings_path() == tmp_path / ".czcommitrc"

    def test_falls_back_to_home_file(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        (home / ".czcommitrc").write_text(json.dumps({"auto_sync": True}))
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        monkeypatch.setattr("pathlib.Path.home", lambda: home)

        assert SettingsManager().load().auto_sync is True

    def test_malformed_json_returns_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".czcommitrc").write_text("not valid json {{{")

        settings = SettingsManager().load()
        assert settings == Settings()
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".czcommitrc").write_text("[1, 2]")
        assert SettingsManager().load() == Settings()

    def test_load_reads_given_directory_not_cwd(self, tmp_path, monkeypatch):
        repo = tmp_path / "repo"
        repo.mkdir()
        (repo / ".czcommitrc").write_text(json.dumps({"subject_length": 10}))
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")

        manager = SettingsManager()
        assert manager.load(repo).subject_length == 10
        assert manager.get_settings_path() == repo / ".czcommitrc"
        assert manager.load(elsewhere) == Settings()
        assert manager.get_settings_path() is None

    def test_wrongly_shaped_values_do_not_raise(self, tmp_path, capsys):
        (tmp_path / ".czcommitrc").write_text(json.dumps({"show_output_channel": ["always"], "auto_sync": "yes"}))
        settings = SettingsManager().load(tmp_path)
        assert settings.show_output_channel == "onError"
        assert settings.auto_sync is False
        assert "Settings warning" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Resolving wizard config
# ---------------------------------------------------------------------------

class TestResolve:

    def test_absent_config_uses_defaults(self):
        config = resolve(None)
        assert config.types == DEFAULT_TYPES
        assert len(config.types) == 10
        assert config.scopes == ()
        assert config.allow_custom_scopes is False
        assert config.footer_prefix == "Closes "
        assert config.skip_questions == frozenset()
        assert config.messages == DEFAULT_MESSAGES

    def test_default_type_order(self):
        assert [t.value for t in resolve(None).types] == [
            "feat", "fix", "docs", "style", "refactor", "perf", "test", "build", "ci", "chore",
        ]

    def test_empty_types_fall_back_to_defaults(self):
        assert resolve(CzConfig(types=())).types == DEFAULT_TYPES

    def test_messages_merged_per_key(self):
        config = resolve(CzConfig(messages={'subject': 'Summary please'}))
        assert config.message('subject') == 'Summary please'
        assert config.message('body') == DEFAULT_MESSAGES['body']

    def test_fields_taken_when_given(self):
        types = (CommitType("wip", "Work in progress"),)
        config = resolve(CzConfig(
            types=types,
            scopes=(Scope("api"),),
            allow_custom_scopes=True,
            footer_prefix="Fixes ",
            skip_questions=frozenset({'body'}),
        ))
        assert config.types == types
        assert config.has_scopes
        assert config.allow_custom_scopes is True
        assert config.footer_prefix == "Fixes "
        assert config.should_skip('body')
        assert not config.should_skip('footer')

    def test_resolve_does_not_mutate_defaults(self):
        resolve(CzConfig(messages={'type': 'Pick one'}))
        assert DEFAULT_MESSAGES['type'] == "Select the type of change that you're committing"


class TestCzConfigFromDict:

    def test_parses_cz_customizable_shape(self):
        cz = CzConfig.from_dict({
            "types": [{"value": "feat", "name": "feat: A new feature", "emoji": "✨", "emojiCode": ":sparkles:"}],
            "scopes": [{"name": "api"}, "ui"],
            "messages": {"type": "Type?"},
            "allowCustomScopes": True,
            "allowBreakingChanges": ["feat"],
            "footerPrefix": "Refs ",
            "skipQuestions": ["body", "footer"],
            "subjectLimit": 100,
        })
        assert cz.types == (CommitType("feat", "feat: A new feature", "✨", ":sparkles:"),)
        assert cz.scopes == (Scope("api"), Scope("ui"))
        assert cz.messages == {"type": "Type?"}
        assert cz.allow_custom_scopes is True
        assert cz.allow_breaking_changes == ("feat",)
        assert cz.footer_prefix == "Refs "
        assert cz.skip_questions == frozenset({"body", "footer"})

    def test_missing_keys_stay_unset(self):
        cz = CzConfig.from_dict({})
        assert cz == CzConfig()

    def test_types_without_value_dropped(self):
        cz = CzConfig.from_dict({"types": [{"name": "nameless"}, {"value": "fix"}]})
        assert [t.value for t in cz.types] == ["fix"]

    def test_non_string_list_entries_dropped(self):
        cz = CzConfig.from_dict({
            "skipQuestions": [{"q": "body"}, "body", ["footer"]],
            "allowBreakingChanges": ["feat", 3, None],
            "messages": {"type": "Type?", "subject": ["nope"], "body": None},
        })
        assert cz.skip_questions == frozenset({"body"})
        assert cz.allow_breaking_changes == ("feat",)
        assert cz.messages == {"type": "Type?"}

    def test_non_list_skip_questions_unset(self):
        assert CzConfig.from_dict({"skipQuestions": "body"}).skip_questions is None


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

class TestReadCzConfig:

    def test_no_config_returns_none(self, tmp_path):
        assert read_cz_config(tmp_path) is None

    def test_reads_cz_config_json(self, tmp_path):
        (tmp_path / ".cz-config.json").write_text(json.dumps({"footerPrefix": "Fixes "}))
        assert read_cz_config(tmp_path).footer_prefix == "Fixes "

    def test_follows_package_json_pointer(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "cz.json").write_text(json.dumps({"scopes": ["core"]}))
        (tmp_path / "package.json").write_text(json.dumps({
            "name": "demo",
            "config": {"cz-customizable": {"config": "config/cz.json"}},
        }))
        assert find_cz_config(tmp_path) == tmp_path / "config" / "cz.json"
        assert read_cz_config(tmp_path).scopes == (Scope("core"),)

    def test_cz_config_json_preferred_over_package_json(self, tmp_path):
        (tmp_path / ".cz-config.json").write_text(json.dumps({"footerPrefix": "A "}))
        (tmp_path / "other.json").write_text(json.dumps({"footerPrefix": "B "}))
        (tmp_path / "package.json").write_text(json.dumps(
            {"config": {"cz-customizable": {"config": "other.json"}}}))
        assert read_cz_config(tmp_path).footer_prefix == "A "

    def test_package_json_without_pointer(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"name": "demo", "config": "odd"}))
        assert read_cz_config(tmp_path) is None

    def test_pointer_to_missing_file(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps(
            {"config": {"cz-customizable": {"config": "missing.json"}}}))
        assert read_cz_config(tmp_path) is None

    def test_malformed_config_warns_and_returns_none(self, tmp_path, capsys):
        (tmp_path / ".cz-config.json").write_text("module.exports = {}")
        assert read_cz_config(tmp_path) is None
        assert "Could not load" in capsys.readouterr().err

    def test_wrongly_shaped_config_resolves(self, tmp_path):
        (tmp_path / ".cz-config.json").write_text(json.dumps({"skipQuestions": [{"q": "body"}]}))
        config = resolve(read_cz_config(tmp_path))
        assert config.skip_questions == frozenset()
        assert config.should_skip("body") is False

    def test_javascript_config_reported_unsupported(self, tmp_path, capsys):
        (tmp_path / ".cz-config.js").write_text("module.exports = { types: [] };")
        assert find_cz_config(tmp_path) == tmp_path / ".cz-config.js"
        assert read_cz_config(tmp_path) is None
        err = capsys.readouterr().err
        assert "JavaScript config files are not supported" in err
        assert ".cz-config.json" in err

    def test_package_json_pointer_to_javascript_config(self, tmp_path, capsys):
        (tmp_path / "cz.config.js").write_text("module.exports = {};")
        (tmp_path / "package.json").write_text(json.dumps(
            {"config": {"cz-customizable": {"config": "cz.config.js"}}}))
        assert read_cz_config(tmp_path) is None
        assert "not supported" in capsys.readouterr().err

    def test_json_config_preferred_over_javascript(self, tmp_path, capsys):
        (tmp_path / ".cz-config.json").write_text(json.dumps({"footerPrefix": "Fixes "}))
        (tmp_path / ".cz-config.js").write_text("module.exports = {};")
        assert read_cz_config(tmp_path).footer_prefix == "Fixes "
        assert capsys.readouterr().err == ""
