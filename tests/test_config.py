"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from src.core import config as config_module
from src.core.config import load_config, resolve_config_dir
from src.core.errors import ConfigError
from src.core.values import CommandWord, Shortcut


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # load_dotenv writes into os.environ; monkeypatch restores it on teardown
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv(config_module.CONFIG_DIR_ENV, raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_DIR", tmp_path / "missing-default")


class TestResolveConfigDir:
    def test_missing_default_dir_returns_none(self):
        assert resolve_config_dir(None) is None

    def test_missing_explicit_dir_raises(self, tmp_path):
        with pytest.raises(ConfigError):
            resolve_config_dir(tmp_path / "nope")

    def test_explicit_path_must_be_directory(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(ConfigError):
            resolve_config_dir(target)

    def test_env_variable_is_used(self, tmp_path, monkeypatch):
        monkeypatch.setenv(config_module.CONFIG_DIR_ENV, str(tmp_path))
        assert resolve_config_dir(None) == tmp_path.resolve()


class TestLoadConfig:
    def test_defaults_without_directory(self):
        config = load_config()
        assert config.config_dir is None
        assert config.aliases == {}
        assert config.log_level == "WARNING"

    def test_loads_aliases_and_env(self, tmp_path, monkeypatch):
        (tmp_path / "aliases.yaml").write_text(
            "aliases:\n  lf: listf\n  am: addm\n", encoding="utf-8"
        )
        (tmp_path / ".env").write_text("LOG_LEVEL=debug\n", encoding="utf-8")

        config = load_config(tmp_path)

        assert config.config_dir == tmp_path.resolve()
        assert config.aliases == {
            Shortcut("lf"): CommandWord("listf"),
            Shortcut("am"): CommandWord("addm"),
        }
        assert config.log_level == "DEBUG"

    def test_shell_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
        assert load_config(tmp_path).log_level == "WARNING"

    def test_empty_aliases_file(self, tmp_path):
        (tmp_path / "aliases.yaml").write_text("", encoding="utf-8")
        assert load_config(tmp_path).aliases == {}

    @pytest.mark.parametrize(
        "content",
        [
            "aliases:\n  lf: launch\n",
            "aliases:\n  'two words': listf\n",
            "aliases:\n  listm: listf\n",
            "aliases: [lf, listf]\n",
            "- just\n- a list\n",
            "aliases: {lf: [unclosed\n",
        ],
        ids=["bad command word", "bad shortcut", "shadows command", "aliases not mapping", "top level list", "broken yaml"],
    )
    def test_invalid_aliases(self, tmp_path, content):
        (tmp_path / "aliases.yaml").write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(tmp_path)
