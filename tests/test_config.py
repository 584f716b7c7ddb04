"""Unit tests for the config module."""
from pathlib import Path

import pytest

from ingredientiq.config import (
    API_KEY_VAR,
    BASE_URL_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    ConfigStore,
    CredentialResolver,
    Credentials,
    Settings,
)
from ingredientiq.errors import ConfigError


@pytest.fixture
def unwritable_store(tmp_path):
    """Store whose parent 'directory' is a regular file, so writes fail."""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    return ConfigStore(blocker / "config.env")


def deny_read(*args, **kwargs):
    raise PermissionError(13, "Permission denied")


class TestCredentialResolver:
    """Tests for CredentialResolver."""

    def test_environment_wins_without_prompting(self, config_store, make_prompter):
        """Test that both env vars are returned unchanged and nothing is asked."""
        prompter = make_prompter()
        environ = {API_KEY_VAR: "sk-or-env", BASE_URL_VAR: "https://proxy.example/v1"}

        credentials = CredentialResolver(config_store, prompter, environ=environ).resolve()

        assert credentials == Credentials(api_key="sk-or-env", base_url="https://proxy.example/v1")
        assert prompter.prompts == []
        assert not config_store.path.exists()

    def test_store_used_when_environment_empty(self, config_store, make_prompter):
        config_store.set(API_KEY_VAR, "sk-or-stored")
        config_store.set(BASE_URL_VAR, "https://stored.example/v1")
        prompter = make_prompter()

        credentials = CredentialResolver(config_store, prompter, environ={}).resolve()

        assert credentials.api_key == "sk-or-stored"
        assert credentials.base_url == "https://stored.example/v1"
        assert prompter.prompts == []

    def test_environment_overrides_store(self, config_store, make_prompter):
        config_store.set(API_KEY_VAR, "sk-or-stored")
        environ = {API_KEY_VAR: "sk-or-env", BASE_URL_VAR: "https://env.example/v1"}

        credentials = CredentialResolver(config_store, make_prompter(), environ=environ).resolve()

        assert credentials.api_key == "sk-or-env"

    def test_prompts_and_persists_missing_values(self, config_store, make_prompter):
        prompter = make_prompter(visible=["https://typed.example/v1"], hidden=["  sk-or-typed  "])

        credentials = CredentialResolver(config_store, prompter, environ={}).resolve()

        assert credentials.api_key == "sk-or-typed"
        assert credentials.base_url == "https://typed.example/v1"
        assert config_store.get(API_KEY_VAR) == "sk-or-typed"
        assert config_store.get(BASE_URL_VAR) == "https://typed.example/v1"

    def test_prompted_values_not_asked_again(self, config_store, make_prompter):
        first = make_prompter(visible=["https://typed.example/v1"], hidden=["sk-or-typed"])
        CredentialResolver(config_store, first, environ={}).resolve()

        second = make_prompter()
        credentials = CredentialResolver(config_store, second, environ={}).resolve()

        assert credentials.api_key == "sk-or-typed"
        assert second.prompts == []

    def test_only_missing_value_is_prompted(self, config_store, make_prompter):
        prompter = make_prompter(visible=["https://typed.example/v1"])

        credentials = CredentialResolver(
            config_store, prompter, environ={API_KEY_VAR: "sk-or-env"}
        ).resolve()

        assert credentials.api_key == "sk-or-env"
        assert len(prompter.prompts) == 1
        assert config_store.get(API_KEY_VAR) is None

    def test_blank_base_url_uses_default(self, config_store, make_prompter):
        prompter = make_prompter(visible=[""])

        credentials = CredentialResolver(
            config_store, prompter, environ={API_KEY_VAR: "sk-or-env"}
        ).resolve()

        assert credentials.base_url == DEFAULT_BASE_URL

    def test_blank_api_key_raises(self, config_store, make_prompter):
        prompter = make_prompter(hidden=["   "])

        with pytest.raises(ConfigError, match=API_KEY_VAR):
            CredentialResolver(config_store, prompter, environ={}).resolve()

    def test_end_of_input_for_api_key_raises(self, config_store, make_prompter):
        with pytest.raises(ConfigError):
            CredentialResolver(config_store, make_prompter(), environ={}).resolve()

    def test_unpersistable_api_key_is_fatal(self, unwritable_store, make_prompter):
        prompter = make_prompter(hidden=["sk-or-typed"])

        with pytest.raises(ConfigError, match="Cannot write"):
            CredentialResolver(unwritable_store, prompter, environ={}).resolve()

    def test_unpersistable_base_url_is_only_a_warning(self, unwritable_store, make_prompter, caplog):
        prompter = make_prompter(visible=["https://typed.example/v1"])

        credentials = CredentialResolver(
            unwritable_store, prompter, environ={API_KEY_VAR: "sk-or-env"}
        ).resolve()

        assert credentials.base_url == "https://typed.example/v1"
        assert "Cannot write" in caplog.text

    def test_api_key_hidden_from_repr(self):
        credentials = Credentials(api_key="sk-or-secret", base_url=DEFAULT_BASE_URL)

        assert "sk-or-secret" not in repr(credentials)


class TestConfigStore:
    """Tests for ConfigStore."""

    def test_missing_file_returns_none(self, config_store):
        assert config_store.get(API_KEY_VAR) is None

    def test_set_creates_file_and_round_trips(self, config_store):
        config_store.set("FOOD_LOG_PATH", "/home/me/log with spaces.json")

        assert config_store.path.exists()
        assert config_store.get("FOOD_LOG_PATH") == "/home/me/log with spaces.json"

    def test_set_overwrites_existing_key(self, config_store):
        config_store.set(API_KEY_VAR, "first")
        config_store.set(API_KEY_VAR, "second")

        assert config_store.get(API_KEY_VAR) == "second"
        assert config_store.path.read_text().count(API_KEY_VAR) == 1

    def test_keys_are_independent(self, config_store):
        config_store.set(API_KEY_VAR, "key")
        config_store.set(BASE_URL_VAR, "url")

        assert config_store.get(API_KEY_VAR) == "key"
        assert config_store.get(BASE_URL_VAR) == "url"

    def test_write_failure_raises_config_error(self, unwritable_store):
        with pytest.raises(ConfigError):
            unwritable_store.set(API_KEY_VAR, "value")

    @pytest.mark.parametrize("value", ["sk-or-a${HOME}b", "/logs/$USER/food.json", "p@ss$word"])
    def test_dollar_values_round_trip_verbatim(self, config_store, value: str):
        config_store.set(API_KEY_VAR, value)

        assert config_store.get(API_KEY_VAR) == value

    def test_read_failure_raises_config_error(self, config_store, monkeypatch):
        config_store.set(API_KEY_VAR, "value")

        monkeypatch.setattr("ingredientiq.config.store.dotenv_values", deny_read)

        with pytest.raises(ConfigError, match="Cannot read"):
            config_store.get(API_KEY_VAR)

    def test_read_failure_stops_credential_resolution(self, config_store, make_prompter, monkeypatch):
        config_store.set(API_KEY_VAR, "value")
        monkeypatch.setattr("ingredientiq.config.store.dotenv_values", deny_read)

        with pytest.raises(ConfigError):
            CredentialResolver(config_store, make_prompter(), environ={}).resolve()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.model == DEFAULT_MODEL
        assert settings.timeout == 120.0
        assert settings.config_path.name == "config.env"

    def test_environment_values(self, tmp_path):
        settings = Settings.from_env({
            "INGREDIENTIQ_MODEL": "openai/gpt-4o-mini",
            "INGREDIENTIQ_CONFIG": str(tmp_path / "c.env"),
        })

        assert settings.model == "openai/gpt-4o-mini"
        assert settings.config_path == tmp_path / "c.env"

    def test_overrides_beat_environment(self):
        settings = Settings.from_env({"INGREDIENTIQ_MODEL": "env/model"}, model="cli/model", timeout=5)

        assert settings.model == "cli/model"
        assert settings.timeout == 5

    def test_none_overrides_ignored(self):
        settings = Settings.from_env({"INGREDIENTIQ_MODEL": "env/model"}, model=None, timeout=None)

        assert settings.model == "env/model"

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            Settings.from_env({}, timeout=0)

    def test_config_path_is_path(self):
        assert isinstance(Settings.from_env({}).config_path, Path)
