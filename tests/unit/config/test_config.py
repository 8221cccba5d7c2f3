"""Tests for Config Pydantic Settings."""

import logging

import pytest

from persona.config import Config, DatabaseConfig, LoggingConfig, configure_logging


class TestConfigSources:
    """Tests for environment and YAML sources."""

    def test_env_prefix_is_persona(self) -> None:
        assert Config.model_config.get("env_prefix") == "PERSONA_"

    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested fields use the __ delimiter."""
        monkeypatch.setenv("PERSONA_SERVER__ENVIRONMENT", "production")
        config = Config()
        assert config.server.environment == "production"
        assert config.server.is_production

    def test_yaml_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """PERSONA_CONFIG_FILE points at a YAML file with lower priority than env."""
        config_file = tmp_path / "persona.yaml"
        config_file.write_text("server:\n  name: From Yaml\nlogging:\n  level: DEBUG\n")
        monkeypatch.setenv("PERSONA_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("PERSONA_LOGGING__LEVEL", "WARNING")

        config = Config()

        assert config.server.name == "From Yaml"
        assert config.logging.level == "WARNING"

    def test_missing_yaml_file_is_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.setenv("PERSONA_CONFIG_FILE", str(tmp_path / "absent.yaml"))
        assert Config().server.name == "Persona Trait Catalog"

    def test_init_kwargs_win(self) -> None:
        config = Config(database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:", auto_migrate=False))
        assert config.database.auto_migrate is False


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        configure_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1

    def test_log_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        log_file = tmp_path / "logs" / "persona.log"
        monkeypatch.setenv("PERSONA_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig())
        logging.getLogger("persona.test").info("hello")

        assert log_file.exists()
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.FileHandler)
        logging.getLogger().removeHandler(handler)
        handler.close()
