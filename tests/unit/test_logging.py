"""
Unit Tests for Logging Configuration
====================================
"""

from api_parser.config.logging import ensure_log_directories, get_logger, get_logging_config
from api_parser.config import logging as logging_module


class TestLoggingConfig:
    """Test the dictConfig built from settings."""

    def test_console_only_by_default(self, test_settings):
        config = get_logging_config(test_settings)

        assert set(config["handlers"]) == {"console"}
        assert config["handlers"]["console"]["formatter"] == "standard"
        assert config["loggers"]["api_parser"]["handlers"] == ["console"]
        assert config["loggers"]["api_parser"]["propagate"] is False
        assert "" not in config["loggers"]

    def test_production_uses_json_and_files(self, test_settings, tmp_path):
        settings = test_settings.model_copy(
            update={"environment": "production", "log_dir": tmp_path, "log_level": "WARNING"}
        )

        config = get_logging_config(settings)

        assert config["handlers"]["console"]["formatter"] == "json"
        assert config["handlers"]["file"]["filename"] == f"{tmp_path}/api_parser.log"
        assert config["handlers"]["error_file"]["level"] == "ERROR"
        assert config["loggers"]["api_parser"]["level"] == "WARNING"
        assert config["loggers"]["api_parser"]["handlers"] == ["console", "file", "error_file"]

    def test_no_files_while_testing(self, test_settings, tmp_path):
        config = get_logging_config(test_settings.model_copy(update={"log_dir": tmp_path}))

        assert "file" not in config["handlers"]


def test_ensure_log_directories(test_settings, tmp_path, monkeypatch):
    log_dir = tmp_path / "logs" / "nested"
    configured = test_settings.model_copy(update={"log_dir": log_dir})
    monkeypatch.setattr(logging_module, "get_settings", lambda: configured)

    ensure_log_directories()

    assert log_dir.is_dir()


def test_get_logger_binds_context():
    logger = get_logger("api_parser.tests").bind(component="test")

    logger.debug("bound logger works", value=1)
