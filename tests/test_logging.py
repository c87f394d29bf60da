import logging

from imgdedupe.logging import LOG_LEVEL_ENV, PACKAGE_LOGGER, get_logger


class TestGetLogger:
    def test_single_package_handler(self):
        get_logger("imgdedupe.test_logging.one")
        get_logger("imgdedupe.test_logging.two")

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1
        assert not logging.getLogger("imgdedupe.test_logging.one").handlers

    def test_library_default_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_logger("imgdedupe.test_logging.lib").level == logging.WARNING

    def test_cli_default_info(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_logger("imgdedupe.test_logging.cli").level == logging.INFO

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert get_logger("imgdedupe.test_logging.verbose").level == logging.DEBUG

    def test_invalid_env_value_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert get_logger("imgdedupe.test_logging.bogus").level == logging.WARNING
