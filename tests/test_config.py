"""Tests for TOML configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from loading_orchestrator.shared import logging as log_setup
from loading_orchestrator.shared.config import LoadingScreenSettings, OrchestratorConfig


class TestOrchestratorConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = OrchestratorConfig.load(tmp_path / "nope.toml")

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.loading_screen == LoadingScreenSettings()

    def test_values_are_read(self, tmp_path):
        path = tmp_path / "loading.toml"
        path.write_text(
            'log_level = "debug"\n'
            'log_file = "logs/loading.log"\n'
            "\n"
            "[loading_screen]\n"
            'title = "PROCESSING"\n'
            "width = 420\n"
            'finalizing_text = "Finalizing Graphics..."\n',
            encoding="utf-8",
        )

        config = OrchestratorConfig.load(path)

        assert config.log_level == "DEBUG"
        assert config.log_file == Path("logs/loading.log")
        assert config.loading_screen.title == "PROCESSING"
        assert config.loading_screen.width == 420
        assert config.loading_screen.height == 150
        assert config.loading_screen.finalizing_text == "Finalizing Graphics..."

    def test_malformed_file_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "broken.toml"
        path.write_text("log_level = \n[[[", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = OrchestratorConfig.load(path)

        assert config == OrchestratorConfig()
        assert "broken.toml" in caplog.text

    def test_non_utf8_file_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "latin1.toml"
        path.write_bytes(b'title = "\xff\xfe"\n')

        with caplog.at_level(logging.WARNING):
            config = OrchestratorConfig.load(path)

        assert config == OrchestratorConfig()
        assert "latin1.toml" in caplog.text

    def test_loading_screen_that_is_not_a_table_keeps_defaults(self, tmp_path, caplog):
        path = tmp_path / "loading.toml"
        path.write_text('log_level = "debug"\nloading_screen = "big"\n', encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = OrchestratorConfig.load(path)

        assert config.log_level == "DEBUG"
        assert config.loading_screen == LoadingScreenSettings()
        assert "loading_screen" in caplog.text

    def test_mistyped_screen_values_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = OrchestratorConfig.from_dict(
                {"loading_screen": {"width": "wide", "height": 200, "title": 7}}
            )

        assert config.loading_screen.width == 400.0
        assert config.loading_screen.height == 200.0
        assert isinstance(config.loading_screen.height, float)
        assert config.loading_screen.title == "LOADING"
        assert "loading_screen.width" in caplog.text
        assert "loading_screen.title" in caplog.text

    def test_unknown_screen_keys_are_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = OrchestratorConfig.from_dict({"loading_screen": {"colour": "red", "title": "WAIT"}})

        assert config.loading_screen.title == "WAIT"
        assert not hasattr(config.loading_screen, "colour")
        assert "colour" in caplog.text


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self, monkeypatch):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        monkeypatch.setattr(log_setup, "_CONFIGURED", False)
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_adds_console_and_file_handlers_once(self, tmp_path):
        root = logging.getLogger()
        before = len(root.handlers)
        log_file = tmp_path / "logs" / "loading.log"

        log_setup.setup_logging("debug", log_file)
        log_setup.setup_logging("debug", log_file)

        assert len(root.handlers) == before + 2
        assert root.level == logging.DEBUG
        assert log_file.parent.is_dir()

    def test_unknown_level_falls_back_to_info(self):
        log_setup.setup_logging("chatty")

        assert logging.getLogger().level == logging.INFO
