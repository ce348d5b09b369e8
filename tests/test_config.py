"""Tests for settings loading and logging setup"""

import json
import logging

import pytest
from pydantic import ValidationError

from aliasmap.core.alias_map import AliasMap
from aliasmap.core.config import AliasMapSettings, load_settings
from aliasmap.core.logger_setup import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("aliasmap")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestSettings:
    """Test cases for AliasMapSettings"""

    def test_defaults(self):
        settings = AliasMapSettings()
        assert settings.on_collision == "overwrite"
        assert settings.logging.level == "INFO"
        assert settings.logging.file_path is None

    def test_invalid_policy(self):
        with pytest.raises(ValidationError):
            AliasMapSettings(on_collision="ignore")

    def test_from_settings(self):
        m = AliasMap.from_settings(AliasMapSettings(on_collision="error"))
        assert m.on_collision == "error"


class TestLoadSettings:
    """Test cases for load_settings"""

    def test_load_toml_section(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text('[aliasmap]\non_collision = "error"\n\n[aliasmap.logging]\nlevel = "DEBUG"\n')

        settings = load_settings(str(path))
        assert settings.on_collision == "error"
        assert settings.logging.level == "DEBUG"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("on_collision: error\nlogging:\n  level: WARNING\n")

        settings = load_settings(str(path))
        assert settings.on_collision == "error"
        assert settings.logging.level == "WARNING"

    def test_search_config_dir(self, tmp_path):
        (tmp_path / "aliasmap.json").write_text(json.dumps({"on_collision": "error"}))
        settings = load_settings(config_dir=str(tmp_path))
        assert settings.on_collision == "error"

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "settings.ini"
        path.write_text("[aliasmap]\n")
        with pytest.raises(ValueError, match="Unsupported config file extension"):
            load_settings(str(path))

    @pytest.mark.parametrize("filename", ["settings.yaml", "settings.json", "settings.toml"])
    def test_empty_file(self, tmp_path, filename):
        path = tmp_path / filename
        path.write_text("")
        with pytest.raises(FileNotFoundError, match="empty or invalid"):
            load_settings(str(path))

    @pytest.mark.parametrize(
        "filename, content",
        [
            ("settings.yaml", "- a\n- b\n"),
            ("settings.json", "[1, 2]"),
            ("settings.yaml", "aliasmap: overwrite\n"),
        ],
    )
    def test_non_mapping_document(self, tmp_path, filename, content):
        path = tmp_path / filename
        path.write_text(content)
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(str(path))

    def test_no_config_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="No config file found"):
            load_settings(config_dir=str(tmp_path))


class TestSetupLogging:
    """Test cases for setup_logging"""

    def test_console_only(self, restore_logger):
        logger = setup_logging(AliasMapSettings())
        assert logger is restore_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path, restore_logger):
        log_file = tmp_path / "logs" / "aliasmap.log"
        settings = AliasMapSettings(logging={"level": "DEBUG", "file_path": str(log_file)})

        logger = setup_logging(settings)
        AliasMap().set({"name": "red", "aliases": ["r"]})
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "Added 'red'" in log_file.read_text()

    def test_repeated_calls_do_not_stack_handlers(self, restore_logger):
        setup_logging(AliasMapSettings())
        logger = setup_logging(AliasMapSettings())
        assert len(logger.handlers) == 1
