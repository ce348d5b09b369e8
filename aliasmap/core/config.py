"""Settings for alias maps, loadable from TOML, YAML or JSON files."""

import json
import logging
import os
from typing import Any, Literal, Optional

import toml
import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Configuration for logging settings"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None


class AliasMapSettings(BaseModel):
    """Main configuration schema for aliasmap"""

    on_collision: Literal["overwrite", "error"] = "overwrite"
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _read_file(file_path: str) -> Any:
    _, ext = os.path.splitext(file_path)
    if ext not in (".toml", ".yml", ".yaml", ".json"):
        raise ValueError(f"Unsupported config file extension: {ext} for file {file_path}")
    with open(file_path, "r") as f:
        text = f.read()
    if not text.strip():
        return {}
    if ext == ".toml":
        return toml.loads(text)
    if ext == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_settings(
    config_file_path: Optional[str] = None,
    config_dir: str = "config",
    config_name: str = "aliasmap",
) -> AliasMapSettings:
    """
    Load settings from a file.

    Settings may sit at the top level of the file or under an ``aliasmap``
    section.

    Args:
        config_file_path: Direct path to a config file.
        config_dir: Directory searched when ``config_file_path`` is not given or missing.
        config_name: Base name of the config file, without extension.

    Returns:
        Validated settings.

    Raises:
        ValueError: If the file extension is not supported or the file is not a mapping.
        FileNotFoundError: If no config file exists or the file is empty.
    """
    candidates = [
        os.path.join(config_dir, f"{config_name}{ext}")
        for ext in (".toml", ".yml", ".yaml", ".json")
    ]
    if config_file_path:
        if os.path.splitext(config_file_path)[1] not in (".toml", ".yml", ".yaml", ".json"):
            raise ValueError(f"Unsupported config file extension for file {config_file_path}")
        candidates.insert(0, config_file_path)

    for path in candidates:
        if not os.path.exists(path):
            continue
        data = _read_file(path)
        if not data:
            raise FileNotFoundError(f"Config file found at {path} but is empty or invalid.")
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        section = data.get("aliasmap", data)
        if not isinstance(section, dict):
            raise ValueError(f"Config file {path} must contain a mapping under 'aliasmap'")
        settings = AliasMapSettings.model_validate(section)
        logger.info(f"Loaded aliasmap settings from {path}")
        return settings

    raise FileNotFoundError(f"No config file found. Searched at: {', '.join(candidates)}")
