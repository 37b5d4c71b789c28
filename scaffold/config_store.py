"""
Configuration Store
Reads and writes components.json at the project root.
"""

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Optional

from fsutils.file_utils import (
    file_exists,
    project_root,
    read_file_content,
    write_file_content,
)
from scaffold.config_builder import ComponentsConfig
from scaffold.errors import ConfigReadError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'components.json'

def config_path(cwd: Optional[str | Path] = None) -> Path:
    return project_root(cwd) / CONFIG_FILENAME

def read_config_data(cwd: Optional[str | Path] = None) -> Optional[Dict[str, Any]]:
    """
    Read components.json as a plain JSON object, without checking its fields.

    Returns:
        The parsed object, or None when the project has no configuration

    Raises:
        ConfigReadError: If the file exists but is not a JSON object
    """
    path = config_path(cwd)
    if not file_exists(path):
        return None
    try:
        data = json.loads(read_file_content(path))
    except (OSError, ValueError) as e:
        logger.error(f"Error reading {path}: {str(e)}", exc_info=True)
        raise ConfigReadError(f"Failed to read {CONFIG_FILENAME}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigReadError(f"Failed to read {CONFIG_FILENAME}: expected a JSON object")
    return data

def read_config(cwd: Optional[str | Path] = None) -> Optional[ComponentsConfig]:
    """
    Read components.json into a typed record.

    Returns:
        The parsed record, or None when the project has no configuration

    Raises:
        ConfigReadError: If the file exists but is not a valid record
    """
    data = read_config_data(cwd)
    if data is None:
        return None
    try:
        return ComponentsConfig.from_dict(data)
    except ValueError as e:
        raise ConfigReadError(f"Invalid {CONFIG_FILENAME}: {e}") from e

def write_config(config: ComponentsConfig, cwd: Optional[str | Path] = None) -> Path:
    """Write components.json with 2-space indentation and return its path."""
    path = config_path(cwd)
    write_file_content(path, json.dumps(config.to_dict(), indent=2) + '\n')
    logger.info(f"Wrote configuration to {path}")
    return path

def resolve_component_path(component_file: str, config: ComponentsConfig) -> str:
    """Return the project-relative destination of a registry component file.

    Components are always placed under '<aliases.components>/ui/'.
    """
    file_name = PurePosixPath(component_file.replace('\\', '/')).name
    return str(PurePosixPath(config.aliases.components) / 'ui' / file_name)
