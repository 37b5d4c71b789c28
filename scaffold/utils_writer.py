"""
Utility-File Writer
Emits the cn() class-name helper at the configured utils alias.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader

from fsutils.file_utils import (
    file_exists,
    project_root,
    resolve_project_path,
    write_file_content,
)
from scaffold.config_builder import ComponentsConfig

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / 'templates'

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
)

def utils_file_path(config: ComponentsConfig) -> str:
    """Project-relative path of the helper module, e.g. 'src/lib/utils.ts'."""
    extension = '.ts' if config.tsx else '.js'
    return f"{config.aliases.utils}{extension}"

def render_utils_module(typed: bool = True) -> str:
    return _env.get_template('utils.ts.j2').render(typed=typed)

def write_utils_file(config: ComponentsConfig,
                     cwd: Optional[str | Path] = None) -> Tuple[bool, str]:
    """
    Write the helper module unless it already exists.

    Returns:
        (created, project-relative path); created is False when an existing
        file was left untouched
    """
    relative = utils_file_path(config)
    path = resolve_project_path(project_root(cwd), relative)
    if file_exists(path):
        logger.info(f"{relative} already exists, skipping")
        return False, relative
    write_file_content(path, render_utils_module(config.tsx))
    logger.info(f"Created {relative}")
    return True, relative
