"""
Tailwind Version Classifier
Reads package.json and decides whether the project declares Tailwind CSS v4.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fsutils.file_utils import project_root, read_file_content

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = 'package.json'
TAILWIND_PACKAGE = 'tailwindcss'
DEPENDENCY_GROUPS = ('dependencies', 'devDependencies')
# Substring markers of a v4 range, e.g. "^4.0.0" or "4.1.3"
V4_MARKERS = ('^4', '4.')

def read_package_manifest(cwd: Optional[str | Path] = None) -> Dict[str, Any]:
    """Read and parse package.json from the project root."""
    manifest_path = project_root(cwd) / MANIFEST_FILENAME
    manifest = json.loads(read_file_content(manifest_path))
    if not isinstance(manifest, dict):
        raise ValueError(f"{MANIFEST_FILENAME} must contain a JSON object")
    return manifest

def declared_tailwind_version(manifest: Dict[str, Any]) -> Optional[str]:
    """Return the tailwindcss range from dependencies, else devDependencies."""
    for group in DEPENDENCY_GROUPS:
        deps = manifest.get(group)
        if not isinstance(deps, dict):
            continue
        version = deps.get(TAILWIND_PACKAGE)
        if isinstance(version, str) and version:
            return version
    return None

def is_v4_range(version: Optional[str]) -> bool:
    if not version:
        return False
    return any(marker in version for marker in V4_MARKERS)

def is_tailwind_v4(cwd: Optional[str | Path] = None) -> bool:
    """
    Classify the declared Tailwind CSS version.

    A missing or unreadable package.json never blocks initialization:
    the project is then treated as legacy (v3 or older).
    """
    try:
        manifest = read_package_manifest(cwd)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read {MANIFEST_FILENAME}, assuming legacy Tailwind: {e}")
        return False
    version = declared_tailwind_version(manifest)
    result = is_v4_range(version)
    logger.debug(f"Declared tailwindcss version {version!r}, v4={result}")
    return result
