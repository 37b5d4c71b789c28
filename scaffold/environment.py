"""
Environment Detector
Classifies the host project from the marker files present at its root.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from fsutils.file_utils import file_exists, project_root

logger = logging.getLogger(__name__)

class ProjectType(Enum):
    NEXTJS = 'nextjs'
    VITE = 'vite'
    GENERIC = 'generic'

# Checked in order, first match wins
MARKER_FILES: Dict[ProjectType, Tuple[str, ...]] = {
    ProjectType.NEXTJS: ('next.config.js', 'next.config.mjs'),
    ProjectType.VITE: ('vite.config.js', 'vite.config.ts'),
}

def detect_project_type(cwd: Optional[str | Path] = None) -> ProjectType:
    """Return the first project type whose marker file exists, else GENERIC."""
    root = project_root(cwd)
    for project_type, markers in MARKER_FILES.items():
        for marker in markers:
            if file_exists(root / marker):
                logger.debug(f"Found marker {marker}, project type is {project_type.value}")
                return project_type
    logger.debug(f"No framework marker files in {root}, using generic preset")
    return ProjectType.GENERIC
