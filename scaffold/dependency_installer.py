"""
Dependency Installer
Detects the project's package manager from its lockfile and installs packages.
"""

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from fsutils.file_utils import file_exists, project_root
from scaffold.errors import DependencyInstallError

logger = logging.getLogger(__name__)

class PackageManager(Enum):
    NPM = 'npm'
    YARN = 'yarn'
    PNPM = 'pnpm'

# Checked in order; npm is the fallback when no lockfile matches
LOCKFILES = (
    ('yarn.lock', PackageManager.YARN),
    ('pnpm-lock.yaml', PackageManager.PNPM),
)

INSTALL_SUBCOMMANDS = {
    PackageManager.NPM: 'install',
    PackageManager.YARN: 'add',
    PackageManager.PNPM: 'add',
}

REQUIRED_DEPENDENCIES: Dict[str, str] = {
    'clsx': '^2.1.1',
    'tailwind-merge': '^3.3.1',
}

def detect_package_manager(cwd: Optional[str | Path] = None) -> PackageManager:
    root = project_root(cwd)
    for lockfile, manager in LOCKFILES:
        if file_exists(root / lockfile):
            return manager
    return PackageManager.NPM

def build_install_command(manager: PackageManager, packages: Sequence[str]) -> List[str]:
    """Return the argv installing packages; versions are left to the manager."""
    return [manager.value, INSTALL_SUBCOMMANDS[manager], *packages]

def manual_install_hint(dependencies: Dict[str, str], cwd: Optional[str | Path] = None) -> str:
    """Command line a user can run to install the dependencies by hand."""
    manager = detect_package_manager(cwd)
    return ' '.join(build_install_command(manager, list(dependencies)))

def install_dependencies(dependencies: Dict[str, str],
                         cwd: Optional[str | Path] = None) -> Optional[List[str]]:
    """
    Install the given packages with the project's package manager.

    The package manager inherits the standard streams and the call blocks
    until it exits.

    Returns:
        The executed command, or None when there was nothing to install

    Raises:
        DependencyInstallError: If the manager can't be started or fails
    """
    packages = list(dependencies)
    if not packages:
        return None
    root = project_root(cwd)
    manager = detect_package_manager(root)
    command = build_install_command(manager, packages)
    print(f"Installing dependencies with {manager.value}...")
    logger.info(f"Running {' '.join(command)} in {root}")
    try:
        subprocess.run(command, cwd=root, check=True)
    except subprocess.CalledProcessError as e:
        raise DependencyInstallError(
            f"{manager.value} exited with status {e.returncode}",
            command=command, returncode=e.returncode) from e
    except OSError as e:
        raise DependencyInstallError(
            f"Could not run {manager.value}: {e}", command=command) from e
    return command
