"""
Init Command
Bootstraps a project for nocta-ui: writes components.json, installs the
helper dependencies, creates the cn() utility and adds the design tokens.

Only the configuration step is essential. Dependency installation and
token injection failures, and a pre-existing utility file, are recorded
as warnings and the run carries on.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from fsutils.file_utils import project_root
from scaffold.config_builder import ComponentsConfig, build_config
from scaffold.config_store import CONFIG_FILENAME, read_config_data, write_config
from scaffold.dependency_installer import (
    REQUIRED_DEPENDENCIES,
    install_dependencies,
    manual_install_hint,
)
from scaffold.environment import ProjectType, detect_project_type
from scaffold.errors import DependencyInstallError, ScaffoldError
from scaffold.utils_writer import write_utils_file
from tailwind.token_injector import inject_design_tokens
from tailwind.version_classifier import is_tailwind_v4

logger = logging.getLogger(__name__)

class InitStatus(Enum):
    SUCCESS = 'success'
    DEGRADED = 'degraded'
    ALREADY_INITIALIZED = 'already_initialized'

class StepStatus(Enum):
    DONE = 'done'
    SKIPPED = 'skipped'
    WARNING = 'warning'

@dataclass
class StepResult:
    name: str
    status: StepStatus
    message: str = ''
    path: Optional[str] = None
    hint: Optional[str] = None

@dataclass
class InitResult:
    status: InitStatus
    config: Optional[ComponentsConfig] = None
    project_type: Optional[ProjectType] = None
    tailwind_v4: bool = False
    dependencies: Dict[str, str] = field(default_factory=dict)
    steps: List[StepResult] = field(default_factory=list)

    def step(self, name: str) -> Optional[StepResult]:
        return next((s for s in self.steps if s.name == name), None)

    @property
    def warnings(self) -> List[StepResult]:
        return [s for s in self.steps if s.status == StepStatus.WARNING]

def _install_step(dependencies: Dict[str, str], root: Path) -> StepResult:
    try:
        command = install_dependencies(dependencies, root)
    except DependencyInstallError as e:
        logger.warning(f"Dependency installation failed: {e}", exc_info=True)
        return StepResult('dependencies', StepStatus.WARNING,
                          message='Dependencies installation failed, but you can install them manually',
                          hint=manual_install_hint(dependencies, root))
    if command is None:
        return StepResult('dependencies', StepStatus.SKIPPED, message='No dependencies to install')
    return StepResult('dependencies', StepStatus.DONE, message=' '.join(command))

def _utils_step(config: ComponentsConfig, root: Path) -> StepResult:
    created, path = write_utils_file(config, root)
    if not created:
        return StepResult('utils', StepStatus.WARNING,
                          message=f'{path} already exists - skipping creation', path=path)
    return StepResult('utils', StepStatus.DONE, message='cn() function for className merging', path=path)

def _tokens_step(config: ComponentsConfig, tailwind_v4: bool, root: Path) -> StepResult:
    try:
        injection = inject_design_tokens(config, tailwind_v4, root)
    except (OSError, ValueError, ScaffoldError) as e:
        logger.warning(f"Design token injection failed: {e}", exc_info=True)
        return StepResult('tokens', StepStatus.WARNING,
                          message='Design tokens installation failed, but you can add them manually',
                          hint='See documentation for manual token installation')
    if not injection.added:
        return StepResult('tokens', StepStatus.SKIPPED,
                          message='Design tokens skipped (already exist)', path=injection.path)
    return StepResult('tokens', StepStatus.DONE,
                      message='Nocta color palette (nocta-50 to nocta-950)', path=injection.path)

def run_init(cwd: Optional[str | Path] = None) -> InitResult:
    """
    Initialize the project in cwd (default: the current directory).

    Returns:
        InitResult with ALREADY_INITIALIZED when components.json exists (no
        files are touched), otherwise SUCCESS or DEGRADED with one
        StepResult per step

    Raises:
        ConfigReadError: If an existing components.json can't be parsed
    """
    root = project_root(cwd)
    if read_config_data(root) is not None:
        logger.info(f"{CONFIG_FILENAME} already exists in {root}")
        return InitResult(status=InitStatus.ALREADY_INITIALIZED)

    project_type = detect_project_type(root)
    tailwind_v4 = is_tailwind_v4(root)
    config = build_config(project_type, tailwind_v4)
    write_config(config, root)
    logger.info(f"Initialized {project_type.value} project (tailwind v4: {tailwind_v4})")

    dependencies = dict(REQUIRED_DEPENDENCIES)
    steps = [
        StepResult('config', StepStatus.DONE, path=CONFIG_FILENAME),
        _install_step(dependencies, root),
        _utils_step(config, root),
        _tokens_step(config, tailwind_v4, root),
    ]
    degraded = any(step.status == StepStatus.WARNING for step in steps)
    return InitResult(
        status=InitStatus.DEGRADED if degraded else InitStatus.SUCCESS,
        config=config,
        project_type=project_type,
        tailwind_v4=tailwind_v4,
        dependencies=dependencies,
        steps=steps,
    )
