"""
Configuration Builder
Derives the components.json record from the detected environment.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from scaffold.environment import ProjectType

DEFAULT_STYLE = 'default'
LEGACY_TAILWIND_CONFIG = 'tailwind.config.js'

@dataclass
class TailwindSettings:
    config: str = LEGACY_TAILWIND_CONFIG
    css: str = 'src/styles/globals.css'

@dataclass
class Aliases:
    components: str = 'src/components'
    utils: str = 'src/lib/utils'

@dataclass
class ComponentsConfig:
    style: str = DEFAULT_STYLE
    tsx: bool = True
    tailwind: TailwindSettings = field(default_factory=TailwindSettings)
    aliases: Aliases = field(default_factory=Aliases)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the components.json layout."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ComponentsConfig':
        """Build a record from parsed components.json content.

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        tailwind = data.get('tailwind')
        aliases = data.get('aliases')
        if not isinstance(tailwind, dict) or not isinstance(aliases, dict):
            raise ValueError("configuration requires 'tailwind' and 'aliases' objects")
        config = cls(
            style=data.get('style', DEFAULT_STYLE),
            tsx=data.get('tsx', True),
            tailwind=TailwindSettings(
                config=tailwind.get('config', ''),
                css=tailwind.get('css', ''),
            ),
            aliases=Aliases(
                components=aliases.get('components', ''),
                utils=aliases.get('utils', ''),
            ),
        )
        for name, value in (('style', config.style),
                            ('tailwind.config', config.tailwind.config),
                            ('tailwind.css', config.tailwind.css),
                            ('aliases.components', config.aliases.components),
                            ('aliases.utils', config.aliases.utils)):
            if not isinstance(value, str):
                raise ValueError(f"'{name}' must be a string")
        if not isinstance(config.tsx, bool):
            raise ValueError("'tsx' must be a boolean")
        return config

# Per-environment paths: (components alias, utils alias, css entry point)
PRESETS: Dict[ProjectType, Dict[str, str]] = {
    ProjectType.NEXTJS: {
        'components': 'components',
        'utils': 'lib/utils',
        'css': 'app/globals.css',
    },
    ProjectType.VITE: {
        'components': 'src/components',
        'utils': 'src/lib/utils',
        'css': 'src/index.css',
    },
    ProjectType.GENERIC: {
        'components': 'src/components',
        'utils': 'src/lib/utils',
        'css': 'src/styles/globals.css',
    },
}

def build_config(project_type: ProjectType, tailwind_v4: bool) -> ComponentsConfig:
    """Return the configuration record for an environment and Tailwind version.

    Tailwind v4 keeps its theme in the CSS entry point, so no separate
    config file is recorded for it.
    """
    preset = PRESETS[project_type]
    return ComponentsConfig(
        style=DEFAULT_STYLE,
        tsx=True,
        tailwind=TailwindSettings(
            config='' if tailwind_v4 else LEGACY_TAILWIND_CONFIG,
            css=preset['css'],
        ),
        aliases=Aliases(
            components=preset['components'],
            utils=preset['utils'],
        ),
    )
