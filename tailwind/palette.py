"""
Design token palette and its textual renderings.

The same ordered shade -> color mapping is rendered either as CSS custom
properties (Tailwind v4 @theme) or as a theme color object for
tailwind.config.js.
"""

from pathlib import Path
from typing import List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader

PALETTE_NAME = 'nocta'

NOCTA_PALETTE: Tuple[Tuple[str, str], ...] = (
    ('50', '#f8f9fa'),
    ('100', '#f1f3f5'),
    ('200', '#e9ecef'),
    ('300', '#dee2e6'),
    ('400', '#ced4da'),
    ('500', '#adb5bd'),
    ('600', '#868e96'),
    ('700', '#495057'),
    ('800', '#343a40'),
    ('900', '#212529'),
    ('950', '#121416'),
)

INDENT_STEP = '  '
TEMPLATES_DIR = Path(__file__).parent / 'templates'

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

def css_variable_names() -> List[str]:
    return [f'--color-{PALETTE_NAME}-{shade}' for shade, _ in NOCTA_PALETTE]

def render_css_tokens(indent: str = INDENT_STEP, standalone: bool = False) -> str:
    """Render the palette as custom properties, optionally inside a new @theme block."""
    template = _env.get_template('css_tokens.css.j2')
    return template.render(
        name=PALETTE_NAME,
        palette=NOCTA_PALETTE,
        indent='' if standalone else indent,
        step=INDENT_STEP,
        standalone=standalone,
    )

def render_config_tokens(indent: str, wrappers: Sequence[str] = ()) -> str:
    """Render the palette as a '<name>: {...},' entry of a JS object.

    wrappers nests the entry in further keys, e.g. ('extend', 'colors').
    """
    template = _env.get_template('config_tokens.js.j2')
    return template.render(
        name=PALETTE_NAME,
        palette=NOCTA_PALETTE,
        indent=indent,
        step=INDENT_STEP,
        wrappers=list(wrappers),
    )
