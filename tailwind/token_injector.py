"""
Token Injector Module
Adds the nocta color palette to a Tailwind v4 stylesheet or to a
tailwind.config.js theme.

Both targets are edited by splicing text at an anchor found in the
existing source; nothing outside the inserted span is rewritten.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence, Set, Tuple

import tinycss2

from fsutils.file_utils import (
    project_root,
    read_file_content,
    resolve_project_path,
    write_file_content,
)
from scaffold.errors import TokenInjectionError
from tailwind.palette import (
    INDENT_STEP,
    PALETTE_NAME,
    css_variable_names,
    render_config_tokens,
    render_css_tokens,
)

logger = logging.getLogger(__name__)

_QUOTES = '\'"`'
_BOM = '\ufeff'

@dataclass
class TokenInjection:
    added: bool
    path: Optional[str]

# --- Shared text helpers ---

def _newline_style(content: str) -> str:
    return '\r\n' if '\r\n' in content else '\n'

def _line_indent(content: str, index: int) -> str:
    """Leading whitespace of the line containing index."""
    line_start = content.rfind('\n', 0, index) + 1
    return re.match(r'[ \t]*', content[line_start:]).group(0)

def _skip_string(text: str, index: int) -> int:
    quote = text[index]
    i = index + 1
    while i < len(text):
        if text[i] == '\\':
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return len(text)

def _splice_after_brace(content: str, brace_index: int, block: str) -> str:
    """Insert block on new lines right after the '{' at brace_index."""
    newline = _newline_style(content)
    insert = newline + block.rstrip('\n').replace('\n', newline)
    rest = content[brace_index + 1:]
    if re.match(r'[ \t]*\}', rest):
        # Empty object: move the closing brace onto its own line
        insert += newline + _line_indent(content, brace_index)
    return content[:brace_index + 1] + insert + rest

# --- CSS (Tailwind v4) ---

def _source_offset(content: str, line: int, column: int) -> int:
    """Convert tinycss2's 1-based line/column into a string index."""
    pos = 0
    for _ in range(line - 1):
        pos = content.index('\n', pos) + 1
    return pos + column - 1

def _block_start(content: str, start: int) -> int:
    """Index of the '{' opening an at-rule block, skipping comments and strings."""
    i = start
    while i < len(content):
        if content.startswith('/*', i):
            close = content.find('*/', i + 2)
            i = len(content) if close == -1 else close + 2
            continue
        ch = content[i]
        if ch in '\'"':
            i = _skip_string(content, i)
            continue
        if ch == '{':
            return i
        i += 1
    raise TokenInjectionError(f"No block found after offset {start}")

def _split_bom(content: str) -> Tuple[str, str]:
    if content.startswith(_BOM):
        return _BOM, content[len(_BOM):]
    return '', content

def _declared_properties(nodes) -> Set[str]:
    """Collect declaration names from rules and at-rule blocks, recursively."""
    names = set()
    for node in nodes:
        if node.type not in ('qualified-rule', 'at-rule') or node.content is None:
            continue
        for decl in tinycss2.parse_declaration_list(node.content, skip_comments=True,
                                                    skip_whitespace=True):
            if decl.type == 'declaration':
                names.add(decl.lower_name)
        if node.type == 'at-rule':
            names |= _declared_properties(
                tinycss2.parse_rule_list(node.content, skip_comments=True,
                                         skip_whitespace=True))
    return names

def has_css_tokens(content: str) -> bool:
    """True if any nocta color custom property is already declared."""
    _, body = _split_bom(content)
    rules = tinycss2.parse_stylesheet(body, skip_comments=True, skip_whitespace=True)
    declared = _declared_properties(rules)
    return any(name in declared for name in css_variable_names())

def insert_css_tokens(content: str) -> str:
    """Return the stylesheet with the palette added to its @theme block.

    Without an @theme block a new one is placed after the last @import,
    or at the top of the file (after a byte order mark) when there are
    no imports.
    """
    bom, content = _split_bom(content)
    return bom + _insert_css_tokens(content)

def _insert_css_tokens(content: str) -> str:
    rules = tinycss2.parse_stylesheet(content, skip_comments=True, skip_whitespace=True)
    at_rules = [rule for rule in rules if rule.type == 'at-rule']
    newline = _newline_style(content)

    theme = next((rule for rule in at_rules
                  if rule.lower_at_keyword == 'theme' and rule.content is not None), None)
    if theme is not None:
        start = _source_offset(content, theme.source_line, theme.source_column)
        brace = _block_start(content, start)
        indent = _line_indent(content, brace) + INDENT_STEP
        logger.debug(f"Inserting tokens into @theme block at offset {brace}")
        return _splice_after_brace(content, brace, render_css_tokens(indent=indent))

    block = render_css_tokens(standalone=True).rstrip('\n').replace('\n', newline)
    imports = [rule for rule in at_rules if rule.lower_at_keyword == 'import']
    if imports:
        last = imports[-1]
        start = _source_offset(content, last.source_line, last.source_column)
        end = content.find(';', start)
        end = len(content) if end == -1 else end + 1
        logger.debug(f"Adding @theme block after @import at offset {end}")
        return content[:end] + newline + newline + block + content[end:]

    logger.debug("Adding @theme block at the top of the stylesheet")
    if not content:
        return block + newline
    return block + newline + newline + content

def add_tokens_to_css(css_path: str, cwd: Optional[str | Path] = None) -> bool:
    """
    Add the palette to the Tailwind v4 CSS entry point.

    Returns:
        True if the file was changed, False if the tokens were already there

    Raises:
        FileNotFoundError: If the stylesheet doesn't exist
    """
    path = resolve_project_path(project_root(cwd), css_path)
    content = read_file_content(path)
    if has_css_tokens(content):
        logger.info(f"Design tokens already present in {css_path}")
        return False
    write_file_content(path, insert_css_tokens(content))
    logger.info(f"Added design tokens to {css_path}")
    return True

# --- tailwind.config.js (Tailwind v3 and older) ---

def _scan_code(text: str, start: int, end: int) -> Iterator[Tuple[int, int]]:
    """
    Yield (index, depth) for positions outside comments and string bodies.

    Depth counts '{' nesting relative to start. The opening quote of a
    string is yielded so quoted object keys can be matched.
    """
    i = start
    depth = 0
    while i < end:
        ch = text[i]
        if ch in _QUOTES:
            yield i, depth
            i = _skip_string(text, i)
            continue
        if text.startswith('//', i):
            newline = text.find('\n', i)
            i = end if newline == -1 else newline
            continue
        if text.startswith('/*', i):
            close = text.find('*/', i + 2)
            i = end if close == -1 else close + 2
            continue
        yield i, depth
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
        i += 1

def _key_pattern(key: str, opens_object: bool) -> re.Pattern:
    quoted = re.escape(key)
    suffix = r'\s*:\s*\{' if opens_object else r'\s*:'
    return re.compile(rf'(?:{quoted}|\'{quoted}\'|"{quoted}"){suffix}')

def _find_key(text: str, key: str, start: int = 0, end: Optional[int] = None,
              depth: Optional[int] = None, opens_object: bool = False) -> Optional[int]:
    """
    Find an object key in JS source.

    Returns:
        Index of the '{' opening the key's object when opens_object is set,
        otherwise the index where the key starts; None if absent
    """
    end = len(text) if end is None else end
    pattern = _key_pattern(key, opens_object)
    for i, level in _scan_code(text, start, end):
        if depth is not None and level != depth:
            continue
        if i > 0 and (text[i - 1].isalnum() or text[i - 1] in '_$'):
            continue
        match = pattern.match(text, i, end)
        if match:
            return match.end() - 1 if opens_object else i
    return None

def _matching_brace(text: str, open_index: int) -> int:
    for i, depth in _scan_code(text, open_index, len(text)):
        if text[i] == '}' and depth == 1:
            return i
    raise TokenInjectionError(f"Unbalanced braces after offset {open_index}")

def has_config_tokens(content: str) -> bool:
    """True if a nocta key already exists in the config source."""
    return _find_key(content, PALETTE_NAME) is not None

def insert_config_tokens(content: str) -> str:
    """Return the config source with the palette under theme.extend.colors.

    Raises:
        TokenInjectionError: If the source has no theme object
    """
    theme = _find_key(content, 'theme', opens_object=True)
    if theme is None:
        raise TokenInjectionError("No 'theme' object found in Tailwind config")
    theme_end = _matching_brace(content, theme)

    wrappers: Sequence[str] = ('extend', 'colors')
    anchor = theme
    extend = _find_key(content, 'extend', theme + 1, theme_end, depth=0, opens_object=True)
    if extend is not None:
        extend_end = _matching_brace(content, extend)
        colors = _find_key(content, 'colors', extend + 1, extend_end, depth=0, opens_object=True)
        if colors is not None:
            anchor, wrappers = colors, ()
        else:
            anchor, wrappers = extend, ('colors',)

    indent = _line_indent(content, anchor) + INDENT_STEP
    logger.debug(f"Inserting tokens at offset {anchor} with wrappers {list(wrappers)}")
    return _splice_after_brace(content, anchor, render_config_tokens(indent, wrappers))

def add_tokens_to_tailwind_config(config_path: str, cwd: Optional[str | Path] = None) -> bool:
    """
    Add the palette to tailwind.config.js.

    Returns:
        True if the file was changed; False if the tokens were already
        there or no config file is designated

    Raises:
        FileNotFoundError: If the config file doesn't exist
        TokenInjectionError: If no insertion point can be found
    """
    if not config_path:
        return False
    path = resolve_project_path(project_root(cwd), config_path)
    content = read_file_content(path)
    if has_config_tokens(content):
        logger.info(f"Design tokens already present in {config_path}")
        return False
    write_file_content(path, insert_config_tokens(content))
    logger.info(f"Added design tokens to {config_path}")
    return True

def inject_design_tokens(config, tailwind_v4: bool,
                         cwd: Optional[str | Path] = None) -> TokenInjection:
    """Add the palette to the stylesheet (v4) or to the Tailwind config (legacy)."""
    if tailwind_v4:
        css_path = config.tailwind.css
        return TokenInjection(add_tokens_to_css(css_path, cwd), css_path)
    config_path = config.tailwind.config
    return TokenInjection(add_tokens_to_tailwind_config(config_path, cwd), config_path or None)
