import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from scaffold.config_builder import build_config
from scaffold.environment import ProjectType
from scaffold.errors import TokenInjectionError
from tailwind.palette import NOCTA_PALETTE
from tailwind.token_injector import (
    add_tokens_to_css,
    add_tokens_to_tailwind_config,
    has_css_tokens,
    inject_design_tokens,
    insert_config_tokens,
    insert_css_tokens,
)

def css_lines(indent='  '):
    return ''.join(f"{indent}--color-nocta-{shade}: {value};\n" for shade, value in NOCTA_PALETTE)

def theme_block():
    return "@theme {\n" + css_lines() + "}"

def nocta_object(indent):
    lines = [f"{indent}nocta: {{"]
    lines += [f"{indent}  {shade}: '{value}'," for shade, value in NOCTA_PALETTE]
    lines.append(f"{indent}}},")
    return '\n'.join(lines) + '\n'

THEME_CSS = """@import "tailwindcss";

@theme {
  --font-sans: Inter, sans-serif;
}

body {
  color: red;
}
"""

LEGACY_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: ['./src/**/*.{js,ts,jsx,tsx}'],
  theme: {
    extend: {
      colors: {
        brand: '#ff0000',
      },
    },
  },
  plugins: [],
}
"""

def test_css_tokens_go_into_existing_theme_block():
    result = insert_css_tokens(THEME_CSS)
    assert result == THEME_CSS.replace("@theme {\n", "@theme {\n" + css_lines(), 1)

def test_css_theme_block_after_last_import():
    css = '@import "tailwindcss";\n@import "./fonts.css";\n\nbody {}\n'
    result = insert_css_tokens(css)
    expected = ('@import "tailwindcss";\n@import "./fonts.css";'
                + "\n\n" + theme_block() + "\n\nbody {}\n")
    assert result == expected

def test_css_theme_block_at_top_without_imports():
    css = "body { margin: 0; }\n"
    assert insert_css_tokens(css) == theme_block() + "\n\n" + css
    assert insert_css_tokens("") == theme_block() + "\n"

def test_css_nested_theme_block_is_not_an_anchor():
    css = "@layer base {\n  @theme {\n  }\n}\n"
    result = insert_css_tokens(css)
    assert result.startswith(theme_block() + "\n\n")
    assert result.endswith(css)

def test_css_crlf_newlines_preserved():
    css = '@import "tailwindcss";\r\n\r\nbody {}\r\n'
    result = insert_css_tokens(css)
    assert '\r\n@theme {\r\n  --color-nocta-50: #f8f9fa;\r\n' in result
    assert result.replace('\r\n', '').count('\n') == 0

def test_css_brace_in_theme_prelude_comment_is_skipped():
    css = "@theme /* { */ {\n  --x: 1;\n}\n"
    assert insert_css_tokens(css) == "@theme /* { */ {\n" + css_lines() + "  --x: 1;\n}\n"

def test_css_theme_block_after_byte_order_mark():
    css = "\ufeffbody {}\n"
    result = insert_css_tokens(css)
    assert result == "\ufeff" + theme_block() + "\n\nbody {}\n"
    assert has_css_tokens(result)

def test_has_css_tokens_in_root_block():
    css = ":root {\n  --color-nocta-500: #adb5bd;\n}\n"
    assert has_css_tokens(css)
    assert not has_css_tokens("body { color: var(--color-nocta-500); }")

def test_add_tokens_to_css_is_idempotent(tmp_path):
    css_file = tmp_path / 'app' / 'globals.css'
    css_file.parent.mkdir()
    css_file.write_text(THEME_CSS)
    assert add_tokens_to_css('app/globals.css', tmp_path) is True
    first = css_file.read_text()
    assert add_tokens_to_css('app/globals.css', tmp_path) is False
    assert css_file.read_text() == first
    assert first.count('--color-nocta-500') == 1

def test_add_tokens_to_css_commented_prelude_is_idempotent(tmp_path):
    css_file = tmp_path / 'globals.css'
    css_file.write_text("@theme /* { */ {\n  --x: 1;\n}\n")
    assert add_tokens_to_css('globals.css', tmp_path) is True
    first = css_file.read_text()
    assert add_tokens_to_css('globals.css', tmp_path) is False
    assert css_file.read_text() == first

def test_add_tokens_to_css_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        add_tokens_to_css('src/index.css', tmp_path)

def test_config_tokens_into_existing_colors():
    result = insert_config_tokens(LEGACY_CONFIG)
    expected = LEGACY_CONFIG.replace(
        "      colors: {\n", "      colors: {\n" + nocta_object('        '), 1)
    assert result == expected

def test_config_tokens_into_empty_extend():
    config = "module.exports = {\n  theme: {\n    extend: {},\n  },\n}\n"
    result = insert_config_tokens(config)
    expected = ("module.exports = {\n  theme: {\n    extend: {\n"
                "      colors: {\n" + nocta_object('        ') + "      },\n"
                "    },\n  },\n}\n")
    assert result == expected

def test_config_tokens_without_extend():
    config = "export default {\n  theme: {\n    screens: { sm: '640px' },\n  },\n}\n"
    result = insert_config_tokens(config)
    expected = ("export default {\n  theme: {\n"
                "    extend: {\n      colors: {\n" + nocta_object('        ') + "      },\n    },\n"
                "    screens: { sm: '640px' },\n  },\n}\n")
    assert result == expected

def test_config_colors_outside_extend_is_not_an_anchor():
    config = ("module.exports = {\n  theme: {\n    colors: { black: '#000' },\n"
              "    extend: {},\n  },\n}\n")
    result = insert_config_tokens(config)
    assert "    colors: { black: '#000' },\n" in result
    assert "    extend: {\n      colors: {\n        nocta: {\n" in result

def test_config_keys_in_comments_and_strings_are_ignored():
    config = ("// theme: { extend: {} }\nmodule.exports = {\n"
              "  content: ['theme: {'],\n  theme: {\n    extend: {},\n  },\n}\n")
    result = insert_config_tokens(config)
    assert result.startswith("// theme: { extend: {} }\nmodule.exports = {\n  content: ['theme: {'],\n")
    assert "    extend: {\n      colors: {\n" in result

def test_config_without_theme_raises():
    with pytest.raises(TokenInjectionError):
        insert_config_tokens("module.exports = { plugins: [] }\n")

def test_add_tokens_to_config_is_idempotent(tmp_path):
    config_file = tmp_path / 'tailwind.config.js'
    config_file.write_text(LEGACY_CONFIG)
    assert add_tokens_to_tailwind_config('tailwind.config.js', tmp_path) is True
    first = config_file.read_text()
    assert add_tokens_to_tailwind_config('tailwind.config.js', tmp_path) is False
    assert config_file.read_text() == first

def test_quoted_nocta_key_counts_as_present(tmp_path):
    config_file = tmp_path / 'tailwind.config.js'
    content = "module.exports = { theme: { extend: { colors: { 'nocta': {} } } } }\n"
    config_file.write_text(content)
    assert add_tokens_to_tailwind_config('tailwind.config.js', tmp_path) is False
    assert config_file.read_text() == content

def test_add_tokens_to_config_without_path_is_noop(tmp_path):
    assert add_tokens_to_tailwind_config('', tmp_path) is False

def test_add_tokens_to_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        add_tokens_to_tailwind_config('tailwind.config.js', tmp_path)

def test_inject_design_tokens_targets_css_for_v4(tmp_path):
    config = build_config(ProjectType.VITE, tailwind_v4=True)
    css_file = tmp_path / 'src' / 'index.css'
    css_file.parent.mkdir()
    css_file.write_text('@import "tailwindcss";\n')
    injection = inject_design_tokens(config, True, tmp_path)
    assert injection.added is True
    assert injection.path == 'src/index.css'
    assert not (tmp_path / 'tailwind.config.js').exists()

def test_inject_design_tokens_targets_config_for_legacy(tmp_path):
    config = build_config(ProjectType.GENERIC, tailwind_v4=False)
    (tmp_path / 'tailwind.config.js').write_text(LEGACY_CONFIG)
    injection = inject_design_tokens(config, False, tmp_path)
    assert injection.added is True
    assert injection.path == 'tailwind.config.js'
