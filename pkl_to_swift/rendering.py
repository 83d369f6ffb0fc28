"""
Rendering helpers for comments, imports and string literals in generated
Swift files.
"""

from __future__ import annotations

import re

import jinja2

from .config import CodeGeneratorConfig
from .renderers import SwiftValueRenderer, ValueRenderer

_LINE_BREAK_PATTERN = re.compile(r"\r?\n")

_jinja_env = jinja2.Environment(autoescape=False, keep_trailing_newline=False)


def render_doc_comment(text: str, indent: str) -> str:
    """Render text as Swift /// doc comment lines.

    Every input line gives one output line; blank lines get a bare marker.

    Example:
        render_doc_comment("a\\n\\nb", "  ") -> "  /// a\\n  ///\\n  /// b"
    """
    lines = []
    for line in _LINE_BREAK_PATTERN.split(text):
        if line.strip():
            lines.append(f"{indent}/// {line}")
        else:
            lines.append(f"{indent}///")
    return "\n".join(lines)


def render_header_comment(module_name: str, config: CodeGeneratorConfig | None = None) -> str:
    """Render the generated-code banner for a Pkl module.

    The module name is embedded verbatim.
    """
    config = config or CodeGeneratorConfig()
    template = _jinja_env.from_string(config.header_template)
    return template.render(module_name=module_name)


def render_imports(imports: list[str]) -> str:
    """Render Swift import statements, dropping duplicates.

    The first occurrence of each module keeps its position. The result always
    ends with a single newline, even when there is nothing to import.
    """
    distinct = dict.fromkeys(imports)
    return "\n".join(f"import {module}" for module in distinct) + "\n"


def create_value_renderer(config: CodeGeneratorConfig | None = None) -> ValueRenderer:
    """Build the Swift value renderer described by config."""
    config = config or CodeGeneratorConfig()
    return SwiftValueRenderer(use_custom_string_delimiters=config.use_custom_string_delimiters)


def to_swift_string(value: str, renderer: ValueRenderer | None = None) -> str:
    """Render a string as a Swift string literal.

    Args:
        value: The string to render
        renderer: Renderer owning quoting and escaping
            (defaults to a SwiftValueRenderer with custom string delimiters)

    Returns:
        Swift string literal
    """
    if renderer is None:
        renderer = create_value_renderer()
    return renderer.render_value(value)
