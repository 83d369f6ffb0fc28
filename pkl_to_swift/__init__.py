"""Pkl to Swift naming helpers

Turns Pkl declaration names into Swift identifiers and renders the doc
comments, header banner, imports and string literals of generated Swift
files.
"""

__version__ = "1.0.1"

from .config import CodeGeneratorConfig
from .keywords import SWIFT_RESERVED_KEYWORDS, is_reserved_word
from .name_resolver import NameResolver, to_name
from .renderers import SwiftValueRenderer, ValueRenderer
from .rendering import (
    create_value_renderer,
    render_doc_comment,
    render_header_comment,
    render_imports,
    to_swift_string,
)
from .utils import normalize_enum_name, normalize_module_name, normalize_name

__all__ = [
    "CodeGeneratorConfig",
    "SWIFT_RESERVED_KEYWORDS",
    "is_reserved_word",
    "NameResolver",
    "to_name",
    "ValueRenderer",
    "SwiftValueRenderer",
    "create_value_renderer",
    "render_doc_comment",
    "render_header_comment",
    "render_imports",
    "to_swift_string",
    "normalize_name",
    "normalize_module_name",
    "normalize_enum_name",
]
