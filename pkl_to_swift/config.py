"""
Configuration for the Pkl to Swift naming and rendering helpers.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEADER_TEMPLATE = "// Code generated from Pkl module `{{ module_name }}`. DO NOT EDIT."


@dataclass
class CodeGeneratorConfig:
    """Configuration options for name normalization and rendering."""

    # Type name used for the synthetic class of a module
    module_type_name: str = "Module"

    # Enum case name used for a blank Pkl string literal
    empty_enum_case_name: str = "empty"

    # Prepended to normalized names starting with a digit (empty = keep as is)
    leading_digit_prefix: str = ""

    # Jinja2 template of the generated-code banner
    header_template: str = DEFAULT_HEADER_TEMPLATE

    # Render string literals with #"..."# delimiters when they contain " or \
    use_custom_string_delimiters: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "module_type_name": self.module_type_name,
            "empty_enum_case_name": self.empty_enum_case_name,
            "leading_digit_prefix": self.leading_digit_prefix,
            "header_template": self.header_template,
            "use_custom_string_delimiters": self.use_custom_string_delimiters,
        }
