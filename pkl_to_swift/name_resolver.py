"""
Name resolver for Pkl declarations.

Picks the Swift identifier of a declaration: the fixed module type name for
a module's synthetic class, an explicit swift.Name override, or the
normalized Pkl name.
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .reflect import AnnotationKind, ClassDeclaration, Declaration
from .utils import normalize_enum_name, normalize_name


class NameResolver:
    """Resolves Swift names of declarations."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the resolver.

        Args:
            config: Generator configuration (defaults are used when omitted)
        """
        self.config = config or CodeGeneratorConfig()

    def to_name(self, decl: Declaration) -> str:
        """
        Resolve the Swift identifier of a declaration.

        Args:
            decl: The declaration to name

        Returns:
            Swift identifier
        """
        if isinstance(decl, ClassDeclaration) and decl.is_module_class:
            return self.config.module_type_name

        override = self.explicit_name(decl)
        if override is not None:
            return override

        return normalize_name(decl.name, self.config.leading_digit_prefix)

    def enum_case_name(self, raw: str) -> str:
        """Resolve the Swift case name of a string literal enum member."""
        return normalize_enum_name(raw, self.config.empty_enum_case_name, self.config.leading_digit_prefix)

    @staticmethod
    def explicit_name(decl: Declaration) -> str | None:
        """Return the identifier given by a swift.Name annotation, used verbatim."""
        annotation = decl.find_annotation(AnnotationKind.SWIFT_NAME)
        if annotation is None or not isinstance(annotation.value, str):
            return None
        return annotation.value


def to_name(decl: Declaration, config: CodeGeneratorConfig | None = None) -> str:
    """
    Convenience function to resolve a declaration's Swift identifier.

    Args:
        decl: The declaration to name
        config: Generator configuration

    Returns:
        Swift identifier
    """
    return NameResolver(config).to_name(decl)
