"""
Declaration metadata read by the name resolver.

These nodes mirror the parts of Pkl's reflection API the Swift generator
needs: a raw name, the attached annotations and the enclosing declaration.
They are built by the caller while walking a module and are never mutated
by the helpers in this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnnotationKind(str, Enum):
    """Stable tags for the annotations the generator understands."""

    SWIFT_NAME = "swift.Name"  # Overrides the generated Swift identifier
    OTHER = "other"  # Anything the generator does not interpret

    @classmethod
    def from_type_name(cls, type_name: str) -> AnnotationKind:
        """Map a qualified annotation class name to its tag."""
        for kind in cls:
            if kind.value == type_name:
                return kind
        return cls.OTHER


@dataclass(frozen=True)
class Annotation:
    """An annotation attached to a declaration."""

    kind: AnnotationKind = AnnotationKind.OTHER

    # Carried value, e.g. the identifier of a swift.Name annotation
    value: Any = None


@dataclass(eq=False)
class Declaration:
    """Base class for named Pkl declarations."""

    name: str = ""
    annotations: list[Annotation] = field(default_factory=list)
    enclosing_declaration: Declaration | None = None

    def find_annotation(self, kind: AnnotationKind) -> Annotation | None:
        """Return the first annotation tagged with kind, if any."""
        return next((a for a in self.annotations if a.kind == kind), None)


@dataclass(eq=False)
class ModuleDeclaration(Declaration):
    """A Pkl module. Its properties live on a synthetic module class."""

    module_class: ClassDeclaration | None = None


@dataclass(eq=False)
class ClassDeclaration(Declaration):
    """A Pkl class."""

    @property
    def is_module_class(self) -> bool:
        """True when this class is the synthetic class of its module."""
        module = self.enclosing_declaration
        return isinstance(module, ModuleDeclaration) and module.module_class is self


@dataclass(eq=False)
class PropertyDeclaration(Declaration):
    """A property of a class or module."""


@dataclass(eq=False)
class TypeAliasDeclaration(Declaration):
    """A typealias."""
