"""
Value renderers for Swift literals.
"""

from __future__ import annotations

from .base import ValueRenderer
from .swift_renderer import SwiftValueRenderer

__all__ = ["ValueRenderer", "SwiftValueRenderer"]
