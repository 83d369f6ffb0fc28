"""
Base class for value renderers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ValueRenderer(ABC):
    """Abstract base class for rendering values as target-language literals."""

    @abstractmethod
    def render_value(self, value: Any) -> str:
        """
        Render a value as source code.

        Args:
            value: The value to render

        Returns:
            Literal source text

        Raises:
            TypeError: If the value type cannot be rendered
        """
