"""
Swift literal renderer.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .base import ValueRenderer

# Characters with a short escape sequence
_SHORT_ESCAPES = {
    "\0": "0",
    "\t": "t",
    "\n": "n",
    "\r": "r",
}

# A quote or backslash followed by pound signs, which could end a #"..."# literal
_POUND_RUN_PATTERN = re.compile(r'["\\](#*)')


class SwiftValueRenderer(ValueRenderer):
    """Renders Python values as Swift literals.

    With custom string delimiters, strings that contain a quote or a
    backslash are written as extended delimiter literals (#"..."#) so they
    can be embedded without escaping those characters.
    """

    def __init__(self, use_custom_string_delimiters: bool = True):
        self.use_custom_string_delimiters = use_custom_string_delimiters

    def render_value(self, value: Any) -> str:
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return self._render_float(value)
        if isinstance(value, str):
            return self.render_string(value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.render_value(item) for item in value) + "]"
        if isinstance(value, dict):
            if not value:
                return "[:]"
            items = [f"{self.render_value(k)}: {self.render_value(v)}" for k, v in value.items()]
            return "[" + ", ".join(items) + "]"
        raise TypeError(f"Cannot render value of type {type(value).__name__} as a Swift literal")

    def render_string(self, value: str) -> str:
        """Render a string literal, choosing the delimiter from its content."""
        pounds = ""
        if self.use_custom_string_delimiters and ('"' in value or "\\" in value):
            longest = max(len(m.group(1)) for m in _POUND_RUN_PATTERN.finditer(value))
            pounds = "#" * (longest + 1)
        return f'{pounds}"{self._escape(value, pounds)}"{pounds}'

    @staticmethod
    def _escape(value: str, pounds: str) -> str:
        escape = "\\" + pounds
        out = []
        for i, ch in enumerate(value):
            if ch in _SHORT_ESCAPES:
                out.append(escape + _SHORT_ESCAPES[ch])
            elif not pounds and ch in '"\\':
                out.append("\\" + ch)
            elif pounds and i == 0 and ch == '"':
                # #""" would open a multi-line literal
                out.append(escape + ch)
            elif ord(ch) < 0x20 or ord(ch) == 0x7F:
                out.append(f"{escape}u{{{ord(ch):x}}}")
            else:
                out.append(ch)
        return "".join(out)

    @staticmethod
    def _render_float(value: float) -> str:
        if math.isnan(value):
            return "Double.nan"
        if math.isinf(value):
            return "Double.infinity" if value > 0 else "-Double.infinity"
        return repr(value)
