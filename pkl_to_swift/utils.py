"""
Utility functions turning Pkl names into Swift identifiers.
"""

import re

from .keywords import is_reserved_word

# Runs of characters that are not Unicode letters, digits or underscore
_DELIMITER_PATTERN = re.compile(r"\W+")

# Module paths also treat underscores as separators
_MODULE_DELIMITER_PATTERN = re.compile(r"[\W_]+")


def _capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest unchanged."""
    return text[:1].upper() + text[1:]


def _decapitalize_first(text: str) -> str:
    """Lower-case the first character, leaving the rest unchanged."""
    return text[:1].lower() + text[1:]


def _escape_keyword(name: str) -> str:
    """Wrap a Swift reserved word in backticks."""
    if is_reserved_word(name):
        return f"`{name}`"
    return name


def _join_segments(raw: str, pattern: re.Pattern) -> str:
    """Split on pattern, keep the first segment and capitalize the others."""
    first, *rest = pattern.split(raw)
    return first + "".join(_capitalize_first(segment) for segment in rest)


def normalize_name(raw: str, leading_digit_prefix: str = "") -> str:
    """Turn a Pkl name into a legal Swift identifier.

    Reserved words keep their spelling and are escaped with backticks.
    Other names are split on every run of characters that cannot appear in
    an identifier and the pieces are joined in camelCase.

    Examples:
        "fileprivate" -> "`fileprivate`"
        "my-cool-name" -> "myCoolName"
        "2fast" -> "2fast"
        "2fast" with leading_digit_prefix="N" -> "N2fast"

    Args:
        raw: The name as written in the Pkl source
        leading_digit_prefix: Prepended when the result starts with a digit

    Returns:
        Swift identifier
    """
    if is_reserved_word(raw):
        return f"`{raw}`"
    name = _join_segments(raw, _DELIMITER_PATTERN)
    if leading_digit_prefix and name[:1].isdigit():
        name = leading_digit_prefix + name
    return name


def normalize_module_name(raw: str) -> str:
    """Turn a dotted Pkl module name into a lower-case Swift identifier.

    Examples:
        "com.example.Foo" -> "comexamplefoo"
        "my_lib" -> "mylib"
    """
    name = raw.replace(".", "_")
    if is_reserved_word(name):
        return f"`{name}`".lower()
    return _join_segments(name, _MODULE_DELIMITER_PATTERN).lower()


def normalize_enum_name(raw: str, empty_name: str = "empty", leading_digit_prefix: str = "") -> str:
    """Turn a Pkl string literal type member into a Swift enum case name.

    All-caps labels are lower-cased first, so "RED" becomes "red" rather
    than "rED". Labels with no identifier characters at all, and the
    wildcard "_", fall back to empty_name like the blank label does.
    The leading digit prefix is applied as given, after lower-casing.

    Examples:
        "" -> "empty"
        "RED" -> "red"
        "dark-red" -> "darkRed"
        "Default" -> "`default`"
    """
    if not raw:
        return empty_name
    if raw.isupper():
        raw = raw.lower()
    name = normalize_name(raw)
    if not name or name == "_":
        return empty_name
    if name.startswith("`"):
        return name
    name = _decapitalize_first(name)
    if leading_digit_prefix and name[:1].isdigit():
        name = leading_digit_prefix + name
    return _escape_keyword(name)
