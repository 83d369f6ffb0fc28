"""
Swift reserved words.

Names in this set cannot be used as plain identifiers in generated Swift
code and must be wrapped in backticks.
"""

SWIFT_RESERVED_KEYWORDS = frozenset(
    {
        # Keywords used in declarations
        "actor",
        "associatedtype",
        "borrowing",
        "class",
        "consuming",
        "deinit",
        "enum",
        "extension",
        "fileprivate",
        "func",
        "import",
        "init",
        "inout",
        "internal",
        "let",
        "macro",
        "nonisolated",
        "open",
        "operator",
        "package",
        "private",
        "precedencegroup",
        "protocol",
        "public",
        "rethrows",
        "static",
        "struct",
        "subscript",
        "typealias",
        "var",
        # Keywords used in statements
        "break",
        "case",
        "catch",
        "continue",
        "default",
        "defer",
        "do",
        "else",
        "fallthrough",
        "for",
        "guard",
        "if",
        "in",
        "repeat",
        "return",
        "switch",
        "throw",
        "where",
        "while",
        # Keywords used in expressions and types
        "Any",
        "any",
        "as",
        "async",
        "await",
        "false",
        "is",
        "nil",
        "self",
        "Self",
        "super",
        "throws",
        "true",
        "try",
        # Contextual keywords
        "associativity",
        "convenience",
        "didSet",
        "dynamic",
        "final",
        "get",
        "indirect",
        "infix",
        "lazy",
        "left",
        "mutating",
        "none",
        "nonmutating",
        "optional",
        "override",
        "postfix",
        "precedence",
        "prefix",
        "Protocol",
        "required",
        "right",
        "set",
        "some",
        "Type",
        "unowned",
        "weak",
        "willSet",
    }
)


def is_reserved_word(name: str) -> bool:
    """Check whether name is reserved in Swift (exact, case-sensitive match)."""
    return name in SWIFT_RESERVED_KEYWORDS
