"""
JavaScript/JSX naming utilities.

Handles JS reserved words and identifier rules for generated components.
"""

import re

from ...core.naming import NameSanitizer, NamingCase

# ECMAScript reserved words (strict mode included)
JS_RESERVED_WORDS = {
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "implements",
    "import",
    "in",
    "instanceof",
    "interface",
    "let",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "static",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Globals a generated component must not shadow
JS_BUILTIN_NAMES = {
    "Array",
    "Boolean",
    "Date",
    "Error",
    "Function",
    "JSON",
    "Map",
    "Math",
    "Number",
    "Object",
    "Promise",
    "React",
    "RegExp",
    "Set",
    "String",
    "Symbol",
    "undefined",
}

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_identifier(name: str) -> bool:
    """Check if a string can be used as a bare JS identifier or object key."""
    return bool(_IDENTIFIER_RE.match(name)) and name not in JS_RESERVED_WORDS


def create_jsx_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for JSX modules."""
    return NameSanitizer(JS_RESERVED_WORDS, JS_BUILTIN_NAMES)


def sanitize_component_name(name: str) -> str:
    """
    Return a usable component function name.

    Names that are already valid PascalCase identifiers are kept as given;
    anything else is converted to PascalCase.
    """
    sanitizer = create_jsx_sanitizer()
    if is_valid_identifier(name) and name[0].isupper() and not sanitizer.is_reserved(name):
        return name
    return sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE)
