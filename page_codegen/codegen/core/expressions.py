"""
Expression model for generated code.

Serialized prop values and rendered components are represented as a small
tree of expression nodes that the printer turns into text.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


class Expression:
    """Base class for every node the printer understands."""

    __slots__ = ()


@dataclass(frozen=True)
class Literal(Expression):
    """A primitive value (str, int, float, bool or None) to be encoded."""

    value: Any


@dataclass(frozen=True)
class RawCode(Expression):
    """Verbatim output code, emitted without any escaping."""

    code: str


@dataclass(frozen=True)
class ArrayExpression(Expression):
    """An array literal."""

    items: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ObjectExpression(Expression):
    """An object literal; entries keep their insertion order."""

    entries: Tuple[Tuple[str, Expression], ...] = ()


@dataclass(frozen=True)
class JSXText(Expression):
    """Text content placed between an element's tags."""

    text: str


@dataclass(frozen=True)
class JSXElement(Expression):
    """A rendered component element."""

    tag: str
    attributes: Tuple[Tuple[str, Expression], ...] = ()
    children: Tuple[Expression, ...] = ()

    @property
    def self_closing(self) -> bool:
        return not self.children

    def get_attribute(self, name: str) -> Optional[Expression]:
        """Return the value of an attribute by name, if present."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class JSXFragment(Expression):
    """An anonymous grouping of sibling elements (``<>...</>``)."""

    children: Tuple[Expression, ...] = field(default_factory=tuple)


def codegen_expression(code: str) -> RawCode:
    """
    Mark a string as verbatim output code.

    Single-line code is stripped on both sides; multi-line code only loses
    trailing whitespace so its inner indentation survives.
    """
    if "\n" in code:
        return RawCode(code.rstrip())
    return RawCode(code.strip())


def is_jsx(expression: Expression) -> bool:
    """Check if an expression is markup rather than a plain value."""
    return isinstance(expression, (JSXElement, JSXFragment))


def group_siblings(elements: List[Expression]) -> Optional[Expression]:
    """
    Combine rendered siblings into a single expression.

    None for no siblings, the element itself for one, a fragment otherwise.
    """
    if not elements:
        return None
    if len(elements) == 1:
        return elements[0]
    return JSXFragment(tuple(elements))
