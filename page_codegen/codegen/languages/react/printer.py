"""
JSX printer.

Lays out an expression tree as JSX source text. Layout depends only on
the tree and the configured indent/print width, so output is stable.
"""

import json
import math
from typing import Any, List

from ...core.expressions import (
    ArrayExpression,
    Expression,
    JSXElement,
    JSXFragment,
    JSXText,
    Literal,
    ObjectExpression,
    RawCode,
    is_jsx,
)
from .naming import is_valid_identifier

# Characters that force an attribute string into an expression container
_ATTRIBUTE_UNSAFE = set('"&\n\r')

# Characters that force element text into an expression container
_TEXT_UNSAFE = set("{}<>&\n\r")


def encode_literal(value: Any) -> str:
    """Encode a primitive as a JavaScript literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return json.dumps(value)
    return json.dumps(str(value), ensure_ascii=False)


def is_plain_attribute_string(value: str) -> bool:
    """Check if a string can be written as ``name="value"`` unchanged."""
    return not any(char in _ATTRIBUTE_UNSAFE for char in value)


def is_plain_text(value: str) -> bool:
    """Check if a string can be written as bare element text unchanged."""
    return bool(value) and value == value.strip() and not any(
        char in _TEXT_UNSAFE for char in value
    )


class JSXPrinter:
    """Formats expressions; every layout method returns lines relative to depth."""

    def __init__(self, indent_size: int = 2, print_width: int = 80):
        self.unit = " " * indent_size
        self.print_width = print_width

    def print(self, expression: Expression, depth: int = 0) -> str:
        """Render an expression indented to the given depth."""
        return "\n".join(self._indent(self.lines(expression, depth), depth))

    def lines(self, expression: Expression, depth: int = 0) -> List[str]:
        """Lay out an expression as lines relative to its first column."""
        if isinstance(expression, JSXElement):
            return self._element(expression, depth)
        if isinstance(expression, JSXFragment):
            return self._fragment(expression, depth)
        if isinstance(expression, ArrayExpression):
            return self._array(expression, depth)
        if isinstance(expression, ObjectExpression):
            return self._object(expression, depth)
        if isinstance(expression, RawCode):
            return expression.code.split("\n")
        if isinstance(expression, Literal):
            return [encode_literal(expression.value)]
        if isinstance(expression, JSXText):
            return [encode_literal(expression.text)]
        raise TypeError(f"Cannot print {type(expression).__name__}")

    def _indent(self, lines: List[str], levels: int = 1) -> List[str]:
        padding = self.unit * levels
        return [padding + line if line else line for line in lines]

    def _fits(self, text: str, depth: int) -> bool:
        return depth * len(self.unit) + len(text) <= self.print_width

    def _element(self, element: JSXElement, depth: int) -> List[str]:
        attributes = [
            self._attribute(name, value, depth + 1) for name, value in element.attributes
        ]
        inline_attributes = all(len(attribute) == 1 for attribute in attributes)
        opening = "<" + element.tag + "".join(" " + attribute[0] for attribute in attributes)
        stacked = ["<" + element.tag]
        for attribute in attributes:
            stacked.extend(self._indent(attribute))

        if element.self_closing:
            if inline_attributes and self._fits(opening + " />", depth):
                return [opening + " />"]
            return stacked + ["/>"]

        closing = f"</{element.tag}>"
        if inline_attributes and self._fits(opening + ">", depth):
            head = [opening + ">"]
        else:
            head = stacked + [">"]

        children = [self._child(child, depth + 1) for child in element.children]

        if (
            len(head) == 1
            and len(children) == 1
            and len(children[0]) == 1
            and isinstance(element.children[0], (JSXText, Literal))
        ):
            inline = head[0] + children[0][0] + closing
            if self._fits(inline, depth):
                return [inline]

        body = []
        for child in children:
            body.extend(self._indent(child))
        return head + body + [closing]

    def _fragment(self, fragment: JSXFragment, depth: int) -> List[str]:
        if not fragment.children:
            return ["<></>"]

        body = []
        for child in fragment.children:
            body.extend(self._indent(self._child(child, depth + 1)))
        return ["<>"] + body + ["</>"]

    def _child(self, child: Expression, depth: int) -> List[str]:
        if isinstance(child, JSXText):
            if is_plain_text(child.text):
                return [child.text]
            return ["{" + encode_literal(child.text) + "}"]

        if is_jsx(child):
            return self.lines(child, depth)

        return self._container(self.lines(child, depth + 1), child)

    def _attribute(self, name: str, value: Expression, depth: int) -> List[str]:
        if isinstance(value, Literal) and isinstance(value.value, str):
            if is_plain_attribute_string(value.value):
                return [f'{name}="{value.value}"']

        lines = self._container(self.lines(value, depth + 1), value)
        lines[0] = f"{name}={lines[0]}"
        return lines

    def _container(self, inner: List[str], value: Expression) -> List[str]:
        """Wrap expression lines in ``{...}``."""
        if len(inner) == 1:
            return ["{" + inner[0] + "}"]

        # Literals hug the braces: {{ ... }} / {[ ... ]}
        if isinstance(value, (ArrayExpression, ObjectExpression)):
            return ["{" + inner[0]] + inner[1:-1] + [inner[-1] + "}"]

        return ["{"] + self._indent(inner) + ["}"]

    def _array(self, array: ArrayExpression, depth: int) -> List[str]:
        if not array.items:
            return ["[]"]

        items = [self.lines(item, depth + 1) for item in array.items]
        if all(len(item) == 1 for item in items):
            inline = "[" + ", ".join(item[0] for item in items) + "]"
            if self._fits(inline, depth):
                return [inline]

        return ["["] + self._comma_separated(items) + ["]"]

    def _object(self, obj: ObjectExpression, depth: int) -> List[str]:
        if not obj.entries:
            return ["{}"]

        entries = []
        for key, value in obj.entries:
            key_text = key if is_valid_identifier(key) else json.dumps(key, ensure_ascii=False)
            value_lines = self.lines(value, depth + 1)
            entries.append([f"{key_text}: {value_lines[0]}"] + value_lines[1:])

        if all(len(entry) == 1 for entry in entries):
            inline = "{ " + ", ".join(entry[0] for entry in entries) + " }"
            if self._fits(inline, depth):
                return [inline]

        return ["{"] + self._comma_separated(entries) + ["}"]

    def _comma_separated(self, parts: List[List[str]]) -> List[str]:
        lines = []
        for index, part in enumerate(parts):
            part = list(part)
            if index < len(parts) - 1:
                part[-1] = part[-1] + ","
            lines.extend(self._indent(part))
        return lines
