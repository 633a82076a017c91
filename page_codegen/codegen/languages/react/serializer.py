"""
Field-type-aware value serializer.

Turns a prop value into an expression node, following the field
descriptor declared for it in the component schema.
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from ....logging_config import get_logger
from ...core.expressions import ArrayExpression, Expression, Literal, ObjectExpression
from ...core.schema import FieldDescriptor, FieldKind, is_content_node

if TYPE_CHECKING:
    from .renderer import ComponentRenderer

logger = get_logger(__name__)


class ValueSerializer:
    """Serializes prop values against their field descriptors."""

    def __init__(self, renderer: "ComponentRenderer"):
        self.renderer = renderer

    def serialize(
        self, value: Any, descriptor: Optional[FieldDescriptor] = None, depth: int = 0
    ) -> Optional[Expression]:
        """
        Serialize a value into an expression.

        Args:
            value: Raw prop value
            descriptor: Field descriptor, if the prop is declared in the schema
            depth: Depth of the owning node in the content tree

        Returns:
            Expression, or None when the value is undefined and must be omitted
        """
        if isinstance(value, Expression):
            return value

        if value is None:
            return None

        if descriptor is None:
            return self.literal(value)

        if descriptor.kind == FieldKind.SLOT:
            return self.renderer.slots.resolve_slot(value, depth)

        if descriptor.kind == FieldKind.ARRAY:
            if descriptor.array_fields is None or not isinstance(value, (list, tuple)):
                return self.literal(value)
            return self._array(value, descriptor.array_fields, depth)

        if descriptor.kind == FieldKind.OBJECT:
            if descriptor.object_fields is None or not isinstance(value, Mapping):
                return self.literal(value)
            return self._object(value, descriptor.object_fields, depth)

        return self.literal(value)

    def literal(self, value: Any) -> Expression:
        """Generic structural encoding; never renders content nodes."""
        if isinstance(value, Expression):
            return value

        if isinstance(value, Mapping):
            return ObjectExpression(
                tuple(
                    (str(key), self.literal(item))
                    for key, item in value.items()
                    if item is not None
                )
            )

        if isinstance(value, (list, tuple)):
            return ArrayExpression(tuple(self.literal(item) for item in value))

        if value is None or isinstance(value, (str, bool, int, float)):
            return Literal(value)

        logger.debug("Encoding unsupported value type %s as a string", type(value).__name__)
        return Literal(str(value))

    def _array(
        self, values: Any, item_fields: Mapping[str, FieldDescriptor], depth: int
    ) -> ArrayExpression:
        """Serialize an array field item by item."""
        items = []

        for item in values:
            if isinstance(item, Expression):
                items.append(item)
            elif is_content_node(item):
                element = self.renderer.render(item, depth + 1, is_list_item=True)
                if element is not None:
                    items.append(element)
            elif item is None:
                items.append(Literal(None))
            elif isinstance(item, Mapping):
                items.append(self._object(item, item_fields, depth))
            else:
                items.append(self.literal(item))

        return ArrayExpression(tuple(items))

    def _object(
        self, value: Mapping[str, Any], object_fields: Mapping[str, FieldDescriptor], depth: int
    ) -> ObjectExpression:
        """Serialize an object field key by key."""
        entries = []

        for key, item in value.items():
            expression = self.serialize(item, object_fields.get(key), depth)
            if expression is None:
                continue
            entries.append((str(key), expression))

        return ObjectExpression(tuple(entries))
