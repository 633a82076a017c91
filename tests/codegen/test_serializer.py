"""Tests for the field-type-aware value serializer."""

from page_codegen.codegen.core.expressions import (
    ArrayExpression,
    JSXElement,
    Literal,
    ObjectExpression,
    RawCode,
    codegen_expression,
)
from page_codegen.codegen.core.schema import FieldDescriptor, FieldKind

TEXT = FieldDescriptor(FieldKind.TEXT)


def test_primitives_without_descriptor_are_literals(make_renderer):
    serializer = make_renderer().serializer

    assert serializer.serialize("Go") == Literal("Go")
    assert serializer.serialize(3) == Literal(3)
    assert serializer.serialize(False) == Literal(False)


def test_undefined_values_are_omitted(make_renderer):
    serializer = make_renderer().serializer

    assert serializer.serialize(None) is None
    assert serializer.serialize(None, TEXT) is None


def test_generic_literal_never_renders_content_nodes(make_renderer):
    """Unschemed props keep node-shaped data as plain objects."""
    serializer = make_renderer().serializer
    value = {"type": "Text", "props": {"text": "A"}}

    result = serializer.serialize(value)

    assert isinstance(result, ObjectExpression)
    assert result.entries[0] == ("type", Literal("Text"))


def test_generic_literal_mirrors_structure(make_renderer):
    serializer = make_renderer().serializer

    result = serializer.serialize({"a": [1, None], "b": None})

    assert result == ObjectExpression(
        (("a", ArrayExpression((Literal(1), Literal(None)))),)
    )


def test_raw_code_is_emitted_verbatim(make_renderer):
    serializer = make_renderer().serializer
    code = codegen_expression("  () => alert('hi')  ")

    assert serializer.serialize(code, TEXT) is code
    assert code == RawCode("() => alert('hi')")


def test_array_field_renders_embedded_content_nodes(make_renderer, schema):
    serializer = make_renderer().serializer
    descriptor = FieldDescriptor(
        FieldKind.ARRAY, array_fields={"label": TEXT, "count": FieldDescriptor(FieldKind.NUMBER)}
    )
    value = [
        {"type": "Text", "props": {"id": "Text-1", "text": "A"}},
        {"label": "x", "count": None},
        None,
    ]

    result = serializer.serialize(value, descriptor)

    assert isinstance(result, ArrayExpression)
    element, item, missing = result.items
    assert isinstance(element, JSXElement)
    assert element.tag == "Text"
    assert element.get_attribute("key") == Literal("Text-1")
    assert item == ObjectExpression((("label", Literal("x")),))
    assert missing == Literal(None)


def test_array_field_without_item_schema_is_literal(make_renderer):
    serializer = make_renderer().serializer
    value = [{"type": "Text", "props": {"text": "A"}}]

    result = serializer.serialize(value, FieldDescriptor(FieldKind.ARRAY))

    assert isinstance(result.items[0], ObjectExpression)


def test_object_field_uses_sub_descriptors(make_renderer):
    serializer = make_renderer().serializer
    descriptor = FieldDescriptor(
        FieldKind.OBJECT,
        object_fields={"body": FieldDescriptor(FieldKind.SLOT), "color": TEXT},
    )
    value = {
        "color": "red",
        "body": [{"type": "Text", "props": {"text": "A"}}],
        "extra": {"nested": True},
        "gone": None,
    }

    result = serializer.serialize(value, descriptor)

    keys = [key for key, _ in result.entries]
    assert keys == ["color", "body", "extra"]
    assert isinstance(result.entries[1][1], JSXElement)
    assert result.entries[2][1] == ObjectExpression((("nested", Literal(True)),))


def test_slot_descriptor_delegates_to_slot_resolver(make_renderer):
    serializer = make_renderer().serializer
    slot = FieldDescriptor(FieldKind.SLOT)

    assert serializer.serialize([], slot) is None
    assert serializer.serialize("not a list", slot) is None
    assert isinstance(
        serializer.serialize([{"type": "Text", "props": {"text": "A"}}], slot), JSXElement
    )
