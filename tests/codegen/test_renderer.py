"""Tests for the component renderer."""

import pytest

from page_codegen.codegen.core.expressions import (
    JSXElement,
    JSXFragment,
    JSXText,
    Literal,
    codegen_expression,
)
from page_codegen.codegen.core.generator import GeneratorError
from page_codegen.codegen.core.imports import GeneratedImport
from page_codegen.codegen.languages.react.renderer import UnknownComponentType


def test_button_renders_with_import(make_renderer, button_node):
    renderer = make_renderer()

    element = renderer.render(button_node)

    assert element.tag == "Button"
    assert element.attributes == (("label", Literal("Go")),)
    assert element.self_closing
    assert renderer.registry.finalize() == [
        GeneratedImport(path="ui", named=[("Button", None)])
    ]


def test_internal_props_are_stripped(make_renderer):
    renderer = make_renderer()
    node = {"type": "Text", "props": {"id": "Text-1", "puck": {}, "editMode": True, "text": "A"}}

    element = renderer.render(node)

    assert [name for name, _ in element.attributes] == ["text"]


def test_preserve_ids_keeps_id_prop(make_renderer):
    renderer = make_renderer(preserve_ids=True)

    element = renderer.render({"type": "Text", "props": {"id": "Text-1", "text": "A"}})

    assert element.get_attribute("id") == Literal("Text-1")


def test_omit_props_are_stripped(make_renderer):
    renderer = make_renderer({"Text": {"fields": {}, "omitProps": ["tracking"]}})

    element = renderer.render({"type": "Text", "props": {"tracking": "abc", "text": "A"}})

    assert element.attributes == (("text", Literal("A")),)


def test_unknown_type_is_fatal(make_renderer):
    renderer = make_renderer()

    with pytest.raises(UnknownComponentType) as excinfo:
        renderer.render({"type": "Mystery", "props": {}})

    assert excinfo.value.type_name == "Mystery"
    assert isinstance(excinfo.value, GeneratorError)


def test_unknown_type_nested_in_slot_is_fatal(make_renderer):
    renderer = make_renderer()
    node = {"type": "Section", "props": {"body": [{"type": "Mystery", "props": {}}]}}

    with pytest.raises(UnknownComponentType):
        renderer.render(node)


def test_skipped_type_renders_nothing(make_renderer):
    renderer = make_renderer()
    node = {"type": "Hidden", "props": {"body": [{"type": "Text", "props": {"text": "x"}}]}}

    assert renderer.render(node) is None


def test_slot_field_becomes_attribute_expression(make_renderer, section_node):
    """The Section body with two children is a fragment holding both, in order."""
    renderer = make_renderer()

    element = renderer.render(section_node)

    assert [name for name, _ in element.attributes] == ["title", "body"]
    body = element.get_attribute("body")
    assert isinstance(body, JSXFragment)
    assert [child.get_attribute("text") for child in body.children] == [
        Literal("A"),
        Literal("B"),
    ]


def test_children_slot_becomes_element_children(make_renderer):
    renderer = make_renderer(
        {
            "Box": {"fields": {"children": {"type": "slot"}}},
            "Text": {"fields": {"text": {"type": "text"}}},
        }
    )
    node = {"type": "Box", "props": {"children": [{"type": "Text", "props": {"text": "A"}}]}}

    element = renderer.render(node)

    assert element.attributes == ()
    assert len(element.children) == 1
    assert element.children[0].tag == "Text"


def test_string_children_become_text(make_renderer):
    renderer = make_renderer({"Heading": {"fields": {"children": {"type": "text"}}}})

    element = renderer.render({"type": "Heading", "props": {"children": "Welcome"}})

    assert element.children == (JSXText("Welcome"),)


def test_hook_redirects_slot_into_children(make_renderer):
    def card_props(props, slots):
        return {**props, "children": slots["content"]}

    renderer = make_renderer(
        {
            "Card": {
                "fields": {"title": {"type": "text"}, "content": {"type": "slot"}},
                "props_transform": card_props,
            },
            "Text": {"fields": {"text": {"type": "text"}}},
        }
    )
    node = {
        "type": "Card",
        "props": {
            "title": "T",
            "content": [{"type": "Text", "props": {"text": "A"}}],
        },
    }

    element = renderer.render(node)

    assert element.attributes == (("title", Literal("T")),)
    assert element.get_attribute("content") is None
    assert isinstance(element.children[0], JSXElement)
    assert element.children[0].tag == "Text"


def test_hook_receives_stripped_props_and_slot_expressions(make_renderer):
    seen = {}

    def capture(props, slots):
        seen["props"] = props
        seen["slots"] = slots
        return {"label": props["title"].upper(), "onClick": codegen_expression("handleClick")}

    renderer = make_renderer(
        {
            "Card": {
                "fields": {"title": {"type": "text"}, "content": {"type": "slot"}},
                "mapProps": capture,
            }
        }
    )

    element = renderer.render(
        {"type": "Card", "props": {"id": "Card-1", "title": "go", "content": []}}
    )

    assert seen["props"] == {"title": "go"}
    assert seen["slots"] == {"content": None}
    assert element.attributes == (
        ("label", Literal("GO")),
        ("onClick", codegen_expression("handleClick")),
    )


def test_hook_returning_none_falls_back_to_plain_props(make_renderer):
    renderer = make_renderer(
        {"Text": {"fields": {"text": {"type": "text"}}, "props_transform": lambda p, s: None}}
    )

    element = renderer.render({"type": "Text", "props": {"text": "A"}})

    assert element.attributes == (("text", Literal("A")),)


def test_renamed_array_field_keeps_its_descriptor(make_renderer):
    renderer = make_renderer(
        {
            "List": {
                "fields": {
                    "items": {"type": "array", "arrayFields": {"label": {"type": "text"}}}
                },
                "props_transform": lambda p, s: {"entries": p["items"]},
            },
            "Item": {"fields": {"label": {"type": "text"}}},
        }
    )
    node = {
        "type": "List",
        "props": {"items": [{"type": "Item", "props": {"id": "i1", "label": "a"}}]},
    }

    element = renderer.render(node)

    entries = element.get_attribute("entries")
    assert isinstance(entries.items[0], JSXElement)
    assert entries.items[0].tag == "Item"
    assert entries.items[0].attributes == (("key", Literal("i1")), ("label", Literal("a")))


def test_hook_errors_propagate_unmodified(make_renderer):
    def broken(props, slots):
        raise ValueError("boom")

    renderer = make_renderer({"Text": {"fields": {}, "props_transform": broken}})

    with pytest.raises(ValueError, match="boom"):
        renderer.render({"type": "Text", "props": {}})


def test_list_item_gets_key_first(make_renderer):
    renderer = make_renderer()

    element = renderer.render(
        {"type": "Text", "props": {"id": "Text-1", "text": "A"}}, is_list_item=True
    )

    assert element.attributes[0] == ("key", Literal("Text-1"))


def test_list_keys_can_be_disabled(make_renderer):
    renderer = make_renderer(list_keys=False)

    element = renderer.render(
        {"type": "Text", "props": {"id": "Text-1", "text": "A"}}, is_list_item=True
    )

    assert element.get_attribute("key") is None


def test_hook_supplied_key_wins(make_renderer):
    renderer = make_renderer(
        {"Text": {"fields": {}, "props_transform": lambda p, s: {"key": "custom"}}}
    )

    element = renderer.render({"type": "Text", "props": {"id": "Text-1"}}, is_list_item=True)

    assert element.attributes == (("key", Literal("custom")),)


def test_output_name_and_dotted_tag_imports(make_renderer):
    renderer = make_renderer(
        {
            "Title": {
                "fields": {},
                "output_name": "Typography.Title",
                "import": {"path": "antd"},
            },
            "Card": {"fields": {}, "import": {"path": "@/ui/Card", "default": True}},
        }
    )

    assert renderer.render({"type": "Title", "props": {}}).tag == "Typography.Title"
    renderer.render({"type": "Card", "props": {}})

    assert renderer.registry.finalize() == [
        GeneratedImport(path="@/ui/Card", default="Card"),
        GeneratedImport(path="antd", named=[("Typography", None)]),
    ]


def test_depth_guard(make_renderer):
    renderer = make_renderer(max_depth=1)
    node = {
        "type": "Section",
        "props": {
            "body": [
                {"type": "Section", "props": {"body": [{"type": "Text", "props": {"text": "A"}}]}}
            ]
        },
    }

    with pytest.raises(GeneratorError, match="maximum depth"):
        renderer.render(node)


def test_invalid_node_is_rejected(make_renderer):
    with pytest.raises(GeneratorError):
        make_renderer().render({"props": {}})
