"""Tests for schema conversion."""

import pytest

from page_codegen.codegen.core.imports import DefaultImport, NamedImport
from page_codegen.codegen.core.schema import (
    ComponentConfig,
    FieldDescriptor,
    FieldKind,
    SchemaError,
    convert_component,
    convert_field,
    convert_import,
    convert_schema,
    is_content_node,
)


def test_convert_schema_accepts_components_wrapper(schema):
    wrapped = convert_schema({"components": schema})
    bare = convert_schema(schema)

    assert set(wrapped) == set(bare) == set(schema)
    assert wrapped["Section"].slot_field_names() == ["body"]


def test_convert_field_with_nested_descriptors():
    descriptor = convert_field(
        "items",
        {"type": "array", "arrayFields": {"label": {"type": "text"}}},
    )

    assert descriptor.kind == FieldKind.ARRAY
    assert descriptor.array_fields["label"].kind == FieldKind.TEXT
    assert descriptor.object_fields is None


def test_unknown_field_kind_falls_back_to_custom():
    assert convert_field("x", {"type": "colorPicker"}).kind == FieldKind.CUSTOM


def test_convert_import_shapes():
    assert convert_import({"path": "antd", "name": "Button"}) == NamedImport("antd", "Button")
    assert convert_import({"path": "antd", "import": "Button", "alias": "AntButton"}) == (
        NamedImport("antd", "Button", "AntButton")
    )
    assert convert_import({"path": "@/ui/Card", "default": "Card"}) == DefaultImport(
        "@/ui/Card", "Card"
    )
    assert convert_import({"path": "@/ui/Card", "default": True}) == DefaultImport("@/ui/Card")


def test_convert_import_requires_path():
    with pytest.raises(SchemaError):
        convert_import({"name": "Button"})


def test_convert_component_reads_codegen_block():
    def transform(props, slots):
        return props

    component = convert_component(
        "Hero",
        {
            "fields": {"title": {"type": "text"}},
            "codegen": {
                "component": "HeroBanner",
                "imports": [{"path": "@/blocks", "name": "HeroBanner"}],
                "mapProps": transform,
                "omitProps": ["tracking"],
            },
        },
    )

    assert component.output_name == "HeroBanner"
    assert component.imports == (NamedImport("@/blocks", "HeroBanner"),)
    assert component.props_transform is transform
    assert component.omit_props == ("tracking",)
    assert component.skip is False


def test_props_transform_must_be_callable():
    with pytest.raises(SchemaError):
        convert_component("Hero", {"props_transform": "not a function"})


def test_component_config_passes_through():
    config = ComponentConfig(fields={"body": FieldDescriptor(FieldKind.SLOT)})

    assert convert_schema({"Box": config})["Box"] is config


def test_malformed_schema_documents():
    with pytest.raises(SchemaError):
        convert_schema(["Button"])
    with pytest.raises(SchemaError):
        convert_schema({"components": ["Button"]})
    with pytest.raises(SchemaError):
        convert_schema({"Button": "not an object"})


def test_is_content_node():
    assert is_content_node({"type": "Text", "props": {}})
    assert not is_content_node({"type": "Text"})
    assert not is_content_node({"type": 3, "props": {}})
    assert not is_content_node({"label": "x", "props": {}})
