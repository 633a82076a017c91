"""Tests for the package-level convenience functions."""

import json

import pytest

from page_codegen.codegen import (
    UnknownComponentType,
    generate_from_content,
    quick_generate,
)

BUTTON_MODULE = "\n".join(
    [
        'import { Button } from "ui";',
        "",
        "export function GeneratedPage() {",
        "  return (",
        '    <Button label="Go" />',
        "  );",
        "}",
    ]
)


def test_generate_from_content(schema, button_node):
    result = generate_from_content([button_node], schema)

    assert result.success
    assert result.code == BUTTON_MODULE
    assert result.metadata["node_count"] == 1


def test_generate_from_content_captures_failures(schema):
    result = generate_from_content([{"type": "Mystery", "props": {}}], schema)

    assert not result.success
    assert isinstance(result.exception, UnknownComponentType)


def test_quick_generate_accepts_json_text_and_options(schema, button_node):
    document = json.dumps({"root": {"props": {}}, "content": [button_node]})

    assert quick_generate(document, schema) == BUTTON_MODULE
    code = quick_generate([button_node], schema, component_name="Landing")
    assert "export function Landing() {" in code


def test_quick_generate_raises_unknown_component_type(schema):
    with pytest.raises(UnknownComponentType):
        quick_generate([{"type": "Mystery", "props": {}}], schema)


def test_quick_generate_lets_hook_errors_through():
    def broken(props, slots):
        raise ValueError("boom")

    schema = {"Text": {"fields": {}, "props_transform": broken}}

    with pytest.raises(ValueError, match="^boom$"):
        quick_generate([{"type": "Text", "props": {}}], schema)
