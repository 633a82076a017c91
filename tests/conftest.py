"""Shared fixtures for page_codegen tests."""

import json

import pytest

from page_codegen.codegen.core.config import GeneratorConfig
from page_codegen.codegen.core.imports import ImportRegistry
from page_codegen.codegen.core.schema import convert_schema
from page_codegen.codegen.languages.react.renderer import ComponentRenderer


@pytest.fixture
def schema():
    """A small editor schema covering text, slot, array and object fields."""
    return {
        "Button": {
            "fields": {"label": {"type": "text"}, "size": {"type": "select"}},
            "output_name": "Button",
            "import": {"path": "ui", "name": "Button"},
        },
        "Section": {
            "fields": {"title": {"type": "text"}, "body": {"type": "slot"}},
        },
        "Text": {
            "fields": {"text": {"type": "text"}},
        },
        "List": {
            "fields": {
                "items": {
                    "type": "array",
                    "arrayFields": {"label": {"type": "text"}, "count": {"type": "number"}},
                },
                "style": {
                    "type": "object",
                    "objectFields": {"color": {"type": "text"}},
                },
            },
        },
        "Hidden": {
            "fields": {"body": {"type": "slot"}},
            "skip": True,
        },
    }


@pytest.fixture
def button_node():
    return {"type": "Button", "props": {"id": "Button-1", "label": "Go"}}


@pytest.fixture
def section_node():
    return {
        "type": "Section",
        "props": {
            "id": "Section-1",
            "title": "Hi",
            "body": [
                {"type": "Text", "props": {"id": "Text-1", "text": "A"}},
                {"type": "Text", "props": {"id": "Text-2", "text": "B"}},
            ],
        },
    }


@pytest.fixture
def make_renderer(schema):
    """Build a renderer with a fresh registry; keyword args override config."""

    def _make(schema_data=None, **options):
        components = convert_schema(schema_data if schema_data is not None else schema)
        registry = ImportRegistry()
        return ComponentRenderer(components, GeneratorConfig(**options), registry)

    return _make


@pytest.fixture
def page_file(tmp_path, button_node):
    """Editor data document written to disk."""
    path = tmp_path / "page.json"
    path.write_text(json.dumps({"root": {"props": {}}, "content": [button_node]}))
    return path


@pytest.fixture
def schema_file(tmp_path, schema):
    path = tmp_path / "components.json"
    path.write_text(json.dumps({"components": schema}))
    return path
