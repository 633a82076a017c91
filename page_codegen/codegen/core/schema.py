"""
Core schema representation for code generation.

Converts the editor's component configuration (plain dicts, typically loaded
from JSON) into a normalized internal format that generators can work with
consistently.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .imports import DefaultImport, ImportSpec, NamedImport


class SchemaError(Exception):
    """Exception raised for malformed schema documents."""

    pass


class FieldKind(Enum):
    """Field kinds understood by the serializer."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SLOT = "slot"
    ARRAY = "array"
    OBJECT = "object"

    # Editor-only kinds; their values serialize as plain literals
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"
    CUSTOM = "custom"
    EXTERNAL = "external"


@dataclass(frozen=True)
class FieldDescriptor:
    """Declares how a single prop value is serialized."""

    kind: FieldKind
    array_fields: Optional[Mapping[str, "FieldDescriptor"]] = None
    object_fields: Optional[Mapping[str, "FieldDescriptor"]] = None

    @property
    def is_slot(self) -> bool:
        return self.kind == FieldKind.SLOT


PropsTransform = Callable[[Dict[str, Any], Dict[str, Any]], Optional[Mapping[str, Any]]]


@dataclass(frozen=True)
class ComponentConfig:
    """Per-type code generation settings."""

    fields: Mapping[str, FieldDescriptor] = field(default_factory=dict)
    output_name: Optional[str] = None
    imports: Tuple[ImportSpec, ...] = ()
    props_transform: Optional[PropsTransform] = None
    skip: bool = False
    omit_props: Tuple[str, ...] = ()

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Get field descriptor by name."""
        return self.fields.get(name)

    def slot_field_names(self) -> List[str]:
        """Names of all slot-typed fields, in declaration order."""
        return [name for name, descriptor in self.fields.items() if descriptor.is_slot]


Schema = Mapping[str, ComponentConfig]


def is_content_node(value: Any) -> bool:
    """
    Check whether a value has the shape of a content node.

    A mapping with a string ``type`` and a mapping ``props``; anything
    else is treated as data.
    """
    return (
        isinstance(value, Mapping)
        and isinstance(value.get("type"), str)
        and isinstance(value.get("props"), Mapping)
    )


def convert_field(name: str, field_data: Any) -> FieldDescriptor:
    """Convert a field definition dict into a FieldDescriptor."""
    if isinstance(field_data, FieldDescriptor):
        return field_data

    if not isinstance(field_data, Mapping):
        raise SchemaError(f"Field '{name}' must be an object, got {type(field_data).__name__}")

    kind_name = field_data.get("type", "custom")
    try:
        kind = FieldKind(kind_name)
    except ValueError:
        kind = FieldKind.CUSTOM

    array_fields = field_data.get("arrayFields", field_data.get("array_fields"))
    object_fields = field_data.get("objectFields", field_data.get("object_fields"))

    return FieldDescriptor(
        kind=kind,
        array_fields=convert_fields(array_fields) if array_fields is not None else None,
        object_fields=convert_fields(object_fields) if object_fields is not None else None,
    )


def convert_fields(fields_data: Optional[Mapping[str, Any]]) -> Dict[str, FieldDescriptor]:
    """Convert a mapping of field definitions."""
    if not fields_data:
        return {}
    if not isinstance(fields_data, Mapping):
        raise SchemaError("Fields must be an object mapping names to definitions")
    return {name: convert_field(name, data) for name, data in fields_data.items()}


def convert_import(import_data: Any) -> ImportSpec:
    """
    Convert an import definition dict into an import spec.

    Accepted shapes::

        {"path": "antd", "name": "Button"}            # named
        {"path": "antd", "import": "Button", "alias": "AntButton"}
        {"path": "@/ui/Card", "default": "Card"}      # default
        {"path": "@/ui/Card", "default": true}        # default, named after the tag
    """
    if isinstance(import_data, (NamedImport, DefaultImport)):
        return import_data

    if not isinstance(import_data, Mapping) or "path" not in import_data:
        raise SchemaError(f"Import must be an object with a 'path': {import_data!r}")

    path = import_data["path"]

    if "default" in import_data and import_data["default"] is not False:
        default = import_data["default"]
        return DefaultImport(path=path, local_name=default if isinstance(default, str) else None)

    exported_name = import_data.get(
        "name", import_data.get("import", import_data.get("exported_name"))
    )
    return NamedImport(path=path, exported_name=exported_name, alias=import_data.get("alias"))


def convert_component(type_name: str, component_data: Any) -> ComponentConfig:
    """
    Convert one component definition into a ComponentConfig.

    Code generation settings may sit at the top level or inside a
    ``codegen`` block next to ``fields``.
    """
    if isinstance(component_data, ComponentConfig):
        return component_data

    if not isinstance(component_data, Mapping):
        raise SchemaError(f"Component '{type_name}' must be an object")

    codegen = dict(component_data.get("codegen") or {})
    settings = {**component_data, **codegen}

    import_data = settings.get("import", settings.get("imports"))
    if import_data is None:
        imports: Tuple[ImportSpec, ...] = ()
    elif isinstance(import_data, (list, tuple)):
        imports = tuple(convert_import(entry) for entry in import_data)
    else:
        imports = (convert_import(import_data),)

    props_transform = settings.get("props_transform", settings.get("mapProps"))
    if props_transform is not None and not callable(props_transform):
        raise SchemaError(f"Props transform for '{type_name}' must be callable")

    return ComponentConfig(
        fields=convert_fields(component_data.get("fields")),
        output_name=settings.get("output_name", settings.get("component")),
        imports=imports,
        props_transform=props_transform,
        skip=bool(settings.get("skip", False)),
        omit_props=tuple(settings.get("omit_props", settings.get("omitProps", ())) or ()),
    )


def convert_schema(schema_data: Mapping[str, Any]) -> Dict[str, ComponentConfig]:
    """
    Convert an editor configuration into a type name → ComponentConfig table.

    Args:
        schema_data: Either ``{"components": {...}}`` or the components
            mapping itself

    Returns:
        Dict mapping component type names to their configs
    """
    if not isinstance(schema_data, Mapping):
        raise SchemaError("Schema must be an object mapping component types to configs")

    components = schema_data.get("components", schema_data)
    if not isinstance(components, Mapping):
        raise SchemaError("Schema 'components' must be an object")

    return {name: convert_component(name, data) for name, data in components.items()}
