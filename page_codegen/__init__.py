"""Page Codegen - turn page-editor content trees into React component source."""

from .codegen import (
    ComponentConfig,
    DefaultImport,
    FieldDescriptor,
    FieldKind,
    GeneratorConfig,
    GeneratorError,
    ImportConflict,
    NamedImport,
    RawCode,
    UnknownComponentType,
    __version__,
    codegen_expression,
    generate_component,
    generate_tree,
)

__all__ = [
    "ComponentConfig",
    "DefaultImport",
    "FieldDescriptor",
    "FieldKind",
    "GeneratorConfig",
    "GeneratorError",
    "ImportConflict",
    "NamedImport",
    "RawCode",
    "UnknownComponentType",
    "__version__",
    "codegen_expression",
    "generate_component",
    "generate_tree",
]
