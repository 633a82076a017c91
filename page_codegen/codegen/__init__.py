"""
Page Codegen Code Generation Module

Generates component source code from editor content trees.
"""

import json

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    get_target_info,
    is_target_supported,
    list_supported_targets,
    register_generator,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.expressions import RawCode, codegen_expression
from .core.imports import DefaultImport, ImportConflict, NamedImport
from .core.schema import ComponentConfig, FieldDescriptor, FieldKind, SchemaError
from .core.config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .languages.react import (
    GeneratedComponent,
    GeneratedTree,
    UnknownComponentType,
    generate_component,
    generate_tree,
)

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_from_content(content, schema, target="react", config=None):
    """
    Generate a module from a content tree with error handling.

    Args:
        content: Content list or editor data document
        schema: Component type name → config
        target: Target name or alias
        config: Generator configuration (GeneratorConfig, dict or file path)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(target, config)
    return generate_code(generator, content, schema)


def quick_generate(content, schema, target="react", **options):
    """
    Generate a module and return its code.

    Unlike ``generate_from_content`` failures are not captured: unknown
    component types, import conflicts and hook errors reach the caller as
    raised.

    Args:
        content: Content list, editor data document, or its JSON text
        schema: Component type name → config
        target: Target name or alias
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(content, str):
        content = json.loads(content)

    generator = get_generator(target, options)
    return generator.format_code(generator.generate(content, schema))


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "UnknownComponentType",
    "ImportConflict",
    "SchemaError",
    "ConfigError",
    "ComponentConfig",
    "FieldDescriptor",
    "FieldKind",
    "NamedImport",
    "DefaultImport",
    "RawCode",
    "GeneratorConfig",
    "ConfigManager",
    "GeneratedTree",
    "GeneratedComponent",
    "codegen_expression",
    "generate_code",
    "generate_tree",
    "generate_component",
    "generate_from_content",
    "quick_generate",
    "load_config",
    "get_generator",
    "get_registry",
    "get_target_info",
    "is_target_supported",
    "list_supported_targets",
    "register_generator",
]
