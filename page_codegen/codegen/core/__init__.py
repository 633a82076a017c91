"""
Core code generation components.

Provides base classes and utilities used by all target generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .expressions import (
    ArrayExpression,
    Expression,
    JSXElement,
    JSXFragment,
    JSXText,
    Literal,
    ObjectExpression,
    RawCode,
    codegen_expression,
)
from .imports import (
    DefaultImport,
    GeneratedImport,
    ImportConflict,
    ImportRegistry,
    NamedImport,
    format_import_statements,
)
from .schema import (
    ComponentConfig,
    FieldDescriptor,
    FieldKind,
    SchemaError,
    convert_schema,
    is_content_node,
)
from .naming import NameSanitizer, NamingCase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Expression model
    "Expression",
    "Literal",
    "RawCode",
    "ArrayExpression",
    "ObjectExpression",
    "JSXElement",
    "JSXFragment",
    "JSXText",
    "codegen_expression",
    # Imports
    "NamedImport",
    "DefaultImport",
    "GeneratedImport",
    "ImportRegistry",
    "ImportConflict",
    "format_import_statements",
    # Schema system - core data structures
    "ComponentConfig",
    "FieldDescriptor",
    "FieldKind",
    "SchemaError",
    "convert_schema",
    "is_content_node",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
