"""
React code generator module.

Generates JSX function components from editor content trees.
"""

from .generator import (
    GeneratedComponent,
    GeneratedTree,
    ReactGenerator,
    create_react_generator,
    extract_content,
    generate_component,
    generate_tree,
)
from .naming import create_jsx_sanitizer, is_valid_identifier, sanitize_component_name
from .printer import JSXPrinter
from .renderer import ComponentRenderer, UnknownComponentType
from .serializer import ValueSerializer
from .slots import SlotResolver

__all__ = [
    # Generator
    "ReactGenerator",
    "GeneratedTree",
    "GeneratedComponent",
    "create_react_generator",
    "extract_content",
    "generate_tree",
    "generate_component",
    # Rendering pipeline
    "ComponentRenderer",
    "UnknownComponentType",
    "ValueSerializer",
    "SlotResolver",
    "JSXPrinter",
    # Naming
    "create_jsx_sanitizer",
    "is_valid_identifier",
    "sanitize_component_name",
]
