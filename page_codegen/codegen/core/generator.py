"""
Generator base class and the error-capturing generation entry point.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ...logging_config import get_logger
from .config import GeneratorConfig
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_BLANK_RUN = re.compile(r"\n{4,}")


class GeneratorError(Exception):
    """Raised when a content tree cannot be turned into code."""

    pass


class CodeGenerator(ABC):
    """
    Base class for target generators.

    Subclasses name their target, supply module shell templates through
    ``get_templates`` and implement ``generate``.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Target name used by the registry (e.g. 'react')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension of generated files (e.g. '.jsx')."""

    def get_templates(self) -> Dict[str, str]:
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_templates())
        return self._template_engine

    @abstractmethod
    def generate(self, content: Sequence[Mapping[str, Any]], schema: Mapping[str, Any]) -> str:
        """
        Generate a complete module for a content tree.

        Args:
            content: Top-level content sequence
            schema: Mapping of component type names to their configs

        Returns:
            Generated code as a string
        """

    def validate_content(
        self, content: Sequence[Mapping[str, Any]], schema: Mapping[str, Any]
    ) -> List[str]:
        """Return non-fatal warnings about a content tree."""
        return [] if content else ["Content tree is empty"]

    def format_code(self, code: str) -> str:
        """Strip trailing whitespace and cap blank runs at two lines."""
        return _BLANK_RUN.sub("\n\n\n", _TRAILING_SPACE.sub("", code))

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


@dataclass
class GenerationResult:
    """Generated code with its warnings and metadata, or a failure."""

    code: str
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error_message: Optional[str] = None
    exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        return cls(code="", success=False, error_message=message, exception=exception)


def count_nodes(content: Any) -> int:
    """Count content nodes in a tree, following every list of nodes in props."""
    if isinstance(content, Mapping):
        content = content.get("content")
    if not isinstance(content, (list, tuple)):
        return 0

    total = 0
    for node in content:
        if not isinstance(node, Mapping) or "type" not in node:
            continue
        total += 1
        for value in (node.get("props") or {}).values():
            if isinstance(value, (list, tuple)):
                total += count_nodes(value)
    return total


def _count_component_types(schema: Mapping[str, Any]) -> int:
    components = schema.get("components")
    return len(components) if isinstance(components, Mapping) else len(schema)


def generate_code(
    generator: CodeGenerator,
    content: Sequence[Mapping[str, Any]],
    schema: Mapping[str, Any],
) -> GenerationResult:
    """
    Run a generator, capturing failures in the returned result.

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_content(content, schema)
        code = generator.format_code(generator.generate(content, schema))
    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "component_name": generator.config.component_name,
        "node_count": count_nodes(content),
        "component_types": _count_component_types(schema),
    }
    logger.info("Generated %s code for %d nodes", generator.language_name, metadata["node_count"])
    return GenerationResult(code, warnings, metadata)
