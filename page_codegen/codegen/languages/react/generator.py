"""
React code generator implementation.

Generates a JSX function component from an editor content tree.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, get_config_manager
from ...core.expressions import Expression, JSXFragment, group_siblings
from ...core.generator import CodeGenerator, GeneratorError
from ...core.imports import (
    DefaultImport,
    GeneratedImport,
    ImportRegistry,
    format_import_statements,
)
from ...core.schema import ComponentConfig, convert_schema
from .naming import sanitize_component_name
from .printer import JSXPrinter
from .renderer import INTERNAL_PROPS, ID_PROP, ComponentRenderer

logger = get_logger(__name__)

COMPONENT_TEMPLATE = """\
{% if imports_block %}{{ imports_block }}

{% endif %}export {% if export_default %}default {% endif %}function {{ component_name }}() {
{{ "return (" | indent_block(indent_size) }}
{{ jsx }}
{{ ");" | indent_block(indent_size) }}
}"""


@dataclass
class GeneratedTree:
    """Rendered markup plus the imports it needs."""

    jsx: str
    imports: List[GeneratedImport] = field(default_factory=list)


@dataclass
class GeneratedComponent(GeneratedTree):
    """A complete module: imports and a function returning the tree."""

    code: str = ""
    import_statements: List[str] = field(default_factory=list)


def extract_content(data: Any) -> List[Mapping[str, Any]]:
    """Accept a content list or an editor data document."""
    if data is None:
        return []
    if isinstance(data, (list, tuple)):
        return list(data)
    if isinstance(data, Mapping):
        content = data.get("content") or []
        if not isinstance(content, (list, tuple)):
            raise GeneratorError("Data 'content' must be a list of content nodes")
        return list(content)
    raise GeneratorError(f"Unsupported content data: {type(data).__name__}")


class ReactGenerator(CodeGenerator):
    """Code generator for React function components written in JSX."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize React generator with configuration."""
        super().__init__(config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "react"

    @property
    def file_extension(self) -> str:
        """Return JSX file extension."""
        return ".jsx"

    def get_templates(self) -> Dict[str, str]:
        """Return the module shell template."""
        return {"component.jsx.j2": COMPONENT_TEMPLATE}

    def render_tree(
        self, data: Any, schema: Mapping[str, Any], base_depth: int = 0
    ) -> GeneratedTree:
        """
        Render a content tree without the module shell.

        Args:
            data: Content list or editor data document
            schema: Component type name → config (ComponentConfig or dict)
            base_depth: Indentation level of the outermost markup

        Returns:
            GeneratedTree with the markup and finalized imports
        """
        content = extract_content(data)
        components = convert_schema(schema)

        registry = ImportRegistry()
        if self.config.include_framework_import:
            registry.register(
                DefaultImport(self.config.framework_import_path, self.config.framework_import_name)
            )

        renderer = ComponentRenderer(components, self.config, registry)
        root = self._render_root(renderer, content)

        printer = JSXPrinter(self.config.indent_size, self.config.print_width)
        jsx = printer.print(root, base_depth)

        imports = self._order_imports(registry.finalize())
        logger.debug("Rendered %d top-level nodes, %d import paths", len(content), len(imports))
        return GeneratedTree(jsx=jsx, imports=imports)

    def generate_component(self, data: Any, schema: Mapping[str, Any]) -> GeneratedComponent:
        """Render a content tree wrapped in an exported function component."""
        tree = self.render_tree(data, schema, base_depth=2)
        import_statements = format_import_statements(tree.imports)

        context = {
            "imports_block": "\n".join(import_statements),
            "export_default": self.config.export_default,
            "component_name": sanitize_component_name(self.config.component_name),
            "indent_size": self.config.indent_size,
            "jsx": tree.jsx,
        }
        code = self.render_template("component.jsx.j2", context)

        return GeneratedComponent(
            jsx=tree.jsx,
            imports=tree.imports,
            code=code,
            import_statements=import_statements,
        )

    def generate(self, content: Sequence[Mapping[str, Any]], schema: Mapping[str, Any]) -> str:
        """Generate the complete module source."""
        return self.generate_component(content, schema).code

    def _render_root(self, renderer: ComponentRenderer, content: List[Mapping[str, Any]]) -> Expression:
        as_list = len(content) > 1
        rendered = []
        for node in content:
            element = renderer.render(node, 0, is_list_item=as_list)
            if element is not None:
                rendered.append(element)

        root = group_siblings(rendered)
        return root if root is not None else JSXFragment()

    def _order_imports(self, imports: List[GeneratedImport]) -> List[GeneratedImport]:
        """Move the framework import to the front when it is requested."""
        if not self.config.include_framework_import:
            return imports

        path = self.config.framework_import_path
        framework = [entry for entry in imports if entry.path == path]
        return framework + [entry for entry in imports if entry.path != path]

    def validate_content(
        self, content: Sequence[Mapping[str, Any]], schema: Mapping[str, Any]
    ) -> List[str]:
        """Report props without field descriptors and unknown component types."""
        warnings = super().validate_content(extract_content(content), schema)
        warnings.extend(get_config_manager().validate_config(self.config))

        components = convert_schema(schema)
        ignored = set(INTERNAL_PROPS) | {ID_PROP}

        def visit(nodes: Any):
            if not isinstance(nodes, (list, tuple)):
                return
            for node in nodes:
                if not isinstance(node, Mapping):
                    continue
                type_name = node.get("type")
                component: Optional[ComponentConfig] = (
                    components.get(type_name) if isinstance(type_name, str) else None
                )
                if component is None:
                    warnings.append(f"Unknown component type '{type_name}'")
                    continue

                props = node.get("props") or {}
                for name, value in props.items():
                    descriptor = component.get_field(name)
                    if descriptor is None and name not in ignored:
                        warnings.append(
                            f"Prop {type_name}.{name} has no field descriptor; "
                            "emitted as a plain literal"
                        )
                    elif descriptor is not None and descriptor.is_slot:
                        visit(value)

        visit(extract_content(content))
        return warnings


def _resolve_config(config: Optional[GeneratorConfig], options: Dict[str, Any]) -> GeneratorConfig:
    config = config or GeneratorConfig()
    return replace(config, **options) if options else config


# Factory functions
def create_react_generator(config: Optional[GeneratorConfig] = None, **options) -> ReactGenerator:
    """Create a React generator, overriding config fields with keyword options."""
    return ReactGenerator(_resolve_config(config, options))


def generate_tree(
    data: Any,
    schema: Mapping[str, Any],
    config: Optional[GeneratorConfig] = None,
    base_depth: int = 0,
    **options,
) -> GeneratedTree:
    """
    Render a content tree into JSX markup and its imports.

    Args:
        data: Content list or editor data document
        schema: Component type name → config
        config: Generator configuration
        base_depth: Indentation level of the outermost markup
        **options: GeneratorConfig fields to override

    Returns:
        GeneratedTree
    """
    return create_react_generator(config, **options).render_tree(data, schema, base_depth)


def generate_component(
    data: Any,
    schema: Mapping[str, Any],
    config: Optional[GeneratorConfig] = None,
    **options,
) -> GeneratedComponent:
    """
    Render a content tree into a complete component module.

    Args:
        data: Content list or editor data document
        schema: Component type name → config
        config: Generator configuration
        **options: GeneratorConfig fields to override

    Returns:
        GeneratedComponent with ``code`` holding the module source
    """
    return create_react_generator(config, **options).generate_component(data, schema)
