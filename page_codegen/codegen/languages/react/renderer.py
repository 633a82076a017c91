"""
Component renderer.

Turns one content node into a JSX element: looks up its component config,
partitions its props, resolves slots, runs the props-transform hook,
serializes the remaining props and registers the imports the tag needs.
"""

from typing import Any, Dict, Mapping, Optional, Set, Tuple

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.expressions import Expression, JSXElement, JSXText, Literal
from ...core.generator import GeneratorError
from ...core.imports import ImportRegistry
from ...core.schema import ComponentConfig, FieldDescriptor, Schema
from .serializer import ValueSerializer
from .slots import SlotResolver

logger = get_logger(__name__)

ID_PROP = "id"
KEY_ATTRIBUTE = "key"
CHILDREN_PROP = "children"

# Editor bookkeeping that never reaches the output
INTERNAL_PROPS = frozenset({"puck", "editMode"})


class UnknownComponentType(GeneratorError):
    """Raised when a content node's type has no component config."""

    def __init__(self, type_name: Any):
        self.type_name = type_name
        super().__init__(f"No component config found for '{type_name}'")


class ComponentRenderer:
    """Renders content nodes into JSX elements for a single generation run."""

    def __init__(self, schema: Schema, config: GeneratorConfig, registry: ImportRegistry):
        """
        Args:
            schema: Component type name → ComponentConfig
            config: Generator configuration
            registry: Import registry owned by the current run
        """
        self.schema = schema
        self.config = config
        self.registry = registry
        self.serializer = ValueSerializer(self)
        self.slots = SlotResolver(self)

    def render(
        self, node: Mapping[str, Any], depth: int = 0, is_list_item: bool = False
    ) -> Optional[JSXElement]:
        """
        Render a content node.

        Args:
            node: Content node (``{"type": ..., "props": {...}}``)
            depth: Depth of the node in the content tree
            is_list_item: Whether the node is one of several siblings

        Returns:
            The rendered element, or None for skipped component types

        Raises:
            UnknownComponentType: If the node's type is not in the schema
        """
        if depth > self.config.max_depth:
            raise GeneratorError(
                f"Content tree exceeds the maximum depth of {self.config.max_depth}"
            )

        if not isinstance(node, Mapping) or "type" not in node:
            raise GeneratorError(f"Invalid content node: {node!r}")

        type_name = node["type"]
        component = self.schema.get(type_name) if isinstance(type_name, str) else None
        if component is None:
            raise UnknownComponentType(type_name)

        if component.skip:
            logger.debug("Skipping %s at depth %d", type_name, depth)
            return None

        logger.debug("Rendering %s at depth %d", type_name, depth)

        props = dict(node.get("props") or {})
        slot_expressions = {
            name: self.slots.resolve_slot(props.get(name), depth)
            for name in component.slot_field_names()
        }

        stripped = self._stripped_props(component)
        plain_props = {
            name: value
            for name, value in props.items()
            if name not in slot_expressions and name not in stripped
        }

        prop_map, origins = self._map_props(component, props, plain_props, slot_expressions)
        attributes, children = self._assemble(component, prop_map, origins, depth)

        tag = component.output_name or type_name
        self.registry.register([spec.bind(tag) for spec in component.imports])

        if is_list_item and self.config.list_keys:
            attributes = self._with_list_key(attributes, props.get(ID_PROP))

        return JSXElement(tag=tag, attributes=attributes, children=children)

    def _stripped_props(self, component: ComponentConfig) -> Set[str]:
        stripped = set(INTERNAL_PROPS) | set(component.omit_props)
        if not self.config.preserve_ids:
            stripped.add(ID_PROP)
        return stripped

    def _map_props(
        self,
        component: ComponentConfig,
        props: Dict[str, Any],
        plain_props: Dict[str, Any],
        slot_expressions: Dict[str, Optional[Expression]],
    ) -> Tuple[Dict[str, Any], Dict[str, str]]:
        """
        Build the authoritative prop map for a node.

        Returns the map together with the original field name behind each
        key, so descriptors survive a hook renaming a field.
        """
        if component.props_transform is None:
            prop_map = {}
            for name in props:
                if name in slot_expressions:
                    prop_map[name] = slot_expressions[name]
                elif name in plain_props:
                    prop_map[name] = plain_props[name]
            return prop_map, {}

        mapped = component.props_transform(dict(plain_props), dict(slot_expressions))
        if mapped is None:
            return plain_props, {}

        prop_map = dict(mapped)
        sources = list(plain_props.items()) + list(slot_expressions.items())
        origins = {}
        for key, value in prop_map.items():
            if value is None:
                continue
            matches = [name for name, original in sources if original is value]
            if matches and key not in matches:
                origins[key] = matches[0]
        return prop_map, origins

    def _assemble(
        self,
        component: ComponentConfig,
        prop_map: Dict[str, Any],
        origins: Dict[str, str],
        depth: int,
    ) -> Tuple[Tuple[Tuple[str, Expression], ...], Tuple[Expression, ...]]:
        """Serialize the prop map into attributes and children."""
        attributes = []
        children: Tuple[Expression, ...] = ()

        for name, value in prop_map.items():
            descriptor = component.get_field(origins.get(name, name))

            if name == CHILDREN_PROP:
                children = self._children(value, descriptor, depth)
                continue

            expression = self.serializer.serialize(value, descriptor, depth)
            if expression is None:
                continue
            attributes.append((name, expression))

        return tuple(attributes), children

    def _children(
        self, value: Any, descriptor: Optional[FieldDescriptor], depth: int
    ) -> Tuple[Expression, ...]:
        if isinstance(value, str):
            return (JSXText(value),) if value else ()

        expression = self.serializer.serialize(value, descriptor, depth)
        if expression is None:
            return ()
        return (expression,)

    def _with_list_key(
        self, attributes: Tuple[Tuple[str, Expression], ...], node_id: Any
    ) -> Tuple[Tuple[str, Expression], ...]:
        """Prepend a ``key`` attribute taken from the node's id."""
        if node_id is None or node_id == "":
            return attributes
        if any(name == KEY_ATTRIBUTE for name, _ in attributes):
            return attributes

        if not isinstance(node_id, (str, int)) or isinstance(node_id, bool):
            node_id = str(node_id)
        return ((KEY_ATTRIBUTE, Literal(node_id)),) + attributes
