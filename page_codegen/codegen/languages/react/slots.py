"""
Slot resolution.

A slot holds a nested content sequence; resolving it renders every node
and groups the results into a single expression.
"""

from typing import TYPE_CHECKING, Any, Optional

from ...core.expressions import Expression, group_siblings

if TYPE_CHECKING:
    from .renderer import ComponentRenderer


class SlotResolver:
    """Renders slot contents through the component renderer."""

    def __init__(self, renderer: "ComponentRenderer"):
        self.renderer = renderer

    def resolve_slot(self, content: Any, depth: int = 0) -> Optional[Expression]:
        """
        Render a content sequence into one expression.

        Args:
            content: Slot value; anything but a list counts as empty
            depth: Depth of the node owning the slot

        Returns:
            None when nothing renders, the element itself for a single
            rendered node, or a fragment wrapping several
        """
        if not isinstance(content, (list, tuple)) or not content:
            return None

        as_list = len(content) > 1
        rendered = []

        for node in content:
            element = self.renderer.render(node, depth + 1, is_list_item=as_list)
            if element is not None:
                rendered.append(element)

        return group_siblings(rendered)
