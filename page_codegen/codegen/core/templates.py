"""
Jinja2 rendering for generated module shells.

Targets register their templates in memory; only the outer shell of a
module goes through Jinja, markup itself is built by the printer.
"""

from typing import Any, Dict, Optional

import jinja2


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def indent_block(value: Any, spaces: int = 4) -> str:
    """Indent every non-blank line of ``value``, the first one included."""
    pad = " " * spaces
    return "\n".join(pad + line if line.strip() else line for line in str(value).split("\n"))


class TemplateEngine:
    """In-memory Jinja2 environment with code generation filters."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        self._templates: Dict[str, str] = dict(templates or {})
        self._env = jinja2.Environment(
            loader=jinja2.DictLoader(self._templates),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
            lstrip_blocks=True,
        )
        self._env.filters["indent_block"] = indent_block

    def add_template(self, name: str, content: str):
        self._templates[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._templates

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a registered template; jinja2 failures become TemplateError."""
        try:
            return self._env.get_template(template_name).render(**context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


def create_template_engine(templates: Optional[Dict[str, str]] = None) -> TemplateEngine:
    """Create a template engine preloaded with the given templates."""
    return TemplateEngine(templates)
