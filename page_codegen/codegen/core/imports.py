"""
Import registry for generated modules.

Collects the import requests made while rendering a tree, merges them per
source path and emits them in a stable order.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .generator import GeneratorError

logger = get_logger(__name__)


class ImportConflict(GeneratorError):
    """Raised when two import requests for the same path disagree."""

    pass


@dataclass(frozen=True)
class NamedImport:
    """``import { exported_name as alias } from "path"``."""

    path: str
    exported_name: Optional[str] = None
    alias: Optional[str] = None

    def bind(self, tag_name: str) -> "NamedImport":
        """Fill in a missing exported name from the emitted tag."""
        if self.exported_name:
            return self
        return NamedImport(self.path, binding_name(tag_name), self.alias)


@dataclass(frozen=True)
class DefaultImport:
    """``import local_name from "path"``."""

    path: str
    local_name: Optional[str] = None

    def bind(self, tag_name: str) -> "DefaultImport":
        """Fill in a missing local name from the emitted tag."""
        if self.local_name:
            return self
        return DefaultImport(self.path, binding_name(tag_name))


ImportSpec = Union[NamedImport, DefaultImport]


def binding_name(tag_name: str) -> str:
    """Identifier a tag depends on (``Typography.Title`` → ``Typography``)."""
    return tag_name.split(".", 1)[0]


@dataclass
class GeneratedImport:
    """A finalized import declaration for one source path."""

    path: str
    default: Optional[str] = None
    named: List[Tuple[str, Optional[str]]] = field(default_factory=list)


@dataclass
class _RegistryEntry:
    default: Optional[str] = None
    named: Dict[str, Optional[str]] = field(default_factory=dict)


class ImportRegistry:
    """Per-run registry deduplicating import requests by source path."""

    def __init__(self):
        """Initialize empty registry."""
        self._entries: Dict[str, _RegistryEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def register(self, specs: Union[ImportSpec, Iterable[ImportSpec], None]):
        """
        Register one or more import specs.

        Raises:
            ImportConflict: If a default local name or a named alias
                disagrees with an earlier registration for the same path
        """
        if specs is None:
            return
        if isinstance(specs, (NamedImport, DefaultImport)):
            specs = [specs]

        for spec in specs:
            existing_entry = self._entries.get(spec.path)

            if isinstance(spec, DefaultImport):
                if not spec.local_name:
                    raise GeneratorError(f"Default import from '{spec.path}' has no local name")
                current = existing_entry.default if existing_entry else None
                if current and current != spec.local_name:
                    raise ImportConflict(
                        f"Multiple default imports declared for '{spec.path}': "
                        f"'{current}' and '{spec.local_name}'"
                    )
                self._entries.setdefault(spec.path, _RegistryEntry()).default = spec.local_name
                continue

            if not spec.exported_name:
                raise GeneratorError(f"Named import from '{spec.path}' has no exported name")

            # "Button as Button" is the same binding as a bare "Button"
            alias = spec.alias if spec.alias != spec.exported_name else None

            if existing_entry and spec.exported_name in existing_entry.named:
                existing = existing_entry.named[spec.exported_name]
                if existing != alias:
                    raise ImportConflict(
                        f"Conflicting aliases declared for '{spec.exported_name}' "
                        f"from '{spec.path}': {existing!r} and {alias!r}"
                    )
                continue

            self._entries.setdefault(spec.path, _RegistryEntry()).named[spec.exported_name] = alias
            logger.debug("Registered import %s from %s", spec.exported_name, spec.path)

    def finalize(self) -> List[GeneratedImport]:
        """Return imports sorted by path, named specifiers sorted by name."""
        imports = []

        for path in sorted(self._entries):
            entry = self._entries[path]
            if not entry.default and not entry.named:
                continue

            imports.append(
                GeneratedImport(
                    path=path,
                    default=entry.default,
                    named=sorted(entry.named.items(), key=lambda item: item[0]),
                )
            )

        return imports


def format_import_statement(entry: GeneratedImport) -> Optional[str]:
    """Format a single import declaration, None if it has no specifiers."""
    named = ", ".join(
        f"{name} as {alias}" if alias and alias != name else name
        for name, alias in entry.named
    )

    parts = []
    if entry.default:
        parts.append(entry.default)
    if named:
        parts.append(f"{{ {named} }}")

    if not parts:
        return None

    return f'import {", ".join(parts)} from "{entry.path}";'


def format_import_statements(imports: Iterable[GeneratedImport]) -> List[str]:
    """Format import declarations, dropping empty ones."""
    statements = []
    for entry in imports:
        statement = format_import_statement(entry)
        if statement:
            statements.append(statement)
    return statements
