"""
Identifier naming for generated code.

Splits arbitrary labels into words and rebuilds them in the case style a
target expects, appending a suffix when the result collides with a name
the target reserves.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional

# Word boundaries: lower→Upper transitions, acronym ends, letter/digit runs
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


class NamingCase(Enum):
    """Identifier case styles."""

    SNAKE_CASE = "snake"  # hero_banner
    CAMEL_CASE = "camel"  # heroBanner
    PASCAL_CASE = "pascal"  # HeroBanner


def split_words(name: str) -> List[str]:
    """Split a label such as ``hero-banner 2`` or ``HTMLBlock`` into words."""
    return _WORD_RE.findall(name)


class NameSanitizer:
    """Builds identifiers that avoid a target's reserved names."""

    def __init__(
        self,
        reserved_words: Optional[Iterable[str]] = None,
        builtin_names: Optional[Iterable[str]] = None,
        fallback: str = "component",
    ):
        """
        Args:
            reserved_words: Keywords of the target language
            builtin_names: Globals the generated code must not shadow
            fallback: Word used when a name has no usable characters
        """
        self.reserved = frozenset(reserved_words or ()) | frozenset(builtin_names or ())
        self.fallback = fallback

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.PASCAL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """Convert a label to an identifier in the requested case."""
        words = [word.lower() for word in split_words(name)] or [self.fallback]

        if target_case == NamingCase.SNAKE_CASE:
            result = "_".join(words)
        elif target_case == NamingCase.CAMEL_CASE:
            result = words[0] + "".join(word.capitalize() for word in words[1:])
        else:
            result = "".join(word.capitalize() for word in words)

        if result[0].isdigit():
            result = "_" + result

        if self.is_reserved(result):
            result += suffix_on_conflict
        return result
