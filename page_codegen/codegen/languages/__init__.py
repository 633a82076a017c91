"""
Target-specific code generators.

This module contains generators for the supported output languages.
"""

from .react import ReactGenerator, generate_component, generate_tree

__all__ = ["ReactGenerator", "generate_component", "generate_tree"]
