"""
Target lookup for code generators.

Targets are matched case-insensitively by primary name or alias; the
global registry registers the built-in React generator on first use.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Raised for unknown targets, bad registrations and failed instantiation."""

    pass


def _coerce_config(config: ConfigSource) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    if config is None:
        return load_config()
    if isinstance(config, dict):
        return load_config(custom_config=config)
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    raise RegistryError(f"Unsupported config type: {type(config).__name__}")


class GeneratorRegistry:
    """Maps target names and aliases to generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register ``generator_class`` under ``target`` and its aliases.

        An already registered target is left alone unless ``replace`` is set.
        Nothing is registered when an alias is already taken.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                conflicts with another target.
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        key = target.lower()
        if key in self._generators and not replace:
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != key]
        if not replace:
            for alias in alias_keys:
                if alias in self._generators:
                    owner = alias
                else:
                    owner = self._aliases.get(alias, key)
                if owner != key:
                    raise RegistryError(f"Alias '{alias}' is already used by target '{owner}'")

        self._generators[key] = generator_class
        self._aliases.update({alias: key for alias in alias_keys})
        logger.debug("Registered generator %s for %s", generator_class.__name__, key)

    def unregister(self, target: str):
        """Drop a target together with its aliases."""
        key = target.lower()
        self._generators.pop(key, None)
        self._aliases = {a: t for a, t in self._aliases.items() if t != key}

    def _resolve(self, target: str) -> Optional[str]:
        key = target.lower()
        if key in self._generators:
            return key
        return self._aliases.get(key)

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        key = self._resolve(target)
        if key is None:
            raise RegistryError(
                f"No generator registered for target: {target}. "
                f"Available: {', '.join(self.list_targets())}"
            )
        return self._generators[key]

    def create_generator(self, target: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate the generator for ``target``.

        ``config`` may be a GeneratorConfig, a dict of overrides, a path to a
        JSON config file, or None for defaults.
        """
        generator_class = self.get_generator_class(target)
        final_config = _coerce_config(config)
        try:
            return generator_class(final_config)
        except Exception as e:
            raise RegistryError(f"Failed to create {target} generator: {e}") from e

    def list_targets(self) -> List[str]:
        return sorted(self._generators)

    def get_aliases_for_target(self, target: str) -> List[str]:
        key = target.lower()
        return sorted(alias for alias, owner in self._aliases.items() if owner == key)

    def is_supported(self, target: str) -> bool:
        return self._resolve(target) is not None

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """Describe a target: name, class, extension, aliases and module."""
        generator_class = self.get_generator_class(target)
        sample = generator_class(GeneratorConfig())
        return {
            "name": sample.language_name,
            "class": generator_class.__name__,
            "file_extension": sample.file_extension,
            "aliases": self.get_aliases_for_target(self._resolve(target)),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the process-wide registry, creating it on first call."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.react import ReactGenerator

    registry.register("react", ReactGenerator, aliases=["jsx", "tsx"])


def register_generator(
    target: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    get_registry().register(target, generator_class, aliases)


def get_generator(target: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    return get_registry().list_targets()


def is_target_supported(target: str) -> bool:
    return get_registry().is_supported(target)


def get_target_info(target: str) -> Dict[str, Any]:
    return get_registry().get_target_info(target)
