"""
Generator settings.

Settings are layered: dataclass defaults, then an optional JSON file, then
explicit overrides. Keys the dataclass does not know are kept in ``custom``
so target-specific options survive a save/load cycle.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all generators."""

    # Module shell
    component_name: str = "GeneratedPage"
    export_default: bool = False
    include_framework_import: bool = False
    framework_import_path: str = "react"
    framework_import_name: str = "React"

    # Props
    preserve_ids: bool = False
    list_keys: bool = True

    # Layout
    indent_size: int = 2
    print_width: int = 80

    max_depth: int = 100

    custom: Dict[str, Any] = field(default_factory=dict)


def _is_int_at_least(minimum: int) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, int) and value >= minimum


_CHECKS: List[Tuple[str, Callable[[GeneratorConfig], bool], str]] = [
    ("indent_size", lambda c: _is_int_at_least(0)(c.indent_size), "Invalid indent_size: {}"),
    ("print_width", lambda c: _is_int_at_least(20)(c.print_width), "Invalid print_width: {}"),
    ("max_depth", lambda c: _is_int_at_least(1)(c.max_depth), "Invalid max_depth: {}"),
    ("component_name", lambda c: bool(c.component_name), "component_name must not be empty"),
    (
        "framework_import_name",
        lambda c: not c.include_framework_import or bool(c.framework_import_name),
        "framework_import_name is required for the framework import",
    ),
]


def _read_json_object(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")
    return data


class ConfigManager:
    """Builds, saves and checks GeneratorConfig instances."""

    def __init__(self):
        self._known = {f.name for f in fields(GeneratorConfig)}

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge defaults, the config file and overrides, in that order.

        Args:
            custom_config: Overrides applied last
            config_file: Path to a JSON object of settings

        Raises:
            ConfigError: If the file is missing, not JSON, or not an object.
        """
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}

        layers = []
        if config_file:
            layers.append(_read_json_object(Path(config_file)))
            logger.debug("Loaded configuration from %s", config_file)
        if custom_config:
            layers.append(custom_config)

        for layer in layers:
            for key, value in layer.items():
                if key == "custom":
                    extra.update(value or {})
                elif key in self._known:
                    values[key] = value
                else:
                    extra[key] = value

        return GeneratorConfig(**values, custom=extra)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a config as a flat JSON object, custom keys inlined."""
        data = asdict(config)
        data.update(data.pop("custom"))

        path = Path(output_path)
        try:
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Return a warning for every setting with an unusable value."""
        return [
            message.format(getattr(config, name))
            for name, check, message in _CHECKS
            if not check(config)
        ]


_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Shortcut for ``get_config_manager().get_config(...)``."""
    return get_config_manager().get_config(custom_config, config_file)
