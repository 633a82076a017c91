"""Loaders for editor documents and component schemas.

Editor data comes from a local file or an HTTP endpoint; schemas come from
a JSON file or from a Python module when they carry props-transform hooks.
"""

import importlib
import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class ContentLoaderError(Exception):
    """Raised when a document or schema cannot be loaded."""

    pass


def _decode(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON from %s: %s", source, e)
        raise ContentLoaderError(f"Invalid JSON from {source}: {e}") from e


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read and decode a JSON file.

    Returns:
        ``(source, data)`` where ``source`` is the path as given.

    Raises:
        ContentLoaderError: If the file is missing, unreadable or not JSON.
    """
    path = Path(file_path)
    source = str(path)

    if not path.is_file():
        logger.error("File not found: %s", source)
        raise ContentLoaderError(f"File not found: {source}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ContentLoaderError(f"Error reading file {source}: {e}") from e

    data = _decode(text, source)
    logger.info("Loaded %s", source)
    return source, data


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch and decode a JSON document over HTTP.

    Args:
        url: Absolute http(s) URL.
        timeout: Request timeout in seconds.

    Raises:
        ContentLoaderError: On malformed URLs, transport or HTTP errors, and
            non-JSON bodies.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ContentLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise ContentLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise ContentLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request to %s failed: %s", url, e)
        raise ContentLoaderError(f"Request error for URL {url}: {e}") from e

    if "json" not in response.headers.get("content-type", "").lower():
        logger.warning("Response from %s is not labelled as JSON", url)

    try:
        data = response.json()
    except ValueError as e:
        raise ContentLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded %s", url)
    return url, data


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load an editor document from exactly one of ``file_path`` or ``url``."""
    if bool(file_path) == bool(url):
        raise ContentLoaderError("Provide exactly one of file_path or url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)


def load_schema(reference: str | Path) -> Any:
    """Load a component schema.

    ``reference`` is either a JSON file or ``module:attribute``, where the
    attribute is a mapping or a factory returning one.

    Raises:
        ContentLoaderError: If the schema cannot be located or loaded.
    """
    text = str(reference)
    path = Path(text)

    if path.suffix.lower() == ".json" or path.is_file():
        return load_json_from_file(path)[1]

    module_name, _, attribute = text.partition(":")
    if not module_name or not attribute:
        raise ContentLoaderError(
            f"Schema must be a JSON file or a 'module:attribute' reference: {text}"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise ContentLoaderError(f"Cannot import schema module '{module_name}': {e}") from e

    for part in attribute.split("."):
        if not hasattr(target, part):
            raise ContentLoaderError(f"Module '{module_name}' has no attribute '{attribute}'")
        target = getattr(target, part)

    if callable(target) and not hasattr(target, "items"):
        target = target()

    logger.info("Loaded schema from %s", text)
    return target
