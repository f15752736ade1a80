# contractkit/messages/loader.py
"""
Layered loading of the message catalog.

Merge order:
    1. Package defaults (contractkit/messages/defaults.yaml) - always loaded
    2. Override file - an explicit path, or the CONTRACTKIT_MESSAGES
       environment variable. Its keys replace the defaults.

Usage:
    from contractkit.messages import get_message_catalog

    catalog = get_message_catalog()
    text = catalog.render("argument_empty_string", "name")

get_message_catalog() is what the checkers use. It never raises: a broken
override file is logged and ignored so it cannot mask the violation being
reported. Call load_message_catalog() directly to see the error.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from contractkit.logging.logger import get_logger
from contractkit.logging.tags import CONFIG
from contractkit.messages.schema import MessageCatalog

logger = get_logger(__name__)

ENV_VAR = "CONTRACTKIT_MESSAGES"
DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

# Templates live under this key; a bare mapping is accepted as well.
ROOT_KEY = "messages"


# =============================================================================
# Errors
# =============================================================================


class MessageCatalogError(Exception):
    """Base error for message catalog issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class MessageCatalogNotFoundError(MessageCatalogError):
    """Raised when a catalog file doesn't exist."""

    pass


class MessageCatalogParseError(MessageCatalogError):
    """Raised when YAML parsing fails or the file has the wrong shape."""

    pass


class MessageCatalogValidationError(MessageCatalogError):
    """Raised when the merged templates don't match MessageCatalog."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a catalog YAML file and return its template mapping.

    Raises:
        MessageCatalogNotFoundError: If file doesn't exist
        MessageCatalogParseError: If YAML is invalid or not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise MessageCatalogNotFoundError("Message catalog not found", path=p)

    if p.is_dir():
        raise MessageCatalogError("Message catalog path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise MessageCatalogParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except UnicodeDecodeError as e:
        raise MessageCatalogParseError(f"Message catalog is not valid UTF-8: {e}", path=p) from e
    except OSError as e:
        raise MessageCatalogParseError(f"Failed to read message catalog: {e}", path=p) from e

    if not isinstance(raw, dict):
        raise MessageCatalogParseError("Catalog root must be a mapping (dict)", path=p)

    data = raw.get(ROOT_KEY, raw)
    if not isinstance(data, dict):
        raise MessageCatalogParseError(f"'{ROOT_KEY}' must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded message templates from {p}")
    return data


def _resolve_override_path(path: Optional[Union[str, Path]], use_env: bool) -> Optional[Path]:
    if path is not None:
        return Path(path)
    if use_env:
        env_path = os.environ.get(ENV_VAR)
        if env_path:
            return Path(env_path)
    return None


def load_message_catalog(
    path: Optional[Union[str, Path]] = None,
    *,
    use_env: bool = True,
) -> MessageCatalog:
    """
    Load the message catalog: package defaults plus an optional override.

    Args:
        path: Override file. If None, CONTRACTKIT_MESSAGES is consulted
              (unless use_env is False).
        use_env: Whether to read the override path from the environment.

    Returns:
        Validated, immutable MessageCatalog

    Raises:
        MessageCatalogNotFoundError: If the override file doesn't exist
        MessageCatalogParseError: If the override file is not valid YAML
        MessageCatalogValidationError: If the merged templates are invalid
    """
    data = load_yaml(DEFAULTS_PATH)
    source = DEFAULTS_PATH

    override_path = _resolve_override_path(path, use_env)
    if override_path is not None:
        data = {**data, **load_yaml(override_path)}
        source = override_path

    try:
        return MessageCatalog.model_validate(data)
    except Exception as e:
        raise MessageCatalogValidationError(
            f"Message catalog validation failed: {e}",
            path=source,
        ) from e


@lru_cache(maxsize=1)
def get_message_catalog() -> MessageCatalog:
    """
    Return the process-wide catalog, loading it on first use.

    Falls back to the package defaults (with a warning) when the override
    file cannot be used.
    """
    try:
        return load_message_catalog()
    except MessageCatalogError as e:
        logger.warning(f"{CONFIG} Ignoring message overrides, using defaults: {e}")
        return load_message_catalog(use_env=False)


def reset_message_catalog() -> None:
    """Drop the cached catalog so the next lookup reloads it."""
    get_message_catalog.cache_clear()


__all__ = [
    "ENV_VAR",
    "DEFAULTS_PATH",
    "MessageCatalogError",
    "MessageCatalogNotFoundError",
    "MessageCatalogParseError",
    "MessageCatalogValidationError",
    "load_yaml",
    "load_message_catalog",
    "get_message_catalog",
    "reset_message_catalog",
]
