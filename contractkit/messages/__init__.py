# contractkit/messages/__init__.py
"""
Message-template catalog for contract violations.

    from contractkit.messages import get_message_catalog

    catalog = get_message_catalog()
    catalog.render("argument_null_element", "items")
"""

from contractkit.messages.loader import (
    DEFAULTS_PATH,
    ENV_VAR,
    MessageCatalogError,
    MessageCatalogNotFoundError,
    MessageCatalogParseError,
    MessageCatalogValidationError,
    get_message_catalog,
    load_message_catalog,
    load_yaml,
    reset_message_catalog,
)
from contractkit.messages.schema import MessageCatalog

__all__ = [
    "DEFAULTS_PATH",
    "ENV_VAR",
    "MessageCatalog",
    "MessageCatalogError",
    "MessageCatalogNotFoundError",
    "MessageCatalogParseError",
    "MessageCatalogValidationError",
    "get_message_catalog",
    "load_message_catalog",
    "load_yaml",
    "reset_message_catalog",
]
