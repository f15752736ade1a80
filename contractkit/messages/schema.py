# contractkit/messages/schema.py
"""
Schema for the message-template catalog.

This is the single source of truth for which message keys exist. The
packaged defaults.yaml must provide every field; override files may provide
any subset, since they are merged over the defaults before validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from contractkit.formatting import safe_format


class MessageCatalog(BaseModel):
    """
    Key -> template lookup used when rendering contract violations.

    Templates use positional placeholders ({0}, {1}, ...) and are rendered
    with safe_format(), so a malformed override can never make a check fail
    with anything other than the intended error.

    Examples:
        >>> catalog = MessageCatalog.model_validate(data)
        >>> catalog.render("argument_empty_sequence", "items")
        "'items' must contain at least one element."
    """

    argument_null: str = Field(..., description="Required value was None")
    argument_empty_string: str = Field(..., description="{0}: parameter name")
    argument_whitespace: str = Field(..., description="Text is only whitespace")
    argument_empty_sequence: str = Field(..., description="{0}: parameter name")
    argument_null_element: str = Field(..., description="{0}: parameter name")
    argument_empty_uuid: str = Field(..., description="{0}: parameter name")
    argument_out_of_range: str = Field(..., description="Range check failed")
    internal_error: str = Field(..., description="Default internal-invariant message")
    unreachable: str = Field(..., description="Code expected to be unreachable ran")
    component_missing: str = Field(..., description="{0}: component name")
    unexpected_type: str = Field(..., description="{0}: expected type, {1}: actual type")

    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self, key: str, *args: Any) -> str:
        """Render the template stored under key. Unknown keys render as a placeholder."""
        return safe_format(getattr(self, key, None), *args)


__all__ = ["MessageCatalog"]
