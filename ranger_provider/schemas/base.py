"""Pydantic base schema utilities for the Ranger wire models.

Provides `WireSchema`, the common base for every model exchanged with the
Ranger REST API, and `ConfigSchema`, the base for the host-facing
configuration models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _to_camel(s: str) -> str:
    """Convert snake_case to camelCase for JSON aliasing."""
    parts = s.split("_")
    return parts[0] + "".join(p.capitalize() or "_" for p in parts[1:])


class WireSchema(BaseModel):
    """Shared base for all Ranger wire models.

    - Ignores extra fields (Ranger returns many attributes this provider does not manage)
    - Enables populate_by_name for using either snake_case or camelCase
    - Uses a snake->camel alias generator for JSON interop
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        alias_generator=_to_camel,  # snake_case -> camelCase aliases
    )

    def to_payload(self) -> dict:
        """Serialize to a JSON body, omitting unset (None) fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ConfigSchema(BaseModel):
    """Shared base for configuration/state models handed over by the host.

    Attribute names are the declared schema names (snake_case) and unknown
    attributes are rejected.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )
