"""Pydantic base schema utilities for Omni gateway models.

Provides a common `BaseSchema` that fixes the extra-field policy and naming
behaviour for all DTOs and domain models under `forge_omni`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all Pydantic models in forge_omni.

    - Ignores unknown fields so newer gateway releases can add keys
    - Enables populate_by_name so aliased fields accept their Python name too
    - Keeps snake_case names on the wire (the Omni API is snake_case)
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
