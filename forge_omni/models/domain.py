"""Omni domain models returned to callers.

Defines `InstanceInfo`, `SendTextResponse` and the `ChannelType` tag set used
by `OmniClient` and `OmniService`. These are value objects: created per call,
never cached, and frozen once decoded.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field

from forge_omni.schemas.base import BaseSchema


class ChannelType(str, Enum):
    """Messaging platforms the Omni gateway is known to bridge."""
    WHATSAPP = "whatsapp"
    DISCORD = "discord"
    TELEGRAM = "telegram"


class InstanceInfo(BaseSchema):
    """A channel instance configured in the Omni gateway."""

    model_config = ConfigDict(frozen=True)

    instance_name: str = Field(
        ...,
        description=(
            "Unique identifier of the instance. Used as the path segment in "
            "/api/v1/instance/{instance_name}/send-text."
        ),
        examples=["whatsapp-1", "discord-bot"],
    )
    channel_type: str = Field(
        ...,
        description="Platform tag of the instance, e.g. 'whatsapp', 'discord' or 'telegram'.",
        examples=["whatsapp"],
    )
    display_name: str = Field(
        ...,
        description="Human-readable name shown in the gateway UI.",
        examples=["WhatsApp - Main"],
    )
    status: str = Field(
        ...,
        description="Gateway-defined connection status label.",
        examples=["connected"],
    )
    is_healthy: bool = Field(
        ...,
        description="Whether the gateway currently considers the instance healthy.",
    )

    @property
    def known_channel_type(self) -> Optional[ChannelType]:
        """Return `channel_type` as a `ChannelType`, or None for tags this library does not know."""
        try:
            return ChannelType(self.channel_type)
        except ValueError:
            return None


class SendTextResponse(BaseSchema):
    """Gateway reply to a send-text call.

    Returned as-is by `OmniClient.send_text`, including replies where
    `success` is false; only transport and HTTP status failures raise.
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Gateway's own success flag for the send attempt.")
    message_id: Optional[str] = Field(
        default=None,
        description="Gateway message identifier, present on success.",
        examples=["msg_12345"],
    )
    status: str = Field(
        ...,
        description="Gateway-defined lifecycle label such as 'sent' or 'delivered'.",
        examples=["sent"],
    )
    error: Optional[str] = Field(
        default=None,
        description="Failure description reported by the gateway, present on failure.",
    )
