"""Omni API DTO models

Pydantic models that define the request/response wire contracts of the Omni
gateway. Keeping wire shapes here isolates the client from envelope changes:
callers only ever see the domain models.

Guidelines:
- Optional request fields are omitted from the JSON body, never sent as null.
- Envelopes are unwrapped by pure helper methods, not inside the client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from forge_omni.schemas.base import BaseSchema

from .domain import InstanceInfo


class SendTextRequest(BaseSchema):
    """Body of ``POST /api/v1/instance/{instance_name}/send-text``.

    At least one of `phone_number` / `user_id` is expected by the gateway, but
    it is not enforced here; the gateway answers with an HTTP error instead.

    Examples:
        Absent recipients are dropped from the payload.

        >>> SendTextRequest(phone_number="5551234567", text="Formatted message").to_payload()
        {'phone_number': '5551234567', 'text': 'Formatted message'}
    """
    phone_number: Optional[str] = Field(
        default=None,
        description="Recipient phone number (channel-specific format).",
        examples=["1234567890"],
    )
    user_id: Optional[str] = Field(
        default=None,
        description="Recipient user identifier on the target channel.",
        examples=["user_abc123"],
    )
    text: str = Field(..., description="Message body.", examples=["Test notification message"])

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body, excluding recipient fields that are None."""
        return self.model_dump(exclude_none=True)


class InstancesListPayloadDTO(BaseSchema):
    """Envelope returned by ``GET /api/v1/instances/``.

    Examples:
        {
            'channels': [
                {
                    'instance_name': 'whatsapp-1',
                    'channel_type': 'whatsapp',
                    'display_name': 'WhatsApp - Main',
                    'status': 'connected',
                    'is_healthy': true
                }
            ]
        }
    """
    channels: List[InstanceInfo] = Field(
        ..., description="Instances in the order the gateway reported them."
    )

    def to_instances(self) -> List[InstanceInfo]:
        """Unwrap the envelope, preserving gateway order and duplicates."""
        return list(self.channels)
