"""Omni API models.

Re-exports domain models (`InstanceInfo`, `SendTextResponse`, `ChannelType`)
and DTOs (`SendTextRequest`, `InstancesListPayloadDTO`) consumed by
`OmniClient` and `OmniService`.
"""

from forge_omni.models.domain import ChannelType, InstanceInfo, SendTextResponse
from forge_omni.models.dto import InstancesListPayloadDTO, SendTextRequest

__all__ = [
    # DTO models
    "InstancesListPayloadDTO",
    "SendTextRequest",
    # Domain models
    "ChannelType",
    "InstanceInfo",
    "SendTextResponse",
]
