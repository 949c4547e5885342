"""forge-omni.

Client library for the Omni omnichannel messaging gateway. It sends text
messages through named channel instances (WhatsApp, Discord, Telegram
bridges) and lists the configured instances with their health.

Core modules
------------

- ``forge_omni.client``: ``OmniClient``, the async gateway client.
- ``forge_omni.errors``: ``OmniTransportError``, ``OmniHttpError`` and
  ``OmniDecodeError``, all rooted at ``OmniClientError``.
- ``forge_omni.models``: request/response models and wire DTOs.
- ``forge_omni.config``: ``OmniConfig`` records and env-driven ``Settings``.
- ``forge_omni.service``: ``OmniService``, config-driven notifications.

Typical workflow
----------------

.. code-block:: python

    async with OmniClient("http://localhost:8882", api_key="...") as client:
        instances = await client.list_instances()
        await client.send_text(
            instances[0].instance_name,
            SendTextRequest(phone_number="1234567890", text="Build finished"),
        )
"""

from .client import OmniClient
from .config import ForgeProjectSettings, OmniConfig, RecipientType, Settings
from .errors import (
    OmniClientError,
    OmniDecodeError,
    OmniErrorKind,
    OmniHttpError,
    OmniTransportError,
)
from .models import ChannelType, InstanceInfo, SendTextRequest, SendTextResponse
from .service import OmniService

__all__ = [
    "OmniClient",
    "OmniService",
    "ChannelType",
    "InstanceInfo",
    "SendTextRequest",
    "SendTextResponse",
    "ForgeProjectSettings",
    "OmniConfig",
    "RecipientType",
    "Settings",
    "OmniClientError",
    "OmniDecodeError",
    "OmniErrorKind",
    "OmniHttpError",
    "OmniTransportError",
]
