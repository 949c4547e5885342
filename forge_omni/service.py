"""Config-driven Omni notification service.

`OmniService` turns an `OmniConfig` into send-text calls: it resolves which
request field carries the recipient, skips sending when the configuration is
disabled or incomplete, and formats task-completion messages. Gateway errors
raised by `OmniClient` propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .client import OmniClient
from .config import OmniConfig, RecipientType
from .models import InstanceInfo, SendTextRequest, SendTextResponse

logger = logging.getLogger(__name__)


class OmniService:
    def __init__(self, config: OmniConfig, client: Optional[OmniClient] = None) -> None:
        self.config = config
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> OmniClient:
        """Client for the configured host, created on first use."""
        if self._client is None:
            self._client = OmniClient.from_config(self.config)
        return self._client

    def build_request(self, text: str) -> SendTextRequest:
        """Place the configured recipient in the field named by `recipient_type`.

        A missing `recipient_type` is treated as a phone number.
        """
        if self.config.recipient_type == RecipientType.USER_ID:
            return SendTextRequest(user_id=self.config.recipient, text=text)
        return SendTextRequest(phone_number=self.config.recipient, text=text)

    async def send_notification(self, text: str) -> Optional[SendTextResponse]:
        """Send `text` to the configured recipient.

        Returns:
            The gateway response, or None when the configuration is disabled or
            missing host, instance or recipient (no request is made).
        """
        if not self.config.is_ready:
            logger.debug("OmniService.send_notification: skipped, config disabled or incomplete")
            return None
        assert self.config.instance is not None
        response = await self.client.send_text(self.config.instance, self.build_request(text))
        logger.info(
            "Omni notification via %s: success=%s status=%s",
            self.config.instance,
            response.success,
            response.status,
        )
        return response

    async def list_instances(self) -> List[InstanceInfo]:
        return await self.client.list_instances()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()

    @staticmethod
    def format_task_notification(title: str, status: str, summary: Optional[str] = None) -> str:
        """Build the message body sent when a task finishes.

        >>> OmniService.format_task_notification("Fix login", "completed")
        'Task "Fix login" completed'
        """
        message = f'Task "{title}" {status}'
        if summary:
            message = f"{message}\n\n{summary.strip()}"
        return message
