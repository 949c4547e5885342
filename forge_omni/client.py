"""Omni gateway API client

Overview
--------
Thin async HTTP client for the Omni omnichannel messaging gateway. It sends
text messages through a named channel instance (WhatsApp, Discord, Telegram
bridges, ...) and lists the instances configured in the gateway together with
their health.

The client holds only its base URL, API key and transport, so one instance
can be shared by concurrent tasks. Every call is a single request/response
exchange: nothing is retried, queued or cached here.

Authentication
--------------
When an API key is configured it is sent as ``X-API-Key`` on every request.

Errors
------
Failures are raised as subclasses of ``OmniClientError``:

- ``OmniTransportError`` when no usable HTTP response was obtained (network,
  redirect loop, undecodable content encoding, malformed URL);
- ``OmniHttpError`` for non-2xx statuses, carrying the status and raw body;
- ``OmniDecodeError`` when a 2xx body does not match the expected shape.

A failed call leaves the client usable for later calls.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .config import OmniConfig
from .errors import OmniDecodeError, OmniHttpError, OmniTransportError
from .models import InstanceInfo, InstancesListPayloadDTO, SendTextRequest, SendTextResponse

API_KEY_HEADER = "X-API-Key"

_M = TypeVar("_M", bound=BaseModel)


class OmniClient:
    """Async HTTP client for the Omni gateway REST API.

    Responsibilities
    ----------------
    - send_text
    - list_instances

    Note: construction performs no network I/O.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create an Omni client.

        Args:
            base_url: Base URL of the gateway (e.g. ``http://localhost:8882``).
                Used as given; paths are appended directly.
            api_key: Value for the ``X-API-Key`` header. Omitted when ``None``.
            timeout: HTTP timeout for the internally created transport.
            client: Optional preconfigured ``httpx.AsyncClient``. The caller keeps
                ownership of it and ``aclose`` will not close it.

        Raises:
            ValueError: If ``base_url`` is empty.
        """
        if not base_url or not base_url.strip():
            raise ValueError("OmniClient requires a non-empty base_url")
        self.base_url = base_url
        self.api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: OmniConfig, **kwargs) -> "OmniClient":
        """Build a client from an `OmniConfig` record.

        Raises:
            ValueError: If ``config.host`` is not set.
        """
        if not config.host:
            raise ValueError("OmniConfig.host is required to build an OmniClient")
        return cls(config.host, config.api_key, **kwargs)

    async def __aenter__(self) -> "OmniClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        """Build JSON headers and include ``X-API-Key`` when configured."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key is not None:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    async def send_text(self, instance_name: str, request: SendTextRequest) -> SendTextResponse:
        """Send a text message through a gateway instance.

        API
        ---
        - Method/Path: ``POST /api/v1/instance/{instance_name}/send-text``
        - Body: ``{"phone_number"?, "user_id"?, "text"}``; absent recipients are omitted.

        Returns:
            ``SendTextResponse`` exactly as the gateway reported it, even when
            its ``success`` flag is false.

        Raises:
            OmniTransportError: No HTTP response was received.
            OmniHttpError: The gateway answered with a non-2xx status.
            OmniDecodeError: The 2xx body is not a valid send-text response.
        """
        url = f"{self.base_url}/api/v1/instance/{quote(instance_name, safe='')}/send-text"
        self._logger.debug("OmniClient.send_text: POST %s", url)
        r = await self._request("POST", url, json=request.to_payload())
        response = self._decode(r, SendTextResponse)
        self._logger.debug(
            "OmniClient.send_text: success=%s status=%s message_id=%s",
            response.success,
            response.status,
            response.message_id,
        )
        return response

    async def list_instances(self) -> List[InstanceInfo]:
        """List the channel instances configured in the gateway.

        API
        ---
        - Method/Path: ``GET /api/v1/instances/``

        Returns:
            Instances in gateway order; the ``channels`` envelope is discarded.

        Raises:
            OmniTransportError: No HTTP response was received.
            OmniHttpError: The gateway answered with a non-2xx status.
            OmniDecodeError: The 2xx body is not a valid instances envelope.
        """
        url = f"{self.base_url}/api/v1/instances/"
        self._logger.debug("OmniClient.list_instances: GET %s", url)
        r = await self._request("GET", url)
        instances = self._decode(r, InstancesListPayloadDTO).to_instances()
        self._logger.debug("OmniClient.list_instances: got %d instances", len(instances))
        return instances

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            r = await self._client.request(method, url, headers=self._headers(), **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise OmniTransportError(f"{type(e).__name__}: {e}") from e
        if not r.is_success:
            raise OmniHttpError(r.status_code, r.text)
        return r

    @staticmethod
    def _decode(r: httpx.Response, model: Type[_M]) -> _M:
        try:
            data = r.json()
        except ValueError as e:
            raise OmniDecodeError(f"response body is not valid JSON ({e})") from e
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise OmniDecodeError(f"unexpected {model.__name__} shape: {e}") from e
