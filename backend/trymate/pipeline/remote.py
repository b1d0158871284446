"""HTTP client for the generate endpoint.

One POST per call, no retries. The timeout bounds a hung endpoint; hitting
it is a transport failure like any other connection problem.
"""

from __future__ import annotations

import json

import httpx
import structlog

from trymate.config import settings
from trymate.models.contracts import GenerationRequest
from trymate.pipeline.errors import RemoteError, TransportError
from trymate.pipeline.normalizer import JsonValue

logger = structlog.get_logger()


class RemoteClient:
    def __init__(
        self,
        endpoint: str | None = None,
        *,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint or settings.generate_endpoint
        self.timeout = settings.request_timeout_seconds if timeout is None else timeout
        self._http_client = http_client

    async def send(self, request: GenerationRequest) -> JsonValue:
        """POST the request and return the parsed JSON body, or the raw text if it isn't JSON.

        Raises RemoteError for any non-2xx status (body kept verbatim) and
        TransportError when no response arrives.
        """
        if self._http_client is not None:
            return await self._post(self._http_client, request)
        async with httpx.AsyncClient() as client:
            return await self._post(client, request)

    async def _post(self, client: httpx.AsyncClient, request: GenerationRequest) -> JsonValue:
        payload = request.model_dump(by_alias=True, exclude_none=True)
        try:
            response = await client.post(self.endpoint, json=payload, timeout=self.timeout)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Timeout calling generate endpoint: {self.endpoint}") from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"Network error calling generate endpoint: {self.endpoint}: {type(exc).__name__}"
            ) from exc

        if not response.is_success:
            raise RemoteError(response.status_code, response.text)

        try:
            return json.loads(response.text)
        except json.JSONDecodeError:
            logger.info(
                "generate_response_not_json",
                endpoint=self.endpoint,
                size_bytes=len(response.content),
            )
            return response.text
