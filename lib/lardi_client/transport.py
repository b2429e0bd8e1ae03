from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, DecodeError, SerializationError, TransportError

log = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": "lardi-client/0.1.0",
            "Authorization": cfg.api_key,
            "Content-Type": "application/json",
        }
        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/"),
            timeout=cfg.timeout_s,
            headers=headers,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(
            self,
            method: str,
            path: str,
            *,
            json_body: Any | None = None,
            timeout: float | None = None,
    ) -> Any:
        content: bytes | None = None
        if json_body is not None:
            try:
                content = json.dumps(json_body, ensure_ascii=False, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise SerializationError(f"failed to marshal request body: {e}") from e

        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            r = self._client.request(
                method,
                path,
                content=content,
                params={"language": self._cfg.language},
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"request timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"request failed: {e}") from e

        log.debug("%s %s -> %s", method, path, r.status_code)

        if r.status_code < 200 or r.status_code >= 300:
            try:
                data = r.json()
            except ValueError as e:
                raise DecodeError(f"failed to decode error response: {e}") from e
            raise ApiError.from_payload(data, r.status_code)

        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode response: {e}") from e
