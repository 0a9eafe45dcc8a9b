"""HTTP transport (httpx) for prepared requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import SecretStr

from holodex_client.core.errors import ConfigurationError, TransportFailure
from holodex_client.core.options import ClientOptions
from holodex_client.services.encoder import PreparedRequest

API_KEY_HEADER = "X-APIKEY"

_BODY_EXCERPT = 200


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    content: bytes


class Transport(Protocol):
    def send(self, request: PreparedRequest) -> TransportResponse: ...


def request_headers(api_key: SecretStr, *, has_body: bool) -> dict[str, str]:
    """Fixed headers sent with every request."""
    headers = {
        "Accept": "application/json",
        API_KEY_HEADER: api_key.get_secret_value(),
    }
    if has_body:
        headers["Content-Type"] = "application/json"
    return headers


class HttpTransport:
    """Sends prepared requests through a shared ``httpx.Client``.

    Args:
        options: Client settings; ``api_key`` is required.
        client: Optional preconfigured httpx client (its ``base_url`` is used
            as-is). Owned and closed by this transport.
    """

    def __init__(self, options: ClientOptions, client: httpx.Client | None = None) -> None:
        if options.api_key is None or not options.api_key.get_secret_value():
            raise ConfigurationError(
                "A Holodex API key is required. Set HOLODEX_API_KEY or pass api_key."
            )
        self._api_key = options.api_key
        self._client = client or httpx.Client(
            base_url=options.base_url,
            timeout=options.timeout,
        )

    def send(self, request: PreparedRequest) -> TransportResponse:
        """Execute ``request`` and return status and body.

        Raises:
            TransportFailure: network error or non-2xx status.
        """
        headers = request_headers(self._api_key, has_body=request.body is not None)
        try:
            response = self._client.request(
                request.method,
                request.target,
                content=request.content if request.body is not None else None,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise TransportFailure(
                f"{request.endpoint}: {type(exc).__name__}: {exc}",
                endpoint=request.endpoint,
                target=request.target,
            ) from exc

        if not response.is_success:
            excerpt = response.text[:_BODY_EXCERPT]
            raise TransportFailure(
                f"{request.endpoint}: HTTP {response.status_code} for {request.target}: {excerpt}",
                endpoint=request.endpoint,
                target=request.target,
                status_code=response.status_code,
            )

        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
