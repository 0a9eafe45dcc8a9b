"""HolodexClient: validate, encode, send and decode one API call."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from holodex_client.core.constants import RelationKind
from holodex_client.core.endpoints import (
    CHANNEL,
    CHANNEL_VIDEOS,
    CHANNELS,
    LIVE,
    SEARCH_COMMENTS,
    SEARCH_VIDEOS,
    USERS_LIVE,
    VIDEO,
    VIDEOS,
    ENDPOINTS,
    EndpointDescriptor,
)
from holodex_client.core.errors import MalformedResponse, TransportFailure
from holodex_client.core.filters import FilterSet
from holodex_client.core.logging import log_event
from holodex_client.core.models import Channel, Video
from holodex_client.core.options import ClientOptions
from holodex_client.services.encoder import encode_request
from holodex_client.services.mapper import decode
from holodex_client.services.transport import HttpTransport, Transport
from holodex_client.services.validation import validate


def _merge(filters: FilterSet | None, overrides: dict[str, Any]) -> FilterSet:
    if filters is None:
        return FilterSet(**overrides)
    if not overrides:
        return filters
    return FilterSet(**{**filters.model_dump(exclude_none=True), **overrides})


class HolodexClient:
    """Typed client for the Holodex API.

    Every call is a single request/response pair: filters are validated
    before anything is sent, and any failure is raised to the caller.

    Args:
        options: Client settings. Built from env/YAML when not provided.
        transport: Alternative transport; defaults to HttpTransport.
        **overrides: ClientOptions fields (e.g. ``api_key``) taking
            precedence over ``options``.
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        *,
        transport: Transport | None = None,
        **overrides: Any,
    ) -> None:
        if overrides:
            base = options.model_dump() if options is not None else {}
            options = ClientOptions(**{**base, **overrides})
        elif options is None:
            options = ClientOptions()
        self.options = options
        self._transport = transport if transport is not None else HttpTransport(options)

    def __repr__(self) -> str:
        return f"<HolodexClient base_url={self.options.base_url!r}>"

    def __enter__(self) -> HolodexClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def request(
        self,
        endpoint: EndpointDescriptor | str,
        filters: FilterSet | None = None,
        **kwargs: Any,
    ) -> Any:
        """Run one call against ``endpoint`` (a descriptor or its name).

        Raises:
            ValueError: no endpoint has that name.
            FilterError: the filters were rejected; nothing was sent.
            TransportFailure: the HTTP exchange failed.
            MalformedResponse: the body did not match the expected shape.
        """
        if isinstance(endpoint, str):
            if endpoint not in ENDPOINTS:
                raise ValueError(f"Unknown endpoint: {endpoint!r}")
            endpoint = ENDPOINTS[endpoint]
        filters = _merge(filters, kwargs)
        validate(endpoint, filters)
        prepared = encode_request(endpoint, filters)
        log_event(
            logging.DEBUG,
            f"{prepared.method} {prepared.target}",
            endpoint=endpoint.name,
            event="request",
            target=prepared.target,
        )

        try:
            response = self._transport.send(prepared)
        except TransportFailure as exc:
            log_event(
                logging.WARNING,
                f"Request to {endpoint.name} failed",
                endpoint=endpoint.name,
                event="transport_failure",
                target=prepared.target,
                status=exc.status_code,
                error=str(exc),
            )
            raise

        try:
            result = decode(response.content, endpoint.model, many=endpoint.many)
        except MalformedResponse as exc:
            log_event(
                logging.WARNING,
                f"Malformed response from {endpoint.name}",
                endpoint=endpoint.name,
                event="malformed_response",
                target=prepared.target,
                status=response.status_code,
                error=str(exc),
            )
            raise

        log_event(
            logging.DEBUG,
            f"Decoded {len(result) if endpoint.many else 1} item(s) from {endpoint.name}",
            endpoint=endpoint.name,
            event="response",
            target=prepared.target,
            status=response.status_code,
        )
        return result

    # --- Endpoints ---

    def live(self, filters: FilterSet | None = None, **kwargs: Any) -> list[Video]:
        """Live and upcoming videos (``channel_id=`` narrows to one channel)."""
        return self.request(LIVE, filters, **kwargs)

    def videos(self, filters: FilterSet | None = None, **kwargs: Any) -> list[Video]:
        return self.request(VIDEOS, filters, **kwargs)

    def channel(self, channel_id: str) -> Channel:
        return self.request(CHANNEL, channel_id=channel_id)

    def channel_videos(
        self,
        channel_id: str,
        relation: RelationKind | str,
        filters: FilterSet | None = None,
        **kwargs: Any,
    ) -> list[Video]:
        """Videos, clips or collabs related to a channel."""
        return self.request(
            CHANNEL_VIDEOS, filters, channel_id=channel_id, relation=relation, **kwargs
        )

    def users_live(self, channel_ids: Iterable[str] | str) -> list[Video]:
        """Live and upcoming videos for a set of channels (or a single ID)."""
        if isinstance(channel_ids, str):
            channel_ids = (channel_ids,)
        return self.request(USERS_LIVE, channel_ids=tuple(channel_ids))

    def video(
        self,
        video_id: str,
        filters: FilterSet | None = None,
        **kwargs: Any,
    ) -> Video:
        return self.request(VIDEO, filters, video_id=video_id, **kwargs)

    def channels(self, filters: FilterSet | None = None, **kwargs: Any) -> list[Channel]:
        return self.request(CHANNELS, filters, **kwargs)

    def search_videos(self, filters: FilterSet | None = None, **kwargs: Any) -> list[Video]:
        return self.request(SEARCH_VIDEOS, filters, **kwargs)

    def search_comments(
        self,
        comment: str,
        filters: FilterSet | None = None,
        **kwargs: Any,
    ) -> list[Video]:
        """Videos whose comments match ``comment``; matches are in ``Video.comments``."""
        return self.request(SEARCH_COMMENTS, filters, comment=comment, **kwargs)
