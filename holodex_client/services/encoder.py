# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Render a filter set into a request target (query string or JSON body)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from urllib.parse import quote, urlencode

from holodex_client.core.endpoints import EndpointDescriptor
from holodex_client.core.errors import MissingRequiredField
from holodex_client.core.filters import FilterSet, is_absent
from holodex_client.utils.time_fmt import format_timestamp

# Characters left literal in query values: list delimiter and timestamp colons.
_QUERY_SAFE = ",:"


@dataclass(frozen=True)
class PreparedRequest:
    """A fully rendered request, ready for the transport."""

    endpoint: str
    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    body: dict | None = None

    @property
    def query_string(self) -> str:
        return urlencode(self.params, safe=_QUERY_SAFE, quote_via=quote)

    @property
    def target(self) -> str:
        qs = self.query_string
        return f"{self.path}?{qs}" if qs else self.path

    @property
    def content(self) -> bytes:
        """Canonical JSON encoding of the body (empty for GET requests)."""
        if self.body is None:
            return b""
        return json.dumps(self.body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def encode_request(endpoint: EndpointDescriptor, filters: FilterSet) -> PreparedRequest:
    """Render ``filters`` for ``endpoint``.

    Path-segment fields are spliced into the path and never repeated as
    parameters. Parameters are emitted in the endpoint's declared order;
    absent values (None, empty string, empty list) are skipped. POST
    endpoints get a JSON body with the endpoint defaults filled in.

    The filter set is assumed to have passed validation already; fields the
    endpoint does not accept are not rendered.
    """
    path = _render_path(endpoint, filters)

    if endpoint.has_body:
        return PreparedRequest(
            endpoint=endpoint.name,
            method=endpoint.method,
            path=path,
            body=_render_body(endpoint, filters),
        )

    params = tuple(
        (wire, _render_query_value(getattr(filters, field)))
        for field, wire in endpoint.params
        if filters.has(field)
    )
    return PreparedRequest(
        endpoint=endpoint.name,
        method=endpoint.method,
        path=path,
        params=params,
    )


def _render_path(endpoint: EndpointDescriptor, filters: FilterSet) -> str:
    segments = {}
    for field in endpoint.path_fields:
        if not filters.has(field):
            raise MissingRequiredField(endpoint.name, field)
        segments[field] = quote(_render_scalar(getattr(filters, field)), safe="")
    return endpoint.path.format(**segments)


def _render_body(endpoint: EndpointDescriptor, filters: FilterSet) -> dict:
    defaults = dict(endpoint.defaults)
    body: dict = {}
    for field, wire in endpoint.params:
        value = getattr(filters, field)
        if is_absent(value):
            if field not in defaults:
                continue
            value = defaults[field]
        if field == "comment":
            body[wire] = [value]
        elif isinstance(value, (tuple, list)):
            body[wire] = [_render_scalar(v) for v in value]
        elif isinstance(value, int) and not isinstance(value, bool):
            body[wire] = value
        else:
            body[wire] = _render_scalar(value)
    return body


def _render_query_value(value: object) -> str:
    if isinstance(value, (tuple, list)):
        return ",".join(_render_scalar(v) for v in value)
    return _render_scalar(value)


def _render_scalar(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)
