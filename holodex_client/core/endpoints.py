# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Endpoint catalog: paths, verbs, accepted and required filters."""

from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Literal

from pydantic import BaseModel

from holodex_client.core.constants import SearchSort
from holodex_client.core.models import Channel, Video

# Semantic filter name -> query parameter name. Order is the emission order.
QUERY_WIRE_NAMES: dict[str, str] = {
    "languages": "lang",
    "limit": "limit",
    "offset": "offset",
    "sort_order": "order",
    "organization": "org",
    "sort_by_field": "sort",
    "channel_type": "type",
    "channel_id": "channel_id",
    "video_id": "id",
    "extra_info": "include",
    "max_upcoming_hours": "max_upcoming_hours",
    "mentioned_channel_id": "mentioned_channel_id",
    "status": "status",
    "topic": "topic",
    "video_type": "type",
    "timestamp_comments": "c",
    "channel_ids": "channels",
    "from_time": "from",
    "to_time": "to",
}

# Semantic filter name -> JSON body key for the search endpoints.
BODY_WIRE_NAMES: dict[str, str] = {
    "search_sort": "sort",
    "languages": "lang",
    "video_types": "target",
    "conditions": "conditions",
    "comment": "comment",
    "topics": "topic",
    "channel_ids": "vch",
    "organizations": "org",
    "offset": "offset",
    "limit": "limit",
}

SEARCH_DEFAULTS: tuple[tuple[str, object], ...] = (
    ("search_sort", SearchSort.NEWEST),
    ("offset", 0),
    ("limit", 30),
)


@dataclass(frozen=True)
class EndpointDescriptor:
    """Fixed metadata for one API operation."""

    name: str
    method: Literal["GET", "POST"]
    path: str
    params: tuple[tuple[str, str], ...]
    model: type[BaseModel]
    many: bool = True
    required: tuple[str, ...] = ()
    defaults: tuple[tuple[str, object], ...] = ()

    @property
    def path_fields(self) -> tuple[str, ...]:
        return tuple(name for _, name, _, _ in Formatter().parse(self.path) if name)

    @property
    def accepted(self) -> frozenset[str]:
        return frozenset(self.path_fields) | {field for field, _ in self.params}

    @property
    def has_body(self) -> bool:
        return self.method == "POST"


def _query(*fields: str) -> tuple[tuple[str, str], ...]:
    return tuple((f, wire) for f, wire in QUERY_WIRE_NAMES.items() if f in fields)


def _body(*fields: str) -> tuple[tuple[str, str], ...]:
    return tuple((f, wire) for f, wire in BODY_WIRE_NAMES.items() if f in fields)


_VIDEO_LIST_FILTERS = (
    "languages",
    "limit",
    "offset",
    "sort_order",
    "organization",
    "sort_by_field",
    "channel_id",
    "video_id",
    "extra_info",
    "max_upcoming_hours",
    "mentioned_channel_id",
    "status",
    "topic",
    "video_type",
)

_SEARCH_FILTERS = (
    "search_sort",
    "languages",
    "video_types",
    "conditions",
    "topics",
    "channel_ids",
    "organizations",
    "offset",
    "limit",
)

LIVE = EndpointDescriptor(
    name="live",
    method="GET",
    path="live",
    params=_query(*_VIDEO_LIST_FILTERS, "from_time", "to_time"),
    model=Video,
)

VIDEOS = EndpointDescriptor(
    name="videos",
    method="GET",
    path="videos",
    params=_query(*_VIDEO_LIST_FILTERS, "from_time", "to_time"),
    model=Video,
)

CHANNEL = EndpointDescriptor(
    name="channel",
    method="GET",
    path="channels/{channel_id}",
    params=(),
    model=Channel,
    many=False,
    required=("channel_id",),
)

CHANNEL_VIDEOS = EndpointDescriptor(
    name="channel_videos",
    method="GET",
    path="channels/{channel_id}/{relation}",
    params=_query("languages", "limit", "offset", "extra_info"),
    model=Video,
    required=("channel_id", "relation"),
)

USERS_LIVE = EndpointDescriptor(
    name="users_live",
    method="GET",
    path="users/live",
    params=_query("channel_ids"),
    model=Video,
    required=("channel_ids",),
)

VIDEO = EndpointDescriptor(
    name="video",
    method="GET",
    path="videos/{video_id}",
    params=_query("timestamp_comments", "languages"),
    model=Video,
    many=False,
    required=("video_id",),
)

CHANNELS = EndpointDescriptor(
    name="channels",
    method="GET",
    path="channels",
    params=_query(
        "languages",
        "limit",
        "offset",
        "sort_order",
        "organization",
        "sort_by_field",
        "channel_type",
    ),
    model=Channel,
)

SEARCH_VIDEOS = EndpointDescriptor(
    name="search_videos",
    method="POST",
    path="search/videoSearch",
    params=_body(*_SEARCH_FILTERS),
    model=Video,
    defaults=SEARCH_DEFAULTS,
)

SEARCH_COMMENTS = EndpointDescriptor(
    name="search_comments",
    method="POST",
    path="search/commentSearch",
    params=_body(*_SEARCH_FILTERS, "comment"),
    model=Video,
    required=("comment",),
    defaults=SEARCH_DEFAULTS,
)

ENDPOINTS: dict[str, EndpointDescriptor] = {
    e.name: e
    for e in (
        LIVE,
        VIDEOS,
        CHANNEL,
        CHANNEL_VIDEOS,
        USERS_LIVE,
        VIDEO,
        CHANNELS,
        SEARCH_VIDEOS,
        SEARCH_COMMENTS,
    )
}
