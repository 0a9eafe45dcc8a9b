# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pydantic response models for holodex-client.

Every optional field defaults to None so that a field the API omitted is
distinguishable from one it sent as an empty string, zero or empty list.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from holodex_client.core.constants import ChannelType, Status, VideoType
from holodex_client.utils.time_fmt import parse_timestamp


def _count_to_str(value: object) -> object:
    # counts arrive as "1234", 1234 or 1234.0 depending on the field
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]
Count = Annotated[str, BeforeValidator(_count_to_str)]


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Channel(_Entity):
    id: str
    name: str | None = None
    english_name: str | None = None
    type: ChannelType | None = None
    org: str | None = None
    suborg: str | None = None
    group: str | None = None
    photo: str | None = None
    banner: str | None = None
    thumbnail: str | None = None
    twitter: str | None = None
    twitch: str | None = None
    description: str | None = None
    lang: str | None = None
    yt_uploads_id: str | None = None
    subscriber_count: Count | None = None
    video_count: Count | None = None
    clip_count: Count | None = None
    view_count: Count | None = None
    published_at: Timestamp | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    crawled_at: Timestamp | None = None
    comments_crawled_at: Timestamp | None = None
    inactive: bool | None = None
    top_topics: list[str] | None = None
    name_history: list[str] | None = Field(default=None, alias="yt_name_history")
    handles: list[str] | None = Field(default=None, alias="yt_handle")


class Comment(_Entity):
    comment_key: str
    video_id: str | None = None
    message: str | None = None


class Song(_Entity):
    id: str | None = None
    name: str | None = None
    original_artist: str | None = None
    art: str | None = None
    start: int | None = None
    end: int | None = None
    itunes_id: int | None = Field(default=None, alias="itunesid")


class CreditEntry(_Entity):
    name: str | None = None
    link: str | None = None
    user: str | None = None


class Credits(_Entity):
    """Attribution for placeholder entries (editor, bot or data source)."""

    editor: CreditEntry | None = None
    bot: CreditEntry | None = None
    datasource: CreditEntry | None = None


class Video(_Entity):
    """A stream, clip or placeholder.

    Related lists (clips, sources, refers, simulcasts) hold the same shape
    recursively, populated only with what the API returns for related items.
    """

    id: str
    title: str | None = None
    language: str | None = Field(default=None, alias="lang")
    type: VideoType | None = None
    topic_id: str | None = None
    status: Status | None = None
    duration: int | None = None
    published_at: Timestamp | None = None
    available_at: Timestamp | None = None
    start_scheduled: Timestamp | None = None
    start_actual: Timestamp | None = None
    end_actual: Timestamp | None = None
    live_viewers: int | None = None
    live_tl_count: dict[str, int] | None = None
    recent_live_tls: list[str] | None = None
    description: str | None = None
    song_count: int | None = Field(default=None, alias="songcount")
    channel_id: str | None = None
    channel: Channel | None = None
    clips: list[Video] | None = None
    sources: list[Video] | None = None
    refers: list[Video] | None = None
    simulcasts: list[Video] | None = None
    mentions: list[Channel] | None = None
    songs: list[Song] | None = None
    comments: list[Comment] | None = None
    jp_name: str | None = None
    link: str | None = None
    thumbnail: str | None = None
    placeholder_type: str | None = Field(default=None, alias="placeholderType")
    certainty: str | None = None
    credits: Credits | None = None

    @property
    def is_clip(self) -> bool:
        return self.type is VideoType.CLIP

    @property
    def is_placeholder(self) -> bool:
        return self.type is VideoType.PLACEHOLDER
