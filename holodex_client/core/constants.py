# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Closed enumerations used in filters and responses.

Every member's value is the canonical lowercase string sent on the wire.
"""

from __future__ import annotations

from enum import StrEnum


class Language(StrEnum):
    EN = "en"
    JA = "ja"
    ES = "es"
    ID = "id"
    ZH = "zh"
    KO = "ko"
    RU = "ru"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SearchSort(StrEnum):
    """Ordering accepted by the search endpoints."""

    NEWEST = "newest"
    OLDEST = "oldest"
    LONGEST = "longest"


class Status(StrEnum):
    NEW = "new"
    UPCOMING = "upcoming"
    LIVE = "live"
    PAST = "past"
    MISSING = "missing"


class VideoType(StrEnum):
    STREAM = "stream"
    CLIP = "clip"
    PLACEHOLDER = "placeholder"


class RelationKind(StrEnum):
    """Path segment of the channel relation endpoint."""

    VIDEOS = "videos"
    CLIPS = "clips"
    COLLABS = "collabs"


class ChannelType(StrEnum):
    VTUBER = "vtuber"
    SUBBER = "subber"


class ExtraInfo(StrEnum):
    """Optional supplementary fields requested via ``include``."""

    CLIPS = "clips"
    REFERS = "refers"
    SOURCES = "sources"
    SIMULCASTS = "simulcasts"
    MENTIONS = "mentions"
    DESCRIPTION = "description"
    LIVE_INFO = "live_info"
    CHANNEL_STATS = "channel_stats"
    SONGS = "songs"
