"""The sparse filter set shared by every endpoint."""

from __future__ import annotations

from pydantic import AwareDatetime, BaseModel, ConfigDict, NonNegativeInt, field_validator

from holodex_client.core.constants import (
    ChannelType,
    ExtraInfo,
    Language,
    RelationKind,
    SearchSort,
    SortOrder,
    Status,
    VideoType,
)


def is_absent(value: object) -> bool:
    """None, a blank string and an empty sequence all count as absent."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (tuple, list)):
        return len(value) == 0
    return False


class FilterSet(BaseModel):
    """Optional query filters; which ones apply depends on the endpoint.

    Enumerated fields accept the enum member or its canonical string and
    are validated at construction. Unknown field names are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    channel_id: str | None = None
    video_id: str | None = None
    languages: tuple[Language, ...] | None = None
    limit: NonNegativeInt | None = None
    offset: NonNegativeInt | None = None
    sort_by_field: str | None = None
    sort_order: SortOrder | None = None
    organization: str | None = None
    status: Status | None = None
    topic: str | None = None
    video_type: VideoType | None = None
    channel_type: ChannelType | None = None
    from_time: AwareDatetime | None = None
    to_time: AwareDatetime | None = None
    extra_info: tuple[ExtraInfo, ...] | None = None
    mentioned_channel_id: str | None = None
    channel_ids: tuple[str, ...] | None = None
    max_upcoming_hours: NonNegativeInt | None = None
    relation: RelationKind | None = None
    timestamp_comments: bool | None = None

    # search body
    search_sort: SearchSort | None = None
    video_types: tuple[VideoType, ...] | None = None
    conditions: tuple[str, ...] | None = None
    comment: str | None = None
    topics: tuple[str, ...] | None = None
    organizations: tuple[str, ...] | None = None

    @field_validator("channel_ids", "conditions", "topics", "organizations")
    @classmethod
    def _drop_blank_entries(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if value is None:
            return None
        return tuple(v for v in value if v.strip())

    def provided(self) -> tuple[str, ...]:
        """Names of the fields that carry a value, in declaration order."""
        return tuple(
            name for name in type(self).model_fields if not is_absent(getattr(self, name))
        )

    def has(self, name: str) -> bool:
        return not is_absent(getattr(self, name))
