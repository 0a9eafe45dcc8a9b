"""holodex-client: typed client for the Holodex video metadata API."""

__version__ = "0.1.0"

from holodex_client.core.client import HolodexClient
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
from holodex_client.core.errors import (
    ConfigurationError,
    FilterError,
    HolodexError,
    IncompatibleFilterCombination,
    MalformedResponse,
    MissingRequiredField,
    TransportFailure,
    UnsupportedFilter,
)
from holodex_client.core.filters import FilterSet
from holodex_client.core.models import Channel, Comment, Credits, Song, Video
from holodex_client.core.options import ClientOptions


def get_channel(channel_id: str, options: ClientOptions | None = None) -> Channel:
    """Fetch a single channel.

    Convenience wrapper that opens and closes a client for one call.

    Args:
        channel_id: Channel ID (UC...).
        options: Configuration options. Uses env/YAML settings if not provided.
    """
    with HolodexClient(options) as client:
        return client.channel(channel_id)


def get_video(video_id: str, options: ClientOptions | None = None, **filters) -> Video:
    """Fetch metadata for a single video.

    Args:
        video_id: Video ID or watch URL.
        options: Configuration options. Uses env/YAML settings if not provided.
        **filters: ``timestamp_comments`` and ``languages``.

    Raises:
        MissingRequiredField: the input is not a recognizable video ID or URL.
    """
    from holodex_client.services.id_parser import parse_video_id

    parsed = parse_video_id(video_id) if video_id else None
    with HolodexClient(options) as client:
        return client.video(parsed or "", **filters)


__all__ = [
    "__version__",
    "get_channel",
    "get_video",
    "HolodexClient",
    "ClientOptions",
    "FilterSet",
    "Channel",
    "Comment",
    "Credits",
    "Song",
    "Video",
    "ChannelType",
    "ExtraInfo",
    "Language",
    "RelationKind",
    "SearchSort",
    "SortOrder",
    "Status",
    "VideoType",
    "HolodexError",
    "ConfigurationError",
    "FilterError",
    "MissingRequiredField",
    "IncompatibleFilterCombination",
    "UnsupportedFilter",
    "MalformedResponse",
    "TransportFailure",
]
