"""URL/ID parsing for videos and channels."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
_CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{22}$")

_YOUTUBE_HOSTS = ("youtube.com", "m.youtube.com")


def _is_valid_video_id(candidate: str) -> bool:
    return bool(_VIDEO_ID_RE.match(candidate))


def _is_valid_channel_id(candidate: str) -> bool:
    return bool(_CHANNEL_ID_RE.match(candidate))


def _first_segment(path: str, prefix: str) -> str:
    return path.removeprefix(prefix).split("/")[0]


def parse_video_id(input_str: str) -> str | None:
    """Extract a video ID from a YouTube/Holodex URL or raw ID string.

    Returns None if input cannot be parsed.
    """
    text = input_str.strip()
    if not text:
        return None

    if _is_valid_video_id(text):
        return text

    try:
        parsed = urlparse(text)
    except ValueError:
        return None

    host = (parsed.hostname or "").lower().removeprefix("www.")
    candidate = None

    if host in _YOUTUBE_HOSTS:
        if parsed.path == "/watch":
            candidates = parse_qs(parsed.query).get("v", [])
            candidate = candidates[0] if candidates else None
        else:
            for prefix in ("/shorts/", "/embed/", "/live/", "/v/"):
                if parsed.path.startswith(prefix):
                    candidate = _first_segment(parsed.path, prefix)
                    break
    elif host == "youtu.be":
        candidate = _first_segment(parsed.path, "/")
    elif host == "holodex.net" and parsed.path.startswith("/watch/"):
        candidate = _first_segment(parsed.path, "/watch/")

    if candidate and _is_valid_video_id(candidate):
        return candidate
    return None


def parse_channel_id(input_str: str) -> str | None:
    """Extract a channel ID (UC...) from a YouTube/Holodex URL or raw ID.

    Handle-style URLs (youtube.com/@name) carry no ID and return None.
    """
    text = input_str.strip()
    if not text:
        return None

    if _is_valid_channel_id(text):
        return text

    try:
        parsed = urlparse(text)
    except ValueError:
        return None

    host = (parsed.hostname or "").lower().removeprefix("www.")
    if host in _YOUTUBE_HOSTS + ("holodex.net",) and parsed.path.startswith("/channel/"):
        candidate = _first_segment(parsed.path, "/channel/")
        if _is_valid_channel_id(candidate):
            return candidate
    return None


def parse_many(inputs: list[str], parser=parse_channel_id) -> list[str]:
    """Parse multiple inputs, deduplicate, preserve order."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in inputs:
        parsed = parser(raw)
        if parsed is not None and parsed not in seen:
            seen.add(parsed)
            result.append(parsed)
    return result
