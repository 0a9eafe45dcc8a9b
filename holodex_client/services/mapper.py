"""Decode JSON response bodies into typed models."""

from __future__ import annotations

import functools
import logging
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from holodex_client.core.errors import MalformedResponse
from holodex_client.core.models import Channel, Comment, Video

logger = logging.getLogger("holodex_client")

M = TypeVar("M", bound=BaseModel)

_MAX_REPORTED_ERRORS = 3


@functools.lru_cache(maxsize=None)
def _adapter(model: type[BaseModel], many: bool) -> TypeAdapter:
    return TypeAdapter(list[model] if many else model)


def decode(body: bytes | str, model: type[M], *, many: bool = False) -> M | list[M]:
    """Decode a JSON document into ``model`` (or a list of it when ``many``).

    Raises:
        MalformedResponse: invalid JSON, a type mismatch, an unknown enum
            value or an unparseable timestamp.
    """
    try:
        return _adapter(model, many).validate_json(body)
    except ValidationError as exc:
        shape = f"list[{model.__name__}]" if many else model.__name__
        summary = _summarize(exc)
        logger.debug("Failed to decode %s: %s", shape, summary)
        raise MalformedResponse(
            f"Could not decode response as {shape}: {summary}",
            model=model.__name__,
        ) from exc


def _summarize(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    parts = []
    for err in errors[:_MAX_REPORTED_ERRORS]:
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    if len(errors) > _MAX_REPORTED_ERRORS:
        parts.append(f"... {len(errors) - _MAX_REPORTED_ERRORS} more")
    return "; ".join(parts)


def decode_channel(body: bytes | str) -> Channel:
    return decode(body, Channel)


def decode_channels(body: bytes | str) -> list[Channel]:
    return decode(body, Channel, many=True)


def decode_video(body: bytes | str) -> Video:
    return decode(body, Video)


def decode_videos(body: bytes | str) -> list[Video]:
    return decode(body, Video, many=True)


def decode_comments(body: bytes | str) -> list[Comment]:
    return decode(body, Comment, many=True)
