# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CLI entry point for holodex-client."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from holodex_client import __version__
from holodex_client.core.client import HolodexClient
from holodex_client.core.constants import (
    ChannelType,
    RelationKind,
    SearchSort,
    SortOrder,
    Status,
    VideoType,
)
from holodex_client.core.errors import (
    ConfigurationError,
    FilterError,
    MalformedResponse,
    TransportFailure,
)
from holodex_client.core.filters import FilterSet
from holodex_client.core.logging import get_logger, setup_logging
from holodex_client.core.options import ClientOptions
from holodex_client.core.writer import render_json, write_result
from holodex_client.services.id_parser import parse_channel_id, parse_many, parse_video_id
from holodex_client.utils.time_fmt import parse_timestamp


# Exit codes
EXIT_OK = 0
EXIT_INVALID = 1
EXIT_REQUEST_FAILED = 2


def _split_csv(ctx, param, value):
    """Turn 'a,b' (or repeated options) into a tuple; None when unset."""
    if value is None:
        return None
    values = value if isinstance(value, tuple) else (value,)
    items = tuple(item.strip() for v in values for item in v.split(",") if item.strip())
    return items or None


def _collect(ctx, param, value):
    """Repeated free-text options, kept verbatim; None when unset."""
    items = tuple(v for v in value or () if v.strip())
    return items or None


def _timestamp(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _choice(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


def _apply(fn, decorators):
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def _output_option(fn):
    return click.option(
        "--out", type=click.Path(path_type=Path), default=None,
        help="Write JSON to this file instead of stdout.",
    )(fn)


def _paging_options(fn):
    """Shared --limit/--offset options."""
    return _apply(fn, [
        click.option("--limit", type=int, default=None, help="Maximum number of results."),
        click.option("--offset", type=int, default=None, help="Number of results to skip."),
    ])


def _lang_option(fn):
    return click.option(
        "--lang", "languages", default=None, callback=_split_csv,
        help="Comma-separated language codes.",
    )(fn)


def _video_list_options(fn):
    """Filters shared by the live and videos listings."""
    return _apply(fn, [
        click.option("--channel-id", default=None, help="Only videos from this channel."),
        click.option("--id", "video_id", default=None, help="Comma-separated video IDs."),
        click.option("--include", "extra_info", default=None, callback=_split_csv, help="Extra info to include."),
        click.option("--max-upcoming-hours", type=int, default=None, help="Upcoming window in hours."),
        click.option("--mentioned-channel-id", default=None, help="Only videos mentioning this channel."),
        click.option("--order", "sort_order", type=_choice(SortOrder), default=None, help="Sort order."),
        click.option("--org", "organization", default=None, help="Organization name."),
        click.option("--sort", "sort_by_field", default=None, help="Field to sort by."),
        click.option("--status", type=_choice(Status), default=None, help="Video status."),
        click.option("--topic", default=None, help="Topic ID."),
        click.option("--type", "video_type", type=_choice(VideoType), default=None, help="Video type."),
    ])


def _time_range_options(fn):
    return _apply(fn, [
        click.option("--from", "from_time", default=None, callback=_timestamp, help="ISO-8601 lower bound."),
        click.option("--to", "to_time", default=None, callback=_timestamp, help="ISO-8601 upper bound."),
    ])


def _search_options(fn):
    """Body fields shared by the search commands."""
    return _apply(fn, [
        click.option("--sort", "search_sort", type=_choice(SearchSort), default=None, help="Result ordering."),
        click.option("--target", "video_types", default=None, callback=_split_csv, help="Comma-separated video types."),
        click.option("--condition", "conditions", multiple=True, callback=_collect, help="Text condition (repeatable)."),
        click.option("--topic", "topics", default=None, callback=_split_csv, help="Comma-separated topic IDs."),
        click.option("--channel", "channel_ids", default=None, callback=_split_csv, help="Comma-separated channel IDs."),
        click.option("--org", "organizations", default=None, callback=_split_csv, help="Comma-separated organizations."),
    ])


def _build_options(**cli_kwargs) -> ClientOptions:
    """Build ClientOptions from CLI kwargs, filtering out unset (None) values.

    Unset flags fall through to env vars → YAML → defaults.
    """
    overrides = {key: value for key, value in cli_kwargs.items() if value is not None}
    return ClientOptions(**overrides)


def _channel_or_raw(text: str) -> str | None:
    return parse_channel_id(text) or text.strip() or None


def _filters(**kwargs) -> FilterSet:
    return FilterSet(**{key: value for key, value in kwargs.items() if value is not None})


def _run(ctx: click.Context, out: Path | None, call) -> None:
    """Build the client, run ``call(client)`` and emit the result."""
    settings = dict(ctx.obj)
    jsonl_path = settings.pop("log_jsonl", None)
    try:
        options = _build_options(**settings)
    except ValidationError as exc:
        setup_logging(jsonl_path=jsonl_path)
        get_logger().error("Invalid settings: %s", exc)
        sys.exit(EXIT_INVALID)

    setup_logging(verbose=options.verbose, jsonl_path=jsonl_path)
    log = get_logger()

    try:
        with HolodexClient(options) as client:
            result = call(client)
    except (ConfigurationError, FilterError, ValidationError) as exc:
        log.error("%s", exc)
        sys.exit(EXIT_INVALID)
    except (TransportFailure, MalformedResponse) as exc:
        log.error("%s", exc)
        sys.exit(EXIT_REQUEST_FAILED)

    if out is not None:
        write_result(result, out)
        log.info("Wrote %s", out)
    else:
        click.echo(render_json(result))
    sys.exit(EXIT_OK)


@click.group()
@click.version_option(version=__version__, prog_name="holodex")
@click.option("--api-key", default=None, help="Holodex API key (or HOLODEX_API_KEY).")
@click.option("--base-url", default=None, help="API base URL.")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds.")
@click.option("--verbose", is_flag=True, default=None, help="Verbose console output.")
@click.option("--log-jsonl", type=click.Path(path_type=Path), default=None, help="Also write JSONL logs here.")
@click.pass_context
def cli(ctx, **settings) -> None:
    """Query the Holodex API for channels, videos and live status."""
    ctx.obj = settings


@cli.command()
@click.argument("channel")
@_output_option
@click.pass_context
def channel(ctx, channel, out):
    """Show one channel (ID or channel URL)."""
    channel_id = _channel_or_raw(channel) or ""
    _run(ctx, out, lambda client: client.channel(channel_id))


@cli.command()
@_lang_option
@_paging_options
@click.option("--order", "sort_order", type=_choice(SortOrder), default=None, help="Sort order.")
@click.option("--org", "organization", default=None, help="Organization name.")
@click.option("--sort", "sort_by_field", default=None, help="Field to sort by.")
@click.option("--type", "channel_type", type=_choice(ChannelType), default=None, help="Channel type.")
@_output_option
@click.pass_context
def channels(ctx, out, **kwargs):
    """List channels."""
    _run(ctx, out, lambda client: client.channels(_filters(**kwargs)))


@cli.command()
@click.argument("video")
@click.option("--comments/--no-comments", "timestamp_comments", default=None, help="Include timestamp comments.")
@_lang_option
@_output_option
@click.pass_context
def video(ctx, video, out, **kwargs):
    """Show one video (ID or watch URL)."""
    video_id = parse_video_id(video)
    if video_id is None:
        setup_logging()
        get_logger().error("Invalid video ID or URL: %s", video)
        sys.exit(EXIT_INVALID)
    _run(ctx, out, lambda client: client.video(video_id, _filters(**kwargs)))


@cli.command()
@_lang_option
@_paging_options
@_video_list_options
@_time_range_options
@_output_option
@click.pass_context
def live(ctx, out, **kwargs):
    """List live and upcoming videos."""
    _run(ctx, out, lambda client: client.live(_filters(**kwargs)))


@cli.command()
@_lang_option
@_paging_options
@_video_list_options
@_time_range_options
@_output_option
@click.pass_context
def videos(ctx, out, **kwargs):
    """List videos."""
    _run(ctx, out, lambda client: client.videos(_filters(**kwargs)))


@cli.command("channel-videos")
@click.argument("channel")
@click.argument("relation", type=_choice(RelationKind))
@_lang_option
@_paging_options
@click.option("--include", "extra_info", default=None, callback=_split_csv, help="Extra info to include.")
@_output_option
@click.pass_context
def channel_videos(ctx, channel, relation, out, **kwargs):
    """List videos, clips or collabs of a channel."""
    channel_id = _channel_or_raw(channel) or ""
    _run(
        ctx,
        out,
        lambda client: client.channel_videos(channel_id, relation, _filters(**kwargs)),
    )


@cli.command("users-live")
@click.argument("channels", nargs=-1, required=True)
@_output_option
@click.pass_context
def users_live(ctx, channels, out):
    """Live and upcoming videos for a set of channels."""
    channel_ids = parse_many(list(channels), parser=_channel_or_raw)
    _run(ctx, out, lambda client: client.users_live(channel_ids))


@cli.command()
@_lang_option
@_paging_options
@_search_options
@_output_option
@click.pass_context
def search(ctx, out, **kwargs):
    """Search videos."""
    _run(ctx, out, lambda client: client.search_videos(_filters(**kwargs)))


@cli.command("search-comments")
@click.argument("term")
@_lang_option
@_paging_options
@_search_options
@_output_option
@click.pass_context
def search_comments(ctx, term, out, **kwargs):
    """Search videos by comment text."""
    _run(ctx, out, lambda client: client.search_comments(term, _filters(**kwargs)))


if __name__ == "__main__":
    cli()
