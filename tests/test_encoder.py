"""Tests for holodex_client.services.encoder."""

import json
from datetime import datetime, timedelta, timezone

import pytest

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
)
from holodex_client.core.errors import MissingRequiredField
from holodex_client.core.filters import FilterSet
from holodex_client.services.encoder import PreparedRequest, encode_request


CHANNEL_ID = "UC5CwaMl1eIgY8h02uZw7u8A"


def _params(request: PreparedRequest) -> dict[str, str]:
    return dict(request.params)


# --- Array fields ---


class TestArrayFields:
    def test_empty_array_omitted(self):
        req = encode_request(LIVE, FilterSet(languages=[]))
        assert "lang" not in _params(req)
        assert req.target == "live"

    def test_three_elements_comma_joined(self):
        req = encode_request(LIVE, FilterSet(languages=["en", "ja", "es"]))
        assert _params(req)["lang"] == "en,ja,es"
        assert req.target == "live?lang=en,ja,es"

    def test_single_element_no_delimiter(self):
        req = encode_request(LIVE, FilterSet(languages=[Language.JA]))
        assert _params(req)["lang"] == "ja"

    def test_extra_info_as_include(self):
        req = encode_request(
            VIDEOS, FilterSet(extra_info=[ExtraInfo.DESCRIPTION, ExtraInfo.SONGS])
        )
        assert _params(req)["include"] == "description,songs"

    def test_channel_id_list(self):
        req = encode_request(USERS_LIVE, FilterSet(channel_ids=["UCa", "UCb", "UCc"]))
        assert req.target == "users/live?channels=UCa,UCb,UCc"

    def test_blank_entries_dropped(self):
        req = encode_request(USERS_LIVE, FilterSet(channel_ids=["UCa", "", " "]))
        assert _params(req)["channels"] == "UCa"


# --- Enumerations ---


class TestEnumerations:
    def test_sort_order_lowercase(self):
        req = encode_request(LIVE, FilterSet(sort_order=SortOrder.DESC))
        assert _params(req)["order"] == "desc"

    def test_sort_order_from_string(self):
        req = encode_request(LIVE, FilterSet(sort_order="asc"))
        assert _params(req)["order"] == "asc"

    def test_status(self):
        req = encode_request(LIVE, FilterSet(status=Status.UPCOMING))
        assert _params(req)["status"] == "upcoming"

    def test_video_type(self):
        req = encode_request(VIDEOS, FilterSet(video_type=VideoType.CLIP))
        assert _params(req)["type"] == "clip"

    def test_channel_type(self):
        req = encode_request(CHANNELS, FilterSet(channel_type=ChannelType.SUBBER))
        assert _params(req)["type"] == "subber"

    def test_boolean_flag(self):
        req = encode_request(VIDEO, FilterSet(video_id="dQw4w9WgXcQ", timestamp_comments=True))
        assert _params(req)["c"] == "1"
        req = encode_request(VIDEO, FilterSet(video_id="dQw4w9WgXcQ", timestamp_comments=False))
        assert _params(req)["c"] == "0"


# --- Timestamps ---


class TestTimestamps:
    def test_utc_millisecond_precision(self):
        start = datetime(2019, 8, 24, 14, 15, 22, tzinfo=timezone.utc)
        req = encode_request(VIDEOS, FilterSet(from_time=start))
        assert _params(req)["from"] == "2019-08-24T14:15:22.000Z"
        assert req.target == "videos?from=2019-08-24T14:15:22.000Z"

    def test_offset_converted_to_utc(self):
        tokyo = timezone(timedelta(hours=9))
        end = datetime(2019, 8, 24, 23, 15, 22, 123456, tzinfo=tokyo)
        req = encode_request(VIDEOS, FilterSet(to_time=end))
        assert _params(req)["to"] == "2019-08-24T14:15:22.123Z"

    def test_from_and_to_both_emitted(self):
        start = datetime(2020, 1, 1, tzinfo=timezone.utc)
        end = datetime(2020, 2, 1, tzinfo=timezone.utc)
        req = encode_request(VIDEOS, FilterSet(from_time=start, to_time=end))
        assert [k for k, _ in req.params] == ["from", "to"]


# --- Path segments ---


class TestPathSegments:
    def test_relation_in_path(self):
        req = encode_request(
            CHANNEL_VIDEOS, FilterSet(channel_id="X", relation=RelationKind.CLIPS)
        )
        assert req.path == "channels/X/clips"
        keys = [k for k, _ in req.params]
        assert "type" not in keys
        assert "channel_id" not in keys
        assert req.target == "channels/X/clips"

    def test_relation_with_query(self):
        req = encode_request(
            CHANNEL_VIDEOS,
            FilterSet(channel_id=CHANNEL_ID, relation="collabs", languages=["en"], limit=5),
        )
        assert req.target == f"channels/{CHANNEL_ID}/collabs?lang=en&limit=5"

    def test_channel_lookup(self):
        req = encode_request(CHANNEL, FilterSet(channel_id=CHANNEL_ID))
        assert req.method == "GET"
        assert req.target == f"channels/{CHANNEL_ID}"
        assert req.params == ()

    def test_video_lookup(self):
        req = encode_request(
            VIDEO, FilterSet(video_id="dQw4w9WgXcQ", timestamp_comments=True, languages=["en"])
        )
        assert req.target == "videos/dQw4w9WgXcQ?lang=en&c=1"

    def test_path_segment_escaped(self):
        req = encode_request(CHANNEL, FilterSet(channel_id="a/b c"))
        assert req.path == "channels/a%2Fb%20c"

    def test_missing_path_segment(self):
        with pytest.raises(MissingRequiredField):
            encode_request(CHANNEL, FilterSet())


# --- Wire names and ordering ---


class TestWireNames:
    def test_name_translation(self):
        req = encode_request(
            LIVE,
            FilterSet(
                sort_by_field="available_at",
                sort_order="desc",
                extra_info=["mentions"],
                organization="Hololive",
                video_id="abcdefghijk",
            ),
        )
        assert _params(req) == {
            "order": "desc",
            "org": "Hololive",
            "sort": "available_at",
            "id": "abcdefghijk",
            "include": "mentions",
        }

    def test_fixed_order_independent_of_construction(self):
        a = FilterSet(topic="singing", limit=10, languages=["en"], channel_id="UCx", offset=5)
        b = FilterSet(offset=5, channel_id="UCx", languages=["en"], limit=10, topic="singing")
        expected = "live?lang=en&limit=10&offset=5&channel_id=UCx&topic=singing"
        assert encode_request(LIVE, a).target == expected
        assert encode_request(LIVE, b).target == expected

    def test_query_value_escaped(self):
        req = encode_request(LIVE, FilterSet(organization="Hololive English & Co"))
        assert req.query_string == "org=Hololive%20English%20%26%20Co"

    def test_unaccepted_fields_not_rendered(self):
        req = encode_request(CHANNELS, FilterSet(status="live", limit=3))
        assert req.target == "channels?limit=3"

    def test_zero_values_rendered(self):
        req = encode_request(LIVE, FilterSet(limit=0, offset=0))
        assert req.target == "live?limit=0&offset=0"


# --- Search bodies ---


class TestSearchBody:
    def test_defaults_applied(self):
        req = encode_request(SEARCH_VIDEOS, FilterSet())
        assert req.method == "POST"
        assert req.path == "search/videoSearch"
        assert req.body == {"sort": "newest", "offset": 0, "limit": 30}
        assert req.content == b'{"sort":"newest","offset":0,"limit":30}'
        assert req.params == ()

    def test_explicit_values_override_defaults(self):
        req = encode_request(
            SEARCH_VIDEOS,
            FilterSet(search_sort=SearchSort.OLDEST, offset=60, limit=10),
        )
        assert req.body == {"sort": "oldest", "offset": 60, "limit": 10}

    def test_full_body(self):
        req = encode_request(
            SEARCH_VIDEOS,
            FilterSet(
                languages=["en", "ja"],
                video_types=["clip"],
                conditions=["karaoke"],
                topics=["singing"],
                channel_ids=[CHANNEL_ID],
                organizations=["Hololive"],
            ),
        )
        assert req.body == {
            "sort": "newest",
            "lang": ["en", "ja"],
            "target": ["clip"],
            "conditions": ["karaoke"],
            "topic": ["singing"],
            "vch": [CHANNEL_ID],
            "org": ["Hololive"],
            "offset": 0,
            "limit": 30,
        }
        assert list(req.body) == [
            "sort", "lang", "target", "conditions", "topic", "vch", "org", "offset", "limit",
        ]

    def test_empty_arrays_omitted(self):
        req = encode_request(SEARCH_VIDEOS, FilterSet(topics=[], organizations=[]))
        assert "topic" not in req.body
        assert "org" not in req.body

    def test_comment_search_term(self):
        req = encode_request(SEARCH_COMMENTS, FilterSet(comment="shion"))
        assert req.path == "search/commentSearch"
        assert req.body["comment"] == ["shion"]
        assert req.body["sort"] == "newest"

    def test_content_is_json(self):
        req = encode_request(SEARCH_COMMENTS, FilterSet(comment="こんにちは"))
        assert json.loads(req.content.decode("utf-8")) == req.body

    def test_get_has_no_content(self):
        req = encode_request(LIVE, FilterSet())
        assert req.body is None
        assert req.content == b""


# --- Idempotence ---


class TestIdempotence:
    def test_get_byte_identical(self):
        filters = FilterSet(
            languages=["en", "ja"],
            status="live",
            from_time=datetime(2021, 1, 1, tzinfo=timezone.utc),
        )
        first = encode_request(VIDEOS, filters)
        second = encode_request(VIDEOS, filters)
        assert first == second
        assert first.target.encode() == second.target.encode()

    def test_post_byte_identical(self):
        filters = FilterSet(topics=["singing"], limit=5)
        assert (
            encode_request(SEARCH_VIDEOS, filters).content
            == encode_request(SEARCH_VIDEOS, filters).content
        )
