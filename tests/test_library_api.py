"""Tests for the holodex_client public library API."""

from unittest.mock import patch

import pytest

import holodex_client
from holodex_client import (
    Channel,
    ClientOptions,
    FilterSet,
    HolodexClient,
    HolodexError,
    MissingRequiredField,
    Video,
    get_channel,
    get_video,
)


CHANNEL_ID = "UC5CwaMl1eIgY8h02uZw7u8A"


# --- Exports ---


class TestExports:
    def test_version_exported(self):
        assert isinstance(holodex_client.__version__, str)

    def test_helpers_exported(self):
        assert callable(holodex_client.get_channel)
        assert callable(holodex_client.get_video)

    def test_all_names_resolve(self):
        for name in holodex_client.__all__:
            assert hasattr(holodex_client, name), name

    def test_models_exported(self):
        assert holodex_client.HolodexClient is HolodexClient
        assert holodex_client.ClientOptions is ClientOptions
        assert holodex_client.FilterSet is FilterSet

    def test_errors_share_base(self):
        assert issubclass(holodex_client.TransportFailure, HolodexError)
        assert issubclass(holodex_client.MalformedResponse, HolodexError)
        assert issubclass(holodex_client.UnsupportedFilter, holodex_client.FilterError)


# --- get_channel ---


class TestGetChannel:
    @patch("holodex_client.HolodexClient")
    def test_delegates(self, mock_cls):
        client = mock_cls.return_value.__enter__.return_value
        client.channel.return_value = Channel(id=CHANNEL_ID)
        opts = ClientOptions(api_key="k")

        result = get_channel(CHANNEL_ID, opts)

        assert result == Channel(id=CHANNEL_ID)
        mock_cls.assert_called_once_with(opts)
        client.channel.assert_called_once_with(CHANNEL_ID)
        mock_cls.return_value.__exit__.assert_called_once()


# --- get_video ---


class TestGetVideo:
    @patch("holodex_client.HolodexClient")
    def test_url_parsed(self, mock_cls):
        client = mock_cls.return_value.__enter__.return_value
        client.video.return_value = Video(id="dQw4w9WgXcQ")

        result = get_video("https://www.youtube.com/watch?v=dQw4w9WgXcQ", timestamp_comments=True)

        assert result.id == "dQw4w9WgXcQ"
        client.video.assert_called_once_with("dQw4w9WgXcQ", timestamp_comments=True)

    @patch("holodex_client.HolodexClient")
    def test_unparseable_passes_empty_id(self, mock_cls):
        client = mock_cls.return_value.__enter__.return_value
        get_video("not a video")
        client.video.assert_called_once_with("")

    def test_unparseable_raises_before_send(self, monkeypatch):
        sent = []

        class _Transport:
            def send(self, request):
                sent.append(request)

        monkeypatch.setattr(
            holodex_client, "HolodexClient",
            lambda options: HolodexClient(ClientOptions(api_key="k"), transport=_Transport()),
        )
        with pytest.raises(MissingRequiredField):
            get_video("not a video")
        assert sent == []
