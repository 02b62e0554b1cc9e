"""Tests for Channel / ChannelPlaceholder (core/channel.py).

The client is an ``AsyncMock``-backed stub — these tests verify:

* Accessors on the hydrated channel
* Resolving a placeholder issues exactly one fetch
* Resolving a hydrated channel returns the same instance, no fetch
* ``update`` forwards its payload unchanged and never mutates locally
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from twitch_kraken.core.channel import Channel, ChannelLike, ChannelPlaceholder
from twitch_kraken.core.protocols import ChannelUpdateData


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

class TestChannelAccessors:
    def test_names(self, channel_data: dict[str, Any], client: MagicMock) -> None:
        ch = Channel(channel_data, client)
        assert ch.id == "44322889"
        assert ch.name == "dallasnchains"
        assert ch.display_name == "DallasNChains"

    def test_profile_fields(self, channel_data: dict[str, Any], client: MagicMock) -> None:
        ch = Channel(channel_data, client)
        assert ch.broadcaster_language == "en"
        assert ch.broadcaster_type == "partner"
        assert ch.description == "A Twitch user since 2013."
        assert ch.followers == 40
        assert ch.game == "Final Fantasy XV"
        assert ch.language == "en"
        assert ch.logo.endswith("logo.png")
        assert ch.is_mature is True
        assert ch.is_partner is False
        assert ch.profile_banner is None
        assert ch.profile_banner_background_color is None
        assert ch.status == "The Finalest of Fantasies"
        assert ch.url == "https://www.twitch.tv/dallasnchains"
        assert ch.video_banner.endswith("banner.png")
        assert ch.views == 232

    def test_dates(self, channel_data: dict[str, Any], client: MagicMock) -> None:
        ch = Channel(channel_data, client)
        assert ch.creation_date == datetime(2013, 6, 3, 19, 12, 2, tzinfo=timezone.utc)
        assert ch.update_date == datetime(2016, 12, 6, 22, 2, 5, tzinfo=timezone.utc)

    def test_frozen(self, channel_data: dict[str, Any], client: MagicMock) -> None:
        ch = Channel(channel_data, client)
        with pytest.raises(AttributeError):
            ch.name = "someone_else"  # type: ignore[misc]

    def test_new_attribute_rejected(self, channel_data: dict[str, Any], client: MagicMock) -> None:
        ch = Channel(channel_data, client)
        with pytest.raises(AttributeError):
            ch.cached_followers = 41  # type: ignore[attr-defined]

    def test_placeholder_frozen(self, client: MagicMock) -> None:
        placeholder = ChannelPlaceholder("44322889", client)
        with pytest.raises(AttributeError):
            placeholder.id = "1"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolution:
    def test_hydrated_channel_resolves_to_itself(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        ch = Channel(channel_data, client)
        assert asyncio.run(ch.get_channel()) is ch
        client.channels.get_channel.assert_not_called()

    def test_resolve_alias_on_hydrated_channel(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        ch = Channel(channel_data, client)
        assert asyncio.run(ch.resolve()) is ch
        assert client.mock_calls == []

    def test_placeholder_fetches_once(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        hydrated = Channel(channel_data, client)
        client.channels.get_channel.return_value = hydrated

        placeholder = ChannelPlaceholder("44322889", client)
        result = asyncio.run(placeholder.get_channel())

        assert result is hydrated
        client.channels.get_channel.assert_awaited_once_with("44322889")

    def test_placeholder_propagates_client_errors(self, client: MagicMock) -> None:
        client.channels.get_channel.side_effect = LookupError("no such channel")
        placeholder = ChannelPlaceholder("1", client)
        with pytest.raises(LookupError, match="no such channel"):
            asyncio.run(placeholder.resolve())

    def test_placeholder_id(self, client: MagicMock) -> None:
        assert ChannelPlaceholder("123", client).id == "123"

    def test_placeholder_equality_ignores_client(self, client: MagicMock) -> None:
        other_client = MagicMock()
        assert ChannelPlaceholder("123", client) == ChannelPlaceholder("123", other_client)
        assert ChannelPlaceholder("123", client) != ChannelPlaceholder("456", client)

    def test_to_placeholder_shares_client(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        placeholder = Channel(channel_data, client).to_placeholder()
        assert placeholder == ChannelPlaceholder("44322889", client)
        client.channels.get_channel.return_value = "fetched"
        assert asyncio.run(placeholder.get_channel()) == "fetched"

    def test_either_variant_resolves_uniformly(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        hydrated = Channel(channel_data, client)
        client.channels.get_channel.return_value = hydrated
        refs: list[ChannelLike] = [ChannelPlaceholder("44322889", client), hydrated]

        async def resolve_all() -> list[Channel]:
            return [await ref.resolve() for ref in refs]

        assert asyncio.run(resolve_all()) == [hydrated, hydrated]
        assert client.channels.get_channel.await_count == 1


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

class TestChannelUpdate:
    def test_forwards_payload_unchanged(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        ch = Channel(channel_data, client)
        payload: ChannelUpdateData = {"status": "New title", "game": "Chess", "delay": 0}

        asyncio.run(ch.update(payload))

        client.channels.update_channel.assert_awaited_once()
        args = client.channels.update_channel.await_args.args
        assert args[0] is ch
        assert args[1] is payload
        assert payload == {"status": "New title", "game": "Chess", "delay": 0}

    def test_returns_client_result(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        client.channels.update_channel.return_value = {"ok": True}
        ch = Channel(channel_data, client)
        assert asyncio.run(ch.update({"channel_feed_enabled": True})) == {"ok": True}

    def test_no_local_mutation(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        ch = Channel(channel_data, client)
        asyncio.run(ch.update({"status": "Something else", "game": "Chess"}))
        assert ch.status == "The Finalest of Fantasies"
        assert ch.game == "Final Fantasy XV"
        assert channel_data["status"] == "The Finalest of Fantasies"

    def test_one_call_per_update(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        ch = Channel(channel_data, client)
        asyncio.run(ch.update({"delay": 30}))
        asyncio.run(ch.update({"delay": 60}))
        assert client.channels.update_channel.await_count == 2

    def test_client_errors_propagate_unchanged(
        self, channel_data: dict[str, Any], client: MagicMock,
    ) -> None:
        error = PermissionError("missing channel_editor scope")
        client.channels.update_channel.side_effect = error
        ch = Channel(channel_data, client)
        with pytest.raises(PermissionError) as exc_info:
            asyncio.run(ch.update({"status": "x"}))
        assert exc_info.value is error
