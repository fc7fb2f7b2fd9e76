"""OAuthMessageChannel 단위 테스트."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from auth_core.application.oauth.dto import OAuthCallbackMessage, OAuthErrorMessage
from auth_core.application.oauth.services import OAuthMessageChannel, normalize_origin

APP_ORIGIN = "https://app.example.com"


class TestNormalizeOrigin:
    """origin 정규화 테스트."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://App.Example.com", "https://app.example.com"),
            ("https://app.example.com:443", "https://app.example.com"),
            ("http://localhost:3000/path?x=1", "http://localhost:3000"),
            ("http://localhost:80", "http://localhost"),
        ],
    )
    def test_normalize(self, value: str, expected: str) -> None:
        assert normalize_origin(value) == expected

    @pytest.mark.parametrize("value", [None, "", "not a url", "https://"])
    def test_invalid(self, value: str | None) -> None:
        assert normalize_origin(value) is None


class TestOAuthMessageChannel:
    """메시지 채널 테스트."""

    @pytest.fixture
    def channel(self) -> OAuthMessageChannel:
        return OAuthMessageChannel(APP_ORIGIN)

    def test_invalid_app_origin(self) -> None:
        with pytest.raises(ValueError):
            OAuthMessageChannel("nowhere")

    @pytest.mark.asyncio
    async def test_valid_callback_delivered(self, channel: OAuthMessageChannel) -> None:
        # Arrange
        listener = MagicMock(return_value=None)
        channel.add_listener(listener)

        # Act
        delivered = await channel.deliver(
            "https://app.example.com:443",
            {"type": "OAUTH_CALLBACK", "code": "c", "state": "s", "extra": 1},
        )

        # Assert
        assert delivered is True
        listener.assert_called_once_with(
            OAuthCallbackMessage(type="OAUTH_CALLBACK", code="c", state="s")
        )

    @pytest.mark.asyncio
    async def test_foreign_origin_ignored(self, channel: OAuthMessageChannel) -> None:
        listener = MagicMock(return_value=None)
        channel.add_listener(listener)

        delivered = await channel.deliver(
            "https://evil.example.com", {"type": "OAUTH_CALLBACK", "code": "c", "state": "s"}
        )

        assert delivered is False
        listener.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "OAUTH_CALLBACK", "code": "c"},
            {"type": "OAUTH_CALLBACK", "code": "", "state": "s"},
            {"type": "OAUTH_CALLBACK", "code": 123, "state": "s"},
            {"type": "SOMETHING_ELSE"},
            "OAUTH_CALLBACK",
            None,
        ],
    )
    async def test_malformed_payload_ignored(
        self, channel: OAuthMessageChannel, payload: object
    ) -> None:
        listener = MagicMock(return_value=None)
        channel.add_listener(listener)

        delivered = await channel.deliver(APP_ORIGIN, payload)

        assert delivered is False
        listener.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_message_delivered(self, channel: OAuthMessageChannel) -> None:
        listener = MagicMock(return_value=None)
        channel.add_listener(listener)

        await channel.deliver(APP_ORIGIN, {"type": "OAUTH_ERROR", "error": "access_denied"})

        message = listener.call_args.args[0]
        assert isinstance(message, OAuthErrorMessage)
        assert message.state is None

    @pytest.mark.asyncio
    async def test_async_listener_awaited(self, channel: OAuthMessageChannel) -> None:
        listener = AsyncMock()
        channel.add_listener(listener)

        await channel.deliver(APP_ORIGIN, {"type": "OAUTH_CALLBACK", "code": "c", "state": "s"})

        listener.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_block_others(
        self, channel: OAuthMessageChannel
    ) -> None:
        # Arrange
        failing = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock(return_value=None)
        channel.add_listener(failing)
        channel.add_listener(healthy)

        # Act
        delivered = await channel.deliver(
            APP_ORIGIN, {"type": "OAUTH_CALLBACK", "code": "c", "state": "s"}
        )

        # Assert
        assert delivered is True
        healthy.assert_called_once()

    @pytest.mark.asyncio
    async def test_removed_listener_not_called(self, channel: OAuthMessageChannel) -> None:
        listener = MagicMock(return_value=None)
        channel.add_listener(listener)
        channel.remove_listener(listener)

        await channel.deliver(APP_ORIGIN, {"type": "OAUTH_CALLBACK", "code": "c", "state": "s"})

        listener.assert_not_called()
