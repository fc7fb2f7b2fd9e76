"""FakeAuthProvider 테스트."""

import pytest

from auth_core.application.auth.dto import (
    EmailLoginRequest,
    EmailVerificationConfirmRequest,
    EmailVerificationRequest,
    LogoutRequest,
    OAuthLoginRequest,
    RefreshTokenRequest,
)
from auth_core.domain.value_objects import Token
from auth_core.infrastructure.providers.fake import (
    FAILING_EMAIL,
    FAKE_ACCESS_TOKEN,
    FAKE_REFRESH_TOKEN,
    FAKE_REFRESHED_ACCESS_TOKEN,
    FAKE_VERIFY_CODE,
    INVALID_VERIFICATION_EMAIL,
    FakeAuthProvider,
)


class TestFakeAuthProvider:
    """FakeAuthProvider 테스트."""

    @pytest.fixture
    def provider(self) -> FakeAuthProvider:
        return FakeAuthProvider()

    def test_default_config(self, provider: FakeAuthProvider) -> None:
        assert provider.config.timeout == 5.0
        assert provider.config.retry_count == 2

    @pytest.mark.asyncio
    async def test_login(self, provider: FakeAuthProvider) -> None:
        result = await provider.login(EmailLoginRequest(email="a@b.c", verify_code="1"))

        assert result.data["accessToken"] == FAKE_ACCESS_TOKEN
        assert result.data["refreshToken"] == FAKE_REFRESH_TOKEN
        assert result.data["userInfo"]["email"] == "a@b.c"
        assert provider.is_logged_in

    @pytest.mark.asyncio
    async def test_failing_email(self, provider: FakeAuthProvider) -> None:
        result = await provider.login(EmailLoginRequest(email=FAILING_EMAIL, verify_code="1"))

        assert result.error == "AUTH_ERROR"
        assert not provider.is_logged_in

    @pytest.mark.asyncio
    async def test_oauth_login_unsupported(self, provider: FakeAuthProvider) -> None:
        result = await provider.login(OAuthLoginRequest(provider="google", auth_code="c"))

        assert result.success is False

    @pytest.mark.asyncio
    async def test_logout_resets_state(self, provider: FakeAuthProvider) -> None:
        await provider.login(EmailLoginRequest(email="a@b.c", verify_code="1"))

        await provider.logout(LogoutRequest())

        assert provider.current_user is None
        assert not provider.is_logged_in

    @pytest.mark.asyncio
    async def test_refresh(self, provider: FakeAuthProvider) -> None:
        valid = await provider.refresh_token(RefreshTokenRequest(refresh_token=FAKE_REFRESH_TOKEN))
        invalid = await provider.refresh_token(RefreshTokenRequest(refresh_token="other"))

        assert valid.data["accessToken"] == FAKE_REFRESHED_ACCESS_TOKEN
        assert invalid.message == "Refresh token is invalid."

    @pytest.mark.asyncio
    async def test_validate_token(self, provider: FakeAuthProvider) -> None:
        assert (await provider.validate_token(Token(access_token=FAKE_ACCESS_TOKEN))).data is True
        assert (await provider.validate_token(Token(access_token="other"))).data is False

    @pytest.mark.asyncio
    async def test_user_info_requires_login(self, provider: FakeAuthProvider) -> None:
        result = await provider.get_user_info(Token(access_token=FAKE_ACCESS_TOKEN))

        assert result.error == "USER_INFO_FAILED"

    @pytest.mark.asyncio
    async def test_email_verification(self, provider: FakeAuthProvider) -> None:
        rejected = await provider.request_email_verification(
            EmailVerificationRequest(INVALID_VERIFICATION_EMAIL)
        )
        verified = await provider.verify_email(
            EmailVerificationConfirmRequest(email="a@b.c", verify_code=FAKE_VERIFY_CODE)
        )

        assert rejected.success is False
        assert verified.data == {"email": "a@b.c", "verified": True}
