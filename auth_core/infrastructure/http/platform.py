"""Platform-conditional request shaping.

web: refresh token 은 쿠키로만 전송 (본문에 넣지 않음)
app: refresh token 과 device id 를 본문에 명시
react-native 는 app 과 동일하게 취급합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from auth_core.application.auth.dto import is_email_login_request
from auth_core.application.common.exceptions import MissingRefreshTokenError
from auth_core.domain.enums import ClientPlatform

if TYPE_CHECKING:
    from auth_core.application.auth.dto import LoginRequest, LogoutRequest, RefreshTokenRequest

PLATFORM_HEADER = "X-Client-Platform"


def request_platform(platform: ClientPlatform | str) -> ClientPlatform:
    """요청 형태를 결정하는 플랫폼 (web 또는 app)."""
    return ClientPlatform(platform).request_shape


def platform_headers(platform: ClientPlatform | str) -> dict[str, str]:
    return {PLATFORM_HEADER: request_platform(platform).value}


def build_login_body(request: LoginRequest, platform: ClientPlatform | str) -> dict[str, Any]:
    if is_email_login_request(request):
        body: dict[str, Any] = {"email": request.email, "verifyCode": request.verify_code}
    else:
        body = {"authCode": request.auth_code}
        if request.code_verifier:
            body["codeVerifier"] = request.code_verifier
        if request.redirect_uri:
            body["redirectUri"] = request.redirect_uri

    if request_platform(platform) is ClientPlatform.APP and request.device_id:
        body["deviceId"] = request.device_id
    return body


def build_refresh_body(
    request: RefreshTokenRequest, platform: ClientPlatform | str
) -> dict[str, Any] | None:
    """Raises: MissingRefreshTokenError (app 플랫폼에서 refresh token 누락)."""
    if request_platform(platform) is not ClientPlatform.APP:
        return None
    return _app_token_body(request.refresh_token, request.device_id)


def build_logout_body(
    request: LogoutRequest, platform: ClientPlatform | str
) -> dict[str, Any] | None:
    """Raises: MissingRefreshTokenError (app 플랫폼에서 refresh token 누락)."""
    if request_platform(platform) is not ClientPlatform.APP:
        # 쿠키 전송. device id 만 본문에 포함
        return {"deviceId": request.device_id} if request.device_id else None
    return _app_token_body(request.refresh_token, request.device_id)


def _app_token_body(refresh_token: str | None, device_id: str | None) -> dict[str, Any]:
    if not refresh_token:
        raise MissingRefreshTokenError()
    body: dict[str, Any] = {"refreshToken": refresh_token}
    if device_id:
        body["deviceId"] = device_id
    return body
