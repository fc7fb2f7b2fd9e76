"""Logging 설정 테스트."""

import json
import logging

import pytest

from auth_core.setup.config import Settings
from auth_core.setup.logging import (
    JsonLogFormatter,
    is_sensitive_key,
    mask_sensitive_data,
    setup_logging,
    setup_logging_from_settings,
)


class TestMaskSensitiveData:
    """민감 필드 마스킹 테스트."""

    def test_masks_credentials_in_any_key_style(self) -> None:
        masked = mask_sensitive_data(
            {
                "access_token": "abcdefghijklmnop",
                "accessToken": "abcdefghijklmnop",
                "code_verifier": "short",
                "verify_code": "123456",
                "provider": "google",
            }
        )

        assert masked == {
            "access_token": "***mnop",
            "accessToken": "***mnop",
            "code_verifier": "***",
            "verify_code": "***",
            "provider": "google",
        }

    def test_metadata_keys_stay_readable(self) -> None:
        """token_store 같은 메타데이터 키는 마스킹하지 않음."""
        data = {
            "token_store": "InMemoryTokenStore",
            "has_token": True,
            "error_code": "TOKEN_EXPIRED",
            "code_challenge": "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM",
        }

        assert mask_sensitive_data(data) == data

    def test_authorization_keeps_scheme(self) -> None:
        masked = mask_sensitive_data({"headers": {"Authorization": "Bearer 1234567890abcdef"}})

        assert masked["headers"]["Authorization"] == "Bearer ***cdef"

    def test_header_style_key(self) -> None:
        assert is_sensitive_key("X-Auth-Token") is True
        assert is_sensitive_key("X-Client-Platform") is False


class TestJsonLogFormatter:
    """JSON 포매터 테스트."""

    def test_format_with_extra(self) -> None:
        # Arrange
        record = logging.LogRecord(
            name="auth_core.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Login succeeded",
            args=(),
            exc_info=None,
        )
        record.provider = "kakao"
        record.refresh_token = "refresh-token-value"

        # Act
        payload = json.loads(JsonLogFormatter().format(record))

        # Assert
        assert payload["message"] == "Login succeeded"
        assert payload["log.level"] == "info"
        assert payload["service.name"] == "auth-core"
        assert payload["labels"]["provider"] == "kakao"
        assert payload["labels"]["refresh_token"] == "***alue"


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    """setup_logging 테스트."""

    def test_json_mode(self) -> None:
        setup_logging("DEBUG", json_format=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JsonLogFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("verbose")

        assert logging.getLogger().level == logging.INFO

    def test_from_settings(self) -> None:
        # Arrange
        settings = Settings(log_level="DEBUG", log_format="json")

        # Act
        setup_logging_from_settings(settings)

        # Assert
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JsonLogFormatter)
