"""Logging configuration.

text 모드는 사람이 읽는 포맷, json 모드는 ECS 기반 한 줄 JSON 을 출력합니다.
json 모드에서는 토큰/verifier 같은 민감 필드를 마스킹합니다.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from auth_core.setup.config import Settings

ECS_VERSION = "8.11.0"
SERVICE_NAME = "auth-core"

# 키를 단어로 나눠 비교합니다 (accessToken, code_verifier, X-Auth-Token 등)
SENSITIVE_KEY_WORDS = frozenset(
    {"token", "verifier", "authorization", "code", "secret", "password", "cookie"}
)
# 값이 아닌 메타데이터를 가리키는 키 (token_store, has_token, error_code 등)
METADATA_KEY_WORDS = frozenset(
    {"store", "type", "class", "has", "error", "status", "count", "expires", "challenge"}
)
MASK_PLACEHOLDER = "***"
MASK_MIN_LENGTH = 12
MASK_VISIBLE_SUFFIX = 4

_KEY_WORD_PATTERN = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


def _key_words(key: str) -> set[str]:
    return {word.lower() for word in _KEY_WORD_PATTERN.findall(key)}


def is_sensitive_key(key: str) -> bool:
    words = _key_words(key)
    return bool(words & SENSITIVE_KEY_WORDS) and not words & METADATA_KEY_WORDS


def mask_value(value: Any) -> str:
    """긴 값은 끝 4자만 남깁니다. "Bearer xxx" 형태는 scheme 을 유지합니다."""
    if value is None:
        return MASK_PLACEHOLDER
    str_value = str(value)
    scheme, _, credentials = str_value.partition(" ")
    if credentials and scheme.isalpha():
        return f"{scheme} {mask_value(credentials)}"
    if len(str_value) < MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{MASK_PLACEHOLDER}{str_value[-MASK_VISIBLE_SUFFIX:]}"


def mask_sensitive_data(data: Mapping[str, Any]) -> dict[str, Any]:
    masked: dict[str, Any] = {}
    for key, value in data.items():
        if is_sensitive_key(key):
            masked[key] = mask_value(value)
        elif isinstance(value, Mapping):
            masked[key] = mask_sensitive_data(value)
        elif isinstance(value, (list, tuple)):
            masked[key] = [
                mask_sensitive_data(item) if isinstance(item, Mapping) else item
                for item in value
            ]
        else:
            masked[key] = value
    return masked


class JsonLogFormatter(logging.Formatter):
    """ECS 기반 JSON 포매터."""

    def __init__(self, service_name: str = SERVICE_NAME) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            "service.name": self.service_name,
        }

        if record.exc_info:
            log_obj["error.type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            log_obj["error.message"] = str(record.exc_info[1]) if record.exc_info[1] else None
            log_obj["error.stack_trace"] = self.formatException(record.exc_info)

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in EXCLUDED_LOG_RECORD_ATTRS
        }
        if extra_fields:
            log_obj["labels"] = mask_sensitive_data(extra_fields)

        return json.dumps(log_obj, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """애플리케이션 로깅을 설정합니다."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    if json_format:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging_from_settings(settings: Settings) -> None:
    """Settings 의 log_level / log_format 으로 로깅을 설정합니다."""
    setup_logging(settings.log_level, json_format=settings.log_format == "json")
