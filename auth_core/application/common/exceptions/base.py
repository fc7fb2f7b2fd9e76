"""Base Application Exceptions."""


class ApplicationError(Exception):
    """애플리케이션 계층 예외 기본 클래스."""


class ConfigurationError(ApplicationError):
    """잘못된 구성 (생성 시점에 즉시 실패)."""


class PlatformNotSupportedError(ApplicationError):
    """현재 플랫폼에서 지원하지 않는 기능."""

    def __init__(self, feature: str, platform: str) -> None:
        self.feature = feature
        self.platform = platform
        super().__init__(f"{feature} is not available on the {platform} platform")
