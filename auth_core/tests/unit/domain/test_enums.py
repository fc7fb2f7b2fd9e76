"""Domain Enum 테스트."""

from auth_core.domain.enums import AuthProviderType, ClientPlatform


def test_oauth_providers() -> None:
    assert AuthProviderType.GOOGLE.is_oauth
    assert AuthProviderType.NAVER.is_oauth
    assert not AuthProviderType.EMAIL.is_oauth
    assert not AuthProviderType.FAKE.is_oauth


def test_display_name_is_capitalized() -> None:
    assert AuthProviderType.KAKAO.display_name == "Kakao"


def test_react_native_platform_value() -> None:
    assert ClientPlatform("react-native") is ClientPlatform.REACT_NATIVE
