"""Cross-window OAuth Messages.

팝업 창이 opener 로 보내는 메시지 스키마입니다. type 으로 구분합니다.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Message(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class OAuthCallbackMessage(_Message):
    type: Literal["OAUTH_CALLBACK"]
    code: str = Field(min_length=1)
    state: str = Field(min_length=1)


class OAuthErrorMessage(_Message):
    type: Literal["OAUTH_ERROR"]
    error: str = Field(min_length=1)
    state: Optional[str] = None


OAuthMessage = Annotated[
    Union[OAuthCallbackMessage, OAuthErrorMessage],
    Field(discriminator="type"),
]

OAUTH_MESSAGE_ADAPTER = TypeAdapter(OAuthMessage)
