from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_FACTOIDS_FILE, DEFAULT_TRIGGER


class BotConfig(BaseModel):
    """Settings for one bot session.

    Attributes:
        nickname: Nickname (also used as user and real name) to register with.
        channels: Channels joined once the server confirms registration.
        host: IRC server hostname.
        port: IRC server port.
        factoids_file: Path of the factoid store.
        trigger: Character that marks a chat message as a command.
        reconnect: Reconnect after the server closes the connection.
    """

    nickname: str = Field(min_length=1)
    channels: list[str] = Field(default_factory=list)
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    factoids_file: str = DEFAULT_FACTOIDS_FILE
    trigger: str = Field(default=DEFAULT_TRIGGER, min_length=1, max_length=1)
    reconnect: bool = False

    @field_validator("nickname")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        v = v.strip()
        if not v or any(c.isspace() for c in v):
            raise ValueError("nickname must be a single word")
        return v

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> list[str]:
        """Strip whitespace, drop empty entries and duplicates, keep order."""
        if not isinstance(v, list):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if not isinstance(c, str):
                raise ValueError("channels must be strings")
            stripped = c.strip()
            if any(ch.isspace() for ch in stripped):
                raise ValueError(f"invalid channel name {c!r}")
            if stripped:
                validated.append(stripped)
        return list(dict.fromkeys(validated))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        return cls.model_validate(dict(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
