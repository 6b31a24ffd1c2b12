from __future__ import annotations

from datetime import datetime
from typing import Any

import pydantic
from pydantic import BaseModel, Field


class HookConfig(BaseModel):
    """Delivery settings of a hook.

    GitHub returns these as a loosely typed map, so a key holding anything other than a
    string is read as missing rather than rejected.
    """

    url: str | None = None
    content_type: str | None = None
    secret: str | None = None
    insecure_ssl: str | None = None

    @pydantic.field_validator("url", "content_type", "secret", "insecure_ssl", mode="before")  # type: ignore[attr-defined]
    @classmethod
    def validate_string(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None


class Hook(BaseModel):
    id: int | None = None
    type: str | None = None
    name: str | None = None
    active: bool | None = None
    events: list[str] | None = None
    config: HookConfig = Field(default_factory=HookConfig)
    url: str | None = None
    test_url: str | None = None
    ping_url: str | None = None
    deliveries_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @pydantic.field_validator("config", mode="before")  # type: ignore[attr-defined]
    @classmethod
    def validate_config(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, HookConfig)) else HookConfig()


class HookCreate(BaseModel):
    name: str = "web"
    config: HookConfig
    events: list[str] | None = None
    active: bool | None = None


class HookUpdate(BaseModel):
    config: HookConfig
    events: list[str] | None = None
    active: bool | None = None
