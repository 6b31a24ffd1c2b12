from __future__ import annotations

from typing import Any

import pydantic
from camel_converter import to_pascal
from pydantic import BaseModel, Field

from github_webhook_resource._utils import validate_payload_url
from github_webhook_resource.errors import InvalidHookConfigError
from github_webhook_resource.models.hook import Hook, HookConfig, HookCreate, HookUpdate

CONTENT_TYPES = ("json", "form")
MASKED_SECRET = "********"


class ResourceModel(BaseModel):
    """Declarative description of a repository webhook.

    The fields serialize to the PascalCase property names the orchestrator uses (`Owner`,
    `PayloadURL`, `WebhookURL`, ...) and can be populated with either those names or the
    snake_case field names.
    """

    token: str | None = None
    owner: str | None = None
    repo: str | None = None
    payload_url: str | None = Field(default=None, alias="PayloadURL")
    content_type: str | None = None
    secret: str | None = None
    insecure_ssl: bool | None = Field(default=None, alias="InsecureSSL")
    events: list[str] | None = None
    active: bool | None = None
    webhook_url: str | None = Field(default=None, alias="WebhookURL")

    model_config = pydantic.ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def build_config(self) -> HookConfig:
        """Turns the model into the config map GitHub expects for a hook.

        Raises:
            InvalidHookConfigError: If PayloadURL is missing or not an https url, or if
                ContentType is not one of json or form.
        """
        if self.payload_url is None:
            raise InvalidHookConfigError("Missing required parameter PayloadURL")

        content_type = "json" if self.content_type is None else self.content_type
        if content_type not in CONTENT_TYPES:
            raise InvalidHookConfigError("ContentType must be either json or form")

        return HookConfig(
            url=validate_payload_url(self.payload_url),
            content_type=content_type,
            secret=self.secret,
            insecure_ssl="1" if self.insecure_ssl else "0",
        )

    def build_hook_create(self) -> HookCreate:
        return HookCreate(config=self.build_config(), **self._hook_settings())

    def build_hook_update(self) -> HookUpdate:
        return HookUpdate(config=self.build_config(), **self._hook_settings())

    def updated_from(self, hook: Hook) -> ResourceModel:
        """Returns a copy of the model with the values GitHub reports for the hook.

        Config values are only taken when GitHub sent them. The secret comes back masked
        so a masked value keeps the secret the model already has.
        """
        update: dict[str, Any] = {}
        config = hook.config
        if config.url is not None:
            update["payload_url"] = config.url
        if config.content_type is not None:
            update["content_type"] = config.content_type
        if config.secret is not None and config.secret != MASKED_SECRET:
            update["secret"] = config.secret
        if config.insecure_ssl is not None:
            update["insecure_ssl"] = config.insecure_ssl != "0"

        update["active"] = bool(hook.active)
        update["events"] = hook.events
        update["webhook_url"] = hook.url

        return self.model_copy(update=update)

    def _hook_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.events:
            settings["events"] = list(self.events)
        if self.active is not None:
            settings["active"] = self.active

        return settings
