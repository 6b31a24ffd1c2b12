from __future__ import annotations

import re
from typing import NamedTuple

from github_webhook_resource.errors import InvalidHookConfigError, InvalidWebhookUrlError

HTTPS_URL_PATTERN = re.compile(
    r"^https://[0-9a-zA-Z]([-.\w]*[0-9a-zA-Z])(:[0-9]*)*([?/#].*)?$", re.ASCII
)
HOOK_URL_PATTERN = re.compile(
    r"^https://api\.[0-9a-zA-Z]([-.\w]*[0-9a-zA-Z])?/repos/([-\w]+/){2}hooks/\d{9}$", re.ASCII
)


class HookIdentifier(NamedTuple):
    """The parts of a WebhookURL needed to address a hook.

    hook_id: The numeric id GitHub assigned to the hook.
    repo: The repository the hook belongs to.
    owner: The user or organization owning the repository.
    """

    hook_id: int
    repo: str
    owner: str


def validate_payload_url(payload_url: str) -> str:
    if not HTTPS_URL_PATTERN.fullmatch(payload_url):
        raise InvalidHookConfigError(
            f"Payload URL {payload_url} doesn't match {HTTPS_URL_PATTERN.pattern}"
        )

    return payload_url


def parse_webhook_url(webhook_url: str) -> HookIdentifier:
    """Split a WebhookURL into the hook id, repository and owner.

    Example: https://api.github.com/repos/octocat/hello-world/hooks/242575190

    Raises:
        InvalidWebhookUrlError: If the url does not have the shape of a GitHub hook url.
    """
    if not HOOK_URL_PATTERN.fullmatch(webhook_url):
        raise InvalidWebhookUrlError(
            f"Malformed WebhookURL. {webhook_url} doesn't match {HOOK_URL_PATTERN.pattern}"
        )

    parts = webhook_url.split("/")

    return HookIdentifier(hook_id=int(parts[-1]), repo=parts[-3], owner=parts[-4])
