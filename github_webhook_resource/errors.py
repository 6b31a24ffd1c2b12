from __future__ import annotations

from httpx import Response

from github_webhook_resource.types import JsonDict


class WebhookResourceError(Exception):
    """Generic class for webhook resource error handling."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"WebhookResourceError. Error message: {self.message}."


class InvalidHookConfigError(WebhookResourceError):
    """Error when the resource model cannot be turned into a hook config."""

    def __str__(self) -> str:
        return self.message


class InvalidWebhookUrlError(WebhookResourceError):
    """Error when a WebhookURL does not have the shape of a GitHub hook URL."""

    def __str__(self) -> str:
        return self.message


class GitHubError(WebhookResourceError):
    """Generic class for errors while talking to GitHub."""

    def __str__(self) -> str:
        return f"GitHubError, {self.message}"


class GitHubApiError(GitHubError):
    """Error sent by the GitHub API."""

    def __init__(self, error: str, response: Response) -> None:
        self.status_code = response.status_code
        self.message = ""
        self.errors: list[str] = []
        self.documentation_url = ""
        body = _json_body(response)
        if body is not None:
            self.message = f"{body.get('message') or error}"
            self.documentation_url = f"{body.get('documentation_url') or ''}"
            for nested in body.get("errors") or []:
                if isinstance(nested, dict) and nested.get("message"):
                    self.errors.append(str(nested["message"]))
                elif isinstance(nested, str):
                    self.errors.append(nested)
        elif response.content:
            self.message = response.text
        else:
            self.message = error
        super().__init__(self.message)

    def __str__(self) -> str:
        details = f" {self.errors}" if self.errors else ""
        return f"GitHubApiError.{self.status_code} {self.message}{details}".rstrip()


class GitHubCommunicationError(GitHubError):
    """Error when connecting to GitHub."""

    def __str__(self) -> str:
        return f"GitHubCommunicationError, {self.message}"


class GitHubResponseError(GitHubError):
    """Error when a successful GitHub response does not hold a usable hook."""

    def __str__(self) -> str:
        return f"GitHubResponseError, {self.message}"


def _json_body(response: Response) -> JsonDict | None:
    if not response.content:
        return None
    if "application/json" not in response.headers.get("content-type", ""):
        return None
    try:
        body = response.json()
    except ValueError:
        return None

    return body if isinstance(body, dict) else None
