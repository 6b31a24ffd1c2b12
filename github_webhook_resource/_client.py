from __future__ import annotations

from ssl import SSLContext
from typing import TYPE_CHECKING

from httpx import Client as HttpxClient
from pydantic import ValidationError

from github_webhook_resource._http_requests import HttpRequests, user_agent
from github_webhook_resource.errors import GitHubResponseError
from github_webhook_resource.json_handler import BuiltinHandler, JsonHandler
from github_webhook_resource.models.hook import Hook, HookCreate, HookUpdate
from github_webhook_resource.types import JsonDict

if TYPE_CHECKING:  # pragma: no cover
    import sys
    from types import TracebackType

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class GitHubClient:
    """Client to manage repository webhooks through the GitHub REST API."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = GITHUB_API_URL,
        timeout: int | None = None,
        verify: bool | SSLContext = True,
        custom_headers: dict[str, str] | None = None,
        json_handler: JsonHandler | None = None,
        http2: bool = False,
    ) -> None:
        """Class initializer.

        Args:
            token: The OAuth or personal access token sent as a bearer token.
            base_url: The url to the GitHub API. Defaults to https://api.github.com.
            timeout: The amount of time in seconds that the client will wait for a response before
                timing out. Defaults to None.
            verify: SSL certificates (a.k.a CA bundle) used to
                verify the identity of requested hosts. Either `True` (default CA bundle),
                a path to an SSL certificate file, or `False` (disable verification)
            custom_headers: Custom headers to add when sending requests to GitHub. Defaults to
                None.
            json_handler: The module to use for json operations. The options are BuiltinHandler
                (uses the json module from the standard library), OrjsonHandler (uses orjson), or
                UjsonHandler (uses ujson). Note that in order use orjson or ujson the corresponding
                extra needs to be included. Default: BuiltinHandler.
            http2: Whether or not to use HTTP/2. Defaults to False.
        """
        self.json_handler = json_handler if json_handler else BuiltinHandler()
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "user-agent": user_agent(),
        }
        if custom_headers:
            self._headers.update(custom_headers)

        self.http_client = HttpxClient(
            base_url=base_url, timeout=timeout, headers=self._headers, verify=verify, http2=http2
        )
        self._http_requests = HttpRequests(self.http_client, json_handler=self.json_handler)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        et: type[BaseException] | None,
        ev: type[BaseException] | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Closes the client.

        This only needs to be used if the client was not created with a context manager.
        """
        self.http_client.close()

    def create_hook(self, owner: str, repo: str, hook: HookCreate) -> Hook:
        """Create a webhook on a repository.

        Args:
            owner: The user or organization owning the repository.
            repo: The name of the repository.
            hook: The settings of the new hook.

        Returns:
            The hook as created by GitHub, including the url identifying it.

        Raises:
            GitHubCommunicationError: If there was an error communicating with GitHub.
            GitHubApiError: If GitHub answered with anything other than 201.
            GitHubResponseError: If the response body is not a hook.

        Examples:
            >>> from github_webhook_resource import GitHubClient
            >>> from github_webhook_resource.models.hook import HookConfig, HookCreate
            >>>
            >>> with GitHubClient("ghp_token") as client:
            >>>     hook = client.create_hook(
            >>>         "octocat",
            >>>         "hello-world",
            >>>         HookCreate(config=HookConfig(url="https://example.com/hook")),
            >>>     )
        """
        response = self._http_requests.post(
            _hooks_path(owner, repo), _dump(hook), expected_status=201
        )

        return self._hook(response.content)

    def get_hook(self, owner: str, repo: str, hook_id: int) -> Hook:
        """Get a repository webhook.

        Raises:
            GitHubCommunicationError: If there was an error communicating with GitHub.
            GitHubApiError: If GitHub answered with anything other than 200.
            GitHubResponseError: If the response body is not a hook.
        """
        response = self._http_requests.get(
            f"{_hooks_path(owner, repo)}/{hook_id}", expected_status=200
        )

        return self._hook(response.content)

    def edit_hook(self, owner: str, repo: str, hook_id: int, hook: HookUpdate) -> Hook:
        """Update the config, events and active flag of a repository webhook.

        Raises:
            GitHubCommunicationError: If there was an error communicating with GitHub.
            GitHubApiError: If GitHub answered with anything other than 200.
            GitHubResponseError: If the response body is not a hook.
        """
        response = self._http_requests.patch(
            f"{_hooks_path(owner, repo)}/{hook_id}", _dump(hook), expected_status=200
        )

        return self._hook(response.content)

    def delete_hook(self, owner: str, repo: str, hook_id: int) -> None:
        """Delete a repository webhook.

        Raises:
            GitHubCommunicationError: If there was an error communicating with GitHub.
            GitHubApiError: If GitHub answered with anything other than 204.
        """
        self._http_requests.delete(f"{_hooks_path(owner, repo)}/{hook_id}", expected_status=204)

    def _hook(self, content: bytes) -> Hook:
        try:
            return Hook.model_validate(self.json_handler.loads_object(content))
        except (ValueError, ValidationError) as e:
            raise GitHubResponseError(f"Unreadable hook in GitHub response: {e}") from e


def _hooks_path(owner: str, repo: str) -> str:
    return f"repos/{owner}/{repo}/hooks"


def _dump(hook: HookCreate | HookUpdate) -> JsonDict:
    return hook.model_dump(exclude_none=True)
