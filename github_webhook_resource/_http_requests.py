from __future__ import annotations

from functools import lru_cache
from typing import Callable

from httpx import (
    Client,
    ConnectError,
    ConnectTimeout,
    HTTPError,
    RemoteProtocolError,
    Response,
)

from github_webhook_resource._version import VERSION
from github_webhook_resource.errors import (
    GitHubApiError,
    GitHubCommunicationError,
    GitHubError,
)
from github_webhook_resource.json_handler import JsonHandler
from github_webhook_resource.types import JsonDict


class HttpRequests:
    def __init__(self, http_client: Client, json_handler: JsonHandler) -> None:
        self.http_client = http_client
        self.json_handler = json_handler

    def _send_request(
        self,
        http_method: Callable,
        path: str,
        body: JsonDict | None = None,
        expected_status: int | None = None,
    ) -> Response:
        try:
            if body is None:
                response = http_method(path)
            else:
                response = http_method(
                    path, content=self.json_handler.dumps(body), headers=build_headers()
                )

            response.raise_for_status()
        except (ConnectError, ConnectTimeout, RemoteProtocolError) as err:
            raise GitHubCommunicationError(str(err)) from err
        except HTTPError as err:
            if "response" in locals():
                raise GitHubApiError(str(err), response) from err

            # Fail safe just in case error happens before response is created
            raise GitHubError(str(err)) from err

        # GitHub documents one success status per hook call, any other 2xx is unexpected
        if expected_status is not None and response.status_code != expected_status:
            raise GitHubApiError(
                f"Unexpected status code {response.status_code}, expected {expected_status}",
                response,
            )

        return response

    def get(self, path: str, *, expected_status: int | None = None) -> Response:
        return self._send_request(self.http_client.get, path, expected_status=expected_status)

    def patch(
        self, path: str, body: JsonDict | None = None, *, expected_status: int | None = None
    ) -> Response:
        return self._send_request(self.http_client.patch, path, body, expected_status)

    def post(
        self, path: str, body: JsonDict | None = None, *, expected_status: int | None = None
    ) -> Response:
        return self._send_request(self.http_client.post, path, body, expected_status)

    def delete(self, path: str, *, expected_status: int | None = None) -> Response:
        return self._send_request(self.http_client.delete, path, expected_status=expected_status)


def build_headers() -> dict[str, str]:
    return {"user-agent": user_agent(), "Content-Type": "application/json"}


@lru_cache(maxsize=1)
def user_agent() -> str:
    return f"GitHub Webhook Resource (v{VERSION})"
