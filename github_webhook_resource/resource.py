from __future__ import annotations

import logging
from ssl import SSLContext
from typing import Callable

from github_webhook_resource._client import GITHUB_API_URL, GitHubClient
from github_webhook_resource._status import error_code_for
from github_webhook_resource._utils import HookIdentifier, parse_webhook_url
from github_webhook_resource.errors import (
    GitHubApiError,
    GitHubError,
    InvalidHookConfigError,
    InvalidWebhookUrlError,
)
from github_webhook_resource.json_handler import JsonHandler
from github_webhook_resource.models.progress import Action, HandlerErrorCode, ProgressEvent
from github_webhook_resource.models.resource import ResourceModel

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], GitHubClient]


class WebhookResource:
    """Create, read, update and delete handlers for a GitHub repository webhook.

    Every handler validates the models locally, makes at most one call to GitHub and returns
    a ProgressEvent. Failures are reported in the event, nothing is retried.
    """

    def __init__(
        self,
        *,
        base_url: str = GITHUB_API_URL,
        timeout: int | None = None,
        verify: bool | SSLContext = True,
        custom_headers: dict[str, str] | None = None,
        json_handler: JsonHandler | None = None,
        http2: bool = False,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Class initializer.

        Args:
            base_url: The url to the GitHub API. Defaults to https://api.github.com.
            timeout: Seconds to wait for GitHub before timing out. Defaults to None.
            verify: SSL verification passed on to the http client. Defaults to True.
            custom_headers: Extra headers sent with every request. Defaults to None.
            json_handler: The json handler used by the client. Default: BuiltinHandler.
            http2: Whether or not to use HTTP/2. Defaults to False.
            client_factory: Builds the client for a token. When set the connection settings
                above are ignored. Defaults to None.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.verify = verify
        self.custom_headers = custom_headers
        self.json_handler = json_handler
        self.http2 = http2
        self._client_factory = client_factory

    def create(
        self, previous_model: ResourceModel | None, current_model: ResourceModel
    ) -> ProgressEvent:
        """Creates the webhook described by current_model.

        Args:
            previous_model: Unused, the orchestrator has no previous state at creation.
            current_model: The desired webhook. Token, Owner, Repo and PayloadURL are required
                and WebhookURL must not be set.

        Returns:
            A success event carrying the model updated from the created hook, or a failed event.
        """
        if current_model.token is None:
            return self._invalid(Action.CREATE, "Missing required parameter Token")
        if current_model.owner is None:
            return self._invalid(Action.CREATE, "Missing create only parameter: Owner")
        if current_model.repo is None:
            return self._invalid(Action.CREATE, "Missing create only parameter: Repo")
        if current_model.webhook_url is not None:
            return self._invalid(Action.CREATE, "Read only property WebhookURL part of the request")

        try:
            hook_create = current_model.build_hook_create()
        except InvalidHookConfigError as e:
            return self._invalid(Action.CREATE, str(e))

        logger.debug("Creating webhook on %s/%s", current_model.owner, current_model.repo)
        with self._client(current_model.token) as client:
            try:
                hook = client.create_hook(current_model.owner, current_model.repo, hook_create)
            except GitHubError as e:
                return self._remote_failure(Action.CREATE, e)

        logger.debug("Created webhook %s", hook.url)
        return ProgressEvent.success("Create complete", current_model.updated_from(hook))

    def read(
        self, previous_model: ResourceModel | None, current_model: ResourceModel
    ) -> ProgressEvent:
        """Reads the webhook identified by current_model.webhook_url."""
        identifier = self._identify(Action.READ, current_model)
        if isinstance(identifier, ProgressEvent):
            return identifier

        logger.debug("Reading webhook %s", current_model.webhook_url)
        with self._client(current_model.token) as client:  # type: ignore[arg-type]
            try:
                hook = client.get_hook(identifier.owner, identifier.repo, identifier.hook_id)
            except GitHubError as e:
                return self._remote_failure(Action.READ, e)

        return ProgressEvent.success("Read complete", current_model.updated_from(hook))

    def update(
        self, previous_model: ResourceModel | None, current_model: ResourceModel
    ) -> ProgressEvent:
        """Updates the config, events and active flag of an existing webhook.

        Owner, Repo and WebhookURL are create only, changing any of them fails with
        NotUpdatable before GitHub is called.
        """
        if previous_model is None:
            return self._invalid(Action.UPDATE, "Missing previous resource state")

        if (
            previous_model.owner != current_model.owner
            or previous_model.repo != current_model.repo
            or previous_model.webhook_url != current_model.webhook_url
        ):
            return self._fail(
                Action.UPDATE,
                HandlerErrorCode.NOT_UPDATABLE,
                "Cannot update create only parameter",
            )

        try:
            hook_update = current_model.build_hook_update()
        except InvalidHookConfigError as e:
            return self._invalid(Action.UPDATE, str(e))

        identifier = self._identify(Action.UPDATE, current_model)
        if isinstance(identifier, ProgressEvent):
            return identifier

        logger.debug("Updating webhook %s", current_model.webhook_url)
        with self._client(current_model.token) as client:  # type: ignore[arg-type]
            try:
                hook = client.edit_hook(
                    identifier.owner, identifier.repo, identifier.hook_id, hook_update
                )
            except GitHubError as e:
                return self._remote_failure(Action.UPDATE, e)

        return ProgressEvent.success("Update complete", current_model.updated_from(hook))

    def delete(
        self, previous_model: ResourceModel | None, current_model: ResourceModel
    ) -> ProgressEvent:
        """Deletes the webhook identified by current_model.webhook_url.

        A successful delete carries no resource model.
        """
        identifier = self._identify(Action.DELETE, current_model)
        if isinstance(identifier, ProgressEvent):
            return identifier

        logger.debug("Deleting webhook %s", current_model.webhook_url)
        with self._client(current_model.token) as client:  # type: ignore[arg-type]
            try:
                client.delete_hook(identifier.owner, identifier.repo, identifier.hook_id)
            except GitHubError as e:
                return self._remote_failure(Action.DELETE, e)

        return ProgressEvent.success("Delete complete")

    def list(
        self, previous_model: ResourceModel | None, current_model: ResourceModel
    ) -> ProgressEvent:
        """Listing webhooks is not supported, this always raises NotImplementedError."""
        raise NotImplementedError("Not implemented: List")

    def handle(
        self,
        action: Action | str,
        previous_model: ResourceModel | None,
        current_model: ResourceModel,
    ) -> ProgressEvent:
        """Runs the handler for an orchestrator action.

        Args:
            action: The action to run, either an Action or its name in any case.
            previous_model: The last known state of the resource.
            current_model: The desired state of the resource.

        Raises:
            ValueError: If the action is unknown.
            NotImplementedError: For the LIST action.
        """
        if not isinstance(action, Action):
            try:
                action = Action(action.upper())
            except ValueError:
                raise ValueError(f"Unknown action: {action}") from None

        handlers = {
            Action.CREATE: self.create,
            Action.READ: self.read,
            Action.UPDATE: self.update,
            Action.DELETE: self.delete,
            Action.LIST: self.list,
        }

        return handlers[action](previous_model, current_model)

    def _client(self, token: str) -> GitHubClient:
        if self._client_factory:
            return self._client_factory(token)

        return GitHubClient(
            token,
            base_url=self.base_url,
            timeout=self.timeout,
            verify=self.verify,
            custom_headers=self.custom_headers,
            json_handler=self.json_handler,
            http2=self.http2,
        )

    def _identify(
        self, action: Action, current_model: ResourceModel
    ) -> HookIdentifier | ProgressEvent:
        if current_model.webhook_url is None:
            return self._fail(
                action, HandlerErrorCode.NOT_FOUND, "Missing primary identifier: WebhookURL"
            )
        if current_model.token is None:
            return self._invalid(action, "Missing required parameter Token")

        try:
            return parse_webhook_url(current_model.webhook_url)
        except InvalidWebhookUrlError as e:
            return self._fail(action, HandlerErrorCode.NOT_FOUND, str(e))

    def _invalid(self, action: Action, message: str) -> ProgressEvent:
        return self._fail(action, HandlerErrorCode.INVALID_REQUEST, message)

    def _fail(self, action: Action, error_code: HandlerErrorCode, message: str) -> ProgressEvent:
        logger.warning("%s failed with %s: %s", action.value, error_code.value, message)
        return ProgressEvent.failed(error_code, message)

    def _remote_failure(self, action: Action, error: GitHubError) -> ProgressEvent:
        status_code = error.status_code if isinstance(error, GitHubApiError) else None
        message = str(error)

        return self._fail(action, error_code_for(action, status_code, message), message)
