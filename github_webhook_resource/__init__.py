from github_webhook_resource._client import GitHubClient
from github_webhook_resource._version import VERSION
from github_webhook_resource.models.progress import (
    Action,
    HandlerErrorCode,
    OperationStatus,
    ProgressEvent,
)
from github_webhook_resource.models.resource import ResourceModel
from github_webhook_resource.resource import WebhookResource

__version__ = VERSION


__all__ = [
    "Action",
    "GitHubClient",
    "HandlerErrorCode",
    "OperationStatus",
    "ProgressEvent",
    "ResourceModel",
    "WebhookResource",
]
