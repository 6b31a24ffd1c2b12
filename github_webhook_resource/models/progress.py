from __future__ import annotations

from enum import Enum

from camel_converter.pydantic_base import CamelBase

from github_webhook_resource.models.resource import ResourceModel


class Action(str, Enum):
    CREATE = "CREATE"
    READ = "READ"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LIST = "LIST"


class OperationStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    IN_PROGRESS = "IN_PROGRESS"


class HandlerErrorCode(str, Enum):
    INVALID_REQUEST = "InvalidRequest"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    NOT_UPDATABLE = "NotUpdatable"
    ACCESS_DENIED = "AccessDenied"
    SERVICE_LIMIT_EXCEEDED = "ServiceLimitExceeded"
    SERVICE_INTERNAL_ERROR = "ServiceInternalError"


class ProgressEvent(CamelBase):
    """The result of a handler invocation reported back to the orchestrator."""

    status: OperationStatus
    error_code: HandlerErrorCode | None = None
    message: str = ""
    resource_model: ResourceModel | None = None

    @classmethod
    def success(cls, message: str, resource_model: ResourceModel | None = None) -> ProgressEvent:
        return cls(status=OperationStatus.SUCCESS, message=message, resource_model=resource_model)

    @classmethod
    def failed(cls, error_code: HandlerErrorCode, message: str) -> ProgressEvent:
        return cls(status=OperationStatus.FAILED, error_code=error_code, message=message)
