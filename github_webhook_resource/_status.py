from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Final, NamedTuple

from github_webhook_resource.models.progress import Action, HandlerErrorCode

DUPLICATE_HOOK_MESSAGE = "Hook already exists on this repository"

_AUTH_FAILURES = {
    403: HandlerErrorCode.SERVICE_LIMIT_EXCEEDED,
    401: HandlerErrorCode.ACCESS_DENIED,
}

FAILURE_CODES: Final[Mapping[Action, Mapping[int, HandlerErrorCode]]] = MappingProxyType(
    {
        Action.CREATE: MappingProxyType({422: HandlerErrorCode.INVALID_REQUEST, **_AUTH_FAILURES}),
        Action.READ: MappingProxyType({**_AUTH_FAILURES, 404: HandlerErrorCode.NOT_FOUND}),
        Action.UPDATE: MappingProxyType(
            {
                422: HandlerErrorCode.INVALID_REQUEST,
                **_AUTH_FAILURES,
                404: HandlerErrorCode.NOT_FOUND,
            }
        ),
        Action.DELETE: MappingProxyType({**_AUTH_FAILURES, 404: HandlerErrorCode.NOT_FOUND}),
    }
)


def _is_duplicate_hook(message: str) -> bool:
    return DUPLICATE_HOOK_MESSAGE in message


class MessageRule(NamedTuple):
    """Refines the error code of a status when the error message matches.

    action: The action the rule applies to.
    status_code: The HTTP status the rule applies to.
    matches: Predicate run against the full error message.
    error_code: The code used when the predicate matches.
    """

    action: Action
    status_code: int
    matches: Callable[[str], bool]
    error_code: HandlerErrorCode


# Only create distinguishes a duplicate hook, a 422 on update is always InvalidRequest.
MESSAGE_RULES: Final[tuple[MessageRule, ...]] = (
    MessageRule(Action.CREATE, 422, _is_duplicate_hook, HandlerErrorCode.ALREADY_EXISTS),
)


def error_code_for(action: Action, status_code: int | None, message: str = "") -> HandlerErrorCode:
    """Looks up the error code to report for a failed GitHub call.

    Args:
        action: The handler action that made the call.
        status_code: The HTTP status GitHub answered with, or None when no response was
            received.
        message: The error message, used by the message rules.

    Returns:
        The matching error code, ServiceInternalError when nothing matches.
    """
    if status_code is None:
        return HandlerErrorCode.SERVICE_INTERNAL_ERROR

    for rule in MESSAGE_RULES:
        if rule.action == action and rule.status_code == status_code and rule.matches(message):
            return rule.error_code

    return FAILURE_CODES.get(action, {}).get(status_code, HandlerErrorCode.SERVICE_INTERNAL_ERROR)
