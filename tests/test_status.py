import pytest

from github_webhook_resource._status import FAILURE_CODES, MESSAGE_RULES, error_code_for
from github_webhook_resource.models.progress import Action, HandlerErrorCode

DUPLICATE = "GitHubApiError.422 Validation Failed ['Hook already exists on this repository']"


@pytest.mark.parametrize(
    "action, status_code, message, expected",
    (
        (Action.CREATE, 422, "Validation Failed", HandlerErrorCode.INVALID_REQUEST),
        (Action.CREATE, 422, DUPLICATE, HandlerErrorCode.ALREADY_EXISTS),
        (Action.CREATE, 403, "", HandlerErrorCode.SERVICE_LIMIT_EXCEEDED),
        (Action.CREATE, 401, "", HandlerErrorCode.ACCESS_DENIED),
        (Action.CREATE, 404, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.CREATE, 500, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.CREATE, 200, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.READ, 403, "", HandlerErrorCode.SERVICE_LIMIT_EXCEEDED),
        (Action.READ, 401, "", HandlerErrorCode.ACCESS_DENIED),
        (Action.READ, 404, "", HandlerErrorCode.NOT_FOUND),
        (Action.READ, 422, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.READ, 502, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.UPDATE, 422, "Validation Failed", HandlerErrorCode.INVALID_REQUEST),
        (Action.UPDATE, 422, DUPLICATE, HandlerErrorCode.INVALID_REQUEST),
        (Action.UPDATE, 403, "", HandlerErrorCode.SERVICE_LIMIT_EXCEEDED),
        (Action.UPDATE, 401, "", HandlerErrorCode.ACCESS_DENIED),
        (Action.UPDATE, 404, "", HandlerErrorCode.NOT_FOUND),
        (Action.UPDATE, 500, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.DELETE, 403, "", HandlerErrorCode.SERVICE_LIMIT_EXCEEDED),
        (Action.DELETE, 401, "", HandlerErrorCode.ACCESS_DENIED),
        (Action.DELETE, 404, "", HandlerErrorCode.NOT_FOUND),
        (Action.DELETE, 422, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
        (Action.DELETE, 200, "", HandlerErrorCode.SERVICE_INTERNAL_ERROR),
    ),
)
def test_error_code_for(action, status_code, message, expected):
    assert error_code_for(action, status_code, message) == expected


@pytest.mark.parametrize("action", tuple(Action))
def test_error_code_for_no_response(action):
    assert error_code_for(action, None, "connection refused") == (
        HandlerErrorCode.SERVICE_INTERNAL_ERROR
    )


def test_error_code_for_list():
    assert error_code_for(Action.LIST, 404) == HandlerErrorCode.SERVICE_INTERNAL_ERROR


def test_failure_codes_read_only():
    with pytest.raises(TypeError):
        FAILURE_CODES[Action.CREATE][500] = HandlerErrorCode.INVALID_REQUEST  # type: ignore[index]


def test_message_rules_only_refine_create():
    assert {rule.action for rule in MESSAGE_RULES} == {Action.CREATE}
