import pytest
from httpx import Request, Response

from github_webhook_resource import ResourceModel, WebhookResource

TOKEN = "ghp_token"
OWNER = "o"
REPO = "r"
PAYLOAD_URL = "https://x.example/hook"
WEBHOOK_URL = "https://api.example.com/repos/o/r/hooks/123456789"


@pytest.fixture
def resource():
    return WebhookResource(base_url="https://api.example.com")


@pytest.fixture
def create_model():
    return ResourceModel(Token=TOKEN, Owner=OWNER, Repo=REPO, PayloadURL=PAYLOAD_URL)


@pytest.fixture
def existing_model():
    return ResourceModel(
        Token=TOKEN,
        Owner=OWNER,
        Repo=REPO,
        PayloadURL=PAYLOAD_URL,
        ContentType="json",
        InsecureSSL=False,
        Events=["push"],
        Active=True,
        WebhookURL=WEBHOOK_URL,
    )


@pytest.fixture
def hook_json():
    def _hook_json(**config):
        return {
            "type": "Repository",
            "id": 123456789,
            "name": "web",
            "active": True,
            "events": ["push"],
            "config": {
                "url": PAYLOAD_URL,
                "content_type": "json",
                "insecure_ssl": "0",
                **config,
            },
            "updated_at": "2019-06-03T00:57:16Z",
            "created_at": "2019-06-03T00:57:16Z",
            "url": WEBHOOK_URL,
            "test_url": f"{WEBHOOK_URL}/test",
            "ping_url": f"{WEBHOOK_URL}/pings",
            "deliveries_url": f"{WEBHOOK_URL}/deliveries",
        }

    return _hook_json


@pytest.fixture
def github_response():
    def _github_response(method, status_code, json=None, text=None):
        kwargs = {}
        if json is not None:
            kwargs["json"] = json
        elif text is not None:
            kwargs["text"] = text

        return Response(
            status_code=status_code,
            request=Request(method, url="https://api.example.com/repos/o/r/hooks"),
            **kwargs,
        )

    return _github_response


@pytest.fixture
def error_json():
    def _error_json(message, *errors):
        body = {
            "message": message,
            "documentation_url": "https://docs.github.com/rest/repos/webhooks",
        }
        if errors:
            body["errors"] = [{"resource": "Hook", "code": "custom", "message": e} for e in errors]

        return body

    return _error_json
