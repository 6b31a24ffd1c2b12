import json
from datetime import datetime

import pytest

from github_webhook_resource.json_handler import BuiltinHandler, OrjsonHandler, UjsonHandler


class DatetimeEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()

        return super().default(o)


def test_builtin_handlers_keep_their_own_serializer():
    custom = BuiltinHandler(serializer=DatetimeEncoder)
    plain = BuiltinHandler()
    body = {"config": {"url": "https://x.example/hook"}, "sent_at": datetime(2024, 1, 2, 3, 4, 5)}

    assert custom.serializer is DatetimeEncoder
    assert plain.serializer is None
    assert json.loads(custom.dumps(body))["sent_at"] == "2024-01-02T03:04:05"
    with pytest.raises(TypeError):
        plain.dumps(body)


@pytest.mark.parametrize("json_handler", (BuiltinHandler(), OrjsonHandler(), UjsonHandler()))
def test_dumps_hook_body(json_handler):
    body = {"name": "web", "config": {"url": "https://x.example/hook"}, "events": ["push"]}

    assert json.loads(json_handler.dumps(body)) == body


@pytest.mark.parametrize("json_handler", (BuiltinHandler(), OrjsonHandler(), UjsonHandler()))
def test_loads_object(json_handler):
    assert json_handler.loads_object(b'{"id": 123456789, "active": true}') == {
        "id": 123456789,
        "active": True,
    }


@pytest.mark.parametrize("json_handler", (BuiltinHandler(), OrjsonHandler(), UjsonHandler()))
@pytest.mark.parametrize("content", (b'["web"]', b"null", b"42", b'"hook"'))
def test_loads_object_rejects_other_json(json_handler, content):
    with pytest.raises(ValueError, match="Expected a JSON object"):
        json_handler.loads_object(content)


@pytest.mark.parametrize("json_handler", (BuiltinHandler(), OrjsonHandler(), UjsonHandler()))
def test_loads_object_not_json(json_handler):
    with pytest.raises(ValueError):
        json_handler.loads_object(b"<html>Bad Gateway</html>")
