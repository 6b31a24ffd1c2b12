from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, TypeAlias

from github_webhook_resource.types import JsonDict

try:
    import orjson
except ImportError:  # pragma: nocover
    orjson = None  # type: ignore

try:
    import ujson
except ImportError:  # pragma: nocover
    ujson = None  # type: ignore


class _JsonHandler(ABC):
    """Encodes hook request bodies and decodes GitHub responses."""

    @abstractmethod
    def dumps(self, body: JsonDict) -> str: ...

    @abstractmethod
    def loads(self, content: str | bytes | bytearray) -> Any: ...

    def loads_object(self, content: str | bytes | bytearray) -> JsonDict:
        """Decode a response body GitHub documents as a single JSON object.

        Raises:
            ValueError: If the content is not JSON or not a JSON object.
        """
        body = self.loads(content)
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")

        return body


class BuiltinHandler(_JsonHandler):
    def __init__(self, serializer: type[json.JSONEncoder] | None = None) -> None:
        """Uses the json module from the Python standard library.

        Args:
            serializer: A custom JSONEncoder used when a hook body contains values the
                built in json.dumps cannot handle. Defaults to None.
        """
        self.serializer = serializer

    def dumps(self, body: JsonDict) -> str:
        return json.dumps(body, cls=self.serializer)

    def loads(self, content: str | bytes | bytearray) -> Any:
        return json.loads(content)


class OrjsonHandler(_JsonHandler):
    def __init__(self) -> None:
        if orjson is None:  # pragma: no cover
            raise ValueError("orjson must be installed to use the OrjsonHandler")

    def dumps(self, body: JsonDict) -> str:
        return orjson.dumps(body).decode("utf-8")

    def loads(self, content: str | bytes | bytearray) -> Any:
        return orjson.loads(content)


class UjsonHandler(_JsonHandler):
    def __init__(self) -> None:
        if ujson is None:  # pragma: no cover
            raise ValueError("ujson must be installed to use the UjsonHandler")

    def dumps(self, body: JsonDict) -> str:
        return ujson.dumps(body)

    def loads(self, content: str | bytes | bytearray) -> Any:
        return ujson.loads(content)


JsonHandler: TypeAlias = BuiltinHandler | OrjsonHandler | UjsonHandler
