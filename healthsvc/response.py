"""Outbound response model."""

import copy
import json
from abc import ABC
from typing import Any, Dict, Iterable, Mapping

from .exceptions import ResponseDataInvalidException
from .info import AnyInfoItem
from .printer import ResponseBodyPrinter
from .status import StatusData

JSON_CONTENT_TYPE = "application/json"


class Response(ABC, ResponseBodyPrinter):
    """Either JSON-encoded response data or an opaque body.

    When ``has_response_data`` is true the body is always the JSON encoding
    of ``response_data``.
    """

    def __init__(self) -> None:
        self._has_response_data = False
        self._response_data: Dict[str, Any] = {}
        self._response_body = ""
        self._content_type = JSON_CONTENT_TYPE
        self._response_code = 200

    @property
    def response_code(self) -> int:
        return self._response_code

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def response_body(self) -> str:
        return self._response_body

    @property
    def has_response_data(self) -> bool:
        return self._has_response_data

    @property
    def response_data(self) -> Dict[str, Any]:
        return copy.deepcopy(self._response_data)

    def _set_response_body(self, response_body: str, content_type: str, response_code: int = 200) -> None:
        self._has_response_data = False
        self._response_data = {}
        self._response_body = response_body
        self._content_type = content_type
        self._response_code = response_code

    def _set_response_data(self, response_data: Mapping[str, Any], response_code: int = 200) -> None:
        try:
            body = json.dumps(response_data, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise ResponseDataInvalidException(f"error while encoding json: {exc}") from exc
        # slashes are escaped as \/ on the wire
        body = body.replace("/", "\\/")
        self._set_response_body(body, JSON_CONTENT_TYPE, response_code)
        self._response_data = copy.deepcopy(dict(response_data))
        self._has_response_data = True


class HostSanityResponse(Response):
    def __init__(
        self,
        status: StatusData,
        info_items: Iterable[AnyInfoItem] = (),
        response_code: int = 200,
    ) -> None:
        super().__init__()
        data = status.to_dict()
        items = [item.to_dict() for item in info_items]
        if items:
            data["info"] = items
        self._set_response_data(data, response_code)
