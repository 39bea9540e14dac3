"""Inbound request model.

The transport adapter hands in the method, query, raw body and content type
it received; nothing here reads server state on its own.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from .body import parse_request_body
from .exceptions import RequestMethodNotAllowedException


def is_method_allowed(method: str, allowed_methods: Iterable[str]) -> bool:
    return method in allowed_methods


class Request(ABC):
    ALLOWED_METHODS: FrozenSet[str] = frozenset()

    def __init__(
        self,
        request_method: Optional[str] = None,
        request_query: Optional[Mapping[str, Any]] = None,
        request_body: Union[str, bytes, None] = None,
        content_type: Optional[str] = None,
    ) -> None:
        self._request_method = request_method if request_method is not None else "GET"
        if not self.is_request_method_allowed():
            raise RequestMethodNotAllowedException(self._request_method)

        self._request_query: Dict[str, Any] = dict(request_query) if request_query is not None else {}
        self._content_type = content_type
        self._request_body = parse_request_body(request_body, content_type)

    @abstractmethod
    def is_request_method_allowed(self) -> bool:
        """Whether the resolved method is in this request type's allow-list."""

    @property
    def request_method(self) -> str:
        return self._request_method

    @property
    def request_query(self) -> Dict[str, Any]:
        return dict(self._request_query)

    @property
    def request_body(self) -> Any:
        return self._request_body

    @property
    def content_type(self) -> Optional[str]:
        return self._content_type


class HostSanityRequest(Request):
    ALLOWED_METHODS = frozenset({"GET"})

    def is_request_method_allowed(self) -> bool:
        return is_method_allowed(self.request_method, self.ALLOWED_METHODS)
