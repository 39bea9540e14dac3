from __future__ import annotations

import pytest

from healthsvc.exceptions import RequestMethodNotAllowedException
from healthsvc.request import HostSanityRequest, Request, is_method_allowed


class AnyWriteRequest(Request):
    """Request type with a wider allow-list used to exercise the base class."""

    ALLOWED_METHODS = frozenset({"POST", "PUT"})

    def is_request_method_allowed(self) -> bool:
        return is_method_allowed(self.request_method, self.ALLOWED_METHODS)


REQUEST_TYPES = [HostSanityRequest, AnyWriteRequest]
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "get"]


@pytest.mark.parametrize("request_type", REQUEST_TYPES)
@pytest.mark.parametrize("method", METHODS)
def test_allow_list_decides_construction(request_type: type, method: str) -> None:
    if method in request_type.ALLOWED_METHODS:
        assert request_type(method).request_method == method
    else:
        with pytest.raises(RequestMethodNotAllowedException) as excinfo:
            request_type(method)
        assert excinfo.value.request_method == method


def test_host_sanity_rejects_post() -> None:
    with pytest.raises(RequestMethodNotAllowedException) as excinfo:
        HostSanityRequest("POST")
    exc = excinfo.value
    assert "POST" in str(exc)
    assert exc.response_code == 405
    assert exc.content_type == "text/plain"


def test_host_sanity_get_with_query() -> None:
    request = HostSanityRequest("GET", {"foo": "bar"})
    assert request.request_method == "GET"
    assert request.request_query == {"foo": "bar"}


def test_defaults() -> None:
    request = HostSanityRequest()
    assert request.request_method == "GET"
    assert request.request_query == {}
    assert request.request_body is None
    assert request.content_type is None


def test_body_is_parsed_by_content_type() -> None:
    request = HostSanityRequest("GET", None, '{"verbose": true}', "application/json")
    assert request.request_body == {"verbose": True}
    assert request.content_type == "application/json"


def test_rejected_method_skips_body_parsing() -> None:
    with pytest.raises(RequestMethodNotAllowedException):
        HostSanityRequest("POST", None, "{", "application/json")


def test_query_is_copied() -> None:
    query = {"foo": "bar"}
    request = HostSanityRequest("GET", query)
    query["foo"] = "changed"
    request.request_query["foo"] = "changed"
    assert request.request_query == {"foo": "bar"}


def test_base_request_is_abstract() -> None:
    with pytest.raises(TypeError):
        Request()  # type: ignore[abstract]
