"""Request/response layer for the healthsvc status endpoints."""

from .exceptions import (
    RequestBodyInvalidException,
    RequestBodyTooLargeException,
    RequestMethodNotAllowedException,
    ResponseDataInvalidException,
    ResponseException,
)
from .info import CommandErrorInfoItem, ErrorInfoItem, InfoItem
from .request import HostSanityRequest, Request, is_method_allowed
from .response import HostSanityResponse, Response
from .status import HostSanityStatusData, StatusData

__all__ = [
    "CommandErrorInfoItem",
    "ErrorInfoItem",
    "HostSanityRequest",
    "HostSanityResponse",
    "HostSanityStatusData",
    "InfoItem",
    "Request",
    "RequestBodyInvalidException",
    "RequestBodyTooLargeException",
    "RequestMethodNotAllowedException",
    "Response",
    "ResponseDataInvalidException",
    "ResponseException",
    "StatusData",
    "is_method_allowed",
]
