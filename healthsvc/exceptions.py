"""Failures raised while handling a health request.

Everything deriving from :class:`ResponseException` is also a complete HTTP
response and can be printed straight back to the client.
"""

from .printer import ResponseBodyPrinter

TEXT_CONTENT_TYPE = "text/plain"


class ResponseException(RuntimeError, ResponseBodyPrinter):
    RESPONSE_CODE = 500
    CONTENT_TYPE = TEXT_CONTENT_TYPE

    @property
    def response_code(self) -> int:
        return self.RESPONSE_CODE

    @property
    def content_type(self) -> str:
        return self.CONTENT_TYPE

    @property
    def response_body(self) -> str:
        return str(self)


class RequestMethodNotAllowedException(ResponseException):
    RESPONSE_CODE = 405

    def __init__(self, request_method: str) -> None:
        self.request_method = request_method
        super().__init__(f"the '{request_method}' method is not allowed for this resource")


class RequestBodyInvalidException(ResponseException):
    RESPONSE_CODE = 400

    def __init__(self, body_format: str, detail: str) -> None:
        self.body_format = body_format
        super().__init__(f"the request body is not valid {body_format}: {detail}")


class RequestBodyTooLargeException(ResponseException):
    RESPONSE_CODE = 413

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"the request body exceeds the limit of {limit} bytes")


class ResponseDataInvalidException(RuntimeError):
    """Response data could not be encoded; a server-side defect."""
