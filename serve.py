from typing import Union

from flask import Flask, Response, make_response, request
from werkzeug.exceptions import RequestEntityTooLarge

from healthsvc.body import MAX_BODY_BYTES
from healthsvc.config import get_config
from healthsvc.exceptions import (
    RequestBodyTooLargeException,
    RequestMethodNotAllowedException,
    ResponseException,
)
from healthsvc.log import LOGGER
from healthsvc.request import HostSanityRequest
from healthsvc.response import HostSanityResponse
from healthsvc.status import HostSanityStatusData

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = MAX_BODY_BYTES

# The allow-list lives on the request types, so every method reaches the view.
ANY_METHOD = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]


def to_flask_response(resp: Union[HostSanityResponse, ResponseException]) -> Response:
    """Convert a healthsvc response (or response exception) for Flask."""
    out = make_response(resp.response_body, resp.response_code)
    out.headers["Content-Type"] = resp.content_type
    return out


@app.errorhandler(ResponseException)
def handle_response_exception(e: ResponseException) -> Response:
    if isinstance(e, RequestMethodNotAllowedException):
        LOGGER.warning("rejected method=%s path=%s", e.request_method, request.path)
    return to_flask_response(e)


@app.errorhandler(RequestEntityTooLarge)
def handle_entity_too_large(e: RequestEntityTooLarge) -> Response:
    return to_flask_response(RequestBodyTooLargeException(MAX_BODY_BYTES))


@app.route("/health", methods=ANY_METHOD, provide_automatic_options=False)
@app.route("/api/health", methods=ANY_METHOD, provide_automatic_options=False)
def host_sanity() -> Response:
    """Report the host sanity status."""
    if request.content_length is not None and request.content_length > MAX_BODY_BYTES:
        raise RequestBodyTooLargeException(MAX_BODY_BYTES)
    req = HostSanityRequest(
        request_method=request.method,
        request_query={k: request.args.getlist(k)[-1] for k in request.args},
        request_body=request.get_data(),
        content_type=request.content_type,
    )
    config = get_config()
    resp = HostSanityResponse(
        HostSanityStatusData(health_status_ttl=config.ttl, hostname=config.hostname)
    )
    LOGGER.info("method=%s path=%s code=%s", req.request_method, request.path, resp.response_code)
    return to_flask_response(resp)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=get_config().port, debug=False)
