from http.server import BaseHTTPRequestHandler
from urllib.parse import parse_qsl, urlsplit

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


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        """Host sanity endpoint."""
        self._dispatch()

    def do_HEAD(self):
        self._dispatch()

    def do_OPTIONS(self):
        self._dispatch()

    def do_POST(self):
        self._dispatch()

    def do_PUT(self):
        self._dispatch()

    def do_PATCH(self):
        self._dispatch()

    def do_DELETE(self):
        self._dispatch()

    def _read_body(self):
        length = int(self.headers.get("Content-Length") or 0)
        if length <= 0:
            return None
        if length > MAX_BODY_BYTES:
            # Drain the oversize body so the client can read the 413.
            remaining = length
            while remaining > 0:
                chunk = self.rfile.read(min(remaining, 65536))
                if not chunk:
                    break
                remaining -= len(chunk)
            raise RequestBodyTooLargeException(MAX_BODY_BYTES)
        return self.rfile.read(length)

    def _dispatch(self):
        send_body = self.command != "HEAD"
        try:
            request = HostSanityRequest(
                request_method=self.command,
                request_query=dict(parse_qsl(urlsplit(self.path).query, keep_blank_values=True)),
                request_body=self._read_body(),
                content_type=self.headers.get("Content-Type"),
            )
            config = get_config()
            response = HostSanityResponse(
                HostSanityStatusData(health_status_ttl=config.ttl, hostname=config.hostname)
            )
        except RequestMethodNotAllowedException as e:
            LOGGER.warning("rejected method=%s path=%s", e.request_method, self.path)
            e.print_response_body(self, send_body=send_body)
            return
        except ResponseException as e:
            LOGGER.info("method=%s path=%s code=%s", self.command, self.path, e.response_code)
            e.print_response_body(self, send_body=send_body)
            return
        except Exception:
            LOGGER.exception("method=%s path=%s failed", self.command, self.path)
            self.send_response(500)
            self.send_header("Content-Type", "text/plain")
            self.end_headers()
            if send_body:
                self.wfile.write(b"Internal Server Error")
            return

        LOGGER.info("method=%s path=%s code=%s", self.command, self.path, response.response_code)
        response.print_response_body(self, send_body=send_body)

    def log_message(self, format, *args):
        LOGGER.debug(format, *args)
