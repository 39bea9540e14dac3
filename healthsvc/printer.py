class ResponseBodyPrinter:
    """Writes a complete HTTP response through a BaseHTTPRequestHandler.

    Subclasses provide ``response_code``, ``content_type`` and
    ``response_body``. Pass ``send_body=False`` to answer a HEAD request.
    """

    response_code: int
    content_type: str
    response_body: str

    def print_response_body(self, handler, send_headers: bool = True, send_body: bool = True) -> None:
        body = self.response_body.encode("utf-8")
        if send_headers:
            handler.send_response(self.response_code)
            handler.send_header("Content-Type", self.content_type)
            handler.send_header("Content-Length", str(len(body)))
            handler.end_headers()
        if send_body:
            handler.wfile.write(body)
