import json
from typing import Any, Optional, Union
from urllib.parse import parse_qsl

import yaml

from .exceptions import RequestBodyInvalidException

# Cap body to 10 KB
MAX_BODY_BYTES = 10_000

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
YAML_CONTENT_TYPES = {"application/yaml", "application/x-yaml", "text/yaml", "text/x-yaml"}


def media_type(content_type: Optional[str]) -> str:
    """Return the bare, lower-cased media type of a Content-Type header."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def parse_request_body(body: Union[str, bytes, None], content_type: Optional[str]) -> Any:
    """Parse a raw request body according to its content type.

    JSON and YAML bodies are decoded, form bodies become a dict and anything
    else is returned as the raw string. Missing or empty bodies give None.
    """
    if body is None:
        return None
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RequestBodyInvalidException("UTF-8", str(exc)) from exc
    if body == "":
        return None

    kind = media_type(content_type)
    if kind == "application/json" or kind.endswith("+json"):
        try:
            return json.loads(body)
        except ValueError as exc:
            raise RequestBodyInvalidException("JSON", str(exc)) from exc
    if kind == FORM_CONTENT_TYPE:
        return dict(parse_qsl(body, keep_blank_values=True))
    if kind in YAML_CONTENT_TYPES:
        try:
            return yaml.safe_load(body)
        except yaml.YAMLError as exc:
            raise RequestBodyInvalidException("YAML", str(exc)) from exc
    return body
