"""
Request abstraction consumed by the verifier

The verifier only needs the protocol, host, original URL (path plus query)
and method of a request. Two shapes are accepted: objects exposing those
four attributes (see CustomRequest) and accessor-style requests whose
`get("host")` returns the host header.
"""

from dataclasses import dataclass
from typing import Any

from ..constants import (
    URL_HOST_PARAM_NAME,
    REQ_UNDEFINED,
    REQ_PROTOCOL_UNDEFINED,
    REQ_HOST_UNDEFINED,
    REQ_METHOD_UNDEFINED,
    REQ_ORIGINAL_URL_UNDEFINED,
)
from ..exceptions import InputError, ErrorCodes


@dataclass
class CustomRequest:
    """
    Framework independent request
    
    Attributes:
        protocol: 'http' or 'https'
        host: Host (and port) the request was sent to
        original_url: Path and query string as received
        method: HTTP method
    """
    protocol: str
    host: str
    original_url: str
    method: str


def _require_str(request: Any, name: str, message: str) -> str:
    value = getattr(request, name, None)
    if not isinstance(value, str) or not value:
        raise InputError(message, ErrorCodes.INVALID_REQUEST, {"field": name})
    return value


def validate_request(request: Any) -> None:
    """
    Validate a request object.
    
    Raises:
        InputError: If the request or any of its fields is missing
    """
    if request is None:
        raise InputError(REQ_UNDEFINED, ErrorCodes.INVALID_REQUEST)
    
    _require_str(request, 'protocol', REQ_PROTOCOL_UNDEFINED)
    _require_str(request, 'method', REQ_METHOD_UNDEFINED)
    _require_str(request, 'original_url', REQ_ORIGINAL_URL_UNDEFINED)


def get_request_host(request: Any) -> str:
    """Host from an accessor-style request, falling back to `request.host`"""
    getter = getattr(request, 'get', None)
    if callable(getter):
        host = getter(URL_HOST_PARAM_NAME)
        if isinstance(host, str) and host:
            return host
    return _require_str(request, 'host', REQ_HOST_UNDEFINED)


def get_url_from_request(request: Any) -> str:
    """
    Rebuild the full URL a request was made to.
    
    Args:
        request: CustomRequest or any object with the same attributes
        
    Returns:
        str: '<protocol>://<host><original_url>'
        
    Raises:
        InputError: If a required field is missing
    """
    validate_request(request)
    host = get_request_host(request)
    return f"{request.protocol}://{host}{request.original_url}"
