from static_responder.request import InvalidRequestFormat, Method, ParsedRequest, parse_request
from static_responder.response import dispatch, http_response

__all__ = [
    "InvalidRequestFormat",
    "Method",
    "ParsedRequest",
    "dispatch",
    "http_response",
    "parse_request",
]
