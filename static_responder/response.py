from static_responder.handlers import not_found_handler
from static_responder.request import ParsedRequest
from static_responder.routes import get_handler
from static_responder.settings import settings
from static_responder.status_code import (
    HttpResponseCode,
    STATUS_BAD_REQUEST,
    STATUS_NOT_FOUND,
    STATUS_OK,
)

logger = settings.logger


def dispatch(request: ParsedRequest, routes=None):
    """Return (status_line, body) for the handler bound to request.route."""
    handler_function = get_handler(request.route, routes)
    if handler_function is None:
        logger.info(f"No route for {request.route!r}")
        return STATUS_NOT_FOUND, not_found_handler()
    return STATUS_OK, handler_function()


def bad_request():
    return (
        STATUS_BAD_REQUEST,
        HttpResponseCode.HTTP_RESPONSE_MESSAGES[HttpResponseCode.HTTP_400_BAD_REQUEST],
    )


def http_response(status_line, body):
    body = body.encode("utf-8")
    # Content-Length is the only header we ever send
    head = f"{status_line}\r\nContent-Length: {len(body)}\r\n\r\n".encode("utf-8")
    return head + body
