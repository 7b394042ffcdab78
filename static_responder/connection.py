from rich.pretty import pretty_repr

from static_responder.request import (
    WRITE_METHODS,
    InvalidRequestFormat,
    parse_headers,
    parse_request,
)
from static_responder.response import bad_request, dispatch, http_response
from static_responder.settings import settings

logger = settings.logger


def read_body_fragment(rfile):
    """
    Read up to and including the first "}" byte, or until EOF.
    Only JSON object bodies are framed this way; Content-Length is not used.
    """
    data = bytearray()
    while True:
        byte = rfile.read(1)
        if not byte:
            break
        data += byte
        if byte == b"}":
            break
    return data.decode("utf-8", errors="replace")


def _expects_body(head):
    # Only peeks at the head to decide whether to keep reading;
    # parse_request builds the real request from the same lines later.
    if not head or not head[0].split():
        return False
    if head[0].split()[0] not in WRITE_METHODS:
        return False
    return parse_headers(head[1:]).get("Content-Length") != "0"


def read_request_lines(rfile):
    head = []
    while True:
        line = rfile.readline()
        if not line:
            break
        line = line.decode("utf-8", errors="replace").rstrip("\r\n")
        if not line:
            break
        head.append(line)

    if _expects_body(head):
        body = read_body_fragment(rfile)
        if body:
            head.append(body)
    return head


def respond(lines):
    try:
        request = parse_request(lines)
    except InvalidRequestFormat as e:
        logger.warning(f"Bad request: {e}")
        return http_response(*bad_request())

    logger.debug(f"Parsed request {pretty_repr(request)}")
    return http_response(*dispatch(request))


def handle_request(client_socket, addr):
    try:
        with client_socket.makefile("rb") as rfile:
            lines = read_request_lines(rfile)
    except OSError as e:
        logger.error(f"Failed to read request from {addr[0]}: {e}")
        return
    logger.debug(f"Request from {addr[0]} {pretty_repr(lines)}")

    response = respond(lines)
    try:
        client_socket.sendall(response)
    except OSError as e:
        logger.error(f"Failed to send response to {addr[0]}: {e}")
        return
    logger.info(f"Response sent to {addr[0]}")
