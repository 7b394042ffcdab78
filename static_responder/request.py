from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence


class InvalidRequestFormat(ValueError):
    pass


class Method(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def from_token(cls, token: str) -> "Method":
        """Case-sensitive match; anything unknown is treated as GET."""
        try:
            return cls(token)
        except ValueError:
            return cls.GET


# Methods whose request line is followed by a body fragment on the wire
WRITE_METHODS = ("POST", "PUT")


@dataclass(frozen=True)
class ParsedRequest:
    method: Method = Method.GET
    route: str = ""
    version: str = ""
    query: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: str = ""


def parse_headers(lines: Sequence[str]) -> Mapping[str, str]:
    headers = {}
    for line in lines:
        # a line starting with "{" is a body fragment, not a header
        if ":" not in line or line.startswith("{"):
            continue
        k, v = line.split(":", 1)
        headers[k.strip()] = v.strip()
    return MappingProxyType(headers)


def parse_request(lines: Sequence[str]) -> ParsedRequest:
    """
    Build a ParsedRequest from the request head, optionally followed by
    the raw body fragment as the last element.

        ["POST /items?page=2 HTTP/1.1", "Host: localhost:7878", '{"a":1}']

    An empty head gives the default request, which no route matches.
    A request line with fewer than three tokens raises InvalidRequestFormat.
    """
    request_line = lines[0] if lines else ""
    if not request_line.strip():
        return ParsedRequest()

    parts = request_line.split()
    if len(parts) < 3:
        raise InvalidRequestFormat(f"Malformed request line: {request_line!r}")
    method_token, target, version = parts[:3]

    # path will contain the query parameters separated by ?
    route, _, query = target.partition("?")
    method = Method.from_token(method_token)

    body = ""
    if method is Method.POST and lines[-1].startswith("{"):
        body = lines[-1]

    return ParsedRequest(
        method=method,
        route=route,
        version=version,
        query=query,
        headers=parse_headers(lines[1:]),
        body=body,
    )
