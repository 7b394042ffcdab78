from collections import namedtuple
from types import MappingProxyType

Route = namedtuple("Route", ["path", "handler_function"])

_handlers = {}
_sealed = False

# read-only view shared by every connection
handlers = MappingProxyType(_handlers)


def bind_handler(path):
    def decorator(handler_function):
        if _sealed:
            raise RuntimeError(f"Route table is sealed, cannot bind {path!r}")
        _handlers[path] = Route(path=path, handler_function=handler_function)
        return handler_function
    return decorator


def seal_routes():
    """Freeze the route table once startup registration is done."""
    global _sealed
    _sealed = True
    return handlers


def get_handler(path, routes=None):
    """Get the handler function by exact path."""
    route = (handlers if routes is None else routes).get(path)
    return route.handler_function if route else None
