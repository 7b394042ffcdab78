from static_responder.routes import bind_handler
from static_responder.serve_files import read_resource
from static_responder.settings import settings


@bind_handler("/")
def index_handler():
    return read_resource(settings.INDEX_FILE)


def not_found_handler():
    return read_resource(settings.NOT_FOUND_FILE)
