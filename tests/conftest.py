import pytest

from static_responder.settings import settings

INDEX_HTML = "<h1>Hello, World!</h1>\n"
NOT_FOUND_HTML = "<h1>Not Found</h1>\n"


@pytest.fixture(autouse=True)
def resources(tmp_path):
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (tmp_path / "404.html").write_text(NOT_FOUND_HTML, encoding="utf-8")

    settings._load_config()
    saved = dict(settings._config)
    settings.configure(ROOT=str(tmp_path), INDEX_FILE="index.html", NOT_FOUND_FILE="404.html")
    yield tmp_path
    settings._config = saved
