from static_responder.settings import settings

logger = settings.logger


def read_resource(path):
    """Return the text of a file, or an empty string if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read resource {path}: {e}")
        return ""
