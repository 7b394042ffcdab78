import json
import logging
from pathlib import Path

# pip install rich
import rich

DEFAULTS = {
    "HOST": "127.0.0.1",
    "PORT": 7878,
    "ROOT": ".",
    "INDEX_FILE": "www/index.html",
    "NOT_FOUND_FILE": "www/404.html",
    "LEVEL": "INFO",
}


class LazySettings:
    """A class to lazily load settings from a JSON file. Inspired from Django's settings."""

    def __init__(self, config_file="./config.json"):
        self._config_file = config_file
        self._config = {}
        self._loaded = False
        self._logger = None

    def _load_config(self):
        if not self._loaded:
            try:
                with open(self._config_file, "r") as f:
                    self._config = {k.upper(): v for k, v in json.load(f).items()}
            except FileNotFoundError:
                rich.print(
                    f"[red]Configuration file {self._config_file} not found. Using default settings.[/red]"
                )
                self._config = {}
            except json.JSONDecodeError as e:
                rich.print(
                    f"[red]Error decoding JSON from {self._config_file}: {e}[/red]"
                )
                self._config = {}
            self._loaded = True

    def __getattr__(self, name):
        if name.startswith("_") or name not in DEFAULTS:
            raise AttributeError(name)
        self._load_config()

        value = self._config.get(name, DEFAULTS[name])
        if name == "ROOT":
            return Path(value).resolve()
        elif name == "PORT":
            return int(value)
        elif name in ("INDEX_FILE", "NOT_FOUND_FILE"):
            # resources live under ROOT unless configured with an absolute path
            return self.ROOT / Path(value)
        elif name == "LEVEL":
            return str(value).upper()
        return value

    def reload(self):
        self._loaded = False
        self._config = {}
        self._load_config()

    @property
    def logger(self):
        if self._logger is None:
            self._logger = self._setup_logger()
        return self._logger

    def _setup_logger(self) -> logging.Logger:
        """Sets up the logger with the appropriate level and handlers."""
        logger = logging.getLogger("static_responder")
        logger.setLevel(self.LEVEL)
        if not logger.handlers:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler = logging.StreamHandler()
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        return logger

    def configure(self, **kwargs):
        self._load_config()
        self._config.update({k.upper(): v for k, v in kwargs.items()})
        if self._logger is not None:
            self._logger.setLevel(self.LEVEL)


settings = LazySettings()
