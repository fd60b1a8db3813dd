"""Configuration providers.

The CLI only ever needs single string values (the API key), so configuration
is modelled as a capability: ``get_value(key) -> Optional[str]``. The real
provider reads the process environment and falls back to a local ``.env``
file; tests use :class:`DictConfigProvider`.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol

from dotenv import dotenv_values, find_dotenv

from chatgpt_cli import logger as logger_mod

log = logger_mod.get_logger()


class ConfigProvider(Protocol):
    def get_value(self, key: str) -> Optional[str]:
        raise NotImplementedError


class DictConfigProvider(ConfigProvider):
    """In-memory provider."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = dict(values or {})

    def get_value(self, key: str) -> Optional[str]:
        return self._values.get(key) or None


class EnvConfigProvider(ConfigProvider):
    """Process environment first, then values from a ``.env`` file.

    A missing ``.env`` file is not an error. Variables already defined in the
    environment are never overridden by the file, even when set to "".
    """

    def __init__(self, dotenv_path: Optional[str] = None):
        self._dotenv_path = dotenv_path
        self._file_values: Optional[dict[str, Optional[str]]] = None

    def _load_file(self) -> dict[str, Optional[str]]:
        if self._file_values is not None:
            return self._file_values

        path = self._dotenv_path or find_dotenv(usecwd=True)
        if not path or not os.path.isfile(path):
            log.info("No .env file found, using system environment")
            self._file_values = {}
        else:
            log.debug(f"Loading configuration from {path}")
            self._file_values = dict(dotenv_values(path))
        return self._file_values

    def get_value(self, key: str) -> Optional[str]:
        if key in os.environ:
            return os.environ[key] or None
        return self._load_file().get(key) or None
