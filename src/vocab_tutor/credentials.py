"""Storage for the external dictionary API key."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol

LOGGER = logging.getLogger(__name__)

DEFAULT_KEY_VARIABLE = "VOCAB_TUTOR_API_KEY"
KEY_FILE_VARIABLE = "VOCAB_TUTOR_KEY_FILE"


class CredentialProvider(Protocol):
    def get(self) -> Optional[str]:
        ...

    def set(self, value: str) -> bool:
        ...

    def clear(self) -> None:
        ...


class MemoryCredentialStore:
    def __init__(self, value: Optional[str] = None):
        self._value = value or None

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> bool:
        if not value or not value.strip():
            return False
        self._value = value.strip()
        return True

    def clear(self) -> None:
        self._value = None


class EnvironmentCredentialStore:
    """Keep the key in a process environment variable."""

    def __init__(self, variable: str = DEFAULT_KEY_VARIABLE):
        self.variable = variable

    def get(self) -> Optional[str]:
        value = os.environ.get(self.variable, "").strip()
        return value or None

    def set(self, value: str) -> bool:
        if not value or not value.strip():
            LOGGER.warning("Refusing to store an empty API key")
            return False
        os.environ[self.variable] = value.strip()
        return True

    def clear(self) -> None:
        os.environ.pop(self.variable, None)


def mask(value: Optional[str], visible: int = 4) -> str:
    """Hide all but the last ``visible`` characters of a secret."""

    if not value:
        return "(not set)"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def default_key_path() -> Path:
    """Key file location: ``$VOCAB_TUTOR_KEY_FILE``, else under ``$XDG_CONFIG_HOME`` or ``~/.config``."""

    override = os.environ.get(KEY_FILE_VARIABLE)
    if override:
        return Path(override).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "vocab_tutor" / "api_key"


class FileCredentialStore:
    """Persist the key in a user-only readable file."""

    def __init__(self, path: Optional[str | Path] = None):
        self.path = Path(path) if path is not None else default_key_path()

    def get(self) -> Optional[str]:
        try:
            value = self.path.read_text(encoding="utf8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("Unable to read API key from %s: %s", self.path, exc)
            return None
        return value or None

    def set(self, value: str) -> bool:
        if not value or not value.strip():
            LOGGER.warning("Refusing to store an empty API key")
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # mode 0600 from creation, not after the write
            descriptor = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(descriptor, "w", encoding="utf8") as handle:
                handle.write(value.strip() + "\n")
            # O_CREAT leaves the mode of an existing file alone
            self.path.chmod(0o600)
        except OSError as exc:
            LOGGER.error("Unable to save API key to %s: %s", self.path, exc)
            return False
        return True

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            LOGGER.error("Unable to remove API key at %s: %s", self.path, exc)
