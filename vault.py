"""Append-only credential store.

Each record is one line: ``service|username|password``. The delimiter is
not escaped, so fields containing it (or a line break) are rejected
before anything is written.
"""

import logging
from typing import Optional

from core import config
from core.storage import StorageError, append_line, read_text


logger = logging.getLogger(__name__)

FORBIDDEN_FIELD_CHARS = (config.STORE_DELIMITER, "\n", "\r")


def _store_path(path: Optional[str]) -> str:
    return path if path is not None else config.PASSWORDS_FILE


def format_record(service: str, username: str, password: str) -> str:
    """Build the store line for one credential.

    Raises:
        StorageError: If a field contains the delimiter or a line break
    """
    for name, value in (("service", service), ("username", username), ("password", password)):
        if any(ch in value for ch in FORBIDDEN_FIELD_CHARS):
            raise StorageError(
                f"The {name} cannot contain '{config.STORE_DELIMITER}' or line breaks."
            )
    return config.STORE_DELIMITER.join((service, username, password))


def add_entry(service: str, username: str, password: str, path: Optional[str] = None) -> None:
    """Append one credential to the store.

    Args:
        service: Service name (e.g., 'github')
        username: Account name for the service
        password: Password to record
        path: Store file (defaults to PASSWORDS_FILE)

    Raises:
        StorageError: If the record is invalid or the write fails
    """
    store = _store_path(path)
    append_line(store, format_record(service, username, password), sensitive=True)
    logger.debug("Appended entry for service=%s to %s", service, store)


def read_store(path: Optional[str] = None) -> Optional[str]:
    """Return the raw store contents, or None if nothing was saved yet."""
    return read_text(_store_path(path))


def load_entries(path: Optional[str] = None) -> list[tuple[str, str, str]]:
    """Parse the store into (service, username, password) tuples.

    Blank lines are skipped. A line without two delimiters is kept whole
    as the service with empty username and password.
    """
    contents = read_store(path)
    if not contents:
        return []

    entries = []
    for line in contents.splitlines():
        if not line.strip():
            continue
        parts = line.split(config.STORE_DELIMITER, 2)
        parts += [""] * (3 - len(parts))
        entries.append((parts[0], parts[1], parts[2]))
    return entries
