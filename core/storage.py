"""Centralized file I/O operations.

Provides consistent text file handling with proper error management.
Implements secure file permissions for sensitive data on Unix systems.
"""

import os
import stat
import sys
from typing import Optional

from core.config import LOG_DIR


# Secure file permission: owner read/write only (0600 in octal)
SECURE_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR  # 0o600


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def _set_secure_permissions(filepath: str) -> None:
    """Set restrictive file permissions on sensitive files.

    On Unix systems: Sets file to mode 0600 (owner read/write only)
    On Windows: No-op (Windows uses ACLs, not Unix permissions)

    Args:
        filepath: Path to the file to secure
    """
    if sys.platform == "win32":
        return

    try:
        os.chmod(filepath, SECURE_FILE_MODE)
    except OSError:
        # Best effort - the record itself was written
        pass


def ensure_directories() -> None:
    """Create the log directory if it doesn't exist.

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    if sys.platform != "win32":
        os.makedirs(LOG_DIR, mode=0o700, exist_ok=True)
    else:
        os.makedirs(LOG_DIR, exist_ok=True)


def read_text(filepath: str) -> Optional[str]:
    """Load a text file.

    Args:
        filepath: Path to text file

    Returns:
        File contents, or None if file doesn't exist

    Raises:
        StorageError: If the file exists but cannot be read
    """
    if not os.path.exists(filepath):
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except (IOError, UnicodeDecodeError) as e:
        raise StorageError(f"Failed to read {filepath}: {e}")


def append_line(filepath: str, line: str, sensitive: bool = False) -> None:
    """Append a line to a text file, creating it if needed.

    Args:
        filepath: Path to text file
        line: Line to append (newline added automatically)
        sensitive: Restrict a newly created file to its owner

    Raises:
        StorageError: If the write fails
    """
    created = not os.path.exists(filepath)
    try:
        with open(filepath, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except IOError as e:
        raise StorageError(f"Failed to append to {filepath}: {e}")

    if created and sensitive:
        _set_secure_permissions(filepath)
