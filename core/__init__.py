"""Passbook Core Package.

Provides modular components shared by the CLI flows:
- config: Centralized configuration constants
- storage: File I/O operations
- terminal: Raw-mode keystroke input
- log: Structured event logging
"""

# Configuration constants
from core.config import (
    PASSWORDS_FILE,
    LOG_DIR,
    EVENT_LOG_FILE,
    STORE_DELIMITER,
    DEFAULT_PASSWORD_LENGTH,
    STRICT_MAX_ATTEMPTS,
    SIMILAR_CHARACTERS,
    WEAK_PASSWORD_THRESHOLD,
)

# Storage utilities
from core.storage import StorageError, append_line, read_text, ensure_directories

# Terminal input
from core.terminal import InputError, get_terminal, raw_mode

# Event logging
from core.log import configure_logging, log_event

__all__ = [
    # Config
    "PASSWORDS_FILE",
    "LOG_DIR",
    "EVENT_LOG_FILE",
    "STORE_DELIMITER",
    "DEFAULT_PASSWORD_LENGTH",
    "STRICT_MAX_ATTEMPTS",
    "SIMILAR_CHARACTERS",
    "WEAK_PASSWORD_THRESHOLD",
    # Storage
    "StorageError",
    "append_line",
    "read_text",
    "ensure_directories",
    # Terminal
    "InputError",
    "get_terminal",
    "raw_mode",
    # Logging
    "configure_logging",
    "log_event",
]
