"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
File locations can be overridden via environment variables.
"""

import os
import string

# File paths
PASSWORDS_FILE = os.environ.get("PASSWORDS_FILE", "passwords.txt")

# Directories
LOG_DIR = os.environ.get("LOG_DIR", "logs")
EVENT_LOG_FILE = os.path.join(LOG_DIR, "passbook.log")

# Log rotation
LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 1024 * 1024))  # 1MB default
LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 3))

# Store format: one "service|username|password" record per line
STORE_DELIMITER = "|"

# Password generation
DEFAULT_PASSWORD_LENGTH = 16
# A minimum-length candidate with every class (space is 1 of 87 characters)
# covers all pools about 0.3% of the time
STRICT_MAX_ATTEMPTS = 10_000

# Visually ambiguous characters dropped when exclude_similar_characters is set
SIMILAR_CHARACTERS = "0O1lI5S"

# Character classes
LOWERCASE_CHARS = string.ascii_lowercase
UPPERCASE_CHARS = string.ascii_uppercase
DIGIT_CHARS = string.digits
# The delimiter never appears in generated passwords
SYMBOL_CHARS = string.punctuation.replace(STORE_DELIMITER, "")
SPACE_CHARS = " "

# Strength scoring (0-100 scale)
WEAK_PASSWORD_THRESHOLD = 80.0
