"""CLI package for Passbook.

Provides modular CLI flows for adding, listing, generating and checking passwords.
"""

from cli.generator import (
    EmptyPoolError,
    GenerationError,
    GenerationPolicy,
    StrictModeExhaustedError,
    generate_password,
    generate_password_flow,
)
from cli.manager import add_password_flow, list_passwords_flow, PASSWORD_SOURCES
from cli.prompts import ConfirmationDecision, ConfirmationGate, confirm_weak_password
from cli.tester import check_password_flow

__all__ = [
    "EmptyPoolError",
    "GenerationError",
    "GenerationPolicy",
    "StrictModeExhaustedError",
    "generate_password",
    "generate_password_flow",
    "add_password_flow",
    "list_passwords_flow",
    "PASSWORD_SOURCES",
    "ConfirmationDecision",
    "ConfirmationGate",
    "confirm_weak_password",
    "check_password_flow",
]
