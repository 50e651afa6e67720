"""Password management CLI flows.

Handles adding a credential from one of three sources and listing the
saved credentials.
"""

import logging
from typing import Optional

from core.config import WEAK_PASSWORD_THRESHOLD
from core.log import log_event
from core.terminal import Terminal
from password_checker import score_password
from vault import add_entry, format_record, load_entries

from cli.generator import GenerationPolicy, generate_password
from cli.prompts import (
    ConfirmationDecision,
    confirm_weak_password,
    prompt_manual_password,
    read_clipboard,
)


logger = logging.getLogger(__name__)

SOURCE_GENERATE = "generate"
SOURCE_CLIPBOARD = "clipboard"
SOURCE_WRITE = "write"
PASSWORD_SOURCES = (SOURCE_GENERATE, SOURCE_CLIPBOARD, SOURCE_WRITE)


def obtain_password(source: str, policy: Optional[GenerationPolicy] = None) -> str:
    """Get a candidate password from the chosen source.

    Args:
        source: One of PASSWORD_SOURCES
        policy: Generation rules, used only for SOURCE_GENERATE

    Returns:
        Candidate password

    Raises:
        GenerationError: If generation fails
        InputError: If the clipboard or stdin cannot be read
        ValueError: If the source is unknown
    """
    if source == SOURCE_GENERATE:
        return generate_password(policy)
    if source == SOURCE_CLIPBOARD:
        print("Let's get what you have in the clipboard")
        return read_clipboard()
    if source == SOURCE_WRITE:
        return prompt_manual_password()
    raise ValueError(f"Unknown password source: {source}")


def should_save_password(password: str, terminal: Optional[Terminal] = None) -> bool:
    """Return True when the password is strong or the user accepts it anyway.

    Args:
        password: Candidate password
        terminal: Key source for the confirmation prompt
    """
    score = score_password(password)
    if score >= WEAK_PASSWORD_THRESHOLD:
        return True

    logger.info("Password scored %.1f, below threshold %.1f", score, WEAK_PASSWORD_THRESHOLD)
    decision = confirm_weak_password(password, terminal)
    return decision is ConfirmationDecision.ACCEPT


def add_password_flow(
    service: str,
    username: str,
    source: str,
    policy: Optional[GenerationPolicy] = None,
    terminal: Optional[Terminal] = None,
) -> bool:
    """Obtain a password, gate weak ones and append the credential.

    Args:
        service: Service name
        username: Account name
        source: One of PASSWORD_SOURCES
        policy: Generation rules for SOURCE_GENERATE
        terminal: Key source for the weak-password prompt

    Returns:
        True if saved, False if the user aborted or nothing was entered

    Raises:
        GenerationError, InputError, StorageError: Propagated to the caller
    """
    password = obtain_password(source, policy)
    if not password:
        print("No password entered. Nothing saved.")
        log_event("password_add", "EMPTY", {"service": service, "source": source})
        return False

    # Reject fields the store cannot hold before asking about strength
    format_record(service, username, password)
    details = {"service": service, "username": username, "source": source}

    if not should_save_password(password, terminal):
        print("Aborted. Password not saved.")
        log_event("password_add", "ABORTED", details)
        return False

    add_entry(service, username, password)
    print(f"Password saved for '{service}' ({username}).")
    log_event("password_add", "SUCCESS", details)
    return True


def list_passwords_flow() -> bool:
    """Print the saved credentials as aligned columns.

    Returns:
        True if anything was printed, False if the store is empty
    """
    entries = load_entries()
    if not entries:
        print("No saved passwords found.")
        return False

    w1 = max(7, max(len(service) for service, _, _ in entries))
    w2 = max(8, max(len(username) for _, username, _ in entries))
    print(f"{'SERVICE'.ljust(w1)}  {'USERNAME'.ljust(w2)}  PASSWORD")
    print("-" * (w1 + w2 + 12))
    for service, username, password in entries:
        print(f"{service.ljust(w1)}  {username.ljust(w2)}  {password}")
    log_event("password_list", "SUCCESS")
    return True
