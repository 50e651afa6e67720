"""Password generation.

Builds candidates from a GenerationPolicy and offers a CLI flow to
preview one with its strength score.
"""

import logging
import secrets
from typing import Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field

from core.config import (
    DEFAULT_PASSWORD_LENGTH,
    DIGIT_CHARS,
    LOWERCASE_CHARS,
    SIMILAR_CHARACTERS,
    SPACE_CHARS,
    STRICT_MAX_ATTEMPTS,
    SYMBOL_CHARS,
    UPPERCASE_CHARS,
)
from password_checker import check_password_strength, strength_label


logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base exception for password generation."""
    pass


class EmptyPoolError(GenerationError):
    """No characters are left to sample from."""
    pass


class StrictModeExhaustedError(GenerationError):
    """No candidate satisfied strict mode within the attempt limit."""
    pass


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class GenerationPolicy(BaseModel):
    """Composition rules for generated passwords."""
    model_config = ConfigDict(frozen=True)

    length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=1, description="Password length")
    include_lowercase: bool = Field(default=True, description="Include lowercase letters")
    include_numbers: bool = Field(default=True, description="Include digits")
    include_uppercase: bool = Field(default=True, description="Include uppercase letters")
    include_symbols: bool = Field(default=True, description="Include special characters")
    include_spaces: bool = Field(default=True, description="Include spaces")
    exclude_similar_characters: bool = Field(
        default=True, description="Drop look-alike characters such as 0/O and 1/l/I"
    )
    strict: bool = Field(default=True, description="Require every enabled class at least once")


def build_pools(policy: GenerationPolicy) -> list[str]:
    """Return one character pool per enabled class.

    Similar characters are removed here, once per policy. Classes left
    empty by the exclusion are dropped.
    """
    enabled = [
        (policy.include_lowercase, LOWERCASE_CHARS),
        (policy.include_uppercase, UPPERCASE_CHARS),
        (policy.include_numbers, DIGIT_CHARS),
        (policy.include_symbols, SYMBOL_CHARS),
        (policy.include_spaces, SPACE_CHARS),
    ]

    pools = []
    for is_enabled, chars in enabled:
        if not is_enabled:
            continue
        if policy.exclude_similar_characters:
            chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
        if chars:
            pools.append(chars)
    return pools


def _satisfies_strict(candidate: str, pools: list[str]) -> bool:
    return all(any(c in pool for c in candidate) for pool in pools)


def generate_password(
    policy: Optional[GenerationPolicy] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Generate a password that follows the policy.

    Every position is drawn independently and uniformly from the
    combined pool. In strict mode a candidate missing any enabled class
    is discarded and the whole candidate is drawn again.

    Args:
        policy: Composition rules (defaults to GenerationPolicy())
        rng: Source with a choice() method (defaults to secrets.SystemRandom())

    Returns:
        Generated password string

    Raises:
        EmptyPoolError: If no character class is enabled or left after exclusion
        StrictModeExhaustedError: If strict mode cannot be satisfied
    """
    policy = policy or GenerationPolicy()
    rng = rng or secrets.SystemRandom()

    pools = build_pools(policy)
    if not pools:
        raise EmptyPoolError("At least one character type must be selected.")
    combined_pool = "".join(pools)

    if not policy.strict:
        return "".join(rng.choice(combined_pool) for _ in range(policy.length))

    if policy.length < len(pools):
        raise StrictModeExhaustedError(
            f"Password length must be at least {len(pools)} "
            "to include all selected character types."
        )

    for attempt in range(1, STRICT_MAX_ATTEMPTS + 1):
        candidate = "".join(rng.choice(combined_pool) for _ in range(policy.length))
        if _satisfies_strict(candidate, pools):
            logger.debug("Strict candidate accepted after %d attempt(s)", attempt)
            return candidate

    raise StrictModeExhaustedError(
        f"No password satisfied strict mode after {STRICT_MAX_ATTEMPTS} attempts."
    )


def generate_password_flow(policy: Optional[GenerationPolicy] = None) -> str:
    """Generate a password, print it and show its strength."""
    password = generate_password(policy)
    score, feedback = check_password_strength(password)

    print(password)
    print(f"Strength: {strength_label(score)} (score {score:.0f})")
    if feedback:
        print("Suggestions:")
        for tip in feedback:
            print(f"  - {tip}")
    return password
