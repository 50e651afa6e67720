"""Password strength scoring.

Scores any password on a 0-100 scale from its length, the character
classes it uses and the repeated or sequential runs it contains.
Scoring is pure: no I/O, no randomness, and it never raises for a str.
"""

from pydantic import BaseModel, ConfigDict

from core.config import WEAK_PASSWORD_THRESHOLD


# common weak passwords examples
COMMON_PASSWORDS = {
    "password", "password1", "password123", "passw0rd", "123456", "1234567",
    "12345678", "123456789", "1234567890", "qwerty", "qwerty123", "qwertyuiop",
    "letmein", "admin", "administrator", "welcome", "welcome1", "iloveyou",
    "monkey", "dragon", "football", "baseball", "sunshine", "princess",
    "master", "shadow", "superman", "trustno1", "abc123", "111111", "000000",
    "123123", "654321", "666666", "121212", "login", "starwars", "whatever",
    "freedom", "hello", "hello123", "charlie", "donald", "secret", "access",
    "mustang", "michael", "jennifer", "hunter2", "zaq12wsx", "1q2w3e4r",
    "asdfghjkl", "changeme", "default",
}

# Points per character for the first LENGTH_BONUS_LIMIT characters
LENGTH_POINTS = 3.0
LENGTH_BONUS_LIMIT = 20
EXTRA_LENGTH_POINTS = 1.0
CLASS_POINTS = 12.0
PATTERN_PENALTY = 2.0
MAX_SCORE = 100.0


class PasswordAnalysis(BaseModel):
    """Character counts and pattern findings for one password."""
    model_config = ConfigDict(frozen=True)

    length: int
    lowercase: int
    uppercase: int
    digits: int
    symbols: int
    spaces: int
    repeated: int
    sequential: int
    is_common: bool

    @property
    def class_count(self) -> int:
        """Number of distinct character classes present."""
        counts = (self.lowercase, self.uppercase, self.digits, self.symbols, self.spaces)
        return sum(1 for count in counts if count)


def _char_class(c: str) -> str:
    if c == " ":
        return "space"
    if c.isdigit():
        return "digit"
    if c.isalpha():
        return "upper" if c.isupper() else "lower"
    return "symbol"


def _is_sequential(a: str, b: str) -> bool:
    """True for neighbours like 'ab', 'cb', '89' within one class."""
    if _char_class(a) != _char_class(b) or _char_class(a) in ("symbol", "space"):
        return False
    return abs(ord(a) - ord(b)) == 1


def analyze_password(password: str) -> PasswordAnalysis:
    """Count character classes and adjacent patterns.

    Args:
        password: Password to analyze

    Returns:
        PasswordAnalysis for the password
    """
    classes = [_char_class(c) for c in password]

    repeated = 0
    sequential = 0
    for prev, cur in zip(password, password[1:]):
        if prev == cur:
            repeated += 1
        elif _is_sequential(prev, cur):
            sequential += 1

    return PasswordAnalysis(
        length=len(password),
        lowercase=classes.count("lower"),
        uppercase=classes.count("upper"),
        digits=classes.count("digit"),
        symbols=classes.count("symbol"),
        spaces=classes.count("space"),
        repeated=repeated,
        sequential=sequential,
        is_common=password.lower() in COMMON_PASSWORDS,
    )


def score_analysis(analysis: PasswordAnalysis) -> float:
    """Turn an analysis into a 0-100 score."""
    if analysis.length == 0:
        return 0.0

    base = min(analysis.length, LENGTH_BONUS_LIMIT) * LENGTH_POINTS
    base += max(analysis.length - LENGTH_BONUS_LIMIT, 0) * EXTRA_LENGTH_POINTS
    base += analysis.class_count * CLASS_POINTS
    base -= (analysis.repeated + analysis.sequential) * PATTERN_PENALTY

    return float(min(max(base, 0.0), MAX_SCORE))


def score_password(password: str) -> float:
    """Score a password on a 0-100 scale.

    Args:
        password: Password to score

    Returns:
        Strength score; higher is stronger
    """
    return score_analysis(analyze_password(password))


def is_password_weak(password: str) -> bool:
    """Return True when the score falls below WEAK_PASSWORD_THRESHOLD."""
    return score_password(password) < WEAK_PASSWORD_THRESHOLD


def check_password_strength(password: str) -> tuple[float, list[str]]:
    """Score a password and collect improvement suggestions.

    Args:
        password: Password to check

    Returns:
        Tuple of (score, feedback_list)
    """
    analysis = analyze_password(password)
    score = score_analysis(analysis)
    feedback = []

    if analysis.length < 16:
        feedback.append("Use at least 16 characters.")
    if not analysis.uppercase:
        feedback.append("Add uppercase letters.")
    if not analysis.lowercase:
        feedback.append("Add lowercase letters.")
    if not analysis.digits:
        feedback.append("Add numbers.")
    if not analysis.symbols:
        feedback.append("Add special characters.")
    if analysis.repeated:
        feedback.append("Avoid repeated characters.")
    if analysis.sequential:
        feedback.append("Avoid sequences like 'abc' or '123'.")
    if analysis.is_common:
        feedback.append("This is a very common password!")

    return score, feedback


def strength_label(score: float) -> str:
    """Human-readable label for a score."""
    if score >= WEAK_PASSWORD_THRESHOLD:
        return "Strong"
    elif score >= WEAK_PASSWORD_THRESHOLD / 2:
        return "Medium"
    else:
        return "Weak"
