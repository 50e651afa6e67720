"""Password testing CLI flows.

Lets users score a password without saving it.
"""

from password_checker import check_password_strength, strength_label

from cli.prompts import prompt_manual_password


def check_password_flow() -> float:
    """Score a typed password and print suggestions."""
    password = prompt_manual_password()
    if not password:
        print("No password entered.")
        return 0.0

    score, feedback = check_password_strength(password)
    print(f"Password Strength: {strength_label(score)} (score {score:.0f})")

    if feedback:
        print("Suggestions:")
        for tip in feedback:
            print(f"  - {tip}")

    return score
