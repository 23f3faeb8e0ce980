"""
Console prompt helpers for the menu.
"""
import re


def get_int(prompt: str, default=None):
    """
    Prompt the user until a valid positive integer is entered.

    Allows the user to press Enter to accept a default value if provided.

    Args:
        prompt: Text displayed to the user.
        default: Value returned if the user submits empty input. If None,
            the prompt repeats until a valid integer is entered.

    Returns:
        An integer parsed from user input, the default value if accepted,
        or None if the user enters 'q' to quit.
    """
    while True:
        val = input(prompt).strip()

        # User hit enter for default value
        if not val and default is not None:
            return default
        if re.fullmatch(r"[0-9]+", val):
            return int(val)
        if val == 'q':
            return None

        print("   Invalid - numbers only  (q) to quit")


def get_yes_no(prompt: str, default: bool = True) -> bool:
    """Ask a y/n question. Enter accepts the default."""
    answer = input(f"{prompt} ({'Y/n' if default else 'y/N'}): ").strip().lower()
    if not answer:
        return default
    return answer == "y"
