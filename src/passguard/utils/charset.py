"""
Character classes shared by the password generator and the strength
estimator.
"""
from enum import Flag

DIGITS = "0123456789"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"


class CharsetClass(Flag):
    """
    The four fixed character classes.

    Members combine bitwise, e.g. ``CharsetClass.LOWER | CharsetClass.DIGIT``.
    """
    NONE = 0
    DIGIT = 1 << 0
    UPPER = 1 << 1
    LOWER = 1 << 2
    SYMBOL = 1 << 3
    ALL = DIGIT | UPPER | LOWER | SYMBOL

    @property
    def members(self) -> str:
        """Ordered member characters of a single class."""
        return CLASS_MEMBERS[self]


CLASS_MEMBERS = {
    CharsetClass.DIGIT: DIGITS,
    CharsetClass.UPPER: UPPER,
    CharsetClass.LOWER: LOWER,
    CharsetClass.SYMBOL: SYMBOLS,
}

# Order in which required characters are drawn during generation
REQUIRED_ORDER = (
    CharsetClass.LOWER,
    CharsetClass.UPPER,
    CharsetClass.DIGIT,
    CharsetClass.SYMBOL,
)


def active_classes(flags: CharsetClass) -> list[CharsetClass]:
    """Single classes contained in ``flags``, in generation order."""
    return [cls for cls in REQUIRED_ORDER if cls in flags]


def charset_length(password: str) -> int:
    """
    Size of the keyspace alphabet a password draws from.

    Sums the size of every class that has at least one member in the
    password. Characters outside all four classes add nothing.

    Args:
        password: Password to inspect.

    Returns:
        Combined size of the classes present (0 for an empty password).
    """
    size = 0
    for cls in REQUIRED_ORDER:
        if any(c in cls.members for c in password):
            size += len(cls.members)
    return size
