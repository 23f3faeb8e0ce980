import logging
import secrets
from dataclasses import dataclass, field

from passguard.config.config_passguard import PASS_DEFAULTS
from passguard.config.logging_config import timestamp
from .charset import CharsetClass, active_classes
from .exceptions import CharsetError, ConfigValidationError

logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class GeneratorConfig:
    """
    Settings for a password generation call.

    Setters clamp or replace values and return the config so calls can be
    chained. Length is always kept within
    ``PASS_DEFAULTS["min_length"]`` and ``PASS_DEFAULTS["max_length"]``
    (16 - 4096).
    """
    length: int = PASS_DEFAULTS["length"]
    classes: CharsetClass = CharsetClass.ALL
    include_extra: frozenset = field(default_factory=frozenset)
    exclude_extra: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        self.set_length(self.length)
        self.include_extra = frozenset(self.include_extra)
        self.exclude_extra = frozenset(self.exclude_extra)

    @classmethod
    def build(cls, length: int = PASS_DEFAULTS["length"],
              classes: CharsetClass = CharsetClass.ALL,
              include: str = "",
              exclude: str = "") -> "GeneratorConfig":
        """
        Build a config without clamping.

        Raises:
            ConfigValidationError: If ``length`` is outside the allowed range.
        """
        low, high = PASS_DEFAULTS["min_length"], PASS_DEFAULTS["max_length"]
        if not low <= length <= high:
            raise ConfigValidationError({"length": (length, low, high)})
        return cls(length, classes, frozenset(include), frozenset(exclude))

    def set_length(self, length: int) -> "GeneratorConfig":
        low, high = PASS_DEFAULTS["min_length"], PASS_DEFAULTS["max_length"]
        clamped = clamp(length, low, high)
        if clamped != length:
            logger.warning(f"[{timestamp()}] Password length {length} "
                           f"clamped to {clamped}")
        self.length = clamped
        return self

    def set_active_classes(self, classes: CharsetClass) -> "GeneratorConfig":
        self.classes = classes
        return self

    def remove_active_classes(self, classes: CharsetClass) -> "GeneratorConfig":
        self.classes &= ~classes
        return self

    def include_charset(self, chars: str) -> "GeneratorConfig":
        """Characters always added to the effective charset."""
        self.include_extra = frozenset(chars)
        return self

    def exclude_charset(self, chars: str) -> "GeneratorConfig":
        """Characters always removed from the effective charset."""
        self.exclude_extra = frozenset(chars)
        return self

    def build_effective_charset(self) -> list[str]:
        """
        Characters eligible for generation under this config.

        Union of the include set and every active class, minus the
        exclude set.

        Raises:
            CharsetError: If no characters remain.
        """
        chars = set(self.include_extra)
        for cls in active_classes(self.classes):
            chars.update(cls.members)
        chars -= self.exclude_extra

        if not chars:
            raise CharsetError("Charset empty")
        return sorted(chars)


class PasswordGenerator:
    """
    Generate random passwords that contain at least one character from
    every active class.

    Randomness is provided by the `secrets` module. Index draws use
    ``secrets.randbelow`` which is free of modulo bias.
    """

    def __init__(self, config: GeneratorConfig | None = None,
                 max_retries: int = PASS_DEFAULTS["max_required_retries"]):
        self.config = config if config is not None else GeneratorConfig()
        self.max_retries = max_retries

    def generate(self) -> str:
        """
        Generate a password from the current config.

        Steps:
            1. Build the effective charset.
            2. Draw one required character per active class, resampling
               from the same class when the draw was excluded.
            3. Fill the remaining positions from the effective charset.
            4. Fisher-Yates shuffle the result.

        Returns:
            A password of exactly ``config.length`` characters.

        Raises:
            CharsetError: If the effective charset is empty or an active
                class has been excluded entirely.
        """
        charset = self.config.build_effective_charset()
        allowed = set(charset)
        length = self.config.length

        required = [self._required_char(cls, allowed)
                    for cls in active_classes(self.config.classes)]

        password = required[:length]
        while len(password) < length:
            password.append(charset[secrets.randbelow(len(charset))])

        shuffle(password)
        return "".join(password)

    def _required_char(self, cls: CharsetClass, allowed: set) -> str:
        members = cls.members
        for _ in range(self.max_retries):
            char = members[secrets.randbelow(len(members))]
            if char in allowed:
                return char

        # Rejection sampling gave up. Draw from what is left of the class,
        # which has the same distribution, or fail if nothing is left.
        remaining = [c for c in members if c in allowed]
        if not remaining:
            logger.debug(f"[{timestamp()}] {cls.name} class fully excluded")
            raise CharsetError(
                f"Every {cls.name.lower()} character is excluded but the "
                f"class is still active"
            )
        return remaining[secrets.randbelow(len(remaining))]


def shuffle(items: list) -> None:
    """In-place Fisher-Yates shuffle using a secure random index per swap."""
    for i in range(len(items) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def random_password(length: int = PASS_DEFAULTS["length"],
                    classes: CharsetClass = CharsetClass.ALL,
                    include: str = "",
                    exclude: str = "") -> str:
    """
    Generate a strong, cryptographically secure random password.

    Convenience wrapper that builds a clamped config and generates once.

    Args:
        length: Total length, clamped to 16 - 4096.
        classes: Character classes that must each appear at least once.
        include: Extra characters that may appear.
        exclude: Characters that must never appear.

    Returns:
        The generated password.

    Raises:
        CharsetError: If the resulting charset cannot satisfy the request.
    """
    config = (GeneratorConfig()
              .set_length(length)
              .set_active_classes(classes)
              .include_charset(include)
              .exclude_charset(exclude))
    return PasswordGenerator(config).generate()
