import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from zxcvbn import zxcvbn

from passguard.config.config_passguard import MAX_ATTACK_RATE, STRENGTH_TARGET_BITS
from passguard.config.logging_config import timestamp
from .charset import charset_length
from .exceptions import WordListsNotLoadedError
from .word_lists import WordLists

logger = logging.getLogger(__name__)


class CrackSpeed(Enum):
    """Assumed attacker throughput in guesses per second."""
    VERY_SLOW = 1
    SLOW = 100
    MEDIUM = 10_000
    FAST = 1_000_000
    VERY_FAST = 100_000_000
    ULTRA_FAST = 10_000_000_000
    INSANE = 1_000_000_000_000

    @property
    def rate(self) -> int:
        return self.value


class HashAlgorithmDifficulty(Enum):
    """Divisor applied to the attacker's raw rate for the target hash scheme."""
    RAW_HASH = 1
    PBKDF2_MEDIUM = 200
    BCRYPT_12 = 800
    PBKDF2_HIGH = 1000
    ARGON2ID_64MB_T3 = 20_000
    ARGON2ID_512MB_T4 = 200_000

    @property
    def multiplier(self) -> int:
        return self.value


# Upper bound (exclusive unless noted) of each strength bucket
STRENGTH_LABELS = (
    (0.1, "Very Weak"),
    (0.2, "Weak"),
    (0.3, "Bad"),
    (0.4, "Not Safe"),
    (0.5, "Medium"),
    (0.6, "Okay"),
    (0.7, "Safe"),
    (0.8, "Very Safe"),
)
EXTREME_SAFE_LIMIT = 0.9   # inclusive

SEC_PER_MINUTE = 60
SEC_PER_HOUR = 60 * SEC_PER_MINUTE
SEC_PER_DAY = 24 * SEC_PER_HOUR
SEC_PER_YEAR = 365 * SEC_PER_DAY

SHORT_SCALE = (
    (10**12, "Trillion"),
    (10**9, "Billion"),
    (10**6, "Million"),
    (10**3, "Thousand"),
)


# ==============================================================
# Keyspace & strength
# ==============================================================

def possible_combinations(length: int, charset_size: int) -> int:
    """Number of passwords of ``length`` over ``charset_size`` symbols."""
    if length <= 0 or charset_size <= 0:
        return 0
    return charset_size ** length


def possible_combinations_for(password: str) -> int:
    """Keyspace of a password, sized from the classes it uses."""
    return possible_combinations(len(password), charset_length(password))


def strength(combinations: int, target_bits: float = STRENGTH_TARGET_BITS) -> float:
    """
    Normalized strength of a keyspace.

    Returns:
        ``log2(combinations) / target_bits`` clamped to [0, 1];
        0 when there is at most one combination.
    """
    if combinations <= 1:
        return 0.0
    value = math.log2(combinations) / target_bits
    return max(0.0, min(value, 1.0))


def password_strength(password: str) -> float:
    return strength(possible_combinations_for(password))


def distinct_chars_count(password: str) -> int:
    return len(set(password)) if password else 0


# ==============================================================
# Crack time
# ==============================================================

def _trim(number: Decimal, places: int) -> str:
    """Round half away from zero to ``places`` decimals, drop trailing zeros."""
    quantum = Decimal(1).scaleb(-places)
    text = format(number.quantize(quantum, rounding=ROUND_HALF_UP), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _scientific(value: int) -> str:
    number = Decimal(value)
    exponent = number.adjusted()
    mantissa = number.scaleb(-exponent).quantize(Decimal("0.001"),
                                                  rounding=ROUND_HALF_UP)
    if mantissa >= 10:
        mantissa = mantissa.scaleb(-1)
        exponent += 1
    return f"{_trim(mantissa, 3)}E+{exponent}"


def format_large_value(value: int) -> str:
    """
    Render a count with a short-scale suffix.

    Examples:
        999 -> "999", 1500 -> "1.5 Thousand", 2_000_000 -> "2 Million".
        Values of a thousand trillion and above use scientific notation,
        e.g. "1.235E+15".
    """
    if value < 1000:
        return str(value)
    if value >= 10**15:
        return _scientific(value)
    for divisor, suffix in SHORT_SCALE:
        if value >= divisor:
            return f"{_trim(Decimal(value) / divisor, 2)} {suffix}"


def _plural(count_text: str, unit: str) -> str:
    return f"{count_text} {unit}{'' if count_text == '1' else 's'}"


def required_time_to_crack(combinations: int,
                           attacker_speed: CrackSpeed = CrackSpeed.MEDIUM,
                           algorithm: HashAlgorithmDifficulty = HashAlgorithmDifficulty.RAW_HASH) -> str:
    """
    Average time an attacker needs to find a password.

    On average half of the keyspace is searched. The attacker's rate is
    divided by the hashing difficulty and never drops below one attempt
    per second.

    Args:
        combinations: Size of the keyspace.
        attacker_speed: Guesses per second before hashing cost.
        algorithm: Cost multiplier of the hash protecting the password.

    Returns:
        A string such as "3 years, 12 days, 1 hour, 5.25 seconds".
    """
    if combinations <= 0:
        return "0 seconds"

    speed = CrackSpeed(attacker_speed).rate
    multiplier = HashAlgorithmDifficulty(algorithm).multiplier

    attempts = (combinations + 1) // 2
    rate = min(max(1, speed // max(1, multiplier)), MAX_ATTACK_RATE)

    total_seconds, remainder = divmod(attempts, rate)
    millis = (remainder * 1000) // rate

    years, rem = divmod(total_seconds, SEC_PER_YEAR)
    days, rem = divmod(rem, SEC_PER_DAY)
    hours, rem = divmod(rem, SEC_PER_HOUR)
    minutes, seconds = divmod(rem, SEC_PER_MINUTE)

    if millis > 0:
        secs_text = _trim(Decimal(seconds) + Decimal(millis) / 1000, 3)
    else:
        secs_text = str(seconds)

    parts = []
    if years > 0:
        parts.append(_plural(format_large_value(years), "year"))
    if days > 0:
        parts.append(_plural(str(days), "day"))
    if hours > 0:
        parts.append(_plural(str(hours), "hour"))
    if minutes > 0:
        parts.append(_plural(str(minutes), "minute"))

    if not parts:
        if total_seconds == 0 and millis == 0:
            return "less than 1 millisecond"
        parts.append(_plural(secs_text, "second"))
    elif seconds > 0 or millis > 0:
        parts.append(_plural(secs_text, "second"))

    return ", ".join(parts)


# ==============================================================
# Classification
# ==============================================================

def strength_label(value: float) -> str:
    """Map a normalized strength to one of ten ascending labels."""
    for limit, label in STRENGTH_LABELS:
        if value < limit:
            return label
    if value <= EXTREME_SAFE_LIMIT:
        return "Extreme Safe"
    return "Ultra Safe"


def classify(password: str, word_lists: WordLists) -> str:
    """
    Describe how safe a password is.

    Dictionary hits take priority, then trivially simple patterns, then
    the keyspace strength bucket.

    Args:
        password: Password to classify.
        word_lists: Loaded common-password and name lists.

    Returns:
        A short human-readable classification.

    Raises:
        WordListsNotLoadedError: If word_lists is None.
    """
    if word_lists is None:
        logger.error(f"[{timestamp()}] classify called before word lists were loaded")
        raise WordListsNotLoadedError(
            "Word lists must be loaded before classifying passwords"
        )

    contains_name = word_lists.is_name(password)
    if word_lists.is_common_password(password):
        return "one of the most common passwords" + (
            " and contains a name" if contains_name else "")
    if contains_name:
        return "contains a name"

    different_chars = distinct_chars_count(password)
    if different_chars <= 2:
        return "very weak, simple pattern"
    if different_chars <= 3:
        return "weak, simple pattern"

    return strength_label(password_strength(password))


def strength_report(password: str,
                    word_lists: WordLists,
                    algorithm: HashAlgorithmDifficulty = HashAlgorithmDifficulty.RAW_HASH) -> dict:
    """
    Full offline analysis of a password.

    Combines the keyspace estimate with a second opinion from the zxcvbn
    library (https://pypi.org/project/zxcvbn/), which detects common
    patterns such as keyboard walks, dates and repeats.

    Args:
        password: Password to analyze.
        word_lists: Loaded common-password and name lists.
        algorithm: Hash scheme assumed when estimating crack times.

    Returns:
        dict with keys:
            - "classification" (str)
            - "combinations" (int)
            - "bits" (float)
            - "strength" (float, 0 - 1)
            - "crack_times" (dict of CrackSpeed name -> str)
            - "zxcvbn_score" (int, 0 - 4, or None for an empty password)
            - "warning" (str)
            - "suggestions" (list[str])
    """
    combinations = possible_combinations_for(password)
    report = {
        "classification": classify(password, word_lists),
        "combinations": combinations,
        "bits": math.log2(combinations) if combinations > 1 else 0.0,
        "strength": strength(combinations),
        "crack_times": {
            speed.name: required_time_to_crack(combinations, speed, algorithm)
            for speed in CrackSpeed
        },
        "zxcvbn_score": None,
        "warning": "",
        "suggestions": [],
    }

    if not password:
        return report

    # zxcvbn slows down sharply on long input
    results = zxcvbn(password[:100], max_length=100)
    report["zxcvbn_score"] = results["score"]
    report["warning"] = results["feedback"]["warning"]
    report["suggestions"] = list(results["feedback"]["suggestions"])
    return report
