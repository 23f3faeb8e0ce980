import base64
import binascii
import logging
import re
import secrets
from dataclasses import dataclass
from typing import NamedTuple

from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw, Type

from passguard.config.config_passguard import *
from passguard.config.logging_config import timestamp
from .exceptions import ConfigValidationError, NullArgumentError

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


class ParsedHash(NamedTuple):
    memory_kb: int
    iterations: int
    parallelism: int
    salt: bytes
    digest: bytes


@dataclass
class HasherConfig:
    """
    Argon2id cost settings.

    Every field is clamped to its range in ``HASHER_LIMITS`` whenever it
    is assigned, including at construction. Setters return the config, so
    settings can be chained::

        HasherConfig().set_iterations(4).set_memory_kb(256 * 1024)
    """
    iterations: int = ARGON_TIME
    memory_kb: int = ARGON_MEMORY
    parallelism: int = ARGON_PARALLELISM
    salt_length: int = SALT_LEN
    hash_length: int = ARGON_HASH_LEN

    def __setattr__(self, name, value):
        if name in HASHER_LIMITS:
            low, high = HASHER_LIMITS[name]
            clamped = max(low, min(value, high))
            if clamped != value:
                logger.warning(f"[{timestamp()}] Hasher {name} {value} "
                               f"clamped to {clamped}")
            value = clamped
        super().__setattr__(name, value)

    @classmethod
    def build(cls, **values) -> "HasherConfig":
        """
        Build a config, rejecting out-of-range values instead of clamping.

        Raises:
            ConfigValidationError: Lists every field that is out of range.
            TypeError: If an unknown field name is passed.
        """
        unknown = set(values) - set(HASHER_LIMITS)
        if unknown:
            raise TypeError(f"Unknown hasher settings: {', '.join(sorted(unknown))}")

        invalid = {}
        for name, value in values.items():
            low, high = HASHER_LIMITS[name]
            if not low <= value <= high:
                invalid[name] = (value, low, high)
        if invalid:
            raise ConfigValidationError(invalid)
        return cls(**values)

    def set_iterations(self, count: int) -> "HasherConfig":
        self.iterations = count
        return self

    def set_memory_kb(self, kb: int) -> "HasherConfig":
        self.memory_kb = kb
        return self

    def set_parallelism(self, count: int) -> "HasherConfig":
        self.parallelism = count
        return self

    def set_salt_length(self, length: int) -> "HasherConfig":
        self.salt_length = length
        return self

    def set_hash_length(self, length: int) -> "HasherConfig":
        self.hash_length = length
        return self


class PasswordHasher:
    """
    Hash and verify passwords with Argon2id.

    Hashes are stored in the self-describing form::

        $argon2id$v=19$m=<memory KB>,t=<iterations>,p=<parallelism>$<salt>$<digest>

    with salt and digest in standard base64 with padding.
    """

    def __init__(self, config: HasherConfig | None = None):
        self.config = config if config is not None else HasherConfig()

    @classmethod
    def default(cls) -> "PasswordHasher":
        return cls()

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh random salt.

        Args:
            password: Plaintext password.

        Returns:
            The encoded hash string.

        Raises:
            NullArgumentError: If password is None.
        """
        if password is None:
            raise NullArgumentError("password")

        cfg = self.config
        salt = secrets.token_bytes(cfg.salt_length)
        memory_kb, iterations, parallelism = kdf_costs(
            cfg.memory_kb, cfg.iterations, cfg.parallelism)
        digest = derive_digest(password_bytes(password), salt,
                               memory_kb, iterations, parallelism,
                               cfg.hash_length)
        # The encoded parameters are exactly the ones the digest used
        return encode_hash(memory_kb, iterations, parallelism, salt, digest)

    def verify(self, encoded: str, password: str) -> bool:
        """
        Check a password against an encoded hash.

        The digest is recomputed with the parameters stored in the hash,
        never with this hasher's config. Malformed hashes return False.

        Args:
            encoded: Encoded hash produced by `hash`.
            password: Plaintext password to check.

        Returns:
            True if the password matches.

        Raises:
            NullArgumentError: If either argument is None.

        Security:
            - Digests are compared in constant time.
        """
        if encoded is None:
            raise NullArgumentError("encoded")
        if password is None:
            raise NullArgumentError("password")

        parsed = parse_encoded_hash(encoded)
        if parsed is None:
            return False

        try:
            computed = derive_digest(password_bytes(password), parsed.salt,
                                     *kdf_costs(parsed.memory_kb, parsed.iterations,
                                                parsed.parallelism),
                                     len(parsed.digest))
        except (HashingError, OverflowError) as e:
            logger.debug(f"[{timestamp()}] Argon2 rejected stored parameters: {e}")
            return False

        return fixed_time_equals(computed, parsed.digest)


def password_bytes(password: str) -> bytes:
    """
    UTF-8 bytes of a password.

    Lone surrogates cannot be encoded and are replaced with U+FFFD, so
    every str can be hashed and verified.
    """
    return LONE_SURROGATE.sub("\ufffd", password).encode(UTF8)


def kdf_costs(memory_kb: int, iterations: int, parallelism: int) -> tuple:
    """
    Raise costs below the primitive's minimums to them
    (memory 8 MiB, one iteration, one lane).

    Returns:
        (memory_kb, iterations, parallelism) as passed to Argon2.
    """
    return max(ARGON_MIN_MEMORY, memory_kb), max(1, iterations), max(1, parallelism)


def derive_digest(pw: bytes, salt: bytes, memory_kb: int, iterations: int,
                  parallelism: int, hash_length: int) -> bytes:
    """
    Compute a raw Argon2id digest with exactly the given costs.

    Raises:
        HashingError: If Argon2 rejects the inputs.
    """
    return hash_secret_raw(
        secret=pw,
        salt=salt,
        time_cost=iterations,
        memory_cost=memory_kb,
        parallelism=parallelism,
        hash_len=hash_length,
        type=Type.ID,
        version=19,
    )


def encode_hash(memory_kb: int, iterations: int, parallelism: int,
                salt: bytes, digest: bytes) -> str:
    salt_b64 = base64.b64encode(salt).decode("ascii")
    digest_b64 = base64.b64encode(digest).decode("ascii")
    return (f"${HASH_ALGORITHM_TAG}${HASH_VERSION_TAG}"
            f"$m={memory_kb},t={iterations},p={parallelism}"
            f"${salt_b64}${digest_b64}")


def parse_encoded_hash(encoded: str) -> ParsedHash | None:
    """
    Split an encoded hash into its parameters, salt and digest.

    Returns:
        The parsed fields, or None if the string is malformed in any way.
    """
    parts = [p for p in encoded.split("$") if p]
    if len(parts) != 5:
        return None
    if parts[0].lower() != HASH_ALGORITHM_TAG:
        return None
    if parts[1].lower() != HASH_VERSION_TAG:
        return None

    params = parse_params(parts[2])
    if params is None:
        return None

    try:
        salt = base64.b64decode(parts[3], validate=True)
        digest = base64.b64decode(parts[4], validate=True)
    except (binascii.Error, ValueError):
        return None

    return ParsedHash(params["m"], params["t"], params["p"], salt, digest)


def parse_params(segment: str) -> dict | None:
    """Parse ``m=<int>,t=<int>,p=<int>``; None on any unknown or repeated key."""
    params = {}
    for pair in (kv for kv in segment.split(",") if kv):
        key, sep, value = pair.partition("=")
        if not sep or key not in ("m", "t", "p") or key in params:
            return None
        if not INT_PATTERN.fullmatch(value.strip()):
            return None
        number = int(value)
        if not INT32_MIN <= number <= INT32_MAX:
            return None
        params[key] = number

    if len(params) != 3:
        return None
    return params


def fixed_time_equals(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings without an early exit.

    Lengths are checked first. Equal-length inputs are compared by
    OR-accumulating the XOR of every byte pair, so the running time does
    not depend on where they differ.
    """
    if len(a) != len(b):
        return False
    diff = 0
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0
