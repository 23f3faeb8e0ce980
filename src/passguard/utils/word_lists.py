import logging
from dataclasses import dataclass, field
from pathlib import Path

from passguard.config.config_passguard import COMMON_PASSWORDS_FILE, COMMON_NAMES_FILE, UTF8
from passguard.config.logging_config import timestamp
from .exceptions import WordListError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordLists:
    """
    Read-only word lists used when classifying passwords.

    Built once by `load_word_lists` (or directly from iterables with
    `from_words`) and passed to every classification call.
    Common passwords are stored lower-cased and names case-folded.
    """
    passwords: frozenset = field(default_factory=frozenset)
    names: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_words(cls, passwords=(), names=()) -> "WordLists":
        return cls(
            frozenset(p.lower() for p in passwords),
            frozenset(n.casefold() for n in names),
        )

    def is_common_password(self, password: str) -> bool:
        return password.lower() in self.passwords

    def is_name(self, password: str) -> bool:
        return password.casefold() in self.names


def read_word_file(path: str | Path) -> list[str]:
    """
    Read a UTF-8 word list with one entry per line.

    Surrounding whitespace is stripped and blank lines are skipped.

    Raises:
        WordListError: If the file cannot be read.
    """
    try:
        with open(path, "r", encoding=UTF8) as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read word list {path}: {e}"
        logger.error(f"[{timestamp()}] {msg}")
        raise WordListError(msg) from e


def load_word_lists(passwords_path: str | Path = COMMON_PASSWORDS_FILE,
                    names_path: str | Path = COMMON_NAMES_FILE) -> WordLists:
    """
    Load the common-password and common-name lists.

    Defaults to the lists bundled with the package.

    Returns:
        An immutable `WordLists`.
    """
    return WordLists.from_words(read_word_file(passwords_path),
                                read_word_file(names_path))
