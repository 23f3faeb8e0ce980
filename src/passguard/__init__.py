"""
passguard

Generate strong passwords, hash them with Argon2id and estimate how long
they would take to crack.
"""

from passguard.utils.charset import CharsetClass, charset_length
from passguard.utils.exceptions import (
    PassguardError,
    NullArgumentError,
    CharsetError,
    ConfigValidationError,
    WordListsNotLoadedError,
    WordListError,
)
from passguard.utils.password_generator import GeneratorConfig, PasswordGenerator, random_password
from passguard.utils.password_hasher import HasherConfig, PasswordHasher
from passguard.utils.password_utils import (
    CrackSpeed,
    HashAlgorithmDifficulty,
    possible_combinations,
    possible_combinations_for,
    strength,
    required_time_to_crack,
    classify,
    strength_report,
)
from passguard.utils.word_lists import WordLists, load_word_lists

__version__ = "1.0.0"
