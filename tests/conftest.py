import pytest

from passguard.utils.password_hasher import HasherConfig, PasswordHasher
from passguard.utils.word_lists import WordLists


@pytest.fixture
def word_lists():
    return WordLists.from_words(
        passwords=["password", "letmein", "Qwerty123"],
        names=["Michael", "Sarah"],
    )


@pytest.fixture
def fast_hasher():
    # Lowest allowed costs keep the suite quick
    config = HasherConfig().set_iterations(1).set_memory_kb(8 * 1024).set_parallelism(1)
    return PasswordHasher(config)
