import pytest

from passguard.utils.exceptions import WordListsNotLoadedError
from passguard.utils.password_utils import (
    CrackSpeed,
    HashAlgorithmDifficulty,
    SEC_PER_DAY,
    SEC_PER_HOUR,
    SEC_PER_YEAR,
    classify,
    distinct_chars_count,
    format_large_value,
    password_strength,
    possible_combinations,
    possible_combinations_for,
    required_time_to_crack,
    strength,
    strength_label,
    strength_report,
)
from passguard.utils.word_lists import WordLists


def test_possible_combinations():
    assert possible_combinations(0, 62) == 0
    assert possible_combinations(8, 0) == 0
    assert possible_combinations(-1, 10) == 0
    assert possible_combinations(3, 2) == 8
    assert possible_combinations(20, 94) == 94**20


def test_possible_combinations_for_password():
    assert possible_combinations_for("") == 0
    assert possible_combinations_for("abc") == 26**3
    assert possible_combinations_for("aB3!") == 94**4


def test_strength_bounds():
    assert strength(0) == 0
    assert strength(1) == 0
    assert strength(2) == pytest.approx(1 / 128)
    assert strength(2**64) == pytest.approx(0.5)
    assert strength(2**512) == 1.0
    assert strength(2**64, target_bits=64) == pytest.approx(1.0)


def test_strength_is_monotonic():
    values = [strength(c) for c in (0, 1, 2, 3, 10, 1000, 2**40, 2**127, 2**128, 2**300)]
    assert values == sorted(values)


def test_password_strength_handles_huge_keyspace():
    assert password_strength("aB3!" * 1024) == 1.0


def test_distinct_chars_count():
    assert distinct_chars_count("") == 0
    assert distinct_chars_count("aaaa") == 1
    assert distinct_chars_count("abcabc") == 3


class TestRequiredTimeToCrack:

    def test_no_combinations(self):
        assert required_time_to_crack(0, CrackSpeed.FAST, HashAlgorithmDifficulty.BCRYPT_12) == "0 seconds"
        assert required_time_to_crack(-5) == "0 seconds"

    def test_less_than_a_millisecond(self):
        assert required_time_to_crack(1, CrackSpeed.MEDIUM, HashAlgorithmDifficulty.RAW_HASH) == \
            "less than 1 millisecond"

    def test_single_units(self):
        assert required_time_to_crack(2, CrackSpeed.VERY_SLOW) == "1 second"
        assert required_time_to_crack(3, CrackSpeed.VERY_SLOW) == "2 seconds"
        assert required_time_to_crack(1_200_000) == "1 minute"

    def test_milliseconds_on_seconds_term(self):
        assert required_time_to_crack(30_001) == "1.5 seconds"
        assert required_time_to_crack(10_001) == "0.5 seconds"

    def test_all_units(self):
        total = SEC_PER_YEAR + SEC_PER_DAY + SEC_PER_HOUR + 61
        assert required_time_to_crack(2 * total, CrackSpeed.VERY_SLOW) == \
            "1 year, 1 day, 1 hour, 1 minute, 1 second"

    def test_plurals_and_skipped_units(self):
        total = 2 * SEC_PER_YEAR + 3 * SEC_PER_DAY
        assert required_time_to_crack(2 * total, CrackSpeed.VERY_SLOW) == "2 years, 3 days"

    def test_difficulty_divides_rate(self):
        assert required_time_to_crack(1_200_000, CrackSpeed.MEDIUM,
                                      HashAlgorithmDifficulty.PBKDF2_MEDIUM) == "3 hours, 20 minutes"

    def test_rate_never_below_one(self):
        assert required_time_to_crack(10, CrackSpeed.SLOW,
                                      HashAlgorithmDifficulty.ARGON2ID_512MB_T4) == "5 seconds"

    def test_short_scale_years(self):
        assert required_time_to_crack(2 * 1500 * SEC_PER_YEAR, CrackSpeed.VERY_SLOW) == \
            "1.5 Thousand years"
        assert required_time_to_crack(2 * 1_234_567 * SEC_PER_YEAR, CrackSpeed.VERY_SLOW) == \
            "1.23 Million years"

    def test_enormous_keyspace(self):
        result = required_time_to_crack(94**64, CrackSpeed.INSANE)
        assert result.split(" ")[0].count("E+") == 1
        assert "years" in result

    def test_values_of_tiers(self):
        assert CrackSpeed.MEDIUM.rate == 10_000
        assert CrackSpeed.INSANE.rate == 10**12
        assert HashAlgorithmDifficulty.RAW_HASH.multiplier == 1
        assert HashAlgorithmDifficulty.ARGON2ID_512MB_T4.multiplier == 200_000


@pytest.mark.parametrize("value, expected", [
    (0, "0"),
    (999, "999"),
    (1000, "1 Thousand"),
    (1005, "1.01 Thousand"),
    (2_500_000, "2.5 Million"),
    (7_000_000_000, "7 Billion"),
    (10**12, "1 Trillion"),
    (10**15, "1E+15"),
    (1_234_567_890_123_456, "1.235E+15"),
    (9_999_999 * 10**12, "1E+19"),
])
def test_format_large_value(value, expected):
    assert format_large_value(value) == expected


@pytest.mark.parametrize("value, label", [
    (0.0, "Very Weak"),
    (0.05, "Very Weak"),
    (0.1, "Weak"),
    (0.25, "Bad"),
    (0.35, "Not Safe"),
    (0.45, "Medium"),
    (0.55, "Okay"),
    (0.65, "Safe"),
    (0.75, "Very Safe"),
    (0.85, "Extreme Safe"),
    (0.9, "Extreme Safe"),
    (0.95, "Ultra Safe"),
    (1.0, "Ultra Safe"),
])
def test_strength_label(value, label):
    assert strength_label(value) == label


class TestClassify:

    def test_common_password(self, word_lists):
        assert classify("password", word_lists) == "one of the most common passwords"
        assert classify("PassWord", word_lists) == "one of the most common passwords"
        assert classify("qwerty123", word_lists) == "one of the most common passwords"

    def test_common_password_and_name(self):
        lists = WordLists.from_words(passwords=["jessica"], names=["Jessica"])
        assert classify("JESSICA", lists) == \
            "one of the most common passwords and contains a name"

    def test_name(self, word_lists):
        assert classify("michael", word_lists) == "contains a name"
        assert classify("SARAH", word_lists) == "contains a name"

    def test_simple_patterns(self, word_lists):
        assert classify("aaaaaaaa", word_lists) == "very weak, simple pattern"
        assert classify("abababab", word_lists) == "very weak, simple pattern"
        assert classify("abcabcabc", word_lists) == "weak, simple pattern"

    def test_strength_buckets(self, word_lists):
        assert classify("éèêë", word_lists) == "Very Weak"
        assert classify("abcd", word_lists) == "Weak"
        assert classify("aB3!aB3!aB3!aB3!", word_lists) == "Extreme Safe"
        assert classify("aB3!" * 6, word_lists) == "Ultra Safe"

    def test_requires_word_lists(self):
        with pytest.raises(WordListsNotLoadedError):
            classify("password", None)


def test_strength_report(word_lists):
    report = strength_report("Tr0ub4dor&3", word_lists, HashAlgorithmDifficulty.BCRYPT_12)
    assert report["combinations"] == 94**11
    assert report["bits"] == pytest.approx(11 * 6.5546, rel=1e-3)
    assert 0 <= report["strength"] <= 1
    assert report["classification"] == classify("Tr0ub4dor&3", word_lists)
    assert set(report["crack_times"]) == {speed.name for speed in CrackSpeed}
    assert report["zxcvbn_score"] in range(5)
    assert isinstance(report["suggestions"], list)


def test_strength_report_empty_password(word_lists):
    report = strength_report("", word_lists)
    assert report["combinations"] == 0
    assert report["crack_times"]["MEDIUM"] == "0 seconds"
    assert report["zxcvbn_score"] is None
