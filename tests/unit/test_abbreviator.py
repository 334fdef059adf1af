"""Unit tests for name abbreviation."""

import pytest

from app.core.abbreviator import abbreviate

# =========================================================================
# Stop-word stripping
# =========================================================================


class TestStopWords:
    """Legal suffixes and function words never contribute letters."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("ABC Corporation Ltd", "ABC"),
            ("XYZ Private Limited", "XYZ"),
            ("Test Company", "TES"),
            ("Acme Inc", "ACM"),
            ("Globex LLC", "GLO"),
            ("Incorporated Widgets", "WID"),
        ],
    )
    def test_legal_suffixes_removed(self, name, expected):
        assert abbreviate(name) == expected

    def test_function_words_removed(self):
        assert abbreviate("The Quick Brown Fox") == "QBF"

    def test_case_insensitive(self):
        assert abbreviate("the quick brown fox") == "QBF"
        assert abbreviate("SHARMA ROADWAYS PVT LTD") == "SR"

    def test_whole_words_only(self):
        # "And" inside "Andover" is part of a word, not a stop word
        assert abbreviate("Andover Freight") == "AF"
        assert abbreviate("Theta Logistics") == "TL"

    def test_only_stop_words_uses_original_name(self):
        assert abbreviate("The Company") == "TC"
        assert abbreviate("Ltd") == "LTD"


# =========================================================================
# Word handling
# =========================================================================


class TestWordRules:
    """Single words are truncated, several words collapse to initials."""

    def test_single_word_truncated(self):
        assert abbreviate("Mahindra") == "MAH"

    def test_single_short_word_kept_whole(self):
        assert abbreviate("A") == "A"
        assert abbreviate("AB") == "AB"

    def test_initials_limited_to_max_length(self):
        assert abbreviate("Alpha Beta Gamma Delta") == "ABG"
        assert abbreviate("Bharat Freight Carriers Pvt Ltd") == "BFC"

    def test_two_words_give_two_letters(self):
        assert abbreviate("Blue Dart") == "BD"

    def test_punctuation_and_digits_ignored(self):
        assert abbreviate("Johnson & Sons") == "JS"
        assert abbreviate("123 Logistics") == "LOG"
        assert abbreviate("O'Brien Movers") == "OM"

    def test_surrounding_whitespace_ignored(self):
        assert abbreviate("   ABC   ") == "ABC"
        assert abbreviate("Blue\tDart\nExpress") == "BDE"

    def test_result_is_uppercase_letters(self):
        result = abbreviate("shree ganesh transport")
        assert result == "SGT"
        assert result.isalpha() and result.isupper()


# =========================================================================
# Limits and fallbacks
# =========================================================================


class TestLimitsAndFallback:
    """Configurable length and fallback prefix."""

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_returns_fallback(self, name):
        assert abbreviate(name, fallback="CUS") == "CUS"

    def test_name_without_letters_returns_fallback(self):
        assert abbreviate("!!! 42", fallback="VEH") == "VEH"

    def test_default_fallback(self):
        assert abbreviate("") == "UNK"

    def test_custom_max_length(self):
        assert abbreviate("Test Company", max_length=2) == "TE"
        assert abbreviate("Mahindra", max_length=4) == "MAHI"
        assert abbreviate("Alpha Beta Gamma Delta", max_length=4) == "ABGD"

    def test_max_length_one(self):
        assert abbreviate("Alpha Beta", max_length=1) == "A"

    @pytest.mark.parametrize("max_length", [0, -1])
    def test_invalid_max_length_rejected(self, max_length):
        with pytest.raises(ValueError, match="max_length"):
            abbreviate("Test", max_length=max_length)

    def test_deterministic(self):
        assert abbreviate("Test Company") == abbreviate("Test Company")
