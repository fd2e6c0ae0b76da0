"""Tests for the NSS check-digit helpers."""

from __future__ import annotations

import pytest

from mximss.nss.checksum import compute_checksum_digit, normalize, verify_last_digit, weigh_digit


class TestNormalize:
    def test_strips_punctuation_and_spaces(self):
        assert normalize(" 12-34-56-7890-3 ") == "12345678903"

    def test_strips_letters(self):
        assert normalize("NSS: 72 89 60 1234 0") == "72896012340"

    def test_strips_non_ascii_digits(self):
        # fullwidth and superscript digits are not 0-9
        assert normalize("１２3²") == "3"

    def test_none_and_empty(self):
        assert normalize(None) == ""
        assert normalize("") == ""

    def test_numbers_are_stringified(self):
        assert normalize(12345678903) == "12345678903"

    @pytest.mark.parametrize("text", ["", "abc", "1a2b3c", "--12--", "0 0 0", "ñ9ü8"])
    def test_idempotent_and_ordered(self, text):
        result = normalize(text)
        assert normalize(result) == result
        assert set(result) <= set("0123456789")
        it = iter(text)
        assert all(ch in it for ch in result)


class TestWeighDigit:
    def test_weight_one_is_identity(self):
        assert [weigh_digit(str(d), 1) for d in range(10)] == list(range(10))

    def test_weight_two_folds_two_digit_products(self):
        assert weigh_digit("4", 2) == 8
        assert weigh_digit("5", 2) == 1  # 10 -> 1
        assert weigh_digit("6", 2) == 3  # 12 -> 3
        assert weigh_digit("9", 2) == 9  # 18 -> 9


class TestComputeChecksumDigit:
    def test_known_value(self):
        # 1+4+3+8+5+3+7+7+9+0 = 47
        assert compute_checksum_digit("1234567890") == 3

    def test_only_first_ten_digits_count(self):
        assert compute_checksum_digit("12345678901") == 3
        assert compute_checksum_digit("1234567890999") == 3

    def test_sum_already_multiple_of_ten(self):
        assert compute_checksum_digit("7289601234") == 0
        assert compute_checksum_digit("0000000000") == 0

    def test_short_input_uses_all_digits(self):
        assert compute_checksum_digit("12") == 5

    def test_ignores_separators(self):
        assert compute_checksum_digit("12-34-56-7890") == 3


class TestVerifyLastDigit:
    @pytest.mark.parametrize("digits", ["12345678903", "98765432103", "11111111115", "72896012340"])
    def test_valid_numbers(self, digits):
        assert verify_last_digit(digits) is True

    def test_wrong_last_digit(self):
        assert verify_last_digit("12345678901") is False

    def test_short_input_is_not_length_guarded(self):
        assert verify_last_digit("5") is True
        assert verify_last_digit("123") is False

    def test_empty_input(self):
        assert verify_last_digit("") is False
