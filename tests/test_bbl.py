"""Tests for BBL parsing and the block digit."""

import pytest

from compliance.bbl import (
    borough_name,
    format_bbl,
    get_block,
    get_block_last_digit,
    get_borough_code,
    normalize_bbl,
    parse_bbl,
)


class TestParseBbl:
    def test_ten_digits(self):
        assert parse_bbl("1012340001") == ("1", "01234", "0001")

    def test_separators_tolerated(self):
        assert normalize_bbl("1-01234-0001") == "1012340001"
        assert parse_bbl("3/00512/0020") == ("3", "00512", "0020")

    @pytest.mark.parametrize("bbl", [None, "", "12345", "10123400011", "1A12340001"])
    def test_malformed(self, bbl):
        assert parse_bbl(bbl) is None


class TestBlockDigit:
    @pytest.mark.parametrize("bbl,digit", [
        ("1012340001", 4),
        ("1123400001", 0),
        ("2000050001", 5),
        ("3000090", 9),  # lot truncated, block intact
    ])
    def test_last_digit(self, bbl, digit):
        assert get_block_last_digit(bbl) == digit

    @pytest.mark.parametrize("bbl", [None, "", "12345", "1ABCDE0001"])
    def test_unreadable(self, bbl):
        assert get_block(bbl) is None
        assert get_block_last_digit(bbl) is None

    def test_block_value(self):
        assert get_block("1012340001") == 1234


class TestBoroughs:
    @pytest.mark.parametrize("name,code", [
        ("Manhattan", "1"), ("BRONX", "2"), ("brooklyn", "3"),
        ("Queens", "4"), ("Staten Island", "5"), ("3", "3"),
    ])
    def test_codes(self, name, code):
        assert get_borough_code(name) == code

    def test_unknown_borough(self):
        assert get_borough_code("Hoboken") == "0"
        assert get_borough_code(None) == "0"

    def test_names(self):
        assert borough_name("5") == "Staten Island"
        assert borough_name("9") == "9"

    def test_format_bbl(self):
        assert format_bbl("Brooklyn", "512", "20") == "3005120020"
