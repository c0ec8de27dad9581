"""Tests for gemstone name -> abbreviation resolution."""

from __future__ import annotations

import json

import pytest

from gemcode.modules.codec import gemstone_codes, group_key, resolve_gemstone_abbreviation
from gemcode.modules.codec.constants import GEMSTONE_ABBREVIATIONS


class TestExactMatch:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Amethyst", "AME"),
            ("AMETHYST", "AME"),
            ("rose quartz", "ROS"),
            ("Lapis Lazuli", "LAP"),
            ("Pele's Hair", "PEL"),
            ("cat's eye", "CAT"),
            ("Onyx", "ONX"),
            ("Topazolite", "TOZ"),
        ],
    )
    def test_known_names(self, name, expected):
        assert resolve_gemstone_abbreviation(name) == expected


class TestPartialMatch:
    def test_name_containing_key(self):
        assert resolve_gemstone_abbreviation("Sapphire Blue") == "SAP"

    def test_quartzite_matches_quartz_rule(self):
        assert resolve_gemstone_abbreviation("Quartzite") == "QUA"

    def test_first_key_in_table_order_wins(self):
        # "QUARTZ" precedes "ROSE QUARTZ", so the generic entry matches first.
        assert resolve_gemstone_abbreviation("Rose Quartz Sphere") == "QUA"

    def test_key_containing_name(self):
        assert resolve_gemstone_abbreviation("Aqua") == "AQU"

    def test_short_fragment_matches_first_containing_key(self):
        # "DIAMOND" is the first key containing "ON".
        assert resolve_gemstone_abbreviation("on") == "DIA"


class TestFallback:
    def test_two_letters_are_padded(self):
        assert resolve_gemstone_abbreviation("Zz") == "ZZX"

    def test_unknown_name_truncated(self):
        assert resolve_gemstone_abbreviation("Bismuth") == "BIS"

    def test_non_letters_are_stripped(self):
        assert resolve_gemstone_abbreviation("K2") == "KXX"

    def test_no_letters_pads_fully(self):
        assert resolve_gemstone_abbreviation("1-2-3") == "XXX"


class TestTable:
    def test_all_codes_are_three_uppercase_letters(self):
        for key, code in GEMSTONE_ABBREVIATIONS.items():
            assert len(code) == 3, key
            assert code.isalpha() and code.isupper(), key

    def test_keys_are_uppercase(self):
        assert all(key == key.upper() for key in GEMSTONE_ABBREVIATIONS)

    def test_table_keeps_legacy_order(self):
        keys = list(GEMSTONE_ABBREVIATIONS)
        assert keys[:3] == ["AMETHYST", "QUARTZ", "RUBY"]
        assert keys.index("QUARTZ") < keys.index("ROSE QUARTZ")


class TestHelpers:
    def test_gemstone_codes_per_name(self):
        assert gemstone_codes(["Amethyst", "Ruby", "Zz"]) == ["AME", "RUB", "ZZX"]

    def test_group_key_preserves_exact_names_and_order(self):
        key = group_key(["Rose Quartz", "amethyst"])
        assert json.loads(key) == ["Rose Quartz", "amethyst"]
        assert key != group_key(["amethyst", "Rose Quartz"])

    def test_group_key_matches_compact_json_array(self):
        assert group_key(["Amethyst", "Ruby"]) == '["Amethyst","Ruby"]'

    def test_group_key_keeps_non_ascii_names_readable(self):
        key = group_key(["Ámbar", "Ruby"])
        assert key == '["Ámbar","Ruby"]'
        assert "Ámbar" in key
