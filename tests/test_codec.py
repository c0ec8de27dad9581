"""Tests for the product code codec."""

from __future__ import annotations

import pytest

from gemcode.modules.codec import (
    CodeComponents,
    compute_checksum,
    generate_code,
    group_key,
    is_well_formed,
    parse_code,
    verify_code,
)
from gemcode.modules.codec.constants import CHECKSUM_ALPHABET


class TestComputeChecksum:
    def test_golden_value_single_gemstone(self):
        # base 847, dateVal 18226 -> hash 3640
        assert compute_checksum("Amethyst", 9, 2025, 1) == "ADT2"

    def test_golden_value_mixed_gemstones(self):
        # base 1309, dateVal 18226 -> hash 1495
        assert compute_checksum("Amethyst,Ruby", 9, 2025, 1) == "ABQZ"

    def test_zero_hash_encodes_as_first_symbol(self):
        # 0 * 17 + (0 * 2025 + 0) * 23 == 0
        assert compute_checksum("", 0, 2025, 0) == "AAAA"

    def test_output_uses_unambiguous_alphabet(self):
        for sequence in range(1, 200):
            checksum = compute_checksum("Rose Quartz", 3, 2024, sequence)
            assert len(checksum) == 4
            assert all(c in CHECKSUM_ALPHABET for c in checksum)
            assert "I" not in checksum and "O" not in checksum

    def test_sensitive_to_sequence(self):
        assert compute_checksum("Amethyst", 9, 2025, 1) != compute_checksum(
            "Amethyst", 9, 2025, 2
        )

    def test_astral_characters_count_as_surrogate_pairs(self):
        # U+1F48E encodes as D83D DC8E in UTF-16
        base = 0xD83D + 0xDC8E
        expected_hash = (base * 17 + (1 * 2025 + 1) * 23) % 9999
        digits = ""
        temp = expected_hash
        for _ in range(4):
            digits = CHECKSUM_ALPHABET[temp % 32] + digits
            temp //= 32
        assert compute_checksum("\U0001F48E", 1, 2025, 1) == digits


class TestGenerateCode:
    def test_single_gemstone(self):
        assert generate_code(["Amethyst"], 9, 2025, 1) == "GM-2509-AME-001-ADT2"

    def test_deterministic(self):
        first = generate_code(["Tiger Eye"], 11, 2026, 42)
        second = generate_code(["Tiger Eye"], 11, 2026, 42)
        assert first == second

    def test_multiple_gemstones_collapse_to_mix(self):
        code = generate_code(["Amethyst", "Ruby"], 9, 2025, 1)
        assert code == "GM-2509-MIX-001-ABQZ"
        assert code.split("-")[2] == "MIX"

    def test_mix_checksum_covers_raw_names_not_abbreviations(self):
        code = generate_code(["Amethyst", "Ruby"], 9, 2025, 1)
        assert code.endswith(compute_checksum("Amethyst,Ruby", 9, 2025, 1))
        assert not code.endswith(compute_checksum("AME,RUB", 9, 2025, 1))

    def test_reordered_names_share_code_but_not_group(self):
        # Same characters, so the character-sum base (and checksum) is equal,
        # but the group key differs.
        a = generate_code(["Ruby", "Opal"], 1, 2025, 1)
        b = generate_code(["Opal", "Ruby"], 1, 2025, 1)
        assert a == b
        assert group_key(["Ruby", "Opal"]) != group_key(["Opal", "Ruby"])

    def test_month_is_zero_padded(self):
        assert generate_code(["Ruby"], 3, 2031, 5).startswith("GM-3103-RUB-005-")

    def test_piece_number_overflows_padding_width(self):
        code = generate_code(["Ruby"], 12, 2025, 1234)
        assert code.split("-")[3] == "1234"

    def test_lowercase_name_resolves(self):
        assert generate_code(["rose quartz"], 2, 2025, 7).split("-")[2] == "ROS"

    def test_out_of_range_month_is_not_validated(self):
        code = generate_code(["Ruby"], 13, 2025, 1)
        assert code.startswith("GM-2513-RUB-001-")
        assert parse_code(code) is None


class TestParseCode:
    def test_parses_reference_code(self):
        assert parse_code("GM-2509-AME-007-X7K9") == CodeComponents(
            year=2025,
            month=9,
            gemstone_part="AME",
            piece_number=7,
            checksum="X7K9",
            full_code="GM-2509-AME-007-X7K9",
        )

    def test_parses_generated_mix_code(self):
        parsed = parse_code(generate_code(["Amethyst", "Ruby"], 9, 2025, 12))
        assert parsed is not None
        assert parsed.gemstone_part == "MIX"
        assert parsed.piece_number == 12
        assert (parsed.year, parsed.month) == (2025, 9)

    def test_parses_wide_piece_number(self):
        parsed = parse_code("GM-2512-RUB-1234-ABCD")
        assert parsed is not None
        assert parsed.piece_number == 1234

    @pytest.mark.parametrize(
        "code",
        [
            "GM-2509-AME-007",
            "XX-2509-AME-007-X7K9",
            "GM-2513-AME-007-X7K9",
            "GM-2500-AME-007-X7K9",
            "GM-2509-AME-000-X7K9",
            "GM-25A9-AME-007-X7K9",
            "GM-2509-AME-0x7-X7K9",
            "GM-2509-AME--7-X7K9",
            "GM-250-AME-007-X7K9",
            "GM-2509-AME-007-X7K9-EXTRA",
            "gm-2509-AME-007-X7K9",
            "",
        ],
    )
    def test_rejects_malformed(self, code):
        assert parse_code(code) is None

    def test_rejects_non_string(self):
        assert parse_code(None) is None  # type: ignore[arg-type]

    def test_checksum_is_opaque(self):
        parsed = parse_code("GM-2509-AME-007-zz")
        assert parsed is not None
        assert parsed.checksum == "zz"


class TestIsWellFormed:
    def test_generated_codes_are_well_formed(self):
        assert is_well_formed(generate_code(["Amethyst"], 9, 2025, 1))
        assert is_well_formed(generate_code(["Amethyst", "Ruby"], 9, 2025, 1000))

    def test_rejects_ambiguous_checksum_symbols(self):
        assert not is_well_formed("GM-2509-AME-001-ADT0")
        assert not is_well_formed("GM-2509-AME-001-ADTO")

    def test_rejects_short_piece_segment(self):
        assert not is_well_formed("GM-2509-AME-01-ADT2")


class TestVerifyCode:
    def test_generated_code_verifies(self):
        names = ["Amethyst", "Ruby"]
        code = generate_code(names, 9, 2025, 3)
        assert verify_code(code, names, 9, 2025, 3) is True

    @pytest.mark.parametrize(
        "month, year, piece",
        [(10, 2025, 3), (9, 2026, 3), (9, 2025, 4)],
    )
    def test_tampered_fields_fail(self, month, year, piece):
        code = generate_code(["Amethyst"], 9, 2025, 3)
        assert verify_code(code, ["Amethyst"], month, year, piece) is False

    def test_correct_checksum_wrong_gemstone_segment_fails(self):
        code = generate_code(["Amethyst"], 9, 2025, 3)
        forged = code.replace("-AME-", "-RUB-")
        assert verify_code(forged, ["Amethyst"], 9, 2025, 3) is False

    def test_wrong_gemstone_names_fail(self):
        code = generate_code(["Amethyst"], 9, 2025, 3)
        assert verify_code(code, ["Ruby"], 9, 2025, 3) is False

    def test_internal_error_returns_false(self):
        assert verify_code("GM-2509-AME-001-ADT2", [None], 9, 2025, 1) is False  # type: ignore[list-item]

    def test_malformed_code_returns_false(self):
        assert verify_code("not-a-code", ["Amethyst"], 9, 2025, 1) is False
