"""Product code codec — mint, parse, and verify ``GM-YYMM-GEM-NNN-CCCC`` codes.

Every function here is pure: no I/O, no shared state. Piece numbers are
allocated by the caller (see ``gemcode.modules.registry``).
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from gemcode.modules.codec.constants import (
    ABBREVIATION_LENGTH,
    ABBREVIATION_PAD_CHAR,
    CENTURY_BASE,
    CHECKSUM_ALPHABET,
    CHECKSUM_BASE_WEIGHT,
    CHECKSUM_DATE_WEIGHT,
    CHECKSUM_LENGTH,
    CHECKSUM_MODULUS,
    CODE_PREFIX,
    CODE_REGEX,
    CODE_SEGMENT_COUNT,
    CODE_SEPARATOR,
    GEMSTONE_ABBREVIATIONS,
    GEMSTONE_NAME_SEPARATOR,
    MIXED_GEMSTONE_PART,
    PIECE_NUMBER_WIDTH,
)

logger = logging.getLogger(__name__)

_NON_ALPHA_RE = re.compile(r"[^A-Z]")
_MONTH_YEAR_RE = re.compile(r"[0-9]{4}")
_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class CodeComponents:
    """Fields recovered from a full code by :func:`parse_code`."""

    year: int
    month: int
    gemstone_part: str
    piece_number: int
    checksum: str
    full_code: str


# ------------------------------------------------------------------
# Gemstone abbreviations
# ------------------------------------------------------------------


def resolve_gemstone_abbreviation(name: str) -> str:
    """Map a free-text gemstone name to its 3-letter code.

    Exact (case-insensitive) table match first, then the first table key
    that contains or is contained in the name, then the first three letters
    of the name padded with ``X``.
    """
    upper_name = name.upper()

    code = GEMSTONE_ABBREVIATIONS.get(upper_name)
    if code is not None:
        return code

    for key, code in GEMSTONE_ABBREVIATIONS.items():
        if key in upper_name or upper_name in key:
            return code

    clean_name = _NON_ALPHA_RE.sub("", upper_name)
    if len(clean_name) >= ABBREVIATION_LENGTH:
        return clean_name[:ABBREVIATION_LENGTH]
    return clean_name.ljust(ABBREVIATION_LENGTH, ABBREVIATION_PAD_CHAR)


def gemstone_codes(gemstone_names: Sequence[str]) -> list[str]:
    """Per-name abbreviations, kept as metadata beside a ``MIX`` code."""
    return [resolve_gemstone_abbreviation(name) for name in gemstone_names]


def group_key(gemstone_names: Sequence[str]) -> str:
    """Serialise the ordered names that scope a piece-number sequence.

    Order and spelling are significant: ``["Ruby", "Opal"]`` and
    ``["Opal", "Ruby"]`` are different groups.
    """
    return json.dumps(list(gemstone_names), ensure_ascii=False, separators=(",", ":"))


# ------------------------------------------------------------------
# Checksum
# ------------------------------------------------------------------


def _utf16_code_unit_sum(value: str) -> int:
    total = 0
    for char in value:
        code_point = ord(char)
        if code_point > 0xFFFF:
            # Astral characters count as their surrogate pair.
            code_point -= 0x10000
            total += 0xD800 + (code_point >> 10)
            total += 0xDC00 + (code_point & 0x3FF)
        else:
            total += code_point
    return total


def compute_checksum(joined_names: str, month: int, year: int, sequence: int) -> str:
    """Compute the 4-character verification suffix.

    *joined_names* is the comma-joined gemstone names (not abbreviations).
    The arithmetic is frozen: previously issued codes must keep verifying.
    """
    base = _utf16_code_unit_sum(joined_names)
    date_val = month * year + sequence
    hash_val = (base * CHECKSUM_BASE_WEIGHT + date_val * CHECKSUM_DATE_WEIGHT) % CHECKSUM_MODULUS

    result = ""
    temp = hash_val
    for _ in range(CHECKSUM_LENGTH):
        result = CHECKSUM_ALPHABET[temp % len(CHECKSUM_ALPHABET)] + result
        temp //= len(CHECKSUM_ALPHABET)
    return result


# ------------------------------------------------------------------
# Generate / parse / verify
# ------------------------------------------------------------------


def generate_code(
    gemstone_names: Sequence[str],
    month: int,
    year: int,
    piece_number: int,
) -> str:
    """Build the full code, e.g. ``GM-2509-AME-007-X7K9``.

    More than one gemstone collapses to ``MIX``; the checksum still covers
    the raw joined names. Range checks on the numeric inputs are left to
    the caller.
    """
    month_year = f"{str(year)[-2:]}{str(month).zfill(2)}"

    if len(gemstone_names) == 1:
        gemstone_part = resolve_gemstone_abbreviation(gemstone_names[0])
    else:
        gemstone_part = MIXED_GEMSTONE_PART

    piece_str = str(piece_number).zfill(PIECE_NUMBER_WIDTH)
    checksum = compute_checksum(
        GEMSTONE_NAME_SEPARATOR.join(gemstone_names), month, year, piece_number
    )

    return CODE_SEPARATOR.join([CODE_PREFIX, month_year, gemstone_part, piece_str, checksum])


def parse_code(full_code: str) -> CodeComponents | None:
    """Split a full code into its components, or ``None`` if it is malformed."""
    if not isinstance(full_code, str):
        return None

    parts = full_code.split(CODE_SEPARATOR)
    if len(parts) != CODE_SEGMENT_COUNT or parts[0] != CODE_PREFIX:
        return None

    month_year, gemstone_part, piece_str, checksum = parts[1:]
    if not _MONTH_YEAR_RE.fullmatch(month_year) or not _DIGITS_RE.fullmatch(piece_str):
        return None

    year = CENTURY_BASE + int(month_year[:2])
    month = int(month_year[2:4])
    piece_number = int(piece_str)

    if month < 1 or month > 12:
        return None
    if piece_number < 1:
        return None

    return CodeComponents(
        year=year,
        month=month,
        gemstone_part=gemstone_part,
        piece_number=piece_number,
        checksum=checksum,
        full_code=full_code,
    )


def is_well_formed(full_code: str) -> bool:
    """Check *full_code* against the strict code grammar."""
    return isinstance(full_code, str) and bool(CODE_REGEX.fullmatch(full_code))


def verify_code(
    full_code: str,
    gemstone_names: Sequence[str],
    month: int,
    year: int,
    piece_number: int,
) -> bool:
    """Regenerate the code from ground truth and compare whole strings."""
    try:
        expected = generate_code(gemstone_names, month, year, piece_number)
    except Exception as exc:
        logger.warning("Could not recompute code for verification of %r: %s", full_code, exc)
        return False
    return full_code == expected
