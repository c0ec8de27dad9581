"""Codec module — product code generation, parsing, and verification."""

from gemcode.modules.codec.codec import (
    CodeComponents,
    compute_checksum,
    gemstone_codes,
    generate_code,
    group_key,
    is_well_formed,
    parse_code,
    resolve_gemstone_abbreviation,
    verify_code,
)

__all__ = [
    "CodeComponents",
    "compute_checksum",
    "gemstone_codes",
    "generate_code",
    "group_key",
    "is_well_formed",
    "parse_code",
    "resolve_gemstone_abbreviation",
    "verify_code",
]
