"""Registry constants: request bounds and database constraint names."""

from __future__ import annotations

MIN_CODE_YEAR = 2000
MAX_CODE_YEAR = 2099

MAX_GEMSTONES_PER_CODE = 20
MAX_GEMSTONE_NAME_LENGTH = 100
MAX_NOTES_LENGTH = 2000
MAX_LIST_LIMIT = 200

# Unique constraint names, matched against database error messages.
FULL_CODE_CONSTRAINT_NAME = "uq_generated_codes_full_code"
SEQUENCE_CONSTRAINT_NAME = "uq_code_sequences_group"

LIKE_ESCAPE_CHAR = "\\"
