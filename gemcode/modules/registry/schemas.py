"""Pydantic request and result schemas for the code registry."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator

from gemcode.modules.registry.constants import (
    MAX_CODE_YEAR,
    MAX_GEMSTONE_NAME_LENGTH,
    MAX_GEMSTONES_PER_CODE,
    MAX_NOTES_LENGTH,
    MIN_CODE_YEAR,
)


# ---------------------------------------------------------------------------
# Minting
# ---------------------------------------------------------------------------


class CodeGenerateRequest(BaseModel):
    """Input for minting a new code."""

    gemstone_names: list[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_GEMSTONES_PER_CODE,
        description="Gemstone names in the order they define the group",
    )
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=MIN_CODE_YEAR, le=MAX_CODE_YEAR)
    notes: str | None = Field(None, max_length=MAX_NOTES_LENGTH)

    @field_validator("gemstone_names")
    @classmethod
    def validate_gemstone_names(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name.strip():
                raise ValueError("Gemstone names must not be blank")
            if len(name) > MAX_GEMSTONE_NAME_LENGTH:
                raise ValueError(
                    f"Gemstone name too long: {name[:20]}... "
                    f"(max {MAX_GEMSTONE_NAME_LENGTH} characters)"
                )
        return v


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------


class CodeVerificationResult(BaseModel):
    full_code: str
    well_formed: bool
    registered: bool
    valid: bool
    code_id: uuid.UUID | None = None
