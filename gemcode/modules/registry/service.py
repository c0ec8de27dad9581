"""Code registry service — piece-number allocation and storage of minted codes."""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gemcode.config import settings
from gemcode.exceptions import (
    ConflictException,
    InvalidCodeFormatException,
    NotFoundException,
)
from gemcode.models.code_sequence import CodeSequence
from gemcode.models.generated_code import GeneratedCode
from gemcode.modules.codec import (
    compute_checksum,
    gemstone_codes,
    generate_code,
    group_key,
    parse_code,
    verify_code,
)
from gemcode.modules.codec.constants import GEMSTONE_NAME_SEPARATOR
from gemcode.modules.registry.constants import (
    FULL_CODE_CONSTRAINT_NAME,
    LIKE_ESCAPE_CHAR,
    MAX_LIST_LIMIT,
    SEQUENCE_CONSTRAINT_NAME,
)
from gemcode.modules.registry.schemas import CodeGenerateRequest, CodeVerificationResult

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    """Make LIKE wildcards in user input match literally."""
    return (
        value.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


class CodeRegistryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Sequence allocation
    # ------------------------------------------------------------------

    async def next_sequence(self, gemstone_names: Sequence[str], month: int, year: int) -> int:
        """Atomically allocate the next piece number for a (names, month, year) group.

        Uses a single upsert on the group's counter row, so concurrent callers
        never receive the same value. Numbers burned by a failed insert are
        not reused.
        """
        stmt = (
            pg_insert(CodeSequence)
            .values(group_key=group_key(gemstone_names), month=month, year=year, last_value=1)
            .on_conflict_do_update(
                constraint=SEQUENCE_CONSTRAINT_NAME,
                set_={
                    "last_value": CodeSequence.last_value + 1,
                    "updated_at": func.now(),
                },
            )
            .returning(CodeSequence.last_value)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    # ------------------------------------------------------------------
    # Minting
    # ------------------------------------------------------------------

    async def mint_code(self, data: CodeGenerateRequest) -> GeneratedCode:
        """Allocate a piece number, build the code, and register it.

        A collision on ``full_code`` (rows written outside the counter)
        advances the sequence and tries again.
        """
        names = list(data.gemstone_names)
        max_attempts = settings.code_mint_max_attempts

        for attempt in range(1, max_attempts + 1):
            piece_number = await self.next_sequence(names, data.month, data.year)
            full_code = generate_code(names, data.month, data.year, piece_number)

            record = GeneratedCode(
                full_code=full_code,
                gemstone_names=group_key(names),
                gemstone_codes=GEMSTONE_NAME_SEPARATOR.join(gemstone_codes(names)),
                piece_number=piece_number,
                month=data.month,
                year=data.year,
                checksum=compute_checksum(
                    GEMSTONE_NAME_SEPARATOR.join(names), data.month, data.year, piece_number
                ),
                notes=data.notes,
            )

            try:
                async with self.db.begin_nested():
                    self.db.add(record)
                    await self.db.flush()
            except IntegrityError as exc:
                if FULL_CODE_CONSTRAINT_NAME not in str(exc.orig):
                    raise
                logger.warning(
                    "Code %s already registered (attempt %d/%d), advancing sequence",
                    full_code,
                    attempt,
                    max_attempts,
                )
                continue

            logger.info(
                "Minted code %s for %s (%02d/%d, piece %d)",
                full_code,
                names,
                data.month,
                data.year,
                piece_number,
            )
            return record

        raise ConflictException(
            f"Could not mint a unique code for {names} in {data.month:02d}/{data.year} "
            f"after {max_attempts} attempts"
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    async def get_by_code(self, full_code: str) -> GeneratedCode:
        if parse_code(full_code) is None:
            raise InvalidCodeFormatException(
                f"'{full_code}' is not a valid product code",
                details=[{"field": "full_code", "message": "Expected GM-YYMM-GEM-NNN-CCCC"}],
            )

        result = await self.db.execute(
            select(GeneratedCode).where(GeneratedCode.full_code == full_code)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundException(f"Code {full_code} not found")
        return record

    async def list_codes(
        self,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[GeneratedCode], int]:
        limit = min(limit or settings.code_list_default_limit, MAX_LIST_LIMIT)

        total_result = await self.db.execute(select(func.count()).select_from(GeneratedCode))
        total = total_result.scalar_one()

        result = await self.db.execute(
            select(GeneratedCode)
            .order_by(GeneratedCode.generation_date.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all()), total

    async def search_codes(self, query: str) -> list[GeneratedCode]:
        """Case-insensitive substring search over code, gemstone names, and notes."""
        pattern = f"%{_escape_like(query)}%"
        result = await self.db.execute(
            select(GeneratedCode)
            .where(
                or_(
                    GeneratedCode.full_code.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                    GeneratedCode.gemstone_names.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                    GeneratedCode.notes.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                )
            )
            .order_by(GeneratedCode.generation_date.desc())
        )
        return list(result.scalars().all())

    async def delete_code(self, code_id: uuid.UUID) -> str:
        """Remove a registered code and return its full code string."""
        result = await self.db.execute(
            select(GeneratedCode).where(GeneratedCode.id == code_id)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundException(f"Generated code {code_id} not found")

        full_code = record.full_code
        await self.db.delete(record)
        await self.db.flush()

        logger.info("Deleted generated code %s (%s)", full_code, code_id)
        return full_code

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    async def verify_stored_code(self, full_code: str) -> CodeVerificationResult:
        """Check a presented code against the ground truth stored when it was minted."""
        if parse_code(full_code) is None:
            return CodeVerificationResult(
                full_code=full_code, well_formed=False, registered=False, valid=False,
            )

        result = await self.db.execute(
            select(GeneratedCode).where(GeneratedCode.full_code == full_code)
        )
        record = result.scalar_one_or_none()
        if record is None:
            return CodeVerificationResult(
                full_code=full_code, well_formed=True, registered=False, valid=False,
            )

        try:
            gemstone_names = json.loads(record.gemstone_names)
        except (TypeError, ValueError) as exc:
            logger.warning("Stored code %s has unreadable gemstone names: %s", full_code, exc)
            gemstone_names = None

        valid = gemstone_names is not None and verify_code(
            full_code,
            gemstone_names,
            record.month,
            record.year,
            record.piece_number,
        )
        if not valid:
            logger.warning("Stored code %s failed verification against its record", full_code)

        return CodeVerificationResult(
            full_code=full_code,
            well_formed=True,
            registered=True,
            valid=valid,
            code_id=record.id,
        )
