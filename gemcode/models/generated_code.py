"""Generated code registry."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, SmallInteger, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from gemcode.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from gemcode.modules.codec.constants import CHECKSUM_LENGTH, CODE_MAX_LENGTH


class GeneratedCode(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "generated_codes"

    full_code: Mapped[str] = mapped_column(
        String(CODE_MAX_LENGTH), nullable=False
    )
    gemstone_names: Mapped[str] = mapped_column(Text, nullable=False)
    gemstone_codes: Mapped[str] = mapped_column(Text, nullable=False)
    piece_number: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    year: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    checksum: Mapped[str] = mapped_column(String(CHECKSUM_LENGTH), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    generation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("full_code", name="uq_generated_codes_full_code"),
        Index("ix_generated_codes_month_year", "month", "year"),
        Index("ix_generated_codes_generation_date", "generation_date"),
    )
