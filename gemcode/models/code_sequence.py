"""Per-group piece-number counter."""

from __future__ import annotations

from sqlalchemy import Integer, SmallInteger, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gemcode.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class CodeSequence(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "code_sequences"

    # JSON array of the exact gemstone names, in input order
    group_key: Mapped[str] = mapped_column(Text, nullable=False)
    month: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    year: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")

    __table_args__ = (
        UniqueConstraint("group_key", "month", "year", name="uq_code_sequences_group"),
    )
