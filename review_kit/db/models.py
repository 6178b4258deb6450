"""
Database Models - SQLAlchemy ORM models with strict typing.

All columns use Mapped[] type annotations.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(UTC)


class ReviewDefault(Base):
    """
    ORM model for review_defaults table.

    One row per namespaced key. Only the column matching the key's type is set.
    """

    __tablename__ = "review_defaults"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Namespacing
    suite_name: Mapped[str] = mapped_column(String(255), nullable=False)
    key: Mapped[str] = mapped_column(String(255), nullable=False)

    # Typed values
    integer_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    date_value: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    string_value: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Audit timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )

    __table_args__ = (
        UniqueConstraint("suite_name", "key", name="uq_review_defaults_suite_key"),
        Index("idx_review_defaults_suite", "suite_name"),
    )
