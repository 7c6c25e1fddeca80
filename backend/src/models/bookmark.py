"""Bookmark model for storing titled URLs."""
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, Sequence, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

TITLE_MAX_LENGTH = 200
URL_MAX_LENGTH = 500

# Ids are 64-bit; path ids outside this range can never match a row
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

bookmark_id_seq = Sequence("bookmark_id_seq")


class Bookmark(Base):
    """
    Bookmark model - a title and URL with creation/update timestamps.

    created_at is written once when the row is inserted. updated_at stays NULL
    until the first successful update.
    """

    __tablename__ = "bookmarks"

    # SQLite only autoincrements INTEGER PRIMARY KEY, and has no sequences
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        bookmark_id_seq,
        primary_key=True,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    url: Mapped[str] = mapped_column(String(URL_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
