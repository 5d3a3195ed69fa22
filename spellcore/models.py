"""SQLAlchemy ORM models."""

from datetime import datetime, timezone

from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from spellcore.database import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserWord(Base):
    """A word the user added to one of their dictionaries."""

    __tablename__ = "user_words"
    __table_args__ = (UniqueConstraint("dictionary", "word", name="uq_user_word"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    dictionary: Mapped[str] = mapped_column(Text, index=True)
    word: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(default=_utc_now)

    def __repr__(self) -> str:
        return f"UserWord(dictionary={self.dictionary!r}, word={self.word!r})"
