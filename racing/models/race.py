"""Race model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from racing.database import Base


class Race(Base):
    """Race table model."""

    __tablename__ = "races"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    meeting_id: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)  # sequence within meeting
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False)
    advertised_start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Race(id={self.id}, meeting_id={self.meeting_id}, name='{self.name}')>"
