"""SQLAlchemy ORM model for the ClientRecord entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class ClientRecordModel(Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    identity_number: Mapped[str] = mapped_column(String(11), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False, default="")
    cellphone: Mapped[str] = mapped_column(String(40), nullable=False, default="")
    postal_code: Mapped[str] = mapped_column(String(8), nullable=False, default="")
    state: Mapped[str] = mapped_column(String(2), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    district: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    street: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_clients_identity_number", "identity_number"),
    )

    def __repr__(self) -> str:
        return f"<ClientRecordModel(id={self.id}, name='{self.name}', status={self.status})>"
