"""Organization account and signup request models."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class OrganizationAccount(Base):
    """Approved organization. Rows are created by the admin approval workflow."""

    __tablename__ = "organization_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False
    )
    url: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    password: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    location_name: Mapped[str] = mapped_column(String(256), nullable=False)


class OrganizationRequest(Base):
    """Pending organization signup awaiting administrator approval."""

    __tablename__ = "organization_request"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    url: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    location_name: Mapped[str] = mapped_column(String(256), nullable=False)
