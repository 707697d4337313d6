"""Volunteer account model and profile satellites."""

from enum import Enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ProfilePrivacy(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class VolunteerAccount(Base):
    __tablename__ = "volunteer_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), nullable=False)
    gender: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False
    )
    password: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)

    # Stored as entered at sign-up; the editor formats it for display
    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True)
    description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    privacy: Mapped[str | None] = mapped_column(String(16), nullable=True)

    # Relationships (defined via string references to avoid circular imports)
    skills = relationship(
        "VolunteerSkill",
        back_populates="volunteer",
        cascade="all, delete-orphan",
        order_by="VolunteerSkill.position",
    )


class VolunteerSkill(Base):
    __tablename__ = "volunteer_skill"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    volunteer_id: Mapped[int] = mapped_column(
        ForeignKey("volunteer_account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    volunteer = relationship("VolunteerAccount", back_populates="skills")


class VolunteerCV(Base):
    """CV reference. Deployments without this table report the CV as unavailable."""

    __tablename__ = "volunteer_cv"

    volunteer_id: Mapped[int] = mapped_column(
        ForeignKey("volunteer_account.id", ondelete="CASCADE"), primary_key=True
    )
    url: Mapped[str] = mapped_column(String(512), nullable=False)
