"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class HeaderModel(Base):
    """Hero header copy."""

    __tablename__ = "headers"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )


class IntroductionModel(Base):
    """Introduction copy."""

    __tablename__ = "introductions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    header: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )


class ProjectDetailsModel(Base):
    """Per-section title/header/description copy."""

    __tablename__ = "project_details"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    section: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint(
            "section IN ('projects', 'services', 'experience', 'skills')",
            name="ck_project_details_section",
        ),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    header: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime)


class SkillModel(Base):
    """Skill card."""

    __tablename__ = "skills"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    link: Mapped[str] = mapped_column(String(500), nullable=False)
    icon_url: Mapped[str | None] = mapped_column(String(500))
    icon_file: Mapped[str | None] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )


class ProjectModel(Base):
    """Portfolio project card."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    image: Mapped[str] = mapped_column(String(64), nullable=False)
    card_title: Mapped[str] = mapped_column(String(100), nullable=False)
    card_description: Mapped[str] = mapped_column(Text, nullable=False)
    tag: Mapped[str] = mapped_column(String(255), nullable=False)
    github_link: Mapped[str] = mapped_column(String(500), nullable=False)
    website_link: Mapped[str | None] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime)


class ServiceModel(Base):
    """Service flip card."""

    __tablename__ = "services"
    __table_args__ = (
        CheckConstraint(
            "experience_level IN ('Beginner', 'Intermediate', 'Expert')",
            name="ck_services_experience_level",
        ),
        CheckConstraint(
            "category IN ('design', 'development', 'consulting')",
            name="ck_services_category",
        ),
        CheckConstraint(
            "price_type IS NULL OR price_type IN ('project', 'hour', 'fixed')",
            name="ck_services_price_type",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Front side
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[str] = mapped_column(String(64), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(50))
    badge_text: Mapped[str | None] = mapped_column(String(20))
    accent_color: Mapped[str | None] = mapped_column(String(7))

    # Back side
    description: Mapped[str] = mapped_column(Text, nullable=False)
    key_features: Mapped[str] = mapped_column(Text, nullable=False)
    technologies: Mapped[str] = mapped_column(String(200), nullable=False)
    experience_level: Mapped[str] = mapped_column(String(20), nullable=False)
    project_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Call to action
    cta_text: Mapped[str] = mapped_column(String(30), nullable=False)
    cta_link: Mapped[str] = mapped_column(String(500), nullable=False)

    # Pricing
    starting_price: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str | None] = mapped_column(String(5))
    price_type: Mapped[str | None] = mapped_column(String(20))
    delivery_time: Mapped[str | None] = mapped_column(String(50))

    # Metadata
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime)


class WorkExperienceModel(Base):
    """Experience timeline entry."""

    __tablename__ = "work_experiences"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    icon: Mapped[str] = mapped_column(String(64), nullable=False)
    workplace: Mapped[str] = mapped_column(String(100), nullable=False)
    work_title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime)
    is_current_job: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )


class TechnologyModel(Base):
    """Technology badge."""

    __tablename__ = "technologies"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    icon: Mapped[str] = mapped_column(String(500), nullable=False)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int | None] = mapped_column("sort_order", Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class StoredBlobModel(Base):
    """Uploaded binary asset."""

    __tablename__ = "stored_blobs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    content_type: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )
