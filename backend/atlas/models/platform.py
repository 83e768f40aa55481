# backend/atlas/models/platform.py
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import KnowledgeArtifact


class SoftwarePlatform(KnowledgeArtifact, Base):
    __tablename__ = "software_platforms"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    link: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    license: Mapped[str | None] = mapped_column(String(255), nullable=True)
    version: Mapped[str | None] = mapped_column(String(100), nullable=True)


class CloudService(KnowledgeArtifact, Base):
    __tablename__ = "cloud_services"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    provider: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cost_model: Mapped[str | None] = mapped_column(String(255), nullable=True)
