# backend/atlas/models/publication.py
from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import KnowledgeArtifact


class Publication(KnowledgeArtifact, Base):
    __tablename__ = "publications"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    doi: Mapped[str | None] = mapped_column(String(255), nullable=True)
    url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    authors: Mapped[list] = mapped_column(JSON, default=list)
