# backend/atlas/models/tosca.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import KnowledgeArtifact


class ToscaApplication(KnowledgeArtifact, Base):
    __tablename__ = "tosca_applications"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tosca_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    tosca_namespace: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    tosca_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
