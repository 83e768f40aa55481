# backend/atlas/models/implementation.py
import uuid
from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import KnowledgeArtifact, enum_column
from atlas.models.enums import ImplementationKind, ImplementationPackageType


class Implementation(KnowledgeArtifact, Base):
    __tablename__ = "implementations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    contributors: Mapped[str | None] = mapped_column(Text, nullable=True)
    assumptions: Mapped[str | None] = mapped_column(Text, nullable=True)
    input_format: Mapped[str | None] = mapped_column(Text, nullable=True)
    parameter: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_format: Mapped[str | None] = mapped_column(Text, nullable=True)
    link: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    dependencies: Mapped[str | None] = mapped_column(Text, nullable=True)
    version: Mapped[str | None] = mapped_column(String(100), nullable=True)
    license: Mapped[str | None] = mapped_column(String(255), nullable=True)
    technology: Mapped[str | None] = mapped_column(String(255), nullable=True)
    problem_statement: Mapped[str | None] = mapped_column(Text, nullable=True)
    implementation_kind: Mapped[ImplementationKind] = enum_column(ImplementationKind, nullable=False)

    # no ON DELETE: an implemented algorithm cannot be removed
    implemented_algorithm_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithms.id"), nullable=False, index=True
    )


class ImplementationPackage(KnowledgeArtifact, Base):
    __tablename__ = "implementation_packages"

    implementation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("implementations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    package_type: Mapped[ImplementationPackageType] = enum_column(
        ImplementationPackageType, nullable=False
    )


class File(KnowledgeArtifact, Base):
    """Metadata of a file attached to an implementation (bytes stored externally)."""
    __tablename__ = "files"

    implementation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("implementations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    implementation_package_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("implementation_packages.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_url: Mapped[str] = mapped_column(String(1000), unique=True, nullable=False)
