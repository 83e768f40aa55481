# backend/atlas/models/algorithm.py
import uuid
from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from atlas.core.database import Base
from atlas.models.base import HasId, KnowledgeArtifact, enum_column
from atlas.models.enums import ComputationModel, QuantumComputationModel


class Algorithm(KnowledgeArtifact, Base):
    """Root of the catalog.

    ``computation_model`` is the discriminator: the quantum-specific columns
    (nisq_ready, quantum_computation_model, speed_up) are only populated for
    QUANTUM and HYBRID algorithms.
    """
    __tablename__ = "algorithms"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    acronym: Mapped[str | None] = mapped_column(String(255), nullable=True)
    intent: Mapped[str | None] = mapped_column(Text, nullable=True)
    problem: Mapped[str | None] = mapped_column(Text, nullable=True)
    input_format: Mapped[str | None] = mapped_column(Text, nullable=True)
    algo_parameter: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_format: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    assumptions: Mapped[str | None] = mapped_column(Text, nullable=True)
    computation_model: Mapped[ComputationModel] = enum_column(ComputationModel, nullable=False)

    # quantum / hybrid only
    nisq_ready: Mapped[bool | None] = mapped_column(nullable=True)
    quantum_computation_model: Mapped[QuantumComputationModel | None] = enum_column(
        QuantumComputationModel, nullable=True
    )
    speed_up: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @property
    def is_quantum(self) -> bool:
        return self.computation_model != ComputationModel.CLASSIC


class AlgorithmRelation(HasId, Base):
    __tablename__ = "algorithm_relations"

    source_algorithm_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithms.id", ondelete="CASCADE"), nullable=False
    )
    target_algorithm_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithms.id", ondelete="CASCADE"), nullable=False
    )
    algorithm_relation_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithm_relation_types.id"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    algorithm_relation_type: Mapped["AlgorithmRelationType"] = relationship(
        "AlgorithmRelationType", lazy="joined"
    )

    __table_args__ = (
        UniqueConstraint(
            "source_algorithm_id",
            "target_algorithm_id",
            "algorithm_relation_type_id",
            name="uq_algorithm_relation_triple",
        ),
        Index("idx_algorithm_relations_source", "source_algorithm_id"),
        Index("idx_algorithm_relations_target", "target_algorithm_id"),
    )


class PatternRelation(HasId, Base):
    """Relation from an algorithm to an externally hosted pattern (by URI)."""
    __tablename__ = "pattern_relations"

    algorithm_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pattern: Mapped[str] = mapped_column(String(1000), nullable=False)
    pattern_relation_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("pattern_relation_types.id"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    pattern_relation_type: Mapped["PatternRelationType"] = relationship(
        "PatternRelationType", lazy="joined"
    )


class Sketch(KnowledgeArtifact, Base):
    """Sketch metadata; image bytes live in external storage behind image_url."""
    __tablename__ = "sketches"

    algorithm_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("algorithms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
