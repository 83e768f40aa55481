# backend/atlas/models/classification.py
"""Small lookup tables linked to algorithms and implementations."""

import uuid
from datetime import datetime
from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import HasId


class Tag(Base):
    """Natural-key entity: ``value`` is the identifier and is unique."""
    __tablename__ = "tags"

    value: Mapped[str] = mapped_column(String(255), primary_key=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)


class ProblemType(HasId, Base):
    __tablename__ = "problem_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # acyclic by service-level check
    parent_problem_type_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("problem_types.id", ondelete="SET NULL"), nullable=True
    )


class ApplicationArea(HasId, Base):
    __tablename__ = "application_areas"

    name: Mapped[str] = mapped_column(String(255), nullable=False)


class LearningMethod(HasId, Base):
    __tablename__ = "learning_methods"

    name: Mapped[str] = mapped_column(String(255), nullable=False)


class PatternRelationType(HasId, Base):
    __tablename__ = "pattern_relation_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)


class AlgorithmRelationType(HasId, Base):
    __tablename__ = "algorithm_relation_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    inverse_type_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
