# backend/atlas/models/base.py
import uuid
from datetime import datetime
from sqlalchemy import Enum, Uuid
from sqlalchemy.orm import Mapped, mapped_column


class HasId:
    """Surrogate identity shared by every catalog entity except Tag."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)


class KnowledgeArtifact(HasId):
    """Entities edited by users track their last modification."""

    last_modified_at: Mapped[datetime] = mapped_column(
        default=datetime.utcnow, onupdate=datetime.utcnow
    )


def enum_column(enum_cls, **kwargs):
    """Store a python enum as its string value (portable across SQLite and PostgreSQL)."""
    return mapped_column(
        Enum(enum_cls, native_enum=False, length=32, validate_strings=True), **kwargs
    )
