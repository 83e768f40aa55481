# backend/atlas/models/compute_resource.py
import uuid
from typing import NamedTuple
from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from atlas.core.database import Base
from atlas.models.base import HasId, KnowledgeArtifact, enum_column
from atlas.models.enums import (
    ComputeResourceKind,
    ComputeResourcePropertyDataType,
    PropertyOwnerType,
    QuantumComputationModel,
)


class ComputeResource(KnowledgeArtifact, Base):
    """A QPU or a simulator; ``resource_kind`` is the discriminator."""
    __tablename__ = "compute_resources"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    technology: Mapped[str | None] = mapped_column(String(255), nullable=True)
    quantum_computation_model: Mapped[QuantumComputationModel | None] = enum_column(
        QuantumComputationModel, nullable=True
    )
    resource_kind: Mapped[ComputeResourceKind] = enum_column(
        ComputeResourceKind, nullable=False, default=ComputeResourceKind.QPU
    )
    # simulators only
    local_execution: Mapped[bool | None] = mapped_column(nullable=True)


class ComputeResourcePropertyType(HasId, Base):
    __tablename__ = "compute_resource_property_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    datatype: Mapped[ComputeResourcePropertyDataType] = enum_column(
        ComputeResourcePropertyDataType, nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class PropertyOwner(NamedTuple):
    owner_type: PropertyOwnerType
    owner_id: uuid.UUID


class ComputeResourceProperty(HasId, Base):
    """Typed, string-encoded attribute owned by exactly one catalog entity.

    The owner is a tagged union (owner_type, owner_id) so a property can
    never have zero or several owners.
    """
    __tablename__ = "compute_resource_properties"

    compute_resource_property_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("compute_resource_property_types.id"), nullable=False
    )
    value: Mapped[str] = mapped_column(Text, nullable=False)
    owner_type: Mapped[PropertyOwnerType] = enum_column(PropertyOwnerType, nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    type: Mapped[ComputeResourcePropertyType] = relationship(
        ComputeResourcePropertyType, lazy="joined"
    )

    __table_args__ = (
        Index("idx_compute_resource_properties_owner", "owner_type", "owner_id"),
    )

    @property
    def owner(self) -> PropertyOwner:
        return PropertyOwner(self.owner_type, self.owner_id)
