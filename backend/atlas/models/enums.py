"""Enumerations shared by the catalog models and schemas."""

import enum
import re


class ComputationModel(str, enum.Enum):
    CLASSIC = "CLASSIC"
    QUANTUM = "QUANTUM"
    HYBRID = "HYBRID"


class QuantumComputationModel(str, enum.Enum):
    GATE_BASED = "GATE_BASED"
    MEASUREMENT_BASED = "MEASUREMENT_BASED"
    QUANTUM_ANNEALING = "QUANTUM_ANNEALING"


class ComputeResourceKind(str, enum.Enum):
    QPU = "QPU"
    SIMULATOR = "SIMULATOR"


class ImplementationKind(str, enum.Enum):
    CLASSIC = "CLASSIC"
    QUANTUM = "QUANTUM"


class ImplementationPackageType(str, enum.Enum):
    FILE = "FILE"
    TOSCA = "TOSCA"
    FUNCTION = "FUNCTION"


class DiscussionStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class PropertyOwnerType(str, enum.Enum):
    ALGORITHM = "ALGORITHM"
    IMPLEMENTATION = "IMPLEMENTATION"
    COMPUTE_RESOURCE = "COMPUTE_RESOURCE"


_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class ComputeResourcePropertyDataType(str, enum.Enum):
    """Datatype a compute resource property value must parse as.

    Values are stored string-encoded; ``is_valid`` decides whether a raw
    value is acceptable for the datatype.
    """

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"

    def is_valid(self, value: str | None) -> bool:
        if value is None:
            return False
        if self is ComputeResourcePropertyDataType.INTEGER:
            return _INTEGER_PATTERN.match(value) is not None
        if self is ComputeResourcePropertyDataType.FLOAT:
            return _FLOAT_PATTERN.match(value) is not None
        return True
