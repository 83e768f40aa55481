# backend/atlas/models/associations.py
"""Join tables of the many-to-many meshes.

Each link is stored exactly once; both directions are answered by querying
the same table.
"""

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from atlas.core.database import Base


def _link_table(name: str, left: tuple[str, str], right: tuple[str, str], right_type=Uuid) -> Table:
    left_column, left_target = left
    right_column, right_target = right
    return Table(
        name,
        Base.metadata,
        Column(left_column, Uuid, ForeignKey(left_target, ondelete="CASCADE"), primary_key=True),
        Column(right_column, right_type, ForeignKey(right_target, ondelete="CASCADE"), primary_key=True),
    )


algorithm_tags = _link_table(
    "algorithm_tags",
    ("algorithm_id", "algorithms.id"),
    ("tag_value", "tags.value"),
    right_type=String(255),
)
algorithm_publications = _link_table(
    "algorithm_publications",
    ("algorithm_id", "algorithms.id"),
    ("publication_id", "publications.id"),
)
algorithm_problem_types = _link_table(
    "algorithm_problem_types",
    ("algorithm_id", "algorithms.id"),
    ("problem_type_id", "problem_types.id"),
)
algorithm_application_areas = _link_table(
    "algorithm_application_areas",
    ("algorithm_id", "algorithms.id"),
    ("application_area_id", "application_areas.id"),
)
algorithm_learning_methods = _link_table(
    "algorithm_learning_methods",
    ("algorithm_id", "algorithms.id"),
    ("learning_method_id", "learning_methods.id"),
)

implementation_tags = _link_table(
    "implementation_tags",
    ("implementation_id", "implementations.id"),
    ("tag_value", "tags.value"),
    right_type=String(255),
)
implementation_publications = _link_table(
    "implementation_publications",
    ("implementation_id", "implementations.id"),
    ("publication_id", "publications.id"),
)
implementation_software_platforms = _link_table(
    "implementation_software_platforms",
    ("implementation_id", "implementations.id"),
    ("software_platform_id", "software_platforms.id"),
)

software_platform_cloud_services = _link_table(
    "software_platform_cloud_services",
    ("software_platform_id", "software_platforms.id"),
    ("cloud_service_id", "cloud_services.id"),
)
software_platform_compute_resources = _link_table(
    "software_platform_compute_resources",
    ("software_platform_id", "software_platforms.id"),
    ("compute_resource_id", "compute_resources.id"),
)
cloud_service_compute_resources = _link_table(
    "cloud_service_compute_resources",
    ("cloud_service_id", "cloud_services.id"),
    ("compute_resource_id", "compute_resources.id"),
)
