"""create_catalog_tables

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 09:12:44.104512

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _identity():
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    ]


def _knowledge_artifact():
    return _identity() + [sa.Column('last_modified_at', sa.DateTime(), nullable=False)]


def _enum(length=32):
    return sa.String(length=length)


def _link_table(name, left, right, right_type=None):
    left_column, left_target = left
    right_column, right_target = right
    op.create_table(
        name,
        sa.Column(left_column, sa.Uuid(), nullable=False),
        sa.Column(right_column, right_type if right_type is not None else sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint([left_column], [left_target], ondelete='CASCADE'),
        sa.ForeignKeyConstraint([right_column], [right_target], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint(left_column, right_column),
    )


def upgrade() -> None:
    """Upgrade schema - Create the catalog tables."""

    # Lookups
    op.create_table(
        'tags',
        sa.Column('value', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('value'),
    )
    op.create_table(
        'problem_types',
        *_identity(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('parent_problem_type_id', sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(['parent_problem_type_id'], ['problem_types.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    for table in ('application_areas', 'learning_methods', 'pattern_relation_types'):
        op.create_table(
            table,
            *_identity(),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
    op.create_table(
        'algorithm_relation_types',
        *_identity(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('inverse_type_name', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'compute_resource_property_types',
        *_identity(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('datatype', _enum(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    # Standalone artifacts
    op.create_table(
        'publications',
        *_knowledge_artifact(),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('doi', sa.String(length=255), nullable=True),
        sa.Column('url', sa.String(length=1000), nullable=True),
        sa.Column('authors', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'tosca_applications',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('tosca_id', sa.String(length=255), nullable=True),
        sa.Column('tosca_namespace', sa.String(length=1000), nullable=True),
        sa.Column('tosca_name', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'software_platforms',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('link', sa.String(length=1000), nullable=True),
        sa.Column('license', sa.String(length=255), nullable=True),
        sa.Column('version', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'cloud_services',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('provider', sa.String(length=255), nullable=True),
        sa.Column('url', sa.String(length=1000), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cost_model', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'compute_resources',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('vendor', sa.String(length=255), nullable=True),
        sa.Column('technology', sa.String(length=255), nullable=True),
        sa.Column('quantum_computation_model', _enum(), nullable=True),
        sa.Column('resource_kind', _enum(), nullable=False),
        sa.Column('local_execution', sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    # Algorithm aggregate
    op.create_table(
        'algorithms',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('acronym', sa.String(length=255), nullable=True),
        sa.Column('intent', sa.Text(), nullable=True),
        sa.Column('problem', sa.Text(), nullable=True),
        sa.Column('input_format', sa.Text(), nullable=True),
        sa.Column('algo_parameter', sa.Text(), nullable=True),
        sa.Column('output_format', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('assumptions', sa.Text(), nullable=True),
        sa.Column('computation_model', _enum(), nullable=False),
        sa.Column('nisq_ready', sa.Boolean(), nullable=True),
        sa.Column('quantum_computation_model', _enum(), nullable=True),
        sa.Column('speed_up', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'algorithm_relations',
        *_identity(),
        sa.Column('source_algorithm_id', sa.Uuid(), nullable=False),
        sa.Column('target_algorithm_id', sa.Uuid(), nullable=False),
        sa.Column('algorithm_relation_type_id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['source_algorithm_id'], ['algorithms.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['target_algorithm_id'], ['algorithms.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['algorithm_relation_type_id'], ['algorithm_relation_types.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'source_algorithm_id', 'target_algorithm_id', 'algorithm_relation_type_id',
            name='uq_algorithm_relation_triple',
        ),
    )
    op.create_index('idx_algorithm_relations_source', 'algorithm_relations', ['source_algorithm_id'])
    op.create_index('idx_algorithm_relations_target', 'algorithm_relations', ['target_algorithm_id'])
    op.create_table(
        'pattern_relations',
        *_identity(),
        sa.Column('algorithm_id', sa.Uuid(), nullable=False),
        sa.Column('pattern', sa.String(length=1000), nullable=False),
        sa.Column('pattern_relation_type_id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['algorithm_id'], ['algorithms.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['pattern_relation_type_id'], ['pattern_relation_types.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_pattern_relations_algorithm_id', 'pattern_relations', ['algorithm_id'])
    op.create_table(
        'sketches',
        *_knowledge_artifact(),
        sa.Column('algorithm_id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['algorithm_id'], ['algorithms.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sketches_algorithm_id', 'sketches', ['algorithm_id'])

    # Implementation aggregate
    op.create_table(
        'implementations',
        *_knowledge_artifact(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('contributors', sa.Text(), nullable=True),
        sa.Column('assumptions', sa.Text(), nullable=True),
        sa.Column('input_format', sa.Text(), nullable=True),
        sa.Column('parameter', sa.Text(), nullable=True),
        sa.Column('output_format', sa.Text(), nullable=True),
        sa.Column('link', sa.String(length=1000), nullable=True),
        sa.Column('dependencies', sa.Text(), nullable=True),
        sa.Column('version', sa.String(length=100), nullable=True),
        sa.Column('license', sa.String(length=255), nullable=True),
        sa.Column('technology', sa.String(length=255), nullable=True),
        sa.Column('problem_statement', sa.Text(), nullable=True),
        sa.Column('implementation_kind', _enum(), nullable=False),
        sa.Column('implemented_algorithm_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['implemented_algorithm_id'], ['algorithms.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_implementations_implemented_algorithm_id', 'implementations', ['implemented_algorithm_id'])
    op.create_table(
        'implementation_packages',
        *_knowledge_artifact(),
        sa.Column('implementation_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('package_type', _enum(), nullable=False),
        sa.ForeignKeyConstraint(['implementation_id'], ['implementations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_implementation_packages_implementation_id', 'implementation_packages', ['implementation_id'])
    op.create_table(
        'files',
        *_knowledge_artifact(),
        sa.Column('implementation_id', sa.Uuid(), nullable=False),
        sa.Column('implementation_package_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=255), nullable=True),
        sa.Column('file_url', sa.String(length=1000), nullable=False),
        sa.ForeignKeyConstraint(['implementation_id'], ['implementations.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['implementation_package_id'], ['implementation_packages.id'], ondelete='SET NULL'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('file_url'),
    )
    op.create_index('ix_files_implementation_id', 'files', ['implementation_id'])

    # Properties (owner is a tagged union, hence no foreign key on owner_id)
    op.create_table(
        'compute_resource_properties',
        *_identity(),
        sa.Column('compute_resource_property_type_id', sa.Uuid(), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('owner_type', _enum(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ['compute_resource_property_type_id'], ['compute_resource_property_types.id']
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'idx_compute_resource_properties_owner', 'compute_resource_properties', ['owner_type', 'owner_id']
    )

    # Discussion
    op.create_table(
        'discussion_topics',
        *_identity(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', _enum(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'discussion_comments',
        *_identity(),
        sa.Column('discussion_topic_id', sa.Uuid(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('reply_to_id', sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(['discussion_topic_id'], ['discussion_topics.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['reply_to_id'], ['discussion_comments.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_discussion_comments_discussion_topic_id', 'discussion_comments', ['discussion_topic_id'])

    # Join tables
    _link_table('algorithm_tags', ('algorithm_id', 'algorithms.id'), ('tag_value', 'tags.value'),
                right_type=sa.String(length=255))
    _link_table('algorithm_publications', ('algorithm_id', 'algorithms.id'), ('publication_id', 'publications.id'))
    _link_table('algorithm_problem_types', ('algorithm_id', 'algorithms.id'),
                ('problem_type_id', 'problem_types.id'))
    _link_table('algorithm_application_areas', ('algorithm_id', 'algorithms.id'),
                ('application_area_id', 'application_areas.id'))
    _link_table('algorithm_learning_methods', ('algorithm_id', 'algorithms.id'),
                ('learning_method_id', 'learning_methods.id'))
    _link_table('implementation_tags', ('implementation_id', 'implementations.id'), ('tag_value', 'tags.value'),
                right_type=sa.String(length=255))
    _link_table('implementation_publications', ('implementation_id', 'implementations.id'),
                ('publication_id', 'publications.id'))
    _link_table('implementation_software_platforms', ('implementation_id', 'implementations.id'),
                ('software_platform_id', 'software_platforms.id'))
    _link_table('software_platform_cloud_services', ('software_platform_id', 'software_platforms.id'),
                ('cloud_service_id', 'cloud_services.id'))
    _link_table('software_platform_compute_resources', ('software_platform_id', 'software_platforms.id'),
                ('compute_resource_id', 'compute_resources.id'))
    _link_table('cloud_service_compute_resources', ('cloud_service_id', 'cloud_services.id'),
                ('compute_resource_id', 'compute_resources.id'))


def downgrade() -> None:
    """Downgrade schema - Drop the catalog tables."""
    for table in (
        'cloud_service_compute_resources',
        'software_platform_compute_resources',
        'software_platform_cloud_services',
        'implementation_software_platforms',
        'implementation_publications',
        'implementation_tags',
        'algorithm_learning_methods',
        'algorithm_application_areas',
        'algorithm_problem_types',
        'algorithm_publications',
        'algorithm_tags',
        'discussion_comments',
        'discussion_topics',
        'compute_resource_properties',
        'files',
        'implementation_packages',
        'implementations',
        'sketches',
        'pattern_relations',
        'algorithm_relations',
        'algorithms',
        'compute_resources',
        'cloud_services',
        'software_platforms',
        'tosca_applications',
        'publications',
        'compute_resource_property_types',
        'algorithm_relation_types',
        'pattern_relation_types',
        'learning_methods',
        'application_areas',
        'problem_types',
        'tags',
    ):
        op.drop_table(table)
