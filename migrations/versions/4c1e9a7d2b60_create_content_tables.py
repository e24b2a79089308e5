"""create_content_tables

Revision ID: 4c1e9a7d2b60
Revises:
Create Date: 2026-10-19 09:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b60'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create one table per content entity plus stored_blobs."""
    op.create_table('headers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_headers_created_at', 'headers', ['created_at'], unique=False)

    op.create_table('introductions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('header', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_introductions_created_at', 'introductions', ['created_at'], unique=False)

    op.create_table('project_details',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('section', sa.String(length=20), nullable=False),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('header', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "section IN ('projects', 'services', 'experience', 'skills')",
            name='ck_project_details_section',
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_project_details_section', 'project_details', ['section'], unique=False)

    op.create_table('skills',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('link', sa.String(length=500), nullable=False),
        sa.Column('icon_url', sa.String(length=500), nullable=True),
        sa.Column('icon_file', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skills_created_at', 'skills', ['created_at'], unique=False)

    op.create_table('projects',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image', sa.String(length=64), nullable=False),
        sa.Column('card_title', sa.String(length=100), nullable=False),
        sa.Column('card_description', sa.Text(), nullable=False),
        sa.Column('tag', sa.String(length=255), nullable=False),
        sa.Column('github_link', sa.String(length=500), nullable=False),
        sa.Column('website_link', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_projects_created_at', 'projects', ['created_at'], unique=False)

    op.create_table('services',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('icon', sa.String(length=64), nullable=False),
        sa.Column('subtitle', sa.String(length=50), nullable=True),
        sa.Column('badge_text', sa.String(length=20), nullable=True),
        sa.Column('accent_color', sa.String(length=7), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('key_features', sa.Text(), nullable=False),
        sa.Column('technologies', sa.String(length=200), nullable=False),
        sa.Column('experience_level', sa.String(length=20), nullable=False),
        sa.Column('project_count', sa.Integer(), nullable=False),
        sa.Column('cta_text', sa.String(length=30), nullable=False),
        sa.Column('cta_link', sa.String(length=500), nullable=False),
        sa.Column('starting_price', sa.Float(), nullable=True),
        sa.Column('currency', sa.String(length=5), nullable=True),
        sa.Column('price_type', sa.String(length=20), nullable=True),
        sa.Column('delivery_time', sa.String(length=50), nullable=True),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "experience_level IN ('Beginner', 'Intermediate', 'Expert')",
            name='ck_services_experience_level',
        ),
        sa.CheckConstraint(
            "category IN ('design', 'development', 'consulting')",
            name='ck_services_category',
        ),
        sa.CheckConstraint(
            "price_type IS NULL OR price_type IN ('project', 'hour', 'fixed')",
            name='ck_services_price_type',
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_services_category', 'services', ['category'], unique=False)
    op.create_index('ix_services_created_at', 'services', ['created_at'], unique=False)

    op.create_table('work_experiences',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('icon', sa.String(length=64), nullable=False),
        sa.Column('workplace', sa.String(length=100), nullable=False),
        sa.Column('work_title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('is_current_job', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_work_experiences_created_at', 'work_experiences', ['created_at'], unique=False)

    op.create_table('technologies',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('icon', sa.String(length=500), nullable=False),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('stored_blobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('content_type', sa.String(length=255), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('data', sa.LargeBinary(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_stored_blobs_created_at', 'stored_blobs', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop all content tables."""
    op.drop_index('ix_stored_blobs_created_at', table_name='stored_blobs')
    op.drop_table('stored_blobs')
    op.drop_table('technologies')
    op.drop_index('ix_work_experiences_created_at', table_name='work_experiences')
    op.drop_table('work_experiences')
    op.drop_index('ix_services_created_at', table_name='services')
    op.drop_index('ix_services_category', table_name='services')
    op.drop_table('services')
    op.drop_index('ix_projects_created_at', table_name='projects')
    op.drop_table('projects')
    op.drop_index('ix_skills_created_at', table_name='skills')
    op.drop_table('skills')
    op.drop_index('ix_project_details_section', table_name='project_details')
    op.drop_table('project_details')
    op.drop_index('ix_introductions_created_at', table_name='introductions')
    op.drop_table('introductions')
    op.drop_index('ix_headers_created_at', table_name='headers')
    op.drop_table('headers')
