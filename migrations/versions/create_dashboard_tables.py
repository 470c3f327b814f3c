"""create dashboard tables

Revision ID: create_dashboard_tables
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_dashboard_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(120), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(256)),
        sa.Column('name', sa.String(64)),
        sa.Column('created_at', sa.DateTime()),
    )
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('full_name', sa.String(120)),
        sa.Column('school_level', sa.String(10)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_table(
        'user_roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_roles_user_role'),
    )
    # One contact record per school level
    op.create_table(
        'about',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('school_level', sa.String(10), nullable=False, unique=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('contact_phone', sa.String(30)),
        sa.Column('contact_email', sa.String(120)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('achievement_date', sa.Date(), nullable=False),
        sa.Column('image_url', sa.String(500)),
        sa.Column('school_level', sa.String(10)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_achievements_school_level', 'achievements', ['school_level'])

def downgrade():
    op.drop_index('ix_achievements_school_level', table_name='achievements')
    op.drop_table('achievements')
    op.drop_table('about')
    op.drop_table('user_roles')
    op.drop_table('profiles')
    op.drop_table('users')
