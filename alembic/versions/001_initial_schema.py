"""initial schema
Revision ID: 001_initial_schema
Revises: 
Create Date: 2026-10-17 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255))
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('posts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text()),
        sa.Column('published', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False)
    )

    op.create_table('profiles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('bio', sa.Text()),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.UniqueConstraint('user_id', name='uq_profiles_user_id')
    )

def downgrade():
    op.drop_table('profiles')
    op.drop_table('posts')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
