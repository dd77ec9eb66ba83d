"""create_companies_jobs_users

Creates the companies, jobs and users tables.

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:41.517302

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'companies',
        sa.Column('handle', sa.String(25), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('num_employees', sa.Integer(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.CheckConstraint('num_employees >= 0', name='ck_companies_num_employees'),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('salary', sa.Integer(), nullable=True),
        sa.Column('equity', sa.Numeric(), nullable=True),
        sa.Column(
            'company_handle',
            sa.String(25),
            sa.ForeignKey('companies.handle', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.CheckConstraint('salary >= 0', name='ck_jobs_salary'),
        sa.CheckConstraint('equity <= 1.0', name='ck_jobs_equity'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_company_handle', 'jobs', ['company_handle'])

    op.create_table(
        'users',
        sa.Column('username', sa.String(25), primary_key=True),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint("email LIKE '_%@%'", name='ck_users_email'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('users')
    op.drop_index('ix_jobs_company_handle', table_name='jobs')
    op.drop_index('ix_jobs_id', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('companies')
