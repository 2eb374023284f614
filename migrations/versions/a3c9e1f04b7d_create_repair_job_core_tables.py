"""create_repair_job_core_tables

Revision ID: a3c9e1f04b7d
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3c9e1f04b7d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    # Collaborator tables owned by other parts of the shop system
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'customers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'miner_models',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('brand', sa.String(100), nullable=False),
        sa.Column('model_name', sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'warranty_profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'parts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('part_number', sa.String(50), nullable=False),
        sa.Column('part_name', sa.String(255), nullable=False),
        sa.Column('stock_qty', sa.Integer(), nullable=False),
        sa.Column('min_stock_qty', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('part_number'),
        sa.CheckConstraint('stock_qty >= 0', name='ck_parts_stock_qty_non_negative'),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_number', sa.String(32), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('miner_model_id', sa.Uuid(), nullable=False),
        sa.Column('warranty_profile_id', sa.Uuid(), nullable=True),
        sa.Column('technician_id', sa.Uuid(), nullable=True),
        sa.Column('created_by_id', sa.Uuid(), nullable=False),
        sa.Column('serial_number', sa.String(100), nullable=True),
        sa.Column('problem_description', sa.Text(), nullable=False),
        sa.Column('customer_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('received_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('estimated_done_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id']),
        sa.ForeignKeyConstraint(['miner_model_id'], ['miner_models.id']),
        sa.ForeignKeyConstraint(['warranty_profile_id'], ['warranty_profiles.id']),
        sa.ForeignKeyConstraint(['technician_id'], ['users.id']),
        sa.ForeignKeyConstraint(['created_by_id'], ['users.id']),
        sa.UniqueConstraint('job_number', name='uq_jobs_job_number'),
        sa.CheckConstraint('priority BETWEEN 0 AND 2', name='ck_jobs_priority'),
    )
    op.create_index('ix_jobs_customer_id', 'jobs', ['customer_id'])
    op.create_index('ix_jobs_technician_id', 'jobs', ['technician_id'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])

    op.create_table(
        'job_number_sequences',
        sa.Column('prefix', sa.String(16), nullable=False),
        sa.Column('year', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('last_value', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('prefix', 'year'),
    )

    op.create_table(
        'job_parts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('part_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['part_id'], ['parts.id'], ondelete='RESTRICT'),
        sa.CheckConstraint('quantity >= 1', name='ck_job_parts_quantity'),
    )
    op.create_index('ix_job_parts_job_id', 'job_parts', ['job_id'])
    op.create_index('ix_job_parts_part_id', 'job_parts', ['part_id'])

    op.create_table(
        'activity_logs',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
    )
    op.create_index(
        'ix_activity_logs_job_created', 'activity_logs', ['job_id', 'created_at']
    )

    op.create_table(
        'repair_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('findings', sa.Text(), nullable=True),
        sa.Column('actions', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
    )
    op.create_index('ix_repair_records_job_id', 'repair_records', ['job_id'])

    op.create_table(
        'job_images',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('image_type', sa.String(30), nullable=False),
        sa.Column('caption', sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_job_images_job_id', 'job_images', ['job_id'])

    # Billing rows only block job deletion; they are written elsewhere
    op.create_table(
        'quotations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
    )
    op.create_index('ix_quotations_job_id', 'quotations', ['job_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('method', sa.String(20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
    )
    op.create_index('ix_payments_job_id', 'payments', ['job_id'])


def downgrade() -> None:
    """Downgrade schema."""

    for table in (
        'payments',
        'quotations',
        'job_images',
        'repair_records',
        'activity_logs',
        'job_parts',
        'job_number_sequences',
        'jobs',
        'parts',
        'warranty_profiles',
        'miner_models',
        'customers',
        'users',
    ):
        op.drop_table(table)
