"""Create costs, invoices, invoice_items and payments tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Money values derived from items and payments (subtotal, tax, totals) are
not stored.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the billing tables."""
    op.create_table(
        'costs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('description', sa.String(255), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_costs_date', 'costs', ['date'])
    op.create_index('ix_costs_category', 'costs', ['category'])

    op.create_table(
        'invoices',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('client_name', sa.String(200), nullable=False),
        sa.Column('client_email', sa.String(255), nullable=True),
        sa.Column('client_phone', sa.String(50), nullable=True),
        sa.Column('region', sa.String(10), nullable=True),
        sa.Column(
            'discount_kind',
            sa.Enum('FIXED', 'PERCENTAGE', name='discount_type', create_constraint=True),
            nullable=False,
            server_default='FIXED'
        ),
        sa.Column('discount', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column(
            'status',
            sa.Enum('DRAFT', 'SENT', 'PARTIAL', 'OVERDUE', 'PAID', name='invoice_status', create_constraint=True),
            nullable=False,
            server_default='DRAFT'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_invoices_client_id', 'invoices', ['client_id'])
    op.create_index('ix_invoices_client_name', 'invoices', ['client_name'])
    op.create_index('ix_invoices_status', 'invoices', ['status'])
    op.create_index('ix_invoices_created_at', 'invoices', ['created_at'])
    op.create_index('ix_invoices_due_date', 'invoices', ['due_date'])

    op.create_table(
        'invoice_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('invoice_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('unit_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['invoice_id'],
            ['invoices.id'],
            name='fk_invoice_items_invoice_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_invoice_items_invoice_id', 'invoice_items', ['invoice_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('invoice_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('paid_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('method', sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['invoice_id'],
            ['invoices.id'],
            name='fk_payments_invoice_id',
            ondelete='RESTRICT'
        ),
    )
    op.create_index('ix_payments_invoice_id', 'payments', ['invoice_id'])
    op.create_index('ix_payments_paid_at', 'payments', ['paid_at'])


def downgrade() -> None:
    """Drop the billing tables."""
    op.drop_index('ix_payments_paid_at', table_name='payments')
    op.drop_index('ix_payments_invoice_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_invoice_items_invoice_id', table_name='invoice_items')
    op.drop_table('invoice_items')
    op.drop_index('ix_invoices_due_date', table_name='invoices')
    op.drop_index('ix_invoices_created_at', table_name='invoices')
    op.drop_index('ix_invoices_status', table_name='invoices')
    op.drop_index('ix_invoices_client_name', table_name='invoices')
    op.drop_index('ix_invoices_client_id', table_name='invoices')
    op.drop_table('invoices')
    op.drop_index('ix_costs_category', table_name='costs')
    op.drop_index('ix_costs_date', table_name='costs')
    op.drop_table('costs')
