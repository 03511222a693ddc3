"""create production tables

Revision ID: 7a3e5c1d9b20
Revises:
Create Date: 2026-10-19 09:12:41.530118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '7a3e5c1d9b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the catalog, batch and press tables."""
    op.create_table(
        'skus',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('flavor', sa.String(), nullable=True),
        sa.Column('strength_mg', sa.Float(), nullable=True),
        sa.Column('target_tablet_weight', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_skus_id'), 'skus', ['id'], unique=False)

    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sku_id', sa.Integer(), nullable=False),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['sku_id'], ['skus.id']),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_recipes_id'), 'recipes', ['id'], unique=False)
    op.create_index(op.f('ix_recipes_sku_id'), 'recipes', ['sku_id'], unique=False)

    op.create_table(
        'recipe_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('material', sa.String(), nullable=False),
        sa.Column('target_weight', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(), nullable=False),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id']),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_recipe_items_id'), 'recipe_items', ['id'], unique=False)
    op.create_index(op.f('ix_recipe_items_recipe_id'), 'recipe_items', ['recipe_id'], unique=False)

    op.create_table(
        'batches',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sku_id', sa.Integer(), nullable=False),
        sa.Column('planned_weight', sa.Float(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('picked_by', sa.String(), nullable=True),
        sa.Column('mixed_by', sa.String(), nullable=True),
        sa.Column('press_operator', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['sku_id'], ['skus.id']),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_batches_id'), 'batches', ['id'], unique=False)
    op.create_index(op.f('ix_batches_sku_id'), 'batches', ['sku_id'], unique=False)
    op.create_index(op.f('ix_batches_status'), 'batches', ['status'], unique=False)

    op.create_table(
        'batch_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('batch_id', sa.Integer(), nullable=False),
        sa.Column('material', sa.String(), nullable=False),
        sa.Column('target_weight', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(), nullable=False),
        sa.Column('picked_weight', sa.Float(), nullable=True),
        sa.Column('lot', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['batch_id'], ['batches.id']),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_batch_items_id'), 'batch_items', ['id'], unique=False)
    op.create_index(op.f('ix_batch_items_batch_id'), 'batch_items', ['batch_id'], unique=False)

    op.create_table(
        'press_runs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('batch_id', sa.Integer(), nullable=False),
        sa.Column('received_weight', sa.Float(), nullable=True),
        sa.Column('tablet_weight', sa.Float(), nullable=True),
        sa.Column('expected_tablet_count', sa.Integer(), nullable=True),
        sa.Column('final_weight', sa.Float(), nullable=True),
        sa.Column('loss_weight', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['batch_id'], ['batches.id']),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_press_runs_id'), 'press_runs', ['id'], unique=False)
    op.create_index(op.f('ix_press_runs_batch_id'), 'press_runs', ['batch_id'], unique=False)


def downgrade() -> None:
    """Drop the production tables, children first."""
    for table in ('press_runs', 'batch_items', 'batches', 'recipe_items', 'recipes', 'skus'):
        op.drop_table(table)
