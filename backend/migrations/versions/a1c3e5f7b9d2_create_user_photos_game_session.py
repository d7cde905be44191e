"""create user, Photos and game_session tables

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1c3e5f7b9d2'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    # Photos may already exist when shared with the upload service
    if 'Photos' not in existing_tables:
        op.create_table(
            'Photos',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('url', sa.Text(), nullable=True),
            sa.Column('label', sa.Text(), nullable=True),
            sa.Column('userId', sa.Integer(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
            sqlite_autoincrement=True,
        )
        op.create_index('ix_Photos_userId', 'Photos', ['userId'], unique=False)

    if 'game_session' not in existing_tables:
        op.create_table(
            'game_session',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('status', sa.String(length=32), nullable=False),
            sa.Column('total_asked', sa.Integer(), nullable=False),
            sa.Column('correct_count', sa.Integer(), nullable=False),
            sa.Column('retry_queue', sa.Text(), nullable=True),
            sa.Column('pending_photo_id', sa.Integer(), nullable=True),
            sa.Column('pending_label', sa.Text(), nullable=True),
            sa.Column('updated_at', sa.Float(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['user.id']),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_game_session_user_id', 'game_session', ['user_id'], unique=True)


def downgrade():
    op.drop_index('ix_game_session_user_id', table_name='game_session')
    op.drop_table('game_session')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
    # Photos is left in place; it holds uploaded user content
