"""Initial club CMS schema

Revision ID: initial_schema_001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'initial_schema_001'
down_revision = None
branch_labels = None
depends_on = None


def _identity_columns():
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade():
    op.create_table(
        'users',
        *_identity_columns(),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('admin', name='user_role', native_enum=False), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'hero_slides',
        *_identity_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('date', sa.String(length=64), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )

    op.create_table(
        'news_articles',
        *_identity_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('date', sa.String(length=64), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_news_articles_is_published', 'news_articles', ['is_published'])

    op.create_table(
        'players',
        *_identity_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=255), nullable=False),
        sa.Column('jersey_number', sa.Integer(), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        sa.Column('is_captain', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_players_is_active', 'players', ['is_active'])

    op.create_table(
        'player_stats',
        *_identity_columns(),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('matches', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('runs_scored', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('balls_faced', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('fours', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sixes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('wickets_taken', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('balls_bowled', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('runs_conceded', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('catches', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('run_outs', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('stumpings', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['player_id'], ['players.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('player_id'),
        sqlite_autoincrement=True,
    )

    op.create_table(
        'gallery_items',
        *_identity_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('image', sa.String(length=1024), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False, server_default='Photos'),
        sa.Column('date', sa.String(length=64), nullable=False),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_gallery_items_is_visible', 'gallery_items', ['is_visible'])

    op.create_table(
        'social_interactions',
        *_identity_columns(),
        sa.Column('content_type', sa.String(length=32), nullable=False),
        sa.Column('content_id', sa.Integer(), nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('dislikes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('shares', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('content_type', 'content_id', name='uq_social_interactions_content'),
        sqlite_autoincrement=True,
    )

    op.create_table(
        'comments',
        *_identity_columns(),
        sa.Column('content_type', sa.String(length=32), nullable=False),
        sa.Column('content_id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('dislikes', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_comments_content', 'comments', ['content_type', 'content_id'])

    op.create_table(
        'player_registrations',
        *_identity_columns(),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('date_of_birth', sa.String(length=32), nullable=False),
        sa.Column('position', sa.String(length=64), nullable=False),
        sa.Column('batting_style', sa.String(length=64), nullable=True),
        sa.Column('bowling_style', sa.String(length=64), nullable=True),
        sa.Column('experience', sa.Text(), nullable=True),
        sa.Column('previous_teams', sa.Text(), nullable=True),
        sa.Column('emergency_contact_name', sa.String(length=255), nullable=True),
        sa.Column('emergency_contact_phone', sa.String(length=32), nullable=True),
        sa.Column('motivation', sa.Text(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('pending', 'approved', 'rejected', name='registration_status', native_enum=False),
            nullable=False,
            server_default='pending',
        ),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_player_registrations_status', 'player_registrations', ['status'])


def downgrade():
    op.drop_index('ix_player_registrations_status', table_name='player_registrations')
    op.drop_table('player_registrations')

    op.drop_index('ix_comments_content', table_name='comments')
    op.drop_table('comments')

    op.drop_table('social_interactions')

    op.drop_index('ix_gallery_items_is_visible', table_name='gallery_items')
    op.drop_table('gallery_items')

    op.drop_table('player_stats')

    op.drop_index('ix_players_is_active', table_name='players')
    op.drop_table('players')

    op.drop_index('ix_news_articles_is_published', table_name='news_articles')
    op.drop_table('news_articles')

    op.drop_table('hero_slides')

    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
