"""create letter, level, session, question and answer tables

Revision ID: 4a7c2e91b0d3
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4a7c2e91b0d3'
down_revision = None
branch_labels = None
depends_on = None

question_type = sa.Enum('visual_identification', 'auditory_identification', name='question_type')


def upgrade():
    op.create_table(
        'hijaiyyah_letter',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('letter', sa.String(length=8), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('pronunciation', sa.String(length=64), nullable=False),
        sa.Column('audio_url', sa.Text(), nullable=True),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('hijaiyyah_letter') as batch_op:
        batch_op.create_index(batch_op.f('ix_hijaiyyah_letter_level'), ['level'], unique=False)

    op.create_table(
        'game_level',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('level_number', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('questions_required', sa.Integer(), nullable=False),
        sa.Column('letters_introduced', sa.JSON(), nullable=False),
        sa.Column('is_unlocked', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('game_level') as batch_op:
        batch_op.create_index(batch_op.f('ix_game_level_level_number'), ['level_number'], unique=True)

    op.create_table(
        'game_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_name', sa.String(length=128), nullable=False),
        sa.Column('current_level', sa.Integer(), nullable=False),
        sa.Column('current_score', sa.Integer(), nullable=False),
        sa.Column('lives_remaining', sa.Integer(), nullable=False),
        sa.Column('session_start', sa.DateTime(), nullable=False),
        sa.Column('session_end', sa.DateTime(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'question',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('type', question_type, nullable=False),
        sa.Column('level_id', sa.Integer(), nullable=False),
        sa.Column('letter_id', sa.Integer(), nullable=False),
        sa.Column('correct_answer', sa.Text(), nullable=False),
        sa.Column('options', sa.JSON(), nullable=False),
        sa.Column('difficulty', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['level_id'], ['game_level.id']),
        sa.ForeignKeyConstraint(['letter_id'], ['hijaiyyah_letter.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('question') as batch_op:
        batch_op.create_index(batch_op.f('ix_question_level_id'), ['level_id'], unique=False)

    op.create_table(
        'game_answer',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('session_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('selected_answer', sa.Text(), nullable=False),
        sa.Column('is_correct', sa.Boolean(), nullable=False),
        sa.Column('time_taken_seconds', sa.Integer(), nullable=False),
        sa.Column('points_earned', sa.Integer(), nullable=False),
        sa.Column('answered_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['question_id'], ['question.id']),
        sa.ForeignKeyConstraint(['session_id'], ['game_session.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('game_answer') as batch_op:
        batch_op.create_index(batch_op.f('ix_game_answer_session_id'), ['session_id'], unique=False)


def downgrade():
    with op.batch_alter_table('game_answer') as batch_op:
        batch_op.drop_index(batch_op.f('ix_game_answer_session_id'))
    op.drop_table('game_answer')

    with op.batch_alter_table('question') as batch_op:
        batch_op.drop_index(batch_op.f('ix_question_level_id'))
    op.drop_table('question')
    question_type.drop(op.get_bind(), checkfirst=True)

    op.drop_table('game_session')

    with op.batch_alter_table('game_level') as batch_op:
        batch_op.drop_index(batch_op.f('ix_game_level_level_number'))
    op.drop_table('game_level')

    with op.batch_alter_table('hijaiyyah_letter') as batch_op:
        batch_op.drop_index(batch_op.f('ix_hijaiyyah_letter_level'))
    op.drop_table('hijaiyyah_letter')
