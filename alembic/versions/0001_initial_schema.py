"""Create word list, topic and learner progress tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "oxford_words",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("term", sa.Text(), nullable=False),
        sa.Column("meaning", sa.Text(), nullable=False),
        sa.Column("pos", sa.String(length=50), nullable=True),
        sa.Column("example", sa.Text(), nullable=True),
        sa.Column("ipa", sa.String(length=100), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("topic", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
    )
    op.create_index("ix_oxford_words_term", "oxford_words", ["term"], unique=False)
    op.create_index("ix_oxford_words_topic", "oxford_words", ["topic"], unique=False)

    op.create_table(
        "topics",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.UniqueConstraint("name", name="uq_topics_name"),
    )

    op.create_table(
        "topic_words",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("term", sa.Text(), nullable=False),
        sa.Column("meaning", sa.Text(), nullable=False),
        sa.Column("pos", sa.String(length=50), nullable=True),
        sa.Column("example", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["topic_id"], ["topics.id"], name="fk_topic_words_topic_id_topics", ondelete="CASCADE"
        ),
    )
    op.create_index("ix_topic_words_topic_id", "topic_words", ["topic_id"], unique=False)

    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("word", sa.Text(), nullable=False),
        sa.Column("word_meaning", sa.Text(), nullable=True),
        sa.Column("source", sa.String(length=20), nullable=False),
        sa.Column("topic", sa.String(length=100), nullable=True),
        sa.Column("is_mastered", sa.Boolean(), server_default=sa.text("false"), nullable=True),
        sa.Column("attempts", sa.Integer(), server_default=sa.text("0"), nullable=True),
        sa.Column("ai_feedback", sa.Text(), nullable=True),
        sa.Column("learned_date", sa.Date(), nullable=True),
        sa.Column("first_attempt_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_attempt_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.UniqueConstraint("user_id", "word", "source", name="uq_user_progress_user_id"),
    )
    op.create_index("ix_user_progress_user_id", "user_progress", ["user_id"], unique=False)

    op.create_table(
        "user_word_strings",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("source", sa.String(length=20), nullable=False),
        sa.Column("mastered_words", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("learning_words", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.Column("last_updated", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=True),
        sa.UniqueConstraint("user_id", "source", name="uq_user_word_strings_user_id"),
    )
    op.create_index("ix_user_word_strings_user_id", "user_word_strings", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_user_word_strings_user_id", table_name="user_word_strings")
    op.drop_table("user_word_strings")

    op.drop_index("ix_user_progress_user_id", table_name="user_progress")
    op.drop_table("user_progress")

    op.drop_index("ix_topic_words_topic_id", table_name="topic_words")
    op.drop_table("topic_words")
    op.drop_table("topics")

    op.drop_index("ix_oxford_words_topic", table_name="oxford_words")
    op.drop_index("ix_oxford_words_term", table_name="oxford_words")
    op.drop_table("oxford_words")
