"""initial quiz schema

Revision ID: 3f6c2d1a9b7e
Revises:
Create Date: 2026-10-18
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f6c2d1a9b7e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "question",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("options", sa.JSON(), nullable=False),
        sa.Column("correct_answer", sa.Integer(), nullable=False),
        sa.Column("difficulty", sa.String(length=10), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_question_id", "question", ["id"])
    op.create_index("ix_question_created_at", "question", ["created_at"])

    op.create_table(
        "quiz_config",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("singleton_key", sa.Integer(), nullable=False),
        sa.Column("question_limit", sa.Integer(), nullable=False),
        sa.Column("pass_percentage", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("whatsapp_number", sa.String(length=32), nullable=True),
        sa.Column("whatsapp_message", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
        # One config row at most; concurrent first inserts collide here
        sa.UniqueConstraint("singleton_key", name="uq_quiz_config_singleton"),
    )
    op.create_index("ix_quiz_config_id", "quiz_config", ["id"])

    op.create_table(
        "submission",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("mobile", sa.String(length=32), nullable=False),
        sa.Column("answers", sa.JSON(), nullable=False),
        sa.Column("question_ids", sa.JSON(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("pass", sa.Boolean(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_submission_id", "submission", ["id"])
    op.create_index("ix_submission_email", "submission", ["email"])
    op.create_index("ix_submission_pass", "submission", ["pass"])
    op.create_index("ix_submission_created_at", "submission", ["created_at"])

    op.create_table(
        "admin",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_admin_id", "admin", ["id"])
    op.create_index("ix_admin_email", "admin", ["email"], unique=True)


def downgrade() -> None:
    op.drop_table("admin")
    op.drop_table("submission")
    op.drop_table("quiz_config")
    op.drop_table("question")
