# migrations/versions/20261018_0001_initial_schema.py
"""Initial schema: portfolio users, projects, skills and accounts."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# Revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "portfolio_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False),
        sa.Column("profile_image_url", sa.String(length=2048), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_portfolio_users"),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=False),
        sa.Column("portfolio_user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["portfolio_user_id"],
            ["portfolio_users.id"],
            name="fk_projects_portfolio_user_id_portfolio_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_projects"),
    )
    op.create_index(
        "ix_projects_portfolio_user_id", "projects", ["portfolio_user_id"], unique=False
    )

    op.create_table(
        "skills",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("level", sa.String(length=50), nullable=False),
        sa.Column("portfolio_user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["portfolio_user_id"],
            ["portfolio_users.id"],
            name="fk_skills_portfolio_user_id_portfolio_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_skills"),
    )
    op.create_index("ix_skills_portfolio_user_id", "skills", ["portfolio_user_id"], unique=False)

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("password_hash", sa.String(length=512), nullable=False),
        sa.Column("roles", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_accounts"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
    )


def downgrade() -> None:
    op.drop_table("accounts")
    op.drop_index("ix_skills_portfolio_user_id", table_name="skills")
    op.drop_table("skills")
    op.drop_index("ix_projects_portfolio_user_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("portfolio_users")
