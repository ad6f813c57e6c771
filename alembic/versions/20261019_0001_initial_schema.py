"""Initial schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 18:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


gender_enum = sa.Enum("male", "female", name="gender_enum", native_enum=False)


def _id_col() -> sa.Column:
    return sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False)


def _created_col() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def _updated_col() -> sa.Column:
    return sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("gender", gender_enum, nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("known_as", sa.String(length=64), nullable=False),
        sa.Column("last_active", sa.DateTime(timezone=True), nullable=False),
        sa.Column("introduction", sa.Text(), nullable=False),
        sa.Column("looking_for", sa.Text(), nullable=False),
        sa.Column("interests", sa.Text(), nullable=False),
        sa.Column("city", sa.String(length=128), nullable=False),
        sa.Column("country", sa.String(length=128), nullable=False),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=False)
    op.create_index("ix_users_gender", "users", ["gender"], unique=False)
    op.create_index("ix_users_date_of_birth", "users", ["date_of_birth"], unique=False)
    op.create_index("ix_users_last_active", "users", ["last_active"], unique=False)
    op.create_index("ix_users_created_at", "users", ["created_at"], unique=False)

    op.create_table(
        "photos",
        _id_col(),
        _created_col(),
        _updated_col(),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("is_main", sa.Boolean(), nullable=False),
        sa.Column("date_added", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_photos_user_id_users", ondelete="CASCADE"),
    )
    op.create_index("ix_photos_user_id", "photos", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_photos_user_id", table_name="photos")
    op.drop_table("photos")

    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_index("ix_users_last_active", table_name="users")
    op.drop_index("ix_users_date_of_birth", table_name="users")
    op.drop_index("ix_users_gender", table_name="users")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
