"""widen_project_code

Revision ID: b7e9d1c3a5f2
Revises: a1c2e3f4b5d6
Create Date: 2026-10-19 10:00:00.000000

Project codes embed the owning customer's code (up to 30 characters), a
separator, letters from the project name and the padded sequence number,
so projects.code needs more room than the other entity code columns.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7e9d1c3a5f2"
down_revision: Union[str, None] = "a1c2e3f4b5d6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("projects") as batch_op:
        batch_op.alter_column(
            "code",
            existing_type=sa.String(30),
            type_=sa.String(64),
            existing_nullable=False,
        )


def downgrade() -> None:
    with op.batch_alter_table("projects") as batch_op:
        batch_op.alter_column(
            "code",
            existing_type=sa.String(64),
            type_=sa.String(30),
            existing_nullable=False,
        )
