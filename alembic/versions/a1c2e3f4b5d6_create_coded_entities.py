"""create_coded_entities

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-18 09:00:00.000000

Creates the master-data tables whose rows carry a generated code:
- customers.code (e.g. TES001)
- vendors.code (e.g. VEND001)
- vehicles.code (e.g. TAT001), plus unique registration_number
- projects.code (e.g. TES001-WAR001)

Every code column is UNIQUE; concurrent creations rely on this constraint
to detect collisions and retry.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _coded_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(30), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # 1. Customers
    op.create_table(
        "customers",
        *_coded_columns(),
        sa.Column("mobile_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("gst_number", sa.String(20), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
    )
    op.create_index("ix_customers_code", "customers", ["code"], unique=True)

    # 2. Vendors
    op.create_table(
        "vendors",
        *_coded_columns(),
        sa.Column("mobile_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
    )
    op.create_index("ix_vendors_code", "vendors", ["code"], unique=True)

    # 3. Vehicles
    op.create_table(
        "vehicles",
        *_coded_columns(),
        sa.Column("registration_number", sa.String(20), nullable=False),
        sa.Column("vehicle_type", sa.String(50), nullable=True),
        sa.Column(
            "owner_type",
            sa.Enum(
                "vendor",
                "company",
                name="owner_type",
                native_enum=False,
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("vendor_code", sa.String(30), nullable=True),
    )
    op.create_index("ix_vehicles_code", "vehicles", ["code"], unique=True)
    op.create_index(
        "ix_vehicles_registration_number", "vehicles", ["registration_number"], unique=True
    )

    # 4. Projects
    op.create_table(
        "projects",
        *_coded_columns(),
        sa.Column(
            "customer_id",
            sa.Integer,
            sa.ForeignKey("customers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("customer_code", sa.String(30), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
    )
    op.create_index("ix_projects_code", "projects", ["code"], unique=True)
    op.create_index("ix_projects_customer_id", "projects", ["customer_id"])


def downgrade() -> None:
    op.drop_index("ix_projects_customer_id", table_name="projects")
    op.drop_index("ix_projects_code", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_vehicles_registration_number", table_name="vehicles")
    op.drop_index("ix_vehicles_code", table_name="vehicles")
    op.drop_table("vehicles")
    op.drop_index("ix_vendors_code", table_name="vendors")
    op.drop_table("vendors")
    op.drop_index("ix_customers_code", table_name="customers")
    op.drop_table("customers")
