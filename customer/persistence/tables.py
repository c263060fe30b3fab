"""SQLAlchemy table definitions.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import BigInteger, Column, Identity, MetaData, String, Table
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CUSTOMERS TABLE
# ============================================================================
customers_table = Table(
    "customers",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    # Audit columns; created_* are never part of an UPDATE
    Column("created_at", TIMESTAMP(timezone=False), nullable=True),
    Column("created_by", String(255), nullable=True),
    Column("updated_at", TIMESTAMP(timezone=False), nullable=True),
    Column("updated_by", String(255), nullable=True),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column("phone_number", String(255), nullable=True),
    Column("address", String(255), nullable=True),
    Column("city", String(255), nullable=True),
    Column("country", String(255), nullable=True),
    Column("postal_code", String(255), nullable=True),
)
