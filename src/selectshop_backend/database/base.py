"""Declarative base for SQLAlchemy models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Stable constraint names keep autogenerated migrations reproducible.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
}


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
