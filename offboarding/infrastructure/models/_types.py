"""Column types shared by the ORM models."""

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

json_type = JSONB().with_variant(JSON(), "sqlite")

__all__ = ["json_type"]
