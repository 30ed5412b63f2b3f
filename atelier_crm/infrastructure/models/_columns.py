"""Column helpers shared by the ORM models."""

from uuid import uuid4

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

json_type = JSONB().with_variant(JSON(), "sqlite")


def generate_id() -> str:
    return str(uuid4())
