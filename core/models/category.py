# =============================================================================
# core/models/category.py - Category Schemas
# =============================================================================

from uuid import UUID

from pydantic import BaseModel


class Category(BaseModel):
    """A content category such as "Fitness" (slug "fitness")."""
    id: UUID
    name: str
    slug: str
