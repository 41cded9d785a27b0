# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from datetime import datetime, timezone
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        user_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        user_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Text / Time Utilities
# =============================================================================

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """
    Build a category slug: lower-cased, whitespace runs replaced by "-".

    Example:
        slugify("Food  and Drink")  # "food-and-drink"
    """
    return _WHITESPACE.sub("-", name.strip().lower())


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated query parameter, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def utcnow_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()
