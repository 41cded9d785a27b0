# =============================================================================
# frontend/components/filters.py - Filter State
# =============================================================================
# - SponsorshipFilters: status/date filter for sponsorship lists
# - SearchFilters: category and follower-range choices for influencer search
#
# Both call their callback with the complete filter state after every change.
# =============================================================================

from datetime import date as date_type
from typing import Any, Callable, Iterable

# Status label -> sponsorship statuses it shows
STATUS_OPTIONS: dict[str, frozenset[str] | None] = {
    "All": None,
    "Active": frozenset({"accepted"}),
    "Pending": frozenset({"pending"}),
    "Completed": frozenset({"completed"}),
    "Rejected": frozenset({"rejected"}),
}

CATEGORY_OPTIONS = ("All", "Fashion", "Gaming", "Food")

# Label -> (min_followers, max_followers)
FOLLOWER_RANGES: dict[str, tuple[int | None, int | None]] = {
    "Any": (None, None),
    "1k-10k": (1_000, 10_000),
    "10k-100k": (10_000, 100_000),
    "100k+": (100_000, None),
}


def _check_option(value: str, options: Iterable[str], name: str) -> None:
    options = list(options)
    if value not in options:
        raise ValueError(f"Unknown {name} '{value}'; expected one of {options}")


class SponsorshipFilters:
    """
    Status and date filters for sponsorship lists.

    on_filter_change receives {"status": <label>, "date": "YYYY-MM-DD" or ""}.
    """

    def __init__(self, on_filter_change: Callable[[dict[str, str]], None]):
        self.on_filter_change = on_filter_change
        self.status = "All"
        self.date = ""

    @property
    def filters(self) -> dict[str, str]:
        return {"status": self.status, "date": self.date}

    def set_status(self, status: str) -> None:
        _check_option(status, STATUS_OPTIONS, "status")
        self.status = status
        self.on_filter_change(self.filters)

    def set_date(self, value: str) -> None:
        if value:
            date_type.fromisoformat(value)
        self.date = value
        self.on_filter_change(self.filters)


def filter_sponsorships(
    sponsorships: list[dict[str, Any]],
    filters: dict[str, str],
) -> list[dict[str, Any]]:
    """Apply a SponsorshipFilters state to a list of sponsorships."""
    statuses = STATUS_OPTIONS.get(filters.get("status") or "All")
    day = filters.get("date") or ""

    selected = []
    for sponsorship in sponsorships:
        if statuses is not None and sponsorship.get("status") not in statuses:
            continue
        if day and not str(sponsorship.get("created_at") or "").startswith(day):
            continue
        selected.append(sponsorship)
    return selected


class SearchFilters:
    """
    Category and follower-range choices for influencer search.

    on_filter_change receives the search parameters the choices map to,
    ready for frontend.services.influencer.search_influencers(**params).
    """

    def __init__(self, on_filter_change: Callable[[dict[str, Any]], None] | None = None):
        self.on_filter_change = on_filter_change
        self.category = "All"
        self.followers = "Any"

    def set_category(self, category: str) -> None:
        _check_option(category, CATEGORY_OPTIONS, "category")
        self.category = category
        self._changed()

    def set_followers(self, followers: str) -> None:
        _check_option(followers, FOLLOWER_RANGES, "follower range")
        self.followers = followers
        self._changed()

    def to_search_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.category != "All":
            params["categories"] = [self.category]
        low, high = FOLLOWER_RANGES[self.followers]
        if low is not None:
            params["min_followers"] = low
        if high is not None:
            params["max_followers"] = high
        return params

    def _changed(self) -> None:
        if self.on_filter_change is not None:
            self.on_filter_change(self.to_search_params())
