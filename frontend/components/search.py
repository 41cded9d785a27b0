# =============================================================================
# frontend/components/search.py - Search Input
# =============================================================================

from typing import Callable


class SearchInput:
    """
    Text box with a search button.

    The text is passed to `on_search` exactly as typed: no trimming,
    debouncing or minimum length.
    """

    def __init__(
        self,
        on_search: Callable[[str], None],
        placeholder: str = "Search influencers...",
        value: str = "",
    ):
        self.on_search = on_search
        self.placeholder = placeholder
        self.value = value

    def change(self, text: str) -> None:
        self.value = text

    def submit(self) -> None:
        self.on_search(self.value)
