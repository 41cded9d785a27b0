# =============================================================================
# frontend/components/modal.py - Modal Dialog
# =============================================================================
# Modal is controlled: the parent owns `is_open` and flips it in response to
# on_close. While the modal is both open and mounted it holds two document
# side effects, a keydown listener (Escape closes) and a body scroll lock.
# Both are released as soon as either condition stops holding.
#
# Usage:
#   modal = Modal(on_close=lambda: modal.set_open(False), title="Delete?")
#   with modal.mounted():
#       modal.set_open(True)
#       view = modal.render()
# =============================================================================

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from frontend.document import Document, KeyboardEvent, document as default_document

logger = logging.getLogger(__name__)

MODAL_WIDTHS = {
    "sm": "sm:max-w-md",
    "md": "sm:max-w-lg",
    "lg": "sm:max-w-2xl",
    "xl": "sm:max-w-4xl",
}

LOADING_LABEL = "Processing..."

DIALOG_ATTRIBUTES = {
    "role": "dialog",
    "aria-modal": "true",
    "aria-labelledby": "modal-title",
}


@dataclass
class ModalAction:
    """A footer button supplied by the parent."""
    label: str
    on_click: Callable[[], None]
    loading: bool = False


@dataclass(frozen=True)
class ButtonView:
    label: str
    disabled: bool = False
    loading: bool = False


@dataclass(frozen=True)
class ModalView:
    """What an open modal shows."""
    content: Any
    width_class: str
    title: Optional[str] = None
    show_close_button: bool = True
    primary: Optional[ButtonView] = None
    secondary: Optional[ButtonView] = None
    attributes: dict = field(default_factory=lambda: dict(DIALOG_ATTRIBUTES))


class Modal:
    """
    Dialog with overlay, optional title, close button and footer actions.

    Closes (by calling on_close) on the close button, an overlay click or
    Escape. Clicks inside the panel don't close it.
    """

    def __init__(
        self,
        on_close: Callable[[], None],
        content: Any = None,
        title: Optional[str] = None,
        size: str = "md",
        show_close_button: bool = True,
        primary_action: Optional[ModalAction] = None,
        secondary_action: Optional[ModalAction] = None,
        is_open: bool = False,
        document: Optional[Document] = None,
    ):
        if size not in MODAL_WIDTHS:
            raise ValueError(f"Unknown modal size '{size}'; expected one of {list(MODAL_WIDTHS)}")

        self.on_close = on_close
        self.content = content
        self.title = title
        self.size = size
        self.show_close_button = show_close_button
        self.primary_action = primary_action
        self.secondary_action = secondary_action
        self.document = document or default_document

        self._is_open = is_open
        self._is_mounted = False
        self._holding_effects = False
        self._previous_overflow: Optional[str] = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_mounted(self) -> bool:
        return self._is_mounted

    def set_open(self, is_open: bool) -> None:
        self._is_open = is_open
        self._sync_effects()

    def mount(self) -> None:
        self._is_mounted = True
        self._sync_effects()

    def unmount(self) -> None:
        self._is_mounted = False
        self._sync_effects()

    @contextmanager
    def mounted(self) -> Iterator["Modal"]:
        """Mount for the duration of the block; effects are released on any exit."""
        self.mount()
        try:
            yield self
        finally:
            self.unmount()

    def _sync_effects(self) -> None:
        should_hold = self._is_open and self._is_mounted
        if should_hold and not self._holding_effects:
            self.document.add_event_listener("keydown", self._handle_keydown)
            self._previous_overflow = self.document.body.style.get("overflow")
            self.document.body.style["overflow"] = "hidden"
            self._holding_effects = True
            logger.debug("Modal opened: keydown listener added, scroll locked")
        elif not should_hold and self._holding_effects:
            self.document.remove_event_listener("keydown", self._handle_keydown)
            if self._previous_overflow is None:
                self.document.body.style.pop("overflow", None)
            else:
                self.document.body.style["overflow"] = self._previous_overflow
            self._holding_effects = False
            logger.debug("Modal closed: keydown listener removed, scroll restored")

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> Optional[ModalView]:
        """The modal's view, or None when closed."""
        if not self._is_open:
            return None

        primary = None
        if self.primary_action is not None:
            loading = self.primary_action.loading
            primary = ButtonView(
                label=LOADING_LABEL if loading else self.primary_action.label,
                disabled=loading,
                loading=loading,
            )

        secondary = None
        if self.secondary_action is not None:
            secondary = ButtonView(label=self.secondary_action.label)

        return ModalView(
            content=self.content,
            width_class=MODAL_WIDTHS[self.size],
            title=self.title,
            show_close_button=self.show_close_button,
            primary=primary,
            secondary=secondary,
        )

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    def click_close_button(self) -> None:
        if self._is_open and self.show_close_button:
            self.on_close()

    def click_overlay(self) -> None:
        if self._is_open:
            self.on_close()

    def click_panel(self) -> None:
        """Clicks inside the panel stay inside the panel."""

    def click_primary(self) -> None:
        action = self.primary_action
        if self._is_open and action is not None and not action.loading:
            action.on_click()

    def click_secondary(self) -> None:
        action = self.secondary_action
        if self._is_open and action is not None:
            action.on_click()

    def _handle_keydown(self, event: KeyboardEvent) -> None:
        if event.key == "Escape" and self._is_open:
            self.on_close()
