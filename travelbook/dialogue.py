"""Keeps at most one booking form open and routes its window's events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .forms import BookingForm

FORM_WINDOW_SIZE: Tuple[int, int] = (650, 700)


@dataclass(frozen=True)
class WindowClosed:
    """The user closed the window."""


class DialogueManager:
    """Opens, feeds and closes the booking form window."""

    def __init__(self) -> None:
        self.active_form: Optional[BookingForm] = None
        self.is_open = False
        self.window_title: Optional[str] = None

    def open_form(self, form: BookingForm) -> bool:
        """Show a form unless one is already open; report whether it was shown."""
        if self.is_open:
            return False
        self.is_open = True
        self.active_form = form
        print(f"Opening {form.form_type} form...")
        if self.window_title is None:
            self.window_title = form.form_type
        return True

    def close_form(self) -> None:
        self.window_title = None
        self.active_form = None
        self.is_open = False
        print("Returned to Main Menu.")

    def dispatch(self, event: object) -> None:
        """Pass an event from the form window to the open form."""
        if not self.is_open or self.window_title is None or self.active_form is None:
            return
        if isinstance(event, WindowClosed):
            self.close_form()
            return
        self.active_form.handle_event(event)