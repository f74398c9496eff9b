"""The main menu, the event loop that drives it, and the command-line entry point."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .dialogue import DialogueManager, WindowClosed
from .forms import (
    BookingForm,
    CarRentalForm,
    EventBookingForm,
    FlightBookingForm,
    HotelBookingForm,
    TrainBookingForm,
)
from .widgets import Key, KeyPressed, MouseClick, Rect, TextEntered

WINDOW_TITLE = "Massive Travel Booking System"
WINDOW_SIZE: Tuple[int, int] = (500, 600)
MENU_TITLE = "Travel Booking System"

_BUTTON_X = 100
_BUTTON_WIDTH = 300
_BUTTON_HEIGHT = 50

FormFactory = Callable[[DialogueManager], BookingForm]


@dataclass(frozen=True)
class MenuButton:
    """A main-menu entry that opens one kind of booking form."""

    label: str
    bounds: Rect
    factory: FormFactory


def _menu_button(label: str, y: float, factory: FormFactory) -> MenuButton:
    return MenuButton(label, Rect(_BUTTON_X, y, _BUTTON_WIDTH, _BUTTON_HEIGHT), factory)


class MainMenu:
    """The list of booking kinds; a click on one opens its form."""

    title = MENU_TITLE

    def __init__(self, dialogue: DialogueManager) -> None:
        self.dialogue = dialogue
        self.buttons: List[MenuButton] = [
            _menu_button("Flight Booking", 150, FlightBookingForm),
            _menu_button("Hotel Booking", 220, HotelBookingForm),
            _menu_button("Car Rental", 290, CarRentalForm),
            _menu_button("Event Booking", 360, EventBookingForm),
            _menu_button("Train Booking", 430, TrainBookingForm),
        ]

    def handle_click(self, x: float, y: float) -> Optional[BookingForm]:
        """Open the form under the point; return it if it was opened."""
        print(f"Mouse Clicked at: {x:g}, {y:g}")
        opened: Optional[BookingForm] = None
        for button in self.buttons:
            if button.bounds.contains(x, y):
                print(f"{button.label} Button Clicked!")
                form = button.factory(self.dialogue)
                if self.dialogue.open_form(form):
                    opened = form
        return opened


class Target(enum.Enum):
    """Which window an event belongs to."""

    MENU = "menu"
    FORM = "form"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class ConfirmChoice:
    """The user's answer on the confirmation screen."""

    approve: bool


Routed = Tuple[Target, object]


class Engine:
    """Feeds events to the main menu, the open form and its confirmation."""

    def __init__(
        self,
        events: Iterable[Routed] = (),
        dialogue: Optional[DialogueManager] = None,
    ) -> None:
        self.dialogue = dialogue if dialogue is not None else DialogueManager()
        self.menu = MainMenu(self.dialogue)
        self.events: Iterable[Routed] = events
        self.is_open = True

    def run(self) -> None:
        """Process events until the main window closes or they run out."""
        stream: Iterator[Routed] = iter(self.events)
        while self.is_open:
            try:
                target, event = next(stream)
            except StopIteration:
                return
            if target is Target.MENU:
                self._menu_event(event)
            elif target is Target.FORM:
                self.dialogue.dispatch(event)
            elif target is Target.CONFIRM:
                self._confirm_event(event)

    def _menu_event(self, event: object) -> None:
        if isinstance(event, WindowClosed):
            self.is_open = False
        elif isinstance(event, MouseClick):
            self.menu.handle_click(event.x, event.y)

    def _confirm_event(self, event: object) -> None:
        form = self.dialogue.active_form
        if form is None or form.confirmation is None:
            return
        if isinstance(event, ConfirmChoice) and event.approve:
            form.confirmation.approve()
        else:
            form.confirmation = None


_KEYS = {"tab": Key.TAB, "return": Key.RETURN}


def _coordinates(words: Sequence[str], number: int) -> MouseClick:
    if len(words) != 2:
        raise ValueError(f"line {number}: a click needs two coordinates")
    try:
        return MouseClick(float(words[0]), float(words[1]))
    except ValueError:
        raise ValueError(f"line {number}: bad coordinates") from None


def parse_script(lines: Iterable[str]) -> List[Routed]:
    """Turn a script of commands, one per line, into routed events."""
    events: List[Routed] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        words = line.split()
        if not words or words[0].startswith("#"):
            continue
        head = words[0]
        if head == "click":
            events.append((Target.MENU, _coordinates(words[1:], number)))
        elif head in ("close", "quit") and len(words) == 1:
            events.append((Target.MENU, WindowClosed()))
        elif head in ("approve", "reject") and len(words) == 1:
            events.append((Target.CONFIRM, ConfirmChoice(head == "approve")))
        elif head == "form" and len(words) >= 2:
            events.extend((Target.FORM, e) for e in _form_events(line, words, number))
        else:
            raise ValueError(f"line {number}: unknown command {line.strip()!r}")
    return events


def _form_events(line: str, words: Sequence[str], number: int) -> List[object]:
    action = words[1]
    if action == "click":
        return [_coordinates(words[2:], number)]
    if action == "type":
        text = line.lstrip()[len("form"):].lstrip()[len("type"):]
        text = text[1:] if text.startswith(" ") else text
        return [TextEntered(c) for c in text]
    if action == "backspace" and len(words) == 2:
        return [TextEntered("\b")]
    if action == "key" and len(words) == 3 and words[2].lower() in _KEYS:
        return [KeyPressed(_KEYS[words[2].lower()])]
    if action == "close" and len(words) == 2:
        return [WindowClosed()]
    raise ValueError(f"line {number}: unknown form command {line.strip()!r}")


def _read(path: Optional[str], stdin: TextIO) -> List[str]:
    if path is None:
        return stdin.readlines()
    with open(path, encoding="utf-8") as handle:
        return handle.readlines()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the booking system on a script of user actions."""
    parser = argparse.ArgumentParser(prog="travelbook", description=WINDOW_TITLE)
    parser.add_argument("script", nargs="?", help="file of commands (default: standard input)")
    args = parser.parse_args(argv)
    try:
        events = parse_script(_read(args.script, sys.stdin))
    except (OSError, ValueError) as exc:
        print(f"travelbook: {exc}", file=sys.stderr)
        return 2
    Engine(events).run()
    return 0