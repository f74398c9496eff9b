"""Booking forms: the fields each kind of booking asks for, and their review."""

from __future__ import annotations

import abc
import datetime
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from .fields import (
    AddressField,
    CharField,
    DateField,
    EmailField,
    IdField,
    InputField,
    NameField,
    RangeField,
)
from .selection import (
    CarTypeField,
    ChildSeatField,
    GpsField,
    SeatingPreferenceField,
    SelectField,
    WheelchairField,
)
from .widgets import Button, Color, Key, KeyPressed, MouseClick, TextEntered

CROSS_FIELD_ERROR = "There is a compatibility error between the lines."

DONE_READY: Color = (50, 150, 50)
DONE_DISABLED: Color = (150, 150, 150)
CANCEL_RED: Color = (180, 0, 0)

_FIRST_ROW_Y = 60
_ROW_GAP = 50
_BUTTON_TEXT_SIZE = 18
_DONE_X = 30
_CANCEL_X = 180

TIME_OPTIONS = ("Morning", "Noon", "Evening", "Night", "Don't Care")
ROOM_TYPES = ("Single Room", "Double Room", "Family Room", "Presidential Suite")
SPECIAL_REQUESTS = ("Quiet Zone", "Family Section", "First Class", "None")


class FormCloser(Protocol):
    """Whatever owns a form and can close it."""

    def close_form(self) -> None: ...


@dataclass
class Confirmation:
    """The review of a filled form, waiting for the user's approval."""

    form: "BookingForm"
    entries: List[Tuple[str, str]]
    cross_field_ok: bool

    @property
    def title(self) -> str:
        return f"Confirm {self.form.form_type}"

    @property
    def errors(self) -> List[str]:
        """Every error shown on the review, field errors first."""
        found = [error for _, error in self.entries if error]
        if not self.cross_field_ok:
            found.append(CROSS_FIELD_ERROR)
        return found

    @property
    def proper(self) -> bool:
        """Whether every field and every rule between fields is satisfied."""
        return not self.errors

    def approve(self) -> bool:
        """Accept the booking if it is proper; the review closes either way."""
        self.form.confirmation = None
        if not self.proper:
            return False
        print(f"{self.form.form_type} Confirmed! Returning to main menu.")
        if self.form.manager is not None:
            self.form.manager.close_form()
        return True


class BookingForm(abc.ABC):
    """A form of contact details followed by the fields of one kind of booking."""

    def __init__(self, manager: Optional[FormCloser] = None) -> None:
        self.manager = manager
        self.fields: List[InputField] = []
        self.buttons: List[Button] = []
        self.active = 0
        self.confirmation: Optional[Confirmation] = None
        self._all_filled = False
        self._y = _FIRST_ROW_Y
        self._add(NameField(self._y, "Name:"))
        self._add(IdField(self._next_y()))
        self._add(AddressField(self._next_y(), "Address:"))
        self._add(EmailField(self._next_y()))

    @property
    @abc.abstractmethod
    def form_type(self) -> str:
        """The kind of booking, as shown in titles."""

    @property
    def title(self) -> str:
        return f"{self.form_type} Form"

    @property
    def done_button(self) -> Button:
        return self.buttons[0]

    @property
    def cancel_button(self) -> Button:
        return self.buttons[1]

    def _next_y(self) -> float:
        self._y += _ROW_GAP
        return self._y

    def _add(self, field: InputField) -> None:
        self.fields.append(field)
        if isinstance(field, SelectField):
            self._y = field.options_y

    def _set_buttons(self) -> None:
        y = self._y + _ROW_GAP
        self.buttons = [
            Button.text_button(_DONE_X, y, _BUTTON_TEXT_SIZE, "DONE", DONE_DISABLED),
            Button.text_button(_CANCEL_X, y, _BUTTON_TEXT_SIZE, "CANCEL", CANCEL_RED),
        ]

    def all_fields_filled(self) -> bool:
        """Enable the DONE button when every field holds something."""
        self._all_filled = all(field.is_filled() for field in self.fields)
        self.done_button.fill = DONE_READY if self._all_filled else DONE_DISABLED
        return self._all_filled

    def check_cross_field(self) -> bool:
        """Whether the answers are compatible with one another."""
        return True

    def review(self) -> Confirmation:
        """Validate every field and collect what the confirmation shows."""
        entries = []
        for field in self.fields:
            field.check()
            entries.append((field.summary(), field.error))
        return Confirmation(self, entries, self.check_cross_field())

    def handle_event(self, event: object) -> None:
        """React to one keyboard or mouse event."""
        self.all_fields_filled()
        current = self.fields[self.active]
        if isinstance(event, TextEntered):
            if event.char == "\b":
                current.backspace()
            elif len(event.char) == 1 and 32 <= ord(event.char) < 128:
                current.add(event.char)
        elif isinstance(event, KeyPressed):
            if event.key is Key.TAB:
                current.selected = False
                self.active = (self.active + 1) % len(self.fields)
            elif event.key is Key.RETURN:
                print("Entered Data: " + "".join(f.terminal_text() for f in self.fields))
        elif isinstance(event, MouseClick):
            for index, field in enumerate(self.fields):
                if field.hit_test(event.x, event.y):
                    self.active = index
            if self.done_button.press(event.x, event.y) and self._all_filled:
                self.confirmation = self.review()
                return
            if self.cancel_button.press(event.x, event.y):
                if self.manager is not None:
                    self.manager.close_form()
                return
        self.fields[self.active].selected = True


class FlightBookingForm(BookingForm):
    form_type = "Flight Booking"

    def __init__(self, manager: Optional[FormCloser] = None) -> None:
        super().__init__(manager)
        self._add(CharField(self._next_y(), "Departure Airport:"))
        self._add(CharField(self._next_y(), "Arrival Airport:"))
        self._add(CharField(self._next_y(), "Departure Date:"))
        self._add(SelectField(self._next_y(), "Preferred Time:", TIME_OPTIONS, True, 4))
        self._set_buttons()


class HotelBookingForm(BookingForm):
    form_type = "Hotel Booking"

    def __init__(self, manager: Optional[FormCloser] = None) -> None:
        super().__init__(manager)
        self._add(CharField(self._next_y(), "Hotel Name:"))
        self._add(CharField(self._next_y(), "Check-in Date:"))
        self._add(CharField(self._next_y(), "Check-out Date:"))
        self._add(CharField(self._next_y(), "Number of Guests:"))
        self._add(SelectField(self._next_y(), "Room Type:", ROOM_TYPES, False, 0))
        self._set_buttons()


class CarRentalForm(BookingForm):
    form_type = "Car Rental"

    def __init__(
        self, manager: Optional[FormCloser] = None, today: Optional[datetime.date] = None
    ) -> None:
        super().__init__(manager)
        self._add(AddressField(self._next_y(), "Pickup Location:"))
        self._add(DateField(self._next_y(), "Pickup Date:", today))
        self._add(RangeField(self._next_y(), "Rent total days:", 1, 999))
        self.gps = GpsField(self._next_y())
        self._add(self.gps)
        self.child_seat = ChildSeatField(self._next_y())
        self._add(self.child_seat)
        self.car_type = CarTypeField(self._next_y())
        self._add(self.car_type)
        self._set_buttons()

    def check_cross_field(self) -> bool:
        return self.gps.compatible_with(self.car_type) and self.child_seat.compatible_with(
            self.car_type
        )


class EventBookingForm(BookingForm):
    form_type = "Event Booking"

    def __init__(
        self, manager: Optional[FormCloser] = None, today: Optional[datetime.date] = None
    ) -> None:
        super().__init__(manager)
        self._add(NameField(self._next_y(), "Event Name:"))
        self._add(AddressField(self._next_y(), "Venue:"))
        self._add(DateField(self._next_y(), "Event Date:", today))
        self._add(RangeField(self._next_y(), "Number of Tickets:", 1, 15))
        self.wheelchair = WheelchairField(self._next_y())
        self._add(self.wheelchair)
        self.seating = SeatingPreferenceField(self._next_y())
        self._add(self.seating)
        self._set_buttons()

    def check_cross_field(self) -> bool:
        return self.wheelchair.compatible_with(self.seating)


class TrainBookingForm(BookingForm):
    form_type = "Train Booking"

    def __init__(self, manager: Optional[FormCloser] = None) -> None:
        super().__init__(manager)
        self._add(CharField(self._next_y(), "Departure Station:"))
        self._add(CharField(self._next_y(), "Arrival Station:"))
        self._add(CharField(self._next_y(), "Departure Date:"))
        self._add(CharField(self._next_y(), "Number of Passengers:"))
        self._add(SelectField(self._next_y(), "Preferred Time:", TIME_OPTIONS, True, 4))
        self._add(SelectField(self._next_y(), "Special Requests:", SPECIAL_REQUESTS, True, 3))
        self._set_buttons()