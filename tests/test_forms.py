import datetime

import pytest

from travelbook.fields import ID_ERROR, NAME_ERROR
from travelbook.forms import (
    CROSS_FIELD_ERROR,
    DONE_DISABLED,
    DONE_READY,
    BookingForm,
    CarRentalForm,
    EventBookingForm,
    FlightBookingForm,
    HotelBookingForm,
    TrainBookingForm,
)
from travelbook.selection import SelectField
from travelbook.widgets import Key, KeyPressed, MouseClick, TextEntered

TODAY = datetime.date(2024, 5, 17)


class RecordingManager:
    def __init__(self):
        self.closed = 0

    def close_form(self):
        self.closed += 1


def click(form, x, y):
    form.handle_event(MouseClick(x, y))


def type_into(form, index, text):
    box = form.fields[index].box
    click(form, box.x + 5, box.y + 5)
    for char in text:
        form.handle_event(TextEntered(char))


def click_button(form, button):
    click(form, button.x + 5, button.y + 5)


def fill_contact(form, name="Ann"):
    type_into(form, 0, name)
    type_into(form, 1, "000000018")
    type_into(form, 2, "Main-12-Street")
    type_into(form, 3, "user@example.com")


def filled_flight(manager, name="Ann"):
    form = FlightBookingForm(manager)
    fill_contact(form, name)
    type_into(form, 4, "TLV")
    type_into(form, 5, "JFK")
    type_into(form, 6, "2024-1-1")
    return form


def test_booking_form_is_abstract():
    with pytest.raises(TypeError):
        BookingForm()


@pytest.mark.parametrize(
    "cls, form_type",
    [
        (FlightBookingForm, "Flight Booking"),
        (HotelBookingForm, "Hotel Booking"),
        (CarRentalForm, "Car Rental"),
        (EventBookingForm, "Event Booking"),
        (TrainBookingForm, "Train Booking"),
    ],
)
def test_form_types_and_common_fields(cls, form_type):
    form = cls()
    assert form.form_type == form_type
    assert form.title == form_type + " Form"
    assert [f.name for f in form.fields[:4]] == ["Name:", "Id:", "Address:", "Email:"]


@pytest.mark.parametrize(
    "cls", [FlightBookingForm, HotelBookingForm, CarRentalForm, EventBookingForm, TrainBookingForm]
)
def test_rows_are_spaced_and_buttons_below(cls):
    form = cls()
    ys = [f.y for f in form.fields]
    assert ys == sorted(ys)
    assert len(set(ys)) == len(ys)
    assert form.done_button.text == "DONE"
    assert form.cancel_button.text == "CANCEL"
    assert form.done_button.x == 30
    assert form.cancel_button.x == 180
    assert form.done_button.y == form.cancel_button.y
    assert form.done_button.y > ys[-1]


def test_field_labels_of_each_form():
    flight = [f.name for f in FlightBookingForm().fields[4:]]
    assert flight == ["Departure Airport:", "Arrival Airport:", "Departure Date:", "Preferred Time:"]
    hotel = [f.name for f in HotelBookingForm().fields[4:]]
    assert hotel[-1] == "Room Type:"
    car = [f.name for f in CarRentalForm(today=TODAY).fields[4:]]
    assert car == [
        "Pickup Location:",
        "Pickup Date:",
        "Rent total days:",
        "GPS needed?",
        "Child Seat needed?",
        "Car Type",
    ]
    train = TrainBookingForm()
    assert sum(isinstance(f, SelectField) for f in train.fields) == 2


def test_select_field_pushes_following_rows_down():
    form = TrainBookingForm()
    first_select, second_select = form.fields[-2], form.fields[-1]
    assert second_select.y > first_select.options_y


def test_typing_goes_into_active_field():
    form = FlightBookingForm()
    form.handle_event(TextEntered("A"))
    form.handle_event(TextEntered("n"))
    assert form.fields[0].text() == "An"
    form.handle_event(TextEntered("\b"))
    assert form.fields[0].text() == "A"


def test_non_printable_characters_are_ignored():
    form = FlightBookingForm()
    form.handle_event(TextEntered("\x01"))
    form.handle_event(TextEntered("é"))
    assert form.fields[0].chars == []


def test_tab_moves_focus_and_wraps():
    form = HotelBookingForm()
    form.handle_event(KeyPressed(Key.TAB))
    assert form.active == 1
    assert form.fields[1].selected is True
    assert form.fields[0].selected is False
    for _ in range(len(form.fields) - 1):
        form.handle_event(KeyPressed(Key.TAB))
    assert form.active == 0


def test_click_selects_field():
    form = FlightBookingForm()
    type_into(form, 2, "x")
    assert form.active == 2
    assert form.fields[2].text() == "x"
    assert form.fields[0].selected is False


def test_return_prints_entered_data(capsys):
    form = FlightBookingForm()
    type_into(form, 0, "Ann")
    capsys.readouterr()
    form.handle_event(KeyPressed(Key.RETURN))
    assert capsys.readouterr().out == "Entered Data: Ann, Don't Care, \n"


def test_done_disabled_until_all_filled():
    form = FlightBookingForm()
    assert form.all_fields_filled() is False
    assert form.done_button.fill == DONE_DISABLED
    click_button(form, form.done_button)
    assert form.confirmation is None


def test_done_opens_confirmation_when_filled():
    form = filled_flight(RecordingManager())
    assert form.all_fields_filled() is True
    assert form.done_button.fill == DONE_READY
    click_button(form, form.done_button)
    assert form.confirmation is not None
    assert form.confirmation.title == "Confirm Flight Booking"
    assert form.confirmation.proper is True
    assert form.confirmation.entries[0] == ("Name: Ann", "")


def test_approve_closes_form(capsys):
    manager = RecordingManager()
    form = filled_flight(manager)
    click_button(form, form.done_button)
    assert form.confirmation.approve() is True
    assert manager.closed == 1
    assert form.confirmation is None
    assert "Flight Booking Confirmed! Returning to main menu." in capsys.readouterr().out


def test_improper_input_cannot_be_approved():
    manager = RecordingManager()
    form = filled_flight(manager, name="Bob1")
    confirmation = form.review()
    assert confirmation.proper is False
    assert NAME_ERROR in confirmation.errors
    assert form.fields[0].error == NAME_ERROR
    assert confirmation.approve() is False
    assert manager.closed == 0


def test_wrong_id_is_reported():
    form = filled_flight(None)
    form.fields[1].backspace()
    form.fields[1].add("9")
    confirmation = form.review()
    assert confirmation.errors == [ID_ERROR]


def test_cancel_closes_form():
    manager = RecordingManager()
    form = HotelBookingForm(manager)
    click_button(form, form.cancel_button)
    assert manager.closed == 1


def test_car_gps_with_large_car_conflicts():
    form = CarRentalForm(today=TODAY)
    type_into(form, 7, "yes")
    assert form.check_cross_field() is True
    sedan = form.car_type.options[2]
    click_button(form, sedan)
    assert form.car_type.text() == "Sedan"
    assert form.check_cross_field() is False
    confirmation = form.review()
    assert confirmation.cross_field_ok is False
    assert CROSS_FIELD_ERROR in confirmation.errors


def test_car_child_seat_rules():
    form = CarRentalForm(today=TODAY)
    type_into(form, 8, "Yes")
    click_button(form, form.car_type.options[4])
    assert form.car_type.text() == "Luxury"
    assert form.check_cross_field() is True
    click_button(form, form.car_type.options[3])
    assert form.check_cross_field() is False


def test_car_rental_full_booking_is_proper():
    manager = RecordingManager()
    form = CarRentalForm(manager, today=TODAY)
    fill_contact(form)
    type_into(form, 4, "Depot-7-North")
    type_into(form, 6, "3")
    type_into(form, 7, "no")
    type_into(form, 8, "no")
    assert form.fields[5].text() == "2024-5-17"
    click_button(form, form.done_button)
    assert form.confirmation.proper is True
    assert form.confirmation.approve() is True
    assert manager.closed == 1


def test_event_wheelchair_rules():
    form = EventBookingForm(today=TODAY)
    type_into(form, 8, "yes")
    assert form.check_cross_field() is True
    click_button(form, form.seating.options[1])
    assert form.seating.text() == "Front Row"
    assert form.check_cross_field() is False
    type_into(form, 8, "\b\b\bno")
    assert form.wheelchair.text() == "no"
    assert form.check_cross_field() is True