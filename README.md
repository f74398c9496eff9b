# travelbook

A small travel booking system. A main menu offers five kinds of booking
(flight, hotel, car rental, event and train). Each booking form has its own
fields, and the fields check what was typed into them before a booking can be
confirmed.

The system is driven by events: mouse clicks, typed characters and key
presses. The `travelbook` command reads these from a script of commands.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
travelbook script.txt
```

With no file name the commands are read from standard input. A line that
cannot be understood stops the command before anything runs, with a message
on standard error and exit status 2.

One command per line; blank lines and lines starting with `#` are skipped.

| Command | Goes to | Meaning |
|---|---|---|
| `click X Y` | main menu | click at a point of the menu window |
| `close` or `quit` | main menu | close the menu window; processing stops |
| `form click X Y` | open form | click at a point of the form window |
| `form type TEXT` | open form | type each character of `TEXT` into the active field |
| `form backspace` | open form | delete the last character of the active field |
| `form key tab` | open form | move to the next field |
| `form key return` | open form | print the entered data |
| `form close` | open form | close the form and go back to the menu |
| `approve` / `reject` | confirmation | answer the review of a filled form |

The menu buttons span x 100–400 and are 50 high, starting at y 150 (flight),
220 (hotel), 290 (car rental), 360 (event) and 430 (train). Only one form is
open at a time. In a form, the input boxes start at x 250, the first at y 60
and each next one 50 lower; a field with option buttons takes an extra row
for them. The DONE and CANCEL buttons sit one row below the last field, at
x 30 and x 180, 120 wide and 40 high. DONE only opens the review once every
field holds something.

An example that books a flight:

```
click 150 160
form type Dana
form key tab
form type 000000018
form key tab
form type Main-12-Haifa
form key tab
form type someone@example.com
form key tab
form type TLV
form key tab
form type LHR
form key tab
form type 2025-1-1
form click 50 520
approve
quit
```

## What gets checked

Every form begins with:

- **Name**: letters only.
- **Id**: 5 to 9 digits; the control digit is verified.
- **Address**: three parts joined by dashes, such as `Main-12-Haifa`; the
  second part digits, the third letters, no spaces.
- **Email**: a single `@`, not first and not followed by `.`, no spaces, and
  at least two characters after any `.`.

The forms then add their own fields:

- **Flight**: departure and arrival airport, departure date (free text) and
  preferred time (several may be chosen; "Don't Care" to start with).
- **Hotel**: hotel name, check-in and check-out dates and number of guests
  (free text), and room type.
- **Train**: departure and arrival station, departure date and number of
  passengers (free text), preferred time and special requests.
- **Car rental**: pickup location (an address), pickup date (`YYYY-M-D`,
  today by default), number of days (1 to 999), GPS and child seat (yes/no),
  and car type.
- **Event**: event name, venue (an address), date (today by default), number
  of tickets (1 to 15), wheelchair accessibility (yes/no) and seating
  preference.

Some answers depend on each other. In a car rental, a GPS needs an Economy or
Compact car, and a child seat needs an Economy, Compact or Luxury car. At an
event, wheelchair access needs General Admission seating. A field that fails
its check, or a pair of fields that conflict, is reported on review, and the
booking is then not accepted.

## Using it from Python

- `travelbook.widgets`: `Rect`, `Button` and the events `TextEntered`,
  `KeyPressed` (with `Key`) and `MouseClick`.
- `travelbook.fields`: `InputField`, `CharField`, `DigitField`, `NameField`,
  `IdField`, `AddressField`, `EmailField`, `DateField`, `RangeField` and
  `YesNoField`. `validate()` checks a field; `check()` also records its error
  message.
- `travelbook.selection`: `SelectField`, `SingleSelectField`, `CarTypeField`,
  `GpsField`, `ChildSeatField`, `SeatingPreferenceField` and
  `WheelchairField`, with the cross-field rules above.
- `travelbook.forms`: `FlightBookingForm`, `HotelBookingForm`,
  `CarRentalForm`, `EventBookingForm` and `TrainBookingForm`.
  `handle_event()` feeds an event to a form; `review()` returns a
  `Confirmation` whose `errors`, `proper` and `approve()` tell whether the
  booking is accepted.
- `travelbook.dialogue.DialogueManager`: keeps one form open and passes its
  events on.
- `travelbook.app`: `MainMenu`, `Engine`, `parse_script()` and `main()`.
- `travelbook.logger.Logger`: appends timestamped messages to `system.log`;
  `Logger.instance()` gives a shared one.

## What it does not do

Nothing is drawn on screen: the menu, forms and review exist only as state
that the events change, and results are printed as text. Confirmed bookings
are not stored anywhere, and no notification is sent.