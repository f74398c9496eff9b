"""Option-button fields and the cross-field rules between them."""

from __future__ import annotations

from typing import List, Sequence

from .fields import CharField, YesNoField
from .widgets import OUTLINE_GREY, WHITE, Button

_OPTIONS_GAP = 50
_OPTIONS_LEFT = 20
_OPTIONS_SPAN = 500
_OPTION_HEIGHT = 30

CAR_TYPES = ("Economy", "Compact", "Sedan", "SUV", "Luxury")
SEATING_OPTIONS = ("General Admission", "Front Row", "VIP Section", "Aisle Seat")


class SelectField(CharField):
    """A text field with a row of option buttons beneath it.

    The field's text is the captions of the selected options joined by ``|``.
    Reading ``selected`` gives those captions; assigning it sets whether the
    text box has keyboard focus (kept in ``focused``).
    """

    def __init__(
        self,
        y: float,
        name: str,
        options: Sequence[str],
        multiple: bool,
        default: int,
    ) -> None:
        if len(options) < 2:
            raise ValueError("a selection needs at least two options")
        if not 0 <= default < len(options):
            raise IndexError(f"default option {default} out of range")
        self.focused = False
        super().__init__(y, name)
        self.multiple = multiple
        self.options_y = y + _OPTIONS_GAP
        step = (_OPTIONS_SPAN - _OPTIONS_LEFT) // (len(options) - 1)
        width = _OPTIONS_SPAN // (len(options) - 1) - 20
        self.options: List[Button] = []
        for index, caption in enumerate(options):
            button = Button(
                _OPTIONS_LEFT + step * index,
                self.options_y,
                width,
                _OPTION_HEIGHT,
                caption,
                WHITE,
            )
            button.set_outline(OUTLINE_GREY)
            self.options.append(button)
        self.options[default].selected = True
        self._fill_from_options()

    @property
    def selected(self) -> List[str]:
        """Captions of the currently selected options, in display order."""
        return [button.text for button in self.options if button.selected]

    @selected.setter
    def selected(self, focused: bool) -> None:
        self.focused = bool(focused)

    def hit_test(self, x: float, y: float) -> bool:
        """Focus the text box or toggle an option under the point."""
        super().hit_test(x, y)
        if self.focused:
            return True
        for pressed in self.options:
            if pressed.press(x, y):
                if not self.multiple:
                    for other in self.options:
                        if other is not pressed:
                            other.selected = False
                self._fill_from_options()
                return True
        return False

    def _fill_from_options(self) -> None:
        self.chars.clear()
        for button in self.options:
            button.refresh_colors()
            caption = button.possibility()
            if caption and self.chars:
                self.chars.append("|")
            self.chars.extend(caption)

    def _option_texts(self) -> List[str]:
        return [button.text for button in self.options]


class SingleSelectField(SelectField):
    """A selection allowing one option; valid when the text names an option."""

    def __init__(self, y: float, name: str, options: Sequence[str], default: int) -> None:
        super().__init__(y, name, options, False, default)

    def validate(self) -> bool:
        return self.text() in self._option_texts()


class CarTypeField(SingleSelectField):
    """The class of rental car."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "Car Type", CAR_TYPES, 0)

    def allows_gps(self) -> bool:
        return self.text() not in self._option_texts()[2:]

    def allows_child_seat(self) -> bool:
        return self.text() not in self._option_texts()[2:-1]


class GpsField(YesNoField):
    """Whether a GPS unit is wanted."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "GPS needed?")

    def compatible_with(self, car_type: CarTypeField) -> bool:
        return car_type.allows_gps() if self.is_yes() else True


class ChildSeatField(YesNoField):
    """Whether a child seat is wanted."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "Child Seat needed?")

    def compatible_with(self, car_type: CarTypeField) -> bool:
        return car_type.allows_child_seat() if self.is_yes() else True


class SeatingPreferenceField(SingleSelectField):
    """Where an event guest wants to sit."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "Seating Preference", SEATING_OPTIONS, 0)

    def allows_wheelchair(self) -> bool:
        return self.text() not in self._option_texts()[1:]


class WheelchairField(YesNoField):
    """Whether wheelchair access is needed."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "Wheelchair Accessibility?")

    def compatible_with(self, seating: SeatingPreferenceField) -> bool:
        return seating.allows_wheelchair() if self.is_yes() else True