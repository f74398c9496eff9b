"""Text entry fields of a booking form and their validation rules."""

from __future__ import annotations

import datetime
from typing import Any, List, Optional

from .widgets import Rect

FORMAT_ERROR = "The input does not adhere to the expected format"
NAME_ERROR = "The input should not contain numbers"
ID_ERROR = "Wrong control digit"

_BOX_X = 250
_BOX_WIDTH = 350
_BOX_HEIGHT = 35
_BOX_OUTLINE = 2


class InputField:
    """A labelled input box holding a sequence of entered items."""

    error_message = FORMAT_ERROR

    def __init__(self, y: float, name: str) -> None:
        self.y = y
        self.name = name
        self.chars: List[Any] = []
        self.error = ""
        self.selected = False
        self.box = Rect(_BOX_X, y, _BOX_WIDTH, _BOX_HEIGHT)

    def add(self, char: Any) -> None:
        self.chars.append(char)

    def backspace(self) -> None:
        if self.chars:
            self.chars.pop()

    def is_filled(self) -> bool:
        return bool(self.chars)

    def text(self) -> str:
        return "0"

    def hit_test(self, x: float, y: float) -> bool:
        """Select the field if the point falls on its box (outline included)."""
        b = self.box
        area = Rect(
            b.x - _BOX_OUTLINE,
            b.y - _BOX_OUTLINE,
            b.width + 2 * _BOX_OUTLINE,
            b.height + 2 * _BOX_OUTLINE,
        )
        self.selected = area.contains(x, y)
        return self.selected

    def validate(self) -> bool:
        return True

    def check(self) -> bool:
        """Validate and record the error message shown on review."""
        ok = self.validate()
        self.error = "" if ok else self.error_message
        return ok

    def summary(self) -> str:
        """The line shown for this field on the confirmation screen."""
        return f"{self.name} {self.text()}"

    def terminal_text(self) -> str:
        if not self.chars:
            return ""
        return "".join(str(c) for c in self.chars) + ", "


class CharField(InputField):
    """A field of free text."""

    def text(self) -> str:
        return "".join(self.chars)


class DigitField(InputField):
    """A field of decimal digits, stored as integers."""

    def add(self, char: Any) -> None:
        if isinstance(char, str) and len(char) == 1 and char in "0123456789":
            self.chars.append(int(char))

    def text(self) -> str:
        return "".join(str(d) for d in self.chars)


class NameField(CharField):
    """Letters only."""

    error_message = NAME_ERROR

    def validate(self) -> bool:
        return all(c.isascii() and c.isalpha() for c in self.chars)


class IdField(DigitField):
    """An identity number of 5 to 9 digits with a check digit."""

    error_message = ID_ERROR

    def __init__(self, y: float) -> None:
        super().__init__(y, "Id:")

    def validate(self) -> bool:
        if not 5 <= len(self.chars) <= 9:
            return False
        digits = [0] * (9 - len(self.chars)) + self.chars
        total = 0
        for position, digit in enumerate(digits):
            product = digit * (1 if position % 2 == 0 else 2)
            total += product // 10 + product % 10
        return total % 10 == 0


class AddressField(CharField):
    """Three dash-separated parts: anything, then digits, then letters."""

    def validate(self) -> bool:
        part = 1
        last = len(self.chars) - 1
        for i, c in enumerate(self.chars):
            if c == " ":
                return False
            if c == "-":
                if i == 0 or i == last:
                    return False
                part += 1
            elif part != 1 and not self._fits_part(c, part):
                return False
        return part == 3

    @staticmethod
    def _fits_part(c: str, part: int) -> bool:
        if part % 2 == 0:
            return c.isascii() and c.isdigit()
        return c.isascii() and c.isalpha()


class EmailField(CharField):
    """An e-mail address with a single ``@``."""

    def __init__(self, y: float) -> None:
        super().__init__(y, "Email:")

    def validate(self) -> bool:
        seen_at = False
        size = len(self.chars)
        for i, c in enumerate(self.chars):
            if c == " ":
                return False
            if c == "@":
                following = self.chars[i + 1] if i + 1 < size else ""
                if i == 0 or following == ".":
                    return False
                if seen_at:
                    return False
                seen_at = True
            if c == "." and i + 2 >= size:
                return False
        return seen_at


class DateField(CharField):
    """A date as ``YYYY-M-D``, pre-filled with today's date."""

    def __init__(self, y: float, name: str, today: Optional[datetime.date] = None) -> None:
        super().__init__(y, name)
        day = today or datetime.date.today()
        self.chars.extend(f"{day.year}-{day.month}-{day.day}")

    def validate(self) -> bool:
        if not 8 <= len(self.chars) <= 10:
            return False
        if self.chars[4] != "-":
            return False
        dashes = 0
        run = 0
        for c in self.chars:
            if c == "-":
                run = 0
                if dashes > 2:
                    return False
                dashes += 1
            elif not (c.isascii() and c.isdigit()):
                return False
            if dashes < 1 and run < 4:
                run += 1
            elif dashes >= 1 and run <= 2:
                run += 1
            else:
                return False
        return True


class RangeField(DigitField):
    """A whole number between two inclusive limits."""

    def __init__(self, y: float, name: str, minimum: int, maximum: int) -> None:
        super().__init__(y, name)
        self.minimum = minimum
        self.maximum = maximum

    def validate(self) -> bool:
        value = 0
        for digit in self.chars:
            value = value * 10 + digit
        return self.minimum <= value <= self.maximum


class YesNoField(CharField):
    """A yes or no answer, case-insensitive."""

    def _at(self, index: int) -> str:
        return self.chars[index] if index < len(self.chars) else ""

    def is_yes(self) -> bool:
        first = (len(self.chars) == 3 and self._at(0) == "y") or self._at(0) == "Y"
        return first and self._at(1) in ("e", "E") and self._at(2) in ("s", "S")

    def is_no(self) -> bool:
        first = (len(self.chars) == 2 and self._at(0) == "n") or self._at(0) == "N"
        return first and self._at(1) in ("o", "O")

    def validate(self) -> bool:
        return self.is_yes() or self.is_no()