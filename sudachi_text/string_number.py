"""A decimal number held as a digit string with a scale and a decimal point."""

from __future__ import annotations


class StringNumber:
    """Arbitrary-length number built digit by digit.

    The value is ``significand`` (with an optional decimal point at ``point``)
    multiplied by ten to the power ``scale``.
    """

    def __init__(self) -> None:
        self._significand = ""
        self._scale = 0
        self._point = -1
        self.is_all_zero = True

    def clear(self) -> None:
        """Reset to the empty (zero) number."""
        self._significand = ""
        self._scale = 0
        self._point = -1
        self.is_all_zero = True

    def append(self, i: int) -> None:
        """Append one decimal digit."""
        if i != 0:
            self.is_all_zero = False
        self._significand += str(i)

    def shift_scale(self, i: int) -> None:
        """Multiply by ten to the power ``i``; an empty number becomes one first."""
        if self.is_zero():
            self._significand += "1"
        self._scale += i

    def add(self, number: StringNumber) -> bool:
        """Add ``number`` whose integer part fits into this one's trailing zeros.

        Returns False when the digits would overlap.
        """
        if number.is_zero():
            return True

        if self.is_zero():
            self._significand += number._significand
            self._scale = number._scale
            self._point = number._point
            return True

        self._normalize_scale()
        length = number._int_length()
        if self._scale >= length:
            self._fill_zero(self._scale - length)
            if number._point >= 0:
                self._point = len(self._significand) + number._point
            self._significand += number._significand
            self._scale = number._scale
            return True

        return False

    def set_point(self) -> bool:
        """Place a decimal point after the current digits, if none is set yet."""
        if self._scale == 0 and self._point < 0:
            self._point = len(self._significand)
            return True
        return False

    def is_zero(self) -> bool:
        """Return whether no digits have been given."""
        return not self._significand

    def __str__(self) -> str:
        if self.is_zero():
            return "0"

        self._normalize_scale()
        digits = self._significand
        if self._scale > 0:
            return digits + "0" * self._scale
        if self._point >= 0:
            digits = digits[: self._point] + "." + digits[self._point :]
            if self._point == 0:
                digits = "0" + digits
            digits = digits.rstrip("0")
            if digits.endswith("."):
                digits = digits[:-1]
        return digits

    def __repr__(self) -> str:
        return (
            f"StringNumber(significand={self._significand!r}, "
            f"scale={self._scale}, point={self._point})"
        )

    def _int_length(self) -> int:
        self._normalize_scale()
        if self._point >= 0:
            return self._point
        return len(self._significand) + self._scale

    def _normalize_scale(self) -> None:
        if self._point >= 0:
            n_scale = len(self._significand) - self._point
            if n_scale > self._scale:
                self._point += self._scale
                self._scale = 0
            else:
                self._scale -= n_scale
                self._point = -1

    def _fill_zero(self, length: int) -> None:
        self._significand += "0" * length