"""Grid position value type."""

from __future__ import annotations

from typing import NamedTuple, Sequence


# Row/column deltas for the four cardinal search directions.
DIRECTION_OFFSETS: dict[str, tuple[int, int]] = {
    "N": (-1, 0),
    "E": (0, 1),
    "S": (1, 0),
    "W": (0, -1),
}


class UnhandledDirectionError(RuntimeError):
    """Raised when a direction token outside ``N/E/S/W`` is stepped."""


class Position(NamedTuple):
    """Cell coordinate as ``(row, column)``."""

    row: int
    column: int

    @classmethod
    def coerce(cls, value: "Position | Sequence[int]") -> "Position":
        """Return ``value`` as a :class:`Position`.

        Accepts an existing position or any two item ``(row, column)`` sequence.
        """

        if isinstance(value, Position):
            return value
        row, column = value
        return cls(int(row), int(column))

    def step(self, direction: str) -> "Position":
        """Return the neighbouring position one cell towards ``direction``."""

        try:
            d_row, d_column = DIRECTION_OFFSETS[direction]
        except KeyError:
            raise UnhandledDirectionError(
                f"Unhandled search path direction: {direction!r}"
            ) from None
        return Position(self.row + d_row, self.column + d_column)


__all__ = ["DIRECTION_OFFSETS", "Position", "UnhandledDirectionError"]
