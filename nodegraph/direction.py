"""
Edge direction, relative to the node that stores the edge record.

    0. UNKNOWN  ┄  unknown direction
    1. NONE     -  undirected
    2. IN       ←  pointing to the storing node
    3. OUT      →  pointing away from the storing node
    4. BOTH     ↔  both inward and outward
"""

from enum import IntEnum


class Direction(IntEnum):
    UNKNOWN = 0
    NONE = 1
    IN = 2
    OUT = 3
    BOTH = 4

    def __str__(self) -> str:
        return direction_symbol(self)

    def any_of(self, *directions: "Direction") -> bool:
        """Checks if the direction is one of the given directions."""
        return self in directions

    def matches(self, queried: "Direction") -> bool:
        """
        Checks if this (stored) direction satisfies a queried direction,
        either exactly or implicitly.

            queried   matched by
            ┄         ┄
            -         -
            ←         ←, ↔
            →         →, ↔
            ↔         ←, →, ↔

        BOTH is a superset of IN and OUT. NONE and UNKNOWN only match
        themselves.
        """
        match queried:
            case Direction.NONE:
                return self is Direction.NONE
            case Direction.IN:
                return self.any_of(Direction.IN, Direction.BOTH)
            case Direction.OUT:
                return self.any_of(Direction.OUT, Direction.BOTH)
            case Direction.BOTH:
                return self.any_of(Direction.IN, Direction.OUT, Direction.BOTH)
            case _:
                return self is Direction.UNKNOWN


_SYMBOLS: dict[int, str] = {
    Direction.NONE: "-",
    Direction.IN: "←",
    Direction.OUT: "→",
    Direction.BOTH: "↔",
}


def direction_symbol(value: int) -> str:
    """Returns the arrow for a direction value; anything unrecognised is "┄"."""
    return _SYMBOLS.get(value, "┄")


__all__ = ["Direction", "direction_symbol"]
