from enum import Enum


class Unit(Enum):
    """
    Enumeration of the distance units a Ruler can measure in.

    Each unit carries a fixed multiplier that converts kilometers into that unit.
    Members can be looked up by their string value, e.g. ``Unit("miles")``.

    Values:
        KILOMETERS: Kilometers, the default unit
        MILES: International statute miles
        NAUTICAL_MILES: International nautical miles
        METERS: Meters
        METRES: Meters, British spelling
        YARDS: International yards
        FEET: International feet
        INCHES: International inches

    Examples:
        >>> from cheapruler.constructs.unit import Unit
        >>> Unit.METERS.multiplier
        1000.0
        >>> Unit("feet") is Unit.FEET
        True
    """

    KILOMETERS = "kilometers"
    MILES = "miles"
    NAUTICAL_MILES = "nauticalmiles"
    METERS = "meters"
    METRES = "metres"
    YARDS = "yards"
    FEET = "feet"
    INCHES = "inches"

    @property
    def multiplier(self) -> float:
        """The number of this unit in one kilometer."""
        return _MULTIPLIERS[self]


_MULTIPLIERS = {
    Unit.KILOMETERS: 1.0,
    Unit.MILES: 1000.0 / 1609.344,
    Unit.NAUTICAL_MILES: 1000.0 / 1852.0,
    Unit.METERS: 1000.0,
    Unit.METRES: 1000.0,
    Unit.YARDS: 1000.0 / 0.9144,
    Unit.FEET: 1000.0 / 0.3048,
    Unit.INCHES: 1000.0 / 0.0254,
}
