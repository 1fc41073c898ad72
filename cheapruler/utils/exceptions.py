class RulerException(Exception):
    """
    Base class for all errors raised by cheapruler.
    """


class InvalidArgument(RulerException, ValueError):
    """
    Raised when a Ruler is asked to build itself from arguments outside their valid range,
    such as a negative tile row or a zoom level outside [0, 32).
    """
