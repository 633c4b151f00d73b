"""Domain errors raised by the growth engine."""


class RoundUpError(ValueError):
    """Base class for value-level failures of the growth engine."""


class InvalidAmount(RoundUpError):
    """Raised for non-numeric, zero, or negative monetary input."""


class InvalidRate(RoundUpError):
    """Raised when an annual rate is non-numeric or outside [0, 1]."""


class InvalidPeriod(RoundUpError):
    """Raised when a period token is unknown and strict resolution is on."""


__all__ = ["RoundUpError", "InvalidAmount", "InvalidRate", "InvalidPeriod"]
