"""Exceptions raised by the approximation routines."""


class InterpolationError(ValueError):
    """Base class for sample-table errors."""

    pass


class InvalidInputError(InterpolationError):
    """Raised when a sample table, stride or result buffer has the wrong shape."""

    pass


class DegenerateSamplesError(InterpolationError):
    """Raised when two independent samples coincide and a basis divisor is zero."""

    pass
