"""Error types raised by the kernel in strict mode."""

from __future__ import annotations

from collections.abc import Sized


class GeometryError(ValueError):
    """Base class for kernel errors."""


class InsufficientPointsError(GeometryError):
    """Raised when an operation gets fewer points than its result needs."""

    def __init__(self, operation: str, required: int, actual: int):
        self.operation = operation
        self.required = required
        self.actual = actual
        super().__init__(
            f"{operation} requires at least {required} point(s), got {actual}"
        )


def check_point_count(
    points: Sized, required: int, operation: str, strict: bool
) -> bool:
    """Return True if ``points`` holds enough points for ``operation``.

    In strict mode a short input raises ``InsufficientPointsError``
    instead of returning False.
    """
    if len(points) >= required:
        return True
    if strict:
        raise InsufficientPointsError(operation, required, len(points))
    return False
