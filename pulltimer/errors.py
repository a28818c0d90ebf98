"""Exceptions raised by pulltimer."""

from typing import Any


class Error(Exception):
    """Base class for exceptions from pulltimer."""


class ClockRegressionError(Error):
    """The clock was asked to move backward under the REJECT policy."""

    current: Any
    requested: Any

    def __init__(self, current: Any, requested: Any) -> None:
        """
        Record the rejected clock update.

        Parameters:
            current: The clock value at the time of the update
            requested: The earlier value that was refused

        """
        self.current = current
        self.requested = requested
        super().__init__(f"clock cannot move from {current!r} "
                         f"back to {requested!r}")
