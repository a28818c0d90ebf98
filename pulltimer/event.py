"""Defines the ScheduledEvent class."""

from typing import Any, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")  # pylint: disable=invalid-name


class ScheduledEvent(Generic[T]):
    """
    A payload waiting in a TimerQueue for its deadline.

    Events are ordered by (deadline, sequence). The sequence number is handed
    out by the owning queue at registration, so events sharing a deadline keep
    their registration order. The payload never takes part in comparisons.
    Equality and hashing are by identity, so handles from different queues
    never collide.

    The object returned by TimerQueue.add() is the event itself and serves as
    the handle for cancelling it.
    """

    __slots__ = ("_deadline", "_sequence", "_payload", "_cancelled", "_owner")

    # Tick at or after which the event is due
    _deadline: Any
    # Registration order within the owning queue
    _sequence: int
    # Cleared once the event is delivered or cancelled
    _payload: Optional[T]
    _cancelled: bool
    # The queue holding this event, None once it has left
    _owner: Any

    def __init__(self, deadline: Any, sequence: int, payload: T,
                 owner: Any = None) -> None:
        """
        Initialize an event.

        Parameters:
            deadline: The tick at which the event becomes due
            sequence: Tie-break number assigned by the owning queue
            payload: The caller's value, returned on delivery
            owner: The queue that issued this event

        """
        self._deadline = deadline
        self._sequence = sequence
        self._payload = payload
        self._cancelled = False
        self._owner = owner

    @property
    def deadline(self) -> Any:
        """Get the deadline for this event."""
        return self._deadline

    @property
    def sequence(self) -> int:
        """Get the registration sequence number."""
        return self._sequence

    @property
    def payload(self) -> Optional[T]:
        """Get the payload, or None once the event was delivered or cancelled."""
        return self._payload

    @property
    def cancelled(self) -> bool:
        """Whether the event was cancelled before delivery."""
        return self._cancelled

    @property
    def owner(self) -> object:
        """Get the queue holding this event, or None once it has left."""
        return self._owner

    @property
    def key(self) -> Tuple[Any, int]:
        """Get the composite ordering key."""
        return (self._deadline, self._sequence)

    def cancel(self) -> Optional[Any]:
        """
        Cancel this event in the queue that holds it.

        Same as calling TimerQueue.cancel() with this event.

        Returns:
            The ticks that were left until the deadline, or None if the event
            is no longer pending

        """
        if self._owner is None:
            return None
        return self._owner.cancel(self)

    def _detach(self, cancelled: bool = False) -> None:
        """Cut the event loose from its queue and drop the payload."""
        self._cancelled = cancelled
        self._owner = None
        self._payload = None

    def is_due(self, now: Any) -> bool:
        """Whether the event is due at time `now`."""
        return self._deadline <= now

    def __repr__(self) -> str:
        """Return string representation of a ScheduledEvent."""
        return (f"ScheduledEvent(deadline={self._deadline!r}, "
                f"sequence={self._sequence}, payload={self._payload!r})")

    def __lt__(self, other: object) -> bool:
        """Less."""
        if not isinstance(other, ScheduledEvent):
            return NotImplemented
        return self.key < other.key

    def __le__(self, other: object) -> bool:
        """Less or equal."""
        if not isinstance(other, ScheduledEvent):
            return NotImplemented
        return self.key <= other.key

    def __gt__(self, other: object) -> bool:
        """Greater."""
        if not isinstance(other, ScheduledEvent):
            return NotImplemented
        return self.key > other.key

    def __ge__(self, other: object) -> bool:
        """Greater or equal."""
        if not isinstance(other, ScheduledEvent):
            return NotImplemented
        return self.key >= other.key
