"""Defines the TimerQueue class."""

import enum
import heapq
import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar, Union

from .errors import ClockRegressionError
from .event import ScheduledEvent

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")  # pylint: disable=invalid-name


class Regression(str, enum.Enum):
    """What TimerQueue.update() does with a time earlier than the clock."""

    CLAMP = "clamp"
    REJECT = "reject"
    ACCEPT = "accept"


class TimerQueue(Generic[T]):
    """
    TimerQueue holds events until the caller asks for them.

    Nothing happens on its own. The caller registers payloads at a deadline
    with add(), moves the virtual clock with update() or advance(), and
    collects whatever has come due with poll(). A payload is due once its
    deadline is at or before the clock.

    Due events are handed out earliest deadline first. Events with the same
    deadline come out in the order they were added.

    The standard way to use this class is to:
    - Create the TimerQueue
    - Add one or more events
    - Loop: update() the clock, then poll() until it returns None

    The queue is not thread-safe. Callers sharing one across threads must
    provide their own locking.
    """

    # Pending events, a heap ordered by (deadline, sequence). Cancelled
    # events stay in the heap until they reach the top or get compacted.
    _heap: 'List[ScheduledEvent[T]]'
    _now: Any
    _next_sequence: int
    # Number of events in _heap that are neither cancelled nor delivered
    _live: int
    _regression: Regression

    def __init__(self, start: Any = 0,
                 regression: Union[Regression, str] = Regression.CLAMP) -> None:
        """
        Create a new, empty TimerQueue.

        Parameters:
            start: The initial value of the virtual clock
            regression: How update() treats a time earlier than the clock

        """
        self._heap = []
        self._now = start
        self._next_sequence = 0
        self._live = 0
        self._regression = Regression(regression)

    @property
    def now(self) -> Any:
        """Get the current value of the virtual clock."""
        return self._now

    @property
    def regression(self) -> Regression:
        """Get the policy for backward clock updates."""
        return self._regression

    def add(self, deadline: Any, payload: T) -> 'ScheduledEvent[T]':
        """
        Register a payload to become due at `deadline`.

        A deadline at or before the current time is allowed; the event is then
        due immediately.

        Parameters:
            deadline: The tick at which the payload becomes due
            payload: The value to hand back from poll()

        Returns:
            The scheduled event, usable as a handle for cancel()

        """
        event = ScheduledEvent(deadline, self._next_sequence, payload,
                               owner=self)
        self._next_sequence += 1
        heapq.heappush(self._heap, event)
        self._live += 1
        LOGGER.debug("enqueue: %s", event)
        return event

    def update(self, time: Any) -> None:
        """
        Set the virtual clock.

        This never delivers events; it only changes what poll() considers due.
        A time earlier than the clock is handled according to the queue's
        regression policy.

        Parameters:
            time: The new clock value

        Raises:
            ClockRegressionError: `time` is in the past and the policy is
                REJECT

        """
        if time < self._now:
            if self._regression is Regression.REJECT:
                raise ClockRegressionError(self._now, time)
            if self._regression is Regression.CLAMP:
                LOGGER.debug("ignoring clock regression: %s -> %s",
                             self._now, time)
                return
        self._now = time

    def advance(self, elapsed: Any) -> None:
        """
        Move the virtual clock forward by `elapsed` ticks.

        Parameters:
            elapsed: The number of ticks that have passed

        """
        if elapsed < 0:
            raise ValueError(f"elapsed must not be negative: {elapsed!r}")
        self.update(self._now + elapsed)

    def poll(self) -> Optional[T]:
        """
        Remove and return the next due payload.

        Returns:
            The payload of the earliest due event, or None if nothing is due

        """
        if not self.is_due():
            return None
        return self._take()

    def drain(self) -> Iterator[T]:
        """Yield every payload that is currently due, in delivery order."""
        while self.is_due():
            yield self._take()

    def is_due(self) -> bool:
        """Whether poll() would deliver an event."""
        head = self._head()
        return head is not None and head.is_due(self._now)

    def next_deadline(self) -> Optional[Any]:
        """Get the deadline of the earliest pending event, if any."""
        head = self._head()
        if head is None:
            return None
        return head.deadline

    def next_in(self) -> Optional[Any]:
        """
        Get the number of ticks until the earliest pending event is due.

        Returns:
            0 if an event is already due, None if nothing is pending

        """
        head = self._head()
        if head is None:
            return None
        return self._remaining(head)

    def cancel(self, event: 'ScheduledEvent[T]') -> Optional[Any]:
        """
        Cancel a pending event.

        Parameters:
            event: A handle returned by add() on this queue

        Returns:
            The ticks that were left until the event's deadline, or None if
            `event` is not an event pending in this queue

        """
        if not isinstance(event, ScheduledEvent) or event.owner is not self:
            return None
        remaining = self._remaining(event)
        LOGGER.debug("cancel: %s", event)
        event._detach(cancelled=True)  # pylint: disable=protected-access
        self._live -= 1
        self._compact()
        return remaining

    def remove(self, payload: T) -> Optional[Any]:
        """
        Cancel the earliest pending event carrying `payload`.

        Payloads are matched by equality.

        Returns:
            The ticks that were left until the event's deadline, or None if no
            pending event carries `payload`

        """
        matches = [event for event in self._heap
                   if not event.cancelled and event.payload == payload]
        if not matches:
            return None
        return self.cancel(min(matches))

    def is_empty(self) -> bool:
        """Whether no events are pending."""
        return self._live == 0

    def __len__(self) -> int:
        """Get the number of pending events."""
        return self._live

    def __bool__(self) -> bool:
        """True if any events are pending."""
        return self._live > 0

    def __repr__(self) -> str:
        """String representation of the queue."""
        return (f"TimerQueue(now={self._now!r}, pending={self._live}, "
                f"next={self.next_deadline()!r})")

    def _head(self) -> 'Optional[ScheduledEvent[T]]':
        """Get the earliest live event, dropping cancelled ones on top."""
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)
        return self._heap[0] if self._heap else None

    def _take(self) -> T:
        event = heapq.heappop(self._heap)
        payload = event.payload
        LOGGER.debug("deliver: %s", event)
        event._detach()  # pylint: disable=protected-access
        self._live -= 1
        return payload

    def _remaining(self, event: 'ScheduledEvent[T]') -> Any:
        if event.is_due(self._now):
            return 0
        return event.deadline - self._now

    def _compact(self) -> None:
        """Rebuild the heap once cancelled events make up most of it."""
        if len(self._heap) > 2 * self._live + 16:
            self._heap = [event for event in self._heap
                          if not event.cancelled]
            heapq.heapify(self._heap)
