"""
A pull-based event timer.

Events are payloads that become due at a deadline measured in abstract ticks.
An instance of TimerQueue holds the pending events along with a virtual clock.
The caller advances the clock and polls for due events; the queue never acts on
its own.
"""

from .errors import ClockRegressionError, Error
from .event import ScheduledEvent
from .timer import Regression, TimerQueue
