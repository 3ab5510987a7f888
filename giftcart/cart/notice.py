"""
Transient "gift granted" banner.

The banner is shown when the gift is granted and hides itself after a
fixed duration. A new grant before expiry replaces the pending expiry,
so only the latest grant's timer ever fires.

Outside a running event loop there is nothing to fire the timer, so the
banner also carries a deadline and reads as hidden once it has passed.
"""
import asyncio
import time
from typing import Callable, Optional, Protocol

from giftcart.errors import ERROR_INVALID_DURATION
from giftcart.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NOTICE_SECONDS = 3.0


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """
    Anything that can run a callback later and hand back a cancelable handle.

    Returning None means the callback was not scheduled.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Optional[TimerHandle]: ...


class AsyncioScheduler:
    """
    Schedules callbacks on an asyncio event loop.

    Uses the loop given at construction, or the running loop at call time.
    Returns None when called with no loop available.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> Optional[asyncio.TimerHandle]:
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                logger.debug("No running event loop, expiry falls back to the deadline")
                return None
        return loop.call_later(delay, callback)


class GiftNotice:
    """Cancelable, self-expiring visibility flag."""

    def __init__(
        self,
        duration: float = DEFAULT_NOTICE_SECONDS,
        scheduler: Optional[Scheduler] = None,
        on_expire: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if duration <= 0:
            raise ValueError(ERROR_INVALID_DURATION)
        self.duration = duration
        self._scheduler = scheduler or AsyncioScheduler()
        self._on_expire = on_expire
        self._clock = clock
        self._handle: Optional[TimerHandle] = None
        self._visible = False
        self._expires_at = 0.0

    @property
    def visible(self) -> bool:
        return self._visible and self._clock() < self._expires_at

    @property
    def pending(self) -> bool:
        """True while an expiry is scheduled."""
        return self._handle is not None

    def show(self) -> None:
        """Show the banner and (re)start its expiry timer."""
        # New handle first: a failing scheduler leaves the old state intact
        handle = self._scheduler.call_later(self.duration, self._expire)
        self._drop_handle()
        self._handle = handle
        self._expires_at = self._clock() + self.duration
        self._visible = True
        logger.debug(f"Gift notice shown for {self.duration}s")

    def cancel(self) -> None:
        """Hide the banner now without firing on_expire."""
        self._drop_handle()
        self._visible = False

    def _drop_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _expire(self) -> None:
        self._handle = None
        self._visible = False
        logger.debug("Gift notice expired")
        if self._on_expire is not None:
            self._on_expire()
