import logging
import threading
import time
from typing import Callable, Optional

from .fetcher import StackEventFetcher
from .filter import filter_new_events
from .models import StackEvent, StackEvents, TailConfig
from .policy import should_continue

LOG = logging.getLogger(__name__)


def compute_delay(elapsed: float, poll_interval: float, min_delay: float) -> float:
    """
    Time to wait before the next fetch, given the time elapsed since the last one started. Fetches happen once per
    ``poll_interval`` on average, and never closer than ``min_delay``, even if rendering took long.
    """
    return max(min_delay, poll_interval - elapsed)


class TailSession:
    """The mutable state of one tailing run."""

    cursor: Optional[StackEvent]
    """the newest event rendered so far"""
    last_fetch: Optional[float]
    """clock value at the start of the last fetch"""
    cycles: int
    rendered: int

    def __init__(self):
        self.cursor = None
        self.last_fetch = None
        self.cycles = 0
        self.rendered = 0


class StackEventTailer:
    """
    Polls the event log of a stack and renders each event exactly once, oldest first.

    Every cycle fetches the latest page of events, filters out the ones already shown, renders the rest, and asks
    the termination policy of the configured ``TailMode`` whether to go on. Cycles are strictly sequential. A fetch
    error ends the run immediately and propagates to the caller.

    ``stop()`` may be called from another thread to end a run at its next wait, which is the only way to end a run
    in follow mode short of terminating the process.
    """

    def __init__(
        self,
        fetcher: StackEventFetcher,
        render: Callable[[StackEvent], None],
        config: TailConfig,
        clock: Callable[[], float] = time.monotonic,
        stop_event: threading.Event = None,
    ):
        self.fetcher = fetcher
        self.render = render
        self.config = config
        self._clock = clock
        self._stop_event = stop_event or threading.Event()

    def run(self) -> TailSession:
        """
        Runs cycles until the termination policy says stop, or ``stop()`` is called. Every run does at least one
        cycle. A stop requested before the run starts is discarded.

        :return: the session state after the last cycle
        :raises ProviderError: if a fetch fails
        """
        self._stop_event.clear()
        session = TailSession()
        mode = self.config.mode
        LOG.debug("Tailing stack %s in %s mode", self.config.stack_name, mode.value)

        while True:
            self.poll_once(session)

            if not should_continue(mode, session.cursor, self.config.stack_name):
                LOG.debug("Stopping after %d cycle(s)", session.cycles)
                break

            delay = self.next_delay(session)
            LOG.debug("Next fetch in %.3fs", delay)
            if self._stop_event.wait(delay):
                LOG.debug("Tailing stopped after %d cycle(s)", session.cycles)
                break

        return session

    def poll_once(self, session: TailSession) -> StackEvents:
        """
        Runs one fetch, filter and render cycle.

        :param session: the state of the run, updated in place
        :return: the rendered events, oldest first
        """
        session.last_fetch = self._clock()
        page = self.fetcher.fetch()

        new_events, session.cursor = filter_new_events(
            page, session.cursor, self.config.initial_count
        )
        session.cycles += 1
        LOG.debug("Cycle %d: %d events fetched, %d new", session.cycles, len(page), len(new_events))

        for event in new_events:
            self.render(event)
        session.rendered += len(new_events)

        return new_events

    def next_delay(self, session: TailSession) -> float:
        if session.last_fetch is None:
            return 0
        return compute_delay(
            self._clock() - session.last_fetch, self.config.poll_interval, self.config.min_delay
        )

    def stop(self):
        self._stop_event.set()
