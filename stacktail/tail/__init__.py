from .driver import StackEventTailer, TailSession, compute_delay
from .fetcher import StackEventFetcher
from .filter import filter_new_events
from .models import StackEvent, StackOutput, StatusCategory, TailConfig, TailMode, classify_status
from .policy import should_continue

__all__ = [
    "StackEvent",
    "StackEventFetcher",
    "StackEventTailer",
    "StackOutput",
    "StatusCategory",
    "TailConfig",
    "TailMode",
    "TailSession",
    "classify_status",
    "compute_delay",
    "filter_new_events",
    "should_continue",
]
