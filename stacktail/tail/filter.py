from typing import Optional, Tuple

from .models import StackEvent, StackEvents


def filter_new_events(
    page: StackEvents, cursor: Optional[StackEvent], initial_count: int
) -> Tuple[StackEvents, Optional[StackEvent]]:
    """
    Computes which events of a freshly fetched page have not been shown yet.

    ``page`` is ordered newest-first, as DescribeStackEvents returns it. Without a cursor (first fetch) the newest
    ``initial_count`` events are new. With a cursor, everything newer than the cursor event is new. If the cursor
    event is no longer on the page (it was pushed off, or the stack was recreated), the whole page is treated as
    new, which may show some events a second time.

    :param page: the fetched events, newest first
    :param cursor: the newest event shown so far, or None
    :param initial_count: number of events to show on the first fetch
    :return: a tuple of the new events (oldest first, i.e. in display order) and the updated cursor
    """
    if cursor is None:
        new_events = page[:initial_count]
    else:
        cursor_id = cursor.get("EventId")
        cursor_index = next(
            (i for i, event in enumerate(page) if event.get("EventId") == cursor_id), None
        )
        new_events = page if cursor_index is None else page[:cursor_index]

    if new_events:
        cursor = new_events[0]

    return list(reversed(new_events)), cursor
