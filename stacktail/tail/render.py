"""Rendering of stack events and outputs to the terminal."""
import math
from datetime import datetime
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from stacktail.constants import AWS_RESOURCE_TYPE_PREFIX

from .models import StackEvent, StackOutputs, StatusCategory, classify_status

ELLIPSIS = "…"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

TIMESTAMP_WIDTH = 15
RESOURCE_ID_WIDTH = 25
RESOURCE_TYPE_WIDTH = 25
STATUS_WIDTH = 25

STATUS_DISPLAY = {
    StatusCategory.FAILED: ("✗", "red"),
    StatusCategory.COMPLETE: ("✓", "green"),
    StatusCategory.IN_PROGRESS: ("⌛", "blue"),
}


def pad(text: str, width: int) -> str:
    """
    Fits a string into a column of the given width: shorter strings are padded with spaces, longer ones lose their
    middle part, which is replaced by an ellipsis.
    """
    if len(text) > width:
        return text[: width // 2] + ELLIPSIS + text[len(text) - math.ceil(width / 2) + 1 :]
    return text.ljust(width)


def one_year_before(now: datetime) -> datetime:
    """The same day and time one year earlier. Feb 29 falls through to Mar 1 of the previous year."""
    try:
        return now.replace(year=now.year - 1)
    except ValueError:
        return now.replace(year=now.year - 1, month=3, day=1)


def format_timestamp(timestamp: Optional[datetime], now: datetime = None) -> str:
    """
    Formats an event timestamp in local time, e.g. ``Mar 7 14:02:59``. Timestamps older than a year show the year
    instead of the time of day, e.g. ``Mar 7 2021``. Aware timestamps (as boto3 returns them) are compared in local
    time, naive ones as they are.
    """
    if not timestamp:
        return ""
    now = now or datetime.now()
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
        now = now.astimezone()
    elif now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)

    month = MONTHS[timestamp.month - 1]
    if timestamp < one_year_before(now):
        return f"{month} {timestamp.day} {timestamp.year}"
    return f"{month} {timestamp.day} {timestamp:%H:%M:%S}"


class EventRenderer:
    """Renders each stack event as one line of fixed-width, color-coded columns."""

    def __init__(self, console: Console, now: Callable[[], datetime] = None):
        self.console = console
        self._now = now

    def format_event(self, event: StackEvent) -> Text:
        status = event.get("ResourceStatus") or ""
        glyph, status_style = STATUS_DISPLAY[classify_status(status)]
        resource_type = event.get("ResourceType") or ""
        if resource_type.startswith(AWS_RESOURCE_TYPE_PREFIX):
            resource_type = resource_type[len(AWS_RESOURCE_TYPE_PREFIX) :]
        now = self._now() if self._now else None

        return Text.assemble(
            pad(format_timestamp(event.get("Timestamp"), now), TIMESTAMP_WIDTH),
            " ",
            (pad(event.get("LogicalResourceId") or "", RESOURCE_ID_WIDTH), "yellow"),
            " ",
            (pad(resource_type, RESOURCE_TYPE_WIDTH), "bright_black"),
            " ",
            (pad(f"{glyph} {status}", STATUS_WIDTH), status_style),
            " ",
            event.get("ResourceStatusReason") or "",
        )

    def render(self, event: StackEvent):
        self.console.print(self.format_event(event), soft_wrap=True, highlight=False)


class OutputRenderer:
    """Renders the outputs of a stack as ``key: value`` pairs, each followed by its description."""

    def __init__(self, console: Console):
        self.console = console

    def render(self, outputs: StackOutputs):
        self.console.print()
        for output in outputs:
            self.console.print(
                Text.assemble(
                    (output.get("OutputKey") or "", "bold"),
                    ": ",
                    (output.get("OutputValue") or "", "yellow"),
                ),
                soft_wrap=True,
                highlight=False,
            )
            if output.get("Description"):
                self.console.print(
                    Text.assemble("  ", (output["Description"], "bright_black")),
                    soft_wrap=True,
                    highlight=False,
                )
