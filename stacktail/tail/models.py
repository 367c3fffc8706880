import dataclasses
import enum
from datetime import datetime
from typing import List, Optional, TypedDict

from stacktail.constants import (
    DEFAULT_INITIAL_EVENTS,
    DEFAULT_MIN_DELAY,
    DEFAULT_POLL_INTERVAL,
    MAX_INITIAL_EVENTS,
    MIN_INITIAL_EVENTS,
)
from stacktail.exceptions import ConfigurationError


class StackEvent(TypedDict, total=False):
    StackId: str
    EventId: str
    StackName: str
    LogicalResourceId: Optional[str]
    PhysicalResourceId: Optional[str]
    ResourceType: Optional[str]
    Timestamp: datetime
    ResourceStatus: Optional[str]
    ResourceStatusReason: Optional[str]


StackEvents = List[StackEvent]


class StackOutput(TypedDict, total=False):
    OutputKey: Optional[str]
    OutputValue: Optional[str]
    Description: Optional[str]
    ExportName: Optional[str]


StackOutputs = List[StackOutput]


class StatusCategory(enum.Enum):
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
    FAILED = "failed"


def classify_status(status: Optional[str]) -> StatusCategory:
    """
    Classifies a CloudFormation resource status token (e.g. ``UPDATE_ROLLBACK_COMPLETE``).

    Anything containing ``FAILED`` is a failure, anything containing ``COMPLETE`` (but not ``IN_PROGRESS``, as in
    ``UPDATE_COMPLETE_CLEANUP_IN_PROGRESS``) is complete, everything else is still in progress.
    """
    if not status:
        return StatusCategory.IN_PROGRESS
    if "FAILED" in status:
        return StatusCategory.FAILED
    if "COMPLETE" in status and "IN_PROGRESS" not in status:
        return StatusCategory.COMPLETE
    return StatusCategory.IN_PROGRESS


class TailMode(enum.Enum):
    # fetch and render once, then exit
    SINGLE_SHOT = "single-shot"
    # poll until the stack itself reports a completion or failure
    DIE_ON_COMPLETION = "die-on-completion"
    # poll until the process is stopped
    FOLLOW = "follow"

    @classmethod
    def from_flags(cls, follow: bool, die_on_completion: bool) -> "TailMode":
        if follow:
            return cls.FOLLOW
        if die_on_completion:
            return cls.DIE_ON_COMPLETION
        return cls.SINGLE_SHOT


@dataclasses.dataclass(frozen=True)
class TailConfig:
    """Immutable parameters of one tailing run."""

    stack_name: str
    initial_count: int = DEFAULT_INITIAL_EVENTS
    follow: bool = False
    die_on_completion: bool = False
    print_outputs: bool = False
    poll_interval: float = DEFAULT_POLL_INTERVAL
    """average seconds between two fetches"""
    min_delay: float = DEFAULT_MIN_DELAY
    """minimum seconds between two fetches"""

    def __post_init__(self):
        if not self.stack_name:
            raise ConfigurationError("a stack name must be specified")
        if not MIN_INITIAL_EVENTS <= self.initial_count <= MAX_INITIAL_EVENTS:
            raise ConfigurationError(
                f"the number of initial events must be between {MIN_INITIAL_EVENTS} and "
                f"{MAX_INITIAL_EVENTS}, got {self.initial_count}"
            )
        if self.poll_interval <= 0 or self.min_delay <= 0:
            raise ConfigurationError("poll interval and minimum delay must be positive")
        if self.min_delay > self.poll_interval:
            raise ConfigurationError(
                f"minimum delay ({self.min_delay}s) must not exceed the poll interval ({self.poll_interval}s)"
            )

    @property
    def mode(self) -> TailMode:
        return TailMode.from_flags(self.follow, self.die_on_completion)
