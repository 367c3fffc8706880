import dataclasses

import pytest

from stacktail.exceptions import ConfigurationError
from stacktail.tail.models import StatusCategory, TailConfig, TailMode, classify_status


@pytest.mark.parametrize(
    "status,expected",
    [
        ("CREATE_IN_PROGRESS", StatusCategory.IN_PROGRESS),
        ("CREATE_COMPLETE", StatusCategory.COMPLETE),
        ("CREATE_FAILED", StatusCategory.FAILED),
        ("UPDATE_ROLLBACK_COMPLETE", StatusCategory.COMPLETE),
        ("UPDATE_ROLLBACK_FAILED", StatusCategory.FAILED),
        ("UPDATE_COMPLETE_CLEANUP_IN_PROGRESS", StatusCategory.IN_PROGRESS),
        ("UPDATE_ROLLBACK_COMPLETE_CLEANUP_IN_PROGRESS", StatusCategory.IN_PROGRESS),
        ("DELETE_SKIPPED", StatusCategory.IN_PROGRESS),
        ("", StatusCategory.IN_PROGRESS),
        (None, StatusCategory.IN_PROGRESS),
    ],
)
def test_classify_status(status, expected):
    assert classify_status(status) is expected


@pytest.mark.parametrize(
    "follow,die,expected",
    [
        (False, False, TailMode.SINGLE_SHOT),
        (False, True, TailMode.DIE_ON_COMPLETION),
        (True, False, TailMode.FOLLOW),
        (True, True, TailMode.FOLLOW),
    ],
)
def test_tail_mode_from_flags(follow, die, expected):
    assert TailMode.from_flags(follow, die) is expected
    assert TailConfig("my-stack", follow=follow, die_on_completion=die).mode is expected


class TestTailConfig:
    def test_defaults(self):
        config = TailConfig("my-stack")

        assert config.initial_count == 5
        assert config.poll_interval == 3.0
        assert config.min_delay == 0.1
        assert config.mode is TailMode.SINGLE_SHOT
        assert not config.print_outputs

    def test_is_immutable(self):
        config = TailConfig("my-stack")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.follow = True

    def test_missing_stack_name(self):
        with pytest.raises(ConfigurationError, match="a stack name must be specified"):
            TailConfig("")

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_initial_count_out_of_bounds(self, count):
        with pytest.raises(ConfigurationError, match="between 1 and 100"):
            TailConfig("my-stack", initial_count=count)

    @pytest.mark.parametrize("count", [1, 100])
    def test_initial_count_bounds(self, count):
        assert TailConfig("my-stack", initial_count=count).initial_count == count

    def test_min_delay_greater_than_interval(self):
        with pytest.raises(ConfigurationError):
            TailConfig("my-stack", poll_interval=0.1, min_delay=1.0)

    def test_non_positive_interval(self):
        with pytest.raises(ConfigurationError):
            TailConfig("my-stack", poll_interval=0)
