import logging
import os

from stacktail.constants import (
    DEFAULT_MIN_DELAY,
    DEFAULT_POLL_INTERVAL,
    FALSE_STRINGS,
    LOG_LEVELS,
    TRUE_STRINGS,
)

LOG = logging.getLogger(__name__)


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def eval_log_type(env_var_name: str):
    """Get the log level from the given environment variable, or False if it is unset or unknown"""
    tail_log = str(os.environ.get(env_var_name) or "").strip().lower()
    return tail_log if tail_log in LOG_LEVELS else False


def parse_float_env(env_var_name: str, default: float) -> float:
    """
    Parse a positive float from the given environment variable. Falls back to ``default`` if the variable
    is unset, and logs a warning if the value cannot be used.
    """
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        result = float(value)
    except ValueError:
        LOG.warning("Ignoring %s=%r: not a number, using %s", env_var_name, value, default)
        return default
    if result <= 0:
        LOG.warning("Ignoring %s=%r: must be positive, using %s", env_var_name, value, default)
        return default
    return result


# log level of the tool (debug, info, warn, error)
TAIL_LOG = eval_log_type("TAIL_LOG")

# whether debug output is enabled
DEBUG = is_env_true("DEBUG") or TAIL_LOG == "debug"

# average time between two DescribeStackEvents calls, in seconds
TAIL_POLL_INTERVAL = parse_float_env("TAIL_POLL_INTERVAL", DEFAULT_POLL_INTERVAL)

# minimum time between two DescribeStackEvents calls, in seconds
TAIL_MIN_DELAY = parse_float_env("TAIL_MIN_DELAY", DEFAULT_MIN_DELAY)
