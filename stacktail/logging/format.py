"""Tools for formatting stacktail logs."""
import logging
from functools import lru_cache

MAX_NAME_LEN = 20

LOG_FORMAT = f"%(asctime)s.%(msecs)03d %(st_level)5s --- %(st_name)-{MAX_NAME_LEN}s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

CUSTOM_LEVEL_NAMES = {
    50: "FATAL",
    40: "ERROR",
    30: "WARN",
    20: "INFO",
    10: "DEBUG",
}


class DefaultFormatter(logging.Formatter):
    """
    A formatter that uses ``LOG_FORMAT`` and ``LOG_DATE_FORMAT``.
    """

    def __init__(self, fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT):
        super(DefaultFormatter, self).__init__(fmt=fmt, datefmt=datefmt)


class AddFormattedAttributes(logging.Filter):
    """
    Filter that adds two attributes to a log record:

    - st_level: the abbreviated loglevel that's max 5 characters long
    - st_name: the abbreviated name of the logger (e.g., `s.tail.driver`), trimmed to ``MAX_NAME_LEN``
    """

    max_name_len: int

    def __init__(self, max_name_len: int = None):
        super(AddFormattedAttributes, self).__init__()
        self.max_name_len = max_name_len if max_name_len else MAX_NAME_LEN

    def filter(self, record):
        record.st_level = CUSTOM_LEVEL_NAMES.get(record.levelno, record.levelname)
        record.st_name = self._get_abbreviated_logger_name(record.name)
        return True

    @lru_cache(maxsize=128)
    def _get_abbreviated_logger_name(self, name):
        return abbreviate_logger_name(name, self.max_name_len)


def abbreviate_logger_name(name: str, length: int) -> str:
    """
    Shortens a dotted logger name by collapsing its leading parts to their first letter, left to right, until it
    fits. For example ``stacktail.tail.driver`` with length=15 turns into ``s.tail.driver``. If even the fully
    collapsed name is too long, its tail is cut off.

    :param name: the logger name
    :param length: the max length of the logger name
    :return: the abbreviated name
    """
    parts = name.split(".")

    for i in range(len(parts) - 1):
        if len(".".join(parts)) <= length:
            break
        parts[i] = parts[i][0]

    return ".".join(parts)[:length]
