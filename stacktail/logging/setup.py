import logging
import sys
import warnings

from stacktail import config

from .format import AddFormattedAttributes, DefaultFormatter

# third-party loggers are kept quiet unless something goes wrong
default_log_levels = {
    "boto3": logging.INFO,
    "botocore": logging.ERROR,
    "s3transfer": logging.INFO,
    "urllib3": logging.WARNING,
}


def get_log_level_from_config():
    # overriding the log level if TAIL_LOG has been set
    if config.TAIL_LOG:
        log_level = str(config.TAIL_LOG).upper()
        return logging._nameToLevel[log_level]

    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging_from_config():
    setup_logging(get_log_level_from_config())


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(DefaultFormatter())
    log_handler.addFilter(AddFormattedAttributes())
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for stacktail.

    :param log_level: the optional log level.
    """
    # set create a default handler for the root logger (basically logging.basicConfig but explicit)
    log_handler = create_default_handler(log_level)

    # replace any existing handlers
    logging.basicConfig(level=log_level, handlers=[log_handler], force=True)

    # disable some logs and warnings
    warnings.filterwarnings("ignore")
    logging.captureWarnings(True)

    # set log levels of loggers
    logging.root.setLevel(log_level)
    logging.getLogger("stacktail").setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)
