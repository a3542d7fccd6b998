import logging
import sys

LOG_FORMAT = '%(asctime)s | [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level: str = 'WARNING', logfile: str | None = None) -> None:
    """
    Configure the root logger once at program start

    Logs go to stderr, or to logfile when given, so the board drawn on stdout stays readable.

    Args:
        level (str): name of the logging level, unknown names fall back to WARNING
        logfile (str | None): path of a file to append logs to
    """
    handler = logging.FileHandler(logfile, encoding='utf-8') if logfile else logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[handler],
    )
