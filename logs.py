"""Logging configuration for applications embedding the graph modules."""

import logging
from logging import Formatter, LogRecord, StreamHandler
from typing import Dict, Iterable, Optional, TextIO


GRAPH_LOGGERS = ("edges_graph", "vertices_graph")


class ColorFormatter(Formatter):

    """Log formatter that prefixes each line with its level name.

    With use_color, the prefix is bold and colored by severity; levels without
    a color are printed plain.
    """

    COLORS = {
        logging.CRITICAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    def __init__(self, use_color: bool, fmt: str = "%(name)s: %(message)s"):
        super().__init__(fmt)
        self.use_color = use_color

    def level_prefix(self, record: LogRecord) -> str:
        code = self.COLORS.get(record.levelno) if self.use_color else None
        if code is None:
            return f"{record.levelname}:"
        return f"\x1b[{code};1m{record.levelname}:\x1b[0m"

    def format(self, record: LogRecord) -> str:
        return f"{self.level_prefix(record)} {super().format(record)}"


class GraphLogHandler(StreamHandler):

    """Stream handler attached to the graph loggers by setup_logging.

    Remembers each logger's level from before setup so that teardown can put
    it back.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__(stream)
        self.previous_levels: Dict[str, int] = {}

    def attach(self, name: str, log_level: int):
        logger = logging.getLogger(name)
        self.previous_levels.setdefault(name, logger.level)
        logger.setLevel(log_level)
        logger.addHandler(self)

    def detach(self, name: str):
        logger = logging.getLogger(name)
        logger.removeHandler(self)
        if name in self.previous_levels:
            logger.setLevel(self.previous_levels.pop(name))


def setup_logging(
    stream: TextIO,
    log_level: int = logging.DEBUG,
    loggers: Iterable[str] = GRAPH_LOGGERS,
) -> GraphLogHandler:
    """Attach a handler writing to stream on each of the graph loggers.

    Uses color only if the stream is a TTY. Returns the handler so the caller
    can pass it to teardown_logging later.
    """
    handler = GraphLogHandler(stream)
    isatty = getattr(stream, "isatty", None)
    handler.setFormatter(ColorFormatter(use_color=bool(isatty and isatty())))
    for name in loggers:
        handler.attach(name, log_level)
    return handler


def teardown_logging(
    handler: GraphLogHandler, loggers: Iterable[str] = GRAPH_LOGGERS
) -> None:
    """Detach a handler installed by setup_logging and restore logger levels."""
    for name in loggers:
        handler.detach(name)
    handler.close()
