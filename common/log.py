"""Shared logging utilities for the ingestion command."""

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s [%(slug)s] %(message)s'


class SlugContextFilter(logging.Filter):
    """Ensure every record carries a ``slug`` attribute for the log format."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Default the slug to '-' and never suppress the record."""
        if not hasattr(record, 'slug'):
            record.slug = '-'
        return True


class IngestHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self.addFilter(SlugContextFilter())


def configure_logging(
    level: str | int = 'INFO', logger_name: str = 'posts'
) -> logging.Logger:
    """Attach a formatted stream handler to the named logger namespace.

    Calling this more than once replaces the previously installed handler.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, IngestHandler):
            logger.removeHandler(handler)

    logger.addHandler(IngestHandler())
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
