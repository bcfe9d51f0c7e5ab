import inspect
import logging.config
import typing as t

TRACE = 5


class LoggingProvider(object):
    """Applies the `logging` settings section and hands out loggers named after their caller."""

    def __init__(self, config: dict[str, t.Any], debug: bool):
        logging.addLevelName(TRACE, "TRACE")
        logging.config.dictConfig(config)
        logging.captureWarnings(debug)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        if name is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            name = caller.f_globals["__name__"] if caller is not None else "boilerkpi"
        return logging.getLogger(name)
