import logging
import sys

_FORMAT = "[%(asctime)s][%(name)s] %(levelname)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class CustomHandler(logging.Handler):
    """Logging handler that writes an empty line for empty log messages,
    otherwise formats the message as usual.
    """

    def __init__(self, stream=None, filename=None):
        super().__init__()
        if filename is not None:
            self._should_close = True
            self.stream = open(filename, "a", encoding="utf-8")
        else:
            self._should_close = False
            self.stream = stream if stream is not None else sys.stdout

    def emit(self, record):
        try:
            msg = record.getMessage()
            if msg == "":
                self.stream.write("\n")
            else:
                self.stream.write(self.format(record) + "\n")
            self.flush()
        except Exception:
            self.handleError(record)

    def flush(self):
        if self.stream and hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self):
        if self._should_close and not self.stream.closed:
            self.stream.close()
        super().close()


def get_logger(name="octasphere", filename=None, force=False,
               level=logging.INFO):
    """Return a logger instance configured for octasphere.

    Parameters
    ----------
    name : str
        The logger name.
    filename : str, Path or None, optional
        If provided, log messages are written to this file. If ``None``,
        logs are sent to stdout.
    force : bool, optional
        If True, existing handlers attached to the logger are removed and
        replaced with a new handler, so an already configured logger can be
        reconfigured.
    level : int, optional
        Level of the logger and its handler.

    Returns
    -------
    _logger : logging.Logger
        Configured logger.
    """
    _logger = logging.getLogger(name)
    if force or not _logger.handlers:
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
            handler.close()
        if filename:
            handler = CustomHandler(filename=filename)
        else:
            handler = CustomHandler(stream=sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        _logger.addHandler(handler)
        _logger.setLevel(level)
        _logger.propagate = False
    return _logger


def configure_logger(level=logging.INFO, fmt=_FORMAT, datefmt=_DATEFMT,
                     filename=None, stream=None):
    """Reconfigure the octasphere logger.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.DEBUG to see every subdivision level).
    fmt : str, optional
        Log message format.
    datefmt : str, optional
        Date format for log messages.
    filename : str, Path or None, optional
        If provided, log messages are saved to this file.
    stream : file-like, optional
        Stream used when no filename is given. Defaults to stdout.

    Returns
    -------
    logger : logging.Logger
    """
    if filename:
        handler = CustomHandler(filename=filename)
    else:
        handler = CustomHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


# Provide a default logger for convenience
logger = get_logger()
