import logging
import sys
from typing import IO, Optional, Tuple, Union

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


class _LintStreamHandler(logging.StreamHandler):
    """Marks the handlers installed by this module so they can be replaced."""


def parse_log_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Turn ``"debug"``/``"WARNING"``/``10`` into a logging level number."""
    if isinstance(value, int):
        return value
    if not value:
        return default
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else default


def _stream_handler(
    stream: IO[str],
    formatter: logging.Formatter,
    min_level: int,
    max_level: Optional[int] = None,
) -> logging.Handler:
    handler = _LintStreamHandler(stream=stream)
    handler.setLevel(min_level)
    if max_level is not None:
        handler.addFilter(_MaxLevelFilter(max_level))
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> Tuple[logging.Handler, logging.Handler]:
    """Route root logging to two streams split at ``stderr_level``.

    The lint report itself is printed to stdout, so with the default levels
    only diagnostics about skipped files, unreadable documents and crashed
    rules reach stderr. Handlers installed by an earlier call are replaced;
    handlers owned by anyone else stay attached.

    Returns:
        The (stdout, stderr) handlers that were installed
    """
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _LintStreamHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)

    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    # Streams are looked up per call so redirected sys.stdout/sys.stderr are honoured
    out_handler = _stream_handler(stdout or sys.stdout, formatter, logging.DEBUG, stderr_level - 1)
    err_handler = _stream_handler(stderr or sys.stderr, formatter, stderr_level)

    root.addHandler(out_handler)
    root.addHandler(err_handler)
    return out_handler, err_handler
