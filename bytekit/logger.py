"""Levelled logging with a replaceable process-wide default logger."""

from __future__ import annotations

import enum
import os
import sys
from datetime import datetime
from typing import Any, Optional, Protocol, TextIO, runtime_checkable


class Level(enum.IntEnum):
    """Priority of a log message; lower levels are dropped below the threshold."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    NOTICE = 3
    WARN = 4
    ERROR = 5
    FATAL = 6

    def prefix(self) -> str:
        """Return the tag written in front of messages at this level."""
        return f"[{self.name.capitalize()}] "


@runtime_checkable
class Logger(Protocol):
    """Interface of a logger with plain, formatted and context-aware methods."""

    def trace(self, *args: Any) -> None:
        """Log ``args`` at TRACE."""

    def debug(self, *args: Any) -> None:
        """Log ``args`` at DEBUG."""

    def info(self, *args: Any) -> None:
        """Log ``args`` at INFO."""

    def notice(self, *args: Any) -> None:
        """Log ``args`` at NOTICE."""

    def warn(self, *args: Any) -> None:
        """Log ``args`` at WARN."""

    def error(self, *args: Any) -> None:
        """Log ``args`` at ERROR."""

    def fatal(self, *args: Any) -> None:
        """Log ``args`` at FATAL and exit."""

    def tracef(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at TRACE."""

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at DEBUG."""

    def infof(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at INFO."""

    def noticef(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at NOTICE."""

    def warnf(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at WARN."""

    def errorf(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at ERROR."""

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Log a formatted message at FATAL and exit."""

    def ctx_tracef(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at TRACE with a context."""

    def ctx_debugf(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at DEBUG with a context."""

    def ctx_infof(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at INFO with a context."""

    def ctx_noticef(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at NOTICE with a context."""

    def ctx_warnf(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at WARN with a context."""

    def ctx_errorf(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at ERROR with a context."""

    def ctx_fatalf(self, ctx: Any, fmt: str, *args: Any) -> None:
        """Log a formatted message at FATAL with a context and exit."""


_level: Level = Level.TRACE


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, adding a space between two neighbours that are not strings."""
    parts: list[str] = []
    prev: Any = None
    for i, arg in enumerate(args):
        if i > 0 and not isinstance(arg, str) and not isinstance(prev, str):
            parts.append(" ")
        parts.append(str(arg))
        prev = arg
    return "".join(parts)


class LocalLogger:
    """Logger writing timestamped lines with the caller's file and line to a stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def _logf(self, lv: Level, fmt: Optional[str], args: tuple[Any, ...]) -> None:
        if _level > lv:
            return
        if fmt is not None:
            body = fmt % args if args else fmt
        else:
            body = _sprint(args)
        self._output(lv.prefix() + body)
        if lv == Level.FATAL:
            sys.exit(1)

    def _output(self, msg: str) -> None:
        # The frame two levels above _logf is the code that called the public method.
        try:
            frame = sys._getframe(3)
            where = f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
        except ValueError:
            where = "???:1"
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S.%f")
        if not msg.endswith("\n"):
            msg += "\n"
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(f"{stamp} {where}: {msg}")
        stream.flush()

    def trace(self, *args: Any) -> None:
        self._logf(Level.TRACE, None, args)

    def debug(self, *args: Any) -> None:
        self._logf(Level.DEBUG, None, args)

    def info(self, *args: Any) -> None:
        self._logf(Level.INFO, None, args)

    def notice(self, *args: Any) -> None:
        self._logf(Level.NOTICE, None, args)

    def warn(self, *args: Any) -> None:
        self._logf(Level.WARN, None, args)

    def error(self, *args: Any) -> None:
        self._logf(Level.ERROR, None, args)

    def fatal(self, *args: Any) -> None:
        self._logf(Level.FATAL, None, args)

    def tracef(self, fmt: str, *args: Any) -> None:
        self._logf(Level.TRACE, fmt, args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._logf(Level.DEBUG, fmt, args)

    def infof(self, fmt: str, *args: Any) -> None:
        self._logf(Level.INFO, fmt, args)

    def noticef(self, fmt: str, *args: Any) -> None:
        self._logf(Level.NOTICE, fmt, args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self._logf(Level.WARN, fmt, args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._logf(Level.ERROR, fmt, args)

    def fatalf(self, fmt: str, *args: Any) -> None:
        self._logf(Level.FATAL, fmt, args)

    def ctx_tracef(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.TRACE, fmt, args)

    def ctx_debugf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.DEBUG, fmt, args)

    def ctx_infof(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.INFO, fmt, args)

    def ctx_noticef(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.NOTICE, fmt, args)

    def ctx_warnf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.WARN, fmt, args)

    def ctx_errorf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.ERROR, fmt, args)

    def ctx_fatalf(self, ctx: Any, fmt: str, *args: Any) -> None:
        self._logf(Level.FATAL, fmt, args)


_default_logger: Logger = LocalLogger()


def set_level(lv: int) -> None:
    """Set the threshold below which messages are dropped; raises ValueError if invalid."""
    global _level
    try:
        _level = Level(lv)
    except ValueError:
        raise ValueError("invalid level") from None


def get_level() -> Level:
    """Return the current threshold level."""
    return _level


def set_default_logger(logger: Logger) -> None:
    """Replace the logger used by the module-level functions."""
    global _default_logger
    if logger is None:
        raise ValueError("logger must not be None")
    _default_logger = logger


def get_default_logger() -> Logger:
    """Return the logger used by the module-level functions."""
    return _default_logger


def _enabled(lv: Level) -> bool:
    return _level <= lv


def trace(*args: Any) -> None:
    """Log at TRACE through the default logger."""
    if _enabled(Level.TRACE):
        _default_logger.trace(*args)


def debug(*args: Any) -> None:
    """Log at DEBUG through the default logger."""
    if _enabled(Level.DEBUG):
        _default_logger.debug(*args)


def info(*args: Any) -> None:
    """Log at INFO through the default logger."""
    if _enabled(Level.INFO):
        _default_logger.info(*args)


def notice(*args: Any) -> None:
    """Log at NOTICE through the default logger."""
    if _enabled(Level.NOTICE):
        _default_logger.notice(*args)


def warn(*args: Any) -> None:
    """Log at WARN through the default logger."""
    if _enabled(Level.WARN):
        _default_logger.warn(*args)


def error(*args: Any) -> None:
    """Log at ERROR through the default logger."""
    if _enabled(Level.ERROR):
        _default_logger.error(*args)


def fatal(*args: Any) -> None:
    """Log at FATAL through the default logger, which then exits."""
    _default_logger.fatal(*args)


def tracef(fmt: str, *args: Any) -> None:
    """Log a formatted message at TRACE through the default logger."""
    if _enabled(Level.TRACE):
        _default_logger.tracef(fmt, *args)


def debugf(fmt: str, *args: Any) -> None:
    """Log a formatted message at DEBUG through the default logger."""
    if _enabled(Level.DEBUG):
        _default_logger.debugf(fmt, *args)


def infof(fmt: str, *args: Any) -> None:
    """Log a formatted message at INFO through the default logger."""
    if _enabled(Level.INFO):
        _default_logger.infof(fmt, *args)


def noticef(fmt: str, *args: Any) -> None:
    """Log a formatted message at NOTICE through the default logger."""
    if _enabled(Level.NOTICE):
        _default_logger.noticef(fmt, *args)


def warnf(fmt: str, *args: Any) -> None:
    """Log a formatted message at WARN through the default logger."""
    if _enabled(Level.WARN):
        _default_logger.warnf(fmt, *args)


def errorf(fmt: str, *args: Any) -> None:
    """Log a formatted message at ERROR through the default logger."""
    if _enabled(Level.ERROR):
        _default_logger.errorf(fmt, *args)


def fatalf(fmt: str, *args: Any) -> None:
    """Log a formatted message at FATAL through the default logger, which then exits."""
    _default_logger.fatalf(fmt, *args)


def ctx_tracef(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at TRACE with a context."""
    if _enabled(Level.TRACE):
        _default_logger.ctx_tracef(ctx, fmt, *args)


def ctx_debugf(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at DEBUG with a context."""
    if _enabled(Level.DEBUG):
        _default_logger.ctx_debugf(ctx, fmt, *args)


def ctx_infof(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at INFO with a context."""
    if _enabled(Level.INFO):
        _default_logger.ctx_infof(ctx, fmt, *args)


def ctx_noticef(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at NOTICE with a context."""
    if _enabled(Level.NOTICE):
        _default_logger.ctx_noticef(ctx, fmt, *args)


def ctx_warnf(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at WARN with a context."""
    if _enabled(Level.WARN):
        _default_logger.ctx_warnf(ctx, fmt, *args)


def ctx_errorf(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at ERROR with a context."""
    if _enabled(Level.ERROR):
        _default_logger.ctx_errorf(ctx, fmt, *args)


def ctx_fatalf(ctx: Any, fmt: str, *args: Any) -> None:
    """Log a formatted message at FATAL with a context, then exit."""
    _default_logger.ctx_fatalf(ctx, fmt, *args)