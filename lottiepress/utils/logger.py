"""
Logging for Lottiepress.

A process-wide singleton logger that writes progress diagnostics to the
console and, optionally, a detailed log file with source locations.
"""

import logging
import sys
import threading
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# ============================================================================
# Custom Levels
# ============================================================================

NOTICE = 25  # Between INFO and WARNING

logging.addLevelName(NOTICE, "NOTICE")


# ============================================================================
# Formatters
# ============================================================================


class DetailedFormatter(logging.Formatter):
    """Formatter with location tracking (module:function:line)."""

    def format(self, record: logging.LogRecord) -> str:
        record.location = f"{record.module}:{record.funcName}:{record.lineno}"
        formatted = super().format(record)

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)

        return formatted


# ============================================================================
# Singleton Logger
# ============================================================================


class LottiepressLogger:
    """
    Thread-safe singleton logger.

    Console output shows INFO and above without decoration. The optional
    file output records every configured level with timestamps, source
    locations and full tracebacks.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self._logger = logging.getLogger("lottiepress")
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._console_handler: Optional[logging.Handler] = None
        self._file_handler: Optional[logging.Handler] = None
        self._log_dir: Optional[Path] = None

        self._cleanup_handlers()

    def configure(
        self,
        log_level: str = "INFO",
        log_dir: str = "logs",
        enable_console: bool = True,
        enable_file: bool = True,
        rotation_enabled: bool = False,
        max_bytes: int = 10485760,  # 10 MB
        backup_count: int = 5,
    ) -> None:
        """
        Configure the logger handlers.

        Args:
            log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files
            enable_console: Enable console output
            enable_file: Enable file output
            rotation_enabled: Rotate the log file once it reaches max_bytes
            max_bytes: Max bytes before rotation
            backup_count: Number of rotated files to keep
        """
        self._cleanup_handlers()
        self._console_handler = None
        self._file_handler = None
        self._log_dir = None

        level = getattr(logging, log_level.upper(), logging.INFO)
        self._logger.setLevel(level)

        if enable_console:
            self._console_handler = logging.StreamHandler(sys.stdout)
            self._console_handler.setLevel(max(level, logging.INFO))
            self._console_handler.setFormatter(logging.Formatter(fmt="%(message)s"))
            self._logger.addHandler(self._console_handler)

        if enable_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            self._log_dir = log_path

            log_file = log_path / f"lottiepress_{datetime.now().strftime('%Y%m%d')}.log"

            if rotation_enabled:
                self._file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                    delay=True,
                )
            else:
                self._file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)

            self._enable_auto_release(self._file_handler)
            self._file_handler.setLevel(level)
            self._file_handler.setFormatter(
                DetailedFormatter(
                    fmt="%(asctime)s [%(levelname)s] [%(location)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(self._file_handler)

    def _cleanup_handlers(self) -> None:
        for handler in list(self._logger.handlers):
            self._release_handler_stream(handler)
            try:
                handler.close()
            except Exception:
                pass
            self._logger.removeHandler(handler)

    @staticmethod
    def _release_handler_stream(handler: logging.Handler) -> None:
        """Flush and close a file handler's stream so the log file is not held open."""
        if not hasattr(handler, "baseFilename"):
            return
        stream = getattr(handler, "stream", None)
        if stream is None:
            return
        try:
            stream.flush()
        except Exception:
            pass
        try:
            stream.close()
        except Exception:
            pass
        handler.stream = None  # type: ignore[attr-defined]

    def _enable_auto_release(self, handler: logging.Handler) -> None:
        original_emit = handler.emit

        def emit(record: logging.LogRecord, *, _original_emit=original_emit, _handler=handler):
            _original_emit(record)
            self._release_handler_stream(_handler)

        handler.emit = emit  # type: ignore[assignment]

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def notice(self, msg: str, *args, **kwargs) -> None:
        """Log a normal but significant event, such as a finished run."""
        self._logger.log(NOTICE, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)


# ============================================================================
# Global Logger Instance
# ============================================================================


def get_logger() -> LottiepressLogger:
    """
    Get the global LottiepressLogger instance.

    Returns:
        Singleton LottiepressLogger instance
    """
    return LottiepressLogger()
