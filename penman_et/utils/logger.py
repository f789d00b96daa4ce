"""
Logger utilities for the penman_et package.

Provides a Logger class for consistent logging across the project
with Loguru-based logging and colored console output.

The package is disabled in loguru on import; ``Logger.setup`` enables it.
"""

from loguru import logger
import sys
from typing import Optional, Union
from contextlib import contextmanager
from pathlib import Path

from ..config.settings import LOGGING
from .exceptions import PenmanETError


class Logger:
    """
    Logger class for the ET0 calculator.

    Features:
    - Loguru-based logging with colored output
    - Log levels: DEBUG, INFO, WARNING, ERROR, CRITICAL
    - File rotation and retention
    - Context manager support
    """

    _loggers: dict = {}

    @staticmethod
    def setup(
        name: str = "penman_et",
        log_file: Optional[Union[str, Path]] = None,
        level: str = LOGGING["level"],
        console: bool = True,
        rotation: str = LOGGING["rotation"],
        retention: Union[int, str] = LOGGING["retention"]
    ) -> None:
        """
        Initialize logger with specified configuration.

        Args:
            name: Logger name
            log_file: Path to log file (optional)
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console: Whether to output to console (stderr, so stdout stays
                clean for command output)
            rotation: Log file rotation size
            retention: Number of rotated files to keep, or a loguru duration
                such as "10 days"
        """
        # Remove default handler
        logger.remove()
        logger.enable(name)

        if console:
            logger.add(
                sys.stderr,
                format=LOGGING["format"],
                level=level,
                colorize=True,
                backtrace=True,
                diagnose=False
            )

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            logger.add(
                str(log_path),
                format=LOGGING["format"],
                level=level,
                rotation=rotation,
                retention=retention,
                serialize=False,
                backtrace=True,
                diagnose=False
            )

        Logger._loggers[name] = logger

    @staticmethod
    def get_logger(name: str):
        """
        Get logger instance.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        if name not in Logger._loggers:
            Logger.setup(name=name)
        return Logger._loggers[name]

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        """Log debug message"""
        logger.opt(depth=1).debug(message, **kwargs)

    @staticmethod
    def info(message: str, **kwargs) -> None:
        """Log info message"""
        logger.opt(depth=1).info(message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        """Log warning message"""
        logger.opt(depth=1).warning(message, **kwargs)

    @staticmethod
    def error(message: str, **kwargs) -> None:
        """Log error message"""
        logger.opt(depth=1).error(message, **kwargs)

    @staticmethod
    def exception(message: str, **kwargs) -> None:
        """Log exception with traceback"""
        logger.opt(depth=1).exception(message, **kwargs)

    @staticmethod
    def log_step(step: str, status: str = "COMPLETED") -> None:
        """Log pipeline step"""
        logger.debug(f"[{status}] {step}")

    @staticmethod
    def configure_for_testing() -> None:
        """Configure logger for testing (quiet mode)"""
        Logger.setup(name="penman_et", level="DEBUG", console=False)

    @staticmethod
    def configure_for_production(log_file: Union[str, Path] = LOGGING["log_file"]) -> None:
        """Configure logger for production"""
        Logger.setup(name="penman_et", log_file=log_file, level=LOGGING["level"])


@contextmanager
def log_step(name: str):
    """
    Context manager for logging pipeline stages.

    Usage:
        with log_step("Radiation terms"):
            # do work
    """
    Logger.debug(f"Starting: {name}")
    try:
        yield
        Logger.log_step(name, "COMPLETED")
    except PenmanETError as e:
        # Reported once by the caller
        Logger.log_step(name, "FAILED")
        Logger.debug(f"{type(e).__name__} in {name}: {e}")
        raise
    except Exception as e:
        Logger.log_step(name, "FAILED")
        Logger.error(f"Error in {name}: {e}")
        raise


def log_execution_time(func):
    """
    Decorator to log function execution time.

    Usage:
        @log_execution_time
        def my_function():
            pass
    """
    import time
    from functools import wraps

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time
        Logger.debug(f"{func.__name__} took {execution_time:.6f} seconds")
        return result
    return wrapper
