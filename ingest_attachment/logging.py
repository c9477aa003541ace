# refer - https://loguru.readthedocs.io/en/stable/api/logger.html
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.remove() # remove default stuff
logger.configure(extra={"name": "ingest_attachment"})
logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    error_log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Replace all sinks with a stderr sink at `level`.

    Args:
        level: Minimum level for stderr and `log_file`.
        log_file: Optional file receiving the same records as stderr.
        error_log_dir: Optional directory for daily rotated error logs.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        add_log_file(log_file, level=level)

    if error_log_dir:
        log_dir = Path(error_log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        # store error log files
        logger.add(
            log_dir / "errors_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="ERROR",
            rotation="5 MB",
            retention="90 days",
        )


# Function to get logger with context
def get_logger(name: Optional[str] = None):
    if name:
        return logger.bind(name=name)
    return logger


def add_log_file(filepath: Union[str, Path], level: str = "INFO", **kwargs) -> int:
    return logger.add(filepath, format=FILE_FORMAT, level=level, **kwargs)
