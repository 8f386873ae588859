"""
Logging setup for the roster web shell and CLI.

- Logs live under LOG_DIR (default ./logs), one subdirectory per area
  ('webapp', 'cli', 'import')
- Daily rotation with date-stamped file names, optional size rotation
- Old log files are removed after LOG_RETENTION_DAYS

Usage:
    from logging_config import get_logger

    logger = get_logger('webapp', 'webapp')
    logger.info('Imported 12 members')
"""

import logging
import os
from datetime import datetime, timedelta
from logging.handlers import TimedRotatingFileHandler, RotatingFileHandler
from pathlib import Path
from typing import Optional


LOG_BASE_DIR = Path(os.getenv('LOG_DIR', 'logs'))
DEFAULT_LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_RETENTION_DAYS = int(os.getenv('LOG_RETENTION_DAYS', '30'))
MAX_LOG_SIZE_MB = int(os.getenv('MAX_LOG_SIZE_MB', '10'))

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# names of the handlers configure_root_logger attaches
APP_FILE_HANDLER = 'app_file'
APP_CONSOLE_HANDLER = 'app_console'


def ensure_log_directory(log_subdir: str) -> Path:
    """Create LOG_BASE_DIR/<log_subdir> if needed and return it."""
    log_dir = LOG_BASE_DIR / log_subdir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def cleanup_old_logs(log_dir: Path, retention_days: int = LOG_RETENTION_DAYS) -> int:
    """
    Remove *.log files older than the retention period.

    Returns:
        Number of files removed
    """
    if not log_dir.exists():
        return 0

    cutoff = datetime.now() - timedelta(days=retention_days)
    removed = 0
    for log_file in log_dir.glob('*.log'):
        if log_file.stat().st_mtime < cutoff.timestamp():
            try:
                log_file.unlink()
                removed += 1
            except OSError:
                pass  # file still held open by another handler
    return removed


def _resolve_level(level: Optional[str]) -> int:
    return getattr(logging, (level or DEFAULT_LOG_LEVEL).upper())


def _daily_file_handler(log_dir: Path, prefix: str, log_level: int, formatter: logging.Formatter):
    handler = TimedRotatingFileHandler(
        filename=log_dir / f"{prefix}_{datetime.now().strftime('%Y-%m-%d')}.log",
        when='midnight',
        interval=1,
        backupCount=LOG_RETENTION_DAYS,
        encoding='utf-8'
    )
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    return handler


def get_logger(
    name: str,
    log_subdir: str,
    level: Optional[str] = None,
    use_size_rotation: bool = False,
    console_output: bool = True
) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (e.g., 'webapp', 'import')
        log_subdir: Subdirectory under LOG_BASE_DIR
        level: Log level name. Defaults to DEFAULT_LOG_LEVEL
        use_size_rotation: Also keep a size-rotated rolling log
        console_output: Also log to the console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # already configured
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    log_level = _resolve_level(level)
    log_dir = ensure_log_directory(log_subdir)
    cleanup_old_logs(log_dir)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger.addHandler(_daily_file_handler(log_dir, log_subdir, log_level, formatter))

    if use_size_rotation:
        size_handler = RotatingFileHandler(
            filename=log_dir / f"{log_subdir}_rolling.log",
            maxBytes=MAX_LOG_SIZE_MB * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        size_handler.setLevel(log_level)
        size_handler.setFormatter(formatter)
        logger.addHandler(size_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def configure_root_logger(level: Optional[str] = None, console_output: bool = True):
    """
    Configure the root logger, which the domain modules log through.

    Does nothing if it was already configured by an earlier call, so the web
    app can call it on every startup.
    """
    root_logger = logging.getLogger()
    if any(h.get_name() == APP_FILE_HANDLER for h in root_logger.handlers):
        return

    root_logger.setLevel(logging.DEBUG)
    log_level = _resolve_level(level)
    log_dir = ensure_log_directory('app')
    cleanup_old_logs(log_dir)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = _daily_file_handler(log_dir, 'app', log_level, formatter)
    file_handler.set_name(APP_FILE_HANDLER)
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        console_handler.set_name(APP_CONSOLE_HANDLER)
        root_logger.addHandler(console_handler)
