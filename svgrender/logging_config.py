import logging
import os
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_level: str = "INFO", log_format: str = DEFAULT_LOG_FORMAT,
                      log_to_file: bool = False, log_file_path: str = "logs/svgrender.log",
                      max_bytes: int = 500_000, backup_count: int = 5) -> None:
    """
    Configure root logging with a console handler and optional rotating file handler.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log message format string
        log_to_file: Whether to enable file logging
        log_file_path: Path to log file (directory will be created if needed)
        max_bytes: Maximum size of one log file before rotation
        backup_count: Number of rotated files to keep
    """
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        logging.basicConfig(level=logging.INFO, format=log_format, force=True)
        logger.error(f"Invalid log level: {log_level}. Using INFO instead.")
        return

    # Clear existing handlers and reconfigure
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        try:
            log_dir = os.path.dirname(log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = RotatingFileHandler(
                filename=log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Failed to set up file logging at {log_file_path}: {e}. Continuing with console logging only.")

    root_logger.setLevel(numeric_level)
    logger.debug(f"Logging configured: level={str(log_level).upper()}, file={'on' if log_to_file else 'off'}")


def configure_logging_from_settings(settings) -> None:
    """Apply the logging fields of a RendererSettings instance."""
    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_to_file=settings.log_to_file,
        log_file_path=settings.log_file_path,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count
    )
