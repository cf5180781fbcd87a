"""
Logging configuration utility - configures logging from config.json
"""
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        log_entry = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging_from_config() -> None:
    """
    Configure logging from config.json settings.
    Supports log rotation, JSON format, and configurable log levels.
    """
    try:
        log_config = Config.get_logging_config()

        log_file = log_config.get('log_file', os.path.join('logs', 'geography.log'))

        logs_dir = os.path.dirname(log_file)
        if logs_dir and not os.path.exists(logs_dir):
            os.makedirs(logs_dir, exist_ok=True)

        log_level_str = log_config.get('level', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)

        # Remove existing handlers to avoid duplicates
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        max_bytes = log_config.get('max_bytes', 10 * 1024 * 1024)
        backup_count = log_config.get('backup_count', 5)
        enable_json_logging = log_config.get('json_format', False)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        if enable_json_logging:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        root_logger.setLevel(log_level)
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        logger = logging.getLogger(__name__)
        logger.info(f"Logging configured: file={log_file}, level={log_level_str}, json={enable_json_logging}, max_bytes={max_bytes}, backups={backup_count}")

    except Exception as e:
        # Fallback to basic logging if config fails
        logging.basicConfig(
            level=logging.INFO,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)]
        )
        logging.getLogger(__name__).warning(f"Failed to configure logging from config: {e}, using defaults")
