"""
Logging Configuration
Provides structured logging with security features
"""
import logging
import logging.handlers
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Union
from datetime import datetime

# LogRecord attributes that are not user supplied "extra" fields
RESERVED_RECORD_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'message', 'taskName',
])


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact sensitive data from logs
    Representation data often carries user records, so password, token
    and key fields are redacted before a record is emitted
    """

    SENSITIVE_FIELDS = [
        'password', 'passwd', 'pwd', 'password_hash', 'password_confirmation',
        'api_key', 'api_secret', 'token', 'access_token', 'refresh_token',
        'secret', 'secret_key',
    ]

    def __init__(self, additional_fields: Optional[List[str]] = None):
        """
        Args:
            additional_fields: Extra field names to redact
        """
        super().__init__()
        fields = self.SENSITIVE_FIELDS + list(additional_fields or [])

        # Matches "field": "value" (JSON) and 'field': 'value' (Python repr)
        self.compiled_patterns = [
            re.compile(rf'''(["']{re.escape(field)}["']\s*:\s*)(["'])[^"']*\2''', re.IGNORECASE)
            for field in fields
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact sensitive data from the record

        Returns:
            True (always pass the record, but with redacted content)
        """
        if isinstance(record.msg, str):
            record.msg = self._redact_sensitive_data(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact_sensitive_data(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._redact_sensitive_data(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _redact_sensitive_data(self, text: str) -> str:
        redacted = text
        for pattern in self.compiled_patterns:
            redacted = pattern.sub(r'\1\2[REDACTED]\2', redacted)
        return redacted


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Additional record attributes to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed with logger.info(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in RESERVED_RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        level: Optional[int] = None,
        log_file: Optional[Union[str, Path]] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        filter_sensitive: bool = True,
        additional_sensitive_fields: Optional[List[str]] = None,
        console: bool = True
    ) -> logging.Logger:
        """
        Setup a logger with optional rotation and sensitive data filtering

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            level: Log level (defaults to the level for APP_ENV)
            log_file: Write to this file with rotation when given
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_fields: Additional field names to redact
            console: Also log to stderr

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('application', log_file='storage/logs/app.log')
        """
        from representations.support import EnvHelper

        if level is None:
            level = LoggerConfig.get_level_by_environment(EnvHelper.get('APP_ENV', 'local'))

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        handlers: List[logging.Handler] = []

        if log_file is not None:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            ))

        if console:
            handlers.append(logging.StreamHandler())

        sensitive_filter = SensitiveDataFilter(additional_sensitive_fields) if filter_sensitive else None

        for handler in handlers:
            handler.setFormatter(formatter)
            if sensitive_filter is not None:
                handler.addFilter(sensitive_filter)
            logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels: Dict[str, int] = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
