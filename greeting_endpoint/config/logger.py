"""
Logging configuration.

A single console handler sits on the root logger; every other logger propagates to it. The handler either writes
human readable lines or logstash compatible JSON, and tags each record with the id of the HTTP request being served.
"""

import logging.config
import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_settings import SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

from greeting_endpoint.config import http_audit

_logger: dict = {
    "version": 1,
    # loggers created at import time (uvicorn, fastapi) must survive a late call to apply_logging_settings
    "disable_existing_loggers": False,
    "filters": {
        "request_context": {
            "()": "greeting_endpoint.config.logger.RequestContextFilter"
        },
    },
    "formatters": {
        "standard": {
            "format": "{asctime} {request_id}{levelname:>8s} {process} --- [{threadName:>15s}] {name_with_func:40}: "
            "{message}",
            "style": "{",
        },
        "json": {
            "()": "greeting_endpoint.config.logger.LogstashJsonFormatter"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "standard",
            "filters": ["request_context"],
        },
    },
    "loggers": {},
    "root": {
        "handlers": ["console"],
        "level": "DEBUG",
    },
}


class LogLevel(str, Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


class FormatterType(str, Enum):
    STANDARD = "standard"
    JSON = "json"


class LoggingSettings(BaseModel):
    """
    Logging section of the service settings.

    ``child_log_levels`` maps logger names (e.g. ``uvicorn.access``) to their own level, overriding the root level.
    """

    model_config = SettingsConfigDict(extra="forbid")

    formatter: FormatterType = FormatterType.STANDARD
    root_log_level: LogLevel = LogLevel.DEBUG
    child_log_levels: dict[str, LogLevel] = {}

    @field_validator("child_log_levels")
    def logger_name_does_not_contain_reserved_key(  # pylint: disable=no-self-argument
        cls, child_log_levels: dict[str, LogLevel]
    ) -> dict[str, LogLevel]:
        for key in child_log_levels.keys():
            if key in ["formatter", "root", "root_log_level", ""]:
                raise ValueError("Using empty or reserved name for child logger.")
        return child_log_levels


def apply_logging_settings(
    logging_settings: LoggingSettings = LoggingSettings(),
) -> None:
    """
    Configures the python logger for the current application.

    Application code should log through a per module logger (``logging.getLogger(__name__)``), never to the root logger
    directly, and should not add handlers of its own.

    :param logging_settings: the settings according to which logging should be configured
    """
    _logger["handlers"]["console"]["formatter"] = logging_settings.formatter.value
    _logger["root"]["level"] = logging_settings.root_log_level.value
    for logger_name, log_level in logging_settings.child_log_levels.items():
        _logger["loggers"].setdefault(logger_name, {})["level"] = log_level.value

    logging.config.dictConfig(_logger)
    # Use a period instead of the comma before the milliseconds part
    logging.Formatter.default_msec_format = "%s.%03d"
    # Use UTC timestamps
    logging.Formatter.converter = time.gmtime
    logging.captureWarnings(True)


class RequestContextFilter(logging.Filter):
    """Adds ``request_id`` and ``name_with_func`` to every record so that the standard format can refer to them."""

    def filter(self, record: logging.LogRecord) -> bool:
        rid = http_audit.get_request_id()
        record.request_id = f"[{rid}] " if rid else ""
        record.name_with_func = f"{record.name}.{record.funcName}"
        return True


class LogstashJsonFormatter(JsonFormatter):
    """Format JSON log entries in the same way as logstash-logback-encoder.
    https://github.com/logfellow/logstash-logback-encoder

    The JSON records have the following fields:
    - message: log message,
    - @timestamp: timestamp in ISO format, with milliseconds and time zone
    - level: 'DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'
    - level_value: 10000, 20000, 30000, 40000, 50000, useful for filtering
    - logger_name: logger
    - func_name: function the record was emitted from
    - request_id: only present while an HTTP request is being served
    """

    _logged_fields = (
        ("threadName", "thread_name"),
        ("levelname", "level"),
        ("name", "logger_name"),
        ("funcName", "func_name"),
    )
    _log_levels = ["DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        converter = self.converter(record.created)
        log_record["@timestamp"] = (
            time.strftime("%Y-%m-%dT%H:%M:%S.%%03d%z", converter) % record.msecs
        )
        for src_field, field in self._logged_fields:
            value = record.__dict__.get(src_field)
            if value is None:
                continue
            if field == "level":
                if value == "WARNING":
                    value = "WARN"
                if value in self._log_levels:
                    log_record["level_value"] = (self._log_levels.index(value) + 1) * 10_000
            log_record[field] = value

        # attributes set by RequestContextFilter are meant for the standard format only
        log_record.pop("name_with_func", None)
        log_record.pop("request_id", None)
        rid = http_audit.get_request_id()
        if rid:
            log_record["request_id"] = rid
