# -*- coding: utf-8 -*-
"""
@File    : logger.py
@Desc    : 日志配置 (console + 可选的轮转文件)
"""
import sys
import json
import logging
import logging.config
from app.core.config import settings


class JSONFormatter(logging.Formatter):
    """
    JSON 格式化器，适用于生产环境日志收集 (ELK/EFK/Datadog)
    """

    # LogRecord 原有的属性，extra 之外的字段不重复输出
    skip_keys = {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread", "threadName",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "func_name": record.funcName,
            "line_no": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"resource_id": 123})
        for key, value in record.__dict__.items():
            if key not in self.skip_keys and key not in log_record:
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def build_logging_config() -> dict:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter_name = "json" if settings.LOG_JSON_FORMAT else "standard"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": formatter_name,
            "stream": sys.stdout,
        },
    }
    app_handlers = ["console"]
    error_handlers = ["console"]

    if settings.LOG_TO_FILE:
        log_path = settings.BASE_DIR / settings.LOG_DIR
        log_path.mkdir(parents=True, exist_ok=True)

        handlers["file_info"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": formatter_name,
            "filename": str(log_path / "app.log"),
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        # 单独记录错误
        handlers["file_error"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": formatter_name,
            "filename": str(log_path / "error.log"),
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }
        app_handlers = ["console", "file_info", "file_error"]
        error_handlers = ["console", "file_error"]

    return {
        "version": 1,
        "disable_existing_loggers": False,  # 防止 uvicorn 日志被禁用

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JSONFormatter,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },

        "handlers": handlers,

        "loggers": {
            "app": {
                "handlers": app_handlers,
                "level": log_level,
                "propagate": False,
            },
            "uvicorn": {
                "handlers": app_handlers[:2],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": app_handlers[:2],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": error_handlers,
                "level": "INFO",
                "propagate": False,
            },
        }
    }


def setup_logging():
    """
    初始化日志配置
    """
    logging.config.dictConfig(build_logging_config())
