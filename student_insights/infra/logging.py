# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for the service.

Modules log through ``logging.getLogger(__name__)``; this module only wires
the root logger once at startup.
"""

import json
import logging
import logging.config

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LogRecord attributes that are not user supplied ``extra`` fields.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO", log_format: str = "text") -> None:
    """Configure the root logger.

    Args:
        level: Logging level name such as "INFO" or "DEBUG".
        log_format: "text" for human readable lines, "json" for structured output.

    Raises:
        ValueError: If log_format is not recognised.
    """
    if log_format not in ("text", "json"):
        raise ValueError(f"Unsupported log format: {log_format}")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": TEXT_FORMAT},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": log_format,
                },
            },
            "root": {"level": level.upper(), "handlers": ["default"]},
        }
    )
