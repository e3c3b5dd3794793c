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

"""Environment driven service settings via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Service settings read from STUDENT_INSIGHTS_* environment variables.

    Attributes:
        log_level: Root logging level name.
        log_format: "text" or "json".
        api_prefix: URL prefix for versioned API routes.
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDENT_INSIGHTS_", case_sensitive=False, frozen=True
    )

    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    api_prefix: str = "/api/v1"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Accept format names in any case."""
        return str(v).lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
