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

"""Student Insights API - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from student_insights.api import health
from student_insights.api.error_handlers import register_error_handlers
from student_insights.api.students import routes as student_routes
from student_insights.config import get_settings
from student_insights.infra.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Student Insights API started")
    yield
    logger.info("Student Insights API shutting down")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    application = FastAPI(title="Student Insights API", version="1.0.0", lifespan=lifespan)
    application.include_router(health.router)
    application.include_router(student_routes.router, prefix=settings.api_prefix)
    register_error_handlers(application)
    return application


app = create_app()
